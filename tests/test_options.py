import pytest

from scriptgen import DEFAULT_OPTIONS, GeneratorOptions, InvalidOptionError


def test_from_dict_merges_over_defaults():
    options = GeneratorOptions.from_dict({"headless": False, "customLineAfterClick": "// done"})

    dumped = options.model_dump()
    assert dumped["headless"] is False
    assert dumped["customLineAfterClick"] == "// done"
    assert dumped["wrapAsync"] is True
    assert set(dumped) == set(DEFAULT_OPTIONS)


def test_from_dict_accepts_attribute_names():
    options = GeneratorOptions.from_dict({"wait_for_navigation": False})

    assert options.wait_for_navigation is False


def test_none_and_unknown_keys_keep_defaults():
    options = GeneratorOptions.from_dict({"headless": None, "theme": "dark"})

    assert options == GeneratorOptions()


def test_coerce_passes_instances_through():
    options = GeneratorOptions(headless=False)

    assert GeneratorOptions.coerce(options) is options
    assert GeneratorOptions.coerce(None) == GeneratorOptions()


def test_data_attribute_patterns():
    options = GeneratorOptions.from_dict({"dataAttribute": "data-test  data-cy"})

    assert options.data_attribute_patterns() == ["data-test", "data-cy"]


def test_invalid_regex_data_attribute():
    options = GeneratorOptions.from_dict(
        {"dataAttribute": "data-(", "useRegexForDataAttribute": True}
    )

    with pytest.raises(InvalidOptionError):
        options.data_attribute_patterns()
