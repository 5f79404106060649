import re

import pytest

from scriptgen import InvalidOptionError
from scriptgen.utils.selector_util import (
    AMBIGUOUS_SELECTOR_COMMENT,
    ambiguity_comment,
    find_custom_attribute,
    format_data_selector,
    parse_data_attributes,
)


def test_parse_plain_tokens():
    assert parse_data_attributes(" data-test data-qa ") == ["data-test", "data-qa"]
    assert parse_data_attributes("") == []
    assert parse_data_attributes(None) == []


def test_parse_regex_tokens():
    patterns = parse_data_attributes("^data-test.* ^aria-", use_regex=True)

    assert all(isinstance(pattern, re.Pattern) for pattern in patterns)
    assert [pattern.pattern for pattern in patterns] == ["^data-test.*", "^aria-"]


def test_parse_invalid_regex():
    with pytest.raises(InvalidOptionError):
        parse_data_attributes("[unclosed", use_regex=True)


def test_pattern_order_wins():
    attributes = ["class", "data-qa", "data-test"]

    assert find_custom_attribute(attributes, ["data-test", "data-qa"]) == "data-test"


def test_regex_pattern_searches_names():
    patterns = parse_data_attributes("test-id", use_regex=True)

    assert find_custom_attribute(["id", "data-test-id"], patterns) == "data-test-id"


def test_no_matching_attribute():
    assert find_custom_attribute(["id", "class"], ["data-test"]) is None
    assert find_custom_attribute(["id"], []) is None


def test_format_data_selector_escapes_dots():
    assert format_data_selector("data-test", "form.submit") == '[data-test="form\\.submit"]'


def test_ambiguity_comment():
    assert ambiguity_comment(1) == ""
    assert ambiguity_comment(0) == ""
    assert ambiguity_comment(3) == AMBIGUOUS_SELECTOR_COMMENT


def test_helpers_exported_from_package():
    import scriptgen

    assert scriptgen.find_custom_attribute is find_custom_attribute
    assert scriptgen.format_data_selector is format_data_selector
    assert scriptgen.ambiguity_comment is ambiguity_comment
    assert scriptgen.parse_data_attributes is parse_data_attributes
