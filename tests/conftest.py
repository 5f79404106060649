import pytest


@pytest.fixture(name="compact_options")
def compact_options_fixture():
    return {
        "blankLinesBetweenBlocks": False,
        "waitForSelectorOnClick": False,
    }
