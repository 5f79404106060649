"""Selector preference helpers behind the ``dataAttribute`` options.

The capture agent prefers a custom data attribute over a generated CSS path
when the clicked element carries one of the configured attributes.
"""
import logging
import re
from typing import Iterable, List, Optional, Pattern, Union

from scriptgen.errors import InvalidOptionError

logger = logging.getLogger(__name__)

AMBIGUOUS_SELECTOR_COMMENT = (
    "/!\\ The selector returns more than one element, thus the test will be wrong."
)


def parse_data_attributes(
    data_attribute: str, use_regex: bool = False
) -> List[Union[str, Pattern]]:
    """Splits the space separated option into patterns, keeping their order."""
    tokens = [token for token in (data_attribute or "").split(" ") if token != ""]
    if not use_regex:
        return tokens

    patterns: List[Union[str, Pattern]] = []
    for token in tokens:
        try:
            patterns.append(re.compile(token))
        except re.error as e:
            raise InvalidOptionError(
                f"Invalid regular expression in dataAttribute: {token!r} ({e})"
            ) from e
    return patterns


def _matches(pattern: Union[str, Pattern], attribute_name: str) -> bool:
    if isinstance(pattern, str):
        return pattern == attribute_name
    return pattern.search(attribute_name) is not None


def find_custom_attribute(
    attribute_names: Iterable[str], patterns: List[Union[str, Pattern]]
) -> Optional[str]:
    # Pattern order wins over attribute order
    names = list(attribute_names)
    for pattern in patterns:
        for name in names:
            if _matches(pattern, name):
                logger.debug(f"Attribute {name} matched data attribute pattern {pattern}")
                return name
    return None


def format_data_selector(attribute: str, value: str) -> str:
    return f'[{attribute}="{value}"]'.replace(".", "\\.")


def ambiguity_comment(match_count: int) -> str:
    return AMBIGUOUS_SELECTOR_COMMENT if match_count > 1 else ""
