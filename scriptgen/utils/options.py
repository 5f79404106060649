import logging
from typing import Any, Dict, List, Mapping, Optional, Pattern, Union

from scriptgen.utils.selector_util import parse_data_attributes

logger = logging.getLogger(__name__)


DEFAULT_OPTIONS: Dict[str, Any] = {
    "wrapAsync": True,
    "headless": True,
    "waitForNavigation": True,
    "waitForSelectorOnClick": True,
    "blankLinesBetweenBlocks": True,
    "dataAttribute": "",
    "useRegexForDataAttribute": False,
    "customLineAfterClick": "",
}

# wire name -> attribute name
_FIELDS: Dict[str, str] = {
    "wrapAsync": "wrap_async",
    "headless": "headless",
    "waitForNavigation": "wait_for_navigation",
    "waitForSelectorOnClick": "wait_for_selector_on_click",
    "blankLinesBetweenBlocks": "blank_lines_between_blocks",
    "dataAttribute": "data_attribute",
    "useRegexForDataAttribute": "use_regex_for_data_attribute",
    "customLineAfterClick": "custom_line_after_click",
}


class GeneratorOptions:

    def __init__(
        self,
        wrap_async: bool = True,
        headless: bool = True,
        wait_for_navigation: bool = True,
        wait_for_selector_on_click: bool = True,
        blank_lines_between_blocks: bool = True,
        data_attribute: str = "",
        use_regex_for_data_attribute: bool = False,
        custom_line_after_click: str = "",
    ):
        self.wrap_async = wrap_async
        self.headless = headless
        self.wait_for_navigation = wait_for_navigation
        self.wait_for_selector_on_click = wait_for_selector_on_click
        self.blank_lines_between_blocks = blank_lines_between_blocks
        self.data_attribute = data_attribute
        self.use_regex_for_data_attribute = use_regex_for_data_attribute
        self.custom_line_after_click = custom_line_after_click

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]] = None) -> "GeneratorOptions":
        """Merges caller supplied options over ``DEFAULT_OPTIONS``.

        Keys may use either the camelCase wire names or the attribute names.
        Unknown keys are ignored and ``None`` values keep the default.
        """
        merged = dict(DEFAULT_OPTIONS)
        attribute_to_wire = {attr: wire for wire, attr in _FIELDS.items()}
        for key, value in (options or {}).items():
            wire_name = key if key in _FIELDS else attribute_to_wire.get(key)
            if wire_name is None:
                logger.debug(f"Ignoring unknown option: {key}")
                continue
            if value is None:
                continue
            merged[wire_name] = value
        return cls(**{_FIELDS[wire]: value for wire, value in merged.items()})

    @classmethod
    def coerce(
        cls, options: Union["GeneratorOptions", Mapping[str, Any], None]
    ) -> "GeneratorOptions":
        if isinstance(options, GeneratorOptions):
            return options
        return cls.from_dict(options)

    def data_attribute_patterns(self) -> List[Union[str, Pattern]]:
        return parse_data_attributes(self.data_attribute, self.use_regex_for_data_attribute)

    def model_dump(self) -> Dict[str, Any]:
        return {wire: getattr(self, attr) for wire, attr in _FIELDS.items()}

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeneratorOptions):
            return NotImplemented
        return self.model_dump() == other.model_dump()

    def __repr__(self) -> str:
        return f"GeneratorOptions({self.model_dump()!r})"
