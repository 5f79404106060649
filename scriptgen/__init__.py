from scriptgen.errors import EventLogError, InvalidOptionError, ScriptGenerationError
from scriptgen.utils.generator import CodeGenerator, compile_events
from scriptgen.utils.options import DEFAULT_OPTIONS, GeneratorOptions
from scriptgen.utils.selector_util import (
    ambiguity_comment,
    find_custom_attribute,
    format_data_selector,
    parse_data_attributes,
)

__version__ = "0.1.0"

__all__ = [
    "CodeGenerator",
    "compile_events",
    "DEFAULT_OPTIONS",
    "GeneratorOptions",
    "EventLogError",
    "InvalidOptionError",
    "ScriptGenerationError",
    "ambiguity_comment",
    "find_custom_attribute",
    "format_data_selector",
    "parse_data_attributes",
]
