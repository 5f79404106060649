import logging
from typing import Any, Dict, List, Optional, Tuple

from scriptgen.api.models.script import EventRecord, ScriptOptions
from scriptgen.utils.generator import CodeGenerator
from scriptgen.utils.options import GeneratorOptions

logger = logging.getLogger(__name__)


def build_options(options: Optional[ScriptOptions]) -> GeneratorOptions:
    supplied = options.model_dump(exclude_none=True) if options else {}
    generator_options = GeneratorOptions.from_dict(supplied)
    # raises InvalidOptionError on a bad pattern
    generator_options.data_attribute_patterns()
    return generator_options


def generate_script(
    events: List[EventRecord], options: Optional[ScriptOptions] = None
) -> Tuple[str, Dict[str, Any]]:
    generator_options = build_options(options)
    # unset fields stay absent so the generator sees the record as sent
    records = [event.model_dump(exclude_unset=True) for event in events]

    logger.info(f"Generating script for {len(records)} events")
    script = CodeGenerator(generator_options).generate(records)
    logger.debug(f"Generated script is {len(script)} characters long")
    return script, generator_options.model_dump()
