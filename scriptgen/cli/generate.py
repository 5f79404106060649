import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from scriptgen.errors import ScriptGenerationError
from scriptgen.parser import load_event_log
from scriptgen.utils.generator import CodeGenerator
from scriptgen.utils.options import GeneratorOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scriptgen",
        description="Generate a Puppeteer script from a recorded event log",
    )
    parser.add_argument("event_log", help="JSON file with the recorded events")
    parser.add_argument("--output", "-o", help="Write the script to this file instead of stdout")
    parser.add_argument(
        "--no-wrap-async", dest="wrapAsync", action="store_false", default=None,
        help="Emit top-level statements instead of an async wrapper",
    )
    parser.add_argument(
        "--headful", dest="headless", action="store_false", default=None,
        help="Launch a visible browser in the generated script",
    )
    parser.add_argument(
        "--no-wait-for-navigation", dest="waitForNavigation", action="store_false", default=None,
        help="Do not await navigations",
    )
    parser.add_argument(
        "--no-wait-for-selector", dest="waitForSelectorOnClick", action="store_false", default=None,
        help="Do not wait for the selector before each click",
    )
    parser.add_argument(
        "--no-blank-lines", dest="blankLinesBetweenBlocks", action="store_false", default=None,
        help="Do not separate generated blocks with blank lines",
    )
    parser.add_argument(
        "--custom-line-after-click", dest="customLineAfterClick",
        help="Line of code appended after every click",
    )
    parser.add_argument(
        "--data-attribute", dest="dataAttribute",
        help="Space separated attribute names preferred for selectors",
    )
    parser.add_argument(
        "--use-regex-for-data-attribute", dest="useRegexForDataAttribute",
        action="store_true", default=None,
        help="Treat each data attribute as a regular expression",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def resolve_options(args: argparse.Namespace, log_options: Dict[str, Any]) -> GeneratorOptions:
    """Applies options embedded in the event log first, command line flags on top."""
    flags = {
        key: value
        for key, value in vars(args).items()
        if key not in ("event_log", "output", "verbose") and value is not None
    }
    options = GeneratorOptions.from_dict({**log_options, **flags})
    # fail early on a bad pattern
    options.data_attribute_patterns()
    return options


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        events, log_options = load_event_log(args.event_log)
        options = resolve_options(args, log_options)
    except ScriptGenerationError as e:
        logger.error(str(e))
        sys.exit(1)

    script = CodeGenerator(options).generate(events)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(script)
        except OSError as e:
            logger.error(f"Could not write script to {args.output}: {e}")
            sys.exit(1)
        logger.info(f"Puppeteer script saved to: {args.output}")
    else:
        sys.stdout.write(script + "\n")


if __name__ == "__main__":
    main()
