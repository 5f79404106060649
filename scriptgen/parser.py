import json
import logging
from typing import Any, Dict, List, Tuple

from scriptgen.errors import EventLogError

logger = logging.getLogger(__name__)


def process_event_log(data: Any) -> Tuple[List[Any], Dict[str, Any]]:
    """Splits a decoded event log into its events and embedded options.

    A log is either a bare list of event records or an object holding an
    ``events`` list and, optionally, an ``options`` object.
    """
    if isinstance(data, list):
        return data, {}

    if not isinstance(data, dict):
        raise EventLogError(
            f"Event log must be a list or an object, got {type(data).__name__}"
        )

    events = data.get("events")
    if not isinstance(events, list):
        raise EventLogError("Event log object has no 'events' list")

    options = data.get("options")
    if options is None:
        options = {}
    if not isinstance(options, dict):
        raise EventLogError("Event log 'options' must be an object")

    return events, options


def load_event_log(file_path: str) -> Tuple[List[Any], Dict[str, Any]]:
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise EventLogError(f"Could not read event log {file_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise EventLogError(f"Event log {file_path} is not valid JSON: {e}") from e

    events, options = process_event_log(data)
    logger.info(f"Loaded {len(events)} events from {file_path}")
    return events, options
