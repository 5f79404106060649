class ScriptGenerationError(Exception):
    """Base class for errors raised outside the event compiler itself."""

    pass


class EventLogError(ScriptGenerationError):
    """The recorded event log could not be read or has the wrong shape."""

    pass


class InvalidOptionError(ScriptGenerationError):
    """A generator option carries a value that cannot be used."""

    pass
