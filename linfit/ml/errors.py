class LinfitError(Exception):
    """Base class for every error raised by linfit."""


class SourceUnavailableError(LinfitError):
    """The dataset source could not be opened or read."""

    def __init__(self, source, reason: str = ""):
        self.source = source
        msg = f"Dataset source unavailable: {source}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class MalformedRecordError(LinfitError, ValueError):
    """A line could not be parsed into two numeric fields."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Malformed record on line {line_number}: {line!r}")


class EmptyInputError(LinfitError, ValueError):
    """An operation that needs at least one sample received none."""
