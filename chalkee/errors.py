# errors.py

class ChalkeeError(Exception):
    """Base class for every error raised by chalkee."""


class InvalidColorFormat(ChalkeeError, ValueError):
    """Raised for malformed hex strings or out-of-range RGB channels."""


class UnknownStyle(ChalkeeError, AttributeError):
    """Raised when a style name is not in the registry."""

    def __init__(self, name: str):
        super().__init__(f"Unknown style '{name}'")
        self.name = name


class InvalidInvocation(ChalkeeError, TypeError):
    """Raised when a styler is called with an unsupported argument shape."""
