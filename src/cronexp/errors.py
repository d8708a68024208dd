"""Module containing cronexp-related errors."""


class CronexpError(Exception):
    """Base class for all cronexp-related errors."""


class CronexpConfigError(CronexpError, ValueError):
    """Raised when a setting provided by keyword or environment variable is invalid."""


class CronexpParseError(CronexpError, ValueError):
    """Base class for every failure to parse a cron line or one of its fields."""


class StructuralError(CronexpParseError):
    """Raised when a cron line has fewer than five fields plus a command."""


class EmptyFieldError(CronexpParseError):
    """Raised when a field expression is an empty string."""


class InvalidNumberError(CronexpParseError):
    """Raised when a bare number is malformed or lies outside the field bounds."""


class InvalidRangeError(CronexpParseError):
    """Raised when a range is malformed, reversed, or has an endpoint out of bounds."""


class InvalidStepError(CronexpParseError):
    """Raised when a step is malformed, has an invalid base range, or strides too far."""


class UnrecognizedItemError(CronexpParseError):
    """Raised in strict mode when a list item is not a number, range or step."""


class FieldParsingError(CronexpParseError):
    """Raised by the expression parser when a single field fails to parse.

    The message has the form ``parsing error - <field> - <reason>`` so that the
    failing field can be identified from the text alone. The original error is
    kept as ``__cause__``.
    """

    def __init__(self, field: str, reason: str) -> None:
        """Store the failing field label and the underlying message."""
        super().__init__(f"parsing error - {field} - {reason}")
        self.field = field
        self.reason = reason
