"""Public interface for the cronexp package."""

from __future__ import annotations

from .bounds import FIELD_BOUNDS, Bounds
from .common import CronField, OutputFormatEnum
from .errors import (
    CronexpConfigError,
    CronexpError,
    CronexpParseError,
    EmptyFieldError,
    FieldParsingError,
    InvalidNumberError,
    InvalidRangeError,
    InvalidStepError,
    StructuralError,
    UnrecognizedItemError,
)
from .expression import CronExpression, CronParser, parse_expression
from .formatting import format_table, format_text, render
from .settings import CronexpSettings

__all__ = [
    "FIELD_BOUNDS",
    "Bounds",
    "CronExpression",
    "CronField",
    "CronParser",
    "CronexpConfigError",
    "CronexpError",
    "CronexpParseError",
    "CronexpSettings",
    "EmptyFieldError",
    "FieldParsingError",
    "InvalidNumberError",
    "InvalidRangeError",
    "InvalidStepError",
    "OutputFormatEnum",
    "StructuralError",
    "UnrecognizedItemError",
    "format_table",
    "format_text",
    "parse_expression",
    "render",
]
