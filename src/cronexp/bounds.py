"""Valid integer domains of the cron fields and month-name aliasing.

Both tables are built once at import time and exposed as read-only mappings.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final, NamedTuple

from cronexp.common import CronField

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["FIELD_BOUNDS", "MONTH_NAME_TO_NUMBER", "Bounds", "substitute_month_names"]


class Bounds(NamedTuple):
    """Inclusive ``[minimum, maximum]`` domain of legal values for a field."""

    minimum: int
    maximum: int

    def values(self) -> tuple[int, ...]:
        """Return every value of the domain in ascending order."""
        return tuple(range(self.minimum, self.maximum + 1))

    def __contains__(self, value: object) -> bool:
        """Return whether *value* is an integer lying inside the domain."""
        return isinstance(value, int) and self.minimum <= value <= self.maximum


FIELD_BOUNDS: Final[Mapping[CronField, Bounds]] = MappingProxyType(
    {
        CronField.Minute: Bounds(0, 59),
        CronField.Hour: Bounds(0, 23),
        CronField.DayOfMonth: Bounds(1, 31),
        CronField.Month: Bounds(1, 12),
        CronField.DayOfWeek: Bounds(0, 6),
    }
)

MONTH_NAME_TO_NUMBER: Final[Mapping[str, str]] = MappingProxyType(
    {
        "JAN": "1",
        "FEB": "2",
        "MAR": "3",
        "APR": "4",
        "MAY": "5",
        "JUN": "6",
        "JUL": "7",
        "AUG": "8",
        "SEP": "9",
        "OCT": "10",
        "NOV": "11",
        "DEC": "12",
    }
)


def substitute_month_names(token: str) -> str:
    """Replace every uppercase month abbreviation in *token* with its number.

    Abbreviations are disjoint from each other and from digits, so the order
    of replacement does not matter.
    """
    for name, number in MONTH_NAME_TO_NUMBER.items():
        token = token.replace(name, number)
    return token
