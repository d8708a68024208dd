"""Some common constants and enums which may be used in any modules."""

from __future__ import annotations

from typing import Final

from cronexp.py_compatibility import StrEnum

__all__ = ["COMMAND_INDEX", "ENV_PREFIX", "CronField", "OutputFormatEnum"]

ENV_PREFIX: Final[str] = "CRONEXP"
COMMAND_INDEX: Final[int] = 5


class CronField(StrEnum):
    """Positional time fields of a cron line, valued by their human-readable label."""

    Minute = "minute"
    Hour = "hour"
    DayOfMonth = "day of month"
    Month = "month"
    DayOfWeek = "day of week"


class OutputFormatEnum(StrEnum):
    """Enum of known renderings of a parsed expression."""

    Table = "table"
    Text = "text"
