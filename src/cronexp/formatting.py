"""Human-readable renderings of a parsed cron expression."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from typing_extensions import assert_never

from cronexp.common import CronField, OutputFormatEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cronexp.expression import CronExpression

__all__ = ["format_table", "format_text", "format_values", "render"]

COMMAND_LABEL: Final[str] = "command"
TABLE_PADDING: Final[int] = 2


def format_values(values: Iterable[int]) -> str:
    """Join *values* with single spaces; an empty collection renders as ``""``."""
    return " ".join(str(value) for value in values)


def _rows(cron: CronExpression) -> list[tuple[str, str]]:
    return [
        (CronField.Minute.value, format_values(cron.minute)),
        (CronField.Hour.value, format_values(cron.hour)),
        (CronField.DayOfMonth.value, format_values(cron.day_of_month)),
        (CronField.Month.value, format_values(cron.month)),
        (CronField.DayOfWeek.value, format_values(cron.day_of_week)),
        (COMMAND_LABEL, cron.command),
    ]


def format_text(cron: CronExpression) -> str:
    """Render *cron* as ``Label: values`` lines, without a trailing newline.

    Labels are title-cased except for the ``of`` in ``Day of Month`` and ``Day of Week``.
    """
    lines = []
    for label, value in _rows(cron):
        title = " ".join(word if word == "of" else word.capitalize() for word in label.split())
        lines.append(f"{title}: {value}")
    return "\n".join(lines)


def format_table(cron: CronExpression) -> str:
    """Render *cron* as a two-column table, one newline-terminated row per field.

    The label column is as wide as the longest label plus two spaces.
    """
    rows = _rows(cron)
    width = max(len(label) for label, _ in rows) + TABLE_PADDING
    return "".join(f"{label:<{width}}{value}\n" for label, value in rows)


def render(cron: CronExpression, output_format: OutputFormatEnum | str = OutputFormatEnum.Table) -> str:
    """Render *cron* in the requested format.

    :raises ValueError: If *output_format* is not a known format name.
    """
    output_format = OutputFormatEnum(output_format)
    match output_format:
        case OutputFormatEnum.Table:
            return format_table(cron)
        case OutputFormatEnum.Text:
            return format_text(cron)
        case _:
            assert_never(output_format)
