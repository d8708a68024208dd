"""Parser turning a full cron line into a :class:`CronExpression`.

A line holds five space-separated time fields followed by the command::

    ┌───────────── minute (0 - 59)
    │ ┌───────────── hour (0 - 23)
    │ │ ┌───────────── day of month (1 - 31)
    │ │ │ ┌───────────── month (1 - 12, or JAN - DEC)
    │ │ │ │ ┌───────────── day of week (0 - 6)
    │ │ │ │ │
    * * * * * <command>
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NamedTuple

from typing_extensions import Unpack

from cronexp.bounds import FIELD_BOUNDS, substitute_month_names
from cronexp.common import COMMAND_INDEX, CronField
from cronexp.errors import CronexpParseError, FieldParsingError, StructuralError
from cronexp.formatting import format_text
from cronexp.logging import WithLogger
from cronexp.segment import parse_segment
from cronexp.settings import CronexpSettings

if TYPE_CHECKING:
    from cronexp.settings import CronexpSettingsKwargs

__all__ = ["CronExpression", "CronParser", "parse_expression"]

TOKEN_SEPARATOR: Final[str] = " "


class CronExpression(NamedTuple):
    """Parsed cron line.

    Each time field holds the ascending, duplicate-free values it denotes.
    ``original`` keeps the input line verbatim for display.
    """

    original: str
    minute: tuple[int, ...]
    hour: tuple[int, ...]
    day_of_month: tuple[int, ...]
    month: tuple[int, ...]
    day_of_week: tuple[int, ...]
    command: str

    @property
    def dom(self) -> tuple[int, ...]:
        """Alias for ``day_of_month`` property."""
        return self.day_of_month

    @property
    def dow(self) -> tuple[int, ...]:
        """Alias for ``day_of_week`` property."""
        return self.day_of_week

    def __str__(self) -> str:
        """Return the labelled multi-line rendering of the expression."""
        return format_text(self)


class CronParser(WithLogger):
    """Parse cron lines according to the given settings."""

    def __init__(self, settings: CronexpSettings | None = None) -> None:
        """Initialize the parser, loading default settings when none are given."""
        self._settings = settings if settings is not None else CronexpSettings.load()

    @property
    def settings(self) -> CronexpSettings:
        """Return the settings the parser was built with."""
        return self._settings

    def parse(self, line: str) -> CronExpression:
        """Parse a full cron line.

        Fields are parsed in order and the first failure is raised. Month names
        (``JAN`` to ``DEC``) are replaced by their numbers before the month
        field is parsed.

        :param line: Five time fields and a command, separated by single spaces.
        :returns: The fully populated :class:`CronExpression`.
        :raises StructuralError: If the line has fewer than six tokens or a blank command.
        :raises FieldParsingError: If any of the time fields is invalid.
        """
        tokens = line.split(TOKEN_SEPARATOR)
        command = TOKEN_SEPARATOR.join(tokens[COMMAND_INDEX:])
        if len(tokens) <= COMMAND_INDEX or not command.strip():
            msg = "not enough parts in the cron expression"
            raise StructuralError(msg)

        minute, hour, day_of_month, month, day_of_week = tokens[:COMMAND_INDEX]
        return CronExpression(
            original=line,
            minute=self._parse_field(CronField.Minute, minute),
            hour=self._parse_field(CronField.Hour, hour),
            day_of_month=self._parse_field(CronField.DayOfMonth, day_of_month),
            month=self._parse_field(CronField.Month, substitute_month_names(month)),
            day_of_week=self._parse_field(CronField.DayOfWeek, day_of_week),
            command=command,
        )

    def _parse_field(self, field: CronField, expr: str) -> tuple[int, ...]:
        """Parse one field against its bounds, labelling any failure with the field."""
        self._logger.debug("Parsing %s field %r", field, expr)
        try:
            return parse_segment(expr, FIELD_BOUNDS[field], strict=self._settings.strict_items)
        except CronexpParseError as exc:
            raise FieldParsingError(field, str(exc)) from exc


def parse_expression(line: str, **settings: Unpack[CronexpSettingsKwargs]) -> CronExpression:
    """Parse *line* with a parser built from *settings* overrides.

    :param line: Five time fields and a command, separated by single spaces.
    :param settings: Keyword overrides passed to :meth:`CronexpSettings.load`.
    :returns: The fully populated :class:`CronExpression`.
    :raises CronexpParseError: If the line cannot be parsed.
    """
    return CronParser(CronexpSettings.load(**settings)).parse(line)
