"""Expansion of a single cron field into explicit integer values.

A field is either the wildcard ``*`` or a comma-separated list of items, where
each item is a bare number, a range (``a-b``) or a step (``*/n`` or ``a-b/n``).
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final, NamedTuple

from typing_extensions import assert_never

from cronexp.py_compatibility import StrEnum
from cronexp.errors import (
    EmptyFieldError,
    InvalidNumberError,
    InvalidRangeError,
    InvalidStepError,
    UnrecognizedItemError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cronexp.bounds import Bounds

__all__ = [
    "ItemKind",
    "SegmentItem",
    "classify_item",
    "explode_range",
    "explode_step",
    "normalize",
    "parse_segment",
]

logger = logging.getLogger(__name__)

WILDCARD: Final[str] = "*"
ITEM_SEPARATOR: Final[str] = ","

NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d+", re.ASCII)
RANGE_PATTERN: Final[re.Pattern[str]] = re.compile(r"(?P<start>\d+)-(?P<end>\d+)", re.ASCII)
STEP_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:(?P<start>\d+)-(?P<end>\d+)|\*)/(?P<step>\d+)", re.ASCII
)


class ItemKind(StrEnum):
    """Shapes a comma-separated item of a field can take."""

    Number = "number"
    Step = "step"
    Range = "range"
    Unrecognized = "unrecognized"


class SegmentItem(NamedTuple):
    """A single comma-separated item tagged with its shape."""

    kind: ItemKind
    text: str


def normalize(values: Iterable[int]) -> tuple[int, ...]:
    """Return the distinct *values* in ascending order."""
    return tuple(sorted(set(values)))


def classify_item(text: str) -> SegmentItem:
    """Tag *text* with the most specific shape it matches.

    Steps are checked before ranges because every ranged step contains a range.
    """
    if NUMBER_PATTERN.fullmatch(text):
        return SegmentItem(ItemKind.Number, text)
    if STEP_PATTERN.fullmatch(text):
        return SegmentItem(ItemKind.Step, text)
    if RANGE_PATTERN.fullmatch(text):
        return SegmentItem(ItemKind.Range, text)
    return SegmentItem(ItemKind.Unrecognized, text)


def explode_range(expr: str, bounds: Bounds) -> tuple[int, ...]:
    """Expand ``start-end`` into every integer from *start* to *end* inclusive.

    Only the endpoints are checked against *bounds*; the values between them
    are contiguous and therefore in bounds as well.

    :param expr: Range expression such as ``"10-20"``.
    :param bounds: Domain of the field the range belongs to.
    :returns: Ascending tuple of the values covered by the range.
    :raises InvalidRangeError: If *expr* is empty, malformed, reversed or out of bounds.
    """
    if expr == "":
        msg = "range - empty"
        raise InvalidRangeError(msg)

    parts = RANGE_PATTERN.fullmatch(expr)
    if parts is None:
        raise _invalid_range()

    start, end = int(parts["start"]), int(parts["end"])
    if end < start or start < 0 or start < bounds.minimum or end > bounds.maximum:
        raise _invalid_range()

    return tuple(range(start, end + 1))


def explode_step(expr: str, bounds: Bounds) -> tuple[int, ...]:
    """Expand ``*/n`` or ``start-end/n`` into every *n*-th value of its base sequence.

    The base sequence is the whole of *bounds* for the wildcard form and the
    expanded range otherwise. Selection starts at the first element of the base.

    :param expr: Step expression such as ``"*/15"`` or ``"10-20/5"``.
    :param bounds: Domain of the field the step belongs to.
    :returns: Ascending tuple of the selected values.
    :raises InvalidStepError: If *expr* is empty or malformed, its base range is
        invalid, or the step exceeds the largest value of the base sequence.
    """
    if expr == "":
        msg = "step - empty"
        raise InvalidStepError(msg)

    parts = STEP_PATTERN.fullmatch(expr)
    if parts is None:
        raise _invalid_step()

    if parts["start"] is None:
        base = bounds.values()
    else:
        try:
            base = explode_range(f"{parts['start']}-{parts['end']}", bounds)
        except InvalidRangeError as exc:
            msg = f"step - {exc}"
            raise InvalidStepError(msg) from exc

    step = int(parts["step"])
    if step == 0:
        raise _invalid_step()
    if step > base[-1]:
        msg = "step - step is too big"
        raise InvalidStepError(msg)

    return base[::step]


def parse_segment(expr: str, bounds: Bounds, *, strict: bool = False) -> tuple[int, ...]:
    """Expand a whole field expression into its normalized set of values.

    Empty items left by doubled or trailing commas are skipped. Items matching
    none of the known shapes are skipped too, unless *strict* is set.

    :param expr: Raw field expression, e.g. ``"1,10-15,*/20"``.
    :param bounds: Domain of the field.
    :param strict: Reject unrecognized items instead of skipping them.
    :returns: Ascending tuple of distinct values within *bounds*.
    :raises EmptyFieldError: If *expr* is empty.
    :raises InvalidNumberError: If a bare number is out of bounds.
    :raises UnrecognizedItemError: If an item has no known shape while *strict* is set.
    :raises InvalidRangeError: If a range item is invalid.
    :raises InvalidStepError: If a step item is invalid.
    """
    if expr == "":
        msg = "empty"
        raise EmptyFieldError(msg)

    if expr == WILDCARD:
        return bounds.values()

    result: list[int] = []
    for text in expr.split(ITEM_SEPARATOR):
        if not text:
            continue

        item = classify_item(text)
        match item.kind:
            case ItemKind.Number:
                if int(item.text) not in bounds:
                    raise _invalid_number()
                result.append(int(item.text))
            case ItemKind.Step:
                result.extend(explode_step(item.text, bounds))
            case ItemKind.Range:
                result.extend(explode_range(item.text, bounds))
            case ItemKind.Unrecognized:
                if strict:
                    msg = f"unrecognized item {item.text!r}"
                    raise UnrecognizedItemError(msg)
                logger.debug("Skipping unrecognized item %r in %r", item.text, expr)
            case _:
                assert_never(item.kind)

    return normalize(result)


def _invalid_number() -> InvalidNumberError:
    return InvalidNumberError("invalid")


def _invalid_range() -> InvalidRangeError:
    return InvalidRangeError("range - invalid")


def _invalid_step() -> InvalidStepError:
    return InvalidStepError("step - invalid")
