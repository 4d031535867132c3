from __future__ import annotations

import enum
import re

from .errors import InvalidLayoutError

ROW_WIDTH = 9
MAX_ROWS = 6
MAX_SLOTS = ROW_WIDTH * MAX_ROWS

_SEPARATORS_RE = re.compile(r"[\r\n]")
_MARKUP_RE = re.compile(r"<[^<>]*>")


class Indicator(enum.Enum):
    # Slots of an indicator character are filled by the menu, not by a bound element.
    CONTENT = "content"


class GridShape(enum.Enum):
    ROWS_1 = 1
    ROWS_2 = 2
    ROWS_3 = 3
    ROWS_4 = 4
    ROWS_5 = 5
    ROWS_6 = 6

    @property
    def rows(self) -> int:
        return int(self.value)

    @property
    def slot_count(self) -> int:
        return self.rows * ROW_WIDTH

    @classmethod
    def for_rows(cls, rows: int) -> GridShape:
        for shape in cls:
            if shape.rows == int(rows):
                return shape
        raise InvalidLayoutError(f"row count must be 1..{MAX_ROWS}, got {rows}")

    @classmethod
    def for_layout(cls, layout: str) -> GridShape:
        return cls.for_rows(validate_layout(normalize_layout(layout)))


def normalize_layout(layout: str) -> str:
    # Rows are usually written one per line; spaces are layout characters.
    return _SEPARATORS_RE.sub("", layout)


def validate_layout(layout: str) -> int:
    """Check a normalized layout and return its row count."""

    length = len(layout)
    if length == 0 or length % ROW_WIDTH != 0:
        raise InvalidLayoutError(f"layout length {length} is not a positive multiple of {ROW_WIDTH}")
    rows = length // ROW_WIDTH
    if rows > MAX_ROWS:
        raise InvalidLayoutError(f"layout has {rows} rows, at most {MAX_ROWS} are allowed")
    return rows


def parse_layout(layout: str) -> dict[str, list[int]]:
    """
    Map each layout character to the slots it occupies.

    Characters keep first-seen order and slot lists are ascending, so redraws
    walk the grid in a stable order.
    """

    layout = normalize_layout(layout)
    validate_layout(layout)
    slot_map: dict[str, list[int]] = {}
    for slot, ch in enumerate(layout):
        slot_map.setdefault(ch, []).append(slot)
    return slot_map


def plain_title(markup: str) -> str:
    return _MARKUP_RE.sub("", markup)
