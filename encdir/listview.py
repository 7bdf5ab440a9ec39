"""Display model of a list with text and progress columns, rows, hit testing and scrolling."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import Any, Optional


class ColumnType(enum.Enum):
    """What a column holds."""

    TEXT = "text"
    PROGRESS = "progress"


class TextAlign(enum.Enum):
    """Horizontal alignment of a column's text."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class ScrollCode(enum.IntEnum):
    """Vertical scroll requests, numbered as scroll bar notifications are."""

    LINE_UP = 0
    LINE_DOWN = 1
    PAGE_UP = 2
    PAGE_DOWN = 3
    THUMB_POSITION = 4
    THUMB_TRACK = 5
    TOP = 6
    BOTTOM = 7
    END_SCROLL = 8


@dataclass
class Column:
    """A column's heading, kind, width in pixels and text alignment."""

    heading: str
    column_type: ColumnType = ColumnType.TEXT
    width: int = -1
    align: TextAlign = TextAlign.LEFT


@dataclass(frozen=True)
class ScrollInfo:
    """State of the vertical scroll bar."""

    minimum: int
    maximum: int
    page: int
    position: int


@dataclass
class _Row:
    values: list = field(default_factory=list)
    image: int = 0
    data: Any = None


# Value a fresh cell of each column type starts with.
_EMPTY_CELL = {ColumnType.TEXT: "", ColumnType.PROGRESS: 0.0}


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def format_progress(value: float) -> str:
    """Render a fraction in [0, 1] as a percentage with two decimals."""
    return "%.2f%%" % _f32(_f32(value) * _f32(100.0))


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


class ListModel:
    """Rows and columns of a list view together with its layout and scroll state.

    The rectangle set by :meth:`set_geometry` is the list's client area; the
    title strip is ``title_height`` pixels high and each row ``line_height``
    pixels, with one pixel of grid line between rows.
    """

    def __init__(self) -> None:
        self.columns: list[Column] = []
        self._rows: list[_Row] = []
        self.first_line = 0
        self.hot_line: Optional[int] = None
        self.left = self.top = self.right = self.bottom = 0
        self.title_height = 0
        self.line_height = 0

    def __len__(self) -> int:
        return len(self._rows)

    def set_geometry(self, left, top, right, bottom, title_height, line_height) -> None:
        """Set the client rectangle and the heights of the title strip and of a row."""
        if line_height < 0 or title_height < 0:
            raise ValueError("heights must not be negative")
        self.left, self.top, self.right, self.bottom = left, top, right, bottom
        self.title_height = title_height
        self.line_height = line_height

    # columns and rows

    def insert_column(
        self,
        heading: str,
        column_type: ColumnType = ColumnType.TEXT,
        width: int = -1,
        align: TextAlign = TextAlign.LEFT,
    ) -> int:
        """Append a column and return its index."""
        column_type = ColumnType(column_type)
        self.columns.append(Column(heading, column_type, width, TextAlign(align)))
        empty = _EMPTY_CELL[column_type]
        for row in self._rows:
            row.values.append(empty)
        return len(self.columns) - 1

    def insert_item(self, index: int, image: int = 0) -> int:
        """Insert an empty row before ``index`` (clamped to the end) and return where it went."""
        if not self.columns:
            raise ValueError("the list has no columns")
        if index < 0:
            raise IndexError(index)
        index = min(index, len(self._rows))
        values = [_EMPTY_CELL[col.column_type] for col in self.columns]
        self._rows.insert(index, _Row(values, image))
        return index

    def _row(self, item: int) -> _Row:
        if not 0 <= item < len(self._rows):
            raise IndexError(item)
        return self._rows[item]

    def _cell(self, item: int, column: int, column_type: ColumnType) -> _Row:
        row = self._row(item)
        if not 0 <= column < len(self.columns):
            raise IndexError(column)
        if self.columns[column].column_type is not column_type:
            raise ValueError(f"column {column} is not a {column_type.value} column")
        return row

    def set_item_text(self, item: int, column: int, text: str) -> None:
        self._cell(item, column, ColumnType.TEXT).values[column] = text

    def item_text(self, item: int, column: int) -> str:
        return self._cell(item, column, ColumnType.TEXT).values[column]

    def set_item_progress(self, item: int, column: int, value: float) -> None:
        self._cell(item, column, ColumnType.PROGRESS).values[column] = float(value)

    def item_progress(self, item: int, column: int) -> float:
        return self._cell(item, column, ColumnType.PROGRESS).values[column]

    def set_image(self, item: int, image: int) -> None:
        self._row(item).image = image

    def image(self, item: int) -> int:
        return self._row(item).image

    def set_data(self, item: int, data: Any) -> None:
        self._row(item).data = data

    def data(self, item: int) -> Any:
        return self._row(item).data

    def delete_item(self, item: int) -> None:
        """Remove one row, keeping the first visible and the highlighted row consistent."""
        if not self.columns:
            raise ValueError("the list has no columns")
        self._row(item)
        del self._rows[item]
        if self.first_line >= len(self._rows):
            self.first_line = max(len(self._rows) - 1, 0)
        if self.hot_line is not None:
            if self.hot_line == item:
                self.hot_line = None
            elif self.hot_line > item:
                self.hot_line -= 1

    def delete_all_items(self) -> None:
        self._rows.clear()
        self.first_line = 0
        self.hot_line = None

    # layout

    def _contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def hit_test(self, x: int, y: int) -> Optional[int]:
        """Return the row under the point, or None over the title or empty space."""
        if not self._contains(x, y):
            return None
        y -= self.top
        if y < self.title_height:
            return None
        y -= self.title_height + 1
        item = _trunc_div(y, self.line_height + 1) + self.first_line
        if not 0 <= item < len(self._rows):
            return None
        return item

    def item_rect(self, item: int) -> Optional[tuple[int, int, int, int]]:
        """Return (left, top, right, bottom) of a row, or None if it is scrolled out of view."""
        self._row(item)
        if item < self.first_line:
            return None
        top = self.top + 2 + self.title_height + (self.line_height + 1) * (item - self.first_line)
        if top > self.bottom:
            return None
        bottom = min(top + self.line_height, self.bottom)
        return (self.left + 1, top, self.right - 1, bottom)

    # scrolling

    def scroll_info(self) -> ScrollInfo:
        count = len(self._rows)
        height = self.bottom - self.top
        page = max((height - (2 + self.title_height)) // (self.line_height + 1), 0)
        return ScrollInfo(0, count - 1 if count > 0 else 0, page, self.first_line)

    def scroll(self, code: ScrollCode, pos: int = 0) -> bool:
        """Apply a scroll request; return True if the first visible row changed."""
        code = ScrollCode(code)
        info = self.scroll_info()
        old = self.first_line
        last_top = info.maximum + 1 - info.page
        first = self.first_line
        if code is ScrollCode.BOTTOM:
            first = last_top
        elif code is ScrollCode.TOP:
            first = 0
        elif code is ScrollCode.LINE_DOWN:
            first += 1
        elif code is ScrollCode.LINE_UP:
            first -= 1
        elif code is ScrollCode.PAGE_DOWN:
            first += info.page
        elif code is ScrollCode.PAGE_UP:
            first -= info.page
        elif code is ScrollCode.THUMB_TRACK:
            first = pos
        first = max(min(first, last_top), 0)
        self.first_line = first
        return first != old