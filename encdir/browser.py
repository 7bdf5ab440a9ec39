"""Navigation over a scanned directory tree, one directory level at a time."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from .dirscan import DirTree, ItemInfo, PathLike, format_size
from .listview import ColumnType, ListModel, TextAlign

NAME_COLUMN = 0
PERCENT_COLUMN = 1
SIZE_TEXT_COLUMN = 2
SIZE_EXACT_COLUMN = 3

DIR_IMAGE = 0
FILE_IMAGE = 1

_COLUMNS = (
    ("Name", ColumnType.TEXT, 250, TextAlign.LEFT),
    ("100%", ColumnType.PROGRESS, 70, TextAlign.LEFT),
    ("Size1", ColumnType.TEXT, 100, TextAlign.RIGHT),
    ("Size2", ColumnType.TEXT, 100, TextAlign.RIGHT),
)


@dataclass(frozen=True)
class Row:
    """One displayed entry of the current directory."""

    item: ItemInfo
    fraction: float

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def is_dir(self) -> bool:
        return self.item.is_dir

    @property
    def size(self) -> int:
        return self.item.size

    @property
    def image(self) -> int:
        return DIR_IMAGE if self.item.is_dir else FILE_IMAGE

    @property
    def size_text(self) -> str:
        return format_size(self.item.size)

    @property
    def size_exact(self) -> str:
        return str(self.item.size)


@dataclass(frozen=True)
class _PathNode:
    index: int
    name: str


class DirBrowser:
    """Holds a scanned tree and the path walked down into it."""

    def __init__(self) -> None:
        self.tree: Optional[DirTree] = None
        self.base_path = ""
        self._path: list[_PathNode] = []

    def open(self, path: PathLike) -> None:
        """Scan ``path`` and show its top level."""
        self.clear()
        tree = DirTree.scan(path)
        self.tree = tree
        self.base_path = tree.root

    def clear(self) -> None:
        """Forget the scanned tree and the current position."""
        self.tree = None
        self._path.clear()
        self.base_path = ""

    @property
    def full_path(self) -> str:
        """The base path followed by every directory entered, each ending in a separator."""
        if self.tree is None:
            return ""
        return self.base_path + "".join(node.name + os.sep for node in self._path)

    @property
    def depth(self) -> int:
        return len(self._path)

    def _current_index(self) -> int:
        return self._path[-1].index if self._path else 0

    def rows(self) -> list[Row]:
        """Entries of the current directory, largest first."""
        if self.tree is None:
            return []
        node = self.tree.node(self._current_index())
        total = node.total_size
        return [
            Row(item, item.size / total if total else 0.0) for item in node.items
        ]

    def enter(self, row: Union[int, Row]) -> bool:
        """Step into a directory row; return False if the row is a file."""
        if isinstance(row, int):
            rows = self.rows()
            if not 0 <= row < len(rows):
                raise IndexError(row)
            row = rows[row]
        if not row.is_dir:
            return False
        if self.tree is None or row.item.index is None:
            raise ValueError("row does not belong to a scanned tree")
        self._path.append(_PathNode(row.item.index, row.name))
        return True

    def up(self) -> bool:
        """Step back to the parent directory; return False at the top."""
        if not self._path:
            return False
        self._path.pop()
        return True

    def fill(self, model: ListModel) -> None:
        """Put the current rows into a list model, adding the columns if it has none."""
        model.delete_all_items()
        if not model.columns:
            for heading, column_type, width, align in _COLUMNS:
                model.insert_column(heading, column_type, width, align)
        for row in self.rows():
            index = model.insert_item(len(model), row.image)
            model.set_item_text(index, NAME_COLUMN, row.name)
            model.set_item_progress(index, PERCENT_COLUMN, row.fraction)
            model.set_item_text(index, SIZE_TEXT_COLUMN, row.size_text)
            model.set_item_text(index, SIZE_EXACT_COLUMN, row.size_exact)
            model.set_data(index, row)