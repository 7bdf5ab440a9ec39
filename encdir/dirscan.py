"""Recursive directory size scanning."""

from __future__ import annotations

import os
import stat
import struct
from dataclasses import dataclass, field
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

_REPARSE_POINT = getattr(stat, "FILE_ATTRIBUTE_REPARSE_POINT", 0x400)

_UNITS = (
    (1024 * 1024 * 1024, "GB"),
    (1024 * 1024, "MB"),
    (1024, "KB"),
)


@dataclass
class ItemInfo:
    """One entry of a directory; ``index`` points at the node of a subdirectory."""

    name: str
    is_dir: bool
    size: int
    index: Optional[int] = None


@dataclass
class DirNode:
    """The entries of one directory, largest first, and their combined size."""

    items: list[ItemInfo] = field(default_factory=list)
    total_size: int = 0


def _is_reparse_point(entry: os.DirEntry) -> bool:
    if entry.is_symlink():
        return True
    try:
        attributes = getattr(entry.stat(follow_symlinks=False), "st_file_attributes", 0)
    except OSError:
        return False
    return bool(attributes & _REPARSE_POINT)


@dataclass
class DirTree:
    """A scanned directory tree; node 0 is the root."""

    root: str
    nodes: list[DirNode] = field(default_factory=list)

    @classmethod
    def scan(cls, path: PathLike) -> "DirTree":
        """Scan ``path`` recursively, skipping links and reparse points."""
        root = os.fspath(path)
        if not root.endswith((os.sep, "/")):
            root += os.sep
        tree = cls(root, [DirNode()])
        tree._fill(root, 0)
        return tree

    def node(self, index: int) -> DirNode:
        return self.nodes[index]

    @property
    def total_size(self) -> int:
        return self.nodes[0].total_size

    def _fill(self, directory: str, index: int) -> None:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError:
            return

        items: list[ItemInfo] = []
        total = 0
        for entry in entries:
            if _is_reparse_point(entry):
                continue
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            if is_dir:
                sub = len(self.nodes)
                self.nodes.append(DirNode())
                self._fill(os.path.join(directory, entry.name), sub)
                item = ItemInfo(entry.name, True, self.nodes[sub].total_size, sub)
            else:
                try:
                    size = entry.stat(follow_symlinks=False).st_size
                except OSError:
                    size = 0
                item = ItemInfo(entry.name, False, size)
            total += item.size
            items.append(item)

        items.sort(key=lambda i: i.size, reverse=True)
        node = self.nodes[index]
        node.items = items
        node.total_size = total


def scan_directory(path: PathLike) -> DirTree:
    """Scan ``path`` and return its size tree."""
    return DirTree.scan(path)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def format_size(size: int) -> str:
    """Render a byte count as whole units with two truncated hundredths."""
    if size < 0:
        return ""
    for unit, suffix in _UNITS:
        if size >= unit:
            whole, rest = divmod(size, unit)
            if rest > 0:
                fraction = int(_f32(_f32(_f32(rest) / unit) * 100))
                return f"{whole}.{fraction} {suffix}"
            return f"{whole} {suffix}"
    return f"{size} B"