"""Command line entry point: text encoding conversion and directory sizes."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from .browser import DirBrowser
from .codepage import (
    INPUT_PAGES,
    OUTPUT_PAGES,
    ConversionError,
    convert_files,
    find_input_page,
    find_output_page,
)
from .listview import format_progress


def _ask(path: str) -> bool:
    try:
        answer = input(f"{path}: text holds characters that cannot be converted, go on? [y/N] ")
    except (EOFError, OSError):
        return False
    return answer.strip().lower() in ("y", "yes")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="encdir")
    commands = parser.add_subparsers(dest="command", required=True)

    convert = commands.add_parser("convert", help="rewrite text files in another encoding")
    convert.add_argument(
        "--from", dest="source", default=INPUT_PAGES[0].name,
        help="code page of files without a byte order mark",
    )
    convert.add_argument(
        "--to", dest="target", default=OUTPUT_PAGES[0].name, help="target encoding",
    )
    convert.add_argument(
        "--yes", action="store_true", help="convert even if characters are lost",
    )
    convert.add_argument("files", nargs="+")

    size = commands.add_parser("size", help="list a directory by size")
    size.add_argument("path")
    size.add_argument(
        "--into", action="append", default=[], metavar="NAME",
        help="step into a subdirectory (repeatable)",
    )
    return parser


def _convert(args: argparse.Namespace) -> int:
    try:
        source = find_input_page(args.source)
    except KeyError:
        print(f"unknown input code page: {args.source}", file=sys.stderr)
        return 2
    try:
        target = find_output_page(args.target)
    except KeyError:
        print(f"unknown output code page: {args.target}", file=sys.stderr)
        return 2

    confirm = (lambda _path: True) if args.yes else _ask
    try:
        count = convert_files(args.files, source, target, confirm)
    except ConversionError as exc:
        print(str(exc), file=sys.stderr)
        if exc.converted:
            print(f"done: {exc.converted}")
        return 1
    if count > 0:
        print(f"done: {count}")
    return 0


def _size(args: argparse.Namespace) -> int:
    if not os.path.isdir(args.path):
        print(f"not a directory: {args.path}", file=sys.stderr)
        return 1
    browser = DirBrowser()
    browser.open(args.path)
    for name in args.into:
        match = next((row for row in browser.rows() if row.name == name), None)
        if match is None or not browser.enter(match):
            print(f"no such subdirectory: {name}", file=sys.stderr)
            return 1
    print(browser.full_path)
    for row in browser.rows():
        label = row.name + (os.sep if row.is_dir else "")
        print(f"{label}\t{format_progress(row.fraction)}\t{row.size_text}\t{row.size_exact}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "convert":
        return _convert(args)
    return _size(args)


if __name__ == "__main__":
    sys.exit(main())