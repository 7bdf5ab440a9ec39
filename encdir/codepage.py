"""Whole-file text conversion between legacy code pages, UTF-8 and UTF-16."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]
ConfirmCallback = Callable[[str], bool]

CP_UTF8 = 65001
DEFAULT_MAX_SIZE = 8 * 1024 * 1024

UTF8_BOM = b"\xef\xbb\xbf"
UTF16_LE_BOM = b"\xff\xfe"
UTF16_BE_BOM = b"\xfe\xff"

_CODECS = {
    936: "gbk",
    950: "cp950",
    932: "cp932",
    CP_UTF8: "utf-8",
}


class TextEncoding(enum.Enum):
    """How the text of a loaded file was stored."""

    ANSI = "ansi"
    UTF8 = "utf-8"
    UNICODE = "utf-16-le"
    UNICODE_BIG = "utf-16-be"


@dataclass(frozen=True)
class InputCodePage:
    """A code page used to read files that carry no byte order mark."""

    name: str
    code_page: int
    aliases: tuple[str, ...] = ()

    @property
    def codec(self) -> str:
        return _CODECS[self.code_page]


@dataclass(frozen=True)
class OutputCodePage:
    """A target encoding; ``ansi`` is false only for UTF-16 little endian."""

    name: str
    ansi: bool
    code_page: int
    aliases: tuple[str, ...] = ()

    @property
    def codec(self) -> str:
        if not self.ansi:
            return "utf-16-le"
        return _CODECS[self.code_page]


INPUT_PAGES: tuple[InputCodePage, ...] = (
    InputCodePage("简体中文", 936, ("gbk", "cp936", "936")),
    InputCodePage("繁体中文", 950, ("big5", "cp950", "950")),
    InputCodePage("日文SJ", 932, ("sjis", "shift_jis", "cp932", "932")),
)

OUTPUT_PAGES: tuple[OutputCodePage, ...] = (
    OutputCodePage("UNICODE", False, 0, ("unicode", "utf-16", "utf-16-le")),
    OutputCodePage("UTF-8", True, CP_UTF8, ("utf-8", "utf8", "65001")),
    OutputCodePage("简体中文", True, 936, ("gbk", "cp936", "936")),
    OutputCodePage("日文SJ", True, 932, ("sjis", "shift_jis", "cp932", "932")),
)


class ConversionError(Exception):
    """A file could not be converted."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message if path is None else f"{path}: {message}")
        self.message = message
        self.path = path
        self.converted = 0


class UnsupportedConversionError(ConversionError):
    """The file's stored encoding cannot be converted to the target."""


class UnmappableCharactersError(ConversionError):
    """The text holds characters the target code page lacks, and going on was refused."""


def _lookup(pages, name: str):
    key = name.strip()
    for page in pages:
        if key == page.name or key.lower() in page.aliases:
            return page
    raise KeyError(name)


def find_input_page(name: str) -> InputCodePage:
    """Return the input code page with this name or alias."""
    return _lookup(INPUT_PAGES, name)


def find_output_page(name: str) -> OutputCodePage:
    """Return the output code page with this name or alias."""
    return _lookup(OUTPUT_PAGES, name)


def load_text(
    path: PathLike,
    input_page: InputCodePage,
    max_size: int = DEFAULT_MAX_SIZE,
) -> tuple[str, TextEncoding]:
    """Read a text file, detect its byte order mark and decode it."""
    name = os.fspath(path)
    try:
        with open(name, "rb") as handle:
            raw = handle.read(max_size + 1)
    except OSError as exc:
        raise ConversionError(f"cannot read file ({exc.strerror})", name) from exc
    if len(raw) > max_size:
        raise ConversionError(f"file is larger than {max_size} bytes", name)

    if raw.startswith(UTF8_BOM):
        return raw[len(UTF8_BOM):].decode("utf-8", errors="replace"), TextEncoding.UTF8
    if raw.startswith(UTF16_LE_BOM):
        body = raw[len(UTF16_LE_BOM):]
        return body.decode("utf-16-le", errors="replace"), TextEncoding.UNICODE
    if raw.startswith(UTF16_BE_BOM):
        body = raw[len(UTF16_BE_BOM):]
        return body.decode("utf-16-be", errors="replace"), TextEncoding.UNICODE_BIG
    return raw.decode(input_page.codec, errors="replace"), TextEncoding.ANSI


def _write(path: str, payload: bytes) -> None:
    try:
        Path(path).write_bytes(payload)
    except OSError as exc:
        raise ConversionError(f"cannot write file ({exc.strerror})", path) from exc


def convert_file(
    path: PathLike,
    input_page: InputCodePage,
    output_page: OutputCodePage,
    confirm: Optional[ConfirmCallback] = None,
) -> bool:
    """Rewrite one file in the output encoding.

    Returns True when the file was rewritten and False when it already was
    in the target encoding.  ``confirm`` is asked whether to go on when some
    characters cannot be represented; without it such files are refused.
    """
    name = os.fspath(path)
    text, stored = load_text(name, input_page)

    if output_page.ansi:
        if (output_page.code_page == CP_UTF8 and stored is TextEncoding.UTF8) or (
            input_page.code_page == output_page.code_page and stored is TextEncoding.ANSI
        ):
            return False
        if stored not in (TextEncoding.UNICODE, TextEncoding.ANSI):
            raise UnsupportedConversionError("unsupported conversion", name)

        if output_page.code_page != CP_UTF8:
            try:
                text.encode(output_page.codec)
            except UnicodeEncodeError:
                if confirm is None or not confirm(name):
                    raise UnmappableCharactersError(
                        "text holds characters that cannot be converted", name
                    ) from None
        payload = text.encode(output_page.codec, errors="replace")
        if output_page.code_page == CP_UTF8:
            payload = UTF8_BOM + payload
        _write(name, payload)
        return True

    if stored is TextEncoding.UNICODE:
        return False
    if stored not in (TextEncoding.UTF8, TextEncoding.ANSI):
        raise UnsupportedConversionError("unsupported conversion", name)
    _write(name, UTF16_LE_BOM + text.encode("utf-16-le", errors="surrogatepass"))
    return True


def convert_files(
    paths: Iterable[PathLike],
    input_page: InputCodePage,
    output_page: OutputCodePage,
    confirm: Optional[ConfirmCallback] = None,
) -> int:
    """Convert files in order, stopping at the first failure.

    Returns how many files were handled.  On failure the raised error's
    ``converted`` attribute holds the number handled before it.
    """
    count = 0
    for path in paths:
        try:
            convert_file(path, input_page, output_page, confirm)
        except ConversionError as exc:
            exc.converted = count
            raise
        count += 1
    return count