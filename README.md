# encdir

Two small tools for working with files on disk:

- **Code page conversion**: rewrite text files in place, from a legacy
  Chinese or Japanese code page (or from UTF-8 / UTF-16 with a byte order
  mark) into UTF-16 little endian, UTF-8 or another legacy code page.
- **Directory sizes**: scan a directory tree once, then look at it level by
  level, every entry sorted largest first, with its share of the directory
  as a percentage and its size in readable and exact form.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `encdir`, with two actions. Run

```
encdir --help
```

for the full option list.

### `encdir convert`

```
encdir convert [--from PAGE] [--to PAGE] [--yes] FILE [FILE ...]
```

Rewrites each file in the target encoding, in the order given, and stops at
the first file that fails. At the end it prints `done: N` with the number of
files handled.

- `--from` is the code page used to read files that have no byte order mark.
  Default: simplified Chinese (GBK). Accepted names:
  `gbk`, `cp936`, `936`; `big5`, `cp950`, `950`; `sjis`, `shift_jis`,
  `cp932`, `932`.
- `--to` is the target encoding. Default: UTF-16 little endian. Accepted
  names: `unicode`, `utf-16`, `utf-16-le`; `utf-8`, `utf8`, `65001`;
  `gbk`, `cp936`, `936`; `sjis`, `shift_jis`, `cp932`, `932`.
  (Names are matched case-insensitively.)
- When some characters have no equivalent in a legacy target code page, the
  command asks whether to go on; `--yes` answers yes for every file. Lost
  characters are written as `?`.

Exit status is 0 on success, 1 when a file could not be converted and 2 for
an unknown code page name.

### `encdir size`

```
encdir size PATH [--into NAME ...]
```

Scans `PATH` and prints the path being shown, then one tab-separated line per
entry: the name (directories end with a path separator), the percentage of
the directory's total, the readable size and the exact byte count. Each
`--into NAME` steps one level further down into the named subdirectory.

## Library use

### Converting text files (`encdir.codepage`)

Supported code pages are described by `InputCodePage` and `OutputCodePage`
and looked up with `find_input_page(name)` and `find_output_page(name)`,
which raise `KeyError` for unknown names.

`load_text(path, input_page, max_size=8 MiB)` reads a file, detects a UTF-8,
UTF-16 LE or UTF-16 BE byte order mark and returns the decoded text together
with a `TextEncoding` (`ANSI`, `UTF8`, `UNICODE`, `UNICODE_BIG`). Files
without a mark are decoded with the input code page; undecodable bytes are
replaced. Larger files and unreadable files raise `ConversionError`.

`convert_file(path, input_page, output_page, confirm=None)` returns `True`
when the file was rewritten and `False` when it was already in the target
encoding and left untouched. Rules:

- To UTF-16 LE: the file is written with an `FF FE` mark; files already in
  UTF-16 LE are left alone.
- To UTF-8: the file is written with an `EF BB BF` mark; files already in
  UTF-8 are left alone.
- To a legacy code page: only files without a mark or in UTF-16 LE are
  converted; files without a mark whose input page equals the target are
  left alone. If characters cannot be represented, `confirm(path)` decides;
  without a callback, or if it returns false, `UnmappableCharactersError`
  is raised.
- Any other combination (for example big-endian UTF-16 input, or UTF-8 into
  a legacy code page) raises `UnsupportedConversionError`.

`convert_files(paths, input_page, output_page, confirm=None)` converts files
in order and returns how many were handled; on failure the raised
`ConversionError` carries that count in its `converted` attribute.

### Measuring directories (`encdir.dirscan`)

```python
from encdir.dirscan import scan_directory, format_size

tree = scan_directory("/some/path")
for item in tree.node(0).items:
    print(item.name, format_size(item.size))
```

`DirTree.scan` builds the whole tree in one pass; node 0 is the root. Each
`DirNode` holds its `ItemInfo` entries (`name`, `is_dir`, `size`, and for
directories the `index` of their node) sorted largest first, and its
`total_size`. Symbolic links and other reparse points are skipped;
unreadable directories count as empty.

`format_size` shows whole GB, MB, KB or B followed by the truncated
hundredths of the unit, without zero padding: `format_size(1536)` is
`"1.50 KB"`, `format_size(2048)` is `"2 KB"`, `format_size(512)` is
`"512 B"`.

### Browsing (`encdir.browser`)

`DirBrowser` keeps a position inside a scanned tree: `open(path)` scans a
directory, `rows()` lists the current level as `Row` values (with
`fraction`, `size_text`, `size_exact` and `image`), `enter(row)` descends
into a directory row (by `Row` or index, returning `False` for files),
`up()` returns to the parent and `clear()` forgets everything. `full_path`
is the path of the current level. `fill(model)` writes the current level
into a `ListModel`, adding its four columns if the model has none.

### List model (`encdir.listview`)

`ListModel` holds the rows and columns of a list view: text and progress
columns (`ColumnType`, `TextAlign`), per-row image number and attached data,
a highlighted row, and layout set with `set_geometry`. It answers
`hit_test(x, y)`, `item_rect(item)` and `scroll_info()`, and applies
`scroll(code, pos)` requests given as `ScrollCode`. `format_progress` renders
a fraction as a percentage with two decimals.

## What it does not do

There is no graphical interface. `ListModel` keeps the state and geometry of
a list view but draws nothing; the `encdir size` command prints text instead.
There is no file picker: files and directories are given on the command line.