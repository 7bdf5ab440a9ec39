import io

import pytest

from encdir.cli import main


def test_convert_gbk_to_utf8(tmp_path, capsys):
    path = tmp_path / "a.txt"
    text = "中文abc"
    path.write_bytes(text.encode("gbk"))
    assert main(["convert", "--from", "gbk", "--to", "utf-8", str(path)]) == 0
    assert path.read_bytes() == b"\xef\xbb\xbf" + text.encode("utf-8")
    assert "1" in capsys.readouterr().out


def test_convert_to_unicode_by_default(tmp_path):
    path = tmp_path / "a.txt"
    text = "中文"
    path.write_bytes(text.encode("gbk"))
    assert main(["convert", str(path)]) == 0
    assert path.read_bytes() == b"\xff\xfe" + text.encode("utf-16-le")


def test_unknown_code_page(tmp_path, capsys):
    path = tmp_path / "a.txt"
    path.write_bytes(b"abc")
    assert main(["convert", "--to", "nope", str(path)]) == 2
    assert path.read_bytes() == b"abc"
    assert "nope" in capsys.readouterr().err


def test_unmappable_refused_without_yes(tmp_path, monkeypatch):
    path = tmp_path / "a.txt"
    original = b"\xff\xfe" + "a\U0001F600".encode("utf-16-le")
    path.write_bytes(original)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["convert", "--to", "gbk", str(path)]) == 1
    assert path.read_bytes() == original


def test_unmappable_answered_yes(tmp_path, monkeypatch):
    path = tmp_path / "a.txt"
    path.write_bytes(b"\xff\xfe" + "a\U0001F600".encode("utf-16-le"))
    monkeypatch.setattr("sys.stdin", io.StringIO("y\n"))
    assert main(["convert", "--to", "gbk", str(path)]) == 0
    assert path.read_bytes().startswith(b"a")


def test_unmappable_with_yes_flag(tmp_path):
    path = tmp_path / "a.txt"
    path.write_bytes(b"\xff\xfe" + "a\U0001F600".encode("utf-16-le"))
    assert main(["convert", "--yes", "--to", "gbk", str(path)]) == 0
    assert not path.read_bytes().startswith(b"\xff\xfe")


def test_missing_file_fails(tmp_path):
    assert main(["convert", str(tmp_path / "missing.txt")]) == 1


def test_size_lists_entries(tmp_path, capsys):
    (tmp_path / "big.bin").write_bytes(b"x" * 300)
    (tmp_path / "small.bin").write_bytes(b"x" * 3)
    assert main(["size", str(tmp_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].startswith("big.bin")
    assert lines[2].startswith("small.bin")
    assert lines[1].endswith("\t300")


def test_size_into_subdirectory(tmp_path, capsys):
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "inner.txt").write_bytes(b"x" * 7)
    assert main(["size", str(tmp_path), "--into", "sub"]) == 0
    out = capsys.readouterr().out
    assert "inner.txt" in out


def test_size_into_missing(tmp_path):
    (tmp_path / "f").write_bytes(b"x")
    assert main(["size", str(tmp_path), "--into", "f"]) == 1


def test_size_not_a_directory(tmp_path):
    assert main(["size", str(tmp_path / "missing")]) == 1


def test_no_command_exits():
    with pytest.raises(SystemExit):
        main([])