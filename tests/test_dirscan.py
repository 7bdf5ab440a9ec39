import pytest

from encdir.dirscan import DirNode, DirTree, ItemInfo, format_size, scan_directory


@pytest.fixture
def sample(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"x" * 10)
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.bin").write_bytes(b"y" * 100)
    (sub / "c").write_bytes(b"z" * 5)
    deep = sub / "deep"
    deep.mkdir()
    (deep / "d").write_bytes(b"w" * 7)
    (tmp_path / "empty").mkdir()
    return tmp_path


def test_total_size(sample):
    tree = scan_directory(sample)
    assert tree.total_size == 10 + 100 + 5 + 7
    assert tree.node(0).total_size == tree.total_size


def test_root_items_sorted_descending(sample):
    tree = DirTree.scan(sample)
    root = tree.node(0)
    assert [item.name for item in root.items] == ["sub", "a.txt", "empty"]
    sizes = [item.size for item in root.items]
    assert sizes == sorted(sizes, reverse=True)


def test_directory_items_point_to_nodes(sample):
    tree = DirTree.scan(sample)
    for node in tree.nodes:
        assert node.total_size == sum(item.size for item in node.items)
        for item in node.items:
            if item.is_dir:
                assert 0 < item.index < len(tree.nodes)
                assert tree.node(item.index).total_size == item.size
            else:
                assert item.index is None


def test_subdirectory_contents(sample):
    tree = DirTree.scan(sample)
    sub = next(item for item in tree.node(0).items if item.name == "sub")
    node = tree.node(sub.index)
    assert [(i.name, i.size) for i in node.items] == [
        ("b.bin", 100),
        ("deep", 7),
        ("c", 5),
    ]
    assert sub.size == 112


def test_root_path_gets_separator(sample):
    tree = DirTree.scan(str(sample))
    assert tree.root.startswith(str(sample))
    assert len(tree.root) == len(str(sample)) + 1


def test_missing_directory_gives_empty_tree(tmp_path):
    tree = DirTree.scan(tmp_path / "missing")
    assert tree.nodes == [DirNode()]
    assert tree.total_size == 0


def test_item_info_fields():
    item = ItemInfo("x", False, 3)
    assert (item.name, item.is_dir, item.size, item.index) == ("x", False, 3, None)


def test_format_size_pinned():
    assert format_size(0) == "0 B"
    assert format_size(1024) == "1 KB"
    assert format_size(1536) == "1.50 KB"


def test_format_size_bytes_and_negative():
    assert format_size(1023) == f"{1023} B"
    assert format_size(-5) == ""


@pytest.mark.parametrize("count", [1, 3, 1000])
def test_format_size_exact_units(count):
    assert format_size(count * 1024) == f"{count} KB"
    assert format_size(count * 1024 * 1024) == f"{count} MB"
    assert format_size(count * 1024 * 1024 * 1024) == f"{count} GB"


def test_format_size_with_remainder_keeps_whole_part():
    result = format_size(5 * 1024 * 1024 + 1)
    assert result.startswith("5.")
    assert result.endswith(" MB")
    whole, fraction = result.split()[0].split(".")
    assert whole == "5" and 0 <= int(fraction) < 100