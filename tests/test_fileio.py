import os
import stat
import time

import pytest

from corekit import fileio
from corekit.fileio import (
    FileCache,
    change_permissions,
    clear_folder,
    copy_file,
    copy_missing_files,
    create_folder_if_missing,
    delete_file,
    delete_folder_tree,
    delete_old_files,
    extension,
    file_exists,
    file_to_string,
    folder_exists,
    folder_of,
    improve_name,
    is_legal_file_name,
    list_files,
    make_dir,
    modification_time,
    modification_times,
    rename_file,
    run_and_capture,
    run_command,
    run_quiet,
    select_with_extension,
    stem,
    write_bytes,
    write_lines,
    write_sorted_lines,
    write_text,
)


def test_folder_of():
    assert folder_of("a/b/c.txt") == "a/b"
    assert folder_of("c.txt") == ""
    assert folder_of("/c.txt") == ""
    assert folder_of("a/b/") == "a/b"


def test_stem_and_extension():
    assert stem("a/b/c.tar.gz") == "c"
    assert extension("a/b/c.tar.gz") == "tar.gz"
    assert stem("/c.txt") == "c"
    assert extension("/c.txt") == "txt"
    assert extension("noext") == ""
    assert stem("dir/prefix_name.txt", "prefix_") == "name"


def test_select_with_extension():
    paths = ["x/a.txt", "x/b.csv", "c.txt"]
    assert select_with_extension(paths, "txt") == ["x/a.txt", "c.txt"]
    assert select_with_extension(paths, "txt", complement=True) == ["x/b.csv"]


def test_is_legal_file_name():
    assert is_legal_file_name("report_2024")
    assert not is_legal_file_name("a/b")
    assert not is_legal_file_name("file.txt")
    assert is_legal_file_name("")


def test_improve_name():
    assert improve_name("  a/b / ") == "a/b"
    assert improve_name("") == ""
    assert improve_name("/") == ""


def test_write_text_round_trip(tmp_path):
    path = str(tmp_path / "f.txt")
    write_text(path, "hello\nworld")
    assert file_to_string(path) == "hello\nworld"
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o664


def test_cache_serves_stale_until_disk_read(tmp_path):
    path = str(tmp_path / "f.txt")
    write_text(path, "one")
    with open(path, "w") as handle:
        handle.write("two")
    assert file_to_string(path) == "one"
    assert file_to_string(path, from_disk=True) == "two"
    assert file_to_string(path) == "two"


def test_file_cache_limit(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("a1")
    second.write_text("b1")
    cache = FileCache(max_files=1)
    assert cache.read(str(first)) == "a1"
    assert cache.read(str(second)) == "b1"
    first.write_text("a2")
    second.write_text("b2")
    assert cache.read(str(first)) == "a1"
    assert cache.read(str(second)) == "b2"
    cache.forget(str(first))
    assert cache.read(str(first)) == "a2"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_to_string(str(tmp_path / "nope.txt"))


def test_write_lines_adds_final_blank_line(tmp_path):
    path = str(tmp_path / "l.txt")
    write_lines(path, ["a", "b"])
    assert file_to_string(path, from_disk=True) == "a\nb\n\n"


def test_write_sorted_lines(tmp_path):
    path = str(tmp_path / "s.txt")
    write_sorted_lines(path, ["b", "a", "b"])
    assert file_to_string(path, from_disk=True) == "a\nb\n"


def test_write_bytes(tmp_path):
    path = tmp_path / "b.bin"
    write_bytes(str(path), [0, 255, 256 + 7])
    assert path.read_bytes() == bytes([0, 255, 7])
    write_bytes(str(path), b"xyz")
    assert path.read_bytes() == b"xyz"


def test_delete_file(tmp_path):
    path = str(tmp_path / "d.txt")
    write_text(path, "x")
    delete_file(path)
    assert not file_exists(path)
    delete_file(path)
    with pytest.raises(FileNotFoundError):
        file_to_string(path)


def test_rename_file(tmp_path):
    source = str(tmp_path / "s.txt")
    target = str(tmp_path / "t.txt")
    write_text(source, "data")
    rename_file(source, target)
    assert not file_exists(source)
    assert file_to_string(target) == "data"
    write_text(source, "other")
    with pytest.raises(FileExistsError):
        rename_file(source, target)
    assert file_to_string(target, from_disk=True) == "data"


def test_change_permissions(tmp_path):
    path = tmp_path / "p.txt"
    path.write_text("x")
    change_permissions(str(path), "600")
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o600
    with pytest.raises(ValueError):
        change_permissions(str(path), "g+s")


def test_copy_file(tmp_path):
    source = tmp_path / "a.txt"
    source.write_text("copy me")
    target = tmp_path / "b.txt"
    copy_file(str(source), str(target))
    assert target.read_text() == source.read_text()


def test_copy_missing_files_keeps_existing(tmp_path):
    src = tmp_path / "src"
    dst = tmp_path / "dst"
    src.mkdir()
    dst.mkdir()
    (src / "a.txt").write_text("new a")
    (src / "b.txt").write_text("new b")
    (src / "noext").write_text("skip")
    (dst / "a.txt").write_text("old a")
    copied = copy_missing_files(str(src), str(dst))
    assert copied == ["b.txt"]
    assert (dst / "a.txt").read_text() == "old a"
    assert (dst / "b.txt").read_text() == "new b"
    assert not (dst / "noext").exists()


def test_clear_folder_by_extension(tmp_path):
    (tmp_path / "a.txt").write_text("1")
    (tmp_path / "b.log").write_text("2")
    removed = clear_folder(str(tmp_path), "txt")
    assert removed == [str(tmp_path / "a.txt")]
    assert sorted(os.listdir(tmp_path)) == ["b.log"]


def test_list_files_sorted(tmp_path):
    for name in ("c.txt", "a.txt", "b.txt"):
        (tmp_path / name).write_text(name)
    assert list_files(str(tmp_path)) == [str(tmp_path / n) for n in ("a.txt", "b.txt", "c.txt")]


def test_delete_folder_tree(tmp_path):
    tree = tmp_path / "tree"
    (tree / "inner").mkdir(parents=True)
    (tree / "inner" / "f.txt").write_text("x")
    delete_folder_tree(str(tree) + "/")
    assert not tree.exists()


def test_modification_times(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("x")
    os.utime(path, (1_000_000, 1_000_000))
    assert modification_time(str(path)) == 1_000_000
    assert modification_times([str(path), str(path)]) == [1_000_000, 1_000_000]


def test_delete_old_files(tmp_path):
    old = tmp_path / "old.txt"
    fresh = tmp_path / "fresh.txt"
    other = tmp_path / "old.log"
    for path in (old, fresh, other):
        path.write_text("x")
    past = time.time() - 10_000
    os.utime(old, (past, past))
    os.utime(other, (past, past))
    deleted = delete_old_files(str(tmp_path), "txt", 100)
    assert deleted == [str(old)]
    assert fresh.exists() and other.exists()


def test_make_dir(tmp_path):
    path = str(tmp_path / "new")
    assert make_dir(path) is True
    assert folder_exists(path)
    assert make_dir(path) is False
    assert make_dir("") is False


def test_create_folder_if_missing(tmp_path):
    folder = str(tmp_path / "made")
    assert create_folder_if_missing(folder, extra_file="extra.txt", extra_content="more")
    assert file_to_string(folder + "/readme.txt", from_disk=True) == fileio.DEFAULT_MARKER_CONTENT
    assert file_to_string(folder + "/extra.txt", from_disk=True) == "more"
    assert create_folder_if_missing(folder) is False


def test_run_commands():
    assert run_and_capture("echo hello") == "hello\n"
    assert run_command("exit 3") == 3
    assert run_quiet("echo quiet") == 0
    assert run_quiet("exit 2") == 2