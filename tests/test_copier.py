import os
import shutil

import pytest

from scummer.core.copier import copy_dir_recursively
from scummer.core.errors import ScummError


def snapshot(root):
    """Map every relative path under root to its bytes (None for dirs)."""
    tree = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames:
            tree[os.path.relpath(os.path.join(dirpath, name), root)] = None
        for name in filenames:
            path = os.path.join(dirpath, name)
            with open(path, "rb") as f:
                tree[os.path.relpath(path, root)] = f.read()
    return tree


def test_copies_nested_tree(tmp_path):
    src = tmp_path / "src"
    (src / "a" / "b").mkdir(parents=True)
    (src / "empty").mkdir()
    (src / "top.bin").write_bytes(bytes(range(256)))
    (src / "a" / "mid.txt").write_text("middle")
    (src / "a" / "b" / "deep.dat").write_bytes(b"\x00\xff\x00")

    dst = tmp_path / "backups" / "one"
    copy_dir_recursively(str(src), str(dst))

    assert snapshot(str(dst)) == snapshot(str(src))
    assert (dst / "empty").is_dir()


def test_save_and_meta_example(tmp_path):
    src = tmp_path / "profiles"
    (src / "meta").mkdir(parents=True)
    (src / "save1.dat").write_bytes(b"\xab\xcd")
    (src / "meta" / "info.json").write_text('{"v":1}')

    dst = tmp_path / "scummed" / "2024-01-01T00-00-00.000000"
    copy_dir_recursively(str(src), str(dst))

    assert (dst / "save1.dat").read_bytes() == b"\xab\xcd"
    assert (dst / "meta" / "info.json").read_text() == '{"v":1}'


def test_empty_source(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    dst = tmp_path / "dst"

    copy_dir_recursively(str(src), str(dst))

    assert dst.is_dir()
    assert os.listdir(dst) == []


def test_missing_source_names_it(tmp_path):
    src = tmp_path / "nope"
    with pytest.raises(ScummError) as excinfo:
        copy_dir_recursively(str(src), str(tmp_path / "dst"))
    assert "failed to read src dir" in str(excinfo.value)
    assert str(src) in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_destination_blocked_by_file(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    dst = tmp_path / "dst"
    dst.write_text("in the way")

    with pytest.raises(ScummError) as excinfo:
        copy_dir_recursively(str(src), str(dst))
    assert "failed to create dst dir" in str(excinfo.value)


def test_failure_names_source_and_destination(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "save.dat").write_bytes(b"data")
    dst = tmp_path / "dst"
    # A directory where the file should land makes the copy fail
    (dst / "save.dat").mkdir(parents=True)

    with pytest.raises(ScummError) as excinfo:
        copy_dir_recursively(str(src), str(dst))
    message = str(excinfo.value)
    assert str(src / "save.dat") in message
    assert str(dst / "save.dat") in message
    assert isinstance(excinfo.value.__cause__, OSError)


def test_files_copied_before_a_failure_stay(tmp_path, monkeypatch):
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.dat").write_bytes(b"aaa")
    (src / "b.dat").write_bytes(b"bbb")
    dst = tmp_path / "dst"

    real_copyfile = shutil.copyfile
    calls = []

    def fail_second_copy(s, d):
        calls.append(s)
        if len(calls) == 2:
            raise OSError(5, "Input/output error")
        return real_copyfile(s, d)
    monkeypatch.setattr(shutil, "copyfile", fail_second_copy)

    with pytest.raises(ScummError):
        copy_dir_recursively(str(src), str(dst))

    copied = os.listdir(dst)
    assert copied == [os.path.basename(calls[0])]
    assert (dst / copied[0]).read_bytes() == (src / copied[0]).read_bytes()


def symlink_or_skip(target, link, target_is_directory=False):
    try:
        os.symlink(target, link, target_is_directory=target_is_directory)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not available")


def test_linked_file_is_copied_as_content(tmp_path):
    outside = tmp_path / "outside.dat"
    outside.write_bytes(b"\x01\x02")
    src = tmp_path / "src"
    src.mkdir()
    symlink_or_skip(outside, src / "link.dat")
    dst = tmp_path / "dst"

    copy_dir_recursively(str(src), str(dst))

    assert not (dst / "link.dat").is_symlink()
    assert (dst / "link.dat").read_bytes() == b"\x01\x02"


def test_linked_dir_is_not_walked(tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "inner.dat").write_bytes(b"x")
    src = tmp_path / "src"
    src.mkdir()
    symlink_or_skip(outside, src / "linked", target_is_directory=True)
    dst = tmp_path / "dst"

    with pytest.raises(ScummError) as excinfo:
        copy_dir_recursively(str(src), str(dst))
    assert str(src / "linked") in str(excinfo.value)
    assert not (dst / "linked" / "inner.dat").exists()
