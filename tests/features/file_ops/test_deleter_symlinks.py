import os
import logging
import pytest
from pathlib import Path

from housekeeping.features.file_ops.service.deleter import RecursiveDeleter

# --- HELPERS ---

def make_link(link: Path, target: Path, is_dir: bool) -> None:
    try:
        os.symlink(target, link, target_is_directory=is_dir)
    except (OSError, NotImplementedError) as e:
        pytest.skip(f"Symbolic links not supported here: {e}")

# --- FIXTURES ---

@pytest.fixture
def precious_dir(tmp_path):
    """A directory outside the tree being deleted, which must survive."""
    target = tmp_path / "precious"
    target.mkdir()
    (target / "keep.txt").write_text("do not delete")
    (target / "sub").mkdir()
    (target / "sub" / "also_keep.txt").write_text("nor this")
    return target

# --- TESTS ---

def test_link_inside_tree_is_removed_not_followed(tmp_path, precious_dir):
    tree = tmp_path / "tree"
    tree.mkdir()
    (tree / "own.txt").write_text("x")
    make_link(tree / "shortcut", precious_dir, is_dir=True)

    RecursiveDeleter().delete_directory(tree)

    assert not tree.exists()
    assert (precious_dir / "keep.txt").exists()
    assert (precious_dir / "sub" / "also_keep.txt").exists()

def test_delete_directory_on_link_removes_only_the_link(tmp_path, precious_dir):
    link = tmp_path / "link_to_precious"
    make_link(link, precious_dir, is_dir=True)

    RecursiveDeleter().delete_directory(link)

    assert not link.is_symlink()
    assert not link.exists()
    assert (precious_dir / "keep.txt").exists()

def test_force_delete_on_directory_link(tmp_path, precious_dir):
    link = tmp_path / "via_force"
    make_link(link, precious_dir, is_dir=True)

    RecursiveDeleter().force_delete(link)

    assert not link.is_symlink()
    assert (precious_dir / "sub").is_dir()

def test_force_delete_on_file_link_keeps_target(tmp_path):
    target = tmp_path / "real.txt"
    target.write_text("x")
    link = tmp_path / "alias.txt"
    make_link(link, target, is_dir=False)

    RecursiveDeleter().force_delete(link)

    assert not link.is_symlink()
    assert target.exists()

def test_force_delete_on_dangling_link(tmp_path):
    link = tmp_path / "dangling"
    make_link(link, tmp_path / "nowhere", is_dir=False)
    assert link.is_symlink() and not link.exists()

    RecursiveDeleter().force_delete(link)

    assert not link.is_symlink()

def test_self_referencing_link_does_not_loop(tmp_path):
    tree = tmp_path / "loop"
    tree.mkdir()
    make_link(tree / "back", tree, is_dir=True)

    RecursiveDeleter().delete_directory(tree)

    assert not tree.exists()

def test_delete_directory_link_is_logged(tmp_path, precious_dir, caplog):
    link = tmp_path / "logged_link"
    make_link(link, precious_dir, is_dir=True)

    with caplog.at_level(logging.DEBUG, logger="housekeeping"):
        RecursiveDeleter().delete_directory(link)

    if os.name != "nt":
        assert any("Removing directory link" in r.getMessage() for r in caplog.records)
