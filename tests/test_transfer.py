"""
Unit tests for the move/copy/merge engine, driven through resolved locations.
"""

import pytest

from memfs.exceptions import InvalidOperationError, NotFoundError
from memfs.models import MISSING, Directory, DirectoryLocation, File, FileLocation
from memfs.transfer import move_or_copy


@pytest.fixture
def tree():
    root = Directory()
    src = root.add_subdirectory("src")
    dst = root.add_subdirectory("dst")
    inner = src.add_subdirectory("inner")
    f = src.add_file(File("f", "body"))
    return root, src, dst, inner, f


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def test_missing_locations(tree):
    root, src, dst, inner, f = tree

    with pytest.raises(NotFoundError):
        move_or_copy(MISSING, DirectoryLocation(dst))
    with pytest.raises(NotFoundError):
        move_or_copy(DirectoryLocation(src), MISSING)


def test_destination_file_is_rejected(tree):
    root, src, dst, inner, f = tree

    with pytest.raises(InvalidOperationError):
        move_or_copy(DirectoryLocation(dst), FileLocation(f, src))


@pytest.mark.parametrize("copy", [False, True])
@pytest.mark.parametrize("merge", [False, True])
def test_directory_into_own_subtree_is_rejected(tree, copy, merge):
    root, src, dst, inner, f = tree
    deep = inner.add_subdirectory("x").add_subdirectory("y")

    for target in (src, inner, deep):
        with pytest.raises(InvalidOperationError):
            move_or_copy(DirectoryLocation(src), DirectoryLocation(target), merge=merge, copy=copy)
    assert root.subdirectories["src"] is src
    assert src.parent is root


def test_root_cannot_be_moved(tree):
    root, src, dst, inner, f = tree

    with pytest.raises(InvalidOperationError):
        move_or_copy(DirectoryLocation(root), DirectoryLocation(dst))


def test_merge_of_a_file_is_rejected(tree):
    root, src, dst, inner, f = tree

    with pytest.raises(InvalidOperationError):
        move_or_copy(FileLocation(f, src), DirectoryLocation(dst), merge=True)
    assert src.files["f"] is f


# -----------------------------------------------------------------------------
# Files
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("copy", [False, True])
def test_file_into_its_own_directory_is_a_no_op(tree, copy):
    root, src, dst, inner, f = tree

    move_or_copy(FileLocation(f, src), DirectoryLocation(src), copy=copy)

    assert list(src.files) == ["f"]
    assert src.files["f"] is f


def test_move_file(tree):
    root, src, dst, inner, f = tree

    move_or_copy(FileLocation(f, src), DirectoryLocation(dst))

    assert "f" not in src.files
    assert dst.files["f"] is f


def test_copy_file_creates_a_new_identity(tree):
    root, src, dst, inner, f = tree

    move_or_copy(FileLocation(f, src), DirectoryLocation(dst), copy=True)

    assert src.files["f"] is f
    assert dst.files["f"] is not f
    assert dst.files["f"].content == "body"


def test_moved_file_is_renamed_on_collision(tree):
    root, src, dst, inner, f = tree
    dst.add_file(File("f", "already here"))

    move_or_copy(FileLocation(f, src), DirectoryLocation(dst))

    assert dst.files["f"].content == "already here"
    assert dst.files["f_1"] is f
    assert f.name == "f_1"


# -----------------------------------------------------------------------------
# Directories
# -----------------------------------------------------------------------------
def test_move_directory(tree):
    root, src, dst, inner, f = tree

    move_or_copy(DirectoryLocation(inner), DirectoryLocation(dst))

    assert "inner" not in src.subdirectories
    assert dst.subdirectories["inner"] is inner
    assert inner.parent is dst


def test_move_directory_renames_only_the_top_level(tree):
    root, src, dst, inner, f = tree
    dst.add_subdirectory("src")

    move_or_copy(DirectoryLocation(src), DirectoryLocation(dst))

    assert dst.subdirectories["src_1"] is src
    assert set(src.subdirectories) == {"inner"}
    assert set(src.files) == {"f"}
    assert "src" not in root.subdirectories


def test_copy_directory_is_independent(tree):
    root, src, dst, inner, f = tree

    move_or_copy(DirectoryLocation(src), DirectoryLocation(dst), copy=True)
    duplicate = dst.subdirectories["src"]
    src.remove("f")

    assert duplicate is not src
    assert duplicate.parent is dst
    assert duplicate.files["f"].content == "body"
    assert duplicate.subdirectories["inner"].parent is duplicate


def test_copy_directory_into_its_parent_is_renamed(tree):
    root, src, dst, inner, f = tree

    move_or_copy(DirectoryLocation(inner), DirectoryLocation(src), copy=True)

    assert set(src.subdirectories) == {"inner", "inner_1"}


def test_move_merge(tree):
    root, src, dst, inner, f = tree
    dst.add_subdirectory("inner").add_file(File("keep"))
    dst.add_file(File("f", "dst f"))
    inner.add_file(File("keep", "incoming"))

    move_or_copy(DirectoryLocation(src), DirectoryLocation(dst), merge=True)

    assert "src" not in root.subdirectories
    assert dst.files["f"].content == "dst f"
    assert dst.files["f_1"].content == "body"
    assert set(dst.subdirectories["inner"].files) == {"keep", "keep_1"}


def test_copy_merge_leaves_source_intact(tree):
    root, src, dst, inner, f = tree

    move_or_copy(DirectoryLocation(src), DirectoryLocation(dst), merge=True, copy=True)

    assert root.subdirectories["src"] is src
    assert src.files["f"] is f
    assert dst.files["f"] is not f
    assert dst.subdirectories["inner"] is not inner
    assert dst.subdirectories["inner"].parent is dst


def test_before_detach_is_called_for_move_merge_only(tree):
    root, src, dst, inner, f = tree
    detached = []

    move_or_copy(DirectoryLocation(inner), DirectoryLocation(dst), before_detach=detached.append)
    assert detached == []

    move_or_copy(DirectoryLocation(src), DirectoryLocation(dst), merge=True, before_detach=detached.append)
    assert detached == [src]
