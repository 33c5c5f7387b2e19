"""
Module: transfer.py
Description: Moves, copies and merges files and directory subtrees between two
             resolved locations.

Notes:
  - Every check runs before the tree is touched, so a rejected request leaves
    the tree unchanged.
  - A merge renames clashing entries one at a time; it is not atomic across
    several clashes.
"""

import logging
from typing import Callable, Optional

from .exceptions import InvalidOperationError, NotFoundError
from .models import Directory, DirectoryLocation, FileLocation, ResolvedLocation

logger = logging.getLogger(__name__)


def validate_transfer(source: ResolvedLocation, destination: ResolvedLocation, merge: bool) -> None:
    if not source or not destination:
        raise NotFoundError("Directory or file does not exist.")
    if isinstance(destination, FileLocation):
        raise InvalidOperationError(
            "Cannot move or copy an object into an existing file. Try passing a directory instead.")
    if isinstance(source, DirectoryLocation) and destination.directory.has_ancestor(source.directory):
        raise InvalidOperationError("Cannot move or copy a directory into itself or one of its children.")
    if isinstance(source, FileLocation) and merge:
        raise InvalidOperationError("Merging files is unsupported.")


def move_or_copy(
    source: ResolvedLocation,
    destination: ResolvedLocation,
    merge: bool = False,
    copy: bool = False,
    before_detach: Optional[Callable[[Directory], None]] = None,
) -> None:
    """
    Relocate or duplicate `source` into the directory at `destination`.

    `before_detach` is called with a directory just before it is removed from
    its parent for good (a move-merge), so the caller can move a cursor out of it.
    """
    validate_transfer(source, destination, merge)
    target = destination.directory

    if isinstance(source, FileLocation):
        _move_or_copy_file(source, target, copy)
        return

    directory = source.directory
    if merge:
        _merge_directory(directory, target, copy, before_detach)
        return

    if copy:
        moved = directory.deep_copy()
    else:
        directory.parent.remove(directory.name)
        moved = directory
    target.attach_subdirectory(moved, rename_if_exists=True)
    logger.info(f"{'Copied' if copy else 'Moved'} directory to {moved.get_path()}")


def _move_or_copy_file(source: FileLocation, target: Directory, copy: bool) -> None:
    if target is source.directory:
        # Same directory, nothing to do for either a move or a copy.
        return

    if copy:
        file = source.file.copy()
    else:
        source.directory.remove(source.file.name)
        file = source.file

    # Insert after detaching so a rename sees the destination's names only.
    target.add_file(file, overwrite_existing=False, rename_if_exists=True)
    logger.info(f"{'Copied' if copy else 'Moved'} file to {target.path_of(file.name)}")


def _merge_directory(
    directory: Directory,
    target: Directory,
    copy: bool,
    before_detach: Optional[Callable[[Directory], None]],
) -> None:
    if copy:
        target.merge_directory(directory.deep_copy())
        logger.info(f"Merged copy of {directory.get_path()} into {target.get_path()}")
        return

    origin = directory.get_path()
    if before_detach is not None:
        before_detach(directory)
    directory.parent.remove(directory.name)
    target.merge_directory(directory)
    logger.info(f"Merged {origin} into {target.get_path()}")
