"""
Module: paths.py
Description: Turns slash-delimited path strings into directories and files.
"""

import logging
from typing import List

from .config import CURRENT_DIR, PARENT_DIR, PATH_SEPARATOR, VALID_NAME_PATTERN, VALID_PATH_PATTERN
from .exceptions import InvalidPathError
from .models import MISSING, Directory, DirectoryLocation, FileLocation, ResolvedLocation

logger = logging.getLogger(__name__)


def is_valid_path(path: str) -> bool:
    return VALID_PATH_PATTERN.fullmatch(path) is not None


def is_valid_name(name: str) -> bool:
    return VALID_NAME_PATTERN.fullmatch(name) is not None


def validate_path(path: str) -> None:
    if not isinstance(path, str) or not is_valid_path(path):
        logger.warning(f"Rejected path with unsupported characters: {path!r}")
        raise InvalidPathError(f"Unsupported characters in path: {path}")


def starts_at_root(path: str) -> bool:
    return path.startswith(PATH_SEPARATOR)


def split_path(path: str) -> List[str]:
    return [part for part in path.split(PATH_SEPARATOR) if part]


def step(node: Directory, segment: str) -> Directory:
    """Follow `.` or `..` from `node`. The root is its own parent."""
    if segment == CURRENT_DIR:
        return node
    if segment == PARENT_DIR:
        return node.parent if node.parent is not None else node
    raise ValueError(f"Not a special path segment: {segment}")


def resolve(path: str, root: Directory, current: Directory) -> ResolvedLocation:
    """
    Resolve `path` against `root` (absolute paths) or `current` (relative
    paths). Returns a DirectoryLocation, a FileLocation, or MISSING. A file is
    only accepted as the last segment.
    """
    validate_path(path)
    node = root if starts_at_root(path) else current

    parts = split_path(path)
    for i, part in enumerate(parts):
        if part in (CURRENT_DIR, PARENT_DIR):
            node = step(node, part)
        elif node.has_child_directory(part):
            node = node.subdirectories[part]
        elif i == len(parts) - 1 and node.has_child_file(part):
            return FileLocation(node.files[part], node)
        else:
            return MISSING

    return DirectoryLocation(node)
