"""
Module: search.py
Description: Recursive search for files and directories by name.
"""

import logging
from typing import List, NamedTuple

from .models import Directory

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    path: str
    is_directory: bool


def find(start: Directory, name: str) -> List[SearchResult]:
    """
    Every file or directory called `name` in the subtree under `start`,
    including `start` itself, sorted by path. Directory paths end with `/`.
    """
    matches: List[SearchResult] = []
    if start.name == name:
        matches.append(SearchResult(_directory_path(start), True))

    for node in start.walk():
        subdir = node.get_child_directory(name)
        if subdir is not None:
            matches.append(SearchResult(_directory_path(subdir), True))
        if node.has_child_file(name):
            matches.append(SearchResult(node.path_of(name), False))

    logger.debug(f"find '{name}' under {start.get_path()}: {len(matches)} match(es)")
    return sorted(matches, key=lambda result: result.path)


def _directory_path(directory: Directory) -> str:
    path = directory.get_path()
    return path if path.endswith("/") else path + "/"
