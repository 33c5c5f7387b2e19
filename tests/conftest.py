"""
Shared fixtures for the memfs test suite.
"""

from typing import Iterator

import pytest

from memfs.filesystem import FileSystem


@pytest.fixture
def fs() -> Iterator[FileSystem]:
    """A started, empty file system."""
    filesystem = FileSystem()
    filesystem.start_up()
    yield filesystem
    filesystem.teardown()


@pytest.fixture
def populated_fs(fs: FileSystem) -> FileSystem:
    """
    /a/f        "hi"
    /a/b/c/
    /b/x        "from b"
    /c/x        "from c"
    """
    fs.mkdir("/a/b/c")
    fs.write("/a/f", "hi")
    fs.mkdir("/b")
    fs.mkdir("/c")
    fs.write("/b/x", "from b")
    fs.write("/c/x", "from c")
    return fs
