"""
Module: models.py
Description: Data models for the in-memory file system: files, directories and
             the result of resolving a path.
"""

import logging
from typing import Dict, Iterator, List, Optional, Union

from .exceptions import AlreadyExistsError, InvalidOperationError
from .naming import generate_unique_name

logger = logging.getLogger(__name__)


class File:
    def __init__(self, name: str, content: str = "") -> None:
        self.name = name
        self.content = content
        # HMAC of content, set by the file system on every write
        self.checksum: Optional[str] = None

    def set_content(self, content: str, checksum: Optional[str] = None) -> None:
        self.content = content
        self.checksum = checksum

    def read(self) -> str:
        return self.content

    def copy(self) -> 'File':
        duplicate = File(self.name, self.content)
        duplicate.checksum = self.checksum
        return duplicate

    def __repr__(self) -> str:
        return f"File(name={self.name}, size={len(self.content)})"


class Directory:
    """
    A directory owns its files and subdirectories. The parent reference is a
    lookup only: dropping a directory from its parent's map releases the whole
    subtree.
    """

    def __init__(self, name: Optional[str] = None, parent: Optional['Directory'] = None) -> None:
        # Name and parent are both None only for the root.
        self.name = name
        self.parent = parent

        self.files: Dict[str, File] = {}
        self.subdirectories: Dict[str, 'Directory'] = {}

    def is_root(self) -> bool:
        return self.parent is None and self.name is None

    def has_child_file(self, name: str) -> bool:
        return name in self.files

    def has_child_directory(self, name: str) -> bool:
        return name in self.subdirectories

    def has_child(self, name: str) -> bool:
        return name in self.files or name in self.subdirectories

    def get_child_file(self, name: str) -> Optional[File]:
        return self.files.get(name)

    def get_child_directory(self, name: str) -> Optional['Directory']:
        return self.subdirectories.get(name)

    def child_names(self) -> List[str]:
        return list(self.files) + list(self.subdirectories)

    def unique_name(self, name: str) -> str:
        return generate_unique_name(name, self.child_names())

    def get_path(self) -> str:
        """Absolute path from the root; the root itself is `/`."""
        if self.is_root():
            return "/"

        names = []
        node: Optional[Directory] = self
        while node is not None and not node.is_root():
            names.append(node.name)
            node = node.parent
        return "/" + "/".join(reversed(names))

    @property
    def path(self) -> str:
        return self.get_path()

    def path_of(self, child_name: str) -> str:
        if self.is_root():
            return "/" + child_name
        return self.get_path() + "/" + child_name

    def add_file(self, file: File, overwrite_existing: bool = False, rename_if_exists: bool = False) -> File:
        """
        Store `file` under its name and return the File now held there. On a
        name clash the file is renamed when `rename_if_exists` is set. With
        `overwrite_existing`, an existing file keeps its identity and takes the
        new content.
        """
        name = file.name
        if self.has_child_directory(name) or (self.has_child_file(name) and not overwrite_existing):
            if not rename_if_exists:
                raise AlreadyExistsError(f"Directory or file `{name}` already exists.")
            new_name = self.unique_name(name)
            logger.info(f"Renaming file '{name}' to '{new_name}' in {self.get_path()}")
            file.name = new_name
        elif self.has_child_file(name):
            existing = self.files[name]
            existing.set_content(file.content, file.checksum)
            return existing

        self.files[file.name] = file
        return file

    def add_subdirectory(self, name: str, rename_if_exists: bool = False) -> 'Directory':
        """Create a new, empty subdirectory and return it."""
        if self.has_child(name):
            if not rename_if_exists:
                raise AlreadyExistsError(f"Directory or file `{name}` already exists.")
            name = self.unique_name(name)

        subdir = Directory(name, self)
        self.subdirectories[name] = subdir
        return subdir

    def attach_subdirectory(self, subdir: 'Directory', rename_if_exists: bool = False) -> 'Directory':
        """Transplant an existing directory node (and its subtree) under this one."""
        if subdir.is_root():
            raise InvalidOperationError("Cannot add root as a subdirectory.")

        name = subdir.name
        if self.has_child(name):
            if not rename_if_exists:
                raise AlreadyExistsError(f"Directory or file `{name}` already exists.")
            name = self.unique_name(name)
            logger.info(f"Renaming directory '{subdir.name}' to '{name}' in {self.get_path()}")
            subdir.name = name

        subdir.parent = self
        self.subdirectories[name] = subdir
        return subdir

    def remove(self, name: str) -> bool:
        if name in self.subdirectories:
            del self.subdirectories[name]
            return True
        if name in self.files:
            del self.files[name]
            return True
        return False

    def merge_directory(self, source: 'Directory') -> None:
        """
        Move the contents of `source` into this directory. Clashing files are
        renamed, same-named subdirectories are merged recursively, and a
        subdirectory that clashes with a file is renamed.
        """
        for file in list(source.files.values()):
            self.add_file(file, overwrite_existing=False, rename_if_exists=True)

        for child in list(source.subdirectories.values()):
            existing = self.get_child_directory(child.name)
            if existing is not None:
                existing.merge_directory(child)
                continue
            if self.has_child_file(child.name):
                new_name = self.unique_name(child.name)
                logger.info(f"Renaming directory '{child.name}' to '{new_name}' in {self.get_path()}")
                child.name = new_name
            child.parent = self
            self.subdirectories[child.name] = child

        source.files = {}
        source.subdirectories = {}

    def has_ancestor(self, directory: 'Directory') -> bool:
        """True if `directory` is this directory or one of its ancestors."""
        node: Optional[Directory] = self
        while node is not None:
            if node is directory:
                return True
            node = node.parent
        return False

    def deep_copy(self) -> 'Directory':
        """
        Independent copy of this subtree. The copy's parent is this directory's
        parent; the caller re-points it when attaching the copy elsewhere.
        """
        duplicate = Directory(self.name, self.parent)
        for file in self.files.values():
            duplicate.files[file.name] = file.copy()
        for subdir in self.subdirectories.values():
            child = subdir.deep_copy()
            child.parent = duplicate
            duplicate.subdirectories[child.name] = child
        return duplicate

    def walk(self) -> Iterator['Directory']:
        """Depth-first, pre-order iteration over this directory and its descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.subdirectories.values())

    def list_contents(self) -> List[str]:
        """Sorted file names followed by sorted directory names with a trailing `/`."""
        file_names = sorted(self.files)
        subdir_names = [name + "/" for name in sorted(self.subdirectories)]
        return file_names + subdir_names

    def __repr__(self) -> str:
        return f"Directory(name={self.name}, files={len(self.files)}, subdirs={len(self.subdirectories)})"


class DirectoryLocation:
    def __init__(self, directory: Directory) -> None:
        self.directory = directory

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DirectoryLocation) and other.directory is self.directory

    def __repr__(self) -> str:
        return f"DirectoryLocation({self.directory.get_path()})"


class FileLocation:
    def __init__(self, file: File, directory: Directory) -> None:
        self.file = file
        # Directory that owns the file
        self.directory = directory

    def __eq__(self, other: object) -> bool:
        return (isinstance(other, FileLocation)
                and other.file is self.file
                and other.directory is self.directory)

    def __repr__(self) -> str:
        return f"FileLocation({self.directory.path_of(self.file.name)})"


class _Missing:
    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Missing"


MISSING = _Missing()

ResolvedLocation = Union[DirectoryLocation, FileLocation, _Missing]
