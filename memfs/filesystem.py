"""
Module: filesystem.py
Description: Path-based operations on an in-memory directory tree:
  - navigation with absolute and relative paths, `.` and `..`,
  - mkdir with missing parents, write/cat, rm,
  - mv/cp with optional merge, find, ls, pwd.

Notes:
  - The current directory always stays reachable from the root. Removing one
    of its ancestors moves it up to the removed directory's parent first.
  - File content carries an HMAC computed on write, checked again by cat.
"""

import logging
from typing import List, NamedTuple, Optional

from .config import PATH_SEPARATOR, SPECIAL_NAMES
from .exceptions import (
    AlreadyExistsError,
    IntegrityError,
    InvalidOperationError,
    NotFoundError,
)
from .integrity import generate_hmac, generate_key, verify_hmac
from .models import Directory, DirectoryLocation, File, FileLocation, ResolvedLocation
from .paths import is_valid_name, resolve, split_path, starts_at_root, step, validate_path
from .search import SearchResult, find
from .transfer import move_or_copy

logger = logging.getLogger(__name__)


class Listing(NamedTuple):
    files: List[str]
    directories: List[str]


class FileSystem:
    def __init__(self, key: Optional[bytes] = None) -> None:
        self.key = key
        self.root_directory: Optional[Directory] = None
        self.current_directory: Optional[Directory] = None
        self.is_active = False

    def start_up(self) -> str:
        """Create an empty tree and return the text to greet the user with."""
        if self.key is None:
            self.key = generate_key()
        self.root_directory = Directory()
        self.current_directory = self.root_directory
        self.is_active = True
        logger.info("File system started.")
        return "Welcome to your in-memory filesystem! To view commands, enter `help`"

    def teardown(self) -> None:
        self.is_active = False
        self.root_directory = None
        self.current_directory = None
        logger.info("File system torn down.")

    def _require_active(self) -> None:
        if self.root_directory is None:
            raise InvalidOperationError("File system is not running. Call start_up() first.")

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------
    def resolve(self, path: str) -> ResolvedLocation:
        self._require_active()
        return resolve(path, self.root_directory, self.current_directory)

    def get_directory(self, path: str) -> Directory:
        location = self.resolve(path)
        if not isinstance(location, DirectoryLocation):
            raise NotFoundError(f"No such directory {path}.")
        return location.directory

    def get_file(self, path: str) -> File:
        location = self.resolve(path)
        if not isinstance(location, FileLocation):
            raise NotFoundError("File not found. Check if the path is valid.")
        return location.file

    def pwd(self) -> str:
        self._require_active()
        return self.current_directory.get_path()

    def cd(self, path: Optional[str] = None) -> None:
        """Change the current directory; no path means the root."""
        self._require_active()
        if path is None:
            self.current_directory = self.root_directory
            return
        self.current_directory = self.get_directory(path)

    def ls(self, path: Optional[str] = None) -> Listing:
        self._require_active()
        directory = self.current_directory if path is None else self.get_directory(path)
        return Listing(
            files=sorted(directory.files),
            directories=[name + PATH_SEPARATOR for name in sorted(directory.subdirectories)],
        )

    def cat(self, path: str) -> str:
        file = self.get_file(path)
        if file.checksum is not None and not verify_hmac(file.content, file.checksum, self.key):
            logger.error(f"Checksum mismatch for file '{file.name}'.")
            raise IntegrityError(f"Error: File '{file.name}' is corrupted!")
        return file.read()

    def find(self, name: str, start: Optional[Directory] = None) -> List[SearchResult]:
        self._require_active()
        return find(start if start is not None else self.current_directory, name)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def mkdir(self, path: str) -> Directory:
        """
        Create the directory at `path` along with any missing parents. Fails if
        the path already names a directory; directories created before a
        failure are removed again.
        """
        self._require_active()
        validate_path(path)
        node = self.root_directory if starts_at_root(path) else self.current_directory
        parts = split_path(path)
        created: List[Directory] = []
        try:
            for i, part in enumerate(parts):
                if part in SPECIAL_NAMES:
                    node = step(node, part)
                elif node.has_child_directory(part):
                    if i == len(parts) - 1:
                        raise AlreadyExistsError("Directory already exists")
                    node = node.subdirectories[part]
                else:
                    node = node.add_subdirectory(part)
                    created.append(node)
            if not created:
                raise AlreadyExistsError("Directory already exists")
        except AlreadyExistsError:
            for directory in reversed(created):
                directory.parent.remove(directory.name)
            logger.warning(f"mkdir failed for '{path}'.")
            raise

        logger.info(f"Created directory {node.get_path()}")
        return node

    def write(self, path: str, content: Optional[str] = None) -> File:
        """
        Write `content` (empty when None) to the file at `path`, creating it or
        replacing the content of an existing file.
        """
        self._require_active()
        validate_path(path)
        parts = split_path(path)
        if not parts or path.endswith(PATH_SEPARATOR):
            raise InvalidOperationError(f"Invalid filename: {path}")

        filename = parts[-1]
        if filename in SPECIAL_NAMES or not is_valid_name(filename):
            raise InvalidOperationError(f"Invalid filename: {filename}")

        directory = self.current_directory
        if len(parts) > 1 or starts_at_root(path):
            parent_path = path[:len(path) - len(filename)]
            location = self.resolve(parent_path)
            if not isinstance(location, DirectoryLocation):
                raise NotFoundError(f"File is in an invalid directory: {path}")
            directory = location.directory

        text = "" if content is None else content
        new_file = File(filename)
        new_file.set_content(text, generate_hmac(text, self.key))
        stored = directory.add_file(new_file, overwrite_existing=True)
        logger.info(f"Wrote {len(text)} characters to {directory.path_of(stored.name)}")
        return stored

    def remove(self, path: str) -> None:
        location = self.resolve(path)
        if not location:
            raise NotFoundError(f"Invalid filepath: {path}")

        if isinstance(location, FileLocation):
            location.directory.remove(location.file.name)
            logger.info(f"Removed file {location.directory.path_of(location.file.name)}")
            return

        directory = location.directory
        if directory.is_root():
            raise InvalidOperationError("Unsupported operation: Can't delete the root directory.")

        removed_path = directory.get_path()
        self._leave_directory(directory)
        directory.parent.remove(directory.name)
        logger.info(f"Removed directory {removed_path}")

    def move_or_copy(self, from_path: str, to_path: str, merge: bool = False, copy: bool = False) -> None:
        source = self.resolve(from_path)
        destination = self.resolve(to_path)
        try:
            move_or_copy(source, destination, merge=merge, copy=copy, before_detach=self._leave_directory)
        except (NotFoundError, InvalidOperationError) as e:
            logger.warning(f"{'cp' if copy else 'mv'} {from_path} {to_path} rejected: {e}")
            raise

    def mv(self, from_path: str, to_path: str, merge: bool = False) -> None:
        self.move_or_copy(from_path, to_path, merge=merge, copy=False)

    def cp(self, from_path: str, to_path: str, merge: bool = False) -> None:
        self.move_or_copy(from_path, to_path, merge=merge, copy=True)

    def _leave_directory(self, directory: Directory) -> None:
        """Move the current directory out of `directory` before it is detached."""
        if self.current_directory.has_ancestor(directory):
            logger.info(f"Current directory moved from {self.current_directory.get_path()} "
                        f"to {directory.parent.get_path()}")
            self.current_directory = directory.parent
