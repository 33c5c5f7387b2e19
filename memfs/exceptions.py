"""
Module: exceptions.py
Description: Error types raised by the in-memory file system.
"""


class MemFSError(Exception):
    """Base class for every failure reported by memfs."""


class InvalidPathError(MemFSError):
    pass


class NotFoundError(MemFSError):
    pass


class AlreadyExistsError(MemFSError):
    pass


class InvalidOperationError(MemFSError):
    pass


class IntegrityError(MemFSError):
    """File content no longer matches the checksum stored at write time."""


class CommandError(MemFSError):
    """Malformed command line: wrong arguments, unknown flag or command."""
