"""
Module: config.py
Description: Constants shared by the memfs modules, and logging setup for the shell.
"""

import logging
import os
import re

PATH_SEPARATOR = "/"
CURRENT_DIR = "."
PARENT_DIR = ".."
SPECIAL_NAMES = frozenset({CURRENT_DIR, PARENT_DIR})

# Only letters, digits, `_`, `.` and the separator. Says nothing about ordering.
VALID_PATH_PATTERN = re.compile(r"[A-Za-z0-9_./]+")
VALID_NAME_PATTERN = re.compile(r"[A-Za-z0-9_.]+")

PROMPT = "> "
LOG_LEVEL_ENV = "MEMFS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging() -> int:
    """
    Configure the root logger from MEMFS_LOG_LEVEL. Unknown level names fall
    back to the default. Returns the level that was applied.
    """
    level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    logging.basicConfig(level=level)
    return level
