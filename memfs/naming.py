"""
Module: naming.py
Description: Picks a free name for an entry that collides with an existing one.
"""

from typing import Iterable, Optional


def generate_unique_name(base: str, existing_names: Iterable[str]) -> str:
    """
    Return `base_N` where N is one past the largest numeric suffix already used
    for `base_`, or `base_1` when there is none. Names whose suffix is not a
    plain number are ignored.
    """
    prefix = base + "_"
    max_version: Optional[int] = None
    for name in existing_names:
        if not name.startswith(prefix):
            continue
        suffix = name[len(prefix):]
        if not (suffix.isascii() and suffix.isdigit()):
            continue
        number = int(suffix)
        if max_version is None or number > max_version:
            max_version = number

    if max_version is None:
        return prefix + "1"
    return prefix + str(max_version + 1)
