import logging
from typing import List

from memfs.commands import (
    CAT, CD, COMMANDS, CP, FIND, HELP, HELP_STRING, LS, MERGE_OPTION, MKDIR, MV, PWD, QUIT, RM, WRITE,
)
from memfs.config import PROMPT, configure_logging
from memfs.exceptions import CommandError, MemFSError, NotFoundError
from memfs.filesystem import FileSystem, Listing

logger = logging.getLogger(__name__)

EMPTY_OUTPUT = ""


def format_listing(listing: Listing) -> str:
    lines = []
    if listing.files:
        lines.append("  ".join(listing.files))
    if listing.directories:
        lines.append("  ".join(listing.directories))
    return "\n".join(lines)


def _parse_transfer_args(parts: List[str]) -> tuple:
    """Split `[--merge] <from> <to>` into (from, to, merge)."""
    command = parts[0]
    if len(parts) not in (3, 4):
        raise CommandError(f"Invalid number of arguments received for '{command}'.")
    if len(parts) == 4:
        if parts[1] != MERGE_OPTION:
            raise CommandError(f"Unrecognized flag for '{command}': {parts[1]}")
        return parts[2], parts[3], True
    return parts[1], parts[2], False


def _write(fs: FileSystem, line: str) -> str:
    # Split at most twice so the quoted body keeps its own whitespace.
    parts = line.split(maxsplit=2)
    if len(parts) == 1:
        raise CommandError("Missing or incorrect number of arguments received.")
    if len(parts) == 2:
        fs.write(parts[1])
        return EMPTY_OUTPUT

    body = parts[2].strip()
    if len(body) < 2 or not body.startswith('"') or not body.endswith('"'):
        raise CommandError("Specify the file contents to write by wrapping it in quotes.")
    fs.write(parts[1], body[1:-1])
    return EMPTY_OUTPUT


def handle_command(fs: FileSystem, line: str) -> str:
    """
    Run one command line against `fs` and return the text to show the user.
    Raises MemFSError (or a subclass) when the command fails.
    """
    if line is None:
        return EMPTY_OUTPUT
    parts = line.split()
    if not parts:
        return EMPTY_OUTPUT

    command = parts[0]
    if command == WRITE:
        return _write(fs, line.strip())

    if command == CAT:
        if len(parts) != 2:
            raise CommandError("Missing or incorrect number of arguments received.")
        return fs.cat(parts[1])

    elif command == CD:
        if len(parts) > 2:
            raise CommandError("Command 'cd' expects at most 1 argument.")
        fs.cd(parts[1] if len(parts) == 2 else None)
        return EMPTY_OUTPUT

    elif command in (CP, MV):
        from_path, to_path, merge = _parse_transfer_args(parts)
        fs.move_or_copy(from_path, to_path, merge=merge, copy=(command == CP))
        return EMPTY_OUTPUT

    elif command == FIND:
        if len(parts) != 2:
            raise CommandError("Missing name of the filename to find." if len(parts) == 1
                               else "Too many arguments. Find accepts only 1 argument.")
        results = fs.find(parts[1])
        if not results:
            return f"No instances of `{parts[1]}` found"
        return "\n".join(result.path for result in results)

    elif command == HELP:
        if len(parts) == 1:
            return HELP_STRING
        if len(parts) > 2:
            raise CommandError("Command 'help' received too many arguments.\n" + COMMANDS[HELP])
        if parts[1] not in COMMANDS:
            raise CommandError(f"Unrecognized command {parts[1]}\n" + COMMANDS[HELP])
        return COMMANDS[parts[1]]

    elif command == LS:
        if len(parts) == 1:
            return format_listing(fs.ls())
        if len(parts) == 2:
            return format_listing(fs.ls(parts[1]))
        sections = []
        for path in parts[1:]:
            try:
                sections.append(f"{path}\n{format_listing(fs.ls(path))}")
            except NotFoundError:
                sections.append(f"{path}: No such directory.")
        return "\n".join(sections)

    elif command == MKDIR:
        if len(parts) != 2:
            raise CommandError("Missing new directory name." if len(parts) == 1
                               else "Too many arguments. Mkdir accepts only 1 argument.")
        fs.mkdir(parts[1])
        return EMPTY_OUTPUT

    elif command == PWD:
        if len(parts) > 1:
            raise CommandError("Command 'pwd' does not expect arguments.")
        return fs.pwd()

    elif command == QUIT:
        fs.is_active = False
        return "Thanks for using this in-memory filesystem!"

    elif command == RM:
        if len(parts) != 2:
            raise CommandError("Missing name of the object to delete." if len(parts) == 1
                               else "Too many arguments. Rm accepts only 1 argument.")
        fs.remove(parts[1])
        return EMPTY_OUTPUT

    raise CommandError(f"Unrecognized command: {command}\nType `help` to view supported commands.")


def main():
    configure_logging()
    fs = FileSystem()
    print(fs.start_up())

    while fs.is_active:
        try:
            line = input(PROMPT)
        except EOFError:
            break
        try:
            output = handle_command(fs, line)
        except MemFSError as e:
            output = str(e)
        if output:
            print(output)

    fs.teardown()


if __name__ == "__main__":
    main()
