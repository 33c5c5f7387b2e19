"""
Module: commands.py
Description: Command names and help text for the memfs shell.
"""

from typing import Dict

CAT = "cat"
CD = "cd"
CP = "cp"
FIND = "find"
HELP = "help"
LS = "ls"
MKDIR = "mkdir"
MV = "mv"
MERGE_OPTION = "--merge"
PWD = "pwd"
QUIT = "quit"
RM = "rm"
WRITE = "write"

HELP_STRING = (
    "These are the commands supported by this in-memory filesystem. Type\n"
    "`help <name>` to find out more about the command `name`.\n\n"
    f"{CAT} <filename>:  Outputs the text contained within <filename>.\n"
    f"{CD} <filepath>: Changes the current working directory to <filepath>\n"
    f"{CP} [--merge] <filepath_from> <filepath_to>: Copies all files and\n"
    "    directories from <filepath_from> to <filepath_to>\n"
    f"{FIND} <filename>:  Outputs all paths that contain <filename>.\n"
    f"{HELP}: Lists available commands\n"
    f"{LS}:  Lists the current directory's contents.\n"
    f"{MKDIR} <directory>: Creates a new directory <directory>\n"
    f"{MV} [--merge] <filepath_from> <filepath_to>: Moves the files and\n"
    "    directories at <filepath_from> to <filepath_to>.\n"
    f"{PWD}: Lists the current directory's filepath.\n"
    f"{QUIT}: Exits the program. All files and directories will be deleted.\n"
    f"{RM} <filepath>:  Removes the directory or file located at <filepath>\n"
    f"{WRITE} <filename> \"<contents>\":  Writes <contents> into file\n"
    "    <filename>."
)

_PATH_NOTE = (
    "Supports both absolute and relative filepaths, as well as special path\n"
    "operators `.` and `..`"
)
_NAME_NOTE = "Supported filepath characters are limited to [A-Z] [a-z] [0-9] `.` and `_`."

COMMANDS: Dict[str, str] = {
    CAT: "cat <filename>\nOutputs the body text contained within <filename>",
    CD: (
        "cd [<filepath>]\n"
        "Changes the current working directory to <filepath>, or to the root\n"
        "when no filepath is given. " + _PATH_NOTE
    ),
    CP: (
        "cp [--merge] <filepath_from> <filepath_to>\n"
        "Copies the files and directories from <filepath_from> to\n"
        "<filepath_to>. Collisions are handled by renaming the copied file or\n"
        "directory. If the merge flag is supplied, then all directories and\n"
        "files are merged between <filepath_from> into <filepath_to>.\n"
        "Recursively copies all files and directories.\n" + _PATH_NOTE
    ),
    FIND: (
        "find <filename>\n"
        "Outputs all paths under the current directory named <filename>.\n"
        "Directories are outputted with a trailing slash."
    ),
    HELP: (
        "help [<command>]\n"
        "Type `help` to view all commands. Type `help <command>` to view more\n"
        "detailed instructions for a specific command."
    ),
    LS: (
        "ls [<filepath> ...]\n"
        "Outputs all files and directories within the filepath. If no filepath\n"
        "is provided, output is for the current directory. " + _PATH_NOTE
    ),
    MKDIR: (
        "mkdir <filepath>\n"
        "Creates a new directory at the given filepath. It will recursively\n"
        "create any directories that do not yet exist. " + _NAME_NOTE + "\n" + _PATH_NOTE
    ),
    MV: (
        "mv [--merge] <filepath_from> <filepath_to>\n"
        "Moves the files and directories from <filepath_from> to <filepath_to>.\n"
        "Collisions are handled by renaming the moved file or directory. If\n"
        "the merge flag is supplied, then all directories and files are merged\n"
        "between <filepath_from> into <filepath_to>\n" + _PATH_NOTE
    ),
    PWD: "pwd\nPrints the absolute filepath starting at root for the current directory",
    QUIT: "quit\nExits the application. All files and directories will be deleted.",
    RM: "rm <filepath>\nRemoves all files and directories at filepath.\n" + _PATH_NOTE,
    WRITE: (
        "write <filename> [\"<contents>\"]\n"
        "Creates a new file with optional body text <contents>. A filepath may\n"
        "be included in the filename.\n" + _NAME_NOTE + "\n"
        "Body contents to write must be surrounded by quotation marks.\n" + _PATH_NOTE
    ),
}
