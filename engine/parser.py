"""Line parser for action scripts.

Grammar (one command per line, tokens separated by runs of whitespace, no
quoting, no escaping, no comments)::

    dir <path>
    mkdir <path>
    make <path>
    print <text...>
    move <src> <dest>
    chmod <path>

Parsing is per line and never aborts a script: blank lines decode to nothing,
unknown leading tokens decode to UnknownCommand, and arity violations raise
ScriptSyntaxError for the caller to report.
"""

from typing import Iterator, Optional, Union

from engine.exceptions import ScriptSyntaxError
from models.commands import (
    COMMAND_TYPES,
    ChangeDirectory,
    MakeDirectory,
    MakeFile,
    Move,
    Print,
    ScriptCommand,
    SetExecutable,
    UnknownCommand,
)
from models.script import ActionScript

# keyword -> (minimum token count including the keyword, error message)
ARITY_RULES: dict[str, tuple[int, str]] = {
    "dir": (2, "dir requires a directory name"),
    "mkdir": (2, "mkdir requires a directory name"),
    "make": (2, "make requires a file name"),
    "print": (2, "print requires a string to print"),
    "move": (3, "move requires source and destination"),
    "chmod": (2, "chmod requires a file name"),
}

# Commands whose token count must match the minimum exactly
EXACT_ARITY = {"move"}


def _check_arity(tokens: list[str], line_number: int) -> None:
    keyword = tokens[0]
    minimum, message = ARITY_RULES[keyword]
    if len(tokens) < minimum or (keyword in EXACT_ARITY and len(tokens) != minimum):
        raise ScriptSyntaxError(message, line_number=line_number, keyword=keyword)


def parse_line(line: str, line_number: int) -> Optional[ScriptCommand]:
    """Decode one script line into a command.

    Args:
        line: Raw line text.
        line_number: 1-based position of the line in its script.

    Returns:
        The decoded command, or None for a blank or whitespace-only line.

    Raises:
        ScriptSyntaxError: If a known command has the wrong number of arguments.
    """
    tokens = line.split()
    if not tokens:
        return None

    keyword = tokens[0]
    if keyword not in COMMAND_TYPES:
        return UnknownCommand(line_number=line_number, raw_token=keyword)

    _check_arity(tokens, line_number)

    if keyword == "dir":
        return ChangeDirectory(line_number=line_number, target=tokens[1])
    elif keyword == "mkdir":
        return MakeDirectory(line_number=line_number, path=tokens[1])
    elif keyword == "make":
        return MakeFile(line_number=line_number, path=tokens[1])
    elif keyword == "print":
        return Print(line_number=line_number, text=" ".join(tokens[1:]))
    elif keyword == "move":
        return Move(line_number=line_number, source=tokens[1], destination=tokens[2])
    else:
        return SetExecutable(line_number=line_number, target=tokens[1])


def peek_keyword(line: str) -> Optional[str]:
    """Return the leading token of a line without validating it.

    Args:
        line: Raw line text.

    Returns:
        The first token, or None for a blank line.
    """
    tokens = line.split(maxsplit=1)
    return tokens[0] if tokens else None


ParsedLine = tuple[int, Union[ScriptCommand, ScriptSyntaxError]]


def parse_script(script: ActionScript) -> Iterator[ParsedLine]:
    """Decode every non-blank line of a script in source order.

    Syntax errors are yielded in place of the command instead of being
    raised, so a single bad line does not hide the lines after it.

    Args:
        script: The script to decode.

    Yields:
        ``(line_number, command_or_error)`` pairs.
    """
    for line_number, line in script.iter_lines():
        try:
            command = parse_line(line, line_number)
        except ScriptSyntaxError as e:
            yield line_number, e
            continue
        if command is not None:
            yield line_number, command
