"""Action script command models.

Each line of an action script decodes into exactly one of the command models
defined here. Together they form a tagged variant keyed by ``keyword``:

- ChangeDirectory: ``dir <path>``
- MakeDirectory: ``mkdir <path>``
- MakeFile: ``make <path>``
- Print: ``print <text...>``
- Move: ``move <src> <dest>``
- SetExecutable: ``chmod <path>``
- UnknownCommand: any other leading token

Commands are immutable value objects. They describe what a line asks for;
the executors in ``engine`` decide what that means going forward or backward.
"""

from abc import abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class ScriptCommand(BaseModel):
    """Base class for all decoded script commands.

    Args:
        line_number: 1-based line of the script this command was parsed from.
    """

    model_config = ConfigDict(frozen=True)

    keyword: ClassVar[str] = ""

    line_number: int = Field(
        ge=1, description="1-based line of the script this command came from"
    )

    @property
    def is_reversible(self) -> bool:
        """Whether the undo pass has an inverse action for this command.

        Returns:
            True for commands with a meaningful inverse.
        """
        return False

    @abstractmethod
    def get_summary(self) -> str:
        """Return human-readable one-line summary of this command.

        Returns:
            Brief description for logging.
        """
        pass


def _require_text(value: str, field_name: str) -> str:
    """Reject empty or whitespace-only path and text arguments.

    Args:
        value: The argument value.
        field_name: Field name used in the error message.

    Returns:
        The unchanged value.

    Raises:
        ValueError: If the value is empty or whitespace.
    """
    if not value or not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    return value


class ChangeDirectory(ScriptCommand):
    """Change the working directory (``dir <path>``).

    Args:
        target: Directory to enter, relative to the current one or absolute.
    """

    keyword: ClassVar[str] = "dir"

    target: str = Field(description="Directory to enter")

    @field_validator("target")
    @classmethod
    def validate_target(cls, value: str) -> str:
        return _require_text(value, "target")

    @property
    def is_reversible(self) -> bool:
        return True

    def get_summary(self) -> str:
        return f"line {self.line_number}: dir {self.target}"


class MakeDirectory(ScriptCommand):
    """Create a directory and any missing parents (``mkdir <path>``).

    Args:
        path: Directory to create.
    """

    keyword: ClassVar[str] = "mkdir"

    path: str = Field(description="Directory to create")

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        return _require_text(value, "path")

    @property
    def is_reversible(self) -> bool:
        return True

    def get_summary(self) -> str:
        return f"line {self.line_number}: mkdir {self.path}"


class MakeFile(ScriptCommand):
    """Create or truncate an empty file (``make <path>``).

    Args:
        path: File to create.
    """

    keyword: ClassVar[str] = "make"

    path: str = Field(description="File to create")

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        return _require_text(value, "path")

    @property
    def is_reversible(self) -> bool:
        return True

    def get_summary(self) -> str:
        return f"line {self.line_number}: make {self.path}"


class Print(ScriptCommand):
    """Write a message to standard output (``print <text...>``).

    The message is the remaining tokens of the line rejoined with single
    spaces, so runs of whitespace inside the original text collapse.

    Args:
        text: Message to print.
    """

    keyword: ClassVar[str] = "print"

    text: str = Field(description="Message to print")

    @field_validator("text")
    @classmethod
    def validate_text(cls, value: str) -> str:
        return _require_text(value, "text")

    def get_summary(self) -> str:
        return f"line {self.line_number}: print {self.text!r}"


class Move(ScriptCommand):
    """Rename a file or directory (``move <src> <dest>``).

    Args:
        source: Existing path to rename.
        destination: New path; its parent directory must exist.
    """

    keyword: ClassVar[str] = "move"

    source: str = Field(description="Existing path to rename")
    destination: str = Field(description="New path")

    @field_validator("source", "destination")
    @classmethod
    def validate_paths(cls, value: str, info: ValidationInfo) -> str:
        return _require_text(value, info.field_name)

    @property
    def is_reversible(self) -> bool:
        return True

    def get_summary(self) -> str:
        return f"line {self.line_number}: move {self.source} -> {self.destination}"


class SetExecutable(ScriptCommand):
    """Give the owner read/write/execute permission (``chmod <path>``).

    On POSIX systems the mode becomes exactly ``0o700``. Elsewhere only the
    read-only attribute is cleared. There is no inverse.

    Args:
        target: File or directory whose permissions change.
    """

    keyword: ClassVar[str] = "chmod"

    target: str = Field(description="Path whose permissions change")

    @field_validator("target")
    @classmethod
    def validate_target(cls, value: str) -> str:
        return _require_text(value, "target")

    def get_summary(self) -> str:
        return f"line {self.line_number}: chmod {self.target}"


class UnknownCommand(ScriptCommand):
    """A line whose leading token is not a known command.

    Always reported as an error, never treated as a no-op.

    Args:
        raw_token: The unrecognized leading token.
    """

    raw_token: str = Field(description="The unrecognized leading token")

    def get_summary(self) -> str:
        return f"line {self.line_number}: unknown command {self.raw_token!r}"


COMMAND_TYPES: dict[str, type[ScriptCommand]] = {
    command_type.keyword: command_type
    for command_type in (
        ChangeDirectory,
        MakeDirectory,
        MakeFile,
        Print,
        Move,
        SetExecutable,
    )
}
