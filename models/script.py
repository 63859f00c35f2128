"""Action script model."""

from pathlib import Path
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from engine.exceptions import ScriptReadError


class ActionScript(BaseModel):
    """An action script: ordered raw lines, read once and never modified.

    Line order defines both the forward execution order and the reverse order
    used for undo. Lines are kept verbatim, blank ones included, so reported
    line numbers match the file.

    Args:
        lines: Raw script lines without line terminators.
        source: Path the script was read from, if any.
    """

    model_config = ConfigDict(frozen=True)

    lines: tuple[str, ...] = Field(
        default=(), description="Raw script lines without line terminators"
    )
    source: Optional[Path] = Field(
        default=None, description="Path the script was read from, if any"
    )

    @classmethod
    def from_text(cls, text: str, source: Optional[Path] = None) -> "ActionScript":
        """Create a script from its full text.

        Args:
            text: Script contents.
            source: Optional originating path.

        Returns:
            New ActionScript instance.
        """
        # Only "\n" ends a line; other separators stay in the line as whitespace.
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return cls(
            lines=tuple(line[:-1] if line.endswith("\r") else line for line in lines),
            source=source,
        )

    @classmethod
    def from_file(cls, path: Path) -> "ActionScript":
        """Read a script from disk.

        Args:
            path: Location of the ``.xeo`` file.

        Returns:
            New ActionScript instance.

        Raises:
            ScriptReadError: If the file cannot be read or decoded.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ScriptReadError(path, e) from e
        return cls.from_text(text, source=path)

    @property
    def is_blank(self) -> bool:
        """Check whether the script contains no commands at all.

        Returns:
            True if every line is empty or whitespace.
        """
        return all(not line.strip() for line in self.lines)

    def iter_lines(self) -> Iterator[tuple[int, str]]:
        """Yield ``(line_number, line)`` pairs in source order, 1-based."""
        for index, line in enumerate(self.lines, start=1):
            yield index, line

    def iter_lines_reversed(self) -> Iterator[tuple[int, str]]:
        """Yield ``(line_number, line)`` pairs from the last line to the first."""
        for index in range(len(self.lines), 0, -1):
            yield index, self.lines[index - 1]

    def __len__(self) -> int:
        return len(self.lines)
