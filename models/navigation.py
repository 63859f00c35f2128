"""Navigation history model for reverse script execution.

A reverse run cannot consult a log of where a previous forward run went; no
such log is ever written. Instead the replay pass re-simulates every ``dir``
command and records the directory that was current before each change. The
undo pass then pops those entries, most recent first, to walk back out.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class NavigationHistory(BaseModel):
    """LIFO stack of previously-current working directories.

    The replay pass pushes one entry per ``dir`` command it visits and the
    undo pass pops one entry per ``dir`` command it visits. A malformed script
    can make undo ask for more entries than replay recorded; popping an empty
    history therefore returns None instead of raising.

    Args:
        entries: Recorded directories (most recent at end).

    Examples:
        history = NavigationHistory()
        history.push(Path("/home/user/project"))
        history.push(Path("/home/user/project/sub"))

        history.pop()   # Path("/home/user/project/sub")
        history.pop()   # Path("/home/user/project")
        history.pop()   # None
    """

    entries: list[Path] = Field(
        default_factory=list,
        description="Recorded directories (most recent at end)",
    )

    @property
    def depth(self) -> int:
        """Get the number of recorded directories.

        Returns:
            Number of entries on the stack.
        """
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def push(self, directory: Path) -> None:
        """Record the directory that was current before a ``dir`` command.

        Args:
            directory: Absolute path of the pre-change working directory.
        """
        self.entries.append(Path(directory))

    def pop(self) -> Optional[Path]:
        """Remove and return the most recently recorded directory.

        Returns:
            The most recent entry, or None if the history is empty.
        """
        if not self.entries:
            return None
        return self.entries.pop()

    def clear(self) -> None:
        self.entries.clear()

    def to_dict(self) -> dict[str, Any]:
        """Convert this history to a dictionary.

        Returns:
            Dictionary representation suitable for logging.
        """
        return {
            "entries": [str(entry) for entry in self.entries],
            "depth": self.depth,
        }
