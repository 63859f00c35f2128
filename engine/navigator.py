"""Process working-directory access for the script executors."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class PathNavigator:
    """Single access point for reading and changing the working directory.

    Both executors route every ``dir`` command and every origin restore
    through a navigator instead of calling ``os.chdir`` directly, so the
    process-wide state has exactly one writer per run.
    """

    def current(self) -> Path:
        """Return the absolute current working directory.

        Raises:
            OSError: If the current directory no longer exists.
        """
        return Path(os.getcwd())

    def change_to(self, target: str | os.PathLike) -> Path:
        """Make ``target`` the current working directory.

        Args:
            target: Relative (to the current directory) or absolute path.

        Returns:
            The new absolute working directory.

        Raises:
            OSError: If the target does not exist, is not a directory, or
                cannot be entered. The working directory is left unchanged.
        """
        os.chdir(target)
        new_directory = self.current()
        logger.debug(f"Working directory is now {new_directory}")
        return new_directory
