"""Runtime configuration for the xeon command line.

Settings come from environment variables, optionally supplied through a
``.env`` file in the working directory:

- XEON_HOME: directory that holds the ``.xeon`` sentinel (default: user home)
- XEON_LOG_LEVEL: logging level name (default: WARNING)
- XEON_NO_COLOR: any non-empty value disables colored output
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

VERSION = "0.0.1"
SENTINEL_DIR_NAME = ".xeon"


def _default_home() -> Optional[Path]:
    try:
        return Path.home()
    except RuntimeError:
        return None


class Settings(BaseModel):
    """Configuration values for a single invocation.

    Args:
        home_dir: Directory holding the ``.xeon`` sentinel, None if unknown.
        log_level: Logging level name.
        color: Whether console output uses ANSI colors.
    """

    home_dir: Optional[Path] = Field(
        default_factory=_default_home,
        description="Directory holding the .xeon sentinel",
    )
    log_level: str = Field(default="WARNING", description="Logging level name")
    color: bool = Field(default=True, description="Use ANSI colors")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log_level names a standard logging level.

        Args:
            value: The level name.

        Returns:
            The upper-cased level name.

        Raises:
            ValueError: If the name is not a logging level.
        """
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def sentinel_dir(self) -> Optional[Path]:
        """Location of the ``.xeon`` directory created by ``init``.

        Returns:
            The sentinel path, or None if no home directory is known.
        """
        if self.home_dir is None:
            return None
        return self.home_dir / SENTINEL_DIR_NAME

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """Build settings from the environment.

        Args:
            load_env_file: Whether to read a ``.env`` file first.

        Returns:
            New Settings instance.
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        data: dict = {}
        home = os.environ.get("XEON_HOME")
        if home:
            data["home_dir"] = Path(home).expanduser()
        log_level = os.environ.get("XEON_LOG_LEVEL")
        if log_level:
            data["log_level"] = log_level
        if os.environ.get("XEON_NO_COLOR"):
            data["color"] = False
        return cls(**data)
