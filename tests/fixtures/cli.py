"""Fixtures for the command line."""

import io

import pytest

from cli.output import Console
from cli.settings import Settings


def create_console(color: bool = False, show_skipped: bool = False) -> Console:
    """Create a Console writing to in-memory streams.

    Args:
        color: Whether to emit ANSI codes.
        show_skipped: Whether SKIPPED results are printed.

    Returns:
        Console whose ``stdout``/``stderr`` are StringIO objects.
    """
    return Console(
        color=color,
        show_skipped=show_skipped,
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )


@pytest.fixture
def console() -> Console:
    """Colorless Console capturing output in memory."""
    return create_console()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings whose home directory is a fresh temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    return Settings(home_dir=home, color=False)
