"""Subcommand handlers for the xeon command line.

Each handler receives already-decoded arguments plus the Console it prints
through, and returns the process exit status. The package-management
handlers only announce what they would do; the action script engine behind
``xeo`` is the only subsystem that acts.
"""

import logging
import os
from pathlib import Path

from cli.output import Console
from cli.settings import VERSION, Settings
from engine.exceptions import (
    ScriptReadError,
    ScriptSyntaxError,
    WorkingDirectoryRestoreError,
)
from engine.executor import SYNTAX_ERROR_LABEL
from engine.parser import parse_script
from engine.runner import load_script, run_script
from models.commands import UnknownCommand
from models.script import ActionScript

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1


# ===== Package management =====


def handle_version(console: Console) -> int:
    console.line(console.green("xeon: the 'modern' package manager"))
    console.line(f"v{VERSION}")
    return EXIT_OK


def handle_update(console: Console) -> int:
    console.line(console.green("refreshing package database..."))
    return EXIT_OK


def handle_add(console: Console, pkg: str) -> int:
    console.line(f"{console.green('installing')} {pkg}{console.green('...')}")
    return EXIT_OK


def handle_rm(console: Console, pkg: str) -> int:
    console.line(f"{console.green('removing')} {pkg}{console.green('...')}")
    return EXIT_OK


def handle_upgrade(console: Console, pkg: str) -> int:
    console.line(f"{console.green('upgrading')} {pkg}...")
    return EXIT_OK


def handle_add_repo(console: Console, url: str) -> int:
    console.line(console.green("adding new repo:"), url)
    return EXIT_OK


def handle_rm_repo(console: Console, alias: str) -> int:
    console.line(console.green("removing"), alias, console.green("repo..."))
    return EXIT_OK


# ===== Initialization =====


def handle_init(console: Console, settings: Settings) -> int:
    """Create the ``.xeon`` sentinel directory if it does not exist yet.

    Only the sentinel itself is created; its parent must already exist.
    Failures are reported but do not change the exit status.

    Args:
        console: Output target.
        settings: Provides the home directory.

    Returns:
        Exit status (always 0).
    """
    console.line(console.green("initializing xeon..."))

    sentinel = settings.sentinel_dir
    if sentinel is None:
        console.error(console.red("could not determine home directory!"))
        return EXIT_OK

    if sentinel.exists():
        console.warning("xeon is already initialized.")
        return EXIT_OK

    try:
        os.mkdir(sentinel)
    except OSError as e:
        logger.debug(f"mkdir {sentinel} failed: {e!r}")
        console.failure("failed to initialize xeon:", str(e))
        return EXIT_OK

    console.line(console.green("xeon initialized successfully."))
    return EXIT_OK


# ===== Action scripts =====


def handle_xeo(
    console: Console,
    path: Path,
    reverse: bool = False,
    check: bool = False,
) -> int:
    """Read an action script and run, undo, or check it.

    Args:
        console: Output target and report callback.
        path: Location of the ``.xeo`` file.
        reverse: Undo the script instead of running it.
        check: Only report syntax errors; touch nothing.

    Returns:
        Exit status: 1 if a forward run could not restore its starting
        directory, otherwise 0.
    """
    console.line(console.green("running xeo script at"), f'"{path}"')

    try:
        script = load_script(path)
    except ScriptReadError as e:
        console.failure("failed to read xeo script:", e.message)
        return EXIT_OK
    console.line("read xeo script")

    if check:
        return _check_script(console, script)

    console.line("reversing xeo script..." if reverse else "handling xeo script...")
    try:
        run_script(script, reverse=reverse, report=console.report)
    except WorkingDirectoryRestoreError as e:
        console.failure("xeo: fatal:", e.message)
        return EXIT_FATAL
    return EXIT_OK


def _check_script(console: Console, script: ActionScript) -> int:
    error_count = 0
    for line_number, parsed in parse_script(script):
        if isinstance(parsed, ScriptSyntaxError):
            console.failure(SYNTAX_ERROR_LABEL, f"line {line_number}: {parsed.message}")
            error_count += 1
        elif isinstance(parsed, UnknownCommand):
            console.failure(
                SYNTAX_ERROR_LABEL,
                f"line {line_number}: unknown command '{parsed.raw_token}'",
            )
            error_count += 1

    if error_count:
        console.warning(f"found {error_count} problem(s) in xeo script")
    else:
        console.success("xeo script ok")
    return EXIT_OK
