"""Command-line entry point for xeon.

Usage:
    xeon version
    xeon init
    xeon add <pkg>
    xeon xeo path/to/script.xeo [--reverse] [--check]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import colorama
from pydantic import ValidationError

from cli import handlers
from cli.output import Console
from cli.settings import Settings

ABOUT = "the 'modern' package manager"

# Same status argparse uses for bad arguments
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subparser per subcommand.

    Returns:
        The configured parser.
    """
    parser = argparse.ArgumentParser(prog="xeon", description=ABOUT)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="disable colored output"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    subparsers.add_parser("version", help="check xeon version")
    subparsers.add_parser("update", help="refresh package database")

    add = subparsers.add_parser("add", help="adds a package")
    add.add_argument("pkg")

    rm = subparsers.add_parser("rm", help="removes a package")
    rm.add_argument("pkg")

    add_repo = subparsers.add_parser("add-repo", help="adds a new repository")
    add_repo.add_argument("url")

    rm_repo = subparsers.add_parser("rm-repo", help="removes a repository")
    rm_repo.add_argument("alias")

    upgrade = subparsers.add_parser("upgrade", help="upgrades a package")
    upgrade.add_argument("pkg")

    subparsers.add_parser("init", help="initializes xeon (if not already initialized)")

    xeo = subparsers.add_parser("xeo", help="runs custom .xeo file")
    xeo.add_argument("path", type=Path)
    mode = xeo.add_mutually_exclusive_group()
    mode.add_argument(
        "-r", "--reverse", action="store_true", help="undo the script instead of running it"
    )
    mode.add_argument(
        "--check", action="store_true", help="report syntax errors without running"
    )

    return parser


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level.

    Args:
        level: Logging level name.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def dispatch(args: argparse.Namespace, console: Console, settings: Settings) -> int:
    """Route parsed arguments to their handler.

    Args:
        args: Parsed command-line arguments.
        console: Output target.
        settings: Runtime configuration.

    Returns:
        Process exit status.
    """
    command = args.command
    if command == "version":
        return handlers.handle_version(console)
    elif command == "update":
        return handlers.handle_update(console)
    elif command == "add":
        return handlers.handle_add(console, args.pkg)
    elif command == "rm":
        return handlers.handle_rm(console, args.pkg)
    elif command == "upgrade":
        return handlers.handle_upgrade(console, args.pkg)
    elif command == "add-repo":
        return handlers.handle_add_repo(console, args.url)
    elif command == "rm-repo":
        return handlers.handle_rm_repo(console, args.alias)
    elif command == "init":
        return handlers.handle_init(console, settings)
    elif command == "xeo":
        return handlers.handle_xeo(
            console, args.path, reverse=args.reverse, check=args.check
        )
    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    """Parse arguments, configure output and logging, and run a subcommand.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:]).
        settings: Configuration (defaults to Settings.from_env()).

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    if settings is None:
        try:
            settings = Settings.from_env()
        except ValidationError as e:
            console = Console(color=not args.no_color)
            for error in e.errors():
                console.failure("xeon: invalid configuration:", error["msg"])
            return EXIT_CONFIG_ERROR

    configure_logging("DEBUG" if args.verbose else settings.log_level)
    colorama.just_fix_windows_console()

    console = Console(
        color=settings.color and not args.no_color,
        show_skipped=args.verbose,
    )
    return dispatch(args, console, settings)


def run() -> None:
    """Console-script entry point; exits with main()'s status."""
    sys.exit(main())
