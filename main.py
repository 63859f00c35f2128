"""Main entry point for the xeon command-line tool.

xeon is a package-manager-style CLI whose working subsystem is the action
script engine: ``.xeo`` files describing filesystem changes that can be run
forward or undone.

To run from a checkout:
    python main.py xeo setup.xeo
    python main.py xeo setup.xeo --reverse

Once installed, the same commands are available as ``xeon``.
"""

from cli.app import run

if __name__ == "__main__":
    run()
