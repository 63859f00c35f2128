"""xeon data models package.

This package contains the data models of the action script engine: the
decoded command variants, the script itself, the navigation history used
to undo ``dir`` commands, the execution context, and step results.
"""

from models.commands import (
    ChangeDirectory,
    MakeDirectory,
    MakeFile,
    Move,
    Print,
    ScriptCommand,
    SetExecutable,
    UnknownCommand,
)
from models.navigation import NavigationHistory
from models.results import Outcome, StepResult
from models.script import ActionScript
from models.context import ExecutionContext

__all__ = [
    "ScriptCommand",
    "ChangeDirectory",
    "MakeDirectory",
    "MakeFile",
    "Print",
    "Move",
    "SetExecutable",
    "UnknownCommand",
    "NavigationHistory",
    "Outcome",
    "StepResult",
    "ActionScript",
    "ExecutionContext",
]
