"""Entry points for loading and running action scripts."""

import logging
from pathlib import Path

from engine.executor import ScriptExecutor
from engine.forward import ForwardExecutor
from engine.reverse import ReverseExecutor
from models.results import ReportCallback
from models.script import ActionScript

logger = logging.getLogger(__name__)


def load_script(path: Path) -> ActionScript:
    """Read an action script from disk.

    Args:
        path: Location of the ``.xeo`` file.

    Returns:
        The loaded script.

    Raises:
        ScriptReadError: If the file cannot be read.
    """
    script = ActionScript.from_file(path)
    logger.info(f"Loaded {len(script)} lines from {path}")
    if script.is_blank:
        logger.info(f"{path} contains no commands")
    return script


def create_executor(reverse: bool, report: ReportCallback) -> ScriptExecutor:
    """Build the executor for the requested run mode.

    Args:
        reverse: True to undo the script, False to run it forward.
        report: Callback receiving every StepResult.

    Returns:
        A ReverseExecutor or ForwardExecutor.
    """
    if reverse:
        return ReverseExecutor(report)
    return ForwardExecutor(report)


def run_script(script: ActionScript, reverse: bool, report: ReportCallback) -> None:
    """Run a script forward or in reverse.

    Args:
        script: The script to run.
        reverse: True to undo the script instead of running it.
        report: Callback receiving every StepResult.

    Raises:
        WorkingDirectoryRestoreError: If a forward run cannot return to its
            starting directory.
    """
    mode = "reverse" if reverse else "forward"
    logger.info(f"Running {script.source or '<text>'} in {mode} mode")
    create_executor(reverse, report).run(script)
