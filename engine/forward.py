"""Forward execution of action scripts.

Runs every line in source order against the live filesystem. Each failing
line is reported and skipped; the only fatal condition is being unable to
return to the starting directory once all lines have run.
"""

import logging
import os
import stat

from engine.exceptions import ScriptSyntaxError, WorkingDirectoryRestoreError
from engine.executor import ScriptExecutor
from engine.parser import parse_line
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
from models.results import StepResult
from models.script import ActionScript

logger = logging.getLogger(__name__)


def set_owner_executable(path: str) -> None:
    """Give the owner read/write/execute permission on ``path``.

    POSIX systems get mode ``0o700`` exactly. On other platforms only the
    read-only attribute is cleared, which is all their permission model
    offers.

    Args:
        path: File or directory to change.

    Raises:
        OSError: If the path does not exist or cannot be changed.
    """
    current_mode = os.stat(path).st_mode
    if os.name == "posix":
        os.chmod(path, stat.S_IRWXU)
    else:
        os.chmod(path, current_mode | stat.S_IWRITE)


class ForwardExecutor(ScriptExecutor):
    """Runs an action script in written order.

    Example:
        >>> results = []
        >>> executor = ForwardExecutor(results.append)
        >>> executor.run(ActionScript.from_text("mkdir build\\nmake build/out.txt"))
        >>> [r.message for r in results]
        ['created directory: build', 'created file: build/out.txt']
    """

    def run(self, script: ActionScript) -> None:
        """Execute every line, then return to the starting directory.

        Args:
            script: The script to run.

        Raises:
            WorkingDirectoryRestoreError: If the starting directory cannot be
                re-entered after the last line.
        """
        context = self._begin()

        for line_number, line in script.iter_lines():
            try:
                command = parse_line(line, line_number)
            except ScriptSyntaxError as e:
                self._report_syntax_error(e)
                continue
            if command is None:
                continue
            self.execute(command)

        try:
            context.restore_origin()
        except OSError as e:
            logger.debug(f"Could not restore working directory {context.origin}: {e}")
            raise WorkingDirectoryRestoreError(context.origin, e) from e
        logger.info(f"Forward run finished, back in {context.origin}")

    def execute(self, command: ScriptCommand) -> None:
        """Apply a single decoded command.

        Args:
            command: The command to apply.
        """
        logger.debug(f"Executing {command.get_summary()}")

        if isinstance(command, ChangeDirectory):
            self._change_directory(command)
        elif isinstance(command, MakeDirectory):
            self._make_directory(command)
        elif isinstance(command, MakeFile):
            self._make_file(command)
        elif isinstance(command, Print):
            self.report(StepResult.output(command.text, line_number=command.line_number))
        elif isinstance(command, Move):
            self._move(command)
        elif isinstance(command, SetExecutable):
            self._set_executable(command)
        elif isinstance(command, UnknownCommand):
            self._report_unknown(command)
        else:
            raise TypeError(f"Unsupported command type: {type(command).__name__}")

    def _make_directory(self, command: MakeDirectory) -> None:
        try:
            os.makedirs(command.path, exist_ok=True)
        except OSError as e:
            self._report_os_error(
                "failed to create directory",
                command.path,
                e,
                command.line_number,
                command.keyword,
            )
            return
        self._report_success(
            "created directory:", command.path, command.line_number, command.keyword
        )

    def _make_file(self, command: MakeFile) -> None:
        try:
            with open(command.path, "w"):
                pass
        except OSError as e:
            self._report_os_error(
                "failed to create file",
                command.path,
                e,
                command.line_number,
                command.keyword,
            )
            return
        self._report_success(
            "created file:", command.path, command.line_number, command.keyword
        )

    def _move(self, command: Move) -> None:
        try:
            os.rename(command.source, command.destination)
        except OSError as e:
            self._report_os_error(
                "failed to move",
                f"{command.source} to {command.destination}",
                e,
                command.line_number,
                command.keyword,
            )
            return
        self._report_success(
            "moved",
            f"{command.source} to {command.destination}",
            command.line_number,
            command.keyword,
        )

    def _set_executable(self, command: SetExecutable) -> None:
        # A missing target is reported like any other filesystem error.
        try:
            set_owner_executable(command.target)
        except OSError as e:
            self._report_os_error(
                "failed to set permissions on",
                command.target,
                e,
                command.line_number,
                command.keyword,
            )
            return
        self._report_success(
            "made executable:", command.target, command.line_number, command.keyword
        )
