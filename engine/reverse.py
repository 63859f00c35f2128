"""History-aware reverse execution of action scripts.

Undoing a script needs to know which directory each line ran in, but no
record of a previous forward run is kept. Reverse execution recovers that
information from the script text alone, in two stages over the same lines:

1. Replay (source order): only ``dir`` lines run. Before each one the
   current directory is pushed onto a NavigationHistory, then the change is
   applied exactly as forward mode would apply it.
2. Undo (reverse order): each mutating line is inverted, and each ``dir``
   line pops the history to step back out of the directory it entered.

Inverse actions:

    dir p         -> pop history, enter the popped directory (empty: no-op)
    mkdir p       -> remove p and everything under it
    make p        -> remove file p
    move s d      -> rename d back to s
    print, chmod  -> nothing

Reverse mode is normally run against a tree that still holds the effects of
an earlier forward run: replay walks through directories that already exist.
"""

import logging
import os
import shutil
from typing import Optional

from engine.exceptions import ScriptSyntaxError
from engine.executor import ScriptExecutor
from engine.navigator import PathNavigator
from engine.parser import parse_line, peek_keyword
from models.commands import (
    ChangeDirectory,
    MakeDirectory,
    MakeFile,
    Move,
    ScriptCommand,
    UnknownCommand,
)
from models.navigation import NavigationHistory
from models.results import Outcome, ReportCallback, StepResult
from models.script import ActionScript

logger = logging.getLogger(__name__)


class ReverseExecutor(ScriptExecutor):
    """Undoes an action script using a replayed navigation history.

    ``replay()`` and ``undo()`` are separate stages so each can be driven on
    its own; ``run()`` performs both and then returns to the origin.

    Attributes:
        history: Directories recorded by the replay pass.
    """

    def __init__(
        self,
        report: ReportCallback,
        navigator: Optional[PathNavigator] = None,
    ) -> None:
        super().__init__(report, navigator)
        self.history = NavigationHistory()

    def run(self, script: ActionScript) -> None:
        """Replay navigation, undo every line in reverse, then return home.

        Failing to re-enter the starting directory at the end is ignored.

        Args:
            script: The script to undo.
        """
        context = self._begin()
        self.history.clear()

        self.replay(script)
        self.undo(script)

        try:
            context.restore_origin()
        except OSError as e:
            logger.debug(f"Ignoring failure to restore {context.origin}: {e}")
            return
        logger.info(f"Reverse run finished, back in {context.origin}")

    def replay(self, script: ActionScript) -> NavigationHistory:
        """Re-apply every ``dir`` line in source order, recording history.

        All other lines, malformed and unknown ones included, are ignored
        here; the undo pass reports them.

        Args:
            script: The script being undone.

        Returns:
            The navigation history, one entry per well-formed ``dir`` line.
        """
        for line_number, line in script.iter_lines():
            if peek_keyword(line) != ChangeDirectory.keyword:
                continue
            try:
                command = parse_line(line, line_number)
            except ScriptSyntaxError as e:
                self._report_syntax_error(e)
                continue

            self.history.push(self.navigator.current())
            self._change_directory(command)

        logger.debug(f"Replay recorded {self.history.to_dict()}")
        return self.history

    def undo(self, script: ActionScript) -> None:
        """Invert every line from last to first.

        Args:
            script: The script being undone.
        """
        for line_number, line in script.iter_lines_reversed():
            try:
                command = parse_line(line, line_number)
            except ScriptSyntaxError as e:
                # Malformed dir lines were already reported by replay and
                # pushed nothing, so they must not pop either.
                if e.keyword != ChangeDirectory.keyword:
                    self._report_syntax_error(e)
                continue
            if command is None:
                continue
            self.invert(command)

    def invert(self, command: ScriptCommand) -> None:
        """Apply the inverse of a single decoded command.

        Args:
            command: The command to invert.
        """
        logger.debug(f"Inverting {command.get_summary()}")

        if isinstance(command, UnknownCommand):
            self._report_unknown(command)
        elif not command.is_reversible:
            # print and chmod
            self.report(
                StepResult(
                    line_number=command.line_number,
                    keyword=command.keyword,
                    outcome=Outcome.SKIPPED,
                    label="nothing to undo for",
                    detail=command.keyword,
                )
            )
        elif isinstance(command, ChangeDirectory):
            self._step_back(command)
        elif isinstance(command, MakeDirectory):
            self._remove_directory(command)
        elif isinstance(command, MakeFile):
            self._remove_file(command)
        elif isinstance(command, Move):
            self._move_back(command)
        else:
            raise TypeError(f"Unsupported command type: {type(command).__name__}")

    def _step_back(self, command: ChangeDirectory) -> None:
        previous = self.history.pop()
        if previous is None:
            logger.debug(f"line {command.line_number}: navigation history empty")
            return
        try:
            restored = self.navigator.change_to(previous)
        except OSError as e:
            self._report_os_error(
                "failed to return to directory",
                str(previous),
                e,
                command.line_number,
                command.keyword,
            )
            return
        self._report_success(
            "returned to directory:", str(restored), command.line_number, command.keyword
        )

    def _remove_directory(self, command: MakeDirectory) -> None:
        try:
            shutil.rmtree(command.path)
        except OSError as e:
            self._report_os_error(
                "failed to remove directory",
                command.path,
                e,
                command.line_number,
                command.keyword,
            )
            return
        self._report_success(
            "removed directory:", command.path, command.line_number, command.keyword
        )

    def _remove_file(self, command: MakeFile) -> None:
        try:
            os.remove(command.path)
        except OSError as e:
            self._report_os_error(
                "failed to remove file",
                command.path,
                e,
                command.line_number,
                command.keyword,
            )
            return
        self._report_success(
            "removed file:", command.path, command.line_number, command.keyword
        )

    def _move_back(self, command: Move) -> None:
        try:
            os.rename(command.destination, command.source)
        except OSError as e:
            self._report_os_error(
                "failed to move",
                f"{command.destination} back to {command.source}",
                e,
                command.line_number,
                command.keyword,
            )
            return
        self._report_success(
            "moved",
            f"{command.destination} back to {command.source}",
            command.line_number,
            command.keyword,
        )
