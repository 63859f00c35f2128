"""Shared machinery for the forward and reverse script executors."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from engine.exceptions import ScriptSyntaxError, describe_os_error
from engine.navigator import PathNavigator
from models.commands import ChangeDirectory, UnknownCommand
from models.context import ExecutionContext
from models.results import ReportCallback, StepResult
from models.script import ActionScript

logger = logging.getLogger(__name__)

SYNTAX_ERROR_LABEL = "xeo: err:"


class ScriptExecutor(ABC):
    """Base class for objects that run an action script.

    Subclasses implement ``run()``. The base class owns the report callback
    and the navigator, and provides the reporting and navigation steps both
    execution modes share.

    Attributes:
        report: Callback receiving every StepResult in processing order.
        navigator: Access to the process working directory.
        context: Execution context of the run in progress (None between runs).
    """

    def __init__(
        self,
        report: ReportCallback,
        navigator: Optional[PathNavigator] = None,
    ) -> None:
        """Initialize the executor.

        Args:
            report: Callback receiving every StepResult in processing order.
            navigator: Working-directory access (defaults to a new PathNavigator).
        """
        self.report = report
        self.navigator = navigator or PathNavigator()
        self.context: Optional[ExecutionContext] = None

    @abstractmethod
    def run(self, script: ActionScript) -> None:
        """Execute the script.

        Args:
            script: The script to run.
        """
        pass

    def _begin(self) -> ExecutionContext:
        """Capture the origin directory for a new run."""
        self.context = ExecutionContext.capture(self.navigator)
        logger.info(f"{type(self).__name__} starting in {self.context.origin}")
        return self.context

    def _report_success(
        self, label: str, detail: str, line_number: int, keyword: str
    ) -> None:
        self.report(
            StepResult.success(label, detail, line_number=line_number, keyword=keyword)
        )

    def _report_os_error(
        self,
        label: str,
        subject: str,
        error: OSError,
        line_number: int,
        keyword: str,
    ) -> None:
        logger.debug(f"line {line_number}: {label} {subject}: {error!r}")
        self.report(
            StepResult.failure(
                label,
                f"{subject}: {describe_os_error(error)}",
                line_number=line_number,
                keyword=keyword,
            )
        )

    def _report_syntax_error(self, error: ScriptSyntaxError) -> None:
        logger.debug(f"line {error.line_number}: syntax error: {error.message}")
        self.report(
            StepResult.failure(
                SYNTAX_ERROR_LABEL,
                error.message,
                line_number=error.line_number,
                keyword=error.keyword,
            )
        )

    def _report_unknown(self, command: UnknownCommand) -> None:
        logger.debug(command.get_summary())
        self.report(
            StepResult.failure(
                SYNTAX_ERROR_LABEL,
                f"unknown command '{command.raw_token}'",
                line_number=command.line_number,
                keyword=command.raw_token,
            )
        )

    def _change_directory(self, command: ChangeDirectory) -> bool:
        """Enter the directory named by a ``dir`` command and report it.

        On failure the working directory is left unchanged.

        Args:
            command: The decoded ``dir`` command.

        Returns:
            True if the directory was entered.
        """
        try:
            new_directory = self.navigator.change_to(command.target)
        except OSError as e:
            self._report_os_error(
                "failed to change directory to",
                command.target,
                e,
                command.line_number,
                command.keyword,
            )
            return False
        self._report_success(
            "changed directory to:",
            str(new_directory),
            command.line_number,
            command.keyword,
        )
        return True
