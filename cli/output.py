"""Colored console output for the xeon command line.

Successful operations print to stdout with a green label, failures print to
stderr with a red label, and ``print`` command output is written verbatim.
"""

import sys
from typing import Optional, TextIO

from colorama import Fore, Style

from models.results import Outcome, StepResult


class Console:
    """Writes labelled, optionally colored messages.

    Streams default to whatever ``sys.stdout``/``sys.stderr`` are at the time
    of each write.

    Args:
        color: Whether to emit ANSI color codes.
        show_skipped: Whether SKIPPED results are printed.
        stdout: Stream for normal output.
        stderr: Stream for errors.
    """

    def __init__(
        self,
        color: bool = True,
        show_skipped: bool = False,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.color = color
        self.show_skipped = show_skipped
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def paint(self, text: str, color: str) -> str:
        """Wrap text in a color code when colors are enabled.

        Args:
            text: Text to color.
            color: A colorama ``Fore`` constant.

        Returns:
            The colored (or unchanged) text.
        """
        if not self.color or not text:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def green(self, text: str) -> str:
        return self.paint(text, Fore.GREEN)

    def red(self, text: str) -> str:
        return self.paint(text, Fore.RED)

    def yellow(self, text: str) -> str:
        return self.paint(text, Fore.YELLOW)

    def line(self, *parts: str) -> None:
        """Print parts joined by spaces to stdout."""
        print(" ".join(part for part in parts if part), file=self.stdout)

    def error(self, *parts: str) -> None:
        """Print parts joined by spaces to stderr."""
        print(" ".join(part for part in parts if part), file=self.stderr)

    def success(self, label: str, detail: str = "") -> None:
        self.line(self.green(label), detail)

    def failure(self, label: str, detail: str = "") -> None:
        self.error(self.red(label), detail)

    def warning(self, text: str) -> None:
        self.line(self.yellow(text))

    def report(self, result: StepResult) -> None:
        """Render a StepResult from a script run.

        Usable directly as the executors' report callback.

        Args:
            result: The result to render.
        """
        if result.outcome == Outcome.SUCCESS:
            self.success(result.label, result.detail)
        elif result.is_error:
            self.failure(result.label, result.detail)
        elif result.outcome == Outcome.OUTPUT:
            print(result.detail, file=self.stdout)
        elif self.show_skipped:
            self.line(result.label, result.detail)
