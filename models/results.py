"""Step result models.

Executors never write to the terminal themselves. Every success, failure and
printed message becomes a StepResult handed to a report callback, in the
order lines are processed. The CLI renders them; tests collect them.
"""

from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


class Outcome(str, Enum):
    """What happened when a line was processed.

    Values:
        SUCCESS: The filesystem operation or navigation succeeded.
        FAILURE: A syntax or filesystem error occurred; the run continues.
        OUTPUT: Text produced by a ``print`` command.
        SKIPPED: The line has no effect in the current pass.
    """

    SUCCESS = "success"
    FAILURE = "failure"
    OUTPUT = "output"
    SKIPPED = "skipped"


class StepResult(BaseModel):
    """One reported event of a script run.

    Args:
        line_number: 1-based script line that produced this result.
        keyword: Command keyword (or the unrecognized token).
        outcome: What happened.
        label: Leading part of the message (e.g., "created directory:").
        detail: Trailing part of the message (paths, error text).
    """

    model_config = ConfigDict(frozen=True)

    line_number: Optional[int] = Field(
        default=None, description="1-based script line that produced this result"
    )
    keyword: str = Field(default="", description="Command keyword")
    outcome: Outcome = Field(description="What happened")
    label: str = Field(default="", description="Leading part of the message")
    detail: str = Field(default="", description="Trailing part of the message")

    @property
    def is_error(self) -> bool:
        return self.outcome == Outcome.FAILURE

    @property
    def message(self) -> str:
        """Return the full plain-text message.

        Returns:
            Label and detail joined by a space, skipping empty parts.
        """
        return " ".join(part for part in (self.label, self.detail) if part)

    @classmethod
    def success(
        cls, label: str, detail: str = "", line_number: Optional[int] = None, keyword: str = ""
    ) -> "StepResult":
        return cls(
            line_number=line_number,
            keyword=keyword,
            outcome=Outcome.SUCCESS,
            label=label,
            detail=detail,
        )

    @classmethod
    def failure(
        cls, label: str, detail: str = "", line_number: Optional[int] = None, keyword: str = ""
    ) -> "StepResult":
        return cls(
            line_number=line_number,
            keyword=keyword,
            outcome=Outcome.FAILURE,
            label=label,
            detail=detail,
        )

    @classmethod
    def output(cls, text: str, line_number: Optional[int] = None) -> "StepResult":
        return cls(
            line_number=line_number,
            keyword="print",
            outcome=Outcome.OUTPUT,
            detail=text,
        )


ReportCallback = Callable[[StepResult], None]
