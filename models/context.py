"""Execution context model."""

from pathlib import Path

from pydantic import BaseModel, Field

from engine.navigator import PathNavigator


class ExecutionContext(BaseModel):
    """Working-directory state owned by the executor that is currently running.

    The process working directory is global, so every change a script makes
    goes through the context's navigator, and the directory that was current
    before the script started is kept here so it can be restored afterwards.

    Args:
        origin: Absolute working directory captured before the script started.
        navigator: Wrapper around the process working directory.
    """

    origin: Path = Field(description="Working directory captured before the run")
    navigator: PathNavigator = Field(default_factory=PathNavigator)

    class Config:
        arbitrary_types_allowed = True

    @classmethod
    def capture(cls, navigator: PathNavigator | None = None) -> "ExecutionContext":
        """Create a context whose origin is the current working directory.

        Args:
            navigator: Navigator to use (defaults to a new PathNavigator).

        Returns:
            New ExecutionContext instance.
        """
        navigator = navigator or PathNavigator()
        return cls(origin=navigator.current(), navigator=navigator)

    def restore_origin(self) -> Path:
        """Change back to the directory captured before the run.

        Returns:
            The restored directory.

        Raises:
            OSError: If the origin can no longer be entered.
        """
        return self.navigator.change_to(self.origin)
