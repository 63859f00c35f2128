"""Exception hierarchy for the xeon script engine.

Exception Hierarchy:
    XeonError (base)
    ├── ScriptReadError - the script file could not be read
    ├── ScriptSyntaxError - a line is missing required arguments
    └── WorkingDirectoryRestoreError - forward mode could not return to its origin

Filesystem failures of individual commands are plain ``OSError``s. The
executors catch those at each line and report them; they never escape a run.

Example:
    Handling a forward run that could not restore its origin::

        try:
            ForwardExecutor(report).run(script)
        except WorkingDirectoryRestoreError as e:
            print(f"fatal: {e}")
            sys.exit(1)
"""

from pathlib import Path


class XeonError(Exception):
    """Base exception for all xeon errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


def describe_os_error(error: BaseException) -> str:
    """Return the system error text of an exception.

    Args:
        error: Usually an OSError raised by a filesystem call.

    Returns:
        ``strerror`` when the OS supplied one, otherwise ``str(error)``.
    """
    strerror = getattr(error, "strerror", None)
    if strerror:
        return strerror
    return str(error)


class ScriptReadError(XeonError):
    """The script file could not be read.

    Attributes:
        message: Human-readable error description.
        path: The script path that failed.
        cause: The underlying exception.
    """

    def __init__(self, path: Path, cause: Exception) -> None:
        """Initialize the exception.

        Args:
            path: The script path that failed.
            cause: The underlying exception.
        """
        self.path = path
        self.cause = cause
        super().__init__(describe_os_error(cause))


class ScriptSyntaxError(XeonError):
    """A script line violates its command's arity.

    Never fatal: the executors report it and move on to the next line.

    Attributes:
        message: What the command requires (e.g., "mkdir requires a directory name").
        line_number: 1-based line that failed to parse.
        keyword: The command keyword of that line.
    """

    def __init__(self, message: str, line_number: int, keyword: str) -> None:
        """Initialize the exception.

        Args:
            message: What the command requires.
            line_number: 1-based line that failed to parse.
            keyword: The command keyword of that line.
        """
        self.line_number = line_number
        self.keyword = keyword
        super().__init__(message)


class WorkingDirectoryRestoreError(XeonError):
    """Forward mode could not return to the directory it started in.

    The only failure of the engine that ends the process.

    Attributes:
        message: Human-readable error description.
        origin: The directory that could not be restored.
        cause: The underlying OSError.
    """

    def __init__(self, origin: Path, cause: Exception) -> None:
        """Initialize the exception.

        Args:
            origin: The directory that could not be restored.
            cause: The underlying OSError.
        """
        self.origin = origin
        self.cause = cause
        super().__init__(
            f"failed to restore working directory {origin}: {describe_os_error(cause)}"
        )
