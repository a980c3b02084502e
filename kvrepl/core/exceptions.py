"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
The message of every shell-facing error is the exact text shown on the
console, so the session loop prints it without reformatting.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ShellSyntaxError(ApplicationError):
    """Raised when a command line cannot be tokenized."""

    def __init__(self, message: str = "Invalid syntax", code: str = "SYN_INVALID") -> None:
        super().__init__(message, code=code)


class UnterminatedQuoteError(ShellSyntaxError):
    """Raised when a quoted run is still open at end of line."""

    def __init__(self, line: str, column: int) -> None:
        self.line = line
        self.column = column
        super().__init__(
            "Expected quotes or double quotes to be closed",
            code="SYN_UNTERMINATED_QUOTE",
        )

    def diagnostic(self) -> list[str]:
        """Header, the offending line, and a caret under the opening quote."""
        underline = " " * self.column + "^" + "~" * (len(self.line) - self.column - 1)
        return [f"error: {self.message}", self.line, underline]


class UnknownInstructionError(ApplicationError):
    """Raised when the first token names no known command."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown instruction '{token}' !", code="CMD_UNKNOWN")


class PreconditionError(ApplicationError):
    """Raised when a command needs session state that is not present."""

    def __init__(self, command: str, requirement: str) -> None:
        self.command = command
        self.requirement = requirement
        super().__init__(f"error: {command} requires {requirement}", code="CMD_PRECONDITION")


class ArityError(ApplicationError):
    """Raised when a command receives the wrong number of arguments."""

    def __init__(self, command: str, expected: int, actual: int) -> None:
        self.command = command
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"error: {command} expected {expected} arguments got {actual}",
            code="CMD_ARITY",
        )


class BackendError(ApplicationError):
    """Raised when the storage engine reports a failure."""

    def __init__(self, message: str = "IO error: storage failure", code: str = "SYS_BACKEND_ERROR") -> None:
        super().__init__(message, code=code)


class NotFoundError(BackendError):
    """Raised when a key cannot be found."""

    def __init__(self, message: str = "NotFound: ") -> None:
        super().__init__(message, code="RES_NOT_FOUND")
