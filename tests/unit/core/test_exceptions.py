"""Unit tests for the exception taxonomy."""

import pytest

from kvrepl.core.exceptions import (
    ApplicationError,
    ArityError,
    BackendError,
    NotFoundError,
    PreconditionError,
    ShellSyntaxError,
    UnknownInstructionError,
    UnterminatedQuoteError,
)


class TestMessages:
    """Messages are the exact console text."""

    def test_unknown_instruction(self):
        assert UnknownInstructionError("x").message == "Unknown instruction 'x' !"

    def test_precondition(self):
        error = PreconditionError("dump", "Opened Database")
        assert error.message == "error: dump requires Opened Database"

    def test_arity(self):
        assert ArityError("read", 1, 3).message == "error: read expected 1 arguments got 3"

    def test_not_found_default_status(self):
        assert NotFoundError().message == "NotFound: "


class TestHierarchy:
    """Every error is an ApplicationError with a stable code."""

    @pytest.mark.parametrize(
        "error, code",
        [
            (UnterminatedQuoteError("'", 0), "SYN_UNTERMINATED_QUOTE"),
            (UnknownInstructionError("x"), "CMD_UNKNOWN"),
            (PreconditionError("read", "Opened Database"), "CMD_PRECONDITION"),
            (ArityError("read", 1, 0), "CMD_ARITY"),
            (BackendError(), "SYS_BACKEND_ERROR"),
            (NotFoundError(), "RES_NOT_FOUND"),
        ],
    )
    def test_codes(self, error, code):
        assert isinstance(error, ApplicationError)
        assert error.code == code

    def test_syntax_and_backend_families(self):
        assert isinstance(UnterminatedQuoteError("'", 0), ShellSyntaxError)
        assert isinstance(NotFoundError(), BackendError)

    def test_str_is_message(self):
        assert str(ArityError("write", 2, 1)) == "error: write expected 2 arguments got 1"
