import pytest

from unbackslash.error import (
    EscapeSequenceError,
    InvalidDigitsError,
    InvalidScalarValueError,
    TrailingBackslashError,
    UnexpectedEndOfInputError,
    UnknownEscapeError,
    UnterminatedUnicodeEscapeError,
)
from unbackslash.types import EscapeForm


@pytest.mark.parametrize(
    "error,message",
    [
        (EscapeSequenceError(), "Invalid escape sequence"),
        (EscapeSequenceError("boom"), "Invalid escape sequence: boom"),
        (TrailingBackslashError(), "input ends with a lone backslash"),
        (UnknownEscapeError("q"), "unknown escape selector 'q'"),
        (UnterminatedUnicodeEscapeError("41"), "'{41' is never closed"),
        (
            UnexpectedEndOfInputError(EscapeForm.UNICODE, 4, 2),
            "unicode escape needs 4 characters, input ended after 2",
        ),
        (
            UnexpectedEndOfInputError(EscapeForm.BYTE, 2, 1),
            "byte escape needs 2 characters, input ended after 1",
        ),
        (InvalidDigitsError("zz", 16), "'zz' is not a valid base 16 number"),
        (InvalidScalarValueError(0xD800), "0xd800 is not a unicode scalar value"),
    ],
)
def test_error_messages(error: EscapeSequenceError, message: str):
    assert message in str(error)
    assert str(error).startswith("Invalid escape sequence")


@pytest.mark.parametrize(
    "error",
    [
        TrailingBackslashError(),
        UnknownEscapeError("q"),
        UnterminatedUnicodeEscapeError(""),
        UnexpectedEndOfInputError(EscapeForm.BYTE, 2, 0),
        InvalidDigitsError("", 16),
        InvalidScalarValueError(0x110000),
    ],
)
def test_errors_share_base_class(error: Exception):
    assert isinstance(error, EscapeSequenceError)
