from unbackslash.types import EscapeForm


class EscapeSequenceError(Exception):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            "Invalid escape sequence" + (f": {message}" if message else "")
        )
        self.message = message


class TrailingBackslashError(EscapeSequenceError):
    def __init__(self) -> None:
        super().__init__("input ends with a lone backslash")


class UnknownEscapeError(EscapeSequenceError):
    def __init__(self, selector: str) -> None:
        super().__init__(f"unknown escape selector '{selector}'")
        self.selector = selector


class UnterminatedUnicodeEscapeError(EscapeSequenceError):
    def __init__(self, digits: str) -> None:
        super().__init__(f"braced unicode escape '{{{digits}' is never closed")
        self.digits = digits


class UnexpectedEndOfInputError(EscapeSequenceError):
    def __init__(self, form: EscapeForm, expected: int, received: int) -> None:
        super().__init__(
            f"{form.value} escape needs {expected} characters, input ended after {received}"
        )
        self.form = form
        self.expected = expected
        self.received = received


class InvalidDigitsError(EscapeSequenceError):
    def __init__(self, digits: str, base: int) -> None:
        super().__init__(f"'{digits}' is not a valid base {base} number")
        self.digits = digits
        self.base = base


class InvalidScalarValueError(EscapeSequenceError):
    def __init__(self, value: int) -> None:
        super().__init__(f"{value:#x} is not a unicode scalar value")
        self.value = value
