from typing import Callable, Dict

from unbackslash.error import InvalidDigitsError, InvalidScalarValueError
from unbackslash.types import (
    HEX_DIGITS,
    MAX_CODEPOINT,
    OCTAL_DIGITS,
    SURROGATE_MAX,
    SURROGATE_MIN,
)


def is_octal_digit(ch: str) -> bool:
    return ch in OCTAL_DIGITS


def is_hex_digit(ch: str) -> bool:
    return ch in HEX_DIGITS


_DIGIT_CHECKS: Dict[int, Callable[[str], bool]] = {
    8: is_octal_digit,
    16: is_hex_digit,
}


def parse_radix(digits: str, base: int) -> int:
    """
    Parses `digits` as an unsigned integer in `base` (8 or 16).

    Unlike `int(digits, base)`, only plain ASCII digits are accepted: no sign,
    no underscores, no surrounding whitespace and no `0x`/`0o` prefix.
    """
    is_digit = _DIGIT_CHECKS.get(base)
    if is_digit is None:
        raise ValueError(f"Unsupported base {base}, expected one of 8, 16.")
    if not digits or not all(is_digit(ch) for ch in digits):
        raise InvalidDigitsError(digits, base)
    return int(digits, base)


def is_scalar_value(value: int) -> bool:
    if value < 0 or value > MAX_CODEPOINT:
        return False
    return not SURROGATE_MIN <= value <= SURROGATE_MAX


def to_scalar_char(value: int) -> str:
    if not is_scalar_value(value):
        raise InvalidScalarValueError(value)
    return chr(value)
