import logging
from typing import List

from unbackslash.cursor import Cursor
from unbackslash.error import (
    EscapeSequenceError,
    TrailingBackslashError,
    UnexpectedEndOfInputError,
    UnknownEscapeError,
    UnterminatedUnicodeEscapeError,
)
from unbackslash.helpers import is_octal_digit, parse_radix, to_scalar_char
from unbackslash.types import (
    BACKSLASH,
    BRACE_CLOSE,
    BRACE_OPEN,
    BYTE_SELECTOR,
    BYTE_WIDTH,
    NAMED_ESCAPES,
    OCTAL_THREE_DIGIT_LEADS,
    UNICODE_SELECTOR,
    UNICODE_SHORT_WIDTH,
    EscapeForm,
)

logger = logging.getLogger(__name__)


def unescape(s: str) -> str | None:
    r"""
    Converts a string with backslash escapes written out as literal backslash
    characters into the string they stand for.

    This is the inverse of Rust's `str::escape_default`. Supported escapes are
    \b, \f, \n, \r, \t, \', \", \\, \uXXXX, \u{X...}, \xXX and one to three
    digit octal escapes.

    Returns `None` if any escape sequence is invalid. No partially decoded
    string is ever returned.
    """
    try:
        return _decode(Cursor(s))
    except EscapeSequenceError as e:
        logger.debug("Rejected escaped literal %r: %s", s, e)
        return None


def _decode(cursor: Cursor) -> str:
    decoded: List[str] = []

    while (ch := cursor.pop()) is not None:
        if ch != BACKSLASH:
            decoded.append(ch)
            continue
        decoded.append(_decode_escape(cursor))

    return "".join(decoded)


def _decode_escape(cursor: Cursor) -> str:
    selector = cursor.pop()
    if selector is None:
        raise TrailingBackslashError()

    if selector in NAMED_ESCAPES:
        return NAMED_ESCAPES[selector]
    if selector == UNICODE_SELECTOR:
        return _decode_unicode(cursor)
    if selector == BYTE_SELECTOR:
        return _decode_byte(cursor)
    if is_octal_digit(selector):
        return _decode_octal(selector, cursor)
    raise UnknownEscapeError(selector)


def _decode_unicode(cursor: Cursor) -> str:
    if cursor.peek() == BRACE_OPEN:
        # \u{X...} with any number of digits
        cursor.pop()
        digits = ""
        while (ch := cursor.pop()) != BRACE_CLOSE:
            if ch is None:
                raise UnterminatedUnicodeEscapeError(digits)
            digits += ch
    else:
        digits = _take_exact(cursor, UNICODE_SHORT_WIDTH, EscapeForm.UNICODE)

    return to_scalar_char(parse_radix(digits, 16))


def _decode_byte(cursor: Cursor) -> str:
    digits = _take_exact(cursor, BYTE_WIDTH, EscapeForm.BYTE)
    return to_scalar_char(parse_radix(digits, 16))


def _decode_octal(lead: str, cursor: Cursor) -> str:
    digits = lead
    if lead in OCTAL_THREE_DIGIT_LEADS:
        if (digit := _take_octal_digit(cursor)) is not None:
            digits += digit
            digits += _take_octal_digit(cursor) or ""
    else:
        digits += _take_octal_digit(cursor) or ""

    return to_scalar_char(parse_radix(digits, 8))


def _take_exact(cursor: Cursor, count: int, form: EscapeForm) -> str:
    chunk = cursor.take(count)
    if len(chunk) < count:
        raise UnexpectedEndOfInputError(form, count, len(chunk))
    return chunk


def _take_octal_digit(cursor: Cursor) -> str | None:
    """Consumes the next character only if it is an octal digit."""
    ch = cursor.peek()
    if ch is None or not is_octal_digit(ch):
        return None
    return cursor.pop()
