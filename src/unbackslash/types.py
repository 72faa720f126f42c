from enum import Enum
from typing import Dict, Set


class EscapeForm(Enum):
    UNICODE = "unicode"
    BYTE = "byte"


BACKSLASH = "\\"

NAMED_ESCAPES: Dict[str, str] = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "'": "'",
    '"': '"',
    "\\": "\\",
}

UNICODE_SELECTOR = "u"
BYTE_SELECTOR = "x"

BRACE_OPEN = "{"
BRACE_CLOSE = "}"

# fixed widths of \uXXXX and \xXX
UNICODE_SHORT_WIDTH = 4
BYTE_WIDTH = 2

HEX_DIGITS: Set[str] = set("0123456789abcdefABCDEF")
OCTAL_DIGITS: Set[str] = set("01234567")

# leading digits that may be followed by two more octal digits and stay <= 0o377
OCTAL_THREE_DIGIT_LEADS: Set[str] = set("0123")

MAX_CODEPOINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF
