from unbackslash.cursor import Cursor
from unbackslash.decoder import unescape
from unbackslash.error import EscapeSequenceError
from unbackslash.fields import Unescaped

__all__ = [
    "Cursor",
    "EscapeSequenceError",
    "Unescaped",
    "unescape",
]
