from typing import Callable

import pytest

_ESCAPED_CHARS = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
}


def escape_default(s: str) -> str:
    # Same output as Rust's str::escape_default.
    escaped = []
    for ch in s:
        if ch in _ESCAPED_CHARS:
            escaped.append(_ESCAPED_CHARS[ch])
        elif "\x20" <= ch <= "\x7e":
            escaped.append(ch)
        else:
            escaped.append(f"\\u{{{ord(ch):x}}}")
    return "".join(escaped)


@pytest.fixture
def escape() -> Callable[[str], str]:
    return escape_default
