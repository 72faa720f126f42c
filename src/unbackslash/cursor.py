from __future__ import annotations

from typing import Optional


class Cursor:
    """
    Forward-only read position over an immutable string.

    Characters are never removed from the underlying string; consuming one
    only advances `position`.
    """

    def __init__(self, source: str) -> None:
        self._source: str = source
        self._position: int = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._source) - self._position

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._source)

    def peek(self) -> Optional[str]:
        if self.exhausted:
            return None
        return self._source[self._position]

    def pop(self) -> Optional[str]:
        ch = self.peek()
        if ch is not None:
            self._position += 1
        return ch

    def take(self, count: int) -> str:
        """Consumes up to `count` characters and returns them."""
        if count < 0:
            raise ValueError("Cannot take a negative number of characters.")
        chunk = self._source[self._position : self._position + count]
        self._position += len(chunk)
        return chunk
