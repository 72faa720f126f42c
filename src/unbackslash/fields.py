from typing import Annotated

from pydantic import AfterValidator

from unbackslash.decoder import unescape


def _validate_escaped_literal(value: str) -> str:
    decoded = unescape(value)
    if decoded is None:
        raise ValueError("value is not a validly escaped literal")
    return decoded


Unescaped = Annotated[str, AfterValidator(_validate_escaped_literal)]
"""A `str` field that is decoded with `unescape` during validation."""
