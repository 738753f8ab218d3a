import base64
from typing import Optional
from urllib.parse import quote_plus, unquote_plus

from data_url_utils.utils.env import get_default_encoding


def resolve_encoding(encoding: Optional[str]) -> str:
    return encoding or get_default_encoding()


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode_base64(data: bytes) -> bytes:
    return base64.b64decode(data, validate=True)


def ascii_bytes(s: str, errors: str = "strict") -> bytes:
    return s.encode("ascii", errors=errors)


def ascii_text(data: bytes) -> str:
    return data.decode("ascii", errors="replace")


# Spaces are encoded as "+" and "+" is decoded back to a space,
# the same way form values are handled.
# Only letters, digits and "_.-~" are left unescaped, so "!*()" are escaped.
def percent_encode(s: str) -> str:
    return quote_plus(s)


def percent_decode(s: str) -> str:
    return unquote_plus(s)
