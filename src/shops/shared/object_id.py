"""24-hex-digit identifiers for shops and comments."""

import re
import secrets

_OBJECT_ID = re.compile(r"^[0-9a-fA-F]{24}$")


def new_object_id() -> str:
    return secrets.token_hex(12)


def is_object_id(value) -> bool:
    """True when ``value`` is a string of exactly 24 hexadecimal characters."""
    return isinstance(value, str) and _OBJECT_ID.fullmatch(value) is not None
