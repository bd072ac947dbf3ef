"""
Record identifiers.

Identifiers are 24 hexadecimal characters, generated by the service rather
than by the backing store so every backend shares one format.
"""

import re
import secrets

OBJECT_ID_LENGTH = 24
OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def generate_object_id() -> str:
    """Generate a new random 24-character hexadecimal identifier."""
    return secrets.token_hex(OBJECT_ID_LENGTH // 2)


def check_object_id(value: str) -> str:
    """Raise ValueError unless ``value`` is a well-formed identifier."""
    if not OBJECT_ID_PATTERN.match(value):
        raise ValueError("must be a 24-character hexadecimal ID")
    return value
