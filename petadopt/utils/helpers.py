"""
Helper utilities for PetAdopt API.

Response envelopes: every response carries ``status`` and one of
``payload``, ``message`` or ``error``.
"""

from typing import Any, Dict, Optional

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


def success_response(
    payload: Any = None,
    message: Optional[str] = None,
    **extra: Any
) -> Dict[str, Any]:
    """
    Build a success envelope.

    Args:
        payload: Response data, omitted when None
        message: Human-readable outcome, omitted when None
        **extra: Additional top-level keys (e.g. ``count``)

    Returns:
        Envelope dictionary
    """
    body: Dict[str, Any] = {"status": STATUS_SUCCESS}
    if message is not None:
        body["message"] = message
    if payload is not None:
        body["payload"] = payload
    body.update(extra)
    return body


def error_response(error: str, **extra: Any) -> Dict[str, Any]:
    """Build an error envelope; ``extra`` may carry ``name``, ``details``, ``path`` or ``message``."""
    body: Dict[str, Any] = {"status": STATUS_ERROR, "error": error}
    body.update({key: value for key, value in extra.items() if value is not None})
    return body


def parse_quantity(raw: Optional[str], default: int) -> int:
    """
    Parse a ``quantity`` query value.

    Missing, zero or non-numeric values fall back to ``default``; a leading
    integer is honoured (``"25abc"`` -> 25); negative values yield 0.
    """
    if raw is None:
        return default

    text = raw.strip()
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char

    if not digits or int(digits) == 0:
        return default
    return max(0, sign * int(digits))


def parse_count(value: Any) -> int:
    """Coerce a bulk-generation count from a JSON body; anything unusable counts as 0."""
    if isinstance(value, bool):
        return 0
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0
