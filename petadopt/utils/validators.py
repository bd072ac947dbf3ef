"""
Input validation and sanitization utilities.
"""

import re
from typing import Any, Dict, Optional, Tuple
from pydantic import ValidationError
from loguru import logger

from ..schemas.identifiers import OBJECT_ID_PATTERN
from ..schemas.user_profile import User
from ..schemas.pet_data import Pet

INCOMPLETE_VALUES = "Incomplete values"

PET_REQUIRED_FIELDS = (
    ("name", "name"),
    ("specie", "species"),
    ("birthDate", "birth_date"),
)
USER_REQUIRED_FIELDS = ("first_name", "last_name", "email", "password")


def sanitize_string(value: str, max_length: int = 1000) -> str:
    """
    Sanitize string input to prevent injection attacks.

    Args:
        value: Input string
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    if not isinstance(value, str):
        return str(value)

    # Remove null bytes
    value = value.replace("\x00", "")

    # Truncate to max length
    value = value[:max_length]

    # Strip leading/trailing whitespace
    value = value.strip()

    return value


def is_valid_object_id(value: Any) -> bool:
    """
    Check that a caller-supplied token is a well-formed record identifier.

    Only the format is checked; the identifier may or may not exist.

    Args:
        value: Path parameter or other caller-supplied token

    Returns:
        True if the token is 24 hexadecimal characters
    """
    return isinstance(value, str) and bool(OBJECT_ID_PATTERN.match(value))


def validate_email(email: str) -> bool:
    """
    Validate email format.

    Args:
        email: Email address

    Returns:
        True if valid email format
    """
    pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    return bool(re.match(pattern, email))


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid value for {location}: {first.get('msg')}" if location else first.get("msg", str(error))


def validate_pet_data(data: Dict[str, Any]) -> Tuple[bool, Optional[str], Optional[Pet]]:
    """
    Validate pet creation data.

    Name, species and birth date are required. Adoption state cannot be
    set at creation time: ``adopted`` is always false and ``owner`` absent.

    Args:
        data: Pet data dictionary (wire or attribute field names)

    Returns:
        Tuple of (is_valid, error_message, pet)
    """
    values = {}
    for wire_name, attr_name in PET_REQUIRED_FIELDS:
        value = data.get(wire_name, data.get(attr_name))
        if _is_blank(value):
            return False, INCOMPLETE_VALUES, None
        values[wire_name] = value

    try:
        values["name"] = sanitize_string(values["name"], 100)
        values["specie"] = sanitize_string(values["specie"], 50)

        candidate = {
            **values,
            "adopted": False,
            "owner": None,
            "image": data.get("image"),
        }
        if data.get("_id"):
            candidate["_id"] = data["_id"]

        pet = Pet(**candidate)
        return True, None, pet

    except ValidationError as e:
        logger.warning(f"Pet data validation failed: {e}")
        return False, _describe_validation_error(e), None


def validate_user_input(data: Dict[str, Any]) -> Tuple[bool, Optional[str], Optional[User]]:
    """
    Validate user creation data.

    The password is checked for presence only and passed through unchanged;
    callers holding a plaintext password hash it after validation.
    A new user always starts without pets.

    Args:
        data: User data dictionary

    Returns:
        Tuple of (is_valid, error_message, user)
    """
    if any(_is_blank(data.get(field)) for field in USER_REQUIRED_FIELDS):
        return False, INCOMPLETE_VALUES, None

    try:
        candidate = dict(data)
        candidate["first_name"] = sanitize_string(candidate["first_name"], 50)
        candidate["last_name"] = sanitize_string(candidate["last_name"], 50)
        candidate["email"] = sanitize_string(candidate["email"], 254)

        # Validate email
        if not validate_email(candidate["email"]):
            return False, "Invalid email format", None

        if _is_blank(candidate.get("role")):
            candidate.pop("role", None)
        # Pets are only linked through adoptions
        candidate["pets"] = []

        user = User(**candidate)
        return True, None, user

    except ValidationError as e:
        logger.warning(f"User input validation failed: {e}")
        return False, _describe_validation_error(e), None
