"""Data schemas and models for PetAdopt API."""

from .identifiers import generate_object_id
from .user_profile import User, UserUpdate, UserRole
from .pet_data import Pet, PetUpdate, Species
from .adoption import Adoption

__all__ = [
    "generate_object_id",
    "User",
    "UserUpdate",
    "UserRole",
    "Pet",
    "PetUpdate",
    "Species",
    "Adoption",
]
