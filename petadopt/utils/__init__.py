"""Utility modules for PetAdopt API."""

from .store_clients import DocumentStore, InMemoryStore, FirestoreStore, create_store
from .validators import is_valid_object_id, validate_user_input, validate_pet_data
from .helpers import success_response, error_response
from .security import hash_password, check_password

__all__ = [
    "DocumentStore",
    "InMemoryStore",
    "FirestoreStore",
    "create_store",
    "is_valid_object_id",
    "validate_user_input",
    "validate_pet_data",
    "success_response",
    "error_response",
    "hash_password",
    "check_password",
]
