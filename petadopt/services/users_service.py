"""
User records: listing, lookup, partial update, deletion and creation.
"""

from typing import Any, Dict, Optional
from loguru import logger

from ..errors import ServiceError
from ..schemas.user_profile import UserUpdate
from ..utils.security import DEFAULT_ROUNDS, hash_password
from ..utils.store_clients import DocumentStore
from ..utils.validators import validate_user_input
from .base import EntityService


class UsersService(EntityService):
    """Service for the users collection."""

    entity_label = "User"

    def __init__(self, store: DocumentStore, collection: str = "users", bcrypt_rounds: int = DEFAULT_ROUNDS):
        super().__init__(store, collection)
        self.bcrypt_rounds = bcrypt_rounds

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return await self.store.find_one(self.collection, "email", email)

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and insert a user whose password is already hashed.

        Args:
            data: User fields

        Returns:
            The stored user document
        """
        is_valid, error, user = validate_user_input(data)
        if not is_valid:
            raise ServiceError.validation(error)
        return await self.insert(user.to_document())

    async def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a user from a plaintext-password signup request.

        Args:
            data: Signup fields including the plaintext password

        Returns:
            The stored user document
        """
        is_valid, error, user = validate_user_input(data)
        if not is_valid:
            raise ServiceError.validation(error)

        if await self.find_by_email(user.email) is not None:
            logger.warning(f"Signup rejected, email already registered: {user.email}")
            raise ServiceError.conflict("User already exists")

        user.password = hash_password(user.password, self.bcrypt_rounds)
        return await self.insert(user.to_document())

    async def update(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a partial update; a supplied password is hashed first."""
        self.check_id(user_id)
        changes = UserUpdate(**data).to_changes()
        if changes.get("password"):
            changes["password"] = hash_password(changes["password"], self.bcrypt_rounds)
        return await self.apply_changes(user_id, changes)
