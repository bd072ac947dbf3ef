"""
Pet records: listing, lookup, creation (with or without image), partial
update and deletion.
"""

from typing import Any, Dict, Optional

from ..errors import ServiceError
from ..schemas.pet_data import PetUpdate
from ..utils.store_clients import DocumentStore
from ..utils.validators import validate_pet_data
from .base import EntityService


class PetsService(EntityService):
    """Service for the pets collection."""

    entity_label = "Pet"

    def __init__(self, store: DocumentStore, collection: str = "pets"):
        super().__init__(store, collection)

    async def create(self, data: Dict[str, Any], image: Optional[str] = None) -> Dict[str, Any]:
        """
        Validate and insert a new pet.

        The pet always starts un-adopted and without owner.

        Args:
            data: Pet fields
            image: Stored image reference, overriding any ``image`` in data

        Returns:
            The stored pet document
        """
        if image is not None:
            data = {**data, "image": image}
        is_valid, error, pet = validate_pet_data(data)
        if not is_valid:
            raise ServiceError.validation(error)
        return await self.insert(pet.to_document())

    async def update(self, pet_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a partial update, including direct edits of ``adopted``/``owner``."""
        self.check_id(pet_id)
        changes = PetUpdate(**data).to_changes()
        return await self.apply_changes(pet_id, changes)
