"""
Shared CRUD behaviour for entity services.

Every identifier-taking operation follows the same order: identifier
format check, existence check, then the read or write itself.
"""

from typing import Any, Dict, List, Optional
from loguru import logger

from ..errors import ServiceError
from ..utils.store_clients import DocumentStore
from ..utils.validators import is_valid_object_id


class EntityService:
    """CRUD over one collection of the document store."""

    entity_label = "Entity"

    def __init__(self, store: DocumentStore, collection: str):
        self.store = store
        self.collection = collection

    @property
    def invalid_id_message(self) -> str:
        return f"Invalid {self.entity_label.lower()} ID format"

    @property
    def not_found_message(self) -> str:
        return f"{self.entity_label} not found"

    def check_id(self, document_id: str) -> None:
        """Raise a validation fault if ``document_id`` is malformed."""
        if not is_valid_object_id(document_id):
            logger.warning(f"Rejected malformed {self.entity_label.lower()} ID: {document_id!r}")
            raise ServiceError.validation(self.invalid_id_message)

    async def list_all(self) -> List[Dict[str, Any]]:
        return await self.store.find_all(self.collection)

    async def find(self, document_id: str) -> Optional[Dict[str, Any]]:
        """Plain lookup without format or existence checks."""
        return await self.store.find_by_id(self.collection, document_id)

    async def get(self, document_id: str) -> Dict[str, Any]:
        """Fetch a record, raising validation or not-found faults."""
        self.check_id(document_id)
        document = await self.find(document_id)
        if document is None:
            raise ServiceError.not_found(self.not_found_message)
        return document

    async def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        created = await self.store.insert(self.collection, document)
        logger.info(f"Created {self.entity_label.lower()} {created['_id']}")
        return created

    async def apply_changes(self, document_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``changes`` into an existing record and return the merged record."""
        document = await self.get(document_id)
        if changes:
            await self.store.update(self.collection, document_id, changes)
            document.update(changes)
        logger.info(f"Updated {self.entity_label.lower()} {document_id} fields: {sorted(changes)}")
        return document

    async def delete(self, document_id: str) -> None:
        await self.get(document_id)
        await self.store.delete(self.collection, document_id)
        logger.info(f"Deleted {self.entity_label.lower()} {document_id}")
