"""
Error taxonomy for PetAdopt API.

Every domain failure is a ServiceError tagged with one ErrorKind. The HTTP
layer maps kinds to status codes through STATUS_BY_KIND, so services never
deal with status codes directly.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Closed set of domain error variants."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 400,
    ErrorKind.INTERNAL: 500,
}

NAME_BY_KIND = {
    ErrorKind.VALIDATION: "ValidationError",
    ErrorKind.NOT_FOUND: "NotFoundError",
    ErrorKind.CONFLICT: "ConflictError",
    ErrorKind.INTERNAL: "InternalServerError",
}


class ServiceError(Exception):
    """A domain fault carrying its kind and a client-facing message."""

    def __init__(self, kind: ErrorKind, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    @property
    def name(self) -> str:
        return NAME_BY_KIND[self.kind]

    @classmethod
    def validation(cls, message: str = "Bad request", details: Optional[Any] = None) -> "ServiceError":
        return cls(ErrorKind.VALIDATION, message, details)

    @classmethod
    def not_found(cls, message: str = "Resource not found") -> "ServiceError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def conflict(cls, message: str) -> "ServiceError":
        return cls(ErrorKind.CONFLICT, message)

    @classmethod
    def internal(cls, message: str = "Internal server error") -> "ServiceError":
        return cls(ErrorKind.INTERNAL, message)

    def __repr__(self) -> str:
        return f"ServiceError(kind={self.kind.value!r}, message={self.message!r})"


class StoreError(Exception):
    """Base class for document store faults."""


class DuplicateKeyError(StoreError):
    """Raised when inserting a document whose identifier already exists."""

    def __init__(self, collection: str, document_id: str):
        super().__init__(f"Duplicate key in '{collection}': {document_id}")
        self.collection = collection
        self.document_id = document_id
