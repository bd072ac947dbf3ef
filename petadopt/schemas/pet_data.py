"""
Pet data models and schemas.
"""

from datetime import date
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .identifiers import OBJECT_ID_PATTERN, check_object_id, generate_object_id


class Species(str, Enum):
    """Species categories used for generated pets."""
    DOG = "dog"
    CAT = "cat"
    BIRD = "bird"
    RABBIT = "rabbit"
    HAMSTER = "hamster"


def _check_owner_id(value: Optional[str]) -> Optional[str]:
    if value is not None and not OBJECT_ID_PATTERN.match(value):
        raise ValueError("owner must be a valid user ID")
    return value


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("may not be null")
    return value


class Pet(BaseModel):
    """Pet record as stored and returned by the API."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "665f1c2e9b1e8a3d4c5f6a7b",
                "name": "Firulais",
                "specie": "dog",
                "birthDate": "2020-01-15",
                "adopted": False,
                "owner": None,
                "image": None
            }
        }
    )

    # Identifiers
    id: str = Field(default_factory=generate_object_id, alias="_id")

    # Basic information
    name: str = Field(..., min_length=1, description="Pet name")
    species: str = Field(..., min_length=1, alias="specie", description="Species")
    birth_date: date = Field(..., alias="birthDate", description="Date of birth")

    # Adoption state
    adopted: bool = Field(default=False)
    owner: Optional[str] = Field(default=None, description="ID of the adopting user")

    # Media
    image: Optional[str] = Field(default=None, description="Image path or URL")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return check_object_id(v)

    @field_validator("owner")
    @classmethod
    def validate_owner(cls, v: Optional[str]) -> Optional[str]:
        """Reject owner references that are not well-formed IDs."""
        return _check_owner_id(v)

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible document shape."""
        return self.model_dump(mode="json", by_alias=True)


class PetUpdate(BaseModel):
    """Partial pet update; only fields present in the request are applied."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(default=None, min_length=1)
    species: Optional[str] = Field(default=None, min_length=1, alias="specie")
    birth_date: Optional[date] = Field(default=None, alias="birthDate")
    adopted: Optional[bool] = Field(default=None)
    owner: Optional[str] = Field(default=None)
    image: Optional[str] = Field(default=None)

    @field_validator("name", "species", "birth_date", "adopted")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Only owner and image may be cleared with null."""
        return _reject_null(v)

    @field_validator("owner")
    @classmethod
    def validate_owner(cls, v: Optional[str]) -> Optional[str]:
        """Reject owner references that are not well-formed IDs."""
        return _check_owner_id(v)

    def to_changes(self) -> Dict[str, Any]:
        """Fields explicitly supplied by the caller, in document shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
