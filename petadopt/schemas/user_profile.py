"""
User profile data models.
"""

from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .identifiers import check_object_id, generate_object_id


class UserRole(str, Enum):
    """User roles."""
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    """User record as stored and returned by the API."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "665f1c2e9b1e8a3d4c5f6a7c",
                "first_name": "John",
                "last_name": "Doe",
                "email": "john.doe@example.com",
                "password": "$2b$10$...",
                "role": "user",
                "pets": []
            }
        }
    )

    id: str = Field(default_factory=generate_object_id, alias="_id")

    # Personal information
    first_name: str = Field(..., min_length=1, description="First name")
    last_name: str = Field(..., min_length=1, description="Last name")
    email: str = Field(..., min_length=3, description="User email address")

    # Credentials are always stored hashed
    password: str = Field(..., min_length=1, description="bcrypt password hash")
    role: UserRole = Field(default=UserRole.USER)

    # Owned pets
    pets: List[str] = Field(
        default_factory=list,
        description="IDs of adopted pets"
    )

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return check_object_id(v)

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible document shape."""
        return self.model_dump(mode="json", by_alias=True)


class UserUpdate(BaseModel):
    """Partial user update; only fields present in the request are applied."""

    model_config = ConfigDict(extra="ignore")

    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=3)
    password: Optional[str] = Field(default=None, min_length=1)
    role: Optional[UserRole] = Field(default=None)

    @field_validator("first_name", "last_name", "email", "password", "role")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Every user field is required, so none may be cleared."""
        if v is None:
            raise ValueError("may not be null")
        return v

    def to_changes(self) -> Dict[str, Any]:
        """Fields explicitly supplied by the caller, in document shape."""
        return self.model_dump(mode="json", exclude_unset=True)
