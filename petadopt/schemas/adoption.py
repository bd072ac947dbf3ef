"""
Adoption record model.
"""

from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .identifiers import check_object_id, generate_object_id


class Adoption(BaseModel):
    """Log entry recording that a user adopted a pet."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=generate_object_id, alias="_id")
    owner: str = Field(..., description="ID of the adopting user")
    pet: str = Field(..., description="ID of the adopted pet")

    @field_validator("id", "owner", "pet")
    @classmethod
    def validate_ids(cls, v: str) -> str:
        return check_object_id(v)

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible document shape."""
        return self.model_dump(mode="json", by_alias=True)
