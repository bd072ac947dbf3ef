"""
Configuration management for PetAdopt API.
Loads settings from environment variables and provides typed configuration access.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, testing, production")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Enable debug mode")
    service_name: str = Field(default="PetAdopt API", description="Service display name")
    service_version: str = Field(default="1.0.0", description="Service version")

    # HTTP server
    host: str = Field(default="0.0.0.0", description="Listen address")
    port: int = Field(default=8080, description="Listen port")
    docs_url: str = Field(default="/apidocs", description="Path of the interactive API docs")

    # Document store
    store_backend: str = Field(
        default="memory",
        description="Document store backend: memory, firestore"
    )
    gcp_project_id: str = Field(default="petadopt", description="GCP Project ID")
    gcp_credentials_path: Optional[str] = Field(default=None, description="Path to GCP credentials JSON")
    firestore_database: str = Field(default="(default)", description="Firestore database name")

    # Firestore collections
    firestore_collection_users: str = Field(
        default="users",
        description="Collection for user records"
    )
    firestore_collection_pets: str = Field(
        default="pets",
        description="Collection for pet records"
    )
    firestore_collection_adoptions: str = Field(
        default="adoptions",
        description="Collection for adoption records"
    )

    # Uploads
    upload_dir: str = Field(default="uploads/img", description="Directory for uploaded pet images")

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31, description="bcrypt cost factor")

    # Mock data
    mock_password: str = Field(default="coder123", description="Plaintext password shared by generated users")
    mock_default_pets: int = Field(default=100, ge=0, description="Preview size for generated pets")
    mock_default_users: int = Field(default=50, ge=0, description="Preview size for generated users")
    mock_seed: Optional[int] = Field(default=None, description="Seed for reproducible mock data")

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Convenience access
settings = get_settings()
