"""Domain services for PetAdopt API."""

from .base import EntityService
from .users_service import UsersService
from .pets_service import PetsService
from .adoption_workflow import AdoptionWorkflow
from .mock_generator import MockDataGenerator

__all__ = [
    "EntityService",
    "UsersService",
    "PetsService",
    "AdoptionWorkflow",
    "MockDataGenerator",
]
