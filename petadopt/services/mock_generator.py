"""
Mock data generator.

Produces synthetic users and pets for previews and for seeding the store.
All generated users share one password hash, supplied by the caller.
"""

import re
from typing import Any, Dict, List, Optional
from faker import Faker
from loguru import logger

from ..schemas.identifiers import generate_object_id
from ..schemas.pet_data import Species
from ..schemas.user_profile import UserRole
from .pets_service import PetsService
from .users_service import UsersService

class MockDataGenerator:
    """Generates fake user and pet records."""

    def __init__(self, password_hash: str, seed: Optional[int] = None, locale: str = "en_US"):
        """
        Initialize the generator.

        Args:
            password_hash: Hash stored as the password of every generated user
            seed: Optional seed for reproducible output
            locale: Faker locale
        """
        self.password_hash = password_hash
        self.faker = Faker(locale)
        if seed is not None:
            self.faker.seed_instance(seed)

    def _email_for(self, first_name: str, last_name: str) -> str:
        parts = [re.sub(r"[^a-z0-9]", "", name.lower()) for name in (first_name, last_name)]
        local = ".".join(part for part in parts if part) or "user"
        suffix = self.faker.random_int(min=1, max=9999)
        return f"{local}{suffix}@{self.faker.free_email_domain()}"

    def generate_user(self) -> Dict[str, Any]:
        """Generate one user record (not persisted)."""
        first_name = self.faker.first_name()
        last_name = self.faker.last_name()
        return {
            "_id": generate_object_id(),
            "first_name": first_name,
            "last_name": last_name,
            "email": self._email_for(first_name, last_name),
            "password": self.password_hash,
            "role": self.faker.random_element([role.value for role in UserRole]),
            "pets": [],
        }

    def generate_pet(self) -> Dict[str, Any]:
        """Generate one pet record (not persisted)."""
        species = self.faker.random_element([s.value for s in Species])
        birth_date = self.faker.date_between(start_date="-10y", end_date="today")
        return {
            "_id": generate_object_id(),
            "name": self.faker.first_name(),
            "specie": species,
            "birthDate": birth_date.isoformat(),
            "adopted": False,
            "owner": None,
            "image": self.faker.image_url(),
        }

    def generate_users(self, quantity: int) -> List[Dict[str, Any]]:
        return [self.generate_user() for _ in range(max(0, quantity))]

    def generate_pets(self, quantity: int) -> List[Dict[str, Any]]:
        return [self.generate_pet() for _ in range(max(0, quantity))]

    async def insert_generated(
        self,
        users_service: UsersService,
        pets_service: PetsService,
        users: int = 0,
        pets: int = 0
    ) -> Dict[str, int]:
        """
        Generate records and insert them one at a time through the regular create path.

        Args:
            users_service: Service used to create users
            pets_service: Service used to create pets
            users: Number of users to create
            pets: Number of pets to create

        Returns:
            Counts of created records: ``usersCreated`` and ``petsCreated``
        """
        results = {"usersCreated": 0, "petsCreated": 0}

        for user in self.generate_users(users):
            await users_service.create(user)
            results["usersCreated"] += 1

        for pet in self.generate_pets(pets):
            await pets_service.create(pet)
            results["petsCreated"] += 1

        logger.info(
            f"Inserted mock data: {results['usersCreated']} users, {results['petsCreated']} pets"
        )
        return results
