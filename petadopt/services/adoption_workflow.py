"""
Adoption Workflow - pairs a user with a pet.

The only operation that mutates two records together. Preconditions are
checked in a fixed order (identifier format, user existence, pet existence,
adoption state) and the first violation ends the request before anything is
written.
"""

from typing import Any, Dict, List, Optional
from loguru import logger

from ..errors import ServiceError
from ..schemas.adoption import Adoption
from ..utils.store_clients import DocumentStore
from ..utils.validators import is_valid_object_id
from .pets_service import PetsService
from .users_service import UsersService

INVALID_ID_FORMAT = "Invalid ID format"
USER_NOT_FOUND = "user Not found"
PET_NOT_FOUND = "Pet not found"
PET_ALREADY_ADOPTED = "Pet is already adopted"
ADOPTION_NOT_FOUND = "Adoption not found"


class AdoptionWorkflow:
    """
    Runs adoptions and serves the adoption log.

    The pet-side write is a conditional update (``adopted`` false -> true),
    so concurrent requests for the same pet cannot both succeed. If the
    user-side write then fails, the pet-side write is reverted.
    """

    def __init__(
        self,
        store: DocumentStore,
        users: UsersService,
        pets: PetsService,
        collection: str = "adoptions"
    ):
        self.store = store
        self.users = users
        self.pets = pets
        self.collection = collection

    async def adopt(self, user_id: str, pet_id: str) -> Optional[Dict[str, Any]]:
        """
        Adopt a pet on behalf of a user.

        Args:
            user_id: User identifier
            pet_id: Pet identifier

        Returns:
            The adoption record written for this pairing, or None if the
            pairing succeeded but the record could not be stored

        Raises:
            ServiceError: on the first violated precondition
        """
        if not is_valid_object_id(user_id) or not is_valid_object_id(pet_id):
            logger.warning(f"Adoption rejected, malformed ID (user={user_id!r}, pet={pet_id!r})")
            raise ServiceError.validation(INVALID_ID_FORMAT)

        user = await self.users.find(user_id)
        if user is None:
            raise ServiceError.not_found(USER_NOT_FOUND)

        pet = await self.pets.find(pet_id)
        if pet is None:
            raise ServiceError.not_found(PET_NOT_FOUND)

        if pet.get("adopted"):
            logger.info(f"Adoption rejected, pet {pet_id} is already adopted")
            raise ServiceError.conflict(PET_ALREADY_ADOPTED)

        claimed = await self.store.update_if(
            self.pets.collection,
            pet_id,
            expected={"adopted": False},
            changes={"adopted": True, "owner": user_id}
        )
        if not claimed:
            # Another request adopted the pet after the check above
            logger.info(f"Adoption rejected, pet {pet_id} was adopted concurrently")
            raise ServiceError.conflict(PET_ALREADY_ADOPTED)

        try:
            linked = await self.store.add_to_set(self.users.collection, user_id, "pets", pet_id)
            if not linked:
                raise ServiceError.not_found(USER_NOT_FOUND)
        except Exception as e:
            logger.error(f"Linking pet {pet_id} to user {user_id} failed, releasing pet: {e}")
            await self._release_pet(pet_id, user_id)
            raise

        # The pairing is already committed; the log entry is best effort
        try:
            adoption = await self.store.insert(
                self.collection,
                Adoption(owner=user_id, pet=pet_id).to_document()
            )
        except Exception as e:
            logger.error(f"User {user_id} adopted pet {pet_id} but the adoption record was not written: {e}")
            return None

        logger.info(f"User {user_id} adopted pet {pet_id} (adoption {adoption['_id']})")
        return adoption

    async def _release_pet(self, pet_id: str, user_id: str) -> None:
        """Undo the pet-side write of a failed adoption."""
        released = await self.store.update_if(
            self.pets.collection,
            pet_id,
            expected={"adopted": True, "owner": user_id},
            changes={"adopted": False, "owner": None}
        )
        if not released:
            logger.error(f"Could not release pet {pet_id}; it no longer belongs to user {user_id}")

    async def list_adoptions(self) -> List[Dict[str, Any]]:
        """Get all adoption records."""
        return await self.store.find_all(self.collection)

    async def get_adoption(self, adoption_id: str) -> Dict[str, Any]:
        """
        Get one adoption record.

        Args:
            adoption_id: Adoption identifier

        Returns:
            Adoption record
        """
        if not is_valid_object_id(adoption_id):
            raise ServiceError.validation(INVALID_ID_FORMAT)

        adoption = await self.store.find_by_id(self.collection, adoption_id)
        if adoption is None:
            raise ServiceError.not_found(ADOPTION_NOT_FOUND)
        return adoption
