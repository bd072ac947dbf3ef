"""
Pet endpoints: list, get, create (plain or with image), partial update, delete.
"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, File, Form, Request, UploadFile

from ..errors import ServiceError
from ..services import PetsService
from ..utils.helpers import success_response
from ..utils.uploads import save_upload
from ..utils.validators import INCOMPLETE_VALUES, validate_pet_data
from .dependencies import get_pets_service

router = APIRouter(prefix="/api/pets", tags=["pets"])


@router.get("")
async def get_all_pets(pets: PetsService = Depends(get_pets_service)):
    """List all pets."""
    return success_response(payload=await pets.list_all())


@router.post("")
async def create_pet(
    data: Optional[Dict[str, Any]] = Body(default=None),
    pets: PetsService = Depends(get_pets_service)
):
    """Create a pet. ``adopted`` and ``owner`` in the body are ignored."""
    return success_response(payload=await pets.create(data or {}))


@router.post("/withimage")
async def create_pet_with_image(
    request: Request,
    name: Optional[str] = Form(default=None),
    specie: Optional[str] = Form(default=None),
    birth_date: Optional[str] = Form(default=None, alias="birthDate"),
    image: Optional[UploadFile] = File(default=None),
    pets: PetsService = Depends(get_pets_service)
):
    """Create a pet from a multipart form carrying an ``image`` file."""
    data = {"name": name, "specie": specie, "birthDate": birth_date}

    # Reject incomplete requests before touching the disk
    is_valid, error, _ = validate_pet_data(data)
    if not is_valid:
        raise ServiceError.validation(error)
    if image is None or not image.filename:
        raise ServiceError.validation(INCOMPLETE_VALUES)

    upload_dir = request.app.state.settings.upload_dir
    image_path = await save_upload(image, upload_dir)
    return success_response(payload=await pets.create(data, image=image_path))


@router.get("/{pid}")
async def get_pet(pid: str, pets: PetsService = Depends(get_pets_service)):
    """Get one pet by ID."""
    return success_response(payload=await pets.get(pid))


@router.put("/{pid}")
async def update_pet(
    pid: str,
    data: Optional[Dict[str, Any]] = Body(default=None),
    pets: PetsService = Depends(get_pets_service)
):
    """Partially update a pet, including ``adopted`` and ``owner``."""
    await pets.update(pid, data or {})
    return success_response(message="pet updated")


@router.delete("/{pid}")
async def delete_pet(pid: str, pets: PetsService = Depends(get_pets_service)):
    """Delete a pet."""
    await pets.delete(pid)
    return success_response(message="pet deleted")
