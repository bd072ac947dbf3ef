"""
Mock data endpoints: previews of generated records and bulk insertion.
"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ..services import MockDataGenerator, PetsService, UsersService
from ..utils.helpers import error_response, parse_count, parse_quantity, success_response
from .dependencies import get_mock_generator, get_pets_service, get_users_service

router = APIRouter(prefix="/api/mocks", tags=["mocks"])


@router.get("/mockingpets")
async def get_mocking_pets(
    request: Request,
    quantity: Optional[str] = Query(default=None),
    generator: MockDataGenerator = Depends(get_mock_generator)
):
    """Generate fake pets without saving them."""
    count = parse_quantity(quantity, request.app.state.settings.mock_default_pets)
    pets = generator.generate_pets(count)
    return success_response(payload=pets, count=len(pets))


@router.get("/mockingusers")
async def get_mocking_users(
    request: Request,
    quantity: Optional[str] = Query(default=None),
    generator: MockDataGenerator = Depends(get_mock_generator)
):
    """Generate fake users without saving them."""
    count = parse_quantity(quantity, request.app.state.settings.mock_default_users)
    users = generator.generate_users(count)
    return success_response(payload=users, count=len(users))


@router.post("/generateData")
async def generate_data(
    data: Optional[Dict[str, Any]] = Body(default=None),
    generator: MockDataGenerator = Depends(get_mock_generator),
    users: UsersService = Depends(get_users_service),
    pets: PetsService = Depends(get_pets_service)
):
    """Generate fake users and pets and insert them into the store."""
    data = data or {}
    try:
        results = await generator.insert_generated(
            users,
            pets,
            users=parse_count(data.get("users", 0)),
            pets=parse_count(data.get("pets", 0))
        )
    except Exception as e:
        logger.error(f"Mock data generation failed: {e}")
        return JSONResponse(status_code=500, content=error_response(str(e)))

    return success_response(payload=results, message="Data generated successfully")
