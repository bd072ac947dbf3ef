"""
User endpoints: list, get, partial update, delete.
"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends

from ..services import UsersService
from ..utils.helpers import success_response
from .dependencies import get_users_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def get_all_users(users: UsersService = Depends(get_users_service)):
    """List all users."""
    return success_response(payload=await users.list_all())


@router.get("/{uid}")
async def get_user(uid: str, users: UsersService = Depends(get_users_service)):
    """Get one user by ID."""
    return success_response(payload=await users.get(uid))


@router.put("/{uid}")
async def update_user(
    uid: str,
    data: Optional[Dict[str, Any]] = Body(default=None),
    users: UsersService = Depends(get_users_service)
):
    """Partially update a user; omitted fields keep their values."""
    await users.update(uid, data or {})
    return success_response(message="User updated")


@router.delete("/{uid}")
async def delete_user(uid: str, users: UsersService = Depends(get_users_service)):
    """Delete a user. Pets owned by the user are left untouched."""
    await users.delete(uid)
    return success_response(message="User deleted")
