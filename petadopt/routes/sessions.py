"""
Session endpoints. Only account registration is provided.
"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends

from ..services import UsersService
from ..utils.helpers import success_response
from .dependencies import get_users_service

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("/register")
async def register(
    data: Optional[Dict[str, Any]] = Body(default=None),
    users: UsersService = Depends(get_users_service)
):
    """Create a user account; the password is stored hashed."""
    user = await users.register(data or {})
    return success_response(payload=user["_id"])
