"""
User management API routes
All store access goes through the users service; every failure is
returned to the client as {"error": <message>}.
"""

import logging
from fastapi import APIRouter, HTTPException, Depends, Response, status

from models.user import UserInput, REQUIRED_FIELDS_MESSAGE
from services.base_service import ServiceResult
from services.users_service import UsersService, get_users_service
from utils.error_handling import set_endpoint_context

router = APIRouter()
logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"

def _raise_for_result(result: ServiceResult, error_status: int = 500):
    """Map a failed service result to an HTTP error"""
    if result.success:
        return
    if result.error_type == "RESOURCE_NOT_FOUND":
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND)
    raise HTTPException(status_code=error_status, detail=result.error)

@router.get("")
async def list_users(users_service: UsersService = Depends(get_users_service)):
    """List every user"""
    set_endpoint_context("list_users")

    result = await users_service.list_users()
    _raise_for_result(result)
    return result.data

@router.get("/{user_id}")
async def get_user(user_id: str, users_service: UsersService = Depends(get_users_service)):
    """Get a single user"""
    set_endpoint_context("get_user")

    result = await users_service.get_user_by_id(user_id)
    _raise_for_result(result)
    return result.data[0]

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(request: UserInput, users_service: UsersService = Depends(get_users_service)):
    """Create a new user"""
    set_endpoint_context("create_user")

    if not request.has_required_fields():
        raise HTTPException(status_code=400, detail=REQUIRED_FIELDS_MESSAGE)

    result = await users_service.create_user(request.to_fields())
    _raise_for_result(result)
    return result.data[0]

@router.put("/{user_id}")
async def update_user(
    user_id: str,
    request: UserInput,
    users_service: UsersService = Depends(get_users_service)
):
    """Update user details"""
    set_endpoint_context("update_user")

    if not request.has_required_fields():
        raise HTTPException(status_code=400, detail=REQUIRED_FIELDS_MESSAGE)

    # Store failures on update surface as 400, unlike the other operations
    result = await users_service.update_user(user_id, request.to_fields())
    _raise_for_result(result, error_status=400)
    return result.data[0]

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, users_service: UsersService = Depends(get_users_service)):
    """Delete a user"""
    set_endpoint_context("delete_user")

    result = await users_service.delete_user(user_id)
    _raise_for_result(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
