"""
Users service - store access for the User resource
"""

import logging
from typing import Dict, Any
from fastapi import Depends
from pydantic import ValidationError
from pymongo.asynchronous.database import AsyncDatabase

from config.settings import USERS_COLLECTION
from database.connection import get_database
from models.user import UserDocument
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class UsersService(BaseService):
    """Service for user CRUD operations"""

    def __init__(self, collection):
        super().__init__(collection, "users")

    async def list_users(self) -> ServiceResult:
        """Get every user in the order the store returns them"""
        return await self.read()

    async def get_user_by_id(self, user_id: str) -> ServiceResult:
        return await self.get_by_id(user_id)

    async def create_user(self, fields: Dict[str, Any]) -> ServiceResult:
        """
        Create a new user

        Args:
            fields: Submitted user fields; name and email are required,
                anything else is stored as given

        Returns:
            ServiceResult with the created user including its ``_id``
        """
        try:
            document = UserDocument.model_validate(fields)
        except ValidationError as e:
            logger.warning(f"Rejected user document: {e}")
            return ServiceResult(success=False, error=str(e), error_type="VALIDATION_ERROR")

        logger.info(f"Creating new user: {document.email}")
        return await self.create(document.model_dump(exclude_unset=True))

    async def update_user(self, user_id: str, fields: Dict[str, Any]) -> ServiceResult:
        """
        Apply submitted fields to an existing user

        Returns:
            ServiceResult with the updated user, or RESOURCE_NOT_FOUND
        """
        try:
            document = UserDocument.model_validate(fields)
        except ValidationError as e:
            logger.warning(f"Rejected update for user {user_id}: {e}")
            return ServiceResult(success=False, error=str(e), error_type="VALIDATION_ERROR")

        logger.info(f"Updating user: {user_id}")
        return await self.update(user_id, document.model_dump(exclude_unset=True))

    async def delete_user(self, user_id: str) -> ServiceResult:
        logger.info(f"Deleting user: {user_id}")
        return await self.delete(user_id)


def get_users_service(database: AsyncDatabase = Depends(get_database)) -> UsersService:
    """Bind a users service to the shared database handle"""
    return UsersService(database[USERS_COLLECTION])
