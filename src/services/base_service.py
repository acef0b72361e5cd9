"""
Base service layer for unified collection operations
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection

from utils.helpers import serialize_document

logger = logging.getLogger(__name__)

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

def _failure(e: Exception) -> ServiceResult:
    """Translate an exception raised while talking to the store"""
    if isinstance(e, InvalidId):
        error_type = "INVALID_IDENTIFIER"
    else:
        error_type = "DATABASE_ERROR"
    return ServiceResult(success=False, error=str(e), error_type=error_type)

def _not_found(resource_name: str, record_id: str) -> ServiceResult:
    return ServiceResult(
        success=False,
        error=f"No {resource_name} record with id {record_id}",
        error_type="RESOURCE_NOT_FOUND"
    )

class BaseService:
    """Base service wrapping a single collection; errors come back as ServiceResult"""

    def __init__(self, collection: AsyncCollection, resource_name: str):
        self.collection = collection
        self.resource_name = resource_name

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Insert a new document

        Args:
            data: Field values to insert; the store assigns ``_id``

        Returns:
            ServiceResult with the created document
        """
        try:
            document = dict(data)
            result = await self.collection.insert_one(document)
            document["_id"] = result.inserted_id

            return ServiceResult(success=True, data=[serialize_document(document)], count=1)

        except Exception as e:
            logger.error(f"Create operation failed for {self.resource_name}: {e}", exc_info=True)
            return _failure(e)

    async def read(self, filters: Optional[Dict[str, Any]] = None) -> ServiceResult:
        """
        Read all documents matching ``filters`` in store order

        Returns:
            ServiceResult with matched documents
        """
        try:
            documents = await self.collection.find(filters or {}).to_list(length=None)
            data = [serialize_document(document) for document in documents]
            return ServiceResult(success=True, data=data, count=len(data))

        except Exception as e:
            logger.error(f"Read operation failed for {self.resource_name}: {e}")
            return _failure(e)

    async def get_by_id(self, record_id: str) -> ServiceResult:
        """Get a single document by its identifier"""
        try:
            document = await self.collection.find_one({"_id": ObjectId(record_id)})
            if document is None:
                return _not_found(self.resource_name, record_id)

            return ServiceResult(success=True, data=[serialize_document(document)], count=1)

        except Exception as e:
            logger.error(f"Get by id failed for {self.resource_name} {record_id}: {e}")
            return _failure(e)

    async def update(self, record_id: str, data: Dict[str, Any]) -> ServiceResult:
        """
        Apply ``data`` to a document with $set semantics

        Args:
            record_id: Identifier of the document to update
            data: Field values to set

        Returns:
            ServiceResult with the post-update document
        """
        try:
            document = await self.collection.find_one_and_update(
                {"_id": ObjectId(record_id)},
                {"$set": data},
                return_document=ReturnDocument.AFTER
            )
            if document is None:
                return _not_found(self.resource_name, record_id)

            return ServiceResult(success=True, data=[serialize_document(document)], count=1)

        except Exception as e:
            logger.error(f"Update operation failed for {self.resource_name} {record_id}: {e}", exc_info=True)
            return _failure(e)

    async def delete(self, record_id: str) -> ServiceResult:
        """Permanently remove a document"""
        try:
            document = await self.collection.find_one_and_delete({"_id": ObjectId(record_id)})
            if document is None:
                return _not_found(self.resource_name, record_id)

            return ServiceResult(success=True, data=[serialize_document(document)], count=1)

        except Exception as e:
            logger.error(f"Delete operation failed for {self.resource_name} {record_id}: {e}", exc_info=True)
            return _failure(e)
