"""
Users service tests against the in-memory collection
"""

import pytest
from bson import ObjectId

from services.users_service import UsersService
from infrastructure import InMemoryCollection, failing_collection


@pytest.fixture()
def service():
    return UsersService(InMemoryCollection())


@pytest.mark.asyncio
async def test_create_assigns_identifier(service):
    result = await service.create_user({"name": "John Doe", "email": "john@example.com"})

    assert result.success
    assert result.count == 1
    assert ObjectId.is_valid(result.data[0]["_id"])
    assert "age" not in result.data[0]


@pytest.mark.asyncio
async def test_create_rejects_document_without_email(service):
    result = await service.create_user({"name": "John Doe"})

    assert not result.success
    assert result.error_type == "VALIDATION_ERROR"
    assert service.collection.documents == {}


@pytest.mark.asyncio
async def test_list_returns_all_documents(service, user_factory):
    for _ in range(3):
        await service.create_user(user_factory.generate_user())

    result = await service.list_users()

    assert result.success
    assert result.count == 3
    assert all(isinstance(user["_id"], str) for user in result.data)


@pytest.mark.asyncio
async def test_get_missing_user_is_not_found(service):
    result = await service.get_user_by_id(str(ObjectId()))

    assert not result.success
    assert result.error_type == "RESOURCE_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_malformed_identifier(service):
    result = await service.get_user_by_id("not-an-id")

    assert not result.success
    assert result.error_type == "INVALID_IDENTIFIER"
    assert "not-an-id" in result.error


@pytest.mark.asyncio
async def test_update_applies_fields(service):
    created = await service.create_user({"name": "Jane Roe", "email": "jane@example.com", "age": 41})
    user_id = created.data[0]["_id"]

    result = await service.update_user(user_id, {"name": "Jane Doe", "email": "jane@example.com"})

    assert result.success
    assert result.data[0] == {"_id": user_id, "name": "Jane Doe", "email": "jane@example.com", "age": 41}


@pytest.mark.asyncio
async def test_delete_then_delete_again(service):
    created = await service.create_user({"name": "John Doe", "email": "john@example.com"})
    user_id = created.data[0]["_id"]

    first = await service.delete_user(user_id)
    second = await service.delete_user(user_id)

    assert first.success
    assert first.data[0]["_id"] == user_id
    assert second.error_type == "RESOURCE_NOT_FOUND"


@pytest.mark.asyncio
async def test_store_failures_pass_message_through():
    service = UsersService(failing_collection("connection reset"))

    results = [
        await service.list_users(),
        await service.get_user_by_id(str(ObjectId())),
        await service.create_user({"name": "John Doe", "email": "john@example.com"}),
        await service.update_user(str(ObjectId()), {"name": "John Doe", "email": "john@example.com"}),
        await service.delete_user(str(ObjectId())),
    ]

    for result in results:
        assert not result.success
        assert result.error == "connection reset"
        assert result.error_type == "DATABASE_ERROR"
