"""
pytest configuration and fixtures for the users API suite
The FastAPI app is built per test with the database dependencies overridden,
so no MongoDB server is needed.
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add src directory and this suite's helpers to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', 'src')))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from app import create_app
from database.connection import get_database
from services.users_service import UsersService, get_users_service
from infrastructure import InMemoryCollection, UserDataFactory, failing_collection


@pytest.fixture()
def users_collection():
    """Empty in-memory users collection"""
    return InMemoryCollection()


@pytest.fixture()
def app(users_collection):
    """App whose users service is bound to the in-memory collection"""
    app = create_app()
    app.dependency_overrides[get_users_service] = lambda: UsersService(users_collection)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def failing_client(app):
    """Client whose store raises 'Database error' on every call"""
    collection = failing_collection()
    app.dependency_overrides[get_users_service] = lambda: UsersService(collection)
    return TestClient(app)


@pytest.fixture()
def override_database(app):
    """Replace the shared database handle for routes that use it directly"""
    def _override(database):
        app.dependency_overrides[get_database] = lambda: database
    return _override


@pytest.fixture(scope="session")
def user_factory():
    return UserDataFactory()
