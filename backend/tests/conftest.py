"""Shared fixtures: a seeded in-memory store behind the real app."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from blogapi.api import create_app
from blogapi.config import Settings
from blogapi.schemas import NewPost
from blogapi.storage import InMemoryPostStore
from tests.factories import SEED_COUNT, generate_post_data


@pytest.fixture
def settings() -> Settings:
    return Settings(store="memory", logfire_token="", environment="test")


@pytest.fixture
def store() -> InMemoryPostStore:
    store = InMemoryPostStore()
    asyncio.run(
        store.insert_many([NewPost(**generate_post_data()) for _ in range(SEED_COUNT)])
    )
    yield store
    store.clear()


@pytest.fixture
def client(settings, store):
    app = create_app(settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
