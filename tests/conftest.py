from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from group_directory.api.deps import get_group_store
from group_directory.main import app
from group_directory.repositories import InMemoryGroupStore
from group_directory.schemas import Category, Country, GroupCreate


@pytest.fixture
def make_group() -> Callable[..., GroupCreate]:
    """Build a valid GroupCreate, overriding any field by name."""

    def _make(**overrides) -> GroupCreate:
        fields = {
            "title": "Python Developers",
            "description": "Talk about packaging, typing and async code.",
            "whatsapp_link": "https://chat.whatsapp.com/python-devs",
            "category": Category.TECHNOLOGY,
            "country": Country.US,
            "image_url": None,
        }
        fields.update(overrides)
        return GroupCreate(**fields)

    return _make


@pytest.fixture
def store() -> InMemoryGroupStore:
    return InMemoryGroupStore()


@pytest.fixture
def client(store: InMemoryGroupStore):
    """TestClient wired to a fresh in-memory store. Lifespan is not run."""
    app.dependency_overrides[get_group_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
