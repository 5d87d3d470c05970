"""Shared fixtures for API tests."""

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from coolstff.domain import Article, Category, Product, User
from coolstff.infrastructure.config import settings
from coolstff.infrastructure.content_store import InMemoryContentStore, set_content_store
from coolstff.main import app


@pytest.fixture(autouse=True)
def api_store(store: InMemoryContentStore) -> Iterator[InMemoryContentStore]:
    """Install a fresh in-memory store for each test."""
    set_content_store(store)
    yield store
    set_content_store(None)


@pytest.fixture
def client() -> TestClient:
    """Create test client without authentication."""
    return TestClient(app)


@pytest.fixture
def admin_client() -> TestClient:
    """Create test client with valid admin key authentication."""
    return TestClient(
        app,
        headers={"Authorization": f"Bearer {settings.admin_api_key}"},
    )


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Get admin authentication headers."""
    return {"Authorization": f"Bearer {settings.admin_api_key}"}


@pytest.fixture
async def catalog_store(
    api_store: InMemoryContentStore,
    category: Category,
    user: User,
    make_product: Callable[..., Product],
    make_article: Callable[..., Article],
) -> InMemoryContentStore:
    """Store with one category, three products, one article and one user."""
    await api_store.save_category(category)
    await api_store.save_user(user)
    await api_store.save_product(make_product("p1", price=15, rating=4.5, featured=True))
    await api_store.save_product(make_product("p2", price=80, rating=3.0))
    await api_store.save_product(make_product("p3", price=40, rating=4.8))
    await api_store.save_article(make_article("a1", featured=True))
    return api_store
