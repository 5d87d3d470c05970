"""Shared fixtures for coolstff tests."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from coolstff.domain import Article, Category, Comment, Product, User
from coolstff.infrastructure.content_store import InMemoryContentStore

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for products with sensible defaults."""

    def factory(id: str = "p1", **overrides: Any) -> Product:
        fields: dict[str, Any] = {
            "title": f"Product {id}",
            "price": 10.0,
            "images": ("https://img.example/p.jpg",),
            "category_id": "c1",
            "rating": 0.0,
            "created_at": BASE_TIME,
            "updated_at": BASE_TIME,
        }
        fields.update(overrides)
        return Product(id=id, **fields)

    return factory


@pytest.fixture
def make_article() -> Callable[..., Article]:
    """Factory for articles with sensible defaults."""

    def factory(id: str = "a1", **overrides: Any) -> Article:
        fields: dict[str, Any] = {
            "title": f"Article {id}",
            "content": "Body text.",
            "category_id": "c1",
            "cover_image": "https://img.example/a.jpg",
            "created_at": BASE_TIME,
            "updated_at": BASE_TIME,
        }
        fields.update(overrides)
        return Article(id=id, **fields)

    return factory


@pytest.fixture
def make_comment() -> Callable[..., Comment]:
    """Factory for comments on product p1 by default."""

    def factory(id: str = "m1", **overrides: Any) -> Comment:
        fields: dict[str, Any] = {
            "user_id": "u1",
            "user_name": "Ada",
            "content_id": "p1",
            "content_type": "product",
            "text": "Nice!",
            "created_at": BASE_TIME,
        }
        fields.update(overrides)
        return Comment(id=id, **fields)

    return factory


@pytest.fixture
def category() -> Category:
    """A category with id c1."""
    return Category(id="c1", name="Smart Home", slug="smart-home")


@pytest.fixture
def user() -> User:
    """A registered user without favorites."""
    return User(id="u1", email="ada@example.com", name="Ada", created_at=BASE_TIME)


@pytest.fixture
def store() -> InMemoryContentStore:
    """Empty in-memory content store."""
    return InMemoryContentStore()
