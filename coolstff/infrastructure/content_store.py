"""Content store interface and in-memory implementation.

The content store is the only component that persists catalog data.
The catalog core reads snapshots from it and hands back descriptions of
writes (a new comment, a new favorites set); the store performs them.
Every store call may raise StoreUnavailableError.
"""

from dataclasses import replace
from typing import Protocol
from uuid import uuid4

import structlog

from coolstff.domain.entities import Article, Category, Comment, Product, User
from coolstff.domain.exceptions import NotFoundError, StoreUnavailableError
from coolstff.domain.value_objects import ContentType, FavoriteSet
from coolstff.infrastructure.config import settings

logger = structlog.get_logger()


class ContentStore(Protocol):
    """Operations the application layer needs from persistence."""

    async def list_categories(self) -> list[Category]: ...

    async def list_products(self) -> list[Product]: ...

    async def list_articles(self) -> list[Article]: ...

    async def get_product(self, product_id: str) -> Product | None: ...

    async def get_article(self, article_id: str) -> Article | None: ...

    async def list_comments(
        self,
        content_id: str | None = None,
        content_type: ContentType | None = None,
    ) -> list[Comment]: ...

    async def create_comment(self, comment: Comment) -> str: ...

    async def delete_comment(self, comment_id: str) -> bool: ...

    async def get_user(self, user_id: str) -> User | None: ...

    async def save_user(self, user: User) -> User: ...

    async def update_favorites(self, user_id: str, favorites: FavoriteSet) -> None: ...

    async def save_category(self, category: Category) -> Category: ...

    async def save_product(self, product: Product) -> Product: ...

    async def save_article(self, article: Article) -> Article: ...

    async def delete_product(self, product_id: str) -> bool: ...

    async def delete_article(self, article_id: str) -> bool: ...


# ============================================================================
# In-Memory Store
# ============================================================================


class InMemoryContentStore:
    """Dict-backed content store.

    Listing order is insertion order, which stands in for the creation
    order a hosted document store returns. Setting ``available`` to False
    makes every call raise StoreUnavailableError.
    """

    def __init__(self) -> None:
        self._categories: dict[str, Category] = {}
        self._products: dict[str, Product] = {}
        self._articles: dict[str, Article] = {}
        self._comments: dict[str, Comment] = {}
        self._users: dict[str, User] = {}
        self.available = True

    def _check(self, operation: str) -> None:
        if not self.available:
            raise StoreUnavailableError(operation)

    async def list_categories(self) -> list[Category]:
        """List all categories."""
        self._check("list_categories")
        return list(self._categories.values())

    async def list_products(self) -> list[Product]:
        """List all products."""
        self._check("list_products")
        return list(self._products.values())

    async def list_articles(self) -> list[Article]:
        """List all articles."""
        self._check("list_articles")
        return list(self._articles.values())

    async def get_product(self, product_id: str) -> Product | None:
        """Get product by ID."""
        self._check("get_product")
        return self._products.get(product_id)

    async def get_article(self, article_id: str) -> Article | None:
        """Get article by ID."""
        self._check("get_article")
        return self._articles.get(article_id)

    async def list_comments(
        self,
        content_id: str | None = None,
        content_type: ContentType | None = None,
    ) -> list[Comment]:
        """List comments, optionally for one content item, in creation order."""
        self._check("list_comments")
        return [
            c
            for c in self._comments.values()
            if (content_id is None or c.content_id == content_id)
            and (content_type is None or c.content_type == content_type)
        ]

    async def create_comment(self, comment: Comment) -> str:
        """Append a comment and return its new ID."""
        self._check("create_comment")
        comment_id = str(uuid4())
        self._comments[comment_id] = replace(comment, id=comment_id)
        return comment_id

    async def delete_comment(self, comment_id: str) -> bool:
        """Delete a comment. Returns False if it did not exist."""
        self._check("delete_comment")
        return self._comments.pop(comment_id, None) is not None

    async def get_user(self, user_id: str) -> User | None:
        """Get user by ID."""
        self._check("get_user")
        return self._users.get(user_id)

    async def save_user(self, user: User) -> User:
        """Insert or replace a user."""
        self._check("save_user")
        self._users[user.id] = user
        return user

    async def update_favorites(self, user_id: str, favorites: FavoriteSet) -> None:
        """Replace a user's favorites set.

        Raises:
            NotFoundError: If the user does not exist.
        """
        self._check("update_favorites")
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        self._users[user_id] = user.with_favorites(favorites)

    async def save_category(self, category: Category) -> Category:
        """Insert or replace a category."""
        self._check("save_category")
        self._categories[category.id] = category
        return category

    async def save_product(self, product: Product) -> Product:
        """Insert or replace a product."""
        self._check("save_product")
        self._products[product.id] = product
        return product

    async def save_article(self, article: Article) -> Article:
        """Insert or replace an article."""
        self._check("save_article")
        self._articles[article.id] = article
        return article

    async def delete_product(self, product_id: str) -> bool:
        """Delete a product. Returns False if it did not exist."""
        self._check("delete_product")
        return self._products.pop(product_id, None) is not None

    async def delete_article(self, article_id: str) -> bool:
        """Delete an article. Returns False if it did not exist."""
        self._check("delete_article")
        return self._articles.pop(article_id, None) is not None


# ============================================================================
# Store Accessor
# ============================================================================


_content_store: ContentStore | None = None


def get_content_store() -> ContentStore:
    """Get the configured content store singleton.

    Returns:
        InMemoryContentStore or SqlContentStore, per settings.store_backend.
    """
    global _content_store
    if _content_store is None:
        if settings.store_backend == "sql":
            from coolstff.infrastructure.database import async_session_factory
            from coolstff.infrastructure.sql_store import SqlContentStore

            _content_store = SqlContentStore(async_session_factory)
        else:
            _content_store = InMemoryContentStore()
        logger.info("Content store initialized", backend=settings.store_backend)
    return _content_store


def set_content_store(store: ContentStore | None) -> None:
    """Replace the content store singleton (None resets it)."""
    global _content_store
    _content_store = store
