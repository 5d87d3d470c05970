"""SQL content store.

SQLAlchemy async implementation of the ContentStore interface. Every
database failure is reported as StoreUnavailableError and is not retried.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from coolstff.domain.entities import Article, Category, Comment, Product, User
from coolstff.domain.exceptions import NotFoundError, StoreUnavailableError
from coolstff.domain.value_objects import ContentType, FavoriteSet
from coolstff.infrastructure.models import (
    ArticleModel,
    CategoryModel,
    CommentModel,
    ProductModel,
    UserModel,
)

logger = structlog.get_logger()


class SqlContentStore:
    """Content store backed by a relational database.

    Example usage:
        store = SqlContentStore(async_session_factory)
        products = await store.list_products()
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize store with a session factory.

        Args:
            session_factory: Async SQLAlchemy session factory.
        """
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Open a transactional session, translating database failures."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Content store operation failed", operation=operation, error=str(e))
            raise StoreUnavailableError(operation, str(e)) from e

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_categories(self) -> list[Category]:
        """List all categories."""
        async with self._session("list_categories") as session:
            result = await session.execute(select(CategoryModel).order_by(CategoryModel.name))
            return [row.to_entity() for row in result.scalars().all()]

    async def list_products(self) -> list[Product]:
        """List all products in creation order."""
        async with self._session("list_products") as session:
            result = await session.execute(
                select(ProductModel).order_by(ProductModel.created_at, ProductModel.id)
            )
            return [row.to_entity() for row in result.scalars().all()]

    async def list_articles(self) -> list[Article]:
        """List all articles in creation order."""
        async with self._session("list_articles") as session:
            result = await session.execute(
                select(ArticleModel).order_by(ArticleModel.created_at, ArticleModel.id)
            )
            return [row.to_entity() for row in result.scalars().all()]

    async def get_product(self, product_id: str) -> Product | None:
        """Get product by ID."""
        async with self._session("get_product") as session:
            row = await session.get(ProductModel, product_id)
            return row.to_entity() if row else None

    async def get_article(self, article_id: str) -> Article | None:
        """Get article by ID."""
        async with self._session("get_article") as session:
            row = await session.get(ArticleModel, article_id)
            return row.to_entity() if row else None

    async def list_comments(
        self,
        content_id: str | None = None,
        content_type: ContentType | None = None,
    ) -> list[Comment]:
        """List comments, optionally for one content item, in creation order."""
        query = select(CommentModel)
        if content_id is not None:
            query = query.where(CommentModel.content_id == content_id)
        if content_type is not None:
            query = query.where(CommentModel.content_type == ContentType(content_type).value)
        query = query.order_by(CommentModel.created_at, CommentModel.id)

        async with self._session("list_comments") as session:
            result = await session.execute(query)
            return [row.to_entity() for row in result.scalars().all()]

    async def get_user(self, user_id: str) -> User | None:
        """Get user by ID."""
        async with self._session("get_user") as session:
            row = await session.get(UserModel, user_id)
            return row.to_entity() if row else None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_comment(self, comment: Comment) -> str:
        """Insert a comment and return its new ID."""
        comment_id = str(uuid4())
        async with self._session("create_comment") as session:
            session.add(
                CommentModel(
                    id=comment_id,
                    user_id=comment.user_id,
                    user_name=comment.user_name,
                    content_id=comment.content_id,
                    content_type=comment.content_type.value,
                    text=comment.text,
                    created_at=comment.created_at,
                )
            )
        return comment_id

    async def delete_comment(self, comment_id: str) -> bool:
        """Delete a comment. Returns False if it did not exist."""
        async with self._session("delete_comment") as session:
            result = await session.execute(delete(CommentModel).where(CommentModel.id == comment_id))
            return result.rowcount > 0

    async def save_user(self, user: User) -> User:
        """Insert or replace a user."""
        async with self._session("save_user") as session:
            await session.merge(UserModel.from_entity(user))
        return user

    async def update_favorites(self, user_id: str, favorites: FavoriteSet) -> None:
        """Replace a user's favorites set.

        Raises:
            NotFoundError: If the user does not exist.
        """
        async with self._session("update_favorites") as session:
            row = await session.get(UserModel, user_id)
            if row is None:
                raise NotFoundError("User", user_id)
            row.favorites = sorted(favorites)

    async def save_category(self, category: Category) -> Category:
        """Insert or replace a category."""
        async with self._session("save_category") as session:
            await session.merge(CategoryModel.from_entity(category))
        return category

    async def save_product(self, product: Product) -> Product:
        """Insert or replace a product."""
        async with self._session("save_product") as session:
            await session.merge(ProductModel.from_entity(product))
        return product

    async def save_article(self, article: Article) -> Article:
        """Insert or replace an article."""
        async with self._session("save_article") as session:
            await session.merge(ArticleModel.from_entity(article))
        return article

    async def delete_product(self, product_id: str) -> bool:
        """Delete a product. Returns False if it did not exist."""
        async with self._session("delete_product") as session:
            result = await session.execute(delete(ProductModel).where(ProductModel.id == product_id))
            return result.rowcount > 0

    async def delete_article(self, article_id: str) -> bool:
        """Delete an article. Returns False if it did not exist."""
        async with self._session("delete_article") as session:
            result = await session.execute(delete(ArticleModel).where(ArticleModel.id == article_id))
            return result.rowcount > 0
