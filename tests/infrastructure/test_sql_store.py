"""Tests for the SQL content store against an in-memory SQLite database."""

from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from coolstff.application.engagement_service import EngagementService
from coolstff.domain import (
    AffiliateLink,
    AffiliateStore,
    Article,
    Category,
    Comment,
    ContentType,
    NotFoundError,
    Product,
    StoreUnavailableError,
    User,
)
from coolstff.infrastructure.database import Base
from coolstff.infrastructure import models  # noqa: F401
from coolstff.infrastructure.sql_store import SqlContentStore

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
async def sql_store() -> AsyncGenerator[SqlContentStore, None]:
    """SQL store over a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield SqlContentStore(async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False))

    await engine.dispose()


class TestSqlContentStore:
    """Tests for SqlContentStore."""

    async def test_product_round_trip(
        self, sql_store: SqlContentStore, make_product: Callable[..., Product]
    ) -> None:
        """Products keep images, links and aware timestamps."""
        product = make_product(
            "p1",
            images=("https://img/1.jpg", "https://img/2.jpg"),
            affiliate_links=(
                AffiliateLink(id="l1", store=AffiliateStore.AMAZON, url="https://a/x", price=9.5),
            ),
            rating=4.5,
            review_count=12,
            featured=True,
        )
        await sql_store.save_product(product)

        loaded = await sql_store.get_product("p1")
        assert loaded == product
        assert loaded.created_at.tzinfo is not None

    async def test_listing_in_creation_order(
        self, sql_store: SqlContentStore, make_product: Callable[..., Product]
    ) -> None:
        """Products are listed oldest first."""
        await sql_store.save_product(make_product("new", created_at=T0 + timedelta(hours=1)))
        await sql_store.save_product(make_product("old", created_at=T0))
        assert [p.id for p in await sql_store.list_products()] == ["old", "new"]

    async def test_category_and_article(
        self,
        sql_store: SqlContentStore,
        category: Category,
        make_article: Callable[..., Article],
    ) -> None:
        """Categories and articles are stored and listed."""
        await sql_store.save_category(category)
        await sql_store.save_article(make_article("a1", source="TrendHunter"))

        assert await sql_store.list_categories() == [category]
        article = await sql_store.get_article("a1")
        assert article.source == "TrendHunter"
        assert await sql_store.get_article("missing") is None

    async def test_comments(
        self, sql_store: SqlContentStore, make_comment: Callable[..., Comment]
    ) -> None:
        """Comments get ids and are filtered by id and type."""
        first = await sql_store.create_comment(make_comment("", created_at=T0))
        await sql_store.create_comment(
            make_comment("", content_id="a1", content_type="article", created_at=T0)
        )
        second = await sql_store.create_comment(
            make_comment("", created_at=T0 + timedelta(seconds=1))
        )

        comments = await sql_store.list_comments("p1", ContentType.PRODUCT)
        assert [c.id for c in comments] == [first, second]
        assert comments[0].content_type is ContentType.PRODUCT

        assert await sql_store.delete_comment(first)
        assert not await sql_store.delete_comment(first)

    async def test_users_and_favorites(self, sql_store: SqlContentStore, user: User) -> None:
        """Favorites are replaced as a whole set."""
        await sql_store.save_user(user)
        await sql_store.update_favorites("u1", frozenset({"p2", "p1"}))
        loaded = await sql_store.get_user("u1")
        assert loaded.favorites == {"p1", "p2"}

        with pytest.raises(NotFoundError):
            await sql_store.update_favorites("nobody", frozenset())

    async def test_deletes(
        self,
        sql_store: SqlContentStore,
        make_product: Callable[..., Product],
        make_article: Callable[..., Article],
    ) -> None:
        """Deletes report whether a row existed."""
        await sql_store.save_product(make_product("p1"))
        await sql_store.save_article(make_article("a1"))
        assert await sql_store.delete_product("p1")
        assert not await sql_store.delete_product("p1")
        assert await sql_store.delete_article("a1")
        assert not await sql_store.delete_article("a1")

    async def test_engagement_over_sql(
        self,
        sql_store: SqlContentStore,
        user: User,
        make_product: Callable[..., Product],
    ) -> None:
        """Comment display order and favorite toggles hold over SQL."""
        await sql_store.save_user(user)
        await sql_store.save_product(make_product("p1"))
        service = EngagementService(sql_store)

        first = await service.add_comment(user, "p1", "product", "first")
        second = await service.add_comment(user, "p1", "product", "second")
        assert [c.id for c in await service.list_comments("p1", "product")] == [
            second.id,
            first.id,
        ]

        change = await service.toggle_favorite("u1", "p1")
        assert change.added
        assert [p.id for p in await service.list_favorites("u1")] == ["p1"]


async def test_database_failure_is_store_unavailable() -> None:
    """Missing tables surface as StoreUnavailableError."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    store = SqlContentStore(async_sessionmaker(engine, class_=AsyncSession))
    try:
        with pytest.raises(StoreUnavailableError) as exc_info:
            await store.list_products()
        assert exc_info.value.operation == "list_products"
    finally:
        await engine.dispose()
