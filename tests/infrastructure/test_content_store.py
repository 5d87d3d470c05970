"""Tests for the in-memory content store and the store accessor."""

from collections.abc import Callable

import pytest

from coolstff.domain import (
    Comment,
    ContentType,
    NotFoundError,
    Product,
    StoreUnavailableError,
    User,
)
from coolstff.infrastructure.config import settings
from coolstff.infrastructure.content_store import (
    InMemoryContentStore,
    get_content_store,
    set_content_store,
)


class TestInMemoryContentStore:
    """Tests for InMemoryContentStore."""

    async def test_listing_keeps_insertion_order(
        self, store: InMemoryContentStore, make_product: Callable[..., Product]
    ) -> None:
        """Products are listed in the order they were saved."""
        for product_id in ("p3", "p1", "p2"):
            await store.save_product(make_product(product_id))
        assert [p.id for p in await store.list_products()] == ["p3", "p1", "p2"]

    async def test_save_replaces(
        self, store: InMemoryContentStore, make_product: Callable[..., Product]
    ) -> None:
        """Saving an existing id replaces the snapshot."""
        await store.save_product(make_product("p1", price=10))
        await store.save_product(make_product("p1", price=12))
        assert (await store.get_product("p1")).price == 12
        assert len(await store.list_products()) == 1

    async def test_create_comment_assigns_id(
        self, store: InMemoryContentStore, make_comment: Callable[..., Comment]
    ) -> None:
        """The store assigns comment ids."""
        comment_id = await store.create_comment(make_comment(""))
        comments = await store.list_comments("p1", ContentType.PRODUCT)
        assert [c.id for c in comments] == [comment_id]

    async def test_list_comments_filters(
        self, store: InMemoryContentStore, make_comment: Callable[..., Comment]
    ) -> None:
        """Comments filter by id and type; no filter lists all."""
        await store.create_comment(make_comment("", content_id="p1"))
        await store.create_comment(make_comment("", content_id="a1", content_type="article"))
        assert len(await store.list_comments()) == 2
        assert len(await store.list_comments("a1", ContentType.ARTICLE)) == 1
        assert await store.list_comments("a1", ContentType.PRODUCT) == []

    async def test_delete_comment(
        self, store: InMemoryContentStore, make_comment: Callable[..., Comment]
    ) -> None:
        """Deleting reports whether the comment existed."""
        comment_id = await store.create_comment(make_comment(""))
        assert await store.delete_comment(comment_id)
        assert not await store.delete_comment(comment_id)

    async def test_update_favorites(self, store: InMemoryContentStore, user: User) -> None:
        """The full set is replaced."""
        await store.save_user(user)
        await store.update_favorites("u1", frozenset({"p1", "p2"}))
        assert (await store.get_user("u1")).favorites == {"p1", "p2"}

    async def test_update_favorites_unknown_user(self, store: InMemoryContentStore) -> None:
        """Unknown users raise NotFoundError."""
        with pytest.raises(NotFoundError):
            await store.update_favorites("nobody", frozenset())

    async def test_unavailable(self, store: InMemoryContentStore) -> None:
        """An unavailable store fails every call."""
        store.available = False
        with pytest.raises(StoreUnavailableError) as exc_info:
            await store.list_products()
        assert exc_info.value.operation == "list_products"


class TestStoreAccessor:
    """Tests for the content store singleton."""

    def test_default_backend_is_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The memory backend is used by default."""
        monkeypatch.setattr(settings, "store_backend", "memory")
        set_content_store(None)
        try:
            first = get_content_store()
            assert isinstance(first, InMemoryContentStore)
            assert get_content_store() is first
        finally:
            set_content_store(None)

    def test_sql_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """store_backend=sql selects the SQL store."""
        from coolstff.infrastructure.sql_store import SqlContentStore

        monkeypatch.setattr(settings, "store_backend", "sql")
        set_content_store(None)
        try:
            assert isinstance(get_content_store(), SqlContentStore)
        finally:
            set_content_store(None)
