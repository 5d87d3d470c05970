"""Tests for the catalog query engine."""

import math
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from coolstff.catalog.query import (
    filter_products,
    find_category_by_slug,
    in_category,
    latest_first,
    paginate,
    price_buckets,
    query_catalog,
    rating_buckets,
    resolve_category,
    select_featured,
    sort_products,
)
from coolstff.domain import (
    Article,
    Category,
    FilterSpec,
    InvalidArgumentError,
    PageRequest,
    Product,
    SortKey,
)

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T1 = T0 + timedelta(hours=1)
T2 = T0 + timedelta(hours=2)


def ids(items) -> list[str]:
    return [item.id for item in items]


@pytest.fixture
def catalog(make_product: Callable[..., Product]) -> list[Product]:
    """Five products with colliding prices, ratings and timestamps."""
    return [
        make_product("a", price=30.0, rating=4.0, created_at=T0),
        make_product("b", price=10.0, rating=4.5, created_at=T2),
        make_product("c", price=30.0, rating=4.0, created_at=T1),
        make_product("d", price=99.0, rating=2.0, created_at=T2),
        make_product("e", price=10.0, rating=5.0, created_at=T1),
    ]


class TestWorkedExamples:
    """The two-product example catalog."""

    @pytest.fixture
    def items(self, make_product: Callable[..., Product]) -> list[Product]:
        return [
            make_product("price10", price=10, rating=4, created_at=T1),
            make_product("price50", price=50, rating=2, created_at=T2),
        ]

    def test_price_low_sort(self, items: list[Product]) -> None:
        """Full range, price-low: cheapest first."""
        page = query_catalog(items, FilterSpec(0, 100, 0), "price-low")
        assert ids(page.results) == ["price10", "price50"]
        assert page.total == 2

    def test_price_floor_filter(self, items: list[Product]) -> None:
        """price_min 20 drops the 10.00 product."""
        page = query_catalog(items, FilterSpec(20, 100, 0), "price-low")
        assert ids(page.results) == ["price50"]
        assert page.total == 1


class TestFilter:
    """Tests for filtering."""

    def test_every_result_matches_and_nothing_dropped(self, catalog: list[Product]) -> None:
        """Results are exactly the matching inputs, each once."""
        filters = FilterSpec(price_min=10, price_max=30, min_rating=4)
        results = filter_products(catalog, filters)
        assert all(filters.matches(p.price, p.rating) for p in results)
        expected = [p for p in catalog if filters.matches(p.price, p.rating)]
        assert list(results) == expected
        assert len(set(ids(results))) == len(results)

    def test_rating_and_price_both_required(self, catalog: list[Product]) -> None:
        """An item failing either bound is excluded."""
        results = filter_products(catalog, FilterSpec(price_min=50, min_rating=4))
        assert results == ()

    def test_empty_input(self) -> None:
        """Empty input yields an empty page, not an error."""
        page = query_catalog([], FilterSpec(), SortKey.RATING, PageRequest(0, 10))
        assert page.results == ()
        assert page.total == 0
        assert not page.has_more


class TestSort:
    """Tests for stable sorting."""

    def test_latest_descending_with_stable_ties(self, catalog: list[Product]) -> None:
        """Newest first; b and d share T2 and keep input order."""
        assert ids(sort_products(catalog, SortKey.LATEST)) == ["b", "d", "c", "e", "a"]

    def test_price_low_stable(self, catalog: list[Product]) -> None:
        """Ascending price; equal prices keep input order."""
        assert ids(sort_products(catalog, "price-low")) == ["b", "e", "a", "c", "d"]

    def test_price_high_stable(self, catalog: list[Product]) -> None:
        """Descending price; equal prices keep input order, not reversed."""
        assert ids(sort_products(catalog, "price-high")) == ["d", "a", "c", "b", "e"]

    def test_rating_stable(self, catalog: list[Product]) -> None:
        """Descending rating; a and c tie at 4.0 and keep input order."""
        assert ids(sort_products(catalog, "rating")) == ["e", "b", "a", "c", "d"]

    def test_unknown_sort_key(self, catalog: list[Product]) -> None:
        """Unknown sort keys fail fast."""
        with pytest.raises(InvalidArgumentError):
            query_catalog(catalog, sort="popular")

    def test_unknown_sort_key_on_empty_input(self) -> None:
        """The sort key is validated even when nothing needs sorting."""
        with pytest.raises(InvalidArgumentError):
            query_catalog([], sort="popular")


class TestPagination:
    """Tests for pagination."""

    def test_window(self, catalog: list[Product]) -> None:
        """Windows slice [offset, offset+limit) after sorting."""
        page = query_catalog(catalog, sort="price-low", page=PageRequest(offset=1, limit=2))
        assert ids(page.results) == ["e", "a"]
        assert page.total == 5
        assert page.has_more

    def test_last_window(self, catalog: list[Product]) -> None:
        """The final window reports no more items."""
        page = query_catalog(catalog, page=PageRequest(offset=3, limit=5))
        assert len(page.results) == 2
        assert not page.has_more

    def test_total_counts_filtered_items(self, catalog: list[Product]) -> None:
        """total is the filtered count before the window is applied."""
        page = query_catalog(
            catalog, FilterSpec(min_rating=4), page=PageRequest(offset=0, limit=1)
        )
        assert page.total == 4
        assert len(page.results) == 1

    def test_offset_past_end(self, catalog: list[Product]) -> None:
        """An offset beyond the end yields an empty result."""
        page = query_catalog(catalog, page=PageRequest(offset=50, limit=10))
        assert page.results == ()
        assert page.total == 5

    def test_paginate_without_window(self) -> None:
        """No window returns everything."""
        assert paginate([1, 2, 3], None) == (1, 2, 3)


class TestPurity:
    """Queries never mutate inputs and are deterministic."""

    def test_input_not_mutated(self, catalog: list[Product]) -> None:
        """The input list keeps its order."""
        before = list(catalog)
        query_catalog(catalog, FilterSpec(min_rating=3), "price-high", PageRequest(0, 2))
        assert catalog == before

    def test_idempotent(self, catalog: list[Product]) -> None:
        """The same query twice yields identical output."""
        args = (catalog, FilterSpec(price_max=50), SortKey.RATING, PageRequest(1, 3))
        assert query_catalog(*args) == query_catalog(*args)

    def test_generator_input(self, catalog: list[Product]) -> None:
        """Any iterable of products is accepted."""
        page = query_catalog(p for p in catalog)
        assert page.total == 5


class TestFeatured:
    """Tests for latest_first and select_featured."""

    def test_latest_first_articles(self, make_article: Callable[..., Article]) -> None:
        """Articles are ordered newest first."""
        articles = [
            make_article("old", created_at=T0),
            make_article("new", created_at=T2),
            make_article("mid", created_at=T1),
        ]
        assert ids(latest_first(articles)) == ["new", "mid", "old"]

    def test_select_featured(self, make_product: Callable[..., Product]) -> None:
        """Only featured items, newest first, up to the limit."""
        items = [
            make_product("x", featured=True, created_at=T0),
            make_product("y", featured=False, created_at=T2),
            make_product("z", featured=True, created_at=T1),
            make_product("w", featured=True, created_at=T2),
        ]
        assert ids(select_featured(items, 2)) == ["w", "z"]
        assert select_featured(items, 0) == ()

    def test_negative_limit_rejected(self) -> None:
        """A negative limit is a contract violation."""
        with pytest.raises(InvalidArgumentError):
            select_featured([], -1)


class TestFacets:
    """Tests for price and rating buckets."""

    def test_price_buckets(self, catalog: list[Product]) -> None:
        """Bands are half-open and the last one is open-ended."""
        buckets = price_buckets(catalog, [0, 10, 50])
        assert [(b.low, b.high, b.count) for b in buckets] == [
            (0, 10, 0),
            (10, 50, 4),
            (50, math.inf, 1),
        ]

    def test_prices_below_first_edge_not_counted(self, catalog: list[Product]) -> None:
        """Products cheaper than the first edge fall outside every band."""
        buckets = price_buckets(catalog, [20])
        assert buckets[0].count == 3

    @pytest.mark.parametrize("edges", [[], [-5, 10], [0, 10, 10], [0, 20, 10]])
    def test_invalid_edges(self, edges: list[float]) -> None:
        """Edges must be non-empty, non-negative and strictly increasing."""
        with pytest.raises(InvalidArgumentError):
            price_buckets([], edges)

    def test_rating_buckets(self, catalog: list[Product]) -> None:
        """Each threshold counts products rated at or above it."""
        buckets = {b.min_rating: b.count for b in rating_buckets(catalog, step=1.0)}
        assert buckets == {0.0: 5, 1.0: 5, 2.0: 5, 3.0: 4, 4.0: 4, 5.0: 1}

    def test_rating_buckets_default_step(self) -> None:
        """The default step yields eleven half-star thresholds."""
        buckets = rating_buckets([])
        assert len(buckets) == 11
        assert buckets[1].min_rating == 0.5
        assert buckets[-1].min_rating == 5.0

    def test_rating_buckets_invalid_step(self) -> None:
        """Step must be in (0, 5]."""
        with pytest.raises(InvalidArgumentError):
            rating_buckets([], step=0)


class TestCategoryResolution:
    """Tests for category association."""

    def test_resolve_category(
        self,
        make_product: Callable[..., Product],
        make_article: Callable[..., Article],
        category: Category,
    ) -> None:
        """Known ids resolve; dangling ids map to None."""
        items = [
            make_product("p1", category_id="c1"),
            make_product("p2", category_id="deleted"),
            make_article("a1", category_id="c1"),
        ]
        resolved = resolve_category(items, [category])
        assert resolved == {"p1": category, "p2": None, "a1": category}

    def test_resolve_with_no_categories(self, make_product: Callable[..., Product]) -> None:
        """An empty category list resolves everything to None."""
        assert resolve_category([make_product("p1")], []) == {"p1": None}

    def test_find_category_by_slug(self, category: Category) -> None:
        """Lookup by slug returns the category or None."""
        assert find_category_by_slug([category], "smart-home") is category
        assert find_category_by_slug([category], "outdoor") is None

    def test_in_category(self, make_product: Callable[..., Product]) -> None:
        """Items are kept in input order."""
        items = [
            make_product("p1", category_id="c1"),
            make_product("p2", category_id="c2"),
            make_product("p3", category_id="c1"),
        ]
        assert ids(in_category(items, "c1")) == ["p1", "p3"]
