"""Catalog query engine.

Pure, in-memory shaping of product and article snapshots: filtering,
stable sorting, pagination, facet buckets and category resolution.
Nothing here performs I/O, logs or mutates its inputs; every call
returns freshly built tuples or dicts.
"""

import bisect
import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Generic, TypeVar

from coolstff.domain.entities import Article, Category, Content, Product
from coolstff.domain.exceptions import InvalidArgumentError
from coolstff.domain.value_objects import MAX_RATING, FilterSpec, PageRequest, SortKey

T = TypeVar("T")
ContentT = TypeVar("ContentT", Product, Article)

# Sort key -> (key function, descending). sorted() stays stable with reverse=True,
# so ties keep their input order in both directions.
_ORDERINGS: dict[SortKey, tuple[Callable[[Product], Any], bool]] = {
    SortKey.LATEST: (attrgetter("created_at"), True),
    SortKey.PRICE_LOW: (attrgetter("price"), False),
    SortKey.PRICE_HIGH: (attrgetter("price"), True),
    SortKey.RATING: (attrgetter("rating"), True),
}


# ============================================================================
# Result Types
# ============================================================================


@dataclass(frozen=True)
class CatalogPage(Generic[T]):
    """Result of a catalog query.

    Attributes:
        results: Ordered items in the requested window.
        total: Number of items that passed the filter, before pagination.
        page: Window that was applied, if any.
    """

    results: tuple[T, ...]
    total: int
    page: PageRequest | None = None

    @property
    def has_more(self) -> bool:
        """Check if items remain after this window."""
        if self.page is None:
            return False
        return self.page.end < self.total


@dataclass(frozen=True)
class PriceBucket:
    """Count of items whose price falls in [low, high)."""

    low: float
    high: float
    count: int


@dataclass(frozen=True)
class RatingBucket:
    """Count of items rated min_rating or better."""

    min_rating: float
    count: int


# ============================================================================
# Query Pipeline
# ============================================================================


def filter_products(items: Iterable[Product], filters: FilterSpec) -> tuple[Product, ...]:
    """Keep products inside the filter's price and rating bounds."""
    return tuple(p for p in items if filters.matches(p.price, p.rating))


def sort_products(items: Iterable[Product], sort: SortKey | str) -> tuple[Product, ...]:
    """Order products by a sort key, keeping input order among ties.

    Raises:
        InvalidArgumentError: If sort is not a known key.
    """
    key, descending = _ORDERINGS[SortKey.parse(sort)]
    return tuple(sorted(items, key=key, reverse=descending))


def paginate(items: Sequence[T], page: PageRequest | None) -> tuple[T, ...]:
    """Slice an ordered sequence to a window.

    An offset past the end yields an empty tuple.
    """
    if page is None:
        return tuple(items)
    return tuple(items[page.offset : page.end])


def query_catalog(
    items: Iterable[Product],
    filters: FilterSpec | None = None,
    sort: SortKey | str = SortKey.LATEST,
    page: PageRequest | None = None,
) -> CatalogPage[Product]:
    """Filter, sort and paginate a product snapshot.

    Args:
        items: Unfiltered products, in store order.
        filters: Price/rating bounds; defaults to matching everything.
        sort: Sort key (enum member or its string value).
        page: Optional offset/limit window.

    Returns:
        CatalogPage with the windowed results and the filtered total.

    Raises:
        InvalidArgumentError: If sort is not a known key.
    """
    sort_key = SortKey.parse(sort)
    matched = filter_products(items, filters or FilterSpec())
    ordered = sort_products(matched, sort_key)
    return CatalogPage(results=paginate(ordered, page), total=len(ordered), page=page)


def latest_first(items: Iterable[ContentT]) -> tuple[ContentT, ...]:
    """Order products or articles newest first, keeping ties in input order."""
    return tuple(sorted(items, key=attrgetter("created_at"), reverse=True))


def select_featured(items: Iterable[ContentT], limit: int) -> tuple[ContentT, ...]:
    """Pick featured items, newest first, up to limit.

    Raises:
        InvalidArgumentError: If limit is negative.
    """
    if limit < 0:
        raise InvalidArgumentError("limit", "must be >= 0", value=limit)
    return latest_first(item for item in items if item.featured)[:limit]


# ============================================================================
# Facet Buckets
# ============================================================================


def price_buckets(items: Iterable[Product], edges: Sequence[float]) -> tuple[PriceBucket, ...]:
    """Count products per price band.

    Bands are [edges[i], edges[i+1]) and the last one is open-ended.
    Products priced below edges[0] are not counted.

    Args:
        items: Products to count.
        edges: Strictly increasing, non-negative lower bounds.

    Returns:
        One bucket per edge, in edge order.

    Raises:
        InvalidArgumentError: If edges is empty, negative or not increasing.
    """
    if not edges:
        raise InvalidArgumentError("edges", "at least one edge is required")
    if edges[0] < 0:
        raise InvalidArgumentError("edges", "must be >= 0", value=list(edges))
    if any(b <= a for a, b in zip(edges, edges[1:])):
        raise InvalidArgumentError("edges", "must be strictly increasing", value=list(edges))

    counts = [0] * len(edges)
    for product in items:
        index = bisect.bisect_right(edges, product.price) - 1
        if index >= 0:
            counts[index] += 1

    highs = list(edges[1:]) + [math.inf]
    return tuple(
        PriceBucket(low=low, high=high, count=count)
        for low, high, count in zip(edges, highs, counts)
    )


def rating_buckets(items: Iterable[Product], step: float = 0.5) -> tuple[RatingBucket, ...]:
    """Count products at each "N stars and up" threshold from 0 to 5.

    Args:
        items: Products to count.
        step: Distance between thresholds (the rating slider step).

    Returns:
        One bucket per threshold, ascending.

    Raises:
        InvalidArgumentError: If step is not in (0, 5].
    """
    if not 0 < step <= MAX_RATING:
        raise InvalidArgumentError("step", f"must be in (0, {MAX_RATING}]", value=step)

    ratings = sorted(p.rating for p in items)
    steps = int(MAX_RATING / step + 1e-9)
    buckets = []
    for i in range(steps + 1):
        threshold = round(i * step, 6)
        count = len(ratings) - bisect.bisect_left(ratings, threshold)
        buckets.append(RatingBucket(min_rating=threshold, count=count))
    return tuple(buckets)


# ============================================================================
# Category Association
# ============================================================================


def resolve_category(
    items: Iterable[Content],
    categories: Iterable[Category],
) -> dict[str, Category | None]:
    """Map each content id to its category.

    A category_id with no matching category maps to None.

    Args:
        items: Products and/or articles.
        categories: Known categories.

    Returns:
        Mapping of content id to Category or None.
    """
    by_id = {category.id: category for category in categories}
    return {item.id: by_id.get(item.category_id) for item in items}


def find_category_by_slug(categories: Iterable[Category], slug: str) -> Category | None:
    """Look up a category by its slug."""
    return next((c for c in categories if c.slug == slug), None)


def in_category(items: Iterable[ContentT], category_id: str) -> tuple[ContentT, ...]:
    """Keep items that reference the given category, in input order."""
    return tuple(item for item in items if item.category_id == category_id)
