"""Domain layer - Entities, value objects and exceptions.

This module exports the core domain building blocks:

- **Entities**: Frozen snapshots with identity (Category, Product, Article, Comment, User)
- **Value Objects**: Query parameters and vocabularies (FilterSpec, SortKey, PageRequest)
- **Exceptions**: InvalidArgumentError, NotFoundError, StoreUnavailableError

Example usage:
    from coolstff.domain import FilterSpec, Product, SortKey

    filters = FilterSpec(price_min=10, price_max=100, min_rating=4)
    product = Product(
        id="p1",
        title="Widget",
        price=29.99,
        images=("https://img.example/widget.jpg",),
        category_id="gadgets",
    )
    filters.matches(product.price, product.rating)  # False, rating is 0
"""

# Base classes
from coolstff.domain.base import Entity, ValueObject, utc_now

# Entities
from coolstff.domain.entities import (
    AffiliateLink,
    Article,
    Category,
    Comment,
    Content,
    Product,
    User,
    slugify,
)

# Exceptions
from coolstff.domain.exceptions import (
    DomainError,
    InvalidArgumentError,
    NotFoundError,
    StoreUnavailableError,
)

# Value Objects
from coolstff.domain.value_objects import (
    MAX_RATING,
    AffiliateStore,
    ContentType,
    FavoriteSet,
    FilterSpec,
    PageRequest,
    Platform,
    SortKey,
)

__all__ = [
    # Base
    "Entity",
    "ValueObject",
    "utc_now",
    # Entities
    "AffiliateLink",
    "Article",
    "Category",
    "Comment",
    "Content",
    "Product",
    "User",
    "slugify",
    # Exceptions
    "DomainError",
    "InvalidArgumentError",
    "NotFoundError",
    "StoreUnavailableError",
    # Value Objects
    "MAX_RATING",
    "AffiliateStore",
    "ContentType",
    "FavoriteSet",
    "FilterSpec",
    "PageRequest",
    "Platform",
    "SortKey",
]
