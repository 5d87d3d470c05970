"""Domain entities for the coolstff catalog.

Categories, products, articles, comments and users as frozen snapshots.
Numeric invariants are checked on construction; foreign keys
(category_id, favorites, comment content_id) are not, since admin data
is allowed to drift.
"""

import re
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Self

from coolstff.domain.base import Entity, utc_now
from coolstff.domain.exceptions import InvalidArgumentError
from coolstff.domain.value_objects import (
    MAX_RATING,
    AffiliateStore,
    ContentType,
    FavoriteSet,
)

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Build a URL-safe slug from a display name.

    Args:
        name: Display name (e.g., "Smart Home & Gadgets").

    Returns:
        Lower-case slug (e.g., "smart-home-gadgets").
    """
    return _SLUG_SEPARATORS.sub("-", name.lower()).strip("-")


# ============================================================================
# Category
# ============================================================================


@dataclass(frozen=True)
class Category(Entity):
    """A catalog category.

    The slug is the external lookup key; the id is what products and
    articles reference.

    Attributes:
        id: Category identifier.
        name: Display name.
        slug: Unique, URL-safe key.
        description: Short description shown on the category page.
        image_url: Hero image URL.
    """

    name: str
    slug: str
    description: str = ""
    image_url: str = ""

    def __post_init__(self) -> None:
        """Validate slug format."""
        if not self.slug or slugify(self.slug) != self.slug:
            raise InvalidArgumentError("slug", "must be non-empty and URL-safe", value=self.slug)


# ============================================================================
# Product
# ============================================================================


@dataclass(frozen=True)
class AffiliateLink(Entity):
    """A third-party purchase URL with its own listed price.

    Attributes:
        id: Link identifier.
        store: Shop the link points to.
        url: Purchase URL.
        price: Price listed by that shop.
    """

    store: AffiliateStore
    url: str
    price: float

    def __post_init__(self) -> None:
        """Validate store and price."""
        try:
            object.__setattr__(self, "store", AffiliateStore(self.store))
        except ValueError:
            raise InvalidArgumentError(
                "affiliate_link.store",
                f"must be one of {[s.value for s in AffiliateStore]}",
                value=str(self.store),
            ) from None
        if not self.price >= 0:
            raise InvalidArgumentError("affiliate_link.price", "must be >= 0", value=self.price)


@dataclass(frozen=True)
class Product(Entity):
    """An affiliate-linked product.

    Attributes:
        id: Product identifier.
        title: Product title.
        description: Product description.
        price: Canonical price (>= 0).
        images: Ordered image URLs (at least one).
        category_id: Referenced category id (may dangle).
        affiliate_links: Purchase links at third-party shops.
        featured: Whether the product is promoted on the home page.
        rating: Average rating (0.0-5.0).
        review_count: Number of reviews.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    title: str
    price: float
    images: tuple[str, ...]
    category_id: str
    description: str = ""
    affiliate_links: tuple[AffiliateLink, ...] = ()
    featured: bool = False
    rating: float = 0.0
    review_count: int = 0
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Validate product invariants."""
        object.__setattr__(self, "images", tuple(self.images))
        object.__setattr__(self, "affiliate_links", tuple(self.affiliate_links))
        if not self.price >= 0:
            raise InvalidArgumentError("price", "must be >= 0", value=self.price)
        if not self.images:
            raise InvalidArgumentError("images", "at least one image is required")
        if not 0 <= self.rating <= MAX_RATING:
            raise InvalidArgumentError(
                "rating", f"must be between 0 and {MAX_RATING}", value=self.rating
            )
        if self.review_count < 0:
            raise InvalidArgumentError("review_count", "must be >= 0", value=self.review_count)

    @property
    def content_type(self) -> ContentType:
        """Content type used for comments and social posts."""
        return ContentType.PRODUCT

    @property
    def primary_image(self) -> str:
        """First image, used for cards and social posts."""
        return self.images[0]


# ============================================================================
# Article
# ============================================================================


@dataclass(frozen=True)
class Article(Entity):
    """An editorial article.

    Attributes:
        id: Article identifier.
        title: Headline.
        content: Full body text.
        excerpt: Teaser shown on cards.
        cover_image: Cover image URL.
        category_id: Referenced category id (may dangle).
        featured: Whether the article is promoted on the home page.
        source: Name of the publication the story came from.
        source_url: Link to the original story.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    title: str
    content: str
    category_id: str
    excerpt: str = ""
    cover_image: str = ""
    featured: bool = False
    source: str = ""
    source_url: str = ""
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def content_type(self) -> ContentType:
        """Content type used for comments and social posts."""
        return ContentType.ARTICLE

    @property
    def primary_image(self) -> str:
        """Cover image, used for cards and social posts."""
        return self.cover_image


Content = Product | Article


# ============================================================================
# Comment
# ============================================================================


@dataclass(frozen=True)
class Comment(Entity):
    """A user comment on a product or article.

    Comments are append-only; only admins delete them.

    Attributes:
        id: Comment identifier (empty until the store assigns one).
        user_id: Author id.
        user_name: Author display name.
        content_id: Commented product/article id.
        content_type: Whether content_id is a product or an article.
        text: Comment body.
        created_at: Creation timestamp.
    """

    user_id: str
    user_name: str
    content_id: str
    content_type: ContentType
    text: str
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Normalize the content type."""
        object.__setattr__(self, "content_type", ContentType.parse(self.content_type))


# ============================================================================
# User
# ============================================================================


@dataclass(frozen=True)
class User(Entity):
    """A registered user.

    Attributes:
        id: User identifier.
        email: Login email.
        name: Display name.
        is_admin: Whether the user may use the admin console.
        favorites: Saved product ids.
        created_at: Registration timestamp.
    """

    email: str
    name: str
    is_admin: bool = False
    favorites: FavoriteSet = frozenset()
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Freeze the favorites collection."""
        object.__setattr__(self, "favorites", frozenset(self.favorites))

    def with_favorites(self, favorites: FavoriteSet) -> Self:
        """Return a copy of this user with a new favorites set."""
        return replace(self, favorites=frozenset(favorites))
