"""Value Objects for the domain layer.

Query parameters and closed vocabularies used by the catalog core.
All of them validate on construction and raise InvalidArgumentError.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Self

from coolstff.domain.base import ValueObject
from coolstff.domain.exceptions import InvalidArgumentError

MAX_RATING = 5.0

# Product ids a user has saved. A plain frozenset keeps toggles copy-on-write.
FavoriteSet = frozenset[str]


# ============================================================================
# Vocabularies
# ============================================================================


class ContentType(str, Enum):
    """Kind of content a comment or social post refers to."""

    PRODUCT = "product"
    ARTICLE = "article"

    @classmethod
    def parse(cls, value: "ContentType | str") -> Self:
        """Parse a content type, rejecting unknown values.

        Args:
            value: Enum member or its string value.

        Returns:
            ContentType member.

        Raises:
            InvalidArgumentError: If value is not a known content type.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(
                "content_type",
                f"must be one of {[m.value for m in cls]}",
                value=str(value),
            ) from None


class AffiliateStore(str, Enum):
    """Third-party shop an affiliate link points to."""

    AMAZON = "amazon"
    ALIEXPRESS = "aliexpress"
    OTHER = "other"


class Platform(str, Enum):
    """Social network a caption draft targets."""

    FACEBOOK = "facebook"
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    PINTEREST = "pinterest"

    @classmethod
    def parse(cls, value: "Platform | str") -> Self:
        """Parse a platform name, rejecting unknown values.

        Raises:
            InvalidArgumentError: If value is not a known platform.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(
                "platform",
                f"must be one of {[m.value for m in cls]}",
                value=str(value),
            ) from None


class SortKey(str, Enum):
    """Ordering applied to catalog query results."""

    LATEST = "latest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"

    @classmethod
    def parse(cls, value: "SortKey | str") -> Self:
        """Parse a sort key, rejecting unknown values.

        Args:
            value: Enum member or its string value.

        Returns:
            SortKey member.

        Raises:
            InvalidArgumentError: If value is not a known sort key.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(
                "sort",
                f"must be one of {[m.value for m in cls]}",
                value=str(value),
            ) from None


# ============================================================================
# Query Parameters
# ============================================================================


@dataclass(frozen=True)
class FilterSpec(ValueObject):
    """Price and rating bounds for catalog queries.

    Both price bounds are inclusive. The default filter matches every
    product.

    Attributes:
        price_min: Lowest accepted price.
        price_max: Highest accepted price.
        min_rating: Lowest accepted rating (0-5).
    """

    price_min: float = 0.0
    price_max: float = math.inf
    min_rating: float = 0.0

    def __post_init__(self) -> None:
        """Validate filter bounds."""
        # Written as "not >=" so NaN is rejected too.
        if not self.price_min >= 0:
            raise InvalidArgumentError("price_min", "must be >= 0", value=self.price_min)
        if not self.price_max >= self.price_min:
            raise InvalidArgumentError(
                "price_max",
                f"must be >= price_min ({self.price_min})",
                value=self.price_max,
            )
        if not 0 <= self.min_rating <= MAX_RATING:
            raise InvalidArgumentError(
                "min_rating",
                f"must be between 0 and {MAX_RATING}",
                value=self.min_rating,
            )

    def matches(self, price: float, rating: float) -> bool:
        """Check whether a price/rating pair passes both bounds.

        Args:
            price: Item price.
            rating: Item rating.

        Returns:
            True if the item is retained by this filter.
        """
        return self.price_min <= price <= self.price_max and rating >= self.min_rating


@dataclass(frozen=True)
class PageRequest(ValueObject):
    """Offset/limit window over an ordered result.

    Attributes:
        offset: Number of leading results to skip.
        limit: Maximum number of results to return.
    """

    offset: int = 0
    limit: int = 20

    def __post_init__(self) -> None:
        """Validate window bounds."""
        if self.offset < 0:
            raise InvalidArgumentError("offset", "must be >= 0", value=self.offset)
        if self.limit < 0:
            raise InvalidArgumentError("limit", "must be >= 0", value=self.limit)

    @property
    def end(self) -> int:
        """Exclusive end index of the window."""
        return self.offset + self.limit
