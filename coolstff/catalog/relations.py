"""Favorite and comment helpers.

Membership checks, copy-on-write favorite toggles and comment ordering
layered over catalog snapshots. Like the query engine, these functions
never write to the store; toggles return a FavoriteChange describing
the write the caller should hand to the store.
"""

from collections import Counter
from collections.abc import Iterable, Set
from dataclasses import dataclass
from operator import attrgetter

from coolstff.domain.entities import Comment, Product, User
from coolstff.domain.value_objects import ContentType, FavoriteSet


# ============================================================================
# Favorites
# ============================================================================


@dataclass(frozen=True)
class FavoriteChange:
    """Desired favorites write for one user.

    Attributes:
        user_id: User whose favorites change.
        product_id: Product that was toggled.
        favorites: Complete favorites set after the toggle.
        added: True if product_id was added, False if removed.
    """

    user_id: str
    product_id: str
    favorites: FavoriteSet
    added: bool


def is_favorite(favorite_ids: Set[str], product_id: str) -> bool:
    """Check whether a product is in a user's favorites."""
    return product_id in favorite_ids


def toggle_favorite(current: Set[str], product_id: str) -> FavoriteSet:
    """Add product_id if absent, remove it if present.

    The input set is left untouched; toggling twice restores it.

    Args:
        current: Current favorite product ids.
        product_id: Product to toggle.

    Returns:
        New frozenset of favorite ids.
    """
    return frozenset(current) ^ {product_id}


def plan_favorite_toggle(user: User, product_id: str) -> FavoriteChange:
    """Compute the favorites write for toggling one product."""
    favorites = toggle_favorite(user.favorites, product_id)
    return FavoriteChange(
        user_id=user.id,
        product_id=product_id,
        favorites=favorites,
        added=product_id in favorites,
    )


def favorite_products(favorite_ids: Set[str], products: Iterable[Product]) -> tuple[Product, ...]:
    """Resolve favorite ids to products, in catalog order.

    Ids that no longer match a product are skipped.
    """
    return tuple(p for p in products if p.id in favorite_ids)


# ============================================================================
# Comments
# ============================================================================


def comments_for(
    all_comments: Iterable[Comment],
    content_id: str,
    content_type: ContentType | str,
) -> tuple[Comment, ...]:
    """Select comments on one item, newest first.

    Comments are ordered by created_at, newest first, whatever order the
    store returns them in. Comments stamped with the same time keep the
    last stored one first.

    Args:
        all_comments: Comments in store order.
        content_id: Product or article id.
        content_type: Kind of content content_id refers to.

    Returns:
        Matching comments, newest first.

    Raises:
        InvalidArgumentError: If content_type is unknown.
    """
    kind = ContentType.parse(content_type)
    matching = [
        c for c in all_comments if c.content_id == content_id and c.content_type == kind
    ]
    return tuple(sorted(reversed(matching), key=attrgetter("created_at"), reverse=True))


def comment_counts(
    all_comments: Iterable[Comment],
    content_type: ContentType | str | None = None,
) -> dict[str, int]:
    """Count comments per content id, optionally for one content type."""
    kind = ContentType.parse(content_type) if content_type is not None else None
    return dict(
        Counter(c.content_id for c in all_comments if kind is None or c.content_type == kind)
    )
