"""Engagement application service.

Comments and favorites. The service reads a snapshot from the content
store, computes the result with the catalog helpers and hands the
described write back to the store.
"""

from dataclasses import replace

import structlog

from coolstff.catalog.relations import (
    FavoriteChange,
    comments_for,
    favorite_products,
    is_favorite,
    plan_favorite_toggle,
)
from coolstff.domain.base import utc_now
from coolstff.domain.entities import Comment, Product, User
from coolstff.domain.exceptions import InvalidArgumentError, NotFoundError
from coolstff.domain.value_objects import ContentType
from coolstff.infrastructure.content_store import ContentStore, get_content_store

logger = structlog.get_logger()

MAX_COMMENT_LENGTH = 2000


class EngagementService:
    """Application service for comments and favorites.

    Example usage:
        service = EngagementService(store)
        comment = await service.add_comment(user, "p1", "product", "Love it!")
        change = await service.toggle_favorite("u1", "p1")
    """

    def __init__(
        self,
        store: ContentStore | None = None,
        request_id: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            store: Content store to read from and write to.
            request_id: Request ID for correlation.
        """
        self.store = store or get_content_store()
        self.request_id = request_id

    async def _content_exists(self, content_id: str, content_type: ContentType) -> bool:
        if content_type is ContentType.PRODUCT:
            return await self.store.get_product(content_id) is not None
        return await self.store.get_article(content_id) is not None

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    async def list_comments(
        self,
        content_id: str,
        content_type: ContentType | str,
    ) -> tuple[Comment, ...]:
        """List comments on a product or article, newest first.

        Raises:
            InvalidArgumentError: If content_type is unknown.
        """
        kind = ContentType.parse(content_type)
        stored = await self.store.list_comments(content_id, kind)
        return comments_for(stored, content_id, kind)

    async def add_comment(
        self,
        user: User,
        content_id: str,
        content_type: ContentType | str,
        text: str,
    ) -> Comment:
        """Append a comment and return it with its store-assigned ID.

        Args:
            user: Author.
            content_id: Product or article id.
            content_type: Kind of content.
            text: Comment body; surrounding whitespace is trimmed.

        Returns:
            The stored comment.

        Raises:
            InvalidArgumentError: If text is blank or too long, or content_type is unknown.
            NotFoundError: If the commented content does not exist.
        """
        kind = ContentType.parse(content_type)
        body = text.strip()
        if not body:
            raise InvalidArgumentError("text", "comment cannot be empty")
        if len(body) > MAX_COMMENT_LENGTH:
            raise InvalidArgumentError(
                "text", f"comment cannot exceed {MAX_COMMENT_LENGTH} characters"
            )
        if not await self._content_exists(content_id, kind):
            raise NotFoundError(kind.value.capitalize(), content_id)

        comment = Comment(
            id="",
            user_id=user.id,
            user_name=user.name,
            content_id=content_id,
            content_type=kind,
            text=body,
            created_at=utc_now(),
        )
        comment_id = await self.store.create_comment(comment)

        logger.info(
            "Comment added",
            comment_id=comment_id,
            content_id=content_id,
            content_type=kind.value,
            user_id=user.id,
            request_id=self.request_id,
        )
        return replace(comment, id=comment_id)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    async def register_user(self, user_id: str, email: str, name: str) -> User:
        """Create the profile record for a newly signed-up user.

        Raises:
            InvalidArgumentError: If the user id is already registered or a field is blank.
        """
        if not user_id.strip() or not email.strip() or not name.strip():
            raise InvalidArgumentError("user", "id, email and name are required")
        if await self.store.get_user(user_id) is not None:
            raise InvalidArgumentError("user_id", "already registered", value=user_id)

        user = User(id=user_id, email=email.strip(), name=name.strip(), created_at=utc_now())
        await self.store.save_user(user)
        logger.info("User registered", user_id=user_id, request_id=self.request_id)
        return user

    async def get_user(self, user_id: str) -> User:
        """Get a user.

        Raises:
            NotFoundError: If the user does not exist.
        """
        user = await self.store.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def is_favorite(self, user_id: str, product_id: str) -> bool:
        """Check whether a user saved a product."""
        user = await self.get_user(user_id)
        return is_favorite(user.favorites, product_id)

    async def toggle_favorite(self, user_id: str, product_id: str) -> FavoriteChange:
        """Save or unsave a product for a user.

        Returns:
            The favorites change that was written.

        Raises:
            NotFoundError: If the user does not exist, or the product does
                not exist and is not already a (stale) favorite.
        """
        user = await self.get_user(user_id)
        # Removing a stale id is allowed; adding a missing product is not.
        if product_id not in user.favorites and await self.store.get_product(product_id) is None:
            raise NotFoundError("Product", product_id)

        change = plan_favorite_toggle(user, product_id)
        await self.store.update_favorites(change.user_id, change.favorites)

        logger.info(
            "Favorite toggled",
            user_id=user_id,
            product_id=product_id,
            added=change.added,
            favorite_count=len(change.favorites),
            request_id=self.request_id,
        )
        return change

    async def list_favorites(self, user_id: str) -> tuple[Product, ...]:
        """Resolve a user's favorites to products, skipping stale ids."""
        user = await self.get_user(user_id)
        return favorite_products(user.favorites, await self.store.list_products())


def get_engagement_service(request_id: str | None = None) -> EngagementService:
    """Create an engagement service bound to the configured store."""
    return EngagementService(request_id=request_id)
