"""Engagement API endpoints.

Comments on products and articles, user profiles and favorites.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from coolstff.api.schemas import (
    CommentCreateRequest,
    CommentListResponse,
    CommentSchema,
    ErrorResponse,
    FavoritesResponse,
    FavoriteToggleResponse,
    ProductSchema,
    UserCreateRequest,
    UserResponse,
)
from coolstff.application.engagement_service import (
    EngagementService,
    get_engagement_service,
)

router = APIRouter(tags=["Engagement"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(request: Request) -> EngagementService:
    """Get engagement service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return get_engagement_service(request_id=request_id)


# ============================================================================
# Comments
# ============================================================================


@router.get(
    "/comments/{content_type}/{content_id}",
    response_model=CommentListResponse,
    responses={400: {"model": ErrorResponse}},
    summary="List comments",
    description="Comments on a product or article, newest first.",
)
async def list_comments(
    content_type: str,
    content_id: str,
    service: Annotated[EngagementService, Depends(get_service)],
) -> CommentListResponse:
    """List comments on one item."""
    comments = await service.list_comments(content_id, content_type)
    return CommentListResponse(
        items=[CommentSchema.from_entity(c) for c in comments],
        total=len(comments),
    )


@router.post(
    "/comments/{content_type}/{content_id}",
    response_model=CommentSchema,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Post comment",
)
async def add_comment(
    content_type: str,
    content_id: str,
    request: CommentCreateRequest,
    service: Annotated[EngagementService, Depends(get_service)],
) -> CommentSchema:
    """Post a comment as a registered user.

    Args:
        content_type: "product" or "article".
        content_id: Commented item.
        request: Author and text.
        service: Engagement service.

    Returns:
        The stored comment.
    """
    user = await service.get_user(request.user_id)
    comment = await service.add_comment(user, content_id, content_type, request.text)
    return CommentSchema.from_entity(comment)


# ============================================================================
# Users and Favorites
# ============================================================================


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Register user profile",
)
async def register_user(
    request: UserCreateRequest,
    service: Annotated[EngagementService, Depends(get_service)],
) -> UserResponse:
    """Create the profile record for a newly signed-up user."""
    user = await service.register_user(request.id, request.email, request.name)
    return UserResponse.from_entity(user)


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get user profile",
)
async def get_user(
    user_id: str,
    service: Annotated[EngagementService, Depends(get_service)],
) -> UserResponse:
    """Get a user profile."""
    return UserResponse.from_entity(await service.get_user(user_id))


@router.get(
    "/users/{user_id}/favorites",
    response_model=FavoritesResponse,
    responses={404: {"model": ErrorResponse}},
    summary="List favorites",
    description="Saved products in catalog order; deleted products are skipped.",
)
async def list_favorites(
    user_id: str,
    service: Annotated[EngagementService, Depends(get_service)],
) -> FavoritesResponse:
    """List a user's saved products."""
    products = await service.list_favorites(user_id)
    return FavoritesResponse(
        items=[ProductSchema.from_entity(p) for p in products],
        total=len(products),
    )


@router.post(
    "/users/{user_id}/favorites/{product_id}/toggle",
    response_model=FavoriteToggleResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Toggle favorite",
)
async def toggle_favorite(
    user_id: str,
    product_id: str,
    service: Annotated[EngagementService, Depends(get_service)],
) -> FavoriteToggleResponse:
    """Save a product, or unsave it if already saved."""
    change = await service.toggle_favorite(user_id, product_id)
    return FavoriteToggleResponse(
        user_id=change.user_id,
        product_id=change.product_id,
        added=change.added,
        favorites=sorted(change.favorites),
    )
