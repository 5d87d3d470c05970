"""Admin console API endpoints.

Content creation and deletion, URL prefill and social post drafts.
All routes require the admin key (see AdminKeyMiddleware).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from coolstff.api.schemas import (
    ArticleCreateRequest,
    ArticleSchema,
    CategoryCreateRequest,
    CategorySchema,
    ErrorResponse,
    ProductCreateRequest,
    ProductSchema,
    ScrapeRequest,
    ScrapeResponse,
    SocialPostRequest,
    SocialPostSchema,
    SocialPostsResponse,
)
from coolstff.application.admin_service import AdminService, get_admin_service
from coolstff.catalog.scraper import is_supported_url

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    responses={401: {"model": ErrorResponse}},
)


# ============================================================================
# Dependencies
# ============================================================================


def get_service(request: Request) -> AdminService:
    """Get admin service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return get_admin_service(request_id=request_id)


# ============================================================================
# Create
# ============================================================================


@router.post(
    "/categories",
    response_model=CategorySchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create category",
)
async def create_category(
    request: CategoryCreateRequest,
    service: Annotated[AdminService, Depends(get_service)],
) -> CategorySchema:
    """Create a category; the slug is derived from the name when omitted."""
    category = await service.create_category(
        name=request.name,
        slug=request.slug,
        description=request.description,
        image_url=request.image_url,
    )
    return CategorySchema.from_entity(category)


@router.post(
    "/products",
    response_model=ProductSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create product",
)
async def create_product(
    request: ProductCreateRequest,
    service: Annotated[AdminService, Depends(get_service)],
) -> ProductSchema:
    """Create a product.

    Args:
        request: Product fields and affiliate links.
        service: Admin service.

    Returns:
        The created product.
    """
    product = await service.create_product(
        title=request.title,
        price=request.price,
        images=request.images,
        category_id=request.category_id,
        description=request.description,
        affiliate_links=[
            link.model_dump(exclude_none=True) for link in request.affiliate_links
        ],
        featured=request.featured,
    )
    return ProductSchema.from_entity(product)


@router.post(
    "/articles",
    response_model=ArticleSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create article",
)
async def create_article(
    request: ArticleCreateRequest,
    service: Annotated[AdminService, Depends(get_service)],
) -> ArticleSchema:
    """Create an article."""
    article = await service.create_article(**request.model_dump())
    return ArticleSchema.from_entity(article)


# ============================================================================
# Delete
# ============================================================================


@router.delete(
    "/products/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(
    product_id: str,
    service: Annotated[AdminService, Depends(get_service)],
) -> Response:
    """Delete a product."""
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/articles/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete article",
)
async def delete_article(
    article_id: str,
    service: Annotated[AdminService, Depends(get_service)],
) -> Response:
    """Delete an article."""
    await service.delete_article(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete comment",
)
async def delete_comment(
    comment_id: str,
    service: Annotated[AdminService, Depends(get_service)],
) -> Response:
    """Delete a comment (moderation)."""
    await service.delete_comment(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Prefill and Social Drafts
# ============================================================================


@router.post(
    "/scrape",
    response_model=ScrapeResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Prefill from URL",
    description="Return canned prefill data for a product or article URL.",
)
async def scrape_url(
    request: ScrapeRequest,
    service: Annotated[AdminService, Depends(get_service)],
) -> ScrapeResponse:
    """Prefill a create form from a URL."""
    scraped = service.scrape(request.url, request.kind)
    return ScrapeResponse.from_scraped(scraped, supported_site=is_supported_url(request.url))


@router.post(
    "/social-posts",
    response_model=SocialPostsResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Draft social posts",
    description="Caption drafts for one platform, or every configured platform.",
)
async def social_posts(
    request: SocialPostRequest,
    service: Annotated[AdminService, Depends(get_service)],
) -> SocialPostsResponse:
    """Generate caption drafts for a product or article."""
    drafts = await service.social_posts(
        request.content_type, request.content_id, request.platform
    )
    return SocialPostsResponse(items=[SocialPostSchema.from_draft(d) for d in drafts])
