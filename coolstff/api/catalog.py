"""Catalog API endpoints.

Public browsing: home page, categories, product and article listings,
filter facets and detail pages.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from coolstff.api.schemas import (
    ArticleDetailResponse,
    ArticleListResponse,
    ArticleSchema,
    CategoryListResponse,
    CategoryPageResponse,
    CategorySchema,
    ErrorResponse,
    FacetsResponse,
    HomeResponse,
    PriceBucketSchema,
    ProductDetailResponse,
    ProductListResponse,
    ProductSchema,
    RatingBucketSchema,
)
from coolstff.application.catalog_service import CatalogService, get_catalog_service
from coolstff.catalog.query import CatalogPage
from coolstff.domain.entities import Article, Product
from coolstff.domain.exceptions import InvalidArgumentError
from coolstff.domain.value_objects import FilterSpec, PageRequest, SortKey
from coolstff.infrastructure.config import settings

router = APIRouter(tags=["Catalog"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(request: Request) -> CatalogService:
    """Get catalog service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return get_catalog_service(request_id=request_id)


def page_params(
    offset: Annotated[int, Query(description="Results to skip")] = 0,
    limit: Annotated[int | None, Query(description="Window size")] = None,
) -> PageRequest:
    """Build the listing window from query parameters.

    Raises:
        InvalidArgumentError: If the window is negative or larger than max_page_size.
    """
    if limit is None:
        limit = settings.default_page_size
    if limit > settings.max_page_size:
        raise InvalidArgumentError(
            "limit", f"must be <= {settings.max_page_size}", value=limit
        )
    return PageRequest(offset=offset, limit=limit)


@dataclass
class ProductQuery:
    """Parsed product listing parameters."""

    filters: FilterSpec
    sort: SortKey
    page: PageRequest


def filter_params(
    price_min: Annotated[float, Query(description="Inclusive lower price bound")] = 0.0,
    price_max: Annotated[
        float | None, Query(description="Inclusive upper price bound")
    ] = None,
    min_rating: Annotated[float, Query(description="Minimum rating, 0 to 5")] = 0.0,
) -> FilterSpec:
    """Build price and rating bounds from query parameters.

    Validation is left to the domain so that bad bounds surface as
    INVALID_ARGUMENT rather than a schema error.
    """
    return FilterSpec(
        price_min=price_min,
        price_max=float("inf") if price_max is None else price_max,
        min_rating=min_rating,
    )


def product_query_params(
    page: Annotated[PageRequest, Depends(page_params)],
    filters: Annotated[FilterSpec, Depends(filter_params)],
    sort: Annotated[
        str, Query(description="latest, price-low, price-high or rating")
    ] = SortKey.LATEST.value,
) -> ProductQuery:
    """Build a product query from query parameters."""
    return ProductQuery(
        filters=filters,
        sort=SortKey.parse(sort),
        page=page,
    )


# ============================================================================
# Converters
# ============================================================================


def products_to_response(page: CatalogPage[Product]) -> ProductListResponse:
    """Convert a product CatalogPage to response schema."""
    return ProductListResponse(
        items=[ProductSchema.from_entity(p) for p in page.results],
        total=page.total,
        offset=page.page.offset if page.page else 0,
        limit=page.page.limit if page.page else None,
        has_more=page.has_more,
    )


def articles_to_response(page: CatalogPage[Article]) -> ArticleListResponse:
    """Convert an article CatalogPage to response schema."""
    return ArticleListResponse(
        items=[ArticleSchema.from_entity(a) for a in page.results],
        total=page.total,
        offset=page.page.offset if page.page else 0,
        limit=page.page.limit if page.page else None,
        has_more=page.has_more,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/home",
    response_model=HomeResponse,
    summary="Home page",
    description="Featured products, featured articles and leading categories.",
)
async def home(
    service: Annotated[CatalogService, Depends(get_service)],
) -> HomeResponse:
    """Get home page content."""
    result = await service.home_page()
    return HomeResponse(
        featured_products=[ProductSchema.from_entity(p) for p in result.featured_products],
        featured_articles=[ArticleSchema.from_entity(a) for a in result.featured_articles],
        categories=[CategorySchema.from_entity(c) for c in result.categories],
    )


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    summary="List categories",
)
async def list_categories(
    service: Annotated[CatalogService, Depends(get_service)],
) -> CategoryListResponse:
    """List all categories."""
    categories = await service.list_categories()
    return CategoryListResponse(
        categories=[CategorySchema.from_entity(c) for c in categories],
        total=len(categories),
    )


@router.get(
    "/categories/{slug}",
    response_model=CategoryPageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Category page",
    description="Filtered, sorted products of a category plus its articles.",
)
async def category_page(
    slug: str,
    query: Annotated[ProductQuery, Depends(product_query_params)],
    service: Annotated[CatalogService, Depends(get_service)],
) -> CategoryPageResponse:
    """Get a category page.

    Args:
        slug: Category slug.
        query: Product filters, sort and window.
        service: Catalog service.

    Returns:
        Category, product page and related articles.
    """
    result = await service.category_page(slug, query.filters, query.sort, query.page)
    return CategoryPageResponse(
        category=CategorySchema.from_entity(result.category),
        products=products_to_response(result.products),
        articles=[ArticleSchema.from_entity(a) for a in result.articles],
    )


@router.get(
    "/products",
    response_model=ProductListResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="List products",
)
async def list_products(
    query: Annotated[ProductQuery, Depends(product_query_params)],
    service: Annotated[CatalogService, Depends(get_service)],
    category: Annotated[str | None, Query(description="Category slug")] = None,
) -> ProductListResponse:
    """List products with filters, sorting and pagination."""
    page = await service.list_products(
        query.filters, query.sort, query.page, category_slug=category
    )
    return products_to_response(page)


@router.get(
    "/products/facets",
    response_model=FacetsResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Filter facets",
    description="Counts of matching products per price band and rating threshold.",
)
async def product_facets(
    filters: Annotated[FilterSpec, Depends(filter_params)],
    service: Annotated[CatalogService, Depends(get_service)],
    category: Annotated[str | None, Query(description="Category slug")] = None,
) -> FacetsResponse:
    """Get filter panel counts."""
    result = await service.product_facets(filters, category_slug=category)
    return FacetsResponse(
        price=[PriceBucketSchema.from_bucket(b) for b in result.price],
        rating=[RatingBucketSchema.from_bucket(b) for b in result.rating],
        total=result.total,
    )


@router.get(
    "/products/{product_id}",
    response_model=ProductDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductDetailResponse:
    """Get a product with its category."""
    detail = await service.get_product(product_id)
    return ProductDetailResponse(
        product=ProductSchema.from_entity(detail.product),
        category=CategorySchema.from_entity(detail.category) if detail.category else None,
        comment_count=detail.comment_count,
    )


@router.get(
    "/articles",
    response_model=ArticleListResponse,
    responses={400: {"model": ErrorResponse}},
    summary="List articles",
)
async def list_articles(
    page: Annotated[PageRequest, Depends(page_params)],
    service: Annotated[CatalogService, Depends(get_service)],
) -> ArticleListResponse:
    """List articles newest first."""
    return articles_to_response(await service.list_articles(page))


@router.get(
    "/articles/{article_id}",
    response_model=ArticleDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get article",
)
async def get_article(
    article_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ArticleDetailResponse:
    """Get an article with its category."""
    detail = await service.get_article(article_id)
    return ArticleDetailResponse(
        article=ArticleSchema.from_entity(detail.article),
        category=CategorySchema.from_entity(detail.category) if detail.category else None,
        comment_count=detail.comment_count,
    )
