"""API schemas for the coolstff API.

Pydantic models for request/response validation and serialization.
"""

import math
from datetime import datetime

from pydantic import BaseModel, Field

from coolstff.catalog.captions import IMAGE_REQUIREMENTS, SocialPostDraft
from coolstff.catalog.query import PriceBucket, RatingBucket
from coolstff.catalog.scraper import ScrapedContent
from coolstff.domain.entities import Article, Category, Comment, Product, User
from coolstff.domain.value_objects import AffiliateStore, ContentType, Platform


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class PaginatedResponse(BaseModel):
    """Base paginated response."""

    total: int = Field(..., description="Total number of matching items")
    offset: int = Field(default=0, description="Index of the first returned item")
    limit: int | None = Field(default=None, description="Window size, if paginated")
    has_more: bool = Field(..., description="Whether more items follow this window")


# ============================================================================
# Catalog Schemas
# ============================================================================


class CategorySchema(BaseModel):
    """Category representation."""

    id: str
    name: str
    slug: str
    description: str = ""
    image_url: str = ""

    @classmethod
    def from_entity(cls, category: Category) -> "CategorySchema":
        """Convert Category entity to schema."""
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            image_url=category.image_url,
        )


class AffiliateLinkSchema(BaseModel):
    """Affiliate link representation."""

    id: str
    store: AffiliateStore
    url: str
    price: float


class ProductSchema(BaseModel):
    """Product representation."""

    id: str
    title: str
    description: str
    price: float
    images: list[str]
    category_id: str
    affiliate_links: list[AffiliateLinkSchema] = Field(default_factory=list)
    featured: bool = False
    rating: float = 0.0
    review_count: int = 0
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductSchema":
        """Convert Product entity to schema."""
        return cls(
            id=product.id,
            title=product.title,
            description=product.description,
            price=product.price,
            images=list(product.images),
            category_id=product.category_id,
            affiliate_links=[
                AffiliateLinkSchema(id=link.id, store=link.store, url=link.url, price=link.price)
                for link in product.affiliate_links
            ],
            featured=product.featured,
            rating=product.rating,
            review_count=product.review_count,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ArticleSchema(BaseModel):
    """Article representation."""

    id: str
    title: str
    content: str
    excerpt: str = ""
    cover_image: str = ""
    category_id: str
    featured: bool = False
    source: str = ""
    source_url: str = ""
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleSchema":
        """Convert Article entity to schema."""
        return cls(
            id=article.id,
            title=article.title,
            content=article.content,
            excerpt=article.excerpt,
            cover_image=article.cover_image,
            category_id=article.category_id,
            featured=article.featured,
            source=article.source,
            source_url=article.source_url,
            created_at=article.created_at,
            updated_at=article.updated_at,
        )


class ProductListResponse(PaginatedResponse):
    """Paginated list of products."""

    items: list[ProductSchema] = Field(..., description="Products in this window")


class ArticleListResponse(PaginatedResponse):
    """Paginated list of articles."""

    items: list[ArticleSchema] = Field(..., description="Articles in this window")


class ProductDetailResponse(BaseModel):
    """Product with its category (null if deleted) and comment count."""

    product: ProductSchema
    category: CategorySchema | None = None
    comment_count: int = 0


class ArticleDetailResponse(BaseModel):
    """Article with its category (null if deleted) and comment count."""

    article: ArticleSchema
    category: CategorySchema | None = None
    comment_count: int = 0


class CategoryListResponse(BaseModel):
    """List of categories."""

    categories: list[CategorySchema]
    total: int


class CategoryPageResponse(BaseModel):
    """Category with its filtered products and related articles."""

    category: CategorySchema
    products: ProductListResponse
    articles: list[ArticleSchema]


class HomeResponse(BaseModel):
    """Featured content for the home page."""

    featured_products: list[ProductSchema]
    featured_articles: list[ArticleSchema]
    categories: list[CategorySchema]


class PriceBucketSchema(BaseModel):
    """Products priced in [low, high); high is null for the open-ended band."""

    low: float
    high: float | None
    count: int

    @classmethod
    def from_bucket(cls, bucket: PriceBucket) -> "PriceBucketSchema":
        """Convert PriceBucket to schema."""
        return cls(
            low=bucket.low,
            high=None if math.isinf(bucket.high) else bucket.high,
            count=bucket.count,
        )


class RatingBucketSchema(BaseModel):
    """Products rated min_rating or better."""

    min_rating: float
    count: int

    @classmethod
    def from_bucket(cls, bucket: RatingBucket) -> "RatingBucketSchema":
        """Convert RatingBucket to schema."""
        return cls(min_rating=bucket.min_rating, count=bucket.count)


class FacetsResponse(BaseModel):
    """Filter panel counts."""

    price: list[PriceBucketSchema]
    rating: list[RatingBucketSchema]
    total: int


# ============================================================================
# Engagement Schemas
# ============================================================================


class CommentSchema(BaseModel):
    """Comment representation."""

    id: str
    user_id: str
    user_name: str
    content_id: str
    content_type: ContentType
    text: str
    created_at: datetime

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentSchema":
        """Convert Comment entity to schema."""
        return cls(
            id=comment.id,
            user_id=comment.user_id,
            user_name=comment.user_name,
            content_id=comment.content_id,
            content_type=comment.content_type,
            text=comment.text,
            created_at=comment.created_at,
        )


class CommentListResponse(BaseModel):
    """Comments on one item, newest first."""

    items: list[CommentSchema]
    total: int


class CommentCreateRequest(BaseModel):
    """Request to post a comment."""

    user_id: str = Field(..., min_length=1, description="Author's user id")
    text: str = Field(..., description="Comment body")


class UserCreateRequest(BaseModel):
    """Request to register a user profile after sign-up."""

    id: str = Field(..., min_length=1, description="User id from the auth provider")
    email: str = Field(..., min_length=3)
    name: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """User profile."""

    id: str
    email: str
    name: str
    is_admin: bool
    favorites: list[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Convert User entity to schema."""
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            is_admin=user.is_admin,
            favorites=sorted(user.favorites),
            created_at=user.created_at,
        )


class FavoriteToggleResponse(BaseModel):
    """Result of saving or unsaving a product."""

    user_id: str
    product_id: str
    added: bool = Field(..., description="True if the product is now a favorite")
    favorites: list[str]


class FavoritesResponse(BaseModel):
    """A user's saved products that still exist."""

    items: list[ProductSchema]
    total: int


# ============================================================================
# Admin Schemas
# ============================================================================


class CategoryCreateRequest(BaseModel):
    """Request to create a category."""

    name: str = Field(..., min_length=1, max_length=200)
    slug: str | None = Field(default=None, description="Derived from name when omitted")
    description: str = ""
    image_url: str = ""


class AffiliateLinkCreate(BaseModel):
    """Affiliate link in a product create request."""

    store: AffiliateStore = AffiliateStore.OTHER
    url: str = Field(..., min_length=1)
    price: float | None = Field(default=None, description="Defaults to the product price")


class ProductCreateRequest(BaseModel):
    """Request to create a product."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str = ""
    price: float
    images: list[str] = Field(default_factory=list)
    category_id: str
    affiliate_links: list[AffiliateLinkCreate] = Field(default_factory=list)
    featured: bool = False


class ArticleCreateRequest(BaseModel):
    """Request to create an article."""

    title: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1)
    category_id: str
    excerpt: str = ""
    cover_image: str = ""
    featured: bool = False
    source: str = ""
    source_url: str = ""


class ScrapeRequest(BaseModel):
    """Request to prefill a create form from a URL."""

    url: str = Field(..., min_length=1)
    kind: ContentType = ContentType.PRODUCT


class ScrapeResponse(BaseModel):
    """Prefill data for a create form."""

    type: ContentType
    title: str
    source_url: str
    description: str | None = None
    content: str | None = None
    images: list[str] = Field(default_factory=list)
    price: float | None = None
    source: str | None = None
    supported_site: bool = Field(
        ..., description="Whether the URL is on a site with a known page layout"
    )

    @classmethod
    def from_scraped(cls, scraped: ScrapedContent, supported_site: bool) -> "ScrapeResponse":
        """Convert ScrapedContent to schema."""
        return cls(
            type=scraped.type,
            title=scraped.title,
            source_url=scraped.source_url,
            description=scraped.description,
            content=scraped.content,
            images=list(scraped.images),
            price=scraped.price,
            source=scraped.source,
            supported_site=supported_site,
        )


class SocialPostRequest(BaseModel):
    """Request to draft social media posts."""

    content_type: str
    content_id: str
    platform: str | None = Field(default=None, description="All configured platforms when omitted")


class ImageRequirementsSchema(BaseModel):
    """Preferred image geometry for a platform."""

    width: int
    height: int
    formats: list[str]


class SocialPostSchema(BaseModel):
    """Caption draft."""

    platform: Platform
    content_id: str
    content_type: ContentType
    caption: str
    image_url: str
    status: str
    image_requirements: ImageRequirementsSchema | None = None

    @classmethod
    def from_draft(cls, draft: SocialPostDraft) -> "SocialPostSchema":
        """Convert SocialPostDraft to schema."""
        requirements = IMAGE_REQUIREMENTS.get(draft.platform)
        return cls(
            platform=draft.platform,
            content_id=draft.content_id,
            content_type=draft.content_type,
            caption=draft.caption,
            image_url=draft.image_url,
            status=draft.status,
            image_requirements=(
                ImageRequirementsSchema(
                    width=requirements.width,
                    height=requirements.height,
                    formats=list(requirements.formats),
                )
                if requirements
                else None
            ),
        )


class SocialPostsResponse(BaseModel):
    """Caption drafts."""

    items: list[SocialPostSchema]
