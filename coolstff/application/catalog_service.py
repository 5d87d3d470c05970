"""Catalog application service.

Reads snapshots from the content store and shapes them with the catalog
query engine for category pages, listings, detail pages and the home page.
"""

from dataclasses import dataclass

import structlog

from coolstff.catalog.query import (
    CatalogPage,
    PriceBucket,
    RatingBucket,
    filter_products,
    find_category_by_slug,
    in_category,
    latest_first,
    paginate,
    price_buckets,
    query_catalog,
    rating_buckets,
    resolve_category,
    select_featured,
)
from coolstff.catalog.relations import comment_counts
from coolstff.domain.entities import Article, Category, Product
from coolstff.domain.exceptions import NotFoundError, StoreUnavailableError
from coolstff.domain.value_objects import ContentType, FilterSpec, PageRequest, SortKey
from coolstff.infrastructure.config import settings
from coolstff.infrastructure.content_store import ContentStore, get_content_store

logger = structlog.get_logger()

# Lower bounds of the price bands shown in the filter panel.
DEFAULT_PRICE_EDGES: tuple[float, ...] = (0, 25, 50, 100, 250, 500, 1000)


# ============================================================================
# Service Result Types
# ============================================================================


@dataclass
class CategoryPageResult:
    """Everything a category page shows."""

    category: Category
    products: CatalogPage[Product]
    articles: tuple[Article, ...]


@dataclass
class ProductDetail:
    """A product with its category resolved (None if dangling)."""

    product: Product
    category: Category | None
    comment_count: int = 0


@dataclass
class ArticleDetail:
    """An article with its category resolved (None if dangling)."""

    article: Article
    category: Category | None
    comment_count: int = 0


@dataclass
class HomePageResult:
    """Featured content for the home page."""

    featured_products: tuple[Product, ...] = ()
    featured_articles: tuple[Article, ...] = ()
    categories: tuple[Category, ...] = ()


@dataclass
class FacetsResult:
    """Filter panel counts for a set of products."""

    price: tuple[PriceBucket, ...] = ()
    rating: tuple[RatingBucket, ...] = ()
    total: int = 0


# ============================================================================
# Catalog Service
# ============================================================================


class CatalogService:
    """Application service for browsing the catalog.

    Example usage:
        service = CatalogService(store)
        page = await service.category_page(
            "smart-home",
            FilterSpec(price_max=100),
            SortKey.PRICE_LOW,
            PageRequest(offset=0, limit=12),
        )
    """

    def __init__(
        self,
        store: ContentStore | None = None,
        request_id: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            store: Content store to read from.
            request_id: Request ID for correlation.
        """
        self.store = store or get_content_store()
        self.request_id = request_id

    async def list_categories(self) -> list[Category]:
        """List all categories."""
        return await self.store.list_categories()

    async def get_category(self, slug: str) -> Category:
        """Get a category by slug.

        Raises:
            NotFoundError: If no category has this slug.
        """
        category = find_category_by_slug(await self.store.list_categories(), slug)
        if category is None:
            raise NotFoundError("Category", slug)
        return category

    async def category_page(
        self,
        slug: str,
        filters: FilterSpec | None = None,
        sort: SortKey | str = SortKey.LATEST,
        page: PageRequest | None = None,
    ) -> CategoryPageResult:
        """Build a category page: filtered products plus related articles.

        Args:
            slug: Category slug.
            filters: Price/rating bounds for products.
            sort: Product sort key.
            page: Optional product window.

        Returns:
            Category, product page and articles (newest first).

        Raises:
            NotFoundError: If no category has this slug.
            InvalidArgumentError: If sort is unknown.
        """
        category = await self.get_category(slug)
        try:
            products = in_category(await self.store.list_products(), category.id)
            articles = in_category(await self.store.list_articles(), category.id)
        except StoreUnavailableError as e:
            logger.error(
                "Failed to load category content",
                slug=slug,
                error=e.message,
                request_id=self.request_id,
            )
            raise

        return CategoryPageResult(
            category=category,
            products=query_catalog(products, filters, sort, page),
            articles=latest_first(articles),
        )

    async def list_products(
        self,
        filters: FilterSpec | None = None,
        sort: SortKey | str = SortKey.LATEST,
        page: PageRequest | None = None,
        category_slug: str | None = None,
    ) -> CatalogPage[Product]:
        """Query all products, optionally within one category.

        Raises:
            NotFoundError: If category_slug matches no category.
            InvalidArgumentError: If sort is unknown.
        """
        products = await self.store.list_products()
        if category_slug is not None:
            category = await self.get_category(category_slug)
            products = list(in_category(products, category.id))
        return query_catalog(products, filters, sort, page)

    async def product_facets(
        self,
        filters: FilterSpec | None = None,
        category_slug: str | None = None,
        edges: tuple[float, ...] = DEFAULT_PRICE_EDGES,
    ) -> FacetsResult:
        """Count the products matching filters per price band and rating threshold.

        Raises:
            NotFoundError: If category_slug matches no category.
            InvalidArgumentError: If edges are not increasing.
        """
        products = await self.store.list_products()
        if category_slug is not None:
            category = await self.get_category(category_slug)
            products = list(in_category(products, category.id))
        matching = filter_products(products, filters or FilterSpec())
        return FacetsResult(
            price=price_buckets(matching, edges),
            rating=rating_buckets(matching),
            total=len(matching),
        )

    async def _comment_count(self, content_id: str, content_type: ContentType) -> int:
        comments = await self.store.list_comments(content_id, content_type)
        return comment_counts(comments, content_type).get(content_id, 0)

    async def get_product(self, product_id: str) -> ProductDetail:
        """Get a product with its category and comment count.

        Raises:
            NotFoundError: If the product does not exist.
        """
        product = await self.store.get_product(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        categories = resolve_category([product], await self.store.list_categories())
        return ProductDetail(
            product=product,
            category=categories[product.id],
            comment_count=await self._comment_count(product.id, ContentType.PRODUCT),
        )

    async def list_articles(
        self,
        page: PageRequest | None = None,
    ) -> CatalogPage[Article]:
        """List articles newest first."""
        articles = latest_first(await self.store.list_articles())
        return CatalogPage(results=paginate(articles, page), total=len(articles), page=page)

    async def get_article(self, article_id: str) -> ArticleDetail:
        """Get an article with its category and comment count.

        Raises:
            NotFoundError: If the article does not exist.
        """
        article = await self.store.get_article(article_id)
        if article is None:
            raise NotFoundError("Article", article_id)
        categories = resolve_category([article], await self.store.list_categories())
        return ArticleDetail(
            article=article,
            category=categories[article.id],
            comment_count=await self._comment_count(article.id, ContentType.ARTICLE),
        )

    async def home_page(self) -> HomePageResult:
        """Collect featured products, featured articles and leading categories."""
        categories = await self.store.list_categories()
        return HomePageResult(
            featured_products=select_featured(
                await self.store.list_products(), settings.featured_products_limit
            ),
            featured_articles=select_featured(
                await self.store.list_articles(), settings.featured_articles_limit
            ),
            categories=tuple(categories[: settings.home_categories_limit]),
        )


def get_catalog_service(request_id: str | None = None) -> CatalogService:
    """Create a catalog service bound to the configured store."""
    return CatalogService(request_id=request_id)
