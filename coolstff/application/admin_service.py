"""Admin application service.

Content creation and deletion for the admin console, the scraper stub
that prefills create forms, and social media caption drafts.
"""

from collections.abc import Iterable
from typing import Any
from uuid import uuid4

import structlog

from coolstff.catalog.captions import (
    RandomSource,
    SocialPostDraft,
    generate_all_social_posts,
    generate_social_post,
)
from coolstff.catalog.query import find_category_by_slug
from coolstff.catalog.scraper import ScrapedContent, scrape, source_for
from coolstff.domain.base import utc_now
from coolstff.domain.entities import (
    AffiliateLink,
    Article,
    Category,
    Content,
    Product,
    slugify,
)
from coolstff.domain.exceptions import InvalidArgumentError, NotFoundError
from coolstff.domain.value_objects import ContentType, Platform
from coolstff.infrastructure.content_store import ContentStore, get_content_store

logger = structlog.get_logger()

EXCERPT_LENGTH = 150

DEMO_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Smart Home", "Connected lights, speakers and sensors."),
    ("Outdoor", "Gear for summer days and weekend trips."),
    ("Design", "Concepts and objects from independent designers."),
)

# (url, affiliate store, category name, featured)
DEMO_PRODUCT_URLS: tuple[tuple[str, str, str, bool], ...] = (
    ("https://www.amazon.com/dp/B08LIGHTSTRIP", "amazon", "Smart Home", True),
    ("https://www.aliexpress.com/item/neck-fan.html", "aliexpress", "Outdoor", True),
    ("https://shop.example.com/future-tech", "other", "Design", False),
)

# (url, category name, featured)
DEMO_ARTICLE_URLS: tuple[tuple[str, str, bool], ...] = (
    ("https://www.trendhunter.com/trends/flying-car", "Design", True),
    ("https://www.yankodesign.com/expandable-tiny-house/", "Design", False),
)


def make_excerpt(content: str, length: int = EXCERPT_LENGTH) -> str:
    """Derive a card teaser from an article body."""
    content = content.strip()
    if len(content) <= length:
        return content
    return content[:length].rstrip() + "..."


class AdminService:
    """Application service for the admin console.

    Example usage:
        service = AdminService(store)
        category = await service.create_category("Smart Home")
        product = await service.create_product(
            title="Smart Light Strip",
            price=29.99,
            images=["https://img.example/strip.jpg"],
            category_id=category.id,
        )
        drafts = await service.social_posts("product", product.id)
    """

    def __init__(
        self,
        store: ContentStore | None = None,
        request_id: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            store: Content store to write to.
            request_id: Request ID for correlation.
        """
        self.store = store or get_content_store()
        self.request_id = request_id

    async def _require_category(self, category_id: str) -> None:
        categories = await self.store.list_categories()
        if not any(c.id == category_id for c in categories):
            raise InvalidArgumentError("category_id", "unknown category", value=category_id)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    async def create_category(
        self,
        name: str,
        slug: str | None = None,
        description: str = "",
        image_url: str = "",
    ) -> Category:
        """Create a category.

        Args:
            name: Display name.
            slug: URL key; derived from name when omitted.
            description: Category description.
            image_url: Hero image URL.

        Returns:
            The created category.

        Raises:
            InvalidArgumentError: If the name is blank or the slug is taken or malformed.
        """
        if not name.strip():
            raise InvalidArgumentError("name", "cannot be empty")
        slug = slug or slugify(name)
        if find_category_by_slug(await self.store.list_categories(), slug) is not None:
            raise InvalidArgumentError("slug", "already in use", value=slug)

        category = Category(
            id=str(uuid4()),
            name=name.strip(),
            slug=slug,
            description=description,
            image_url=image_url,
        )
        await self.store.save_category(category)

        logger.info(
            "Category created",
            category_id=category.id,
            slug=slug,
            request_id=self.request_id,
        )
        return category

    async def create_product(
        self,
        title: str,
        price: float,
        images: Iterable[str],
        category_id: str,
        description: str = "",
        affiliate_links: Iterable[dict[str, Any]] = (),
        featured: bool = False,
    ) -> Product:
        """Create a product.

        New products start with no rating and no reviews. Only absolute
        http(s) image URLs are kept.

        Raises:
            InvalidArgumentError: If the category is unknown, no image is left,
                or a price is negative.
        """
        if not title.strip():
            raise InvalidArgumentError("title", "cannot be empty")
        await self._require_category(category_id)

        now = utc_now()
        product = Product(
            id=str(uuid4()),
            title=title.strip(),
            description=description,
            price=price,
            images=tuple(url for url in images if url.startswith("http")),
            category_id=category_id,
            affiliate_links=tuple(
                AffiliateLink(
                    id=link.get("id") or str(uuid4()),
                    store=link.get("store", "other"),
                    url=link["url"],
                    price=link.get("price", price),
                )
                for link in affiliate_links
            ),
            featured=featured,
            rating=0.0,
            review_count=0,
            created_at=now,
            updated_at=now,
        )
        await self.store.save_product(product)

        logger.info(
            "Product created",
            product_id=product.id,
            category_id=category_id,
            affiliate_links=len(product.affiliate_links),
            request_id=self.request_id,
        )
        return product

    async def create_article(
        self,
        title: str,
        content: str,
        category_id: str,
        excerpt: str = "",
        cover_image: str = "",
        featured: bool = False,
        source: str = "",
        source_url: str = "",
    ) -> Article:
        """Create an article.

        The excerpt is derived from the body when omitted, and the source
        defaults to the hostname of source_url.

        Raises:
            InvalidArgumentError: If title or content is blank, the category is
                unknown, or source_url is malformed.
        """
        if not title.strip():
            raise InvalidArgumentError("title", "cannot be empty")
        if not content.strip():
            raise InvalidArgumentError("content", "cannot be empty")
        await self._require_category(category_id)
        if not source and source_url:
            source = source_for(source_url)

        now = utc_now()
        article = Article(
            id=str(uuid4()),
            title=title.strip(),
            content=content,
            excerpt=excerpt or make_excerpt(content),
            cover_image=cover_image,
            category_id=category_id,
            featured=featured,
            source=source,
            source_url=source_url,
            created_at=now,
            updated_at=now,
        )
        await self.store.save_article(article)

        logger.info(
            "Article created",
            article_id=article.id,
            category_id=category_id,
            request_id=self.request_id,
        )
        return article

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    async def delete_product(self, product_id: str) -> None:
        """Delete a product. Favorites and comments pointing at it are left to dangle.

        Raises:
            NotFoundError: If the product does not exist.
        """
        if not await self.store.delete_product(product_id):
            raise NotFoundError("Product", product_id)
        logger.info("Product deleted", product_id=product_id, request_id=self.request_id)

    async def delete_article(self, article_id: str) -> None:
        """Delete an article.

        Raises:
            NotFoundError: If the article does not exist.
        """
        if not await self.store.delete_article(article_id):
            raise NotFoundError("Article", article_id)
        logger.info("Article deleted", article_id=article_id, request_id=self.request_id)

    async def delete_comment(self, comment_id: str) -> None:
        """Delete a comment.

        Raises:
            NotFoundError: If the comment does not exist.
        """
        if not await self.store.delete_comment(comment_id):
            raise NotFoundError("Comment", comment_id)
        logger.info("Comment deleted", comment_id=comment_id, request_id=self.request_id)

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    async def seed_demo_content(self) -> dict[str, int]:
        """Populate an empty store with demo categories, products and articles.

        Products and articles are built from the scraper's canned pages so
        the demo catalog matches what the admin prefill shows.

        Returns:
            Counts of created categories, products and articles.

        Raises:
            InvalidArgumentError: If the store already holds categories.
        """
        if await self.store.list_categories():
            raise InvalidArgumentError("store", "already seeded")

        categories = {
            name: await self.create_category(name, description=description)
            for name, description in DEMO_CATEGORIES
        }

        products = 0
        for url, store, category_name, featured in DEMO_PRODUCT_URLS:
            scraped = self.scrape(url, ContentType.PRODUCT)
            await self.create_product(
                title=scraped.title,
                price=scraped.price or 0.0,
                images=scraped.images,
                category_id=categories[category_name].id,
                description=scraped.description or "",
                affiliate_links=[{"store": store, "url": url}],
                featured=featured,
            )
            products += 1

        articles = 0
        for url, category_name, featured in DEMO_ARTICLE_URLS:
            scraped = self.scrape(url, ContentType.ARTICLE)
            await self.create_article(
                title=scraped.title,
                content=scraped.content or "",
                category_id=categories[category_name].id,
                excerpt=scraped.description or "",
                cover_image=scraped.images[0] if scraped.images else "",
                featured=featured,
                source=scraped.source or "",
                source_url=url,
            )
            articles += 1

        logger.info(
            "Demo content seeded",
            categories=len(categories),
            products=products,
            articles=articles,
            request_id=self.request_id,
        )
        return {"categories": len(categories), "products": products, "articles": articles}

    # ------------------------------------------------------------------
    # Scraper and social drafts
    # ------------------------------------------------------------------

    def scrape(self, url: str, kind: ContentType | str) -> ScrapedContent:
        """Prefill a create form from a URL (stubbed, no network access)."""
        scraped = scrape(url, kind)
        logger.info(
            "URL scraped",
            url=url,
            kind=scraped.type.value,
            request_id=self.request_id,
        )
        return scraped

    async def _load_content(self, content_type: ContentType, content_id: str) -> Content:
        if content_type is ContentType.PRODUCT:
            content: Content | None = await self.store.get_product(content_id)
        else:
            content = await self.store.get_article(content_id)
        if content is None:
            raise NotFoundError(content_type.value.capitalize(), content_id)
        return content

    async def social_posts(
        self,
        content_type: ContentType | str,
        content_id: str,
        platform: Platform | str | None = None,
        random_source: RandomSource | None = None,
    ) -> tuple[SocialPostDraft, ...]:
        """Generate caption drafts for one platform, or all configured ones.

        Raises:
            InvalidArgumentError: For an unknown content type or platform, or a
                platform without templates.
            NotFoundError: If the content does not exist.
        """
        content = await self._load_content(ContentType.parse(content_type), content_id)
        kwargs = {"random_source": random_source} if random_source is not None else {}
        if platform is None:
            return generate_all_social_posts(content, **kwargs)
        return (generate_social_post(content, platform, **kwargs),)


def get_admin_service(request_id: str | None = None) -> AdminService:
    """Create an admin service bound to the configured store."""
    return AdminService(request_id=request_id)
