"""Catalog core.

Pure functions over catalog snapshots: the query engine (filter, sort,
paginate, facet buckets, category resolution), favorite and comment
helpers, social caption drafts and the scraper stub.
"""

from coolstff.catalog.captions import (
    IMAGE_REQUIREMENTS,
    RandomSource,
    SocialPostDraft,
    generate_all_social_posts,
    generate_caption,
    generate_social_post,
)
from coolstff.catalog.query import (
    CatalogPage,
    PriceBucket,
    RatingBucket,
    find_category_by_slug,
    in_category,
    latest_first,
    price_buckets,
    query_catalog,
    rating_buckets,
    resolve_category,
    select_featured,
)
from coolstff.catalog.relations import (
    FavoriteChange,
    comment_counts,
    comments_for,
    favorite_products,
    is_favorite,
    plan_favorite_toggle,
    toggle_favorite,
)
from coolstff.catalog.scraper import ScrapedContent, is_supported_url, scrape

__all__ = [
    # Query engine
    "CatalogPage",
    "PriceBucket",
    "RatingBucket",
    "find_category_by_slug",
    "in_category",
    "latest_first",
    "price_buckets",
    "query_catalog",
    "rating_buckets",
    "resolve_category",
    "select_featured",
    # Favorites and comments
    "FavoriteChange",
    "comment_counts",
    "comments_for",
    "favorite_products",
    "is_favorite",
    "plan_favorite_toggle",
    "toggle_favorite",
    # Captions
    "IMAGE_REQUIREMENTS",
    "RandomSource",
    "SocialPostDraft",
    "generate_all_social_posts",
    "generate_caption",
    "generate_social_post",
    # Scraper
    "ScrapedContent",
    "is_supported_url",
    "scrape",
]
