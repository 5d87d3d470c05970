"""Content scraper stub.

Admins paste a shop or blog URL to prefill the create forms. No page is
fetched: the returned content is a fixture chosen by which site the URL
points at, with a generic fallback for everything else.
"""

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from coolstff.domain.exceptions import InvalidArgumentError
from coolstff.domain.value_objects import ContentType

# Hostnames with a known page layout, and what kind of content they carry.
SUPPORTED_SITES: dict[str, ContentType] = {
    "amazon.com": ContentType.PRODUCT,
    "aliexpress.com": ContentType.PRODUCT,
    "trendhunter.com": ContentType.ARTICLE,
}


@dataclass(frozen=True)
class ScrapedContent:
    """Prefill data for an admin create form.

    Attributes:
        type: Whether this prefills a product or an article.
        title: Title or headline.
        source_url: URL that was scraped.
        description: Product description (products only).
        content: Article body (articles only).
        images: Image URLs found on the page.
        price: Listed price (products only).
        source: Publication name (articles only).
    """

    type: ContentType
    title: str
    source_url: str
    description: str | None = None
    content: str | None = None
    images: tuple[str, ...] = field(default_factory=tuple)
    price: float | None = None
    source: str | None = None


def _pexels(photo_id: int) -> str:
    return (
        f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg"
        "?auto=compress&cs=tinysrgb&w=1260&h=750"
    )


def _hostname(url: str) -> str | None:
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if parts.scheme not in ("http", "https") or not parts.hostname:
        return None
    return parts.hostname.removeprefix("www.")


def _require_url(url: str) -> None:
    if _hostname(url) is None:
        raise InvalidArgumentError("url", "must be an absolute http(s) URL", value=url)


def is_supported_url(url: str) -> bool:
    """Check whether a URL points at a site with a known layout.

    Malformed URLs are reported as unsupported rather than raising.
    """
    return _hostname(url) in SUPPORTED_SITES


def source_for(url: str) -> str:
    """Hostname used as an article's source when none is given.

    Raises:
        InvalidArgumentError: If url is not an absolute http(s) URL.
    """
    hostname = _hostname(url)
    if hostname is None:
        raise InvalidArgumentError("url", "must be an absolute http(s) URL", value=url)
    return hostname


def scrape_product_from_url(url: str) -> ScrapedContent:
    """Return product prefill data for a shop URL.

    Raises:
        InvalidArgumentError: If url is not an absolute http(s) URL.
    """
    _require_url(url)
    if "amazon.com" in url:
        return ScrapedContent(
            type=ContentType.PRODUCT,
            title="Smart Light Strip with App Control",
            description=(
                "LED strip lights with 16 million colors, music sync, and smart home "
                "integration. Control with your smartphone app or voice assistants like "
                "Alexa and Google Home."
            ),
            price=29.99,
            images=(_pexels(3165335), _pexels(1293269)),
            source_url=url,
        )
    if "aliexpress.com" in url:
        return ScrapedContent(
            type=ContentType.PRODUCT,
            title="Portable Neck Fan with 3 Speeds",
            description=(
                "Wearable neck fan with bladeless design, 3 speeds, and rechargeable "
                "battery. Perfect for outdoor activities, sports, and hot summer days."
            ),
            price=19.95,
            images=(_pexels(3780681), _pexels(4195509)),
            source_url=url,
        )
    return ScrapedContent(
        type=ContentType.PRODUCT,
        title="Future Tech Product",
        description="An innovative product with cutting-edge technology.",
        price=49.99,
        images=(_pexels(1714208),),
        source_url=url,
    )


def scrape_article_from_url(url: str) -> ScrapedContent:
    """Return article prefill data for a blog URL.

    Raises:
        InvalidArgumentError: If url is not an absolute http(s) URL.
    """
    _require_url(url)
    if "trendhunter.com" in url:
        return ScrapedContent(
            type=ContentType.ARTICLE,
            title="Conceptual Flying Car Design Shows the Future of Urban Transportation",
            content=(
                "This innovative flying car concept represents a bold vision for the future "
                "of urban mobility. The vehicle combines vertical take-off and landing "
                "capabilities with autonomous driving features.\n\n"
                "The sleek design incorporates sustainable materials and is powered by "
                "next-generation solid-state batteries. Its flight module can detach from "
                "the ground vehicle, allowing users to switch between air and road travel."
            ),
            source="TrendHunter",
            images=(_pexels(8539462),),
            source_url=url,
        )
    if "yankodesign.com" in url:
        return ScrapedContent(
            type=ContentType.ARTICLE,
            title="Expandable Tiny House Concept Triples Living Space with Ingenious Design",
            content=(
                "This tiny house concept can triple its living space at the touch of a "
                "button. Sections slide out from the main module, turning a compact "
                "400-square-foot space into a 1,200-square-foot home.\n\n"
                "The house is built mostly from recycled materials and includes solar "
                "panels, rainwater collection and a composting system."
            ),
            source="Yanko Design",
            images=(_pexels(1769342),),
            source_url=url,
        )
    return ScrapedContent(
        type=ContentType.ARTICLE,
        title="Innovative Design Concept",
        content=(
            "This article showcases an innovative design concept that could change the "
            "way we interact with technology."
        ),
        source="Design Blog",
        images=(_pexels(1779487),),
        source_url=url,
    )


def scrape(url: str, kind: ContentType | str) -> ScrapedContent:
    """Dispatch to the product or article stub.

    Raises:
        InvalidArgumentError: For an unknown kind or a malformed URL.
    """
    if ContentType.parse(kind) is ContentType.PRODUCT:
        return scrape_product_from_url(url)
    return scrape_article_from_url(url)
