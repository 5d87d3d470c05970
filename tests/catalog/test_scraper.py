"""Tests for the content scraper stub."""

import pytest

from coolstff.catalog.scraper import (
    is_supported_url,
    scrape,
    scrape_article_from_url,
    scrape_product_from_url,
    source_for,
)
from coolstff.domain import ContentType, InvalidArgumentError


class TestScrapeProduct:
    """Tests for product prefill."""

    def test_amazon(self) -> None:
        """Amazon URLs return the light strip fixture."""
        scraped = scrape_product_from_url("https://www.amazon.com/dp/B0TEST")
        assert scraped.type is ContentType.PRODUCT
        assert scraped.title == "Smart Light Strip with App Control"
        assert scraped.price == 29.99
        assert scraped.source_url == "https://www.amazon.com/dp/B0TEST"
        assert len(scraped.images) == 2

    def test_aliexpress(self) -> None:
        """AliExpress URLs return the neck fan fixture."""
        scraped = scrape_product_from_url("https://aliexpress.com/item/1.html")
        assert scraped.price == 19.95

    def test_generic_fallback(self) -> None:
        """Other shops return a generic product."""
        scraped = scrape_product_from_url("https://shop.example.com/item")
        assert scraped.title == "Future Tech Product"
        assert scraped.price == 49.99

    def test_malformed_url(self) -> None:
        """Non-http URLs are rejected."""
        with pytest.raises(InvalidArgumentError):
            scrape_product_from_url("ftp://amazon.com/x")
        with pytest.raises(InvalidArgumentError):
            scrape_product_from_url("not a url")


class TestScrapeArticle:
    """Tests for article prefill."""

    def test_trendhunter(self) -> None:
        """TrendHunter URLs return the flying car story."""
        scraped = scrape_article_from_url("https://www.trendhunter.com/trends/x")
        assert scraped.type is ContentType.ARTICLE
        assert scraped.source == "TrendHunter"
        assert scraped.content
        assert scraped.price is None

    def test_yankodesign(self) -> None:
        """Yanko Design URLs return the tiny house story."""
        scraped = scrape_article_from_url("https://www.yankodesign.com/2024/house")
        assert scraped.source == "Yanko Design"

    def test_generic_fallback(self) -> None:
        """Other blogs return a generic article."""
        assert scrape_article_from_url("https://blog.example.com/p").source == "Design Blog"


class TestHelpers:
    """Tests for URL helpers and dispatch."""

    def test_is_supported_url(self) -> None:
        """Only known hostnames are supported; malformed URLs are not."""
        assert is_supported_url("https://www.amazon.com/dp/1")
        assert is_supported_url("https://trendhunter.com/a")
        assert not is_supported_url("https://shop.example.com/")
        assert not is_supported_url("amazon.com")

    def test_source_for(self) -> None:
        """The source is the hostname without www."""
        assert source_for("https://www.yankodesign.com/a") == "yankodesign.com"
        with pytest.raises(InvalidArgumentError):
            source_for("/relative/path")

    def test_scrape_dispatch(self) -> None:
        """scrape routes on the requested kind."""
        url = "https://www.amazon.com/dp/1"
        assert scrape(url, "product").type is ContentType.PRODUCT
        assert scrape(url, ContentType.ARTICLE).type is ContentType.ARTICLE
        with pytest.raises(InvalidArgumentError):
            scrape(url, "video")
