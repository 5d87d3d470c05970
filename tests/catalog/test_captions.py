"""Tests for social media caption drafts."""

from collections.abc import Callable

import pytest

from coolstff.catalog.captions import (
    TEMPLATES,
    configured_platforms,
    format_caption,
    generate_all_social_posts,
    generate_caption,
    generate_social_post,
    pick_template,
    templates_for,
)
from coolstff.domain import (
    Article,
    ContentType,
    InvalidArgumentError,
    Platform,
    Product,
)


def fixed(value: float) -> Callable[[], float]:
    return lambda: value


@pytest.fixture
def widget(make_product: Callable[..., Product]) -> Product:
    """The Widget product priced 9.99."""
    return make_product("w1", title="Widget", price=9.99, images=("https://img/w.jpg",))


class TestGenerateCaption:
    """Tests for caption generation."""

    def test_widget_facebook_first_template(self, widget: Product) -> None:
        """A fixed 0 picks template 0 and formats the price to two decimals."""
        caption = generate_caption(widget, "facebook", fixed(0))
        assert caption == (
            "🔥 NEW: Widget - Discover this innovative product! 🚀\n\n"
            "💰 Only $9.99\n\n#Innovation #TechGadgets #CoolStuff"
        )

    def test_price_always_two_decimals(self, make_product: Callable[..., Product]) -> None:
        """Whole prices render with two decimals."""
        product = make_product(title="Lamp", price=25)
        assert "$25.00" in generate_caption(product, Platform.FACEBOOK, fixed(0))

    def test_random_source_selects_template(self, widget: Product) -> None:
        """The random value maps uniformly onto the template list."""
        templates = templates_for("facebook", "product")
        assert len(templates) == 2
        second = generate_caption(widget, "facebook", fixed(0.5))
        assert second == format_caption(templates[1], widget)
        assert generate_caption(widget, "facebook", fixed(0.999)) == second

    def test_article_has_no_price(self, make_article: Callable[..., Article]) -> None:
        """Articles only substitute the title."""
        article = make_article(title="Flying Cars")
        caption = generate_caption(article, "twitter", fixed(0))
        assert caption.startswith("🎯 Future of Design: Flying Cars")
        assert "{title}" not in caption

    def test_deterministic_for_fixed_source(self, widget: Product) -> None:
        """Same content, platform and random value give the same caption."""
        for platform in configured_platforms():
            assert generate_caption(widget, platform, fixed(0.3)) == generate_caption(
                widget, platform, fixed(0.3)
            )

    def test_every_template_substitutes_title(
        self, widget: Product, make_article: Callable[..., Article]
    ) -> None:
        """No template leaves a title placeholder behind."""
        article = make_article(title="Tiny House")
        for platform, by_type in TEMPLATES.items():
            for content_type, templates in by_type.items():
                content = widget if content_type is ContentType.PRODUCT else article
                for template in templates:
                    caption = format_caption(template, content)
                    assert content.title in caption
                    assert "{title}" not in caption

    def test_only_first_placeholder_replaced(self, widget: Product) -> None:
        """A repeated placeholder is substituted once."""
        assert format_caption("{title} / {title}", widget) == "Widget / {title}"

    def test_unknown_platform(self, widget: Product) -> None:
        """Unknown platforms raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            generate_caption(widget, "myspace", fixed(0))

    def test_platform_without_templates(self, widget: Product) -> None:
        """Pinterest is a known platform without caption templates."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            generate_caption(widget, Platform.PINTEREST, fixed(0))
        assert exc_info.value.argument == "platform"

    @pytest.mark.parametrize("roll", [1.0, -0.1, 1.5])
    def test_random_source_out_of_range(self, roll: float) -> None:
        """Random values must lie in [0, 1)."""
        with pytest.raises(InvalidArgumentError):
            pick_template(("a", "b"), fixed(roll))


class TestSocialPosts:
    """Tests for social post drafts."""

    def test_generate_social_post(self, widget: Product) -> None:
        """Drafts carry the caption and primary image."""
        draft = generate_social_post(widget, "instagram", fixed(0))
        assert draft.platform is Platform.INSTAGRAM
        assert draft.content_id == "w1"
        assert draft.content_type is ContentType.PRODUCT
        assert draft.image_url == "https://img/w.jpg"
        assert draft.status == "draft"
        assert draft.caption.startswith("🚀 Introducing: Widget")
        assert "\n.\n.\n.\n" in draft.caption

    def test_generate_all_social_posts(self, make_article: Callable[..., Article]) -> None:
        """One draft per configured platform, in platform order."""
        drafts = generate_all_social_posts(make_article(), fixed(0))
        assert [d.platform for d in drafts] == [
            Platform.FACEBOOK,
            Platform.TWITTER,
            Platform.INSTAGRAM,
        ]
        assert all(d.content_type is ContentType.ARTICLE for d in drafts)
