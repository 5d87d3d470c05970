"""Social media caption drafts.

Each configured platform has a few caption templates per content type.
A template is picked with an injected random source, then "{title}" and,
for products, "${price}" are substituted. The random source is the only
non-deterministic input; pass a constant to pin the template.
"""

import random
from collections.abc import Callable
from dataclasses import dataclass

from coolstff.domain.base import ValueObject
from coolstff.domain.entities import Content
from coolstff.domain.exceptions import InvalidArgumentError
from coolstff.domain.value_objects import ContentType, Platform

# Returns a float in [0, 1), like random.random.
RandomSource = Callable[[], float]

TITLE_PLACEHOLDER = "{title}"
PRICE_PLACEHOLDER = "${price}"

_INSTAGRAM_SPACER = "\n.\n.\n.\n"

TEMPLATES: dict[Platform, dict[ContentType, tuple[str, ...]]] = {
    Platform.FACEBOOK: {
        ContentType.PRODUCT: (
            "🔥 NEW: {title} - Discover this innovative product! 🚀\n\n"
            "💰 Only ${price}\n\n#Innovation #TechGadgets #CoolStuff",
            "✨ Featured Product Alert! ✨\n\n{title}\n\n"
            "Explore more at coolstff.com 🌟\n\n#Innovation #CoolGadgets",
        ),
        ContentType.ARTICLE: (
            "🎯 {title}\n\nRead more about this amazing concept on coolstff.com! 🔍\n\n"
            "#FutureTech #Innovation",
            "🌟 Design of the Future: {title}\n\n"
            "Discover more innovative designs on coolstff.com 🚀\n\n"
            "#ConceptualDesign #Innovation",
        ),
    },
    Platform.TWITTER: {
        ContentType.PRODUCT: (
            "🆕 {title}\n\nCheck out this innovative product on coolstff.com!\n\n"
            "#Innovation #TechGadgets",
            "Discovered: {title} 🚀\n\nFind more cool stuff at coolstff.com!\n\n"
            "#CoolGadgets #Innovation",
        ),
        ContentType.ARTICLE: (
            "🎯 Future of Design: {title}\n\nRead more on coolstff.com\n\n#FutureTech #Innovation",
            "🌟 {title}\n\nExplore this amazing concept on coolstff.com!\n\n#Design #Innovation",
        ),
    },
    Platform.INSTAGRAM: {
        ContentType.PRODUCT: (
            "🚀 Introducing: {title}\n\n"
            "Discover more innovative products like this on coolstff.com (link in bio)\n"
            + _INSTAGRAM_SPACER
            + "#Innovation #TechGadgets #CoolStuff #FutureTech #Design #TechnologyInnovation",
            "✨ Featured: {title}\n\n"
            "Find more amazing products on coolstff.com (link in bio)\n"
            + _INSTAGRAM_SPACER
            + "#Innovation #ProductDesign #CoolGadgets #TechLovers #FutureDesign",
        ),
        ContentType.ARTICLE: (
            "🎯 {title}\n\nRead the full story on coolstff.com (link in bio)\n"
            + _INSTAGRAM_SPACER
            + "#ConceptualDesign #FutureTech #Innovation #Design #TechnologyInnovation",
            "🌟 Design Spotlight: {title}\n\n"
            "More innovative designs on coolstff.com (link in bio)\n"
            + _INSTAGRAM_SPACER
            + "#FutureDesign #Innovation #ConceptArt #ProductDesign #TechInnovation",
        ),
    },
}


@dataclass(frozen=True)
class ImageRequirements(ValueObject):
    """Preferred image geometry and formats for a platform."""

    width: int
    height: int
    formats: tuple[str, ...]


IMAGE_REQUIREMENTS: dict[Platform, ImageRequirements] = {
    Platform.FACEBOOK: ImageRequirements(width=1200, height=630, formats=("jpg", "png")),
    Platform.TWITTER: ImageRequirements(width=1200, height=675, formats=("jpg", "png")),
    Platform.INSTAGRAM: ImageRequirements(width=1080, height=1080, formats=("jpg", "png")),
}


@dataclass(frozen=True)
class SocialPostDraft(ValueObject):
    """A caption draft ready for review in the admin console.

    Attributes:
        platform: Target social network.
        content_id: Product or article id.
        content_type: Kind of content.
        caption: Substituted caption text.
        image_url: Image to attach.
        status: Always "draft"; scheduling and publishing happen elsewhere.
    """

    platform: Platform
    content_id: str
    content_type: ContentType
    caption: str
    image_url: str
    status: str = "draft"


def configured_platforms() -> tuple[Platform, ...]:
    """Platforms that have caption templates."""
    return tuple(TEMPLATES)


def templates_for(platform: Platform | str, content_type: ContentType | str) -> tuple[str, ...]:
    """Get the caption templates for a platform/content-type pair.

    Raises:
        InvalidArgumentError: If the pair has no templates.
    """
    platform = Platform.parse(platform)
    content_type = ContentType.parse(content_type)
    templates = TEMPLATES.get(platform, {}).get(content_type, ())
    if not templates:
        raise InvalidArgumentError(
            "platform",
            f"no caption templates for {platform.value}/{content_type.value}",
            value=platform.value,
        )
    return templates


def pick_template(templates: tuple[str, ...], random_source: RandomSource) -> str:
    """Choose a template uniformly using random_source.

    Raises:
        InvalidArgumentError: If random_source returns a value outside [0, 1).
    """
    roll = random_source()
    if not 0 <= roll < 1:
        raise InvalidArgumentError("random_source", "must return a value in [0, 1)", value=roll)
    return templates[int(roll * len(templates))]


def format_caption(template: str, content: Content) -> str:
    """Substitute the title and, for products, the price into a template.

    Only the first occurrence of each placeholder is replaced.
    """
    caption = template.replace(TITLE_PLACEHOLDER, content.title, 1)
    if content.content_type is ContentType.PRODUCT:
        caption = caption.replace(PRICE_PLACEHOLDER, f"${content.price:.2f}", 1)
    return caption


def generate_caption(
    content: Content,
    platform: Platform | str,
    random_source: RandomSource = random.random,
) -> str:
    """Generate a caption for a product or article.

    Args:
        content: Product or article to promote.
        platform: Target platform.
        random_source: Source of template choice, in [0, 1).

    Returns:
        Caption text.

    Raises:
        InvalidArgumentError: For an unknown platform or a platform without
            templates for this content type.
    """
    templates = templates_for(platform, content.content_type)
    return format_caption(pick_template(templates, random_source), content)


def generate_social_post(
    content: Content,
    platform: Platform | str,
    random_source: RandomSource = random.random,
) -> SocialPostDraft:
    """Build a draft post for one platform."""
    platform = Platform.parse(platform)
    return SocialPostDraft(
        platform=platform,
        content_id=content.id,
        content_type=content.content_type,
        caption=generate_caption(content, platform, random_source),
        image_url=content.primary_image,
    )


def generate_all_social_posts(
    content: Content,
    random_source: RandomSource = random.random,
) -> tuple[SocialPostDraft, ...]:
    """Build one draft per configured platform."""
    return tuple(
        generate_social_post(content, platform, random_source)
        for platform in configured_platforms()
    )
