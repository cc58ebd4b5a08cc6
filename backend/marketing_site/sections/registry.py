# marketing_site/sections/registry.py
from __future__ import annotations

from typing import Dict, NamedTuple, Optional, Tuple

from .styles import BackgroundCategory as Bg


class SectionType(NamedTuple):
    name: str
    template: str
    default_background: Bg
    # Page-level data the template needs besides the section itself
    context: Tuple[str, ...] = ()


def _entry(name, template, background, context=()):
    return name, SectionType(name, f"sections/{template}.html", background, tuple(context))


SECTION_TYPES: Dict[str, SectionType] = dict(
    [
        # Main
        _entry("heroSection", "hero", Bg.GRADIENT),
        _entry("carouselSection", "carousel", Bg.WHITE),
        _entry("bannerSection", "banner", Bg.PRIMARY),
        # Text & media
        _entry("textImageSection", "text_image", Bg.WHITE),
        _entry("richTextSection", "rich_text", Bg.WHITE),
        _entry("videoSection", "video", Bg.WHITE),
        _entry("gallerySection", "gallery", Bg.WHITE),
        _entry("beforeAfterSection", "before_after", Bg.WHITE),
        # Structured content
        _entry("statsSection", "stats", Bg.PRIMARY),
        _entry("counterSection", "counter", Bg.PRIMARY),
        _entry("productsSection", "products", Bg.GRAY, ["products"]),
        _entry("featuresSection", "features", Bg.WHITE),
        _entry("iconBoxesSection", "icon_boxes", Bg.WHITE),
        _entry("tabsSection", "tabs", Bg.WHITE),
        _entry("timelineSection", "timeline", Bg.WHITE),
        _entry("pricingSection", "pricing", Bg.WHITE),
        # Business
        _entry("sectorsSection", "sectors", Bg.GRAY),
        _entry("strengthsSection", "strengths", Bg.WHITE),
        _entry("caseStudiesSection", "case_studies", Bg.GRAY),
        _entry("trustBadgesSection", "trust_badges", Bg.GRAY),
        # Social proof
        _entry("testimonialsSection", "testimonials", Bg.GRAY, ["testimonials"]),
        _entry("logoCloudSection", "logo_cloud", Bg.GRAY),
        _entry("teamSection", "team", Bg.WHITE),
        # FAQ & contact
        _entry("faqSection", "faq", Bg.WHITE),
        _entry("ctaSection", "cta", Bg.PRIMARY),
        _entry("contactSection", "contact", Bg.GRAY, ["settings"]),
        _entry("mapSection", "map", Bg.GRAY),
        # Utility
        _entry("downloadSection", "download", Bg.GRAY),
        _entry("embedSection", "embed", Bg.WHITE),
    ]
)


def get_section_type(type_tag: Optional[str]) -> Optional[SectionType]:
    if not type_tag:
        return None
    return SECTION_TYPES.get(type_tag)


def required_context(sections) -> set:
    """Names of the page-level datasets needed to render ``sections``."""
    needed = set()
    for section in sections or ():
        section_type = get_section_type((section or {}).get("_type"))
        if section_type:
            needed.update(section_type.context)
    return needed
