# marketing_site/sections/styles.py
"""
Shared style resolution for page-builder sections.

Every option a section can declare for its background is enumerated here
once, together with its effect. Templates and the divider resolver read
from these tables instead of keeping their own class-name maps.
"""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Union


class BackgroundCategory(str, Enum):
    WHITE = "white"
    GRAY = "gray"
    PRIMARY = "primary"
    DARK = "dark"
    GRADIENT = "gradient"
    METAL = "metal"
    METAL_DARK = "metal-dark"


class DividerStyle(str, Enum):
    NONE = "none"
    WAVE = "wave"
    CURVE = "curve"
    SLANT = "slant"
    TRIANGLE = "triangle"
    GRADIENT_FADE = "gradient-fade"
    DOTS = "dots"


class BackgroundStyle(NamedTuple):
    css_class: str
    color: str
    is_dark: bool


BACKGROUND_STYLES = {
    BackgroundCategory.WHITE: BackgroundStyle("bg-white", "#ffffff", False),
    BackgroundCategory.GRAY: BackgroundStyle("bg-gray-100", "#f3f4f6", False),
    BackgroundCategory.PRIMARY: BackgroundStyle("bg-primary text-white", "#0047AB", True),
    BackgroundCategory.DARK: BackgroundStyle("bg-gray-800 text-white", "#1f2937", True),
    BackgroundCategory.GRADIENT: BackgroundStyle(
        "bg-gradient-to-br from-primary to-primary-dark text-white", "#003380", True
    ),
    BackgroundCategory.METAL: BackgroundStyle(
        "bg-gradient-to-b from-metal-100 via-metal-50 to-white", "#eef1f4", False
    ),
    BackgroundCategory.METAL_DARK: BackgroundStyle(
        "bg-gradient-to-b from-metal-800 via-metal-700 to-metal-900 text-white", "#2b323c", True
    ),
}

# Transitions touching one of these always get a curve, mirrored when the
# strong color is on top.
STRONG_CATEGORIES = frozenset(
    {BackgroundCategory.PRIMARY, BackgroundCategory.DARK, BackgroundCategory.GRADIENT}
)

DEFAULT_CATEGORY = BackgroundCategory.WHITE


def to_category(value: Union[str, BackgroundCategory, None]) -> Optional[BackgroundCategory]:
    """Return the enum member for ``value``, or None when it is not a known category."""
    if isinstance(value, BackgroundCategory):
        return value
    try:
        return BackgroundCategory(value)
    except ValueError:
        return None


def background_style(value: Union[str, BackgroundCategory, None]) -> BackgroundStyle:
    category = to_category(value) or DEFAULT_CATEGORY
    return BACKGROUND_STYLES[category]


def background_color(value: Union[str, BackgroundCategory, None]) -> str:
    return background_style(value).color


def is_strong(value: Union[str, BackgroundCategory, None]) -> bool:
    return to_category(value) in STRONG_CATEGORIES
