# marketing_site/sections/dividers.py
from __future__ import annotations

from typing import Any, Mapping, NamedTuple, Optional

from .registry import get_section_type
from .styles import (
    DEFAULT_CATEGORY,
    BackgroundCategory,
    DividerStyle,
    background_color,
    is_strong,
)


class DividerDecision(NamedTuple):
    style: DividerStyle
    from_color: str
    to_color: str
    flip: bool
    height: int


def background_of(section: Optional[Mapping[str, Any]]) -> str:
    """
    Background category of a section: the declared value, the default
    for its type, or white.
    """
    if not section:
        return DEFAULT_CATEGORY.value

    declared = section.get("backgroundColor")
    if declared:
        return declared.value if isinstance(declared, BackgroundCategory) else str(declared)

    section_type = get_section_type(section.get("_type"))
    if section_type:
        return section_type.default_background.value

    return DEFAULT_CATEGORY.value


def divider_style(from_bg: str, to_bg: str) -> DividerStyle:
    if from_bg == to_bg:
        return DividerStyle.NONE

    if is_strong(from_bg) or is_strong(to_bg):
        return DividerStyle.CURVE

    if {from_bg, to_bg} == {BackgroundCategory.WHITE.value, BackgroundCategory.GRAY.value}:
        return DividerStyle.WAVE

    return DividerStyle.GRADIENT_FADE


def resolve_divider(section, next_section) -> DividerDecision:
    from_bg = background_of(section)
    to_bg = background_of(next_section)
    style = divider_style(from_bg, to_bg)

    return DividerDecision(
        style=style,
        from_color=background_color(from_bg),
        to_color=background_color(to_bg),
        flip=is_strong(from_bg),
        height=40 if style is DividerStyle.GRADIENT_FADE else 60,
    )
