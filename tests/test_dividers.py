import itertools

import pytest

from marketing_site.sections.dividers import (
    background_of,
    divider_style,
    resolve_divider,
)
from marketing_site.sections.styles import (
    BACKGROUND_STYLES,
    BackgroundCategory,
    DividerStyle,
    background_color,
    background_style,
    is_strong,
)

CATEGORIES = [category.value for category in BackgroundCategory]
STRONG = {"primary", "dark", "gradient"}


def section(type_tag="richTextSection", background=None):
    data = {"_key": "k", "_type": type_tag}
    if background:
        data["backgroundColor"] = background
    return data


class TestBackgroundStyles:
    def test_every_category_has_a_style(self):
        assert set(BACKGROUND_STYLES) == set(BackgroundCategory)

    def test_fixed_colors(self):
        assert background_color("white") == "#ffffff"
        assert background_color("gray") == "#f3f4f6"
        assert background_color("primary") == "#0047AB"
        assert background_color("dark") == "#1f2937"
        assert background_color("gradient") == "#003380"

    def test_unknown_category_falls_back_to_white(self):
        assert background_style("neon") == BACKGROUND_STYLES[BackgroundCategory.WHITE]
        assert background_color(None) == "#ffffff"

    def test_strong_set(self):
        assert {c for c in CATEGORIES if is_strong(c)} == STRONG
        assert not is_strong("unknown")


class TestBackgroundOf:
    def test_declared_value_wins(self):
        assert background_of(section("heroSection", "gray")) == "gray"

    def test_type_default(self):
        assert background_of(section("heroSection")) == "gradient"
        assert background_of(section("productsSection")) == "gray"
        assert background_of(section("ctaSection")) == "primary"

    def test_unknown_type_is_white(self):
        assert background_of(section("mysterySection")) == "white"
        assert background_of(None) == "white"


class TestDividerStyle:
    @pytest.mark.parametrize("category", CATEGORIES)
    def test_equal_categories_have_no_divider(self, category):
        assert divider_style(category, category) is DividerStyle.NONE

    def test_every_pair_has_a_style(self):
        for a, b in itertools.product(CATEGORIES, repeat=2):
            assert isinstance(divider_style(a, b), DividerStyle)

    def test_strong_side_gives_curve(self):
        for a, b in itertools.product(CATEGORIES, repeat=2):
            if a != b and (a in STRONG or b in STRONG):
                assert divider_style(a, b) is DividerStyle.CURVE, (a, b)

    def test_white_gray_wave_both_directions(self):
        assert divider_style("white", "gray") is DividerStyle.WAVE
        assert divider_style("gray", "white") is DividerStyle.WAVE

    def test_other_transitions_fade(self):
        assert divider_style("white", "metal") is DividerStyle.GRADIENT_FADE
        assert divider_style("metal", "gray") is DividerStyle.GRADIENT_FADE

    def test_style_is_symmetric(self):
        for a, b in itertools.product(CATEGORIES, repeat=2):
            assert divider_style(a, b) is divider_style(b, a)


class TestResolveDivider:
    def test_colors_flow_from_source_to_target(self):
        decision = resolve_divider(section(background="white"), section(background="gray"))
        assert decision.style is DividerStyle.WAVE
        assert decision.from_color == "#ffffff"
        assert decision.to_color == "#f3f4f6"
        assert decision.flip is False
        assert decision.height == 60

    def test_flipped_when_source_is_strong(self):
        decision = resolve_divider(section("heroSection"), section(background="white"))
        assert decision.style is DividerStyle.CURVE
        assert decision.flip is True

        reverse = resolve_divider(section(background="white"), section("heroSection"))
        assert reverse.flip is False

    def test_gradient_fade_is_shorter(self):
        decision = resolve_divider(section(background="metal"), section(background="white"))
        assert decision.style is DividerStyle.GRADIENT_FADE
        assert decision.height == 40

    def test_unknown_background_value(self):
        decision = resolve_divider(section(background="neon"), section(background="white"))
        assert decision.style is DividerStyle.GRADIENT_FADE
        assert decision.from_color == "#ffffff"
