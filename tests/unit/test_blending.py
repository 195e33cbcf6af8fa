#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#

"""Unit tests for colorblend.blending module."""

from __future__ import annotations

import pytest

from colorblend.blending import (
    BLEND_FUNCS,
    BLEND_MODES,
    STANDARD_MODES,
    blend,
    get_blend_func,
)
from colorblend.nonseparable import lum
from colorblend.types import BlendFunc, BlendKind, BlendOptions, RGBA

UNIT = BlendOptions(unit_input=True, unit_output=True)

# ─────────────────────────────────────────────────────────────────────────────
# Registry
# ─────────────────────────────────────────────────────────────────────────────


class TestRegistry:
    """Tests for the blend mode registry."""

    def test_all_modes_registered(self):
        assert BLEND_MODES == (
            "normal",
            "multiply",
            "screen",
            "overlay",
            "darken",
            "lighten",
            "colorDodge",
            "colorBurn",
            "hardLight",
            "softLight",
            "difference",
            "exclusion",
            "hue",
            "saturation",
            "color",
            "luminosity",
            "linearBurn",
            "linearDodge",
            "darkerColor",
            "lighterColor",
            "vividLight",
            "linearLight",
            "pinLight",
            "hardMix",
            "subtract",
            "divide",
        )

    def test_standard_modes(self):
        assert len(STANDARD_MODES) == 16
        assert "hue" in STANDARD_MODES
        assert "hardMix" not in STANDARD_MODES

    @pytest.mark.parametrize(
        "name", ["hue", "saturation", "color", "luminosity", "darkerColor", "lighterColor"]
    )
    def test_non_separable_kinds(self, name):
        assert BLEND_FUNCS[name].kind is BlendKind.NON_SEPARABLE

    def test_separable_count(self):
        separable = [f for f in BLEND_FUNCS.values() if f.kind is BlendKind.SEPARABLE]
        assert len(separable) == 20

    def test_registry_is_immutable(self):
        with pytest.raises(TypeError):
            BLEND_FUNCS["normal"] = None

    def test_names_match_keys(self):
        for name, func in BLEND_FUNCS.items():
            assert func.name == name


class TestGetBlendFunc:
    def test_exact_name(self):
        assert get_blend_func("colorDodge") is BLEND_FUNCS["colorDodge"]

    def test_snake_case_alias(self):
        assert get_blend_func("color_dodge") is BLEND_FUNCS["colorDodge"]
        assert get_blend_func("darker_color") is BLEND_FUNCS["darkerColor"]

    def test_blend_func_passthrough(self):
        func = BLEND_FUNCS["multiply"]
        assert get_blend_func(func) is func

    @pytest.mark.parametrize("name", ["ColorDodge", "colordodge", "bogus", "", None, 42])
    def test_invalid_raises(self, name):
        with pytest.raises(ValueError, match="Invalid blend mode"):
            get_blend_func(name)


# ─────────────────────────────────────────────────────────────────────────────
# Compositing engine
# ─────────────────────────────────────────────────────────────────────────────


class TestBlendEngine:
    """Tests for the compositing formula."""

    def test_multiply_regression_vector(self, backdrop, half_gray):
        """Half transparent multiply over an opaque backdrop."""
        result = blend(backdrop, half_gray, "multiply")
        expected_r = round((1 - 0.5) * 100 + 0.5 * (100 * 50 / 255))
        assert result.r == expected_r == 60
        assert result == RGBA(60, 90, 120, 1.0)

    def test_difference_black_white(self, black, white):
        assert blend(black, white, "difference") == RGBA(255, 255, 255, 1.0)

    def test_returns_rgba(self, backdrop, half_gray):
        assert isinstance(blend(backdrop, half_gray, "screen"), RGBA)

    def test_inputs_not_mutated(self, backdrop, half_gray):
        before = (tuple(backdrop), tuple(half_gray))
        blend(backdrop, half_gray, "hue")
        assert (tuple(backdrop), tuple(half_gray)) == before

    def test_accepts_plain_tuples(self):
        assert blend((0, 0, 0, 1.0), (255, 255, 255, 1.0), "normal") == RGBA(255, 255, 255, 1.0)

    def test_alpha_composition(self):
        result = blend(RGBA(0, 0, 0, 0.5), RGBA(0, 0, 0, 0.5), "normal")
        assert result.a == pytest.approx(0.75)

    @pytest.mark.parametrize("backdrop_alpha", [0.0, 0.3, 1.0])
    def test_opaque_normal_source_wins(self, backdrop_alpha):
        source = RGBA(10, 200, 30, 1.0)
        assert blend(RGBA(100, 150, 200, backdrop_alpha), source, "normal") == source

    @pytest.mark.parametrize("mode", BLEND_MODES)
    def test_transparent_source_returns_backdrop(self, mode, backdrop):
        assert blend(backdrop, RGBA(10, 200, 30, 0.0), mode) == backdrop

    @pytest.mark.parametrize("mode", BLEND_MODES)
    def test_transparent_backdrop_returns_source(self, mode):
        source = RGBA(10, 200, 30, 0.6)
        result = blend(RGBA(100, 150, 200, 0.0), source, mode)
        assert result == source

    @pytest.mark.parametrize("mode", BLEND_MODES)
    def test_transparent_backdrop_returns_source_unit(self, mode):
        source = RGBA(0.1, 0.7, 0.3, 0.6)
        result = blend(RGBA(0.4, 0.5, 0.6, 0.0), source, mode, UNIT)
        assert result == pytest.approx(source)

    def test_both_transparent(self):
        result = blend(RGBA(1, 2, 3, 0.0), RGBA(4, 5, 6, 0.0), "multiply")
        assert result == RGBA(1, 2, 3, 0.0)

    @pytest.mark.parametrize("mode", BLEND_MODES)
    def test_result_in_range(self, mode, unit_backdrop, unit_source):
        result = blend(unit_backdrop, unit_source._replace(a=0.7), mode, UNIT)
        assert all(-1e-9 <= c <= 1 + 1e-9 for c in result)

    def test_unit_multiply(self):
        result = blend(RGBA(0.5, 0.5, 0.5, 1.0), RGBA(0.5, 0.5, 0.5, 1.0), "multiply", UNIT)
        assert result == pytest.approx((0.25, 0.25, 0.25, 1.0))

    def test_unit_input_integer_output(self):
        options = BlendOptions(unit_input=True, unit_output=False)
        result = blend(RGBA(0.0, 0.0, 0.0, 1.0), RGBA(1.0, 0.5, 0.0, 1.0), "normal", options)
        assert result == RGBA(255, 128, 0, 1.0)

    def test_integer_input_unit_output(self):
        options = BlendOptions(unit_input=False, unit_output=True)
        result = blend(RGBA(0, 0, 0, 1.0), RGBA(255, 0, 51, 1.0), "normal", options)
        assert result == pytest.approx((1.0, 0.0, 0.2, 1.0))

    def test_integer_output_channels_are_ints(self, backdrop, half_gray):
        result = blend(backdrop, half_gray, "softLight")
        assert all(isinstance(c, int) for c in result.rgb)

    def test_alpha_stays_fraction(self, backdrop, half_gray):
        result = blend(backdrop._replace(a=0.5), half_gray, "screen")
        assert result.a == pytest.approx(0.75)

    def test_unknown_kind_raises(self, backdrop, half_gray):
        bogus = BlendFunc("bogus", "neither", lambda b, s: s)
        with pytest.raises(TypeError):
            blend(backdrop, half_gray, bogus)


class TestNonSeparableEngine:
    """End-to-end checks for the luminosity-based modes."""

    def test_color_keeps_backdrop_luminosity(self, unit_backdrop, unit_source):
        result = blend(unit_backdrop, unit_source, "color", UNIT)
        assert lum(result.rgb) == pytest.approx(lum(unit_backdrop.rgb))

    def test_luminosity_takes_source_luminosity(self, unit_backdrop, unit_source):
        result = blend(unit_backdrop, unit_source, "luminosity", UNIT)
        assert lum(result.rgb) == pytest.approx(lum(unit_source.rgb))

    def test_darker_color_picks_whole_color(self, unit_backdrop, unit_source):
        result = blend(unit_backdrop, unit_source, "darkerColor", UNIT)
        darker = min(unit_backdrop.rgb, unit_source.rgb, key=lum)
        assert result.rgb == pytest.approx(darker)
