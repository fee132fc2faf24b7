"""Tests for light scale generation, guardrails and dark-mode shifting."""

import pytest

from brandtokens.dark_mode import (
    DARK_NEUTRAL_LIGHTNESS,
    DARK_PRIMARY_LIGHTNESS,
    DARK_WARNING_LIGHTNESS,
    derive_dark_scales,
)
from brandtokens.scales import (
    CHROMA_CURVE,
    SCALE_NAMES,
    SEMANTIC_HUES,
    SHADE_STOPS,
    Oklch,
    ensure_primary_button_lightness,
    generate_color_scale,
    generate_light_scales,
    generate_neutral_scale,
    interactive_color,
    oklch_to_hex,
)


def _lightness(scale):
    return [scale[stop].l for stop in SHADE_STOPS]


class TestColorScale:
    def test_eleven_stops(self):
        assert list(generate_color_scale(221, 0.12)) == list(SHADE_STOPS)

    def test_lightness_strictly_decreasing(self):
        ls = _lightness(generate_color_scale(221, 0.12))
        assert all(a > b for a, b in zip(ls, ls[1:]))

    def test_chroma_bell_curve(self):
        scale = generate_color_scale(221, 0.12)
        assert scale[500].c == pytest.approx(0.12)
        assert scale[600].c == pytest.approx(0.12)
        assert scale[50].c == pytest.approx(0.024)
        assert max(s.c for s in scale.values()) == scale[500].c
        assert CHROMA_CURVE[50] < CHROMA_CURVE[300] < CHROMA_CURVE[500]

    def test_hue_constant(self):
        assert {s.h for s in generate_color_scale(221, 0.12).values()} == {221}

    def test_neutral_chroma_flat(self):
        scale = generate_neutral_scale(237, 0.0084)
        assert {s.c for s in scale.values()} == {0.0084}
        ls = _lightness(scale)
        assert all(a > b for a, b in zip(ls, ls[1:]))

    def test_semantic_hues_ignore_brand(self):
        a = generate_light_scales(10, 0.2, 20, 0.01)
        b = generate_light_scales(300, 0.1, 310, 0.005)
        for name, hue in SEMANTIC_HUES.items():
            assert a[name] == b[name]
            assert a[name][500].h == hue

    def test_scale_names_order(self):
        assert tuple(generate_light_scales(221, 0.12, 237, 0.008)) == SCALE_NAMES


class TestGuardrail:
    def test_clamps_lightness(self):
        assert ensure_primary_button_lightness(0.8) == 0.65
        assert ensure_primary_button_lightness(0.3) == 0.50
        assert ensure_primary_button_lightness(0.55) == 0.55

    def test_interactive_only_touches_500(self):
        scale = generate_color_scale(221, 0.12)
        scale[500] = Oklch(0.8, 0.12, 221)
        before = dict(scale)
        color = interactive_color(scale)
        assert color == Oklch(0.65, 0.12, 221)
        assert scale == before


class TestOklch:
    def test_css(self):
        assert Oklch(0.65, 0.12, 221).css() == "oklch(0.65 0.120 221)"
        assert Oklch(0.985, 0.0084, 237.0).css() == "oklch(0.985 0.008 237)"

    def test_css_lightness_keeps_two_decimals(self):
        assert Oklch(0.7, 0.0084, 237).css() == "oklch(0.70 0.008 237)"
        assert Oklch(0.5, 0.12, 221).css() == "oklch(0.50 0.120 221)"
        assert Oklch(0.1, 0.0, 0).css() == "oklch(0.10 0.000 0)"

    def test_css_chroma_rounds_half_up(self):
        assert Oklch(0.65, 0.0625, 221).css() == "oklch(0.65 0.063 221)"

    def test_hex_extremes(self):
        assert oklch_to_hex(1, 0, 0) == "#FFFFFF"
        assert oklch_to_hex(0, 0, 0) == "#000000"

    def test_hex_format(self):
        h = Oklch(0.65, 0.12, 221).hex()
        assert h.startswith("#") and len(h) == 7
        int(h[1:], 16)

    def test_rgb_matches_hex(self):
        color = Oklch(0.65, 0.12, 221)
        r, g, b = color.rgb()
        assert color.hex() == f"#{r:02X}{g:02X}{b:02X}"
        assert all(0 <= v <= 255 for v in (r, g, b))


class TestDarkMode:
    def _dark(self):
        light = generate_light_scales(221, 0.12, 237, 0.0084)
        return light, derive_dark_scales(light, 221, 0.12)

    def test_same_keys(self):
        light, dark = self._dark()
        assert list(dark) == list(light)

    def test_order_preserved(self):
        _, dark = self._dark()
        for scale in dark.values():
            ls = _lightness(scale)
            assert all(a > b for a, b in zip(ls, ls[1:]))

    def test_primary_table(self):
        _, dark = self._dark()
        assert _lightness(dark["primary"]) == [DARK_PRIMARY_LIGHTNESS[s] for s in SHADE_STOPS]
        assert dark["primary"][500].l == 0.50
        assert dark["primary"][500].c == pytest.approx(0.12)

    def test_neutral_keeps_chroma_and_hue(self):
        light, dark = self._dark()
        for stop in SHADE_STOPS:
            assert dark["neutral"][stop].c == light["neutral"][stop].c
            assert dark["neutral"][stop].h == light["neutral"][stop].h
            assert dark["neutral"][stop].l == DARK_NEUTRAL_LIGHTNESS[stop]

    def test_semantic_keeps_chroma_and_hue(self):
        light, dark = self._dark()
        for name in SEMANTIC_HUES:
            for stop in SHADE_STOPS:
                assert dark[name][stop][1:] == light[name][stop][1:]
            assert dark[name][50].l == 0.92
            assert dark[name][100].l == 0.85

    def test_success_error_info_share_shift(self):
        _, dark = self._dark()
        for name in ("success", "error", "info"):
            assert [dark[name][s].l for s in (500, 600, 700)] == [0.50, 0.42, 0.35]

    def test_warning_runs_lighter(self):
        _, dark = self._dark()
        assert [dark["warning"][s].l for s in (500, 600, 700)] == [0.55, 0.45, 0.38]
        assert _lightness(dark["warning"]) == [DARK_WARNING_LIGHTNESS[s] for s in SHADE_STOPS]
