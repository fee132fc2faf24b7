"""
scales.py — Expand a (hue, chroma) pair into an 11-step OKLCH scale.

Lightness per step is a fixed table, never derived from chroma. Chroma per
step is chroma_base × a bell-shaped multiplier that peaks at 500–600:

  stop        50    100   200   300   400   500   600   700   800   900   950
  L (brand)   .985  .965  .92   .85   .75   .65   .55   .45   .35   .25   .15
  L (neutral) .985  .965  .92   .88   .70   .55   .45   .35   .25   .18   .12
  C mult      .20   .30   .50   .75   .92   1.0   1.0   .90   .70   .50   .35

Neutral scales keep a constant (tiny) chroma. Semantic scales use fixed hues
so success/warning/error/info read the same across every brand.

Output per scale:
  {50: Oklch(0.985, 0.03, 236), 100: Oklch(...), ..., 950: Oklch(...)}
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple, Tuple

from .seed import clamp, quantize

# ── Shade scale stops ─────────────────────────────────────────────────────────

SHADE_STOPS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

INTERACTIVE_STOP = 500


class Oklch(NamedTuple):
    """One OKLCH colour: L 0–1, C ≥ 0, H in degrees."""
    l: float
    c: float
    h: float

    def css(self) -> str:
        return f"oklch({_lightness_str(self.l)} {quantize(self.c, 3):.3f} {self.h:g})"

    def rgb(self) -> Tuple[int, int, int]:
        return oklch_to_rgb(self.l, self.c, self.h)

    def hex(self) -> str:
        return oklch_to_hex(self.l, self.c, self.h)


ColorScale = Dict[int, Oklch]


def _lightness_str(value: float) -> str:
    """Two or three decimals, as the tables are written: 0.7 → '0.70', 0.985 → '0.985'."""
    text = f"{quantize(value, 3):.3f}"
    return text[:-1] if text.endswith("0") else text


# ── Fixed tables ──────────────────────────────────────────────────────────────

def by_stop(values: Tuple[float, ...]) -> Mapping[int, float]:
    return MappingProxyType(dict(zip(SHADE_STOPS, values)))


BRAND_LIGHTNESS   = by_stop((0.985, 0.965, 0.92, 0.85, 0.75, 0.65, 0.55, 0.45, 0.35, 0.25, 0.15))
NEUTRAL_LIGHTNESS = by_stop((0.985, 0.965, 0.92, 0.88, 0.70, 0.55, 0.45, 0.35, 0.25, 0.18, 0.12))
CHROMA_CURVE      = by_stop((0.20, 0.30, 0.50, 0.75, 0.92, 1.00, 1.00, 0.90, 0.70, 0.50, 0.35))

SEMANTIC_HUES: Mapping[str, float] = MappingProxyType({
    "success": 145,     # green
    "warning": 45,      # amber
    "error":   25,      # red
    "info":    220,     # blue
})

SEMANTIC_CHROMAS: Mapping[str, float] = MappingProxyType({
    "success": 0.18,
    "warning": 0.16,
    "error":   0.20,
    "info":    0.14,
})

SCALE_NAMES: Tuple[str, ...] = ("primary", "neutral", "success", "warning", "error", "info")


# ── Scale synthesis ───────────────────────────────────────────────────────────

def generate_color_scale(
    hue: float,
    chroma: float,
    lightness: Mapping[int, float] = BRAND_LIGHTNESS,
) -> ColorScale:
    """Bell-curve chroma over a fixed lightness table."""
    return {stop: Oklch(lightness[stop], chroma * CHROMA_CURVE[stop], hue) for stop in SHADE_STOPS}


def generate_neutral_scale(
    hue: float,
    chroma: float,
    lightness: Mapping[int, float] = NEUTRAL_LIGHTNESS,
) -> ColorScale:
    """Flat chroma: neutrals carry the same faint tint at every step."""
    return {stop: Oklch(lightness[stop], chroma, hue) for stop in SHADE_STOPS}


def generate_semantic_scales() -> Dict[str, ColorScale]:
    return {
        name: generate_color_scale(SEMANTIC_HUES[name], SEMANTIC_CHROMAS[name])
        for name in SEMANTIC_HUES
    }


def generate_light_scales(
    brand_hue: float,
    brand_chroma: float,
    neutral_hue: float,
    neutral_chroma: float,
) -> Dict[str, ColorScale]:
    """All six light-mode scales, keyed in SCALE_NAMES order."""
    scales: Dict[str, ColorScale] = {
        "primary": generate_color_scale(brand_hue, brand_chroma),
        "neutral": generate_neutral_scale(neutral_hue, neutral_chroma),
    }
    scales.update(generate_semantic_scales())
    return scales


# ── Contrast guardrails ───────────────────────────────────────────────────────
# OKLCH L targets for WCAG AA (4.5:1) with white foreground text on a filled
# primary surface.

PRIMARY_BUTTON_L_MIN = 0.50
PRIMARY_BUTTON_L_MAX = 0.65
MIN_TEXT_L_ON_LIGHT_BG = 0.45
MAX_TEXT_L_ON_DARK_BG  = 0.85


def ensure_primary_button_lightness(lightness: float) -> float:
    if lightness > PRIMARY_BUTTON_L_MAX:
        return PRIMARY_BUTTON_L_MAX
    if lightness < PRIMARY_BUTTON_L_MIN:
        return PRIMARY_BUTTON_L_MIN
    return lightness


def interactive_color(scale: ColorScale) -> Oklch:
    """The 500 slot with its lightness clamped for white text. Other stops are untouched."""
    base = scale[INTERACTIVE_STOP]
    return base._replace(l=ensure_primary_button_lightness(base.l))


# ── OKLCH → sRGB ──────────────────────────────────────────────────────────────
# OKLCH → OKLab (polar to cartesian) → LMS' → cubed LMS → linear sRGB → sRGB.
# Out-of-gamut channels are clipped before gamma encoding.

Matrix3 = Tuple[Tuple[float, float, float], ...]

OKLAB_TO_LMS: Matrix3 = (
    (1.0,  0.3963377774,  0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

LMS_TO_LINEAR_SRGB: Matrix3 = (
    ( 4.0767416621, -3.3077115913,  0.2309699292),
    (-1.2684380046,  2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147,  1.7076147010),
)


def _apply(matrix: Matrix3, vec: Tuple[float, float, float]) -> Tuple[float, ...]:
    return tuple(sum(k * v for k, v in zip(row, vec)) for row in matrix)


def _encode_channel(linear: float) -> int:
    linear = clamp(linear, 0.0, 1.0)
    if linear <= 0.0031308:
        encoded = 12.92 * linear
    else:
        encoded = 1.055 * linear ** (1 / 2.4) - 0.055
    return int(round(encoded * 255))


def oklch_to_rgb(L: float, C: float, H_deg: float) -> Tuple[int, int, int]:
    hue = math.radians(H_deg)
    lab = (L, C * math.cos(hue), C * math.sin(hue))
    lms = tuple(x ** 3 for x in _apply(OKLAB_TO_LMS, lab))
    r, g, b = (_encode_channel(x) for x in _apply(LMS_TO_LINEAR_SRGB, lms))
    return r, g, b


def oklch_to_hex(L: float, C: float, H_deg: float) -> str:
    return "#%02X%02X%02X" % oklch_to_rgb(L, C, H_deg)
