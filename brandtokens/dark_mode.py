"""
dark_mode.py — Re-express light scales for dark surfaces by shifting lightness only.

Step order is preserved (50 stays lightest, 950 stays darkest); only the
absolute L values move down. Neutral and semantic steps keep their light-mode
C/H; the primary scale re-applies the bell chroma curve on its own table.

  stop        50   100  200  300  400  500  600  700  800  900  950
  primary     .94  .88  .78  .68  .58  .50  .42  .35  .28  .22  .16
  neutral     .94  .88  .78  .65  .52  .42  .34  .26  .20  .15  .10
  semantic    .92  .85  .76  .67  .58  .50  .42  .35  .28  .22  .16
  warning     .92  .85  .76  .67  .61  .55  .45  .38  .30  .23  .16
"""

from __future__ import annotations

from typing import Dict, Mapping

from .scales import (
    SEMANTIC_HUES,
    SHADE_STOPS,
    ColorScale,
    by_stop,
    generate_color_scale,
)

DARK_PRIMARY_LIGHTNESS  = by_stop((0.94, 0.88, 0.78, 0.68, 0.58, 0.50, 0.42, 0.35, 0.28, 0.22, 0.16))
DARK_NEUTRAL_LIGHTNESS  = by_stop((0.94, 0.88, 0.78, 0.65, 0.52, 0.42, 0.34, 0.26, 0.20, 0.15, 0.10))
DARK_SEMANTIC_LIGHTNESS = by_stop((0.92, 0.85, 0.76, 0.67, 0.58, 0.50, 0.42, 0.35, 0.28, 0.22, 0.16))
# Warning runs lighter from 400 to 900
DARK_WARNING_LIGHTNESS  = by_stop((0.92, 0.85, 0.76, 0.67, 0.61, 0.55, 0.45, 0.38, 0.30, 0.23, 0.16))

DARK_LIGHTNESS_TABLES: Mapping[str, Mapping[int, float]] = {
    "primary": DARK_PRIMARY_LIGHTNESS,
    "neutral": DARK_NEUTRAL_LIGHTNESS,
    **{name: DARK_SEMANTIC_LIGHTNESS for name in SEMANTIC_HUES},
    "warning": DARK_WARNING_LIGHTNESS,
}


def shift_lightness(scale: ColorScale, lightness: Mapping[int, float]) -> ColorScale:
    """Replace L per step, keep C and H."""
    return {stop: scale[stop]._replace(l=lightness[stop]) for stop in SHADE_STOPS}


def dark_primary_scale(brand_hue: float, brand_chroma: float) -> ColorScale:
    return generate_color_scale(brand_hue, brand_chroma, DARK_PRIMARY_LIGHTNESS)


def derive_dark_scales(
    light_scales: Dict[str, ColorScale],
    brand_hue: float,
    brand_chroma: float,
) -> Dict[str, ColorScale]:
    """Dark counterpart of every light scale, same keys and key order."""
    dark: Dict[str, ColorScale] = {}
    for name, scale in light_scales.items():
        if name == "primary":
            dark[name] = dark_primary_scale(brand_hue, brand_chroma)
        else:
            dark[name] = shift_lightness(scale, DARK_LIGHTNESS_TABLES[name])
    return dark
