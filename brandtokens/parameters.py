"""
parameters.py — (category, mood) → base hue / chroma constants.

Pure table lookups plus one tone-driven chroma nudge. Hue variance from the
seed is applied later by fingerprint.py; the neutral offset here is added to
the *final* brand hue, not the base one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .classifier import Classification
from .seed import clamp
from .vocabulary import (
    CATEGORY_NEUTRAL_OFFSETS,
    CATEGORY_PROFILES,
    DEFAULT_NEUTRAL_CHROMA_RANGE,
    DEFAULT_NEUTRAL_OFFSET,
    MOOD_NEUTRAL_CHROMA,
    TONE_CHROMA_MODIFIERS,
)

BRAND_CHROMA_MIN   = 0.08
BRAND_CHROMA_MAX   = 0.22
NEUTRAL_CHROMA_CAP = 0.015
NEUTRAL_CHROMA_BIAS = 0.4   # fraction of the way from min to max


@dataclass(frozen=True)
class BrandParameters:
    brand_hue_base: float
    brand_chroma: float
    neutral_offset: float
    neutral_chroma: float
    neutral_chroma_range: Tuple[float, float]


def tone_adjusted_chroma(base_chroma: float, brand_statement: str) -> float:
    """Apply the first matching tone modifier, clamped to the brand chroma band."""
    tone = brand_statement.lower()
    for word, modifier in TONE_CHROMA_MODIFIERS:
        if word in tone:
            return clamp(base_chroma + modifier, BRAND_CHROMA_MIN, BRAND_CHROMA_MAX)
    return base_chroma


def neutral_chroma_for(chroma_range: Tuple[float, float]) -> float:
    lo, hi = chroma_range
    return min(NEUTRAL_CHROMA_CAP, lo + (hi - lo) * NEUTRAL_CHROMA_BIAS)


def derive_brand_parameters(classification: Classification, brand_statement: str) -> BrandParameters:
    profile = CATEGORY_PROFILES[classification.category]
    chroma_range = MOOD_NEUTRAL_CHROMA.get(classification.mood, DEFAULT_NEUTRAL_CHROMA_RANGE)

    return BrandParameters(
        brand_hue_base=profile.hue,
        brand_chroma=tone_adjusted_chroma(profile.chroma, brand_statement),
        neutral_offset=CATEGORY_NEUTRAL_OFFSETS.get(classification.category, DEFAULT_NEUTRAL_OFFSET),
        neutral_chroma=neutral_chroma_for(chroma_range),
        neutral_chroma_range=chroma_range,
    )
