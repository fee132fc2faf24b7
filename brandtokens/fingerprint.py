"""
fingerprint.py — Seed-driven personality: bounded hue variance + radius/shadow profiles.

  brand_hue_final   = (base + variance(salt=3) + 360) % 360
  neutral_hue_base  = (brand_hue_final + category offset) % 360
  neutral_hue_final = (neutral_hue_base + variance(salt=4) + 360) % 360

Profiles are picked from a mood bias index nudged by -1 / 0 / +1 from the
seed (salt 1 for radius, salt 2 for shadow) and clamped to the list bounds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple, TypeVar

from .parameters import BrandParameters
from .seed import clamp, map_seed_to_range, round_half_up
from .vocabulary import Mood

HUE_VARIANCE_LIMIT = 12

SALT_RADIUS_PROFILE  = 1
SALT_SHADOW_PROFILE  = 2
SALT_BRAND_HUE       = 3
SALT_NEUTRAL_HUE     = 4


# ── Profiles ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RadiusProfile:
    name: str
    sm_multiplier: float
    md_multiplier: float
    lg_multiplier: float


@dataclass(frozen=True)
class ShadowProfile:
    name: str
    intensity_multiplier: float     # shadow opacity
    blur_multiplier: float          # shadow blur radius


RADIUS_PROFILES: Tuple[RadiusProfile, ...] = (
    RadiusProfile("sharp",    0.7,  0.75, 0.8),
    RadiusProfile("balanced", 1.0,  1.0,  1.0),
    RadiusProfile("soft",     1.15, 1.2,  1.25),
    RadiusProfile("rounded",  1.3,  1.4,  1.5),
)

SHADOW_PROFILES: Tuple[ShadowProfile, ...] = (
    ShadowProfile("subtle",     0.7,  0.8),
    ShadowProfile("standard",   1.0,  1.0),
    ShadowProfile("pronounced", 1.25, 1.15),
    ShadowProfile("bold",       1.5,  1.3),
)

RADIUS_MOOD_BIAS: Mapping[Mood, int] = MappingProxyType({
    Mood.MINIMAL:      0,
    Mood.SERIOUS:      0,
    Mood.PROFESSIONAL: 1,
    Mood.ELEGANT:      1,
    Mood.CALM:         2,
    Mood.FRIENDLY:     2,
    Mood.WARM:         2,
    Mood.PLAYFUL:      3,
    Mood.VIBRANT:      2,
    Mood.BOLD:         1,
})

SHADOW_MOOD_BIAS: Mapping[Mood, int] = MappingProxyType({
    Mood.MINIMAL:      0,
    Mood.ELEGANT:      0,
    Mood.CALM:         0,
    Mood.SERIOUS:      1,
    Mood.PROFESSIONAL: 1,
    Mood.FRIENDLY:     2,
    Mood.WARM:         2,
    Mood.VIBRANT:      2,
    Mood.PLAYFUL:      3,
    Mood.BOLD:         3,
})
DEFAULT_PROFILE_BIAS = 1

P = TypeVar("P")


def _select_profile(profiles: Sequence[P], bias: int, seed: int, salt: int) -> P:
    step = math.floor(map_seed_to_range(seed, -1, 2, salt))
    index = int(clamp(bias + step, 0, len(profiles) - 1))
    return profiles[index]


def select_radius_profile(seed: int, mood: Mood) -> RadiusProfile:
    bias = RADIUS_MOOD_BIAS.get(mood, DEFAULT_PROFILE_BIAS)
    return _select_profile(RADIUS_PROFILES, bias, seed, SALT_RADIUS_PROFILE)


def select_shadow_profile(seed: int, mood: Mood) -> ShadowProfile:
    bias = SHADOW_MOOD_BIAS.get(mood, DEFAULT_PROFILE_BIAS)
    return _select_profile(SHADOW_PROFILES, bias, seed, SALT_SHADOW_PROFILE)


def radius_profile_named(name: str) -> RadiusProfile:
    return next(p for p in RADIUS_PROFILES if p.name == name)


def shadow_profile_named(name: str) -> ShadowProfile:
    return next(p for p in SHADOW_PROFILES if p.name == name)


# ── Fingerprint ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Fingerprint:
    seed: int
    brand_hue_variance: int         # -12 … +12
    neutral_hue_variance: int       # -12 … +12
    radius_profile: RadiusProfile
    shadow_profile: ShadowProfile


@dataclass(frozen=True)
class ResolvedHues:
    brand_hue_base: float
    brand_hue_final: float
    neutral_hue_base: float
    neutral_hue_final: float


def hue_variance(seed: int, salt: int) -> int:
    lim = HUE_VARIANCE_LIMIT
    return round_half_up(clamp(map_seed_to_range(seed, -lim, lim, salt), -lim, lim))


def compute_fingerprint(seed: int, mood: Mood) -> Fingerprint:
    return Fingerprint(
        seed=seed,
        brand_hue_variance=hue_variance(seed, SALT_BRAND_HUE),
        neutral_hue_variance=hue_variance(seed, SALT_NEUTRAL_HUE),
        radius_profile=select_radius_profile(seed, mood),
        shadow_profile=select_shadow_profile(seed, mood),
    )


def resolve_hues(params: BrandParameters, fingerprint: Fingerprint) -> ResolvedHues:
    brand_final = (params.brand_hue_base + fingerprint.brand_hue_variance + 360) % 360
    neutral_base = (brand_final + params.neutral_offset) % 360
    neutral_final = (neutral_base + fingerprint.neutral_hue_variance + 360) % 360
    return ResolvedHues(
        brand_hue_base=params.brand_hue_base,
        brand_hue_final=brand_final,
        neutral_hue_base=neutral_base,
        neutral_hue_final=neutral_final,
    )
