"""
seed.py — Deterministic seed and variance draws for brand fingerprinting.

Every "random" decision in the token engine comes from here:
  1. brand_seed()        → 32-bit FNV-1a hash of "directive::product name"
  2. map_seed_to_range() → re-hash the seed with a salt, rescale into [min, max)

Different salts give independent-looking draws from the same seed, so one
seed can drive hue variance, neutral variance and profile selection without
any extra entropy.

Usage:
    from brandtokens.seed import brand_seed, map_seed_to_range

    seed = brand_seed("Build a CRM", "Acme")        # → 1503305566
    hue_shift = map_seed_to_range(seed, -12, 12, salt=3)
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

# ── FNV-1a constants ──────────────────────────────────────────────────────────

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME        = 0x01000193
_MASK_32         = 0xFFFFFFFF


def fnv1a32(text: str) -> int:
    """32-bit FNV-1a over the characters of `text`. Always returns an unsigned int."""
    h = FNV_OFFSET_BASIS
    for ch in text:
        h ^= ord(ch)
        h = (h * FNV_PRIME) & _MASK_32
    return h


def brand_seed(directive: str, product_name: str) -> int:
    """Seed = fnv1a32(lower(trim(directive)) + '::' + lower(trim(product_name)))."""
    return fnv1a32(f"{directive.strip().lower()}::{product_name.strip().lower()}")


def map_seed_to_range(seed: int, lo: float, hi: float, salt: int = 0) -> float:
    """
    Map a seed into [lo, hi) deterministically.

    The seed is mixed with `salt` by re-hashing "{seed}:{salt}", reduced
    modulo 10000 and normalised to [0, 1) before rescaling.
    """
    mixed = fnv1a32(f"{seed}:{salt}")
    normalized = (mixed % 10000) / 10000
    return lo + normalized * (hi - lo)


# ── Numeric helpers ───────────────────────────────────────────────────────────

def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +inf (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def quantize(value: float, digits: int) -> float:
    """
    Round `value` to `digits` decimals, ties away from zero, on the exact
    binary value. Matches fixed-point string formatting of the published
    token files, so pinned shadow/radius strings stay stable.
    """
    step = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(step, rounding=ROUND_HALF_UP))
