"""
structural.py — Mood → radius / shadow / border tokens, then fingerprint profile multipliers.

Shadows are structured values (ShadowLayer) end to end; they are only
formatted into CSS box-shadow strings at the output boundary:

  Shadow((ShadowLayer(0, 4, 6, BLACK, 0.06), ShadowLayer(0, 2, 4, BLACK, 0.04))).css()
  → "0 4px 6px oklch(0 0 0 / 0.06), 0 2px 4px oklch(0 0 0 / 0.04)"

Profiles are always applied to the mood's base table, never to an already
adjusted set, so re-applying the same profile yields the same numbers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .fingerprint import RadiusProfile, ShadowProfile
from .seed import quantize, round_half_up
from .vocabulary import DEFAULT_MOOD, Mood

Lch = Tuple[float, float, float]

BLACK: Lch     = (0, 0, 0)
WARM_TINT: Lch = (0.2, 0.02, 45)

RADIUS_FULL = "9999px"

RADIUS_KEYS: Tuple[str, ...] = ("radiusSm", "radiusMd", "radiusLg", "radiusFull")
SHADOW_KEYS: Tuple[str, ...] = ("shadowXs", "shadowSm", "shadowMd", "shadowLg", "shadowXl")
BORDER_KEYS: Tuple[str, ...] = ("borderSubtle", "borderDefault", "borderStrong")


# ── Shadow value types ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ShadowLayer:
    offset_x: int
    offset_y: int
    blur: int
    color: Lch
    opacity: float

    def css(self) -> str:
        x = f"{self.offset_x}px" if self.offset_x else "0"
        l, c, h = self.color
        return f"{x} {self.offset_y}px {self.blur}px oklch({l:g} {c:g} {h:g} / {self.opacity:.2f})"


@dataclass(frozen=True)
class Shadow:
    layers: Tuple[ShadowLayer, ...]

    def css(self) -> str:
        return ", ".join(layer.css() for layer in self.layers)

    def scaled(self, blur_multiplier: float, opacity_multiplier: float) -> "Shadow":
        return Shadow(tuple(
            replace(
                layer,
                blur=round_half_up(layer.blur * blur_multiplier),
                opacity=quantize(layer.opacity * opacity_multiplier, 2),
            )
            for layer in self.layers
        ))


def _shadow(*layers: tuple) -> Shadow:
    """_shadow((y, blur, opacity), (y, blur, opacity, color), ...) with x = 0."""
    built = []
    for spec in layers:
        y, blur, opacity = spec[:3]
        color = spec[3] if len(spec) > 3 else BLACK
        built.append(ShadowLayer(0, y, blur, color, opacity))
    return Shadow(tuple(built))


# ── Token set ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class StructuralTokenSet:
    mood: Mood
    radius_sm: float                # rem
    radius_md: float
    radius_lg: float
    shadow_xs: Shadow
    shadow_sm: Shadow
    shadow_md: Shadow
    shadow_lg: Shadow
    shadow_xl: Shadow
    border_subtle: float            # px
    border_default: float
    border_strong: float
    radius_full: str = RADIUS_FULL

    def shadows(self) -> Tuple[Shadow, ...]:
        return (self.shadow_xs, self.shadow_sm, self.shadow_md, self.shadow_lg, self.shadow_xl)

    def as_css_values(self) -> Dict[str, str]:
        """Ordered token name → CSS value, in the published token file format."""
        values: Dict[str, str] = {
            "radiusSm": f"{self.radius_sm:.3f}rem",
            "radiusMd": f"{self.radius_md:.3f}rem",
            "radiusLg": f"{self.radius_lg:.3f}rem",
            "radiusFull": self.radius_full,
        }
        for key, shadow in zip(SHADOW_KEYS, self.shadows()):
            values[key] = shadow.css()
        values["borderSubtle"] = f"{self.border_subtle:g}px"
        values["borderDefault"] = f"{self.border_default:g}px"
        values["borderStrong"] = f"{self.border_strong:g}px"
        return values


def _tokens(mood: Mood, radii, shadows, borders) -> StructuralTokenSet:
    sm, md, lg = radii
    xs, s, m, l, xl = shadows
    b_subtle, b_default, b_strong = borders
    return StructuralTokenSet(
        mood=mood,
        radius_sm=sm, radius_md=md, radius_lg=lg,
        shadow_xs=xs, shadow_sm=s, shadow_md=m, shadow_lg=l, shadow_xl=xl,
        border_subtle=b_subtle, border_default=b_default, border_strong=b_strong,
    )


# ── Mood base tables ──────────────────────────────────────────────────────────

MOOD_STRUCTURAL_TOKENS: Mapping[Mood, StructuralTokenSet] = MappingProxyType({
    Mood.MINIMAL: _tokens(
        Mood.MINIMAL, (0.25, 0.375, 0.5),
        (
            _shadow((1, 2, 0.04)),
            _shadow((1, 3, 0.05)),
            _shadow((4, 6, 0.05)),
            _shadow((10, 15, 0.05)),
            _shadow((20, 25, 0.06)),
        ),
        (1, 1, 1),
    ),
    Mood.PROFESSIONAL: _tokens(
        Mood.PROFESSIONAL, (0.25, 0.5, 0.75),
        (
            _shadow((1, 2, 0.05)),
            _shadow((1, 3, 0.06), (1, 2, 0.04)),
            _shadow((4, 6, 0.06), (2, 4, 0.04)),
            _shadow((10, 15, 0.06), (4, 6, 0.04)),
            _shadow((20, 25, 0.08), (8, 10, 0.04)),
        ),
        (1, 1, 1.5),
    ),
    Mood.SERIOUS: _tokens(
        Mood.SERIOUS, (0.125, 0.25, 0.375),
        (
            _shadow((1, 2, 0.04)),
            _shadow((1, 2, 0.05)),
            _shadow((3, 5, 0.05)),
            _shadow((8, 12, 0.05)),
            _shadow((16, 20, 0.06)),
        ),
        (1, 1, 1),
    ),
    Mood.CALM: _tokens(
        Mood.CALM, (0.375, 0.625, 1.0),
        (
            _shadow((1, 3, 0.03)),
            _shadow((2, 4, 0.04)),
            _shadow((4, 8, 0.04)),
            _shadow((8, 16, 0.04)),
            _shadow((16, 24, 0.05)),
        ),
        (1, 1, 1),
    ),
    Mood.FRIENDLY: _tokens(
        Mood.FRIENDLY, (0.375, 0.625, 1.0),
        (
            _shadow((1, 2, 0.05)),
            _shadow((2, 4, 0.06), (1, 2, 0.04)),
            _shadow((4, 8, 0.06), (2, 4, 0.04)),
            _shadow((12, 20, 0.07), (4, 8, 0.04)),
            _shadow((24, 32, 0.08), (8, 12, 0.04)),
        ),
        (1, 1, 1.5),
    ),
    Mood.PLAYFUL: _tokens(
        Mood.PLAYFUL, (0.5, 0.75, 1.25),
        (
            _shadow((2, 4, 0.06)),
            _shadow((2, 6, 0.08), (1, 3, 0.05)),
            _shadow((6, 12, 0.08), (3, 6, 0.05)),
            _shadow((14, 24, 0.10), (6, 10, 0.05)),
            _shadow((28, 40, 0.12), (10, 16, 0.05)),
        ),
        (1, 1.5, 2),
    ),
    Mood.WARM: _tokens(
        Mood.WARM, (0.375, 0.5, 0.875),
        (
            _shadow((1, 2, 0.08, WARM_TINT)),
            _shadow((2, 4, 0.10, WARM_TINT), (1, 2, 0.04)),
            _shadow((4, 8, 0.10, WARM_TINT), (2, 4, 0.04)),
            _shadow((10, 18, 0.12, WARM_TINT), (4, 8, 0.04)),
            _shadow((20, 28, 0.14, WARM_TINT), (8, 12, 0.04)),
        ),
        (1, 1, 1.5),
    ),
    Mood.BOLD: _tokens(
        Mood.BOLD, (0.25, 0.5, 0.75),
        (
            _shadow((2, 4, 0.08)),
            _shadow((3, 6, 0.10), (1, 3, 0.06)),
            _shadow((6, 12, 0.12), (3, 6, 0.06)),
            _shadow((14, 24, 0.14), (6, 10, 0.06)),
            _shadow((28, 40, 0.16), (10, 16, 0.06)),
        ),
        (1, 1.5, 2),
    ),
    Mood.VIBRANT: _tokens(
        Mood.VIBRANT, (0.375, 0.625, 1.0),
        (
            _shadow((2, 4, 0.07)),
            _shadow((3, 6, 0.09), (1, 3, 0.05)),
            _shadow((6, 12, 0.10), (3, 6, 0.05)),
            _shadow((14, 24, 0.12), (6, 10, 0.05)),
            _shadow((28, 40, 0.14), (10, 16, 0.05)),
        ),
        (1, 1, 1.5),
    ),
    Mood.ELEGANT: _tokens(
        Mood.ELEGANT, (0.25, 0.375, 0.625),
        (
            _shadow((1, 2, 0.04)),
            _shadow((1, 3, 0.05), (1, 2, 0.03)),
            _shadow((4, 6, 0.05), (2, 4, 0.03)),
            _shadow((10, 15, 0.06), (4, 6, 0.03)),
            _shadow((20, 25, 0.07), (8, 10, 0.03)),
        ),
        (1, 1, 1),
    ),
})

# Dark surfaces get their own deeper shadows, not a multiple of the light ones
DARK_SHADOWS: Tuple[Shadow, ...] = (
    _shadow((1, 3, 0.30)),
    _shadow((2, 4, 0.35), (1, 2, 0.25)),
    _shadow((4, 8, 0.35), (2, 4, 0.25)),
    _shadow((10, 20, 0.40), (4, 8, 0.25)),
    _shadow((20, 30, 0.45), (8, 12, 0.25)),
)


def dark_shadow_css_values() -> Dict[str, str]:
    return {key: shadow.css() for key, shadow in zip(SHADOW_KEYS, DARK_SHADOWS)}


# ── Derivation ────────────────────────────────────────────────────────────────

def base_structural_tokens(mood: Mood) -> StructuralTokenSet:
    return MOOD_STRUCTURAL_TOKENS.get(mood, MOOD_STRUCTURAL_TOKENS[DEFAULT_MOOD])


def apply_radius_profile(tokens: StructuralTokenSet, profile: RadiusProfile) -> StructuralTokenSet:
    """Scale sm/md/lg radii from the mood's base values. radius_full is never scaled."""
    base = base_structural_tokens(tokens.mood)
    return replace(
        tokens,
        radius_sm=quantize(base.radius_sm * profile.sm_multiplier, 3),
        radius_md=quantize(base.radius_md * profile.md_multiplier, 3),
        radius_lg=quantize(base.radius_lg * profile.lg_multiplier, 3),
    )


def apply_shadow_profile(tokens: StructuralTokenSet, profile: ShadowProfile) -> StructuralTokenSet:
    """Scale every layer's blur and opacity from the mood's base shadows."""
    base = base_structural_tokens(tokens.mood)
    blur, opacity = profile.blur_multiplier, profile.intensity_multiplier
    return replace(
        tokens,
        shadow_xs=base.shadow_xs.scaled(blur, opacity),
        shadow_sm=base.shadow_sm.scaled(blur, opacity),
        shadow_md=base.shadow_md.scaled(blur, opacity),
        shadow_lg=base.shadow_lg.scaled(blur, opacity),
        shadow_xl=base.shadow_xl.scaled(blur, opacity),
    )


def derive_structural_tokens(
    mood: Mood,
    radius_profile: RadiusProfile,
    shadow_profile: ShadowProfile,
) -> StructuralTokenSet:
    tokens = base_structural_tokens(mood)
    tokens = apply_radius_profile(tokens, radius_profile)
    return apply_shadow_profile(tokens, shadow_profile)
