"""
engine.py — Brand signals in, TokenSnapshot out.

Pipeline:
  1. Classify    — category + mood + matched keywords from the four text fields
  2. Parameters  — base hue / chroma / neutral offset from the lookup tables
  3. Fingerprint — seed("directive::name") → hue variance + radius/shadow profiles
  4. Colour      — light scales, dark scales, guard-railed interactive slot
  5. Structure   — mood structural tokens × fingerprint profiles
  6. Snapshot    — everything above plus provenance, frozen

Pure function of its inputs: no I/O, no shared mutable state, safe to call
from any number of threads.

Usage:
    from brandtokens.engine import synthesize_tokens
    from brandtokens.request import TokenRequest

    snap = synthesize_tokens(TokenRequest(directive="legal case tracker", product_name="Casewell"))
    snap.category   # → Category.LEGAL
"""

from __future__ import annotations

import logging

from .classifier import BrandSignal, classify_signals
from .dark_mode import derive_dark_scales
from .fingerprint import compute_fingerprint, resolve_hues
from .parameters import derive_brand_parameters
from .request import TokenRequest
from .scales import (
    MAX_TEXT_L_ON_DARK_BG,
    MIN_TEXT_L_ON_LIGHT_BG,
    PRIMARY_BUTTON_L_MAX,
    PRIMARY_BUTTON_L_MIN,
    SEMANTIC_CHROMAS,
    SEMANTIC_HUES,
    generate_light_scales,
    interactive_color,
)
from .seed import brand_seed
from .snapshot import (
    ContrastGuardrails,
    FingerprintRecord,
    ModeScales,
    StructuralTokensRecord,
    TokenSnapshot,
)
from .structural import dark_shadow_css_values, derive_structural_tokens

logger = logging.getLogger(__name__)


def synthesize_tokens(request: TokenRequest) -> TokenSnapshot:
    signal = BrandSignal.from_request(request)
    classification = classify_signals(signal)
    params = derive_brand_parameters(classification, request.brand_statement)

    seed = brand_seed(request.directive, request.product_name)
    fingerprint = compute_fingerprint(seed, classification.mood)
    hues = resolve_hues(params, fingerprint)

    light = generate_light_scales(
        hues.brand_hue_final,
        params.brand_chroma,
        hues.neutral_hue_final,
        params.neutral_chroma,
    )
    dark = derive_dark_scales(light, hues.brand_hue_final, params.brand_chroma)

    structural = derive_structural_tokens(
        classification.mood,
        fingerprint.radius_profile,
        fingerprint.shadow_profile,
    )

    logger.info(
        f"Synthesized tokens: {classification.category.value}/{classification.mood.value} "
        f"seed={seed} hue {hues.brand_hue_base}→{hues.brand_hue_final} "
        f"radius={fingerprint.radius_profile.name} shadow={fingerprint.shadow_profile.name}"
    )

    return TokenSnapshot(
        inputs=request,
        category=classification.category,
        mood=classification.mood,
        matched_keywords=classification.matched_keywords,
        match_source=classification.match_source,
        brand_hue_base=hues.brand_hue_base,
        brand_hue_final=hues.brand_hue_final,
        brand_chroma=params.brand_chroma,
        neutral_hue_base=hues.neutral_hue_base,
        neutral_hue_final=hues.neutral_hue_final,
        neutral_chroma=params.neutral_chroma,
        neutral_offset=params.neutral_offset,
        neutral_chroma_range=params.neutral_chroma_range,
        fingerprint=FingerprintRecord(
            seed=fingerprint.seed,
            brand_hue_variance=fingerprint.brand_hue_variance,
            neutral_hue_variance=fingerprint.neutral_hue_variance,
            radius_profile=fingerprint.radius_profile.name,
            shadow_profile=fingerprint.shadow_profile.name,
        ),
        light=ModeScales(**light),
        dark=ModeScales(**dark),
        interactive={
            "light": interactive_color(light["primary"]),
            "dark": interactive_color(dark["primary"]),
        },
        semantic_hues=dict(SEMANTIC_HUES),
        semantic_chromas=dict(SEMANTIC_CHROMAS),
        structural_tokens=StructuralTokensRecord.model_validate(structural.as_css_values()),
        dark_shadows=dark_shadow_css_values(),
        contrast_guardrails=ContrastGuardrails(
            primary_button_l_range=(PRIMARY_BUTTON_L_MIN, PRIMARY_BUTTON_L_MAX),
            min_text_l_on_light_bg=MIN_TEXT_L_ON_LIGHT_BG,
            max_text_l_on_dark_bg=MAX_TEXT_L_ON_DARK_BG,
        ),
    )


def synthesize(
    directive: str = "",
    product_name: str = "",
    brand_statement: str = "",
    pitch: str = "",
) -> TokenSnapshot:
    """Keyword-argument shortcut for synthesize_tokens()."""
    return synthesize_tokens(TokenRequest(
        directive=directive,
        product_name=product_name,
        brand_statement=brand_statement,
        pitch=pitch,
    ))


def verify_snapshot(snapshot: TokenSnapshot) -> bool:
    """True if re-running synthesis on the snapshot's recorded inputs reproduces it exactly."""
    replay = synthesize_tokens(snapshot.inputs)
    matches = replay.model_dump_json(by_alias=True) == snapshot.model_dump_json(by_alias=True)
    if not matches:
        logger.warning(
            f"Snapshot does not reproduce from its inputs "
            f"(seed {snapshot.fingerprint.seed} vs {replay.fingerprint.seed})"
        )
    return matches
