"""Tests for brand parameters, hue variance and profile selection."""

import pytest

from brandtokens.classifier import Classification, SignalSource
from brandtokens.fingerprint import (
    HUE_VARIANCE_LIMIT,
    RADIUS_PROFILES,
    SHADOW_PROFILES,
    Fingerprint,
    compute_fingerprint,
    radius_profile_named,
    resolve_hues,
    shadow_profile_named,
)
from brandtokens.parameters import (
    BRAND_CHROMA_MAX,
    BrandParameters,
    derive_brand_parameters,
    neutral_chroma_for,
    tone_adjusted_chroma,
)
from brandtokens.seed import brand_seed
from brandtokens.vocabulary import Category, Mood


def _classification(category, mood):
    return Classification(category, mood, (), SignalSource.DEFAULT)


class TestBrandParameters:
    def test_legal_professional(self):
        p = derive_brand_parameters(_classification(Category.LEGAL, Mood.PROFESSIONAL), "")
        assert p.brand_hue_base == 225
        assert p.brand_chroma == 0.12
        assert p.neutral_offset == 15
        assert p.neutral_chroma_range == (0.006, 0.012)
        assert p.neutral_chroma == pytest.approx(0.0084)

    def test_tone_modifier_first_word_wins(self):
        assert tone_adjusted_chroma(0.12, "professional and playful") == pytest.approx(0.09)

    def test_tone_modifier_clamped(self):
        assert tone_adjusted_chroma(0.20, "vibrant") == BRAND_CHROMA_MAX

    def test_no_tone_word_leaves_chroma(self):
        assert tone_adjusted_chroma(0.15, "") == 0.15

    def test_neutral_chroma_capped(self):
        assert neutral_chroma_for((0.02, 0.03)) == 0.015


class TestFingerprint:
    def test_casewell_pinned(self):
        fp = compute_fingerprint(brand_seed("legal case tracker", "Casewell"), Mood.PROFESSIONAL)
        assert fp.seed == 1136575442
        assert fp.brand_hue_variance == -4
        assert fp.neutral_hue_variance == 1
        assert fp.radius_profile.name == "soft"
        assert fp.shadow_profile.name == "subtle"

    def test_crm_pinned(self):
        fp = compute_fingerprint(brand_seed("Build a CRM", "Acme"), Mood.MINIMAL)
        assert fp.seed == 1503305566
        assert fp.brand_hue_variance == 1
        assert fp.neutral_hue_variance == 6
        assert fp.radius_profile.name == "sharp"
        assert fp.shadow_profile.name == "subtle"

    def test_variance_and_profiles_bounded(self):
        for i in range(200):
            seed = brand_seed(f"product {i}", f"name {i}")
            for mood in Mood:
                fp = compute_fingerprint(seed, mood)
                assert -HUE_VARIANCE_LIMIT <= fp.brand_hue_variance <= HUE_VARIANCE_LIMIT
                assert -HUE_VARIANCE_LIMIT <= fp.neutral_hue_variance <= HUE_VARIANCE_LIMIT
                assert fp.radius_profile in RADIUS_PROFILES
                assert fp.shadow_profile in SHADOW_PROFILES

    def test_profile_is_within_one_step_of_mood_bias(self):
        names = [p.name for p in RADIUS_PROFILES]
        for i in range(100):
            fp = compute_fingerprint(brand_seed(f"d{i}", ""), Mood.PLAYFUL)
            assert names.index(fp.radius_profile.name) in (2, 3)

    def test_profile_lookup_by_name(self):
        assert radius_profile_named("soft").md_multiplier == 1.2
        assert shadow_profile_named("bold").intensity_multiplier == 1.5


class TestResolveHues:
    def _params(self, hue, offset):
        return BrandParameters(hue, 0.15, offset, 0.008, (0.006, 0.01))

    def _fp(self, brand, neutral):
        return Fingerprint(0, brand, neutral, RADIUS_PROFILES[1], SHADOW_PROFILES[1])

    def test_offset_applies_to_final_brand_hue(self):
        hues = resolve_hues(self._params(225, 15), self._fp(-4, 1))
        assert hues.brand_hue_final == 221
        assert hues.neutral_hue_base == 236
        assert hues.neutral_hue_final == 237

    def test_wraps_into_0_360(self):
        hues = resolve_hues(self._params(355, 10), self._fp(10, -12))
        assert hues.brand_hue_final == 5
        assert hues.neutral_hue_base == 15
        assert hues.neutral_hue_final == 3

    def test_wraps_below_zero(self):
        hues = resolve_hues(self._params(5, 0), self._fp(-10, 0))
        assert hues.brand_hue_final == 355
