"""Tests for the synthesis pipeline and TokenSnapshot serialisation."""

import json

import pytest

from brandtokens.classifier import SignalSource
from brandtokens.engine import synthesize, synthesize_tokens, verify_snapshot
from brandtokens.request import TokenRequest
from brandtokens.scales import SCALE_NAMES, SHADE_STOPS, Oklch
from brandtokens.snapshot import TokenSnapshot, rederive_scales
from brandtokens.vocabulary import CATEGORY_PROFILES, Category, Mood


class TestPinnedSnapshots:
    def test_casewell(self, casewell):
        assert casewell.category is Category.LEGAL
        assert casewell.mood is Mood.PROFESSIONAL
        assert casewell.matched_keywords == ("legal", "case")
        assert casewell.match_source is SignalSource.DIRECTIVE
        assert casewell.brand_hue_base == 225
        assert casewell.brand_hue_final == 221
        assert casewell.brand_chroma == 0.12
        assert casewell.neutral_hue_base == 236
        assert casewell.neutral_hue_final == 237
        assert casewell.neutral_chroma == pytest.approx(0.0084)
        assert casewell.fingerprint.seed == 1136575442
        assert casewell.fingerprint.brand_hue_variance == -4
        assert casewell.fingerprint.neutral_hue_variance == 1
        assert casewell.fingerprint.radius_profile == "soft"
        assert casewell.fingerprint.shadow_profile == "subtle"

    def test_crm(self, crm):
        assert crm.category is Category.TECHNOLOGY
        assert crm.mood is Mood.MINIMAL
        assert crm.matched_keywords == ()
        assert crm.match_source is SignalSource.DEFAULT
        assert crm.brand_hue_final == 236
        assert crm.neutral_hue_base == 246
        assert crm.neutral_hue_final == 252
        assert crm.fingerprint.radius_profile == "sharp"
        assert crm.fingerprint.shadow_profile == "subtle"

    def test_primary_500_and_interactive(self, casewell):
        assert casewell.light.primary[500] == Oklch(0.65, 0.12, 221)
        assert casewell.interactive["light"].l == 0.65
        assert casewell.interactive["dark"].l == 0.50

    def test_structural_tokens_follow_profiles(self, casewell):
        assert casewell.structural_tokens.radius_md == "0.600rem"
        assert casewell.structural_tokens.radius_full == "9999px"
        assert casewell.dark_shadows["shadowXs"] == "0 1px 3px oklch(0 0 0 / 0.30)"


class TestDeterminism:
    def test_byte_identical_json(self):
        a = synthesize("legal case tracker", "Casewell", "calm, trustworthy", "every matter in one place")
        b = synthesize("legal case tracker", "Casewell", "calm, trustworthy", "every matter in one place")
        assert a.to_json() == b.to_json()

    def test_empty_input_is_valid(self):
        snap = synthesize_tokens(TokenRequest())
        assert snap.category is Category.TECHNOLOGY
        assert snap.mood is Mood.MINIMAL
        assert snap.fingerprint.seed == 2550542581   # fnv1a32("::")

    def test_statement_changes_mood_not_seed(self, casewell):
        playful = synthesize("legal case tracker", "Casewell", brand_statement="playful")
        assert playful.fingerprint.seed == casewell.fingerprint.seed
        assert playful.fingerprint.brand_hue_variance == casewell.fingerprint.brand_hue_variance
        assert playful.brand_hue_final == casewell.brand_hue_final
        assert playful.mood is Mood.PLAYFUL
        assert playful.brand_chroma == pytest.approx(0.16)

    def test_name_changes_seed(self, casewell):
        other = synthesize("legal case tracker", "Briefcase")
        assert other.fingerprint.seed != casewell.fingerprint.seed
        assert other.category is casewell.category


class TestSerialisation:
    def test_json_round_trip(self, casewell):
        restored = TokenSnapshot.model_validate_json(casewell.to_json())
        assert restored.to_json() == casewell.to_json()
        assert restored == casewell

    def test_camel_case_keys(self, casewell):
        data = json.loads(casewell.to_json())
        assert data["brandHueFinal"] == 221
        assert data["matchSource"] == "directive"
        assert data["colorSpace"] == "oklch"
        assert data["inputs"]["productName"] == "Casewell"
        assert data["light"]["primary"]["500"] == [0.65, 0.12, 221]
        assert data["contrastGuardrails"]["primaryButtonLRange"] == [0.5, 0.65]

    def test_flat_record(self, casewell):
        record = casewell.to_flat_record()
        assert record["fingerprint.seed"] == 1136575442
        assert record["inputs.productName"] == "Casewell"
        assert record["matchedKeywords.0"] == "legal"
        assert record["matchedKeywords.1"] == "case"
        assert record["neutralChromaRange.0"] == 0.006
        assert record["light.primary.500.l"] == 0.65
        assert record["dark.primary.500.l"] == 0.5
        assert record["interactive.light.h"] == 221
        assert all(isinstance(v, (str, int, float, bool)) for v in record.values())

    def test_flat_record_stable_order(self, casewell):
        assert list(casewell.to_flat_record()) == list(casewell.to_flat_record())

    def test_flat_record_without_keywords(self, crm):
        assert not any(k.startswith("matchedKeywords") for k in crm.to_flat_record())

    def test_flat_record_covers_every_stop(self, crm):
        record = crm.to_flat_record()
        for mode in ("light", "dark"):
            for name in SCALE_NAMES:
                for stop in SHADE_STOPS:
                    assert f"{mode}.{name}.{stop}.c" in record


class TestImmutability:
    def test_scale_stops_cannot_be_replaced(self, casewell):
        with pytest.raises(TypeError):
            casewell.light.primary[500] = casewell.light.primary[50]
        assert casewell.light.primary[500] == Oklch(0.65, 0.12, 221)

    def test_mapping_fields_are_read_only(self, casewell):
        with pytest.raises(TypeError):
            casewell.dark_shadows["shadowXs"] = "none"
        with pytest.raises(TypeError):
            casewell.interactive["light"] = Oklch(0.1, 0.0, 0)
        with pytest.raises(TypeError):
            casewell.semantic_hues["success"] = 0
        with pytest.raises(TypeError):
            del casewell.semantic_chromas["error"]

    def test_snapshot_is_hashable(self, casewell):
        restored = TokenSnapshot.model_validate_json(casewell.to_json())
        assert hash(casewell) == hash(restored)
        assert len({casewell, restored}) == 1

    def test_different_snapshots_hash_apart(self, casewell, crm):
        assert len({casewell, crm}) == 2

    def test_scales_still_read_like_dicts(self, crm):
        assert list(crm.light.neutral) == list(SHADE_STOPS)
        assert dict(crm.dark.info) == crm.dark.info


class TestReplay:
    def test_rederive_scales_matches(self, casewell):
        rebuilt = rederive_scales(casewell)
        for name in SCALE_NAMES:
            assert rebuilt["light"][name] == casewell.light.scale(name)
            assert rebuilt["dark"][name] == casewell.dark.scale(name)

    def test_verify_snapshot(self, casewell):
        assert verify_snapshot(casewell)

    def test_verify_detects_tampering(self, casewell):
        tampered = casewell.model_copy(update={"brand_chroma": 0.2})
        assert not verify_snapshot(tampered)


class TestBounds:
    DIRECTIVES = [" ".join(profile.keywords[:2]) for profile in CATEGORY_PROFILES.values()]
    STATEMENTS = ["", "playful", "serious", "warm", "clean", "vibrant", "calm", "luxury", "professional"]

    def test_every_category_and_mood(self):
        for directive in self.DIRECTIVES:
            for statement in self.STATEMENTS:
                snap = synthesize(directive, "Name", brand_statement=statement)
                assert 0.08 <= snap.brand_chroma <= 0.22
                assert snap.neutral_chroma <= 0.015
                assert -12 <= snap.fingerprint.brand_hue_variance <= 12
                assert -12 <= snap.fingerprint.neutral_hue_variance <= 12
                for mode in ("light", "dark"):
                    assert 0.50 <= snap.interactive[mode].l <= 0.65
                    scale = snap.mode(mode).primary
                    assert max(scale[500].c, scale[600].c) >= scale[50].c
                    assert max(scale[500].c, scale[600].c) >= scale[950].c
                assert snap.light.success[500].h == 145
                assert snap.light.warning[500].h == 45
                assert snap.light.error[500].h == 25
                assert snap.light.info[500].h == 220
