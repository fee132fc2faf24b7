"""Tests for the brief.md parser."""

import pytest

from brandtokens.parser import parse_token_brief, parse_token_brief_text

BRIEF = """# Casewell

## Directive
legal case tracker

## Product Name
Casewell

## Tone
- calm
- trustworthy

## Values
Clarity first

## Pitch
Every matter,
one screen.
"""


class TestParseTokenBrief:
    def test_sections(self, tmp_path):
        (tmp_path / "brief.md").write_text(BRIEF, encoding="utf-8")
        req = parse_token_brief(tmp_path)
        assert req.directive == "legal case tracker"
        assert req.product_name == "Casewell"
        assert req.brand_statement == "calm trustworthy Clarity first"
        assert req.pitch == "Every matter, one screen."

    def test_file_path_accepted(self, tmp_path):
        path = tmp_path / "casewell.md"
        path.write_text(BRIEF, encoding="utf-8")
        assert parse_token_brief(str(path)).product_name == "Casewell"

    def test_missing_sections_are_empty(self):
        req = parse_token_brief_text("## Brand Name\nAcme\n")
        assert req.product_name == "Acme"
        assert req.directive == ""
        assert req.brand_statement == ""
        assert req.pitch == ""

    def test_headings_case_insensitive(self):
        req = parse_token_brief_text("## ELEVATOR PITCH\nFast.\n## brand statement\nBold\n")
        assert req.pitch == "Fast."
        assert req.brand_statement == "Bold"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_token_brief(tmp_path / "nowhere")

    def test_missing_brief_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_token_brief(tmp_path)


class TestSections:
    def test_subheading_ends_section(self):
        req = parse_token_brief_text("## Pitch\nFast.\n### Notes\nnot the pitch\n")
        assert req.pitch == "Fast."

    def test_deep_headings_stay_in_body(self):
        req = parse_token_brief_text("## Directive\nlegal\n#### detail\ncase tracker\n")
        assert req.directive == "legal #### detail case tracker"

    def test_closing_hashes_and_repeated_sections(self):
        req = parse_token_brief_text("## Directive ##\nlegal\n## Tone\ncalm\n## Brief\ncase tracker\n")
        assert req.directive == "legal case tracker"
        assert req.brand_statement == "calm"

    def test_name_is_first_line_only(self):
        req = parse_token_brief_text("## App Name\n\n  Casewell  \nsecond line\n")
        assert req.product_name == "Casewell"
