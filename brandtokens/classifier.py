"""
classifier.py — Score free-text brand signals against the category and mood vocabularies.

Flow:
  1. Build a BrandSignal (ordered text sources) from a TokenRequest
  2. Count whole-word keyword hits per category across every source
  3. Highest total wins (first category in table order on a tie)
  4. Mood from brand-statement substrings, else the category default
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .request import TokenRequest
from .vocabulary import (
    CATEGORY_DEFAULT_MOODS,
    CATEGORY_PROFILES,
    DEFAULT_CATEGORY,
    DEFAULT_MOOD,
    MOOD_KEYWORD_PRIORITY,
    Category,
    Mood,
)

logger = logging.getLogger(__name__)


class SignalSource(str, Enum):
    DIRECTIVE       = "directive"
    PRODUCT_NAME    = "productName"
    BRAND_STATEMENT = "brandStatement"
    PITCH           = "pitch"
    DEFAULT         = "default"     # no keyword matched anywhere


# ── Data models ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BrandSignal:
    """Ordered (text, source) pairs. Text is kept as given; scoring lowercases."""
    sources: Tuple[Tuple[str, SignalSource], ...]

    @classmethod
    def from_request(cls, request: TokenRequest) -> "BrandSignal":
        return cls(sources=(
            (request.directive,       SignalSource.DIRECTIVE),
            (request.product_name,    SignalSource.PRODUCT_NAME),
            (request.brand_statement, SignalSource.BRAND_STATEMENT),
            (request.pitch,           SignalSource.PITCH),
        ))

    def text_for(self, source: SignalSource) -> str:
        for text, tag in self.sources:
            if tag is source:
                return text
        return ""


@dataclass(frozen=True)
class Classification:
    category: Category
    mood: Mood
    matched_keywords: Tuple[str, ...]
    match_source: SignalSource
    score: int = 0


# ── Keyword matching ──────────────────────────────────────────────────────────

def _compile_keyword_patterns() -> Dict[str, "re.Pattern[str]"]:
    patterns: Dict[str, re.Pattern[str]] = {}
    for profile in CATEGORY_PROFILES.values():
        for kw in profile.keywords:
            patterns[kw] = re.compile(rf"\b{re.escape(kw)}\b", re.IGNORECASE | re.ASCII)
    return patterns


_KEYWORD_PATTERNS = _compile_keyword_patterns()


def classify_category(signal: BrandSignal) -> Tuple[Category, Tuple[str, ...], SignalSource, int]:
    """
    Returns (category, matched_keywords, match_source, score).

    match_source is the source with the single largest keyword hit count for
    the winning category. No hits at all → (DEFAULT_CATEGORY, (), DEFAULT, 0).
    """
    texts = [(text.lower(), tag) for text, tag in signal.sources]

    best_category = DEFAULT_CATEGORY
    best_score = 0
    best_keywords: List[str] = []
    best_source = SignalSource.DEFAULT

    for category, profile in CATEGORY_PROFILES.items():
        score = 0
        matched: List[str] = []
        source = SignalSource.DEFAULT
        top_source_hits = 0

        for kw in profile.keywords:
            pattern = _KEYWORD_PATTERNS[kw]
            for text, tag in texts:
                hits = len(pattern.findall(text))
                if not hits:
                    continue
                score += hits
                if kw not in matched:
                    matched.append(kw)
                if hits > top_source_hits:
                    top_source_hits = hits
                    source = tag

        if score > best_score:
            best_score = score
            best_category = category
            best_keywords = matched
            best_source = source

    return best_category, tuple(best_keywords), best_source, best_score


def derive_mood(brand_statement: str, category: Category) -> Mood:
    """First mood keyword found in the statement wins, else the category's default mood."""
    tone = brand_statement.lower()
    for words, mood in MOOD_KEYWORD_PRIORITY:
        if any(w in tone for w in words):
            return mood
    return CATEGORY_DEFAULT_MOODS.get(category, DEFAULT_MOOD)


def classify_signals(signal: BrandSignal) -> Classification:
    category, keywords, source, score = classify_category(signal)
    mood = derive_mood(signal.text_for(SignalSource.BRAND_STATEMENT), category)

    logger.debug(
        f"Classified brand signal: {category.value}/{mood.value} "
        f"(score={score}, source={source.value}, keywords={list(keywords)})"
    )
    return Classification(
        category=category,
        mood=mood,
        matched_keywords=keywords,
        match_source=source,
        score=score,
    )
