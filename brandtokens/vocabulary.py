"""
vocabulary.py — Closed brand vocabulary: categories, moods and their lookup tables.

All tables are module-level, built once at import and never mutated. Anything
keyed by Category or Mood must cover every member; the engine never falls
through to an unknown key.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class Category(str, Enum):
    LEGAL        = "legal"
    FINANCE      = "finance"
    HEALTHCARE   = "healthcare"
    WELLNESS     = "wellness"
    TECHNOLOGY   = "technology"
    CREATIVE     = "creative"
    EDUCATION    = "education"
    ECOMMERCE    = "ecommerce"
    SOCIAL       = "social"
    PRODUCTIVITY = "productivity"
    NATURE       = "nature"
    ENERGY       = "energy"


class Mood(str, Enum):
    MINIMAL      = "minimal"
    PROFESSIONAL = "professional"
    SERIOUS      = "serious"
    CALM         = "calm"
    FRIENDLY     = "friendly"
    PLAYFUL      = "playful"
    WARM         = "warm"
    BOLD         = "bold"
    VIBRANT      = "vibrant"
    ELEGANT      = "elegant"


DEFAULT_CATEGORY = Category.TECHNOLOGY
DEFAULT_MOOD     = Mood.PROFESSIONAL


@dataclass(frozen=True)
class CategoryProfile:
    """Base brand colour and the keywords that vote for this category."""
    hue: float
    chroma: float
    keywords: Tuple[str, ...]


# ── Category table ────────────────────────────────────────────────────────────
# Iteration order is significant: the first category to reach the top score
# wins a tie.

CATEGORY_PROFILES: Mapping[Category, CategoryProfile] = MappingProxyType({
    Category.LEGAL:        CategoryProfile(225, 0.12, ("legal", "law", "attorney", "lawyer", "court", "contract", "compliance", "case")),
    Category.FINANCE:      CategoryProfile(215, 0.14, ("finance", "bank", "payment", "money", "invoice", "accounting", "budget", "expense")),
    Category.HEALTHCARE:   CategoryProfile(175, 0.15, ("health", "medical", "clinic", "patient", "doctor", "hospital", "care", "therapy")),
    Category.WELLNESS:     CategoryProfile(155, 0.16, ("wellness", "mindful", "meditation", "ritual", "yoga", "self-care", "calm", "relaxation", "habit")),
    Category.TECHNOLOGY:   CategoryProfile(235, 0.15, ("tech", "software", "code", "developer", "api", "platform", "saas", "cloud", "data")),
    Category.CREATIVE:     CategoryProfile(285, 0.18, ("creative", "design", "art", "studio", "agency", "brand", "marketing", "media")),
    Category.EDUCATION:    CategoryProfile(195, 0.14, ("education", "learn", "course", "student", "school", "training", "knowledge", "academy")),
    Category.ECOMMERCE:    CategoryProfile(35,  0.16, ("shop", "store", "commerce", "product", "cart", "order", "inventory", "retail")),
    Category.SOCIAL:       CategoryProfile(265, 0.17, ("social", "community", "network", "connect", "chat", "message", "friend", "profile")),
    Category.PRODUCTIVITY: CategoryProfile(205, 0.13, ("task", "project", "manage", "track", "workflow", "productivity", "organize", "schedule")),
    Category.NATURE:       CategoryProfile(135, 0.18, ("nature", "eco", "green", "sustainable", "environment", "organic", "plant", "garden")),
    Category.ENERGY:       CategoryProfile(25,  0.20, ("energy", "sport", "fitness", "active", "workout", "gym", "performance", "athlete")),
})

# Neutral hue = final brand hue + this offset (warmth of the greys per category)
CATEGORY_NEUTRAL_OFFSETS: Mapping[Category, float] = MappingProxyType({
    Category.LEGAL:        15,
    Category.FINANCE:      20,
    Category.HEALTHCARE:   25,
    Category.WELLNESS:     35,
    Category.TECHNOLOGY:   10,
    Category.CREATIVE:     45,
    Category.EDUCATION:    30,
    Category.ECOMMERCE:    40,
    Category.SOCIAL:       50,
    Category.PRODUCTIVITY: 15,
    Category.NATURE:       55,
    Category.ENERGY:       20,
})
DEFAULT_NEUTRAL_OFFSET = 30

CATEGORY_DEFAULT_MOODS: Mapping[Category, Mood] = MappingProxyType({
    Category.LEGAL:        Mood.PROFESSIONAL,
    Category.FINANCE:      Mood.PROFESSIONAL,
    Category.HEALTHCARE:   Mood.CALM,
    Category.WELLNESS:     Mood.CALM,
    Category.TECHNOLOGY:   Mood.MINIMAL,
    Category.CREATIVE:     Mood.BOLD,
    Category.EDUCATION:    Mood.FRIENDLY,
    Category.ECOMMERCE:    Mood.VIBRANT,
    Category.SOCIAL:       Mood.FRIENDLY,
    Category.PRODUCTIVITY: Mood.MINIMAL,
    Category.NATURE:       Mood.CALM,
    Category.ENERGY:       Mood.BOLD,
})

# ── Mood vocabulary ───────────────────────────────────────────────────────────
# Substring match against the brand statement, first hit wins.

MOOD_KEYWORD_PRIORITY: Tuple[Tuple[Tuple[str, ...], Mood], ...] = (
    (("playful", "fun"),        Mood.PLAYFUL),
    (("serious", "formal"),     Mood.SERIOUS),
    (("warm", "friendly"),      Mood.WARM),
    (("minimal", "clean"),      Mood.MINIMAL),
    (("bold", "vibrant"),       Mood.BOLD),
    (("calm", "peaceful"),      Mood.CALM),
    (("elegant", "luxury"),     Mood.ELEGANT),
    (("professional",),         Mood.PROFESSIONAL),
)

# Additive brand-chroma modifier; the first tone word found applies
TONE_CHROMA_MODIFIERS: Tuple[Tuple[str, float], ...] = (
    ("professional", -0.03),
    ("corporate",    -0.03),
    ("minimal",      -0.04),
    ("serious",      -0.02),
    ("playful",       0.04),
    ("vibrant",       0.05),
    ("bold",          0.03),
    ("friendly",      0.02),
    ("warm",          0.01),
    ("calm",         -0.02),
    ("elegant",      -0.01),
)

# How tinted the neutral greys may be, per mood
MOOD_NEUTRAL_CHROMA: Mapping[Mood, Tuple[float, float]] = MappingProxyType({
    Mood.CALM:         (0.006, 0.010),
    Mood.SERIOUS:      (0.006, 0.010),
    Mood.PROFESSIONAL: (0.006, 0.012),
    Mood.MINIMAL:      (0.004, 0.008),
    Mood.ELEGANT:      (0.008, 0.012),
    Mood.FRIENDLY:     (0.010, 0.016),
    Mood.PLAYFUL:      (0.012, 0.018),
    Mood.WARM:         (0.012, 0.016),
    Mood.BOLD:         (0.010, 0.015),
    Mood.VIBRANT:      (0.012, 0.018),
})
DEFAULT_NEUTRAL_CHROMA_RANGE = (0.006, 0.012)
