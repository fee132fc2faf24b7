"""
snapshot.py — The immutable TokenSnapshot record and its serialisation helpers.

A snapshot carries every resolved value *and* the inputs that produced it, so
it can be persisted, replayed, and checked for reproducibility later:

  snap.model_dump_json(by_alias=True)        → canonical JSON
  TokenSnapshot.model_validate_json(raw)     → back to a snapshot
  snap.to_flat_record()                      → ordered {"light.primary.500.l": 0.65, ...}
  rederive_scales(snap)                      → scales rebuilt from stored hue/chroma only
"""

from __future__ import annotations

from typing import Annotated, Dict, Iterator, List, Mapping, Tuple, TypeVar, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from .classifier import SignalSource
from .dark_mode import derive_dark_scales
from .request import TokenRequest
from .scales import SCALE_NAMES, ColorScale, Oklch, generate_light_scales
from .vocabulary import Category, Mood

SNAPSHOT_VERSION = "1.0.0"

Scalar = Union[str, int, float, bool, None]

K = TypeVar("K")
V = TypeVar("V")


# ── Read-only mapping ─────────────────────────────────────────────────────────

class FrozenMap(Mapping[K, V]):
    """Insertion-ordered, read-only, hashable mapping."""

    __slots__ = ("_items",)

    def __init__(self, data: Mapping[K, V] = None):
        self._items: Dict[K, V] = dict(data or {})

    def __getitem__(self, key: K) -> V:
        return self._items[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(tuple(self._items.items()))

    def __repr__(self) -> str:
        return f"FrozenMap({self._items!r})"


def _freeze(value: Mapping) -> FrozenMap:
    return FrozenMap(value)


def _thaw(value: Mapping) -> dict:
    return dict(value)


def _frozen(mapping_type):
    """Validate as `mapping_type`, store as FrozenMap, serialise as a plain dict."""
    return Annotated[
        mapping_type,
        AfterValidator(_freeze),
        PlainSerializer(_thaw, return_type=mapping_type),
    ]


FrozenScale = _frozen(Dict[int, Oklch])
FrozenColors = _frozen(Dict[str, Oklch])
FrozenFloats = _frozen(Dict[str, float])
FrozenStrings = _frozen(Dict[str, str])


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ── Nested records ────────────────────────────────────────────────────────────

class FingerprintRecord(_Record):
    seed: int
    brand_hue_variance: int
    neutral_hue_variance: int
    radius_profile: str
    shadow_profile: str


class ModeScales(_Record):
    """Six 11-step scales for one mode. Keys are shade stops, values (L, C, H)."""
    primary: FrozenScale
    neutral: FrozenScale
    success: FrozenScale
    warning: FrozenScale
    error: FrozenScale
    info: FrozenScale

    def scale(self, name: str) -> Mapping[int, Oklch]:
        return getattr(self, name)

    def items(self) -> List[Tuple[str, Mapping[int, Oklch]]]:
        return [(name, self.scale(name)) for name in SCALE_NAMES]


class StructuralTokensRecord(_Record):
    radius_sm: str
    radius_md: str
    radius_lg: str
    radius_full: str
    shadow_xs: str
    shadow_sm: str
    shadow_md: str
    shadow_lg: str
    shadow_xl: str
    border_subtle: str
    border_default: str
    border_strong: str


class ContrastGuardrails(_Record):
    primary_button_l_range: Tuple[float, float]
    min_text_l_on_light_bg: float
    max_text_l_on_dark_bg: float


# ── Snapshot ──────────────────────────────────────────────────────────────────

class TokenSnapshot(_Record):
    version: str = SNAPSHOT_VERSION
    color_space: str = "oklch"
    inputs: TokenRequest

    # Classification / provenance
    category: Category
    mood: Mood
    matched_keywords: Tuple[str, ...] = ()
    match_source: SignalSource

    # Brand parameters
    brand_hue_base: float
    brand_hue_final: float
    brand_chroma: float
    neutral_hue_base: float
    neutral_hue_final: float
    neutral_chroma: float
    neutral_offset: float
    neutral_chroma_range: Tuple[float, float]

    fingerprint: FingerprintRecord

    # Colour
    light: ModeScales
    dark: ModeScales
    interactive: FrozenColors       # {"light": …, "dark": …} guard-railed primary 500
    semantic_hues: FrozenFloats
    semantic_chromas: FrozenFloats
    primary_chroma_strategy: str = "bell-curve"
    semantic_hue_strategy: str = "fixed"
    dark_mode_strategy: str = "L-shift-semantic-preserved"

    # Structure
    structural_tokens: StructuralTokensRecord
    dark_shadows: FrozenStrings
    contrast_guardrails: ContrastGuardrails

    def mode(self, name: str) -> ModeScales:
        return self.light if name == "light" else self.dark

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)

    def to_flat_record(self) -> Dict[str, Scalar]:
        """
        Flatten to an ordered dotted-key record for field-by-field consumers.
        Colour triples become `.l` / `.c` / `.h` keys; other lists are indexed.
        An empty matchedKeywords list contributes no keys.
        """
        data = self.model_dump(
            mode="json",
            by_alias=True,
            exclude={"light", "dark", "interactive"},
        )
        record: Dict[str, Scalar] = {}
        _flatten("", data, record)

        for mode_name in ("light", "dark"):
            for scale_name, scale in self.mode(mode_name).items():
                for stop, color in scale.items():
                    _put_color(record, f"{mode_name}.{scale_name}.{stop}", color)
        for mode_name, color in self.interactive.items():
            _put_color(record, f"interactive.{mode_name}", color)
        return record


def _flatten(prefix: str, value, out: Dict[str, Scalar]) -> None:
    if isinstance(value, dict):
        for k, v in value.items():
            _flatten(f"{prefix}.{k}" if prefix else str(k), v, out)
    elif isinstance(value, (list, tuple)):
        for i, v in enumerate(value):
            _flatten(f"{prefix}.{i}", v, out)
    else:
        out[prefix] = value


def _put_color(out: Dict[str, Scalar], prefix: str, color: Oklch) -> None:
    out[f"{prefix}.l"] = color.l
    out[f"{prefix}.c"] = color.c
    out[f"{prefix}.h"] = color.h


# ── Replay ────────────────────────────────────────────────────────────────────

def rederive_scales(snapshot: TokenSnapshot) -> Dict[str, Dict[str, ColorScale]]:
    """
    Rebuild both modes' scales from the stored final hues and chromas alone,
    without re-reading the request text. Returns {"light": {...}, "dark": {...}}.
    """
    light = generate_light_scales(
        snapshot.brand_hue_final,
        snapshot.brand_chroma,
        snapshot.neutral_hue_final,
        snapshot.neutral_chroma,
    )
    dark = derive_dark_scales(light, snapshot.brand_hue_final, snapshot.brand_chroma)
    return {"light": light, "dark": dark}
