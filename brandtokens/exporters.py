"""
exporters.py — Render a TokenSnapshot into hand-off files.

  tokens.css   — :root (light) and .dark custom properties + semantic aliases
  tokens.json  — design-tokens document with brand metadata and fingerprint
  tokens.md    — Markdown rulebook: every scale with OKLCH + HEX per stop
  tailwind.config.ts — Tailwind theme mapped onto the tokens.css variables

The renderers are pure string/dict builders; write_token_files() is the only
function that touches disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .scales import SCALE_NAMES, SHADE_STOPS, Oklch
from .snapshot import ModeScales, TokenSnapshot

logger = logging.getLogger(__name__)

DESIGN_TOKENS_SCHEMA = "https://design-tokens.github.io/community-group/format/"


def _signed(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


def _kebab(camel: str) -> str:
    out = []
    for ch in camel:
        if ch.isupper():
            out.append("-")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


# ── tokens.css ─────────────────────────────────────────────────────────────────

def _scale_vars(scales: ModeScales) -> List[str]:
    lines: List[str] = []
    for name, scale in scales.items():
        lines.append(f"  /* --- {name.title()} --- */")
        for stop in SHADE_STOPS:
            lines.append(f"  --{name}-{stop}: {scale[stop].css()};")
        lines.append("")
    return lines


def _shadow_vars(shadows: Dict[str, str]) -> List[str]:
    return [f"  --{_kebab(key)}: {value};" for key, value in shadows.items()]


def to_tokens_css(snap: TokenSnapshot, app_name: str = "") -> str:
    fp = snap.fingerprint
    st = snap.structural_tokens
    title = app_name or snap.inputs.product_name or "Brand"
    hue_f = f"{snap.brand_hue_final:g}"
    nhue_f = f"{snap.neutral_hue_final:g}"
    nc = f"{snap.neutral_chroma:.3f}"
    interactive_light = snap.interactive["light"]
    interactive_dark = snap.interactive["dark"]

    header = [
        "/**",
        f" * {title} Design Tokens",
        " * Generated with OKLCH color space for perceptual uniformity",
        " *",
        f" * Brand: {snap.category.value} / {snap.mood.value}",
        f" * Brand Hue (base): {snap.brand_hue_base:g}° → (final): {hue_f}° [variance: {_signed(fp.brand_hue_variance)}°]",
        f" * Brand Chroma: {snap.brand_chroma:.3f}",
        f" * Neutral Hue (base): {snap.neutral_hue_base:g}° → (final): {nhue_f}° [variance: {_signed(fp.neutral_hue_variance)}°]",
        f" * Neutral Chroma: {snap.neutral_chroma:.4f} (mood-adjusted, capped)",
        " *",
        " * Fingerprint:",
        f" * - Seed: {fp.seed} (from directive::productName)",
        f" * - Radius Profile: {fp.radius_profile}",
        f" * - Shadow Profile: {fp.shadow_profile}",
        " *",
        " * Semantic hues are fixed: "
        + ", ".join(f"{k} {v:g}°" for k, v in snap.semantic_hues.items()),
        " * Dark mode is an L-shift: 50 stays lightest, 950 stays darkest",
        " */",
        "",
    ]

    light = [
        "/* ===== LIGHT MODE (Default) ===== */",
        ":root {",
        f"  /* --- Structural Tokens (mood: {snap.mood.value}) --- */",
        f"  --radius-sm: {st.radius_sm};",
        f"  --radius-md: {st.radius_md};",
        f"  --radius-lg: {st.radius_lg};",
        f"  --radius-full: {st.radius_full};",
        "",
        f"  --border-width-subtle: {st.border_subtle};",
        f"  --border-width-default: {st.border_default};",
        f"  --border-width-strong: {st.border_strong};",
        "",
        *_scale_vars(snap.light),
        "  /* Background */",
        "  --bg: var(--neutral-50);",
        "  --bg-secondary: oklch(0.995 0 0);",
        "  --bg-surface: oklch(1 0 0);",
        "  --bg-surface-raised: oklch(1 0 0);",
        "  --bg-muted: var(--neutral-100);",
        "  --bg-hover: var(--neutral-100);",
        "  --bg-active: var(--neutral-200);",
        "",
        "  /* Text */",
        "  --text: var(--neutral-900);",
        "  --text-secondary: var(--neutral-600);",
        "  --text-muted: var(--neutral-500);",
        "  --text-placeholder: var(--neutral-400);",
        "  --text-inverse: oklch(1 0 0);",
        "",
        "  /* Border */",
        "  --border: var(--neutral-200);",
        "  --border-subtle: var(--neutral-100);",
        "  --border-strong: var(--neutral-300);",
        "",
        "  /* Ring (focus) */",
        "  --ring: var(--primary-500);",
        "  --ring-offset: oklch(1 0 0);",
        "",
        f"  /* Shadow (mood-derived: {snap.mood.value}) */",
        *_shadow_vars({
            "shadowXs": st.shadow_xs,
            "shadowSm": st.shadow_sm,
            "shadowMd": st.shadow_md,
            "shadowLg": st.shadow_lg,
            "shadowXl": st.shadow_xl,
        }),
        "",
        "  /* Primary semantic */",
        f"  --primary: {interactive_light.css()};",
        "  --primary-hover: var(--primary-600);",
        "  --primary-active: var(--primary-700);",
        "  --primary-fg: oklch(1 0 0);",
        f"  --primary-muted: oklch(0.95 0.03 {hue_f});",
        "",
        "  --success: var(--success-500);",
        "  --success-fg: oklch(1 0 0);",
        "  --success-muted: var(--success-50);",
        "  --warning: var(--warning-500);",
        "  --warning-fg: var(--neutral-900);",
        "  --warning-muted: var(--warning-50);",
        "  --error: var(--error-500);",
        "  --error-fg: oklch(1 0 0);",
        "  --error-muted: var(--error-50);",
        "  --info: var(--info-500);",
        "  --info-fg: oklch(1 0 0);",
        "  --info-muted: var(--info-50);",
        "",
        f"  --selection: oklch(0.92 0.05 {hue_f});",
        "}",
        "",
    ]

    dark = [
        "/* ===== DARK MODE (L-shift only, step order preserved) ===== */",
        ".dark {",
        *_scale_vars(snap.dark),
        "  --bg: var(--neutral-950);",
        f"  --bg-secondary: oklch(0.08 {nc} {nhue_f});",
        "  --bg-surface: var(--neutral-900);",
        "  --bg-surface-raised: var(--neutral-800);",
        "  --bg-muted: var(--neutral-800);",
        "  --bg-hover: var(--neutral-800);",
        "  --bg-active: var(--neutral-700);",
        "",
        "  --text: var(--neutral-50);",
        "  --text-secondary: var(--neutral-200);",
        "  --text-muted: var(--neutral-300);",
        "  --text-placeholder: var(--neutral-400);",
        "  --text-inverse: var(--neutral-950);",
        "",
        "  --border: var(--neutral-700);",
        "  --border-subtle: var(--neutral-800);",
        "  --border-strong: var(--neutral-600);",
        "",
        "  --ring-offset: var(--neutral-950);",
        "",
        "  /* Shadow (dark surfaces) */",
        *_shadow_vars(snap.dark_shadows),
        "",
        f"  --primary: {interactive_dark.css()};",
        "  --primary-muted: var(--primary-900);",
        "  --primary-fg: var(--neutral-950);",
        "",
        f"  --selection: oklch(0.30 {snap.brand_chroma * 0.5:.3f} {hue_f});",
        "}",
        "",
    ]

    return "\n".join(header + light + dark)


# ── tokens.json ────────────────────────────────────────────────────────────────

def to_tokens_json(snap: TokenSnapshot, app_name: str = "") -> dict:
    """Design-tokens document. Key order is fixed so output diffs cleanly."""
    title = app_name or snap.inputs.product_name or "Brand"
    data = snap.model_dump(mode="json", by_alias=True)
    return {
        "$schema": DESIGN_TOKENS_SCHEMA,
        "name": f"{title} Design Tokens",
        "version": snap.version,
        "colorSpace": snap.color_space,
        "category": data["category"],
        "mood": data["mood"],
        "brandHue": data["brandHueBase"],
        "brandHueFinal": data["brandHueFinal"],
        "brandChroma": data["brandChroma"],
        "neutralHue": data["neutralHueBase"],
        "neutralHueFinal": data["neutralHueFinal"],
        "neutralChroma": data["neutralChroma"],
        "matchedKeywords": data["matchedKeywords"],
        "matchSource": data["matchSource"],
        "neutralOffset": data["neutralOffset"],
        "neutralChromaRange": {
            "min": snap.neutral_chroma_range[0],
            "max": snap.neutral_chroma_range[1],
        },
        "primaryChromaStrategy": snap.primary_chroma_strategy,
        "semanticHues": data["semanticHues"],
        "semanticHueStrategy": snap.semantic_hue_strategy,
        "darkModeStrategy": snap.dark_mode_strategy,
        "fingerprint": data["fingerprint"],
        "tokens": {
            "neutral": {"hue": data["neutralHueFinal"], "chroma": data["neutralChroma"]},
            "primary": {"hue": data["brandHueFinal"], "chroma": data["brandChroma"]},
            **{
                name: {"hue": hue, "chroma": snap.semantic_chromas[name]}
                for name, hue in data["semanticHues"].items()
            },
        },
        "structuralTokens": data["structuralTokens"],
        "contrastGuardrails": data["contrastGuardrails"],
    }


# ── tokens.md ──────────────────────────────────────────────────────────────────

def _scale_table(scales: ModeScales) -> str:
    header = "| Scale | " + " | ".join(str(s) for s in SHADE_STOPS) + " |"
    sep = "|-------|" + "|".join("-----" for _ in SHADE_STOPS) + "|"
    rows = [header, sep]
    for name, scale in scales.items():
        rows.append(f"| {name} | " + " | ".join(f"`{scale[s].hex()}`" for s in SHADE_STOPS) + " |")
    return "\n".join(rows)


def _swatch_line(label: str, color: Oklch) -> str:
    return f"- **{label}**: `{color.css()}` · `{color.hex()}`"


def to_rulebook_md(snap: TokenSnapshot, app_name: str = "") -> str:
    """Human-readable summary of the snapshot."""
    title = app_name or snap.inputs.product_name or "Brand"
    fp = snap.fingerprint
    st = snap.structural_tokens
    keywords = ", ".join(f"`{k}`" for k in snap.matched_keywords) or "_none (default category)_"

    return f"""# {title} — Design Tokens
*{snap.category.value} · {snap.mood.value} · seed `{fp.seed}`*

---

## Brand Signal

- **Category**: {snap.category.value} (matched via {snap.match_source.value})
- **Keywords**: {keywords}
- **Mood**: {snap.mood.value}
- **Brand hue**: {snap.brand_hue_base:g}° → {snap.brand_hue_final:g}° ({_signed(fp.brand_hue_variance)}°)
- **Brand chroma**: {snap.brand_chroma:.3f}
- **Neutral hue**: {snap.neutral_hue_base:g}° → {snap.neutral_hue_final:g}° ({_signed(fp.neutral_hue_variance)}°)
- **Neutral chroma**: {snap.neutral_chroma:.4f}

---

## Interactive Primary

{_swatch_line("Light", snap.interactive["light"])}
{_swatch_line("Dark", snap.interactive["dark"])}

White foreground text on primary surfaces requires L between {snap.contrast_guardrails.primary_button_l_range[0]:.2f} and {snap.contrast_guardrails.primary_button_l_range[1]:.2f}.

---

## Light Mode

{_scale_table(snap.light)}

## Dark Mode

{_scale_table(snap.dark)}

---

## Shape & Depth

**Radius profile**: {fp.radius_profile} · **Shadow profile**: {fp.shadow_profile}

| Token | Value |
|-------|-------|
| `radius-sm` | {st.radius_sm} |
| `radius-md` | {st.radius_md} |
| `radius-lg` | {st.radius_lg} |
| `radius-full` | {st.radius_full} |
| `shadow-xs` | `{st.shadow_xs}` |
| `shadow-sm` | `{st.shadow_sm}` |
| `shadow-md` | `{st.shadow_md}` |
| `shadow-lg` | `{st.shadow_lg}` |
| `shadow-xl` | `{st.shadow_xl}` |
| `border-width-subtle` | {st.border_subtle} |
| `border-width-default` | {st.border_default} |
| `border-width-strong` | {st.border_strong} |
"""


# ── tailwind.config.ts ─────────────────────────────────────────────────────────

TAILWIND_CONTENT_GLOBS = (
    "./src/pages/**/*.{js,ts,jsx,tsx,mdx}",
    "./src/components/**/*.{js,ts,jsx,tsx,mdx}",
    "./src/app/**/*.{js,ts,jsx,tsx,mdx}",
)

# Tailwind colour key → CSS custom property
TAILWIND_ALIASES = (
    ("bg", "bg"),
    ("bg-secondary", "bg-secondary"),
    ("surface", "bg-surface"),
    ("surface-raised", "bg-surface-raised"),
    ("muted", "bg-muted"),
    ("fg", "text"),
    ("fg-secondary", "text-secondary"),
    ("fg-muted", "text-muted"),
    ("border", "border"),
    ("border-subtle", "border-subtle"),
    ("border-strong", "border-strong"),
    ("ring", "ring"),
)

SCALE_ALIASES = {
    "primary": ("DEFAULT", "hover", "active", "fg", "muted"),
    "neutral": (),
    "success": ("DEFAULT", "fg", "muted"),
    "warning": ("DEFAULT", "fg", "muted"),
    "error": ("DEFAULT", "fg", "muted"),
    "info": ("DEFAULT", "fg", "muted"),
}


def _var(name: str) -> str:
    return f"'var(--{name})'"


def _ts_key(key: str) -> str:
    return key if key.replace("_", "").isalnum() else f"'{key}'"


def _scale_entry(name: str, pad: str) -> List[str]:
    lines = [f"{pad}{name}: {{"]
    for alias in SCALE_ALIASES[name]:
        lines.append(f"{pad}  {alias}: {_var(name if alias == 'DEFAULT' else f'{name}-{alias}')},")
    for stop in SHADE_STOPS:
        lines.append(f"{pad}  {stop}: {_var(f'{name}-{stop}')},")
    lines.append(f"{pad}}},")
    return lines


def to_tailwind_config(snap: TokenSnapshot, app_name: str = "") -> str:
    """tailwind.config.ts whose colours, shadows, radii and borders all point at tokens.css variables."""
    title = app_name or snap.inputs.product_name or "Brand"
    pad = " " * 8

    colors: List[str] = [f"{pad}{_ts_key(key)}: {_var(var)}," for key, var in TAILWIND_ALIASES]
    for name in SCALE_NAMES:
        colors.append("")
        colors.extend(_scale_entry(name, pad))

    lines = [
        "import type { Config } from 'tailwindcss';",
        "",
        "/**",
        f" * {title} Tailwind Configuration",
        " *",
        " * All colours reference OKLCH custom properties from tokens.css",
        " *",
        f" * Brand: {snap.category.value} / {snap.mood.value}",
        f" * Brand hue: {snap.brand_hue_final:g}° | Chroma: {snap.brand_chroma:.3f}",
        f" * Neutral hue: {snap.neutral_hue_final:g}° (derived from brand)",
        f" * Fingerprint seed: {snap.fingerprint.seed}",
        " */",
        "const config: Config = {",
        "  content: [",
        *(f"    '{glob}'," for glob in TAILWIND_CONTENT_GLOBS),
        "  ],",
        "  darkMode: 'class',",
        "  theme: {",
        "    extend: {",
        "      fontFamily: {",
        "        sans: ['Inter', 'system-ui', 'sans-serif'],",
        "        mono: ['JetBrains Mono', 'Menlo', 'monospace'],",
        "      },",
        "      colors: {",
        *colors,
        "      },",
        "      boxShadow: {",
        *(f"{pad}{size}: {_var(f'shadow-{size}')}," for size in ("xs", "sm", "md", "lg", "xl")),
        "      },",
        "      borderRadius: {",
        f"{pad}sm: {_var('radius-sm')},",
        f"{pad}DEFAULT: {_var('radius-md')},",
        f"{pad}md: {_var('radius-md')},",
        f"{pad}lg: {_var('radius-lg')},",
        f"{pad}full: {_var('radius-full')},",
        "      },",
        "      borderWidth: {",
        f"{pad}subtle: {_var('border-width-subtle')},",
        f"{pad}DEFAULT: {_var('border-width-default')},",
        f"{pad}strong: {_var('border-width-strong')},",
        "      },",
        "      ringOffsetColor: {",
        f"{pad}DEFAULT: {_var('ring-offset')},",
        "      },",
        "    },",
        "  },",
        "  plugins: [],",
        "};",
        "",
        "export default config;",
        "",
    ]
    return "\n".join(lines)


# ── File output ────────────────────────────────────────────────────────────────

def write_token_files(
    snap: TokenSnapshot,
    output_dir: Path,
    app_name: Optional[str] = None,
) -> Dict[str, Path]:
    """
    Write tokens.css, tokens.json, tokens.md, tailwind.config.ts and
    snapshot.json into output_dir.

    Returns:
        Dict: {"css": Path, "json": Path, "md": Path, "tailwind": Path, "snapshot": Path}
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    name = app_name or ""

    paths = {
        "css": output_dir / "tokens.css",
        "json": output_dir / "tokens.json",
        "md": output_dir / "tokens.md",
        "tailwind": output_dir / "tailwind.config.ts",
        "snapshot": output_dir / "snapshot.json",
    }
    paths["css"].write_text(to_tokens_css(snap, name), encoding="utf-8")
    paths["json"].write_text(json.dumps(to_tokens_json(snap, name), indent=2), encoding="utf-8")
    paths["md"].write_text(to_rulebook_md(snap, name), encoding="utf-8")
    paths["tailwind"].write_text(to_tailwind_config(snap, name), encoding="utf-8")
    paths["snapshot"].write_text(snap.to_json(), encoding="utf-8")

    for path in paths.values():
        logger.info(f"Token file written: {path.name}")
    return paths
