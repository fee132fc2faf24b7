"""
swatch_renderer.py — Render a TokenSnapshot's colour scales as a PNG grid.

Layout:
  - One row per scale per mode (light rows first, then dark)
  - 11 columns (50 → 950) + 1 name column on the left
  - Stop numbers in the header, hex value at the bottom of each swatch
  - 500 stop outlined; it is the interactive slot before guard-railing

Usage:
    from brandtokens.swatch_renderer import render_token_swatches

    render_token_swatches(snap, "outputs/casewell/swatches.png")
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .scales import INTERACTIVE_STOP, SHADE_STOPS, ColorScale
from .snapshot import TokenSnapshot

NAME_COL = 180
GAP = 2
BG = (12, 12, 16)

logger = logging.getLogger(__name__)


# Looked up by bare filename; Pillow searches the platform font directories.
FONT_FILES = {
    "regular": ("HelveticaNeue.ttc", "DejaVuSans.ttf", "LiberationSans-Regular.ttf", "Arial.ttf"),
    "bold": ("HelveticaNeue.ttc", "DejaVuSans-Bold.ttf", "LiberationSans-Bold.ttf", "Arial Bold.ttf"),
}


@lru_cache(maxsize=None)
def _load_font(size: int, bold: bool = False) -> ImageFont.ImageFont:
    for name in FONT_FILES["bold" if bold else "regular"]:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            pass
    logger.debug(f"No system font found for size {size}, using Pillow default")
    return ImageFont.load_default(size=size)


def _brightness(rgb: Tuple[int, int, int]) -> float:
    r, g, b = rgb
    return 0.299 * r + 0.587 * g + 0.114 * b


def _text_width(draw: ImageDraw.ImageDraw, text: str, font) -> int:
    bb = draw.textbbox((0, 0), text, font=font)
    return bb[2] - bb[0]


def swatch_rows(snap: TokenSnapshot) -> List[Tuple[str, str, ColorScale]]:
    """[(mode, scale name, scale), ...] in drawing order."""
    rows: List[Tuple[str, str, ColorScale]] = []
    for mode in ("light", "dark"):
        for name, scale in snap.mode(mode).items():
            rows.append((mode, name, scale))
    return rows


def render_token_swatch_image(
    snap: TokenSnapshot,
    width: int = 2400,
    row_height: int = 110,
    header_height: int = 56,
) -> Image.Image:
    rows = swatch_rows(snap)
    n_stops = len(SHADE_STOPS)
    total_h = header_height + len(rows) * (row_height + GAP)

    img = Image.new("RGB", (width, total_h), BG)
    draw = ImageDraw.Draw(img)

    swatch_w = (width - NAME_COL - (n_stops - 1) * GAP) // n_stops
    remainder = width - NAME_COL - (n_stops - 1) * GAP - swatch_w * n_stops

    font_hdr = _load_font(18, bold=True)
    font_stop = _load_font(15)
    font_hex = _load_font(13)
    font_name = _load_font(15, bold=True)
    font_mode = _load_font(12)

    # ── Header row ───────────────────────────────────────────────────────────
    title = f"{snap.category.value.upper()} · {snap.mood.value.upper()}"
    draw.text((8, 16), title, fill=(70, 70, 85), font=font_hdr)
    for si, stop in enumerate(SHADE_STOPS):
        sx = NAME_COL + si * (swatch_w + GAP)
        sw = swatch_w + (remainder if si == n_stops - 1 else 0)
        label = str(stop)
        lw = _text_width(draw, label, font_stop)
        draw.text((sx + (sw - lw) // 2, (header_height - 20) // 2), label, fill=(80, 80, 95), font=font_stop)

    # ── Scale rows ───────────────────────────────────────────────────────────
    for row_i, (mode, name, scale) in enumerate(rows):
        row_y = header_height + row_i * (row_height + GAP)

        draw.rectangle([0, row_y, NAME_COL - 1, row_y + row_height - 1], fill=(20, 20, 26))
        draw.text((10, row_y + row_height // 2 - 18), name, fill=(200, 200, 210), font=font_name)
        draw.text((10, row_y + row_height // 2 + 4), mode.upper(), fill=(80, 80, 95), font=font_mode)

        for si, stop in enumerate(SHADE_STOPS):
            color = scale[stop]
            hex_val = color.hex()
            rgb = color.rgb()
            br = _brightness(rgb)
            sw = swatch_w + (remainder if si == n_stops - 1 else 0)
            sx = NAME_COL + si * (swatch_w + GAP)

            draw.rectangle([sx, row_y, sx + sw - 1, row_y + row_height - 1], fill=rgb)

            if stop == INTERACTIVE_STOP:
                border_col = (255, 255, 255) if br < 128 else (0, 0, 0)
                draw.rectangle(
                    [sx + 2, row_y + 2, sx + sw - 3, row_y + row_height - 3],
                    outline=border_col,
                    width=2,
                )

            text_col = (255, 255, 255) if br < 145 else (20, 20, 20)
            lw = _text_width(draw, hex_val, font_hex)
            draw.text((sx + (sw - lw) // 2, row_y + row_height - 22), hex_val, fill=text_col, font=font_hex)

    return img


def render_token_swatches(
    snap: TokenSnapshot,
    output_path: Union[str, Path],
    width: int = 2400,
) -> Path:
    """Render the swatch grid and save it as PNG. Returns the saved path."""
    img = render_token_swatch_image(snap, width=width)
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    img.save(str(out), "PNG")
    return out
