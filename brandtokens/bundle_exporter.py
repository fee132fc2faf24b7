"""
bundle_exporter.py — Bundle token hand-off files into a ZIP.

Creates an organized ZIP with:
  tokens/   — tokens.css, tokens.json, tokens.md
  snapshot/ — snapshot.json (replayable record)
  preview/  — swatches.png
"""

from __future__ import annotations

import logging
import re
import zipfile
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

BUNDLE_FOLDERS = {
    "css": "tokens",
    "json": "tokens",
    "md": "tokens",
    "tailwind": "tokens",
    "snapshot": "snapshot",
    "swatches": "preview",
}


def bundle_filename(brand_name: str) -> str:
    safe_name = re.sub(r"[^a-zA-Z0-9_-]", "_", brand_name.lower().strip())[:30] or "brand"
    return f"{safe_name}_design_tokens.zip"


def create_token_bundle(
    brand_name: str,
    output_dir: Path,
    files: Dict[str, Path],
    swatches_png: Optional[Path] = None,
) -> Optional[Path]:
    """
    Bundle the written token files into a ZIP file.

    Args:
        brand_name:   Brand name for the ZIP filename
        output_dir:   Directory to write the ZIP file
        files:        Output of write_token_files(): {"css": Path, "json": Path, ...}
        swatches_png: Path to the rendered swatch grid (optional)

    Returns:
        Path to created ZIP file, or None on failure.
    """
    entries = dict(files)
    if swatches_png is not None:
        entries["swatches"] = swatches_png

    zip_path = output_dir / bundle_filename(brand_name)
    try:
        with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zf:
            for key, path in entries.items():
                path = Path(path)
                if path.exists():
                    folder = BUNDLE_FOLDERS.get(key, "extra")
                    zf.write(path, f"{folder}/{path.name}")
                else:
                    logger.warning(f"Skipping missing bundle entry: {path}")
    except OSError as e:
        logger.warning(f"ZIP creation failed: {e}")
        return None

    logger.info(f"ZIP created: {zip_path.name} ({zip_path.stat().st_size // 1024} KB)")
    return zip_path
