"""
Brief parser — reads a brief.md into a TokenRequest.

Drop a single Markdown file in a folder (or pass the file directly):
    briefs/casewell/
      brief.md

SUPPORTED SECTIONS IN brief.md:
  ## Directive / ## Product / ## Brief          → directive   (multi-line, joined)
  ## Product Name / ## Brand Name / ## App Name → product_name (first line)
  ## Brand Statement / ## Tone / ## Personality
  ## Positioning / ## Values / ## Keywords       → brand_statement (all joined)
  ## Pitch / ## Elevator Pitch                   → pitch (multi-line, joined)

Headings are matched case-insensitively. Missing sections become "".
A section runs until the next #, ## or ### heading.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Tuple, Union

from .request import TokenRequest

BRIEF_FILENAME = "brief.md"

DIRECTIVE_SECTIONS = ("Directive", "Product", "Brief")
NAME_SECTIONS = ("Product Name", "Brand Name", "App Name")
STATEMENT_SECTIONS = ("Brand Statement", "Tone", "Personality", "Positioning", "Values", "Keywords")
PITCH_SECTIONS = ("Pitch", "Elevator Pitch")

_HEADING = re.compile(r"^(#{1,3})\s+(.*?)\s*#*$")


def _split_sections(text: str) -> List[Tuple[int, str, str]]:
    """[(heading level, lowercased title, body), ...] in document order."""
    sections: List[Tuple[int, str, str]] = []
    level, title, body = 0, "", []
    for line in text.splitlines():
        heading = _HEADING.match(line.strip())
        if heading and line.startswith("#"):
            sections.append((level, title, "\n".join(body).strip()))
            level, title, body = len(heading.group(1)), heading.group(2).lower(), []
        else:
            body.append(line)
    sections.append((level, title, "\n".join(body).strip()))
    return sections


def _bodies(sections: List[Tuple[int, str, str]], names: Tuple[str, ...]) -> List[str]:
    wanted = {n.lower() for n in names}
    return [body for level, title, body in sections if level == 2 and title in wanted and body]


def _as_sentence(block: str) -> str:
    """Collapse a Markdown block (bullets, wrapped lines) into one line of text."""
    parts = []
    for line in block.splitlines():
        stripped = line.strip().lstrip("-*").strip()
        if stripped:
            parts.append(stripped)
    return " ".join(parts)


def _joined(sections, names: Tuple[str, ...]) -> str:
    return " ".join(_as_sentence(b) for b in _bodies(sections, names))


def _first_line(sections, names: Tuple[str, ...]) -> str:
    for body in _bodies(sections, names):
        return body.splitlines()[0].strip()
    return ""


def parse_token_brief_text(text: str) -> TokenRequest:
    sections = _split_sections(text)
    return TokenRequest(
        directive=_joined(sections, DIRECTIVE_SECTIONS),
        product_name=_first_line(sections, NAME_SECTIONS),
        brand_statement=_joined(sections, STATEMENT_SECTIONS),
        pitch=_joined(sections, PITCH_SECTIONS),
    )


def parse_token_brief(brief_path: Union[str, Path]) -> TokenRequest:
    """
    Parse a brief directory (containing brief.md) or a Markdown file path.

    Raises:
        FileNotFoundError: the directory or its brief.md does not exist.
    """
    root = Path(brief_path)
    if not root.exists():
        raise FileNotFoundError(f"Brief not found: {brief_path}")

    brief_file = root / BRIEF_FILENAME if root.is_dir() else root
    if not brief_file.exists():
        raise FileNotFoundError(f"{BRIEF_FILENAME} not found in {brief_path}")

    return parse_token_brief_text(brief_file.read_text(encoding="utf-8"))
