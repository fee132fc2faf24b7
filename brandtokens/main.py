"""
Brand Token Engine — CLI

Usage:
  python -m brandtokens.main --directive "legal case tracker" --name Casewell
  python -m brandtokens.main --brief briefs/casewell --zip
  python -m brandtokens.main --brief briefs/casewell --json > snapshot.json
  python -m brandtokens.main --verify outputs/casewell/snapshot.json

Environment (.env is loaded on start):
  BRAND_TOKENS_OUTPUT_DIR   root for generated folders (default: outputs)
  LOG_LEVEL                 logging level (default: INFO)
"""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys
import time
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from .bundle_exporter import create_token_bundle
from .engine import synthesize_tokens, verify_snapshot
from .exporters import write_token_files
from .parser import parse_token_brief
from .request import TokenRequest
from .snapshot import TokenSnapshot
from .swatch_renderer import render_token_swatches

load_dotenv()

console = Console()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def outputs_root() -> Path:
    return Path(os.environ.get("BRAND_TOKENS_OUTPUT_DIR", "outputs"))


def _configure_logging() -> None:
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, level, logging.INFO))


# ── CLI ───────────────────────────────────────────────────────────────────────

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Brand Token Engine — deterministic OKLCH design tokens from a brand brief"
    )
    parser.add_argument("--directive", default=None, help="What the product does")
    parser.add_argument("--name", default=None, help="Product / brand name")
    parser.add_argument("--statement", default=None, help="Brand statement / tone words")
    parser.add_argument("--pitch", default=None, help="Elevator pitch")
    parser.add_argument(
        "--brief",
        default=None,
        help="Path to brief directory (containing brief.md) or a Markdown file",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output directory (default: $BRAND_TOKENS_OUTPUT_DIR/<name>)",
    )
    parser.add_argument("--no-render", action="store_true", help="Skip the swatch PNG")
    parser.add_argument("--zip", action="store_true", help="Bundle the outputs into a ZIP")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the snapshot JSON to stdout and write nothing",
    )
    parser.add_argument(
        "--verify",
        default=None,
        metavar="SNAPSHOT",
        help="Check that a saved snapshot.json reproduces from its inputs",
    )
    return parser.parse_args(argv)


def build_request(args: argparse.Namespace) -> TokenRequest:
    """Brief file first, then explicit flags override individual fields."""
    fields = {}
    if args.brief:
        fields = parse_token_brief(args.brief).model_dump()
    overrides = {
        "directive": args.directive,
        "product_name": args.name,
        "brand_statement": args.statement,
        "pitch": args.pitch,
    }
    fields.update({k: v for k, v in overrides.items() if v is not None})
    return TokenRequest(**fields)


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9_-]", "_", name.lower().strip())[:30] or "brand"


# ── Display ───────────────────────────────────────────────────────────────────

def display_snapshot(snap: TokenSnapshot) -> None:
    fp = snap.fingerprint
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    table.add_row("Category", f"[bold]{snap.category.value}[/bold] (via {snap.match_source.value})")
    table.add_row("Keywords", ", ".join(snap.matched_keywords) or "—")
    table.add_row("Mood", f"[bold]{snap.mood.value}[/bold]")
    table.add_row("Seed", str(fp.seed))
    table.add_row("Brand hue", f"{snap.brand_hue_base:g}° → {snap.brand_hue_final:g}° ({fp.brand_hue_variance:+d})")
    table.add_row("Brand chroma", f"{snap.brand_chroma:.3f}")
    table.add_row("Neutral hue", f"{snap.neutral_hue_base:g}° → {snap.neutral_hue_final:g}° ({fp.neutral_hue_variance:+d})")
    table.add_row("Neutral chroma", f"{snap.neutral_chroma:.4f}")
    table.add_row("Radius / shadow", f"{fp.radius_profile} / {fp.shadow_profile}")
    table.add_row("Primary (light)", f"{snap.interactive['light'].css()}  {snap.interactive['light'].hex()}")
    table.add_row("Primary (dark)", f"{snap.interactive['dark'].css()}  {snap.interactive['dark'].hex()}")
    console.print(table)


# ── Commands ──────────────────────────────────────────────────────────────────

def run_verify(snapshot_path: str) -> bool:
    path = Path(snapshot_path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot not found: {snapshot_path}")
    snap = TokenSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
    ok = verify_snapshot(snap)
    if ok:
        console.print(f"  [green]✓ {path.name} reproduces exactly (seed {snap.fingerprint.seed})[/green]")
    else:
        console.print(f"  [bold red]✗ {path.name} does not reproduce from its inputs[/bold red]")
    return ok


def run_generate(args: argparse.Namespace) -> Path:
    request = build_request(args)
    t0 = time.time()

    console.print(Rule("[bold magenta]Brand Token Engine[/bold magenta]"))
    console.print(
        f"  Directive: [bold]{request.directive or '—'}[/bold]  |  "
        f"Name: [bold]{request.product_name or '—'}[/bold]"
    )

    console.print("\n[bold]Step 1/3 — Synthesizing tokens[/bold]")
    snap = synthesize_tokens(request)
    display_snapshot(snap)

    output_dir = Path(args.output) if args.output else outputs_root() / _slug(request.product_name)
    app_name = request.product_name

    console.print("\n[bold]Step 2/3 — Writing token files[/bold]")
    files = write_token_files(snap, output_dir, app_name=app_name)
    for path in files.values():
        console.print(f"  [green]✓[/green] {path}")

    swatches: Optional[Path] = None
    if not args.no_render:
        console.print("\n[bold]Step 3/3 — Rendering swatches (Pillow)[/bold]")
        swatches = render_token_swatches(snap, output_dir / "swatches.png")
        console.print(f"  [green]✓[/green] {swatches}")
    else:
        console.print("\n  [dim]Swatch rendering skipped (--no-render)[/dim]")

    if args.zip:
        zip_path = create_token_bundle(app_name or "brand", output_dir, files, swatches_png=swatches)
        if zip_path:
            console.print(f"  [green]✓ Bundle:[/green] {zip_path}")
        else:
            console.print("  [yellow]⚠ Bundle could not be created[/yellow]")

    console.print(
        Panel(
            f"{snap.category.value} / {snap.mood.value} tokens in [bold]{time.time() - t0:.1f}s[/bold]\n"
            f"Outputs saved to: [bold]{output_dir}[/bold]",
            title="[bold green]Complete[/bold green]",
            border_style="green",
        )
    )
    return output_dir


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> None:
    _configure_logging()
    args = parse_args(argv)

    try:
        if args.verify:
            if not run_verify(args.verify):
                sys.exit(1)
        elif args.json:
            snap = synthesize_tokens(build_request(args))
            sys.stdout.write(snap.to_json() + "\n")
        else:
            run_generate(args)
    except (FileNotFoundError, ValidationError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
