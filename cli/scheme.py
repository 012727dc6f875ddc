"""CLI command to print or export the color roles for a seed color.

Resolves every role of the catalog for one scheme and emits it as
``role: #hex`` lines, a JSON snapshot, or a QSS prelude.

Usage examples:
  python -m cli.scheme "#6750A4"
  python -m cli.scheme 6750A4 --variant vibrant --dark --contrast 0.5
  python -m cli.scheme "#6750A4" --dark --format json --output exports/purple_dark.json
  TONEKIT_DARK=1 python -m cli.scheme "#6750A4" --no-dark
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from tonekit.dynamic.variant import Variant
from tonekit.export import generate_qss, scheme_to_hex_map, snapshot
from tonekit.schemes import scheme_for_variant
from tonekit.settings import DEFAULT_CONTRAST_LEVEL, DEFAULT_DARK_MODE, DEFAULT_VARIANT
from tonekit.utils.color_utils import argb_from_hex

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="scheme", description="Generate color roles from a seed color")
    p.add_argument("seed", help="Seed color as #RRGGBB (leading # optional)")
    p.add_argument(
        "--variant",
        default=DEFAULT_VARIANT,
        help="Scheme variant: " + ", ".join(v.value for v in Variant),
    )
    p.add_argument(
        "--dark",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_DARK_MODE,
        help="Dark mode (--no-dark forces light when TONEKIT_DARK is set)",
    )
    p.add_argument(
        "--contrast", type=float, default=DEFAULT_CONTRAST_LEVEL, help="Contrast level in [-1, 1]"
    )
    p.add_argument("--format", choices=("hex", "json", "qss"), default="hex", help="Output format")
    p.add_argument("--output", help="Write to this file instead of stdout")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p


def _render(scheme, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(snapshot(scheme), indent=2) + "\n"
    if fmt == "qss":
        return generate_qss(scheme)
    return "".join(f"{name}: {value}\n" for name, value in scheme_to_hex_map(scheme).items())


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    seed_text = args.seed if args.seed.startswith("#") else "#" + args.seed
    try:
        seed = argb_from_hex(seed_text)
    except ValueError:
        ap.error(f"Invalid seed color: {args.seed}")
    if not -1.0 <= args.contrast <= 1.0:
        ap.error(f"--contrast must be within [-1, 1] (got {args.contrast})")
    try:
        variant = Variant.parse(args.variant)
    except ValueError:
        ap.error(f"Unknown variant: {args.variant}")

    scheme = scheme_for_variant(variant, seed, is_dark=args.dark, contrast_level=args.contrast)
    out = _render(scheme, args.format)
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(out, encoding="utf-8")
        print(f"Scheme written: {out_path} ({variant.value}, {'dark' if args.dark else 'light'})")
        return 0
    sys.stdout.write(out)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
