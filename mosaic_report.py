#!/usr/bin/env python3
"""
mosaic_report.py
Build the 64x64 shorthand-colour mosaic and report how the placement went.

Usage:
  python mosaic_report.py [--colour HEX3 ...] [--top N] [--debug]

Report:
  Tier sizes, how many colours were pushed off their ideal cell, and the
  mean / p50 / p90 / max weighted displacement. --top lists the most displaced
  colours; --colour prints the cell of specific colours.

Notes:
  The grid itself comes from mosaic_grid.grid. Pure CPU, no I/O beyond stdout.
"""

from __future__ import annotations

import argparse
import sys
import time
from collections import Counter
from typing import List, Optional, Sequence

from mosaic_grid.constants import GRID_SIZE, HUE_WEIGHT, ROW_WEIGHT, TOTAL_COLORS
from mosaic_grid.core_types import InvalidColorFormat, RawColor
from mosaic_grid.grid import build_mosaic_grid
from mosaic_grid.planner import classify_tier
from mosaic_grid.utils import (
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    summarise_distances,
    warn,
)


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        colour: list of hex3 keys to locate
        top: how many of the most displaced colours to list
        debug: bool for builder details
    """
    parser = argparse.ArgumentParser(
        prog="mosaic-report",
        description="Build the 4,096-colour mosaic grid and summarise the placement.",
    )
    parser.add_argument(
        "--colour",
        "--color",
        dest="colour",
        action="append",
        default=[],
        metavar="HEX3",
        help="Print the cell of this shorthand colour (repeatable).",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=5,
        help="List the N most displaced colours (0 to skip).",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose build details")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_cli_args(argv)
    enable_line_buffered_stdout()

    print_banner("mosaic")
    print_config_line(
        "grid",
        [
            ("Size", GRID_SIZE),
            ("Colours", TOTAL_COLORS),
            ("Row weight", ROW_WEIGHT),
            ("Hue weight", HUE_WEIGHT),
        ],
        debug=False,
    )

    t0 = time.perf_counter()
    try:
        assignment = build_mosaic_grid(debug=args.debug)
    except Exception as e:
        error(f"grid build failed: {e}")
        raise
    elapsed = time.perf_counter() - t0

    placements = assignment.placements
    tiers = Counter(classify_tier(p.entry.perceptual) for p in placements)
    log(
        key_value_pairs_to_string(
            [(f"Tier {t.name.lower()}", tiers.get(t, 0)) for t in sorted(tiers)]
        )
    )

    displaced = [p for p in placements if p.displaced]
    stats = summarise_distances([p.distance for p in displaced])
    log(
        key_value_pairs_to_string(
            [
                ("Displaced", len(displaced)),
                ("dist mean", stats["mean"]),
                ("dist p50", stats["p50"]),
                ("dist p90", stats["p90"]),
                ("dist max", stats["max"]),
                ("Build", format_seconds_compact(elapsed)),
            ]
        )
    )

    if args.top > 0 and displaced:
        log(f"most displaced (top {args.top}):")
        worst = sorted(displaced, key=lambda p: -p.distance)[: args.top]
        for p in worst:
            e = p.entry
            log(
                f"  -> {e.hex3}  {e.hex6}  target=({p.target_row},{p.target_col})"
                f"  cell=({e.row},{e.col})  dist={p.distance:g}"
            )

    if args.colour:
        by_hex = {p.entry.hex3: p.entry for p in placements}
        lines: List[str] = []
        for text in args.colour:
            try:
                key = RawColor.from_hex3(text).hex3
            except InvalidColorFormat as e:
                warn(str(e))
                continue
            e = by_hex[key]
            lines.append(
                f"  {e.hex3}  {e.hex6}  row={e.row}  col={e.col}"
                f"  L={e.perceptual.l:.3f}  C={e.perceptual.c:.3f}  H={e.perceptual.h:.1f}"
            )
        for line in lines:
            log(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
