#!/usr/bin/env python3
"""Batch render every GeoJSON test fixture to SVG, before and after offsetting.

Outputs go to /tmp/transit_overlap_renders/.

Usage:
    python scripts/render_fixtures.py [--match-reversed]
"""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from transit_overlap.geodata import read_feature_collection  # noqa: E402
from transit_overlap.layout import manage_overlapping_lines  # noqa: E402
from transit_overlap.render.svg import render_svg  # noqa: E402
from transit_overlap.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/transit_overlap_renders")
FIXTURES_DIR = project_root / "tests" / "fixtures"


def check_offset_result(collection, counts_before: list[int]) -> list[str]:
    """Compare an offset collection against its coordinate counts beforehand."""
    issues: list[str] = []
    for index, feature in enumerate(collection):
        bad = sum(
            1 for x, y in feature.coordinates
            if not (math.isfinite(x) and math.isfinite(y))
        )
        if bad:
            label = feature.display_name or index
            issues.append(f"ERROR: line {label} kept {bad} non-finite coordinates")
    if collection.coordinate_counts() != counts_before:
        issues.append("coordinate counts changed (degenerate segments removed)")
    return issues


def render_file(
    path: Path, output_dir: Path, *, match_reversed: bool = False
) -> tuple[str, list[str]]:
    """Render a fixture as-is and after offsetting.

    Returns (name, list_of_issues).
    """
    name = path.stem
    issues: list[str] = []

    try:
        collection = read_feature_collection(path)
    except ValueError as e:
        return name, [f"skipped, not a line collection: {e}"]

    theme = THEMES["light"]
    (output_dir / f"{name}_before.svg").write_text(render_svg(collection, theme))

    counts = collection.coordinate_counts()
    manage_overlapping_lines(collection, match_reversed=match_reversed)
    issues.extend(check_offset_result(collection, counts))

    (output_dir / f"{name}_after.svg").write_text(render_svg(collection, theme))
    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render GeoJSON fixtures")
    parser.add_argument(
        "--match-reversed", action="store_true",
        help="Treat runs travelled in opposite order as shared",
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = sorted(FIXTURES_DIR.glob("*.geojson"))
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in all_files)
    any_errors = False

    for path in all_files:
        name, issues = render_file(path, OUTPUT_DIR, match_reversed=args.match_reversed)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
