"""CLI for transit-overlap."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from transit_overlap import __version__
from transit_overlap.geodata import (
    LineFeatureCollection,
    dump_feature_collection,
    read_feature_collection,
)
from transit_overlap.layout import bbox_polygon, get_lines_in_view, manage_overlapping_lines
from transit_overlap.layout.constants import COORD_TOLERANCE, OFFSET_STEP
from transit_overlap.layout.overlap import build_overlap_groups, find_overlapping_lines
from transit_overlap.render import render_svg
from transit_overlap.themes import THEMES

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_bbox_option = click.option(
    "--bbox", type=float, nargs=4, default=None,
    metavar="MINX MINY MAXX MAXY",
    help="Viewport rectangle; only lines with a vertex inside are kept.",
)
_tolerance_option = click.option(
    "--tolerance", type=float, default=COORD_TOLERANCE, show_default=True,
    help=(
        "Grid size in degrees for coordinate equality (0 = exact match). "
        "Points are snapped to grid cells, so close points on either side "
        "of a cell boundary do not match."
    ),
)
_reversed_option = click.option(
    "--match-reversed", is_flag=True, default=False,
    help="Also treat runs travelled in opposite order as shared.",
)


def _load(input_file: Path) -> LineFeatureCollection:
    """Read a GeoJSON file, turning parse errors into a clean exit."""
    try:
        return read_feature_collection(input_file)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _write_geojson(collection: LineFeatureCollection, output: Path) -> None:
    try:
        output.write_text(dump_feature_collection(collection, indent=2))
    except ValueError as e:
        click.echo(f"Write error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", envvar="LOG_LEVEL", default="WARNING", show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging verbosity (also read from LOG_LEVEL).")
def cli(log_level: str) -> None:
    """transit-overlap: Fan out transit lines that share street segments."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output GeoJSON path. Defaults to <input>_offset.geojson")
@click.option("--offset-step", type=float, default=OFFSET_STEP, show_default=True,
              help="Lateral spacing in meters between lines on a shared segment.")
@_tolerance_option
@_reversed_option
@_bbox_option
def offset(
    input_file: Path,
    output: Path | None,
    offset_step: float,
    tolerance: float,
    match_reversed: bool,
    bbox: tuple[float, float, float, float] | None,
) -> None:
    """Offset overlapping lines of a GeoJSON LineString collection."""
    collection = _load(input_file)
    if bbox:
        collection = get_lines_in_view(bbox_polygon(*bbox), collection)

    before = sum(collection.coordinate_counts())
    manage_overlapping_lines(
        collection,
        offset_step=offset_step,
        tolerance=tolerance,
        match_reversed=match_reversed,
    )
    dropped = before - sum(collection.coordinate_counts())

    if output is None:
        output = input_file.with_name(input_file.stem + "_offset.geojson")

    _write_geojson(collection, output)
    message = f"Offset {len(collection)} lines -> {output}"
    if dropped:
        message += f" ({dropped} degenerate coordinates removed)"
    click.echo(message)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_tolerance_option
@_reversed_option
def overlaps(input_file: Path, tolerance: float, match_reversed: bool) -> None:
    """List the shared segments and the lines travelling them."""
    collection = _load(input_file)
    overlap_map = find_overlapping_lines(
        collection, tolerance=tolerance, match_reversed=match_reversed
    )
    groups = build_overlap_groups(overlap_map, collection, tolerance=tolerance)

    click.echo(f"Lines: {len(collection)}")
    click.echo(f"Shared segments: {len(groups)}")
    for n, group in enumerate(groups, start=1):
        seg = group.segment
        click.echo(f"  [{n}] {len(seg)} points "
                   f"{list(seg.first)} -> {list(seg.last)}")
        for lid in group.member_lines:
            name = collection[lid].display_name or f"#{lid}"
            if lid in group.forward_lines:
                direction = "forward"
            elif lid in group.backward_lines:
                direction = "backward"
            else:
                direction = "unmatched"
            click.echo(f"      {name}: {direction}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_bbox_option
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output GeoJSON path. Defaults to <input>_visible.geojson")
def visible(
    input_file: Path,
    bbox: tuple[float, float, float, float] | None,
    output: Path | None,
) -> None:
    """Keep only the lines with at least one vertex inside a viewport."""
    if not bbox:
        raise click.UsageError("--bbox is required")
    collection = _load(input_file)
    in_view = get_lines_in_view(bbox_polygon(*bbox), collection)

    if output is None:
        output = input_file.with_name(input_file.stem + "_visible.geojson")

    _write_geojson(in_view, output)
    click.echo(f"{len(in_view)} of {len(collection)} lines in view -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
@click.option("--offset-step", type=float, default=OFFSET_STEP, show_default=True,
              help="Lateral spacing in meters between lines on a shared segment.")
@click.option("--no-offset", is_flag=True, default=False,
              help="Draw the input geometry as-is.")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    width: int | None,
    height: int | None,
    offset_step: float,
    no_offset: bool,
) -> None:
    """Render a GeoJSON line collection to an SVG preview."""
    collection = _load(input_file)
    if not no_offset:
        manage_overlapping_lines(collection, offset_step=offset_step)

    svg = render_svg(collection, THEMES[theme], width=width, height=height)
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(collection)} lines -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a GeoJSON line collection."""
    collection = _load(input_file)

    errors = []
    for i, feature in enumerate(collection.features):
        label = feature.display_name or f"#{i}"
        if len(feature.coordinates) < 2:
            errors.append(f"Line {label} has {len(feature.coordinates)} "
                          f"coordinate(s); at least 2 are needed")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    total = sum(collection.coordinate_counts())
    click.echo(f"Valid: {len(collection)} lines, {total} coordinates")
