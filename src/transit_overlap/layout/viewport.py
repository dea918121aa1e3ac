"""Viewport filtering: keep the lines with at least one vertex in view."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Union

from shapely.geometry import Point, Polygon, box, shape
from shapely.prepared import prep

from transit_overlap.geodata.model import LineFeatureCollection

Bounds = Union[Polygon, Mapping[str, Any], Sequence[Sequence[float]]]


def bbox_polygon(min_x: float, min_y: float, max_x: float, max_y: float) -> Polygon:
    """Build a rectangular viewport polygon from its corners."""
    return box(min_x, min_y, max_x, max_y)


def _as_polygon(bounds: Bounds) -> Polygon:
    if isinstance(bounds, Polygon):
        return bounds
    if isinstance(bounds, Mapping):
        geometry = bounds.get("geometry") if bounds.get("type") == "Feature" else bounds
        geom = shape(geometry)
        if geom.geom_type != "Polygon":
            raise ValueError(
                f"Viewport must be a Polygon, got {geom.geom_type}."
            )
        return geom
    return Polygon(bounds)


def get_lines_in_view(
    bounds: Bounds,
    collection: LineFeatureCollection,
) -> LineFeatureCollection:
    """Return the lines having at least one vertex inside *bounds*.

    Points on the polygon boundary count as inside. The returned collection
    shares its LineFeature objects with *collection*, so offsetting it
    also moves the corresponding lines of the full layer.
    """
    viewport = prep(_as_polygon(bounds))
    in_view = LineFeatureCollection(name=collection.name)
    for feature in collection:
        for x, y in feature.coordinates:
            if viewport.covers(Point(x, y)):
                in_view.add_feature(feature)
                break
    return in_view
