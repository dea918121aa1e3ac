"""Reader and writer for GeoJSON line collections.

Only the subset the overlap pipeline needs is supported: a
``FeatureCollection`` whose features carry ``LineString`` geometries with
``[longitude, latitude]`` positions.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from transit_overlap.geodata.model import Coord, LineFeature, LineFeatureCollection


def _check_unsupported_input(data: Any) -> None:
    """Detect common unsupported input shapes and raise helpful errors."""
    if not isinstance(data, dict):
        raise ValueError(
            "Expected a GeoJSON object at the top level, "
            f"got {type(data).__name__}."
        )

    kind = data.get("type")
    if kind == "Feature" or kind in ("LineString", "MultiLineString"):
        raise ValueError(
            f"Got a single GeoJSON {kind}. Wrap line features in a "
            "'FeatureCollection' so every line has a stable position."
        )
    if kind != "FeatureCollection":
        raise ValueError(
            f"Unsupported GeoJSON type {kind!r}: expected 'FeatureCollection'."
        )
    if not isinstance(data.get("features"), list):
        raise ValueError("FeatureCollection is missing its 'features' list.")


def _parse_position(position: Any, feature_index: int) -> Coord:
    if not isinstance(position, (list, tuple)) or len(position) < 2:
        raise ValueError(
            f"Feature {feature_index}: position {position!r} needs at least "
            "two numbers [longitude, latitude]."
        )
    try:
        # Extra components (altitude, measure) are dropped
        return (float(position[0]), float(position[1]))
    except (TypeError, ValueError):
        raise ValueError(
            f"Feature {feature_index}: position {position!r} is not numeric."
        ) from None


def _parse_feature(feature: Any, index: int) -> LineFeature:
    if not isinstance(feature, dict) or feature.get("type") != "Feature":
        raise ValueError(f"Feature {index} is not a GeoJSON Feature object.")

    geometry = feature.get("geometry") or {}
    if not isinstance(geometry, dict):
        raise ValueError(
            f"Feature {index}: geometry must be a GeoJSON object, "
            f"got {type(geometry).__name__}."
        )
    geom_type = geometry.get("type")
    if geom_type == "MultiLineString":
        raise ValueError(
            f"Feature {index} is a MultiLineString. Split it into one "
            "LineString feature per part before offsetting."
        )
    if geom_type != "LineString":
        raise ValueError(
            f"Feature {index} has geometry type {geom_type!r}; only "
            "'LineString' is supported."
        )

    raw_coordinates = geometry.get("coordinates", [])
    if not isinstance(raw_coordinates, list):
        raise ValueError(
            f"Feature {index}: LineString coordinates must be a list of "
            f"positions, got {type(raw_coordinates).__name__}."
        )
    properties = feature.get("properties") or {}
    if not isinstance(properties, dict):
        raise ValueError(
            f"Feature {index}: properties must be an object or null, "
            f"got {type(properties).__name__}."
        )

    return LineFeature(
        coordinates=[_parse_position(pos, index) for pos in raw_coordinates],
        id=feature.get("id"),
        properties=dict(properties),
    )


def parse_feature_collection(data: dict[str, Any]) -> LineFeatureCollection:
    """Build a collection from decoded GeoJSON data."""
    _check_unsupported_input(data)

    collection = LineFeatureCollection(name=str(data.get("name") or ""))
    for index, feature in enumerate(data["features"]):
        collection.add_feature(_parse_feature(feature, index))
    return collection


def load_feature_collection(text: str) -> LineFeatureCollection:
    """Parse a GeoJSON document."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e
    return parse_feature_collection(data)


def read_feature_collection(path: str | Path) -> LineFeatureCollection:
    return load_feature_collection(Path(path).read_text(encoding="utf-8"))


def to_geojson(collection: LineFeatureCollection) -> dict[str, Any]:
    """Encode a collection as a GeoJSON FeatureCollection dict."""
    features = []
    for feature in collection:
        encoded: dict[str, Any] = {"type": "Feature"}
        if feature.id is not None:
            encoded["id"] = feature.id
        encoded["properties"] = dict(feature.properties)
        encoded["geometry"] = {
            "type": "LineString",
            "coordinates": [[x, y] for x, y in feature.coordinates],
        }
        features.append(encoded)

    data: dict[str, Any] = {"type": "FeatureCollection"}
    if collection.name:
        data["name"] = collection.name
    data["features"] = features
    return data


def dump_feature_collection(
    collection: LineFeatureCollection,
    indent: int | None = None,
) -> str:
    """Serialize a collection to GeoJSON text.

    Non-finite coordinates are not valid JSON; run the cleaner first.
    """
    for feature in collection:
        for x, y in feature.coordinates:
            if not (math.isfinite(x) and math.isfinite(y)):
                raise ValueError(
                    f"Line {feature.display_name or '?'} holds a non-finite "
                    f"coordinate ({x}, {y}); it cannot be written as GeoJSON."
                )
    return json.dumps(to_geojson(collection), indent=indent) + "\n"
