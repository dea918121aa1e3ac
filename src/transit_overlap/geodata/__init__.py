"""GeoJSON line collections: data model and codec."""

from transit_overlap.geodata.geojson import (
    dump_feature_collection,
    load_feature_collection,
    parse_feature_collection,
    read_feature_collection,
    to_geojson,
)
from transit_overlap.geodata.model import (
    Coord,
    LineFeature,
    LineFeatureCollection,
    OverlapGroup,
    SharedSegment,
)

__all__ = [
    "Coord",
    "LineFeature",
    "LineFeatureCollection",
    "OverlapGroup",
    "SharedSegment",
    "dump_feature_collection",
    "load_feature_collection",
    "parse_feature_collection",
    "read_feature_collection",
    "to_geojson",
]
