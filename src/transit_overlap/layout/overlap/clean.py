"""Final cleanup of offset artifacts."""

from __future__ import annotations

import logging
import math

from transit_overlap.geodata.model import LineFeatureCollection

logger = logging.getLogger(__name__)


def clean_lines(collection: LineFeatureCollection) -> LineFeatureCollection:
    """Drop every coordinate with a NaN or infinite component, in place."""
    for lid, feature in enumerate(collection.features):
        kept = [
            c for c in feature.coordinates
            if math.isfinite(c[0]) and math.isfinite(c[1])
        ]
        removed = len(feature.coordinates) - len(kept)
        if removed:
            logger.debug("line %d: removed %d non-finite coordinate(s)", lid, removed)
            feature.coordinates[:] = kept
    return collection
