"""transit-overlap: fan out transit lines that share street segments."""

from transit_overlap.geodata.model import LineFeature, LineFeatureCollection
from transit_overlap.layout.engine import manage_overlapping_lines
from transit_overlap.layout.viewport import get_lines_in_view

__version__ = "0.1.0"

__all__ = [
    "LineFeature",
    "LineFeatureCollection",
    "__version__",
    "get_lines_in_view",
    "manage_overlapping_lines",
]
