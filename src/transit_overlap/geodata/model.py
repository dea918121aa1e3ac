"""Data model for transit line collections and their shared segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

Coord = tuple[float, float]
"""A ``(longitude, latitude)`` position."""


@dataclass
class LineFeature:
    """A transit path: an ordered polyline plus its GeoJSON metadata."""

    coordinates: list[Coord]
    id: str | int | None = None
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        for key in ("name", "shortname", "route_short_name", "ref"):
            value = self.properties.get(key)
            if value:
                return str(value)
        if self.id is not None:
            return str(self.id)
        return ""


@dataclass
class LineFeatureCollection:
    """An ordered collection of line features.

    Feature indices are run-local identifiers: the overlap pipeline refers
    to lines by their position in ``features``, never by ``id``.
    """

    features: list[LineFeature] = field(default_factory=list)
    name: str = ""

    def add_feature(self, feature: LineFeature) -> None:
        self.features.append(feature)

    def coordinate_counts(self) -> list[int]:
        """Return the number of coordinates of every line, in order."""
        return [len(f.coordinates) for f in self.features]

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[LineFeature]:
        return iter(self.features)

    def __getitem__(self, index: int) -> LineFeature:
        return self.features[index]


@dataclass(frozen=True)
class SharedSegment:
    """A coordinate run common to two or more lines.

    Equality and hashing use ``key`` only, so two runs whose coordinates
    canonicalize to the same key are the same segment.
    """

    key: tuple
    coordinates: tuple[Coord, ...] = field(compare=False)

    @property
    def first(self) -> Coord:
        return self.coordinates[0]

    @property
    def last(self) -> Coord:
        return self.coordinates[-1]

    def reversed_coordinates(self) -> list[Coord]:
        return list(reversed(self.coordinates))

    def __len__(self) -> int:
        return len(self.coordinates)


@dataclass
class OverlapGroup:
    """The lines sharing one segment, with each member's direction.

    ``directions`` is paired positionally with ``classified_lines``, the
    members whose direction could be resolved. Members matching neither
    segment endpoint appear in ``member_lines`` only.
    """

    segment: SharedSegment
    member_lines: list[int] = field(default_factory=list)
    directions: list[bool] = field(default_factory=list)
    classified_lines: list[int] = field(default_factory=list)

    @property
    def oriented_members(self) -> list[tuple[int, bool]]:
        """Return (line_index, forward) pairs in processing order."""
        return list(zip(self.classified_lines, self.directions))

    @property
    def forward_lines(self) -> list[int]:
        return [lid for lid, fwd in self.oriented_members if fwd]

    @property
    def backward_lines(self) -> list[int]:
        return [lid for lid, fwd in self.oriented_members if not fwd]
