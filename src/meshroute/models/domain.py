"""Domain models for logistics meshes: points, segments and graphs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from ..errors import InvalidMeshError, PointNotFoundError


@dataclass(frozen=True, slots=True)
class Segment:
    """Directed connection between two points, weighted by distance in kilometers."""

    origin: str
    destination: str
    distance_km: float

    def reversed(self) -> Segment:
        return Segment(origin=self.destination, destination=self.origin, distance_km=self.distance_km)


@dataclass(frozen=True, slots=True)
class Point:
    """Named delivery location together with the segments leaving it."""

    name: str
    segments: tuple[Segment, ...] = ()


@dataclass(frozen=True, slots=True)
class Graph:
    """Immutable snapshot of a named mesh.

    Points live in a dense tuple and are addressed by name through a
    read-only index. Every invariant is checked on construction, so a
    Graph that exists is safe to hand to the path finder.
    """

    name: str
    points: tuple[Point, ...]
    _index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        points = tuple(self.points)
        index: dict[str, int] = {}
        for position, point in enumerate(points):
            if point.name in index:
                raise InvalidMeshError(f"Duplicate point '{point.name}' in mesh '{self.name}'.")
            index[point.name] = position

        for point in points:
            for segment in point.segments:
                if segment.origin != point.name:
                    raise InvalidMeshError(
                        f"Segment {segment.origin}->{segment.destination} is attached to point '{point.name}'."
                    )
                if segment.destination not in index:
                    raise InvalidMeshError(
                        f"Segment {segment.origin}->{segment.destination} targets an unknown point."
                    )
                _check_distance(segment)

        object.__setattr__(self, "points", points)
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def from_segments(cls, name: str, segments: Iterable[Segment], *, bidirectional: bool = False) -> Graph:
        """Build a graph from a flat list of segments.

        A point is created for every endpoint name. Points are ordered by
        name so enumeration is the same on every run.
        """
        outgoing: dict[str, list[Segment]] = {}
        for segment in segments:
            _check_distance(segment)
            outgoing.setdefault(segment.origin, []).append(segment)
            outgoing.setdefault(segment.destination, [])
            if bidirectional:
                outgoing[segment.destination].append(segment.reversed())

        points = tuple(Point(name=point_name, segments=tuple(outgoing[point_name])) for point_name in sorted(outgoing))
        return cls(name=name, points=points)

    def __len__(self) -> int:
        return len(self.points)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def index_of(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise PointNotFoundError(name, self.name) from None

    def segments(self) -> Iterator[Segment]:
        for point in self.points:
            yield from point.segments


def _check_distance(segment: Segment) -> None:
    distance = segment.distance_km
    if not isinstance(distance, (int, float)) or math.isnan(distance) or math.isinf(distance):
        raise InvalidMeshError(
            f"Segment {segment.origin}->{segment.destination} has a non-finite distance {distance!r}."
        )
    if distance < 0:
        raise InvalidMeshError(
            f"Segment {segment.origin}->{segment.destination} has a negative distance {distance!r}."
        )


def find_point(graph: Graph, name: str) -> Point:
    """Return the point called ``name`` or raise ``PointNotFoundError``."""
    return graph.points[graph.index_of(name)]


def outgoing_segments(point: Point) -> tuple[Segment, ...]:
    return point.segments
