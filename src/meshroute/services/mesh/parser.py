"""Parser for the textual mesh format: one ``<origin> <destination> <distance>`` per line."""

from __future__ import annotations

import math
from typing import Iterable

from ...config import settings
from ...errors import InvalidMeshError
from ...models.domain import Graph, Segment

COMMENT_PREFIX = "#"


def parse_segment_line(line: str, line_number: int) -> Segment | None:
    """Parse one mesh line. Blank lines and comments yield ``None``."""
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    fields = stripped.split()
    if len(fields) != 3:
        raise InvalidMeshError(
            f"Expected '<origin> <destination> <distance>', got {len(fields)} field(s): '{stripped}'.",
            line_number,
        )
    origin, destination, raw_distance = fields
    try:
        distance = float(raw_distance)
    except ValueError as exc:
        raise InvalidMeshError(f"Unable to parse distance from value '{raw_distance}'.", line_number) from exc
    if math.isnan(distance) or math.isinf(distance):
        raise InvalidMeshError(f"Distance must be finite, got '{raw_distance}'.", line_number)
    if distance < 0:
        raise InvalidMeshError(f"Distance must not be negative, got '{raw_distance}'.", line_number)
    return Segment(origin=origin, destination=destination, distance_km=distance)


def parse_segments(lines: Iterable[str] | str) -> list[Segment]:
    if isinstance(lines, str):
        lines = lines.splitlines()
    segments: list[Segment] = []
    for line_number, line in enumerate(lines, start=1):
        segment = parse_segment_line(line, line_number)
        if segment is not None:
            segments.append(segment)
    return segments


def parse_mesh(name: str, lines: Iterable[str] | str, *, bidirectional: bool | None = None) -> Graph:
    """Parse a mesh description into an immutable graph.

    ``bidirectional`` defaults to ``settings.bidirectional_segments``; when
    enabled every line also produces the reverse segment.
    """
    segments = parse_segments(lines)
    if not segments:
        raise InvalidMeshError(f"Mesh '{name}' does not contain any segment.")
    if bidirectional is None:
        bidirectional = settings.bidirectional_segments
    return Graph.from_segments(name, segments, bidirectional=bidirectional)
