"""Mesh ingestion helpers."""

from .parser import parse_mesh, parse_segment_line, parse_segments

__all__ = ["parse_mesh", "parse_segment_line", "parse_segments"]
