"""Data access helpers for loading mesh files from disk."""

from __future__ import annotations

import functools
import logging
from pathlib import Path

from ..config import settings
from ..models.domain import Graph
from ..services.mesh.parser import parse_mesh

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=16)
def _load_mesh_cached(path: Path, bidirectional: bool) -> Graph:
    if not path.exists():
        raise FileNotFoundError(f"Mesh file not found: {path}")

    with path.open(mode="r", encoding="utf-8-sig") as handle:
        graph = parse_mesh(path.stem, handle, bidirectional=bidirectional)

    segment_count = sum(1 for _ in graph.segments())
    logger.info(
        f"Loaded mesh '{graph.name}' from {path}: {len(graph)} points, {segment_count} segments "
        f"(bidirectional={bidirectional})"
    )
    return graph


def load_mesh(source: Path | str, *, bidirectional: bool | None = None) -> Graph:
    """Load a mesh file; the mesh is named after the file stem.

    Repeated loads of the same file return the same immutable snapshot.
    """
    if bidirectional is None:
        bidirectional = settings.bidirectional_segments
    return _load_mesh_cached(Path(source).expanduser().resolve(), bidirectional)


def load_default_mesh() -> Graph:
    return load_mesh(settings.mesh_file)


def clear_mesh_cache() -> None:
    _load_mesh_cached.cache_clear()
