"""Typed failures raised while building meshes and computing routes."""

from __future__ import annotations


class MeshRouteError(Exception):
    """Base class for every domain failure raised by meshroute."""


class PointNotFoundError(MeshRouteError, LookupError):
    """A point name does not resolve to a point of the mesh."""

    def __init__(self, name: str, mesh: str | None = None) -> None:
        self.name = name
        self.mesh = mesh
        where = f" in mesh '{mesh}'" if mesh else ""
        super().__init__(f"Point '{name}' does not exist{where}.")


class NoPathError(MeshRouteError):
    """The destination cannot be reached from the origin."""

    def __init__(self, origin: str, destination: str) -> None:
        self.origin = origin
        self.destination = destination
        super().__init__(f"No route from '{origin}' to '{destination}'.")


class InvalidParameterError(MeshRouteError, ValueError):
    """A vehicle parameter (autonomy, fuel price) or a distance is out of range."""

    def __init__(self, parameter: str, value: object, message: str | None = None) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(message or f"Parameter '{parameter}' must be a finite number greater than zero, got {value!r}.")


class InvalidMeshError(MeshRouteError, ValueError):
    """The mesh description or the graph built from it violates the mesh invariants."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
