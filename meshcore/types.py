"""Common mesh types: I/O flags and the exceptions raised by mesh code."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class IOFlags:
    """Options shared by mesh readers and writers."""

    use_binary: bool = False
    use_vertex_normals: bool = False
    use_vertex_colors: bool = False
    use_vertex_texcoords: bool = False
    use_face_normals: bool = False
    use_face_colors: bool = False
    use_halfedge_texcoords: bool = False


class InvalidInputError(ValueError):
    """Invalid input was passed to a function, e.g. a polygon mesh where triangles are required."""


class SolverError(RuntimeError):
    """An equation system could not be solved."""


class AllocationError(ValueError):
    """An attempt was made to exceed an allocation limit."""


class TopologyError(RuntimeError):
    """A topological error occurred."""


class MeshIOError(OSError):
    """An error occurred while reading or writing a mesh."""