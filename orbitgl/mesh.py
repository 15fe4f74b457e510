"""Triangle meshes and a few primitive shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterator

from orbitgl.vector3 import Vector3

_WHITE = Vector3(1.0, 1.0, 1.0)
_UP = Vector3(0.0, 1.0, 0.0)
_DOWN = Vector3(0.0, -1.0, 0.0)

# Cube layout: which corners make each face, with the face's normal and colour.
_CUBE_FACES = (
    ((0, 1, 2, 3), Vector3(0, 0, -1), Vector3(1, 0, 0)),  # front, red
    ((5, 4, 7, 6), Vector3(0, 0, 1), Vector3(0, 1, 0)),  # back, green
    ((4, 0, 3, 7), Vector3(-1, 0, 0), Vector3(0, 0, 1)),  # left, blue
    ((1, 5, 6, 2), Vector3(1, 0, 0), Vector3(1, 1, 0)),  # right, yellow
    ((4, 5, 1, 0), Vector3(0, -1, 0), Vector3(1, 0, 1)),  # bottom, magenta
    ((3, 2, 6, 7), Vector3(0, 1, 0), Vector3(0, 1, 1)),  # top, cyan
)
_WINDING_CCW = ((0, 1, 2), (0, 2, 3))
_WINDING_CW = ((0, 2, 1), (0, 3, 2))
_CUBE_WINDINGS = (
    _WINDING_CCW,
    _WINDING_CW,
    _WINDING_CCW,
    _WINDING_CW,
    _WINDING_CW,
    _WINDING_CCW,
)


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex with position, normal and colour."""

    position: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = _UP
    color: Vector3 = _WHITE


class Mesh:
    """An indexed triangle mesh."""

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._indices: list[int] = []

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(self._indices)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def triangle_count(self) -> int:
        return len(self._indices) // 3

    def add_vertex(self, vertex: Vertex) -> None:
        self._vertices.append(vertex)

    def add_triangle(self, v1: int, v2: int, v3: int) -> None:
        self._indices.extend((v1, v2, v3))

    def triangles(self) -> Iterator[tuple[int, int, int]]:
        """Yield the vertex indices of each triangle."""
        it = iter(self._indices)
        return zip(it, it, it)

    @classmethod
    def create_cube(cls, size: float = 1.0) -> Mesh:
        """Axis-aligned cube centred on the origin, one colour per face."""
        mesh = cls()
        h = size * 0.5
        corners = (
            Vector3(-h, -h, -h),
            Vector3(h, -h, -h),
            Vector3(h, h, -h),
            Vector3(-h, h, -h),
            Vector3(-h, -h, h),
            Vector3(h, -h, h),
            Vector3(h, h, h),
            Vector3(-h, h, h),
        )
        for (face_corners, normal, color), winding in zip(_CUBE_FACES, _CUBE_WINDINGS):
            base = mesh.vertex_count
            for corner in face_corners:
                mesh.add_vertex(Vertex(corners[corner], normal, color))
            for a, b, c in winding:
                mesh.add_triangle(base + a, base + b, base + c)
        return mesh

    @classmethod
    def create_sphere(cls, radius: float = 1.0, segments: int = 16) -> Mesh:
        """UV sphere with ``segments`` latitude bands and twice as many longitudes."""
        if segments < 2:
            raise ValueError(f"a sphere needs at least 2 segments, got {segments}")
        mesh = cls()
        mesh.add_vertex(Vertex(Vector3(0, radius, 0), _UP, _WHITE))

        points_per_ring = segments * 2
        for lat in range(1, segments):
            theta = lat * math.pi / segments
            sin_theta, cos_theta = math.sin(theta), math.cos(theta)
            for lon in range(points_per_ring):
                phi = lon * 2.0 * math.pi / points_per_ring
                position = Vector3(
                    radius * sin_theta * math.cos(phi),
                    radius * cos_theta,
                    radius * sin_theta * math.sin(phi),
                )
                normal = position.normalized()
                color = Vector3(
                    (normal.x + 1.0) * 0.5,
                    (normal.y + 1.0) * 0.5,
                    (normal.z + 1.0) * 0.5,
                )
                mesh.add_vertex(Vertex(position, normal, color))

        mesh.add_vertex(Vertex(Vector3(0, -radius, 0), _DOWN, _WHITE))

        rings = segments - 1
        for i in range(points_per_ring):
            nxt = (i + 1) % points_per_ring
            mesh.add_triangle(0, i + 1, nxt + 1)

        for ring in range(rings - 1):
            current = 1 + ring * points_per_ring
            below = 1 + (ring + 1) * points_per_ring
            for i in range(points_per_ring):
                nxt = (i + 1) % points_per_ring
                mesh.add_triangle(current + i, below + i, current + nxt)
                mesh.add_triangle(current + nxt, below + i, below + nxt)

        last_ring = 1 + (rings - 1) * points_per_ring
        bottom = mesh.vertex_count - 1
        for i in range(points_per_ring):
            nxt = (i + 1) % points_per_ring
            mesh.add_triangle(last_ring + nxt, last_ring + i, bottom)
        return mesh

    @classmethod
    def create_plane(cls, width: float = 1.0, height: float = 1.0) -> Mesh:
        """Flat white quad in the XZ plane, centred on the origin."""
        mesh = cls()
        hw, hh = width * 0.5, height * 0.5
        for x, z in ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh)):
            mesh.add_vertex(Vertex(Vector3(x, 0, z), _UP, _WHITE))
        mesh.add_triangle(0, 1, 2)
        mesh.add_triangle(0, 2, 3)
        return mesh

    @classmethod
    def create_triangle(cls, size: float = 1.0) -> Mesh:
        """Single triangle in the XZ plane with red, green and blue corners."""
        mesh = cls()
        h = size * 0.5
        mesh.add_vertex(Vertex(Vector3(0, 0, h), _UP, Vector3(1, 0, 0)))
        mesh.add_vertex(Vertex(Vector3(-h, 0, -h), _UP, Vector3(0, 1, 0)))
        mesh.add_vertex(Vertex(Vector3(h, 0, -h), _UP, Vector3(0, 0, 1)))
        mesh.add_triangle(0, 1, 2)
        return mesh

    def calculate_normals(self) -> None:
        """Replace vertex normals with the normalised sum of adjacent face normals."""
        sums = [Vector3.zero() for _ in self._vertices]
        for i0, i1, i2 in self.triangles():
            p0 = self._vertices[i0].position
            edge1 = self._vertices[i1].position - p0
            edge2 = self._vertices[i2].position - p0
            face_normal = edge1.cross(edge2).normalized()
            for index in (i0, i1, i2):
                sums[index] = sums[index] + face_normal
        self._vertices = [
            replace(vertex, normal=total.normalized())
            for vertex, total in zip(self._vertices, sums)
        ]

    def clear(self) -> None:
        self._vertices.clear()
        self._indices.clear()