"""Per-vertex diffuse lighting and mesh outline geometry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from orbitgl.mesh import Mesh
from orbitgl.vector3 import Vector3

AMBIENT_FACTOR = 0.1


def _clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))


@dataclass(frozen=True)
class Light:
    """A point light with a colour and an intensity."""

    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 10.0, 0.0))
    color: Vector3 = field(default_factory=Vector3.one)
    intensity: float = 1.0


def calculate_lighting(
    lights: Iterable[Light], position: Vector3, normal: Vector3, color: Vector3
) -> Vector3:
    """Shade ``color`` at a surface point with ambient plus Lambertian diffuse light.

    Each channel of the result is clamped to ``[0, 1]``.
    """
    final = color * AMBIENT_FACTOR
    for light in lights:
        light_dir = (light.position - position).normalized()
        strength = max(0.0, normal.dot(light_dir))
        diffuse = light.color * (strength * light.intensity)
        final = final + color * diffuse
    return Vector3(*(_clamp_unit(channel) for channel in final))


def outline_segments(mesh: Mesh) -> Iterator[tuple[Vector3, Vector3]]:
    """Yield the three edges of every triangle as pairs of vertex positions."""
    vertices = mesh.vertices
    for i0, i1, i2 in mesh.triangles():
        p0 = vertices[i0].position
        p1 = vertices[i1].position
        p2 = vertices[i2].position
        yield (p0, p1)
        yield (p1, p2)
        yield (p2, p0)