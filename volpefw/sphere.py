"""UV sphere mesh generation and a positioned, scaled sphere instance."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Sequence

import numpy as np

from .common import PI, scaling, translation

BASE_RADIUS = 0.5
SPHERE_PROGRAM = ("data/PointLights.vsh", "data/PointLights.fsh")
_MAX_INDEXABLE_VERTICES = 1 << 16


@dataclass(frozen=True)
class SphereVertex:
    """Position, normal and texture coordinate of one sphere vertex."""

    position: tuple
    normal: tuple
    uv: tuple


@dataclass
class SphereMesh:
    """Vertices and triangle-list indices of a sphere."""

    vertices: list = field(default_factory=list)
    indices: list = field(default_factory=list)

    @property
    def num_indices(self) -> int:
        return len(self.indices)


def generate_sphere_mesh(sector_count: int, stack_count: int, length_inv: float) -> SphereMesh:
    """Build a sphere of radius BASE_RADIUS from stacks (pole to pole) and sectors.

    Normals are the positions multiplied by length_inv.
    """
    if sector_count < 1 or stack_count < 1:
        raise ValueError("sector_count and stack_count must be at least 1")
    if (sector_count + 1) * (stack_count + 1) > _MAX_INDEXABLE_VERTICES:
        raise ValueError("too many vertices for 16-bit indices")

    sector_step = 2 * PI / sector_count
    stack_step = PI / stack_count
    vertices = []
    for i in range(stack_count + 1):
        stack_angle = PI / 2 - i * stack_step
        xy = BASE_RADIUS * math.cos(stack_angle)
        z = BASE_RADIUS * math.sin(stack_angle)
        for j in range(sector_count + 1):
            sector_angle = j * sector_step
            x = xy * math.cos(sector_angle)
            y = xy * math.sin(sector_angle)
            vertices.append(
                SphereVertex(
                    position=(x, y, z),
                    normal=(x * length_inv, y * length_inv, z * length_inv),
                    uv=(j / sector_count, i / stack_count),
                )
            )

    indices = []
    for i in range(stack_count):
        k1 = i * (sector_count + 1)
        k2 = k1 + sector_count + 1
        for _ in range(sector_count):
            if i != 0:
                indices.extend((k1, k2, k1 + 1))
            if i != stack_count - 1:
                indices.extend((k1 + 1, k2, k2 + 1))
            k1 += 1
            k2 += 1

    return SphereMesh(vertices, indices)


class Sphere:
    """A sphere instance sharing one mesh with every other sphere."""

    _shared_mesh: ClassVar[Optional[SphereMesh]] = None

    def __init__(self, radius: float = 5.0) -> None:
        self.position = np.zeros(3)
        self.color = np.ones(3)
        self.program = SPHERE_PROGRAM
        self.depth_test = True
        self.depth_write = True
        self.set_radius(radius)
        if Sphere._shared_mesh is None:
            Sphere._shared_mesh = generate_sphere_mesh(20, 20, 1.0 / self.radius)

    @property
    def mesh(self) -> SphereMesh:
        """The mesh shared by all spheres."""
        return Sphere._shared_mesh

    def set_radius(self, radius: float) -> None:
        """Set the radius and the matching scale of the base mesh."""
        self.radius = radius
        factor = radius / BASE_RADIUS
        self.scale = np.array([factor, factor, factor])

    def world_matrix(self, parent: Optional[Sequence[Sequence[float]]] = None) -> np.ndarray:
        """The parent matrix followed by this sphere's translation and scale."""
        base = np.identity(4) if parent is None else np.asarray(parent, dtype=float)
        return base @ translation(self.position) @ scaling(self.scale)