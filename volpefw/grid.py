"""Line grids and coloured axes for 2D and 3D scenes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from .common import Color4

AXIS_EXTENT = 8.0
X_AXIS_COLOR = (255, 73, 27, 255)
Y_AXIS_COLOR = (87, 151, 81, 255)
Z_AXIS_COLOR = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
GRID_COLOR = Color4(0.4, 0.4, 0.4, 1.0)
AXES_COLOR = Color4(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class GridVertex:
    """A line vertex: a 2D or 3D position and an RGBA byte colour."""

    position: tuple
    color: tuple = WHITE


def _plane_lines(n: int, spacing: float) -> Iterator[tuple]:
    """Line endpoints (u, v) pairs: u-lines first, then v-lines."""
    extent = n * spacing
    offsets = [0.0]
    offsets += [x * spacing for x in range(1, n + 1)]
    offsets += [-x * spacing for x in range(1, n + 1)]
    for u in offsets:
        yield (u, -extent), (u, extent)
    for v in offsets:
        yield (-extent, v), (extent, v)


def _grid(n: int, spacing: float, place: Callable[[float, float], tuple]) -> list:
    return [
        GridVertex(place(*end))
        for line in _plane_lines(n, spacing)
        for end in line
    ]


def grid_2d_vertices(lines_per_half_space: int) -> list:
    """Vertices of a unit-spaced grid in the XY plane, two per line."""
    return _grid(lines_per_half_space, 1.0, lambda u, v: (float(u), float(v)))


def grid_3d_vertices(lines_per_half_space: int, grid_spacing: float = 1.0) -> list:
    """Vertices of a grid in the XZ plane, two per line."""
    return _grid(lines_per_half_space, grid_spacing, lambda u, v: (u, 0.0, v))


def axes_2d_vertices() -> list:
    """The X and Y axis lines with their colours."""
    e = AXIS_EXTENT
    return [
        GridVertex((-e, 0.0), X_AXIS_COLOR),
        GridVertex((e, 0.0), X_AXIS_COLOR),
        GridVertex((0.0, -e), Y_AXIS_COLOR),
        GridVertex((0.0, e), Y_AXIS_COLOR),
    ]


def axes_3d_vertices() -> list:
    """The X, Y and Z axis lines with their colours."""
    e = AXIS_EXTENT
    return [
        GridVertex((-e, 0.0, 0.0), X_AXIS_COLOR),
        GridVertex((e, 0.0, 0.0), X_AXIS_COLOR),
        GridVertex((0.0, -e, 0.0), Y_AXIS_COLOR),
        GridVertex((0.0, e, 0.0), Y_AXIS_COLOR),
        GridVertex((0.0, 0.0, -e), Z_AXIS_COLOR),
        GridVertex((0.0, 0.0, e), Z_AXIS_COLOR),
    ]


class Grid2D:
    """A 2D grid with optional axes; the grid is tinted by color."""

    def __init__(self, lines_per_half_space: int) -> None:
        self.color = GRID_COLOR
        self.axes_color = AXES_COLOR
        self.vertices = grid_2d_vertices(lines_per_half_space)
        self.axes_vertices = axes_2d_vertices()
        self.num_verts = len(self.vertices)
        self.axes_visible = True

    def show_axes(self) -> None:
        self.axes_visible = True

    def hide_axes(self) -> None:
        self.axes_visible = False


class Grid3D:
    """A grid on the XZ plane with optional axes drawn without depth test."""

    def __init__(self, lines_per_half_space: int, grid_spacing: float = 1.0) -> None:
        self.color = GRID_COLOR
        self.axes_color = AXES_COLOR
        self.grid_depth_test = True
        self.axes_depth_test = False
        self.vertices = grid_3d_vertices(lines_per_half_space, grid_spacing)
        self.axes_vertices = axes_3d_vertices()
        self.num_verts = len(self.vertices)
        self.axes_visible = True

    def show_axes(self) -> None:
        self.axes_visible = True

    def hide_axes(self) -> None:
        self.axes_visible = False