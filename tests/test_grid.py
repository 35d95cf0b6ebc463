import pytest

from volpefw.common import Color4
from volpefw.grid import (
    AXIS_EXTENT,
    X_AXIS_COLOR,
    Y_AXIS_COLOR,
    Z_AXIS_COLOR,
    Grid2D,
    Grid3D,
    GridVertex,
    axes_2d_vertices,
    axes_3d_vertices,
    grid_2d_vertices,
    grid_3d_vertices,
)


@pytest.mark.parametrize("n", [0, 1, 3, 10])
def test_grid_2d_vertex_count(n):
    assert len(grid_2d_vertices(n)) == (n * 2 * 2 + 2) * 2


@pytest.mark.parametrize("n", [0, 2, 5])
def test_grid_3d_vertex_count(n):
    assert len(grid_3d_vertices(n, 0.5)) == (n * 2 * 2 + 2) * 2


def test_grid_2d_first_line_is_y_axis_line():
    verts = grid_2d_vertices(4)
    assert verts[0].position == (0.0, -4.0)
    assert verts[1].position == (0.0, 4.0)


def test_grid_2d_line_order():
    verts = grid_2d_vertices(2)
    xs = [verts[i].position[0] for i in range(0, 10, 2)]
    assert xs == [0.0, 1.0, 2.0, -1.0, -2.0]
    ys = [verts[i].position[1] for i in range(10, 20, 2)]
    assert ys == [0.0, 1.0, 2.0, -1.0, -2.0]


def test_grid_2d_all_white_and_within_extent():
    n = 3
    for v in grid_2d_vertices(n):
        assert v.color == (255, 255, 255, 255)
        assert all(abs(c) <= n for c in v.position)
        assert len(v.position) == 2


def test_grid_2d_lines_are_axis_aligned():
    verts = grid_2d_vertices(3)
    for a, b in zip(verts[0::2], verts[1::2]):
        assert a.position[0] == b.position[0] or a.position[1] == b.position[1]


def test_grid_3d_flat_on_xz_plane_with_spacing():
    n, spacing = 3, 2.5
    verts = grid_3d_vertices(n, spacing)
    assert all(v.position[1] == 0.0 for v in verts)
    extent = n * spacing
    assert max(v.position[2] for v in verts) == pytest.approx(extent)
    assert min(v.position[0] for v in verts) == pytest.approx(-extent)


def test_grid_3d_spacing_between_lines():
    verts = grid_3d_vertices(2, 1.5)
    xs = [verts[i].position[0] for i in range(0, 10, 2)]
    assert xs == pytest.approx([0.0, 1.5, 3.0, -1.5, -3.0])
    assert verts[0].position[2] == pytest.approx(-3.0)
    assert verts[1].position[2] == pytest.approx(3.0)


def test_grid_3d_default_spacing_matches_2d_layout():
    flat = [v.position for v in grid_2d_vertices(3)]
    spatial = [(v.position[0], v.position[2]) for v in grid_3d_vertices(3)]
    assert flat == spatial


def test_axes_2d_vertices():
    verts = axes_2d_vertices()
    assert verts[0] == GridVertex((-AXIS_EXTENT, 0.0), X_AXIS_COLOR)
    assert verts[3] == GridVertex((0.0, AXIS_EXTENT), Y_AXIS_COLOR)
    assert X_AXIS_COLOR == (255, 73, 27, 255)
    assert len(verts) == 4


def test_axes_3d_vertices():
    verts = axes_3d_vertices()
    assert len(verts) == 6
    assert verts[4] == GridVertex((0.0, 0.0, -8.0), Z_AXIS_COLOR)
    assert Y_AXIS_COLOR == (87, 151, 81, 255)
    assert Z_AXIS_COLOR == (0, 0, 255, 255)


def test_grid2d_show_hide_axes():
    grid = Grid2D(5)
    assert grid.axes_visible is True
    grid.hide_axes()
    assert grid.axes_visible is False
    grid.show_axes()
    assert grid.axes_visible is True


def test_grid2d_contents():
    grid = Grid2D(5)
    assert grid.num_verts == len(grid.vertices) == 44
    assert grid.color == Color4(0.4, 0.4, 0.4, 1.0)
    assert grid.axes_vertices == axes_2d_vertices()


def test_grid3d_contents_and_toggle():
    grid = Grid3D(4, 2.0)
    assert grid.vertices == grid_3d_vertices(4, 2.0)
    assert grid.num_verts == len(grid.vertices)
    assert grid.axes_depth_test is False
    assert grid.grid_depth_test is True
    grid.hide_axes()
    assert grid.axes_visible is False
    grid.show_axes()
    assert grid.axes_visible is True


def test_grid3d_default_spacing():
    assert Grid3D(2).vertices == grid_3d_vertices(2, 1.0)