"""Tests for the matplotlib drawing helpers."""

import numpy as np
import pytest
from matplotlib.figure import Figure

from cg2d.errors import UninitializedStateError
from cg2d.geom import Pt
from cg2d.plot import draw_tetrahedron, draw_triangle
from cg2d.shapes import Tetrahedron, Triangle


@pytest.fixture
def ax():
    return Figure().add_subplot(111)


def test_triangle_outline_is_closed(ax):
    t = Triangle()
    t.set_coordinates(Pt(0, 0), Pt(3, 0), Pt(0, 4))
    line = draw_triangle(ax, t)
    np.testing.assert_allclose(line.get_xdata(), [0, 3, 0, 0])
    np.testing.assert_allclose(line.get_ydata(), [0, 0, 4, 0])
    assert [a.get_text() for a in ax.texts] == ["1", "2", "3"]


def test_triangle_limits_cover_vertices(ax):
    t = Triangle()
    t.set_coordinates(Pt(0, 0), Pt(3, 0), Pt(0, 4))
    draw_triangle(ax, t, label_vertices=False)
    x0, x1 = ax.get_xlim()
    y0, y1 = ax.get_ylim()
    assert x0 < 0 and x1 > 3
    assert y0 < 0 and y1 > 4
    assert not ax.texts


def test_tetrahedron(ax):
    t = Tetrahedron()
    t.set_coordinates(Pt(0, 0), Pt(3, 0), Pt(0, 4), Pt(5, 5), 5.0)
    draw_tetrahedron(ax, t)
    # outline + three apex edges + apex marker
    assert len(ax.lines) == 5
    assert "10.00" in ax.get_title()
    x0, x1 = ax.get_xlim()
    assert x1 > 5


def test_uninitialized_shapes(ax):
    with pytest.raises(UninitializedStateError):
        draw_triangle(ax, Triangle())
    with pytest.raises(UninitializedStateError):
        draw_tetrahedron(ax, Tetrahedron())
