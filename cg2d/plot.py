# cg2d/plot.py
from __future__ import annotations
from typing import Sequence

import numpy as np

from .config import format_volume
from .geom import Pt
from .shapes import Tetrahedron, Triangle


def _closed_outline(vertices: Sequence[Pt]) -> np.ndarray:
    """Масив (n+1, 2): вершини + перша ще раз, щоб замкнути контур."""
    arr = np.array([(p.x, p.y) for p in vertices], dtype=float)
    return np.vstack([arr, arr[:1]])


def _equal_limits(ax, pts: np.ndarray, pad: float = 0.1) -> None:
    """Однакові масштаби по осях з невеликим запасом."""
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    span = float(max(hi - lo))
    if span == 0:
        span = 1.0
    mid = 0.5 * (lo + hi)
    half = 0.5 * span * (1.0 + pad)
    ax.set_xlim(mid[0] - half, mid[0] + half)
    ax.set_ylim(mid[1] - half, mid[1] + half)
    ax.set_aspect("equal", adjustable="box")


def draw_triangle(ax, triangle: Triangle, label_vertices: bool = True):
    """
    Намалювати контур трикутника на matplotlib Axes.
    Повертає Line2D контуру.
    """
    triangle.require_initialized()
    outline = _closed_outline(triangle.vertices())
    (line,) = ax.plot(outline[:, 0], outline[:, 1], "-o", linewidth=1.5)
    if label_vertices:
        for i, (x, y) in enumerate(outline[:-1], start=1):
            ax.annotate(str(i), (x, y), textcoords="offset points", xytext=(4, 4))
    _equal_limits(ax, outline)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    return line


def draw_tetrahedron(ax, tetra: Tetrahedron):
    """
    Основа + apex (проєкція на площину основи) + штрихові ребра до apex.
    Повертає Line2D контуру основи.
    """
    tetra.require_initialized()
    line = draw_triangle(ax, tetra.base)
    apex = np.array([tetra.apex.x, tetra.apex.y], dtype=float)
    for v in tetra.vertices():
        ax.plot([v.x, apex[0]], [v.y, apex[1]], "--", linewidth=0.8, color="gray")
    ax.plot([apex[0]], [apex[1]], "s", color="red")
    ax.annotate("apex", tuple(apex), textcoords="offset points", xytext=(4, -10))

    pts = np.vstack([_closed_outline(tetra.vertices()), apex])
    _equal_limits(ax, pts)
    ax.set_title(f"h = {tetra.height}, V = {format_volume(tetra.calculate_volume())}")
    return line
