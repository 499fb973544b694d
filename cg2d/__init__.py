"""
cg2d: трикутник і тетраедр на площині: площа, об'єм, перевірка геометрії.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, dist
from cg2d.predicates import shoelace_area, is_valid_triangle, heron_area, in_base_plane
from cg2d.errors import (
    ErrorKind,
    GeometryError,
    InvalidGeometryError,
    InvalidParameterError,
    UninitializedStateError,
)
from cg2d.shapes import Triangle, Tetrahedron

__all__ = [
    "Pt", "EPS", "dist",
    "shoelace_area", "is_valid_triangle", "heron_area", "in_base_plane",
    "ErrorKind", "GeometryError", "InvalidGeometryError",
    "InvalidParameterError", "UninitializedStateError",
    "Triangle", "Tetrahedron", "__version__",
]
