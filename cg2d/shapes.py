# cg2d/shapes.py
from __future__ import annotations
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from .errors import InvalidGeometryError, InvalidParameterError, UninitializedStateError
from .geom import Pt, PointLike, as_point
from .predicates import heron_area, in_base_plane, is_valid_triangle

logger = logging.getLogger(__name__)


class Triangle:
    """
    Трикутник на площині, заданий трьома вершинами.

    Стан: або порожній (вершин немає, initialized=False),
    або три неколінеарні вершини у переданому порядку (initialized=True).
    Проміжних станів назовні не видно.
    """

    def __init__(self):
        self._vertices: List[Pt] = []
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def vertices(self) -> Tuple[Pt, ...]:
        """Копія вершин (порожній кортеж, доки трикутник не задано)."""
        return tuple(self._vertices)

    def set_coordinates(self, p1: PointLike, p2: PointLike, p3: PointLike) -> None:
        a, b, c = as_point(p1), as_point(p2), as_point(p3)
        if not is_valid_triangle(a, b, c):
            logger.warning("Rejected collinear triangle %s, %s, %s", a, b, c)
            raise InvalidGeometryError(
                "The given points do not form a valid triangle (they may be collinear)"
            )
        # пишемо лише після успішної перевірки
        self._vertices = [a, b, c]
        self._initialized = True
        logger.debug("Triangle set to %s, %s, %s", a, b, c)

    def require_initialized(self) -> None:
        if not self._initialized:
            raise UninitializedStateError("Triangle coordinates have not been initialized")

    def display_vertices(self, out: Optional[TextIO] = None) -> None:
        self.require_initialized()
        out = out if out is not None else sys.stdout
        print("Triangle vertices:", file=out)
        for i, v in enumerate(self._vertices, start=1):
            print(f"Vertex {i}: {v}", file=out)

    def calculate_area(self) -> float:
        """Площа за формулою Герона."""
        self.require_initialized()
        return heron_area(*self._vertices)

    def __repr__(self) -> str:
        if not self._initialized:
            return "Triangle(<uninitialized>)"
        return "Triangle({}, {}, {})".format(*self._vertices)


class Tetrahedron:
    """
    Тетраедр = трикутна основа + вершина (apex) + висота.

    Основа: окремий Triangle (композиція, не наслідування), тож прапорці
    ініціалізації у основи і у тіла незалежні. Якщо перевірка apex провалилась
    уже після того, як основа прийняла нові вершини, основа лишається
    ініціалізованою, а тіло ні.

    check_apex_plane=True вмикає перевірку «apex не лежить у площині основи»
    (у 2D-моделі це тест «точка в трикутнику»). За замовчуванням вимкнено.
    """

    def __init__(self, check_apex_plane: bool = False):
        self.base = Triangle()
        self.apex: Pt = Pt(0, 0)
        self.height: float = 0.0
        self.check_apex_plane = check_apex_plane
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def vertices(self) -> Tuple[Pt, ...]:
        return self.base.vertices()

    def set_coordinates(
        self,
        p1: PointLike,
        p2: PointLike,
        p3: PointLike,
        p4: PointLike,
        height: float,
    ) -> None:
        if not height > 0:  # відсікає і NaN
            logger.warning("Rejected non-positive tetrahedron height %s", height)
            raise InvalidParameterError("Height must be positive")

        # 1) основа (InvalidGeometryError пропускаємо як є)
        self.base.set_coordinates(p1, p2, p3)

        # 2) apex
        apex = as_point(p4)
        if self.check_apex_plane and in_base_plane(*self.base.vertices(), apex):
            logger.warning("Rejected apex %s lying in the base plane", apex)
            # основа вже нова, старий apex до неї не відноситься
            self._initialized = False
            raise InvalidGeometryError(
                "The fourth vertex cannot lie in the same plane as the base triangle"
            )

        self.apex = apex
        self.height = float(height)
        self._initialized = True
        logger.debug("Tetrahedron set: base=%r apex=%s height=%s", self.base, apex, height)

    def require_initialized(self, message: str = "Tetrahedron coordinates have not been initialized") -> None:
        if not self._initialized:
            raise UninitializedStateError(message)

    def display_vertices(self, out: Optional[TextIO] = None) -> None:
        self.require_initialized()
        out = out if out is not None else sys.stdout
        print("Tetrahedron vertices:", file=out)
        for i, v in enumerate(self.base.vertices(), start=1):
            print(f"Base vertex {i}: {v}", file=out)
        print(f"Apex vertex: {self.apex}", file=out)
        print(f"Height: {self.height}", file=out)

    def calculate_area(self) -> float:
        """Площа основи (перевіряється лише ініціалізація основи)."""
        return self.base.calculate_area()

    def calculate_volume(self) -> float:
        """V = 1/3 * S_основи * h."""
        self.require_initialized("Cannot calculate volume: tetrahedron is not properly initialized")
        return (1.0 / 3.0) * self.base.calculate_area() * self.height
