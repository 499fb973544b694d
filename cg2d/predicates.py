# cg2d/predicates.py
from __future__ import annotations
from math import fabs, sqrt

from .geom import Pt, dist, EPS


def shoelace_area(p1: Pt, p2: Pt, p3: Pt) -> float:
    """Площа трикутника через формулу шнурків (завжди >= 0)."""
    return fabs(
        p1.x * (p2.y - p3.y) +
        p2.x * (p3.y - p1.y) +
        p3.x * (p1.y - p2.y)
    ) / 2.0

def is_valid_triangle(p1: Pt, p2: Pt, p3: Pt, eps: float = EPS) -> bool:
    return shoelace_area(p1, p2, p3) > eps

def heron_area(p1: Pt, p2: Pt, p3: Pt) -> float:
    """
    Формула Герона: a=|p1p2|, b=|p2p3|, c=|p3p1|, s=(a+b+c)/2.
    Підкореневий вираз обрізаємо знизу нулем: для майже вироджених
    трикутників округлення може дати мізерне від'ємне число.
    """
    a = dist(p1, p2)
    b = dist(p2, p3)
    c = dist(p3, p1)
    s = (a + b + c) / 2.0
    return sqrt(max(0.0, s * (s - a) * (s - b) * (s - c)))

def in_base_plane(v0: Pt, v1: Pt, v2: Pt, p: Pt, eps: float = EPS) -> bool:
    """
    Чи лежить p «у площині» основи v0,v1,v2.
    Вся геометрія 2D, тож це тест «точка в трикутнику» через розклад площ:
    A == A1 + A2 + A3 з точністю eps (межа трикутника теж рахується).
    """
    base = shoelace_area(v0, v1, v2)
    a1 = shoelace_area(p, v1, v2)
    a2 = shoelace_area(v0, p, v2)
    a3 = shoelace_area(v0, v1, p)
    return fabs(base - (a1 + a2 + a3)) < eps
