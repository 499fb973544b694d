from __future__ import annotations
from dataclasses import dataclass
from math import hypot
from typing import Tuple, Union

EPS = 1e-10  # єдиний епс бібліотеки, не налаштовується

@dataclass(frozen=True)
class Pt:
    x: float = 0
    y: float = 0

    def __iter__(self):
        yield self.x; yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

PointLike = Union[Pt, Tuple[float, float]]

def as_point(p: PointLike) -> Pt:
    """Pt або пара (x, y) -> Pt."""
    if isinstance(p, Pt):
        return p
    x, y = p
    return Pt(x, y)

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def dist(a: Pt, b: Pt) -> float:
    d = sub(b, a)
    return hypot(d.x, d.y)
