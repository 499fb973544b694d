# cg2d/errors.py
from enum import Enum


class ErrorKind(Enum):
    """
    Тип помилки: для коду, що розгалужується за типом, а не за класом винятку
    """
    INVALID_GEOMETRY = "invalid_geometry"
    INVALID_PARAMETER = "invalid_parameter"
    UNINITIALIZED = "uninitialized"


class GeometryError(Exception):
    """
    Базовий клас усіх помилок фігур cg2d
    """
    kind: ErrorKind


class InvalidGeometryError(GeometryError, ValueError):
    """
    Точки не пройшли перевірку (колінеарна основа, apex у площині основи)
    """
    kind = ErrorKind.INVALID_GEOMETRY


class InvalidParameterError(GeometryError, ValueError):
    """
    Скалярний параметр порушує передумову (висота <= 0)
    """
    kind = ErrorKind.INVALID_PARAMETER


class UninitializedStateError(GeometryError, RuntimeError):
    """
    Запит до фігури до успішного set_coordinates
    """
    kind = ErrorKind.UNINITIALIZED
