# cg2d/demo.py
from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO

from .config import default_log_level, format_area, format_volume, parse_log_level
from .errors import ErrorKind, GeometryError
from .geom import Pt
from .logging_config import setup_logging
from .shapes import Tetrahedron, Triangle

logger = logging.getLogger(__name__)


def expect_error(kind: ErrorKind, action: Callable[[], object]) -> Optional[GeometryError]:
    """
    Виконати action і повернути помилку очікуваного типу (або None, якщо
    помилки не було). Помилка іншого типу летить далі.
    """
    try:
        action()
    except GeometryError as e:
        if e.kind is not kind:
            raise
        return e
    return None


def _report(out: TextIO, err: Optional[GeometryError], prefix: str = "Expected error", suffix: str = "") -> None:
    if err is None:
        print(f"{prefix}: none raised{suffix}", file=out)
    else:
        print(f"{prefix}: {err}{suffix}", file=out)


def _triangle_part(out: TextIO) -> None:
    print("Testing Triangle class:", file=out)
    print("----------------------", file=out)

    triangle = Triangle()
    _report(out, expect_error(ErrorKind.UNINITIALIZED, triangle.calculate_area))

    triangle.set_coordinates(Pt(0, 0), Pt(3, 0), Pt(0, 4))
    triangle.display_vertices(out)
    print(f"Triangle area: {format_area(triangle.calculate_area())}\n", file=out)

    invalid = Triangle()
    err = expect_error(
        ErrorKind.INVALID_GEOMETRY,
        lambda: invalid.set_coordinates(Pt(0, 0), Pt(1, 1), Pt(2, 2)),
    )
    _report(out, err, suffix="\n")


def _tetrahedron_part(out: TextIO) -> None:
    print("Testing Tetrahedron class:", file=out)
    print("-------------------------", file=out)

    base = (Pt(0, 0), Pt(3, 0), Pt(0, 4))

    tetra = Tetrahedron()
    _report(out, expect_error(
        ErrorKind.INVALID_PARAMETER,
        lambda: tetra.set_coordinates(*base, Pt(1, 1), -5.0),
    ))

    # (1.5, 2) лежить на гіпотенузі основи
    guarded = Tetrahedron(check_apex_plane=True)
    _report(out, expect_error(
        ErrorKind.INVALID_GEOMETRY,
        lambda: guarded.set_coordinates(*base, Pt(1.5, 2), 5.0),
    ))

    tetra.set_coordinates(*base, Pt(1, 1), 5.0)
    tetra.display_vertices(out)
    print(f"Tetrahedron volume: {format_volume(tetra.calculate_volume())}", file=out)

    default = Tetrahedron()
    _report(
        out,
        expect_error(ErrorKind.UNINITIALIZED, lambda: default.display_vertices(out)),
        prefix="\nExpected error with default constructor",
    )


def run_demo(out: Optional[TextIO] = None) -> int:
    """Демонстраційний сценарій. Повертає код виходу (0 або 1)."""
    out = out if out is not None else sys.stdout
    try:
        _triangle_part(out)
        _tetrahedron_part(out)
    except Exception as e:
        # зовнішній рівень: будь-яку неочікувану помилку звітуємо і виходимо з 1
        logger.exception("Demo aborted")
        print(f"Unexpected error occurred: {e}", file=out)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="cg2d-demo", description="Triangle / tetrahedron demo")
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level name or number (default: $CG2D_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    args = parser.parse_args(argv)

    level = default_log_level()
    if args.log_level:
        level = parse_log_level(args.log_level)
        if level is None:
            parser.error(f"unknown log level: {args.log_level}")
    setup_logging(level, args.log_file)
    return run_demo()


if __name__ == "__main__":
    sys.exit(main())
