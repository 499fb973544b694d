"""
Глобальні константи для демо, графіків і GUI.

Епс тут навмисно відсутній: він фіксований і живе в cg2d.geom.EPS.

    AREA_DECIMALS, VOLUME_DECIMALS: скільки знаків після коми друкувати.
    AREA_UNITS, VOLUME_UNITS: одиниці виміру в рядках виводу.
    LOG_LEVEL_ENV: змінна оточення для default_log_level().
"""
import logging
import os
from typing import Optional

AREA_DECIMALS: int = 2
VOLUME_DECIMALS: int = 2
AREA_UNITS: str = "square units"
VOLUME_UNITS: str = "cubic units"

LOG_LEVEL_ENV: str = "CG2D_LOG_LEVEL"
DEFAULT_LOG_LEVEL: int = logging.WARNING


def parse_log_level(raw: str) -> Optional[int]:
    """
    Рівень логування з назви ("debug", "INFO") або числа ("15").
    None, якщо рядок не розпізнано.
    """
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else None


def default_log_level() -> int:
    """Рівень з CG2D_LOG_LEVEL; WARNING, якщо змінна порожня або невідома."""
    level = parse_log_level(os.environ.get(LOG_LEVEL_ENV, ""))
    return DEFAULT_LOG_LEVEL if level is None else level


def format_area(value: float) -> str:
    return f"{value:.{AREA_DECIMALS}f} {AREA_UNITS}"


def format_volume(value: float) -> str:
    return f"{value:.{VOLUME_DECIMALS}f} {VOLUME_UNITS}"
