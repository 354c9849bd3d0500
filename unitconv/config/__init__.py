"""Конфиги конвертера.

Всё конфигурирование задаётся frozen-dataclass'ами с дефолтами,
которые создаются один раз при импорте:
- физические константы в `unitconv.config.constants`;
- формат вывода в `unitconv.config.settings`.
"""

from __future__ import annotations

from .constants import CONSTANTS, PhysicalConstants
from .settings import DEFAULT_OUTPUT_SETTINGS, OutputSettings

__all__ = [
    "PhysicalConstants",
    "CONSTANTS",
    "OutputSettings",
    "DEFAULT_OUTPUT_SETTINGS",
]
