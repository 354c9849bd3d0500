"""unitconv.core.units

Базовые единицы каждого домена и метрические приставки.

Принцип: каждая таблица пересчёта хранит множитель "единица -> базовая единица"
(например, 1 nm = 1e-9 * METER).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Canonical units (conceptual multipliers)
KILOGRAM: float = 1.0
METER: float = 1.0
SECOND: float = 1.0
HARTREE: float = 1.0

# Metric prefixes, yocto .. kilo.
# "u", "μ" (greek mu) and "µ" (micro sign) all mean micro.
METRIC_PREFIXES: Mapping[str, float] = MappingProxyType(
    {
        "y": 1e-24,
        "z": 1e-21,
        "a": 1e-18,
        "f": 1e-15,
        "p": 1e-12,
        "n": 1e-9,
        "u": 1e-6,
        "μ": 1e-6,
        "µ": 1e-6,
        "m": 1e-3,
        "c": 1e-2,
        "d": 1e-1,
        "": 1.0,
        "k": 1e3,
    }
)

MICRO_ALIASES: tuple[str, ...] = ("μ", "µ")

# Frequency prefixes for hertz (applied before dividing by au2Hz)
FREQUENCY_PREFIXES: Mapping[str, float] = MappingProxyType(
    {
        "": 1.0,
        "k": 1e3,
        "m": 1e6,
        "g": 1e9,
        "t": 1e12,
    }
)
