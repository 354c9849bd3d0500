"""Мост длина <-> энергия через фотонное соотношение.

Маршрут всегда идёт через волновые числа (cm^-1):
- длина -> m -> cm (x100) -> 1/x = cm^-1 -> / au2invcm = au -> энергия;
- энергия -> au -> * au2invcm = cm^-1 -> 1/x = cm -> m (/100) -> длина.

Ноль на шаге инверсии — ошибка, а не inf/NaN.
"""

from __future__ import annotations

import logging

import numpy as np

from unitconv.config.constants import CONSTANTS
from unitconv.core.types import Domain, Value
from unitconv.core.validation import as_value, has_zero
from unitconv.domains import CONVERTERS
from unitconv.errors import NonFiniteResultError, UnsupportedCrossDomainError, ZeroBridgeValueError

logger = logging.getLogger(__name__)

CM_PER_M: float = 100.0


def _invert(x: Value, kind: str) -> Value:
    if has_zero(x):
        raise ZeroBridgeValueError(kind)
    with np.errstate(over="ignore", divide="ignore"):
        out = np.reciprocal(x)
    if not np.all(np.isfinite(out)):
        raise NonFiniteResultError(x, f"inverse of {kind}")
    return as_value(out)


def length_to_energy(value: Value, from_symbol: str, to_symbol: str) -> Value:
    meters = CONVERTERS["length"].to_canonical(value, from_symbol)
    wavenumber = _invert(meters * CM_PER_M, "length")
    au = wavenumber / CONSTANTS.au2invcm
    logger.debug("bridge: %s m -> %s cm^-1 -> %s au", meters, wavenumber, au)
    return CONVERTERS["energy"].from_canonical(au, to_symbol)


def energy_to_length(value: Value, from_symbol: str, to_symbol: str) -> Value:
    au = CONVERTERS["energy"].to_canonical(value, from_symbol)
    wavenumber = au * CONSTANTS.au2invcm
    meters = _invert(wavenumber, "energy") / CM_PER_M
    logger.debug("bridge: %s au -> %s cm^-1 -> %s m", au, wavenumber, meters)
    return CONVERTERS["length"].from_canonical(meters, to_symbol)


def bridge(value: Value, src: Domain, dst: Domain, from_symbol: str, to_symbol: str) -> Value:
    if src == "length" and dst == "energy":
        return length_to_energy(value, from_symbol, to_symbol)
    if src == "energy" and dst == "length":
        return energy_to_length(value, from_symbol, to_symbol)
    raise UnsupportedCrossDomainError(src, dst)
