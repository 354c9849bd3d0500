"""Энергия. Каноническая единица: атомная единица энергии (Hartree).

Два типа правил:
- линейные единицы: au = value * prefix / per_au, где per_au — сохранённая
  константа "сколько единиц в 1 au" (eV, J, Ry, cm^-1, Hz);
- температуры через E = kT: K делится на au2K, C сначала сдвигается
  на +273.15, F сначала переводится в C как (F - 32) * 5/9.

Обратный путь зеркален прямому, поэтому C -> F -> C возвращает исходное
значение с точностью до округления float.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple
import logging

from unitconv.config.constants import CONSTANTS
from unitconv.core.types import UnitSpec, Value
from unitconv.core.units import FREQUENCY_PREFIXES, HARTREE
from unitconv.core.validation import as_value
from unitconv.errors import UnsupportedUnitError

logger = logging.getLogger(__name__)

CANONICAL = "au"

UNITS: tuple[UnitSpec, ...] = (
    UnitSpec("au", "energy", aliases=("hartree", "hartrees", "ha", "eh"), description="hartree (atomic unit)"),
    UnitSpec("ev", "energy", aliases=("electronvolt", "electronvolts"), description="electronvolt"),
    UnitSpec("j", "energy", aliases=("joule", "joules"), description="joule"),
    UnitSpec("ry", "energy", aliases=("ryd", "rydberg", "rydbergs"), description="rydberg"),
    UnitSpec("cm-1", "energy", aliases=("cm^-1", "1/cm", "invcm", "wavenumber", "wavenumbers", "wn"), description="wavenumber"),
    *(
        UnitSpec(f"{prefix}hz", "energy", description=f"{scale:g} Hz")
        for prefix, scale in FREQUENCY_PREFIXES.items()
    ),
    UnitSpec("k", "energy", aliases=("kelvin",), description="kelvin (E = kT)"),
    UnitSpec("c", "energy", aliases=("celsius",), description="degree celsius (E = kT)"),
    UnitSpec("f", "energy", aliases=("fahrenheit",), description="degree fahrenheit (E = kT)"),
)

# symbol -> (prefix scale, units per au)
LINEAR: Mapping[str, Tuple[float, float]] = MappingProxyType(
    {
        "au": (1.0, HARTREE),
        "ev": (1.0, CONSTANTS.au2eV),
        "j": (1.0, CONSTANTS.au2J),
        "ry": (1.0, CONSTANTS.au2Ryd),
        "cm-1": (1.0, CONSTANTS.au2invcm),
        **{f"{prefix}hz": (scale, CONSTANTS.au2Hz) for prefix, scale in FREQUENCY_PREFIXES.items()},
    }
)

TEMPERATURES: tuple[str, ...] = ("k", "c", "f")


def celsius_to_fahrenheit(value: Value) -> Value:
    return as_value(value) * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(value: Value) -> Value:
    return (as_value(value) - 32.0) * 5.0 / 9.0


def _kelvin(value: Value, symbol: str) -> Value:
    if symbol == "k":
        return value
    if symbol == "c":
        return value + CONSTANTS.C2K
    if symbol == "f":
        return fahrenheit_to_celsius(value) + CONSTANTS.C2K
    raise UnsupportedUnitError(symbol, "energy")


def _from_kelvin(value: Value, symbol: str) -> Value:
    if symbol == "k":
        return value
    if symbol == "c":
        return value - CONSTANTS.C2K
    if symbol == "f":
        return celsius_to_fahrenheit(value - CONSTANTS.C2K)
    raise UnsupportedUnitError(symbol, "energy")


def to_canonical(value: Value, symbol: str) -> Value:
    x = as_value(value)
    if symbol in LINEAR:
        prefix, per_au = LINEAR[symbol]
        out = x * prefix / per_au
    elif symbol in TEMPERATURES:
        out = _kelvin(x, symbol) / CONSTANTS.au2K
    else:
        raise UnsupportedUnitError(symbol, "energy")
    logger.debug("energy: %s %s -> %s %s", value, symbol, out, CANONICAL)
    return out


def from_canonical(value: Value, symbol: str) -> Value:
    x = as_value(value)
    if symbol in LINEAR:
        prefix, per_au = LINEAR[symbol]
        out = x * per_au / prefix
    elif symbol in TEMPERATURES:
        out = _from_kelvin(x * CONSTANTS.au2K, symbol)
    else:
        raise UnsupportedUnitError(symbol, "energy")
    logger.debug("energy: %s %s -> %s %s", value, CANONICAL, out, symbol)
    return out
