"""Канонические конвертеры по доменам.

Каждый домен даёт пару функций:
- `to_canonical(value, symbol)`: единица -> каноническая единица домена;
- `from_canonical(value, symbol)`: каноническая единица -> единица.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from unitconv.core.types import Domain, UnitSpec, Value
from unitconv.domains import energy, length, mass, time

Converter = Callable[[Value, str], Value]


@dataclass(frozen=True)
class DomainConverter:
    domain: Domain
    canonical: str
    units: tuple[UnitSpec, ...]
    to_canonical: Converter
    from_canonical: Converter

    def convert(self, value: Value, from_symbol: str, to_symbol: str) -> Value:
        return self.from_canonical(self.to_canonical(value, from_symbol), to_symbol)


CONVERTERS: Mapping[Domain, DomainConverter] = MappingProxyType(
    {
        "mass": DomainConverter("mass", mass.TABLE.canonical, mass.UNITS, mass.to_canonical, mass.from_canonical),
        "energy": DomainConverter("energy", energy.CANONICAL, energy.UNITS, energy.to_canonical, energy.from_canonical),
        "length": DomainConverter("length", length.TABLE.canonical, length.UNITS, length.to_canonical, length.from_canonical),
        "time": DomainConverter("time", time.TABLE.canonical, time.UNITS, time.to_canonical, time.from_canonical),
    }
)

__all__ = [
    "Converter",
    "DomainConverter",
    "CONVERTERS",
]
