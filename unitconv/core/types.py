"""unitconv.core.types

Минимальные типы данных: домен, описание единицы, величина.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

import numpy as np
from numpy.typing import NDArray


Domain = Literal["mass", "energy", "length", "time"]

# Fixed classification order. Sets are disjoint, so the order never changes the result.
DOMAINS: tuple[Domain, ...] = ("mass", "energy", "length", "time")

Value = Union[float, NDArray[np.float64]]


@dataclass(frozen=True, slots=True)
class UnitSpec:
    """Единица домена: канонический токен + допустимые синонимы (lowercase)."""

    symbol: str
    domain: Domain
    aliases: tuple[str, ...] = ()
    description: str = ""

    @property
    def tokens(self) -> tuple[str, ...]:
        return (self.symbol, *self.aliases)


@dataclass(frozen=True, slots=True)
class Quantity:
    value: Value
    unit: str

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"
