"""Линейный домен: canonical = value * factor.

Используется массой, длиной и временем. Энергия нелинейна (температуры)
и живёт в `unitconv.domains.energy`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping
import logging

from unitconv.core.types import Domain, UnitSpec, Value
from unitconv.core.units import METRIC_PREFIXES, MICRO_ALIASES
from unitconv.core.validation import as_value
from unitconv.errors import UnsupportedUnitError

logger = logging.getLogger(__name__)


class LinearTable:
    """Таблица множителей "единица -> каноническая единица" одного домена."""

    def __init__(
        self,
        *,
        domain: Domain,
        canonical: str,
        factors: Mapping[str, float],
        specs: Iterable[UnitSpec],
    ) -> None:
        self.domain: Domain = domain
        self.canonical = canonical
        self.factors: Mapping[str, float] = MappingProxyType(dict(factors))
        self.specs: tuple[UnitSpec, ...] = tuple(specs)

        if self.factors.get(canonical) != 1.0:
            raise ValueError(f"{domain}: canonical unit {canonical!r} must have factor 1.0")
        for spec in self.specs:
            if spec.domain != domain:
                raise ValueError(f"{spec.symbol}: declared in {domain} table but has domain={spec.domain}")
            if spec.symbol not in self.factors:
                raise ValueError(f"{domain}: no factor for declared unit {spec.symbol!r}")

    def factor(self, symbol: str) -> float:
        try:
            return self.factors[symbol]
        except KeyError as e:
            raise UnsupportedUnitError(symbol, self.domain) from e

    def to_canonical(self, value: Value, symbol: str) -> Value:
        f = self.factor(symbol)
        out = as_value(value) * f
        logger.debug("%s: %s %s -> %s %s", self.domain, value, symbol, out, self.canonical)
        return out

    def from_canonical(self, value: Value, symbol: str) -> Value:
        f = self.factor(symbol)
        out = as_value(value) / f
        logger.debug("%s: %s %s -> %s %s", self.domain, value, self.canonical, out, symbol)
        return out


def metric_specs(suffix: str, domain: Domain, base_aliases: tuple[str, ...] = ()) -> tuple[UnitSpec, ...]:
    """`<prefix><suffix>` для всех метрических приставок; `μ`/`µ` — синонимы `u`."""
    specs = []
    for prefix, scale in METRIC_PREFIXES.items():
        if prefix in MICRO_ALIASES:
            continue
        aliases: tuple[str, ...] = ()
        if prefix == "":
            aliases = base_aliases
        elif prefix == "u":
            aliases = tuple(f"{p}{suffix}" for p in MICRO_ALIASES)
        specs.append(UnitSpec(f"{prefix}{suffix}", domain, aliases=aliases, description=f"{scale:g} {suffix}"))
    return tuple(specs)


def metric_factors(suffix: str, base: float = 1.0) -> dict[str, float]:
    return {
        f"{prefix}{suffix}": scale * base
        for prefix, scale in METRIC_PREFIXES.items()
        if prefix not in MICRO_ALIASES
    }
