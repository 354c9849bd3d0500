"""Классификатор единиц: токен -> (домен, каноническая единица).

Вместо последовательного перебора шаблонов все допустимые токены всех доменов
собираются в один словарь. Повтор токена — ошибка при построении, поэтому
домены не пересекаются по построению.
"""

from __future__ import annotations

from typing import Dict, Iterable, List
import logging

from unitconv.core.types import DOMAINS, Domain, UnitSpec
from unitconv.domains import CONVERTERS
from unitconv.errors import UnrecognizedUnitError

logger = logging.getLogger(__name__)


def normalize_token(token: str) -> str:
    return token.strip().lower()


class UnitRegistry:
    def __init__(self, specs: Iterable[UnitSpec]) -> None:
        self._units: Dict[str, UnitSpec] = {}
        for spec in specs:
            for key in spec.tokens:
                k = normalize_token(key)
                if k in self._units:
                    other = self._units[k]
                    raise ValueError(
                        f"Duplicate unit token {key!r}: {spec.domain}:{spec.symbol} vs {other.domain}:{other.symbol}"
                    )
                self._units[k] = spec

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and normalize_token(token) in self._units

    def __len__(self) -> int:
        return len(self._units)

    def resolve(self, token: str) -> UnitSpec:
        try:
            spec = self._units[normalize_token(token)]
        except KeyError as e:
            raise UnrecognizedUnitError(token) from e
        logger.debug("unit %r -> %s:%s", token, spec.domain, spec.symbol)
        return spec

    def classify(self, token: str) -> Domain:
        return self.resolve(token).domain

    def specs(self, domain: Domain) -> List[UnitSpec]:
        return sorted({s for s in self._units.values() if s.domain == domain}, key=lambda s: s.symbol)

    def symbols(self, domain: Domain) -> List[str]:
        return [s.symbol for s in self.specs(domain)]


REGISTRY = UnitRegistry(spec for domain in DOMAINS for spec in CONVERTERS[domain].units)


def resolve(token: str) -> UnitSpec:
    return REGISTRY.resolve(token)


def classify(token: str) -> Domain:
    return REGISTRY.classify(token)
