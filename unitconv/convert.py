"""Драйвер: классификация -> конвертация -> возведение в степень."""

from __future__ import annotations

from numbers import Integral
from typing import Any
import logging

import numpy as np

from unitconv.bridge import bridge
from unitconv.core.types import Quantity, Value
from unitconv.core.validation import as_value
from unitconv.domains import CONVERTERS
from unitconv.errors import InvalidExponentError, NonFiniteResultError
from unitconv.registry import resolve

logger = logging.getLogger(__name__)


def validate_exponent(exponent: Any) -> int:
    if isinstance(exponent, bool) or not isinstance(exponent, Integral) or exponent < 1:
        raise InvalidExponentError(exponent)
    return int(exponent)


def convert(value: Any, from_unit: str, to_unit: str, exponent: int = 1) -> Value:
    """Перевести `value` из `from_unit` в `to_unit` и возвести результат в `exponent`.

    Разные домены допустимы только для пары длина/энергия.
    """
    n = validate_exponent(exponent)
    src = resolve(from_unit)
    dst = resolve(to_unit)
    x = as_value(value)

    if src.domain == dst.domain:
        result = CONVERTERS[src.domain].convert(x, src.symbol, dst.symbol)
    else:
        result = bridge(x, src.domain, dst.domain, src.symbol, dst.symbol)

    if n != 1:
        try:
            with np.errstate(over="ignore"):
                result = result**n
        except OverflowError:
            raise NonFiniteResultError(value, "result") from None
    if not np.all(np.isfinite(result)):
        raise NonFiniteResultError(value, "result")
    logger.debug("%s %s -> %s %s (exponent %d)", value, from_unit, result, to_unit, n)
    return result


def convert_quantity(quantity: Quantity, to_unit: str, exponent: int = 1) -> Quantity:
    return Quantity(convert(quantity.value, quantity.unit, to_unit, exponent), to_unit)
