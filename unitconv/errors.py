"""Ошибки конвертации.

Все ошибки наследуют `ValueError`: конвертация детерминирована, повтор не поможет.
"""

from __future__ import annotations

from typing import Any


class ConversionError(ValueError):
    pass


class UnrecognizedUnitError(ConversionError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unrecognized unit: {token!r}")


class UnsupportedCrossDomainError(ConversionError):
    def __init__(self, intype: str, outtype: str) -> None:
        self.intype = intype
        self.outtype = outtype
        super().__init__(f"cannot convert {intype} to {outtype}")


class UnsupportedUnitError(ConversionError):
    """Единица классифицирована в домен, но в таблице домена для неё нет правила."""

    def __init__(self, symbol: str, domain: str) -> None:
        self.symbol = symbol
        self.domain = domain
        super().__init__(f"unsupported {domain} unit: {symbol!r}")


class InvalidExponentError(ConversionError):
    def __init__(self, exponent: Any) -> None:
        self.exponent = exponent
        super().__init__(f"exponent must be an integer >= 1, got {exponent!r}")


class ZeroBridgeValueError(ConversionError):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"cannot relate zero length/energy (got zero {kind})")


class NonFiniteResultError(ConversionError):
    """Результат вышел за пределы float (inf/NaN), например 1/x для субнормального x."""

    def __init__(self, value: Any, step: str) -> None:
        self.value = value
        self.step = step
        super().__init__(f"{step} is not finite for input {value!r} (float overflow)")
