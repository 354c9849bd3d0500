"""Настройки вывода результата в CLI."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from unitconv.core.validation import ensure_in_range, ensure_positive


@dataclass(frozen=True)
class OutputSettings:
    """Формат числа в stdout.

    digits:
        Число значащих цифр.

    positional_min / positional_max:
        Диапазон |x|, в котором число печатается без экспоненты.
        Вне диапазона используется научная запись. Ноль всегда позиционно.
    """

    digits: int = 15
    positional_min: float = 1e-5
    positional_max: float = 1e16

    def __post_init__(self) -> None:
        ensure_in_range(self.digits, 1, 17, "digits")
        ensure_positive(self.positional_min, "positional_min")
        if self.positional_max <= self.positional_min:
            raise ValueError("positional_max must be > positional_min")

    def format(self, value: float) -> str:
        x = float(value)
        if x == 0.0 or self.positional_min <= abs(x) < self.positional_max:
            return np.format_float_positional(
                x, precision=self.digits, unique=True, fractional=False, trim="-"
            )
        return np.format_float_scientific(x, precision=self.digits - 1, unique=True, trim="-")


DEFAULT_OUTPUT_SETTINGS = OutputSettings()
