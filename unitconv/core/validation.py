"""unitconv.core.validation

Базовые проверки и приведение чисел, чтобы ловить невозможные значения как можно раньше.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from unitconv.core.types import Value


def ensure_positive(value: float, name: str) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")


def ensure_in_range(value: float, min_value: float, max_value: float, name: str) -> None:
    if not (min_value <= value <= max_value):
        raise ValueError(f"{name} must be in [{min_value}, {max_value}], got {value}")


def ensure_finite(value: Value, name: str) -> None:
    if not np.all(np.isfinite(value)):
        raise ValueError(f"{name} must be finite, got {value}")


def as_value(x: Any) -> Value:
    """Скаляр -> float, всё остальное -> ndarray float64."""
    if np.ndim(x) == 0:
        return float(x)
    return np.asarray(x, dtype=np.float64)


def has_zero(x: Value) -> bool:
    return bool(np.any(np.asarray(x) == 0.0))
