"""Масса. Каноническая единица: килограмм."""

from __future__ import annotations

from unitconv.config.constants import CONSTANTS
from unitconv.core.types import UnitSpec
from unitconv.core.units import KILOGRAM
from unitconv.domains.linear import LinearTable

UNITS: tuple[UnitSpec, ...] = (
    UnitSpec("kg", "mass", aliases=("kilogram", "kilograms"), description="kilogram"),
    UnitSpec("lb", "mass", aliases=("lbs", "pound", "pounds"), description="avoirdupois pound"),
)

TABLE = LinearTable(
    domain="mass",
    canonical="kg",
    factors={
        "kg": KILOGRAM,
        "lb": CONSTANTS.lb_kg * KILOGRAM,
    },
    specs=UNITS,
)

to_canonical = TABLE.to_canonical
from_canonical = TABLE.from_canonical
