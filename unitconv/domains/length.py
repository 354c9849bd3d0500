"""Длина. Каноническая единица: метр.

Метрические единицы (`nm`, `μm`, `km`, ...) генерируются из таблицы приставок,
остальные (дюйм, фут, миля, бор, ангстрем, световой год) заданы явно.
"""

from __future__ import annotations

from unitconv.config.constants import CONSTANTS
from unitconv.core.types import UnitSpec
from unitconv.core.units import METER
from unitconv.domains.linear import LinearTable, metric_factors, metric_specs

UNITS: tuple[UnitSpec, ...] = metric_specs("m", "length", ("meter", "meters", "metre", "metres")) + (
    UnitSpec("in", "length", aliases=("inch", "inches"), description="inch"),
    UnitSpec("ft", "length", aliases=("foot", "feet"), description="foot"),
    UnitSpec("mi", "length", aliases=("mile", "miles"), description="statute mile"),
    UnitSpec("bohr", "length", aliases=("bohrs", "a0"), description="bohr radius (atomic unit)"),
    UnitSpec("ang", "length", aliases=("a", "å", "angstrom", "angstroms"), description="angstrom"),
    UnitSpec("ly", "length", aliases=("lightyear", "lightyears"), description="light-year"),
)

TABLE = LinearTable(
    domain="length",
    canonical="m",
    factors={
        **metric_factors("m", METER),
        "in": CONSTANTS.in2m,
        "ft": CONSTANTS.ft2m,
        "mi": CONSTANTS.mi2m,
        "bohr": CONSTANTS.bohr2m,
        "ang": CONSTANTS.ang2m,
        "ly": CONSTANTS.ly2m,
    },
    specs=UNITS,
)

to_canonical = TABLE.to_canonical
from_canonical = TABLE.from_canonical
