"""Время. Каноническая единица: секунда."""

from __future__ import annotations

from unitconv.config.constants import CONSTANTS
from unitconv.core.types import UnitSpec
from unitconv.core.units import SECOND
from unitconv.domains.linear import LinearTable, metric_factors, metric_specs

UNITS: tuple[UnitSpec, ...] = metric_specs("s", "time", ("sec", "secs", "second", "seconds")) + (
    UnitSpec("min", "time", aliases=("mins", "minute", "minutes"), description="minute"),
    UnitSpec("h", "time", aliases=("hr", "hrs", "hour", "hours"), description="hour"),
    UnitSpec("d", "time", aliases=("day", "days"), description="day"),
    UnitSpec("y", "time", aliases=("yr", "yrs", "year", "years"), description="julian year (365.25 d)"),
    UnitSpec("tp", "time", aliases=("planck", "plancktime"), description="planck time"),
)

TABLE = LinearTable(
    domain="time",
    canonical="s",
    factors={
        **metric_factors("s", SECOND),
        "min": CONSTANTS.min2sec,
        "h": CONSTANTS.hour2sec,
        "d": CONSTANTS.day2sec,
        "y": CONSTANTS.year2sec,
        "tp": CONSTANTS.planck2sec,
    },
    specs=UNITS,
)

to_canonical = TABLE.to_canonical
from_canonical = TABLE.from_canonical
