"""Физические константы и фиксированные коэффициенты пересчёта (CODATA 2018).

Значения хранятся как есть: конвертеры делят на сохранённую константу,
а не пересчитывают её из физической формулы, чтобы точность совпадала
с эталонными значениями.

Соглашение об именах: `au2X` = сколько единиц X в одной атомной единице
энергии (Hartree), `X2m` / `X2sec` = сколько метров / секунд в единице X.
"""

from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class PhysicalConstants:
    c: float = 299792458.0                  # m/s
    kboltz: float = 1.380649e-23            # J/K

    # Energy, per atomic unit
    au2eV: float = 27.211386245988
    au2J: float = 4.3597447222071e-18
    au2Ryd: float = 2.0
    au2invcm: float = 1.0 / 4.5563552529120e-6
    au2Hz: float = 1.0 / 1.5198298460570e-16

    # Length
    au2ang: float = 0.529177210903          # bohr radius, Å
    ang2m: float = 1e-10
    in2m: float = 0.0254
    ft2m: float = 0.3048
    mi2m: float = 1609.344
    ly2m: float = 9460730472580800.0

    # Time
    min2sec: float = 60.0
    hour2sec: float = 3600.0
    day2sec: float = 86400.0
    days_per_year: float = 365.25
    planck2sec: float = 5.39e-44

    # Mass
    lb_kg: float = 0.4535924

    # Temperature
    C2K: float = 273.15

    def __post_init__(self) -> None:
        for name, value in self.__dict__.items():
            if not math.isfinite(value) or value <= 0.0:
                raise ValueError(f"{name} must be a finite number > 0; got {value}")

    @property
    def au2K(self) -> float:
        """Температура (K), эквивалентная 1 Hartree через E = kT."""
        return self.au2J / self.kboltz

    @property
    def bohr2m(self) -> float:
        return self.au2ang * self.ang2m

    @property
    def year2sec(self) -> float:
        return self.days_per_year * self.day2sec


CONSTANTS = PhysicalConstants()
