import pytest

from unitconv.config import CONSTANTS, DEFAULT_OUTPUT_SETTINGS, OutputSettings, PhysicalConstants


class TestPhysicalConstants:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("c", 299792458.0),
            ("kboltz", 1.380649e-23),
            ("au2eV", 27.211386245988),
            ("au2J", 4.3597447222071e-18),
            ("au2Ryd", 2.0),
            ("au2invcm", 1.0 / 4.5563552529120e-6),
            ("au2Hz", 1.0 / 1.5198298460570e-16),
            ("au2ang", 0.529177210903),
            ("in2m", 0.0254),
            ("mi2m", 1609.344),
            ("ft2m", 0.3048),
            ("ly2m", 9460730472580800.0),
            ("min2sec", 60.0),
            ("hour2sec", 3600.0),
            ("day2sec", 86400.0),
            ("planck2sec", 5.39e-44),
            ("lb_kg", 0.4535924),
            ("C2K", 273.15),
        ],
    )
    def test_exact_values(self, name: str, expected: float) -> None:
        assert getattr(CONSTANTS, name) == expected

    def test_derived(self) -> None:
        assert CONSTANTS.year2sec == 365.25 * 86400.0
        assert CONSTANTS.au2K == 4.3597447222071e-18 / 1.380649e-23
        assert CONSTANTS.bohr2m == pytest.approx(0.529177210903e-10, rel=1e-15)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            CONSTANTS.c = 1.0  # type: ignore[misc]

    def test_invariants(self) -> None:
        with pytest.raises(ValueError):
            PhysicalConstants(au2eV=0.0)


class TestOutputSettings:
    @pytest.mark.parametrize(
        "value,text",
        [
            (9460730472580800.0, "9460730472580800"),
            (212.00000000000006, "212"),
            (0.0, "0"),
            (-40.0, "-40"),
            (1.5, "1.5"),
            (5.39e-44, "5.39e-44"),
            (1e20, "1e+20"),
        ],
    )
    def test_format(self, value: float, text: str) -> None:
        assert DEFAULT_OUTPUT_SETTINGS.format(value) == text

    def test_digits(self) -> None:
        assert OutputSettings(digits=3).format(1.23456) == "1.23"

    @pytest.mark.parametrize("digits", [0, 18])
    def test_invalid_digits(self, digits: int) -> None:
        with pytest.raises(ValueError):
            OutputSettings(digits=digits)
