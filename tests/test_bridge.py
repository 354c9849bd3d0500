import numpy as np
import pytest

from unitconv.bridge import bridge, energy_to_length, length_to_energy
from unitconv.config.constants import CONSTANTS
from unitconv.errors import NonFiniteResultError, UnsupportedCrossDomainError, ZeroBridgeValueError


class TestBridge:
    def test_one_ev_wavelength(self) -> None:
        # 1 eV -> cm^-1 via the stored constants, then 1/x cm -> nm
        expected_nm = 1e7 / (CONSTANTS.au2invcm / CONSTANTS.au2eV)
        assert energy_to_length(1.0, "ev", "nm") == pytest.approx(expected_nm, rel=1e-12)
        assert energy_to_length(1.0, "ev", "nm") == pytest.approx(1239.8, rel=1e-4)

    def test_wavenumber_consistency(self) -> None:
        # 1 cm photon == 1 cm^-1
        assert length_to_energy(1.0, "cm", "cm-1") == pytest.approx(1.0, rel=1e-14)
        assert energy_to_length(1.0, "cm-1", "cm") == pytest.approx(1.0, rel=1e-14)

    @pytest.mark.parametrize("x", [1e-3, 0.5, 632.8, -7.0, 1e6])
    @pytest.mark.parametrize("length_unit,energy_unit", [("nm", "ev"), ("um", "cm-1"), ("m", "ghz"), ("ang", "au"), ("bohr", "k")])
    def test_cross_domain_identity(self, x: float, length_unit: str, energy_unit: str) -> None:
        e = length_to_energy(x, length_unit, energy_unit)
        assert energy_to_length(e, energy_unit, length_unit) == pytest.approx(x, rel=1e-12)

    def test_vectorized(self) -> None:
        out = length_to_energy(np.array([1.0, 2.0]), "cm", "cm-1")
        np.testing.assert_allclose(out, [1.0, 0.5])

    def test_zero_length(self) -> None:
        with pytest.raises(ZeroBridgeValueError, match="cannot relate zero length/energy"):
            length_to_energy(0.0, "m", "ev")

    def test_zero_energy(self) -> None:
        with pytest.raises(ZeroBridgeValueError, match="cannot relate zero length/energy"):
            energy_to_length(0.0, "ev", "m")

    def test_absolute_zero_celsius(self) -> None:
        with pytest.raises(ZeroBridgeValueError):
            energy_to_length(-273.15, "c", "m")

    def test_zero_in_array(self) -> None:
        with pytest.raises(ZeroBridgeValueError):
            length_to_energy(np.array([1.0, 0.0]), "m", "ev")

    @pytest.mark.parametrize("src,dst", [("mass", "energy"), ("time", "length"), ("length", "time"), ("energy", "mass")])
    def test_unsupported_pairs(self, src: str, dst: str) -> None:
        with pytest.raises(UnsupportedCrossDomainError, match=f"cannot convert {src} to {dst}"):
            bridge(1.0, src, dst, "x", "y")  # type: ignore[arg-type]

    def test_subnormal_length_overflows(self) -> None:
        # 1e-318 cm -> 1e318 cm^-1, beyond float range
        with pytest.raises(NonFiniteResultError, match="inverse of length"):
            length_to_energy(1e-320, "m", "ev")

    def test_subnormal_energy_overflows(self) -> None:
        with pytest.raises(NonFiniteResultError, match="inverse of energy"):
            energy_to_length(1e-320, "au", "m")
