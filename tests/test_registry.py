import pytest

from unitconv.core.types import DOMAINS, UnitSpec
from unitconv.errors import UnrecognizedUnitError
from unitconv.registry import REGISTRY, UnitRegistry, classify, resolve


class TestClassify:
    @pytest.mark.parametrize(
        "token,domain",
        [
            ("kg", "mass"),
            ("lb", "mass"),
            ("LBS", "mass"),
            ("pounds", "mass"),
            ("eV", "energy"),
            ("Hartree", "energy"),
            ("K", "energy"),
            ("C", "energy"),
            ("F", "energy"),
            ("cm-1", "energy"),
            ("MHz", "energy"),
            ("GHz", "energy"),
            ("m", "length"),
            ("nm", "length"),
            ("μm", "length"),
            ("µm", "length"),
            ("um", "length"),
            ("Angstrom", "length"),
            ("bohr", "length"),
            ("ly", "length"),
            ("ft", "length"),
            ("s", "time"),
            ("fs", "time"),
            ("ms", "time"),
            ("h", "time"),
            ("hr", "time"),
            ("hrs", "time"),
            ("hour", "time"),
            ("hours", "time"),
            ("min", "time"),
            ("yr", "time"),
            ("planck", "time"),
        ],
    )
    def test_domain(self, token: str, domain: str) -> None:
        assert classify(token) == domain

    def test_case_and_whitespace_insensitive(self) -> None:
        assert resolve("  KM ").symbol == "km"

    def test_aliases_resolve_to_symbol(self) -> None:
        assert resolve("μs").symbol == "us"
        assert resolve("wavenumbers").symbol == "cm-1"
        assert resolve("feet").symbol == "ft"

    def test_unrecognized(self) -> None:
        with pytest.raises(UnrecognizedUnitError, match="xyz") as exc:
            classify("xyz")
        assert exc.value.token == "xyz"

    def test_empty_token(self) -> None:
        with pytest.raises(UnrecognizedUnitError):
            classify("")


class TestUnitRegistry:
    def test_every_token_in_exactly_one_domain(self) -> None:
        counted = sum(len(REGISTRY.specs(d)) for d in DOMAINS)
        symbols = [s for d in DOMAINS for s in REGISTRY.symbols(d)]
        assert counted == len(symbols) == len(set(symbols))

    def test_duplicate_token_rejected(self) -> None:
        specs = [
            UnitSpec("d", "time", aliases=("day",)),
            UnitSpec("dd", "length", aliases=("DAY",)),
        ]
        with pytest.raises(ValueError, match="Duplicate"):
            UnitRegistry(specs)

    def test_contains(self) -> None:
        assert "ev" in REGISTRY
        assert "EV" in REGISTRY
        assert "parsec" not in REGISTRY

    def test_symbols_sorted(self) -> None:
        assert REGISTRY.symbols("mass") == ["kg", "lb"]
