"""CLI: units [NUM] [FROM] [TO] [EXPONENT]

Usage:
    units 1 ev um          # wavelength of a 1 eV photon, micrometers
    units 100 C F          # 212
    units 2 ft cm 2        # (2 ft in cm) ** 2
    units --list           # supported units per domain

Результат печатается одной строкой в stdout, ошибки — в stderr с кодом выхода 1.
"""

from __future__ import annotations

from typing import Optional, Sequence
import argparse
import logging
import sys

from unitconv.config.settings import OutputSettings
from unitconv.core.types import DOMAINS
from unitconv.core.validation import ensure_finite
from unitconv.convert import convert
from unitconv.errors import ConversionError
from unitconv.registry import REGISTRY

logger = logging.getLogger("unitconv")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="units",
        description="Convert a value between units of mass, energy, length and time. "
        "Length and energy convert into each other through the photon relation.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  units 1 ev um        # 1 eV photon wavelength in micrometers
  units 100 C F        # water boiling point in fahrenheit
  units 1 ly m
  units 3 ft m 2       # result squared
        """,
    )
    parser.add_argument("value", nargs="?", help="Number to convert")
    parser.add_argument("from_unit", nargs="?", metavar="from", help="Source unit")
    parser.add_argument("to_unit", nargs="?", metavar="to", help="Destination unit")
    parser.add_argument("exponent", nargs="?", help="Raise the result to this power (integer >= 1, default: 1)")
    parser.add_argument("-l", "--list", action="store_true", help="List supported units and exit")
    parser.add_argument("-p", "--digits", type=int, default=OutputSettings.digits, help="Significant digits (default: 15)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log conversion steps to stderr")
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def list_units() -> str:
    lines = []
    for domain in DOMAINS:
        lines.append(f"{domain}:")
        for spec in REGISTRY.specs(domain):
            aliases = f" ({', '.join(spec.aliases)})" if spec.aliases else ""
            lines.append(f"  {spec.symbol:<6} {spec.description}{aliases}")
    return "\n".join(lines)


def _shield_negative_numbers(argv: Sequence[str]) -> list[str]:
    """argparse считает `-1e-3` флагом. Пробел впереди делает токен позиционным, float/int его игнорируют."""
    out = []
    for token in argv:
        if token.startswith("-") and _is_number(token):
            token = f" {token}"
        out.append(token)
    return out


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def _parse_number(text: str, name: str) -> float:
    text = text.strip()
    try:
        return float(text)
    except ValueError:
        raise ConversionError(f"{name} must be a number, got {text!r}") from None


def _parse_exponent(text: Optional[str]) -> int:
    if text is None:
        return 1
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        raise ConversionError(f"exponent must be an integer >= 1, got {text!r}") from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args, unknown = parser.parse_known_intermixed_args(_shield_negative_numbers(argv))
    setup_logging(args.verbose)

    for flag in unknown:
        logger.warning("ignoring unknown argument %s", flag)

    if args.list:
        print(list_units())
        return 0

    if args.value is None or args.from_unit is None or args.to_unit is None:
        parser.print_usage(sys.stderr)
        print("Error: NUM, FROM and TO are required", file=sys.stderr)
        return 1

    try:
        settings = OutputSettings(digits=args.digits)
        value = _parse_number(args.value, "NUM")
        ensure_finite(value, "NUM")
        exponent = _parse_exponent(args.exponent)
        result = convert(value, args.from_unit, args.to_unit, exponent)
    except (ValueError, OverflowError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(settings.format(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
