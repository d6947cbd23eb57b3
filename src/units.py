"""Byte units and fixed-unit conversion."""

from dataclasses import dataclass
from typing import Dict, Tuple

DECIMAL_BASE = 1000
BINARY_BASE = 1024

# Largest exponent in either table (yotta / yobi)
MAX_EXPONENT = 8


class UnitError(ValueError):
    """Base class for unit lookup errors."""


class UnknownUnitError(UnitError):
    """Raised when a unit name is not in either unit table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown unit: {name!r}")


class MagnitudeOutOfRangeError(UnitError):
    """Raised when a magnitude index has no suffix in the unit table."""

    def __init__(self, exponent: int, base: int):
        self.exponent = exponent
        self.base = base
        super().__init__(
            f"Magnitude out of range: exponent {exponent} for base {base} "
            f"(supported: 0-{MAX_EXPONENT})"
        )


@dataclass(frozen=True)
class Unit:
    """A byte unit such as kilo (1000**1) or gibi (1024**3)."""
    name: str
    suffix: str
    exponent: int
    base: int

    @property
    def byte_size(self) -> int:
        return self.base ** self.exponent

    @property
    def is_decimal(self) -> bool:
        return self.base == DECIMAL_BASE


def _build_table(base: int, names: Tuple[str, ...], suffixes: Tuple[str, ...]) -> Tuple[Unit, ...]:
    return tuple(
        Unit(name=name, suffix=suffix, exponent=exponent, base=base)
        for exponent, (name, suffix) in enumerate(zip(names, suffixes))
    )


DECIMAL_UNITS = _build_table(
    DECIMAL_BASE,
    ('bytes', 'kilo', 'mega', 'giga', 'tera', 'peta', 'exa', 'zetta', 'yotta'),
    ('B', 'K', 'M', 'G', 'T', 'P', 'E', 'Z', 'Y'),
)

BINARY_UNITS = _build_table(
    BINARY_BASE,
    ('bytes', 'kibi', 'mebi', 'gibi', 'tebi', 'pebi', 'exbi', 'zebi', 'yobi'),
    ('B', 'Ki', 'Mi', 'Gi', 'Ti', 'Pi', 'Ei', 'Zi', 'Yi'),
)

# 'bytes' resolves to the decimal entry; both have a byte size of 1
UNITS_BY_NAME: Dict[str, Unit] = {unit.name: unit for unit in BINARY_UNITS + DECIMAL_UNITS}


def units_for_base(base: int) -> Tuple[Unit, ...]:
    """Return the unit table for a numbering base (1000 or 1024)."""
    if base == DECIMAL_BASE:
        return DECIMAL_UNITS
    if base == BINARY_BASE:
        return BINARY_UNITS
    raise ValueError(f"Unsupported base: {base} (expected {DECIMAL_BASE} or {BINARY_BASE})")


def unit_for_exponent(exponent: int, base: int) -> Unit:
    """Bounds-checked lookup of the unit for a magnitude index.

    Args:
        exponent: Magnitude index, 0 for bytes up to 8 for yotta/yobi
        base: 1000 or 1024

    Returns:
        The matching Unit

    Raises:
        MagnitudeOutOfRangeError: If exponent is outside 0..8
    """
    table = units_for_base(base)
    if not 0 <= exponent < len(table):
        raise MagnitudeOutOfRangeError(exponent, base)
    return table[exponent]


def get_unit(name: str) -> Unit:
    """Look up a unit by its long name, e.g. 'kilo' or 'gibi'."""
    try:
        return UNITS_BY_NAME[name]
    except KeyError:
        raise UnknownUnitError(name) from None


def convert(raw_bytes: int, unit_byte_size: int) -> int:
    """Convert a byte count into a whole number of units (floor division).

    Args:
        raw_bytes: Non-negative byte count
        unit_byte_size: Size of the target unit in bytes, always >= 1

    Returns:
        raw_bytes // unit_byte_size
    """
    if unit_byte_size <= 0:
        raise ValueError(f"Unit byte size must be positive, got {unit_byte_size}")
    if raw_bytes < 0:
        raise ValueError(f"Byte count must be non-negative, got {raw_bytes}")
    return raw_bytes // unit_byte_size
