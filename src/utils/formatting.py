"""Human-readable byte formatting."""

import math
from typing import Tuple

try:
    from ..units import MAX_EXPONENT, unit_for_exponent, units_for_base
except ImportError:
    from units import MAX_EXPONENT, unit_for_exponent, units_for_base


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return math.floor(value * 10.0 + 0.5) / 10.0


def magnitude_index(raw_bytes: int, base: int) -> int:
    """Return idx such that base**idx <= raw_bytes < base**(idx + 1).

    The estimate comes from log10 and is then checked against exact integer
    powers, since the float quotient can land just below a whole number at
    exact powers of the base.

    Args:
        raw_bytes: Positive byte count
        base: 1000 or 1024

    Returns:
        Unclamped magnitude index
    """
    if raw_bytes <= 0:
        raise ValueError(f"Magnitude is undefined for {raw_bytes}")

    idx = int(math.floor(math.log10(raw_bytes) / math.log10(base)))
    while idx > 0 and raw_bytes < base ** idx:
        idx -= 1
    while raw_bytes >= base ** (idx + 1):
        idx += 1
    return idx


def humanize(raw_bytes: int, base: int = 1024) -> Tuple[float, str]:
    """Scale a byte count to a one-decimal mantissa and a magnitude suffix.

    Binary base uses B, Ki, Mi, ... Yi; decimal base uses B, K, M, ... Y.
    A mantissa that rounds up to exactly ``base`` moves to the next suffix,
    so 1023.96 KiB is reported as 1.0Mi. Counts past yotta/yobi stay on the
    largest suffix with a mantissa of base or more.

    Args:
        raw_bytes: Non-negative byte count
        base: 1000 (decimal) or 1024 (binary)

    Returns:
        Tuple of (mantissa, suffix), (0.0, 'B') for zero
    """
    units_for_base(base)
    if raw_bytes < 0:
        raise ValueError(f"Byte count must be non-negative, got {raw_bytes}")
    if raw_bytes == 0:
        return 0.0, 'B'

    idx = min(magnitude_index(raw_bytes, base), MAX_EXPONENT)
    mantissa = round_one_decimal(raw_bytes / base ** idx)

    if mantissa >= base and idx < MAX_EXPONENT:
        idx += 1
        mantissa = round_one_decimal(mantissa / base)

    return mantissa, unit_for_exponent(idx, base).suffix


def format_human(raw_bytes: int, base: int = 1024) -> str:
    """Format a byte count as a compact string like '1.9Gi' or '2.0G'.

    Args:
        raw_bytes: Non-negative byte count
        base: 1000 (decimal) or 1024 (binary)

    Returns:
        Mantissa with one decimal followed by the suffix, or '0B' for zero
    """
    mantissa, suffix = humanize(raw_bytes, base)
    if raw_bytes == 0:
        return f"0{suffix}"
    return f"{mantissa:.1f}{suffix}"
