"""CLI input validation utilities."""

from typing import Optional, Tuple

try:
    from ..config import MIN_SECONDS, MAX_SECONDS, MIN_COUNT, MAX_COUNT
except ImportError:
    from config import MIN_SECONDS, MAX_SECONDS, MIN_COUNT, MAX_COUNT


def _validate_range(value: int, minimum: int, maximum: int, what: str) -> Tuple[bool, Optional[str]]:
    if value < minimum:
        return False, f"{what} must not be smaller than {minimum}"
    if value > maximum:
        return False, f"{what} must not be larger than {maximum}"
    return True, None


def validate_seconds(seconds: int) -> Tuple[bool, Optional[str]]:
    """Validate --secs option value.

    Args:
        seconds: Interval between reports

    Returns:
        Tuple of (is_valid, error_message)
    """
    return _validate_range(seconds, MIN_SECONDS, MAX_SECONDS, "seconds")


def validate_count(count: int) -> Tuple[bool, Optional[str]]:
    """Validate --count option value.

    Args:
        count: Number of reports to print

    Returns:
        Tuple of (is_valid, error_message)
    """
    return _validate_range(count, MIN_COUNT, MAX_COUNT, "count")


def validate_unit_choice(unit_name: Optional[str], human: bool) -> Tuple[bool, Optional[str]]:
    """Check that a fixed unit and human-readable output are not both requested.

    Args:
        unit_name: Fixed unit selected on the command line, if any
        human: Whether --human was given

    Returns:
        Tuple of (is_valid, error_message)
    """
    if unit_name and human:
        return False, f"--{unit_name} cannot be combined with --human"
    return True, None
