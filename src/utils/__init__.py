"""Shared utilities for freemem."""

from .formatting import round_one_decimal, magnitude_index, humanize, format_human

__all__ = [
    'round_one_decimal',
    'magnitude_index',
    'humanize',
    'format_human',
]
