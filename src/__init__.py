"""freemem: display the amount of RAM and swap.

A Python CLI tool reporting memory figures in fixed or human-readable units.
"""

__version__ = "0.1.0"

from .units import (
    Unit,
    DECIMAL_UNITS,
    BINARY_UNITS,
    UnitError,
    UnknownUnitError,
    MagnitudeOutOfRangeError,
    convert,
    get_unit,
    unit_for_exponent,
)
from .utils.formatting import humanize, format_human
from .memory import MemorySnapshot, read_memory
from .config import DisplayConfig, build_display_config
from .report import ReportRow, build_rows

__all__ = [
    # Units
    'Unit',
    'DECIMAL_UNITS',
    'BINARY_UNITS',
    'UnitError',
    'UnknownUnitError',
    'MagnitudeOutOfRangeError',
    'convert',
    'get_unit',
    'unit_for_exponent',
    # Formatting
    'humanize',
    'format_human',
    # Reporting
    'MemorySnapshot',
    'read_memory',
    'DisplayConfig',
    'build_display_config',
    'ReportRow',
    'build_rows',
]
