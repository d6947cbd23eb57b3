"""Configuration constants and display settings for freemem."""

from dataclasses import dataclass
from typing import Optional

try:
    from .units import Unit, DECIMAL_BASE, BINARY_BASE, get_unit
except ImportError:
    from units import Unit, DECIMAL_BASE, BINARY_BASE, get_unit

VERSION = "0.1.0"

# Repeat limits for --secs and --count
MIN_SECONDS = 1
MAX_SECONDS = 60 * 60 * 60
MIN_COUNT = 1
MAX_COUNT = 100

# Shown in place of a figure the OS could not report
UNAVAILABLE_PLACEHOLDER = "-"

# Table columns, in output order
COLUMNS = ['total', 'free', 'used', 'buffer', 'shared']
SWAP_COLUMNS = COLUMNS[:3]

# Row labels
ROW_LABELS = {
    'mem': 'Mem:',
    'swap': 'Swap:',
    'total': 'Total:',
}

# Plain table layout
PLAIN_HEADER = "               total        free        used        buffer       shared"
PLAIN_ROW_WIDTHS = {
    'mem': [15, 11, 11, 13, 12],
    'swap': [14, 11, 11],
    'total': [13, 11, 11],
}

OUTPUT_FORMATS = ['auto', 'plain', 'terminal', 'jsonl']

# Fixed units offered on the command line, in help order
DECIMAL_UNIT_OPTIONS = ['bytes', 'kilo', 'mega', 'giga', 'tera', 'peta']
BINARY_UNIT_OPTIONS = ['kibi', 'mebi', 'gibi', 'tebi', 'pebi']

# Spellings accepted by older releases
UNIT_OPTION_ALIASES = {
    'mebi': ['mibi'],
    'tebi': ['tibi'],
    'pebi': ['pibi'],
}


@dataclass(frozen=True)
class DisplayConfig:
    """Display settings, built once from the command line.

    mode is 'unit' (every figure divided by ``unit``) or 'human'
    (figures scaled automatically, base chosen by ``decimal``).
    """
    mode: str = 'unit'
    unit: Optional[Unit] = None
    decimal: bool = False
    show_total: bool = False
    seconds: Optional[int] = None
    count: Optional[int] = None
    output_format: str = 'plain'

    @property
    def base(self) -> int:
        return DECIMAL_BASE if self.decimal else BINARY_BASE

    @property
    def repeats(self) -> bool:
        return self.seconds is not None or self.count is not None


def build_display_config(
    unit_name: Optional[str] = None,
    human: bool = False,
    decimal: bool = False,
    show_total: bool = False,
    seconds: Optional[int] = None,
    count: Optional[int] = None,
    output_format: str = 'plain',
) -> DisplayConfig:
    """Resolve command line choices into a DisplayConfig.

    Without an explicit unit or human mode, figures are shown in kibibytes,
    or kilobytes when decimal is set.
    """
    if unit_name and human:
        raise ValueError("A fixed unit cannot be combined with human-readable output")

    if human:
        return DisplayConfig(
            mode='human', unit=None, decimal=decimal, show_total=show_total,
            seconds=seconds, count=count, output_format=output_format,
        )

    if unit_name:
        unit = get_unit(unit_name)
    else:
        unit = get_unit('kilo' if decimal else 'kibi')

    return DisplayConfig(
        mode='unit', unit=unit, decimal=decimal, show_total=show_total,
        seconds=seconds, count=count, output_format=output_format,
    )
