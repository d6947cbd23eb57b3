"""Turn raw memory figures into display rows."""

from dataclasses import dataclass
from typing import List, Optional, Union

try:
    from .config import DisplayConfig, COLUMNS, SWAP_COLUMNS, ROW_LABELS
    from .memory import MemorySnapshot
    from .units import convert
    from .utils.formatting import format_human
except ImportError:
    from config import DisplayConfig, COLUMNS, SWAP_COLUMNS, ROW_LABELS
    from memory import MemorySnapshot
    from units import convert
    from utils.formatting import format_human

CellValue = Optional[Union[int, str]]


@dataclass
class ReportRow:
    """One table row: 'mem', 'swap' or 'total' with values in column order."""
    key: str
    values: List[CellValue]

    @property
    def label(self) -> str:
        return ROW_LABELS[self.key]

    @property
    def columns(self) -> List[str]:
        return COLUMNS if self.key == 'mem' else SWAP_COLUMNS

    def as_dict(self) -> dict:
        return dict(zip(self.columns, self.values))


def format_value(raw_bytes: Optional[int], config: DisplayConfig) -> CellValue:
    """Format one figure for display.

    Args:
        raw_bytes: Byte count, or None when unavailable
        config: Display settings

    Returns:
        Integer count of units, human string, or None when unavailable
    """
    if raw_bytes is None:
        return None
    if config.mode == 'human':
        return format_human(raw_bytes, config.base)
    return convert(raw_bytes, config.unit.byte_size)


def build_rows(snapshot: MemorySnapshot, config: DisplayConfig) -> List[ReportRow]:
    """Build the Mem, Swap and optional Total rows for one cycle."""
    mem = [
        snapshot.total_ram,
        snapshot.free_ram,
        snapshot.used_ram,
        snapshot.buffer_ram,
        snapshot.shared_limit,
    ]
    swap = [snapshot.total_swap, snapshot.free_swap, snapshot.used_swap]

    rows = [
        ReportRow('mem', [format_value(v, config) for v in mem]),
        ReportRow('swap', [format_value(v, config) for v in swap]),
    ]

    if config.show_total:
        combined = [
            snapshot.total_combined(),
            snapshot.free_combined(),
            snapshot.used_combined(),
        ]
        rows.append(ReportRow('total', [format_value(v, config) for v in combined]))

    return rows
