"""Repeat loop for periodic memory reports."""

import time
from typing import Callable, Optional, TextIO

try:
    from .config import DisplayConfig
    from .memory import MemorySnapshot, read_memory
    from .report import build_rows
except ImportError:
    from config import DisplayConfig
    from memory import MemorySnapshot, read_memory
    from report import build_rows


def run_report(
    config: DisplayConfig,
    formatter,
    output_file: Optional[TextIO] = None,
    reader: Optional[Callable[[], MemorySnapshot]] = None,
    sleep: Optional[Callable[[float], None]] = None,
    on_snapshot: Optional[Callable[[MemorySnapshot], None]] = None,
) -> int:
    """Print one report, or repeat it as configured.

    --secs alone repeats until interrupted, --count alone prints that many
    reports back to back, and both together print count reports with the
    interval between them. Every cycle reads a fresh snapshot.

    Args:
        config: Display settings
        formatter: Formatter used for every cycle
        output_file: Optional file to write output to
        reader: Snapshot source, read once per cycle (default: read_memory)
        sleep: Called with the interval between cycles (default: time.sleep)
        on_snapshot: Optional callback receiving each snapshot

    Returns:
        Number of cycles printed
    """
    reader = reader or read_memory
    sleep = sleep or time.sleep

    cycle = 0
    while True:
        cycle += 1
        snapshot = reader()
        if on_snapshot:
            on_snapshot(snapshot)

        formatter.format_report(build_rows(snapshot, config), cycle, output_file)
        if output_file:
            output_file.flush()

        if not config.repeats:
            break
        if config.count is not None and cycle >= config.count:
            break

        if config.seconds is not None:
            sleep(config.seconds)
        formatter.format_cycle_separator(output_file)

    return cycle
