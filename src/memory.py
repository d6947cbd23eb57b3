"""Memory and swap figures from the operating system."""

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import psutil

SHMMAX_PROC_PATH = Path('/proc/sys/kernel/shmmax')
SHMMAX_SYSCTL = 'kern.ipc.shmmax'

# Errors that mean a figure is unavailable rather than a bug
QUERY_ERRORS = (OSError, RuntimeError, NotImplementedError, ValueError,
                subprocess.SubprocessError, psutil.Error)


@dataclass(frozen=True)
class MemorySnapshot:
    """Raw byte counts for one reporting cycle.

    Any figure may be None when the OS could not report it. shared_limit is
    the kernel's shared memory segment ceiling (shmmax), a tunable limit,
    not the amount of memory currently shared.
    """
    total_ram: Optional[int]
    free_ram: Optional[int]
    buffer_ram: Optional[int]
    shared_limit: Optional[int]
    total_swap: Optional[int]
    used_swap: Optional[int]
    unavailable: Tuple[str, ...] = ()

    @property
    def used_ram(self) -> Optional[int]:
        return _difference(self.total_ram, self.free_ram)

    @property
    def free_swap(self) -> Optional[int]:
        return _difference(self.total_swap, self.used_swap)

    def total_combined(self) -> Optional[int]:
        """Total RAM plus total swap."""
        return _sum(self.total_ram, self.total_swap)

    def free_combined(self) -> Optional[int]:
        """Free RAM plus free swap."""
        return _sum(self.free_ram, self.free_swap)

    def used_combined(self) -> Optional[int]:
        """Used RAM plus used swap."""
        return _sum(self.used_ram, self.used_swap)


def _difference(minuend: Optional[int], subtrahend: Optional[int]) -> Optional[int]:
    if minuend is None or subtrahend is None:
        return None
    # Counters are sampled separately and can race past each other
    return max(minuend - subtrahend, 0)


def _sum(*values: Optional[int]) -> Optional[int]:
    if any(v is None for v in values):
        return None
    return sum(values)


def read_shared_limit() -> Optional[int]:
    """Read the shared memory segment ceiling (shmmax) in bytes.

    Linux exposes it under /proc; BSD and macOS through sysctl.

    Returns:
        The ceiling in bytes, or None if it cannot be read
    """
    if sys.platform.startswith('linux'):
        text = SHMMAX_PROC_PATH.read_text()
    else:
        result = subprocess.run(
            ['sysctl', '-n', SHMMAX_SYSCTL],
            capture_output=True,
            text=True,
            check=True,
            timeout=5,
        )
        text = result.stdout

    return int(text.strip())


def read_memory() -> MemorySnapshot:
    """Collect a fresh snapshot of RAM and swap figures.

    Each source is queried independently; a failing query marks its
    figures unavailable instead of aborting the report.
    """
    unavailable = []

    total_ram = free_ram = buffer_ram = None
    try:
        vm = psutil.virtual_memory()
        total_ram = vm.total
        free_ram = vm.free
        # Not every platform reports buffers; active pages are the closest
        buffer_ram = getattr(vm, 'buffers', None)
        if buffer_ram is None:
            buffer_ram = getattr(vm, 'active', None)
    except QUERY_ERRORS:
        unavailable.extend(['total_ram', 'free_ram'])

    if buffer_ram is None:
        unavailable.append('buffer_ram')

    try:
        shared_limit = read_shared_limit()
    except QUERY_ERRORS:
        shared_limit = None
        unavailable.append('shared_limit')

    try:
        swap = psutil.swap_memory()
        total_swap = swap.total
        used_swap = swap.used
    except QUERY_ERRORS:
        total_swap = used_swap = None
        unavailable.extend(['total_swap', 'used_swap'])

    return MemorySnapshot(
        total_ram=total_ram,
        free_ram=free_ram,
        buffer_ram=buffer_ram,
        shared_limit=shared_limit,
        total_swap=total_swap,
        used_swap=used_swap,
        unavailable=tuple(unavailable),
    )
