"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

import pytest

# Add src and the repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from memory import MemorySnapshot

GIB = 1024 ** 3
MIB = 1024 ** 2


@pytest.fixture
def snapshot():
    """8Gi RAM with 2Gi free, 2Gi of unused swap, 64Gi shared ceiling."""
    return MemorySnapshot(
        total_ram=8 * GIB,
        free_ram=2 * GIB,
        buffer_ram=512 * MIB,
        shared_limit=64 * GIB,
        total_swap=2 * GIB,
        used_swap=0,
    )


@pytest.fixture
def partial_snapshot():
    """Snapshot where free RAM and the shared ceiling could not be read."""
    return MemorySnapshot(
        total_ram=8 * GIB,
        free_ram=None,
        buffer_ram=512 * MIB,
        shared_limit=None,
        total_swap=2 * GIB,
        used_swap=GIB,
        unavailable=('free_ram', 'shared_limit'),
    )
