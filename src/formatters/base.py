"""Base formatter interface for report output."""

from abc import ABC, abstractmethod
from typing import List, TextIO, Optional

try:
    from ..config import UNAVAILABLE_PLACEHOLDER
except ImportError:
    from config import UNAVAILABLE_PLACEHOLDER


class BaseFormatter(ABC):
    """Abstract base class for all output formatters.

    A formatter renders the rows of one reporting cycle. The runner calls
    format_cycle_separator between cycles when output repeats.
    """

    @abstractmethod
    def format_report(
        self,
        rows: List,
        cycle: int = 1,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format the rows of one reporting cycle.

        Args:
            rows: List of ReportRow objects (Mem, Swap, optional Total)
            cycle: 1-based number of the reporting cycle
            output_file: Optional file to write output to

        Returns:
            Formatted string, or None if output was written directly
        """
        pass

    def format_cycle_separator(self, output_file: Optional[TextIO] = None) -> Optional[str]:
        """Emit whatever separates two cycles. Default is a blank line."""
        if output_file:
            output_file.write("\n")
        return "\n"

    @staticmethod
    def cell_text(value) -> str:
        """Render a cell value, using the placeholder for unavailable figures."""
        if value is None:
            return UNAVAILABLE_PLACEHOLDER
        return str(value)
