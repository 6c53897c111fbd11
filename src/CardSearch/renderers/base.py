"""Base classes for output writers.

Separates command control flow from how results are presented.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from CardSearch.core.models import Card


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_result(self, cards: Sequence[Card], label: str) -> None:
        """Write the cards produced by one command.

        Args:
            cards: Cards to present, in service order.
            label: What produced them, e.g. the rendered query.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'search').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_result(self, cards: Sequence[Card], label: str) -> None:
        """Send results to all writers."""
        for writer in self.writers:
            writer.write_result(cards, label)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
