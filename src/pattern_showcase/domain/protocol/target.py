"""Target interface expected by modern clients."""
from abc import ABC, abstractmethod


class ModernPrinter(ABC):
    """Interface modern code prints through."""

    @abstractmethod
    def print_document(self) -> None:
        pass
