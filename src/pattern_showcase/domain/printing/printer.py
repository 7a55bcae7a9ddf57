"""Process-wide printer spooler."""
import threading
from typing import Optional

from pattern_showcase.infrastructure.logging.logger import get_logger


class Printer:
    """
    Printer shared by the whole process.

    Obtain it through ``get_instance()``, which constructs the instance lazily
    on first call. The check-and-create step is guarded by a lock so that
    concurrent first callers observe exactly one construction.
    """

    _instance: Optional["Printer"] = None
    _lock = threading.Lock()
    instances_created = 0

    def __init__(self) -> None:
        Printer.instances_created += 1
        self._logger = get_logger(__name__)
        self._logger.debug("Printer constructed", construction=Printer.instances_created)

    @classmethod
    def get_instance(cls) -> "Printer":
        """Get singleton instance of the printer."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the cached instance and construction count (tests only)."""
        with cls._lock:
            cls._instance = None
            cls.instances_created = 0

    def print(self, doc: str) -> None:
        print(f"Printing: {doc}")
