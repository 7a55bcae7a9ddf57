"""Adapter exposing a legacy printer through the modern interface."""
from pattern_showcase.domain.base.exceptions import InvalidArgumentError
from pattern_showcase.infrastructure.logging.logger import get_logger

from .legacy import LegacyPrinterProtocol
from .target import ModernPrinter


class PrinterAdapter(ModernPrinter):
    """
    Adapter that implements ModernPrinter using a LegacyPrinterProtocol.

    The adaptee is supplied at construction and held for the adapter's
    lifetime; it is never reassigned.
    """

    def __init__(self, legacy_printer: LegacyPrinterProtocol):
        if legacy_printer is None:
            raise InvalidArgumentError("legacy_printer")
        self._legacy_printer = legacy_printer
        self._logger = get_logger(__name__)

    @property
    def adaptee(self) -> LegacyPrinterProtocol:
        return self._legacy_printer

    def print_document(self) -> None:
        """Emit the translation marker, then forward to the legacy call."""
        print("Adapter: translating modern request to legacy protocol")
        self._logger.debug(
            "Forwarding to adaptee",
            adaptee=type(self._legacy_printer).__name__,
        )
        self._legacy_printer.print_legacy()
