"""Protocol adapter - Adapter pattern example."""

from .adapter import PrinterAdapter
from .legacy import LegacyPrinterProtocol
from .target import ModernPrinter

__all__ = ["ModernPrinter", "LegacyPrinterProtocol", "PrinterAdapter"]
