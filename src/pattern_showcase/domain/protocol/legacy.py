"""Legacy printer speaking the old protocol."""


class LegacyPrinterProtocol:
    """Pre-existing printer whose interface does not match ModernPrinter."""

    def print_legacy(self) -> None:
        print("Legacy printer: printing via old protocol")
