"""Adapter demo: a legacy printer used through the modern interface."""
from pattern_showcase.domain.protocol import LegacyPrinterProtocol, ModernPrinter, PrinterAdapter


def main() -> None:
    printer: ModernPrinter = PrinterAdapter(LegacyPrinterProtocol())
    printer.print_document()


if __name__ == "__main__":
    main()
