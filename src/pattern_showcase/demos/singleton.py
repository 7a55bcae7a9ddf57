"""Singleton demo: two lookups, one printer."""
from pattern_showcase.domain.printing import Printer


def main() -> None:
    first = Printer.get_instance()
    second = Printer.get_instance()

    first.print("Quarterly Report")
    second.print("Meeting Notes")

    print(f"Same printer instance: {first is second}")


if __name__ == "__main__":
    main()
