"""Decorator demo: a coffee order built up from add-ons."""
from pattern_showcase.domain.coffee import BasicCoffee, Coffee, Milk, Sugar


def describe(coffee: Coffee) -> None:
    print(f"{coffee.get_description()} costs ${coffee.cost():.2f}")


def main() -> None:
    coffee: Coffee = BasicCoffee()
    describe(coffee)

    coffee = Milk(coffee)
    coffee = Sugar(coffee)
    describe(coffee)


if __name__ == "__main__":
    main()
