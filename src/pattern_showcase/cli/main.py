"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Mapping of domain errors to exit status
"""
import argparse
import os
import sys
from typing import List, Optional

from pattern_showcase import __version__
from pattern_showcase.cli.formatters import format_output
from pattern_showcase.config.manager import ConfigurationManager
from pattern_showcase.demos.registry import DemoRegistry, register_default_demos
from pattern_showcase.domain.base.exceptions import DomainException
from pattern_showcase.domain.shapes import ShapeFactory
from pattern_showcase.infrastructure.logging.logger import get_logger, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pattern-showcase",
        description="Pattern Showcase - runnable design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                      # List available demos
  %(prog)s list --format table       # Display as table
  %(prog)s run decorator             # Run the Decorator demo
  %(prog)s run all                   # Run every demo in order
  %(prog)s draw circle               # Build a shape through the factory
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured logging level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    list_parser = subparsers.add_parser("list", help="List available demos")
    list_parser.add_argument(
        "--format", choices=["json", "yaml", "table"], default="table", help="Output format"
    )

    run_parser = subparsers.add_parser("run", help="Run a demo")
    run_parser.add_argument("demo", help="Demo name, or 'all' to run every demo")

    draw_parser = subparsers.add_parser("draw", help="Build a shape through the shape factory and draw it")
    draw_parser.add_argument("shape_type", help="Shape type, e.g. circle or SQUARE")

    return parser.parse_args(argv)


def _run_all(registry: DemoRegistry, order: List[str]) -> None:
    # Resolve every name up front so an unknown demo fails before any output
    registrations = [registry.get_registration(name) for name in order]
    for index, registration in enumerate(registrations):
        if index:
            print()
        print(f"=== {registration.title} ===")
        registry.run_demo(registration.name)


def execute_command(args: argparse.Namespace, config_manager: ConfigurationManager) -> None:
    """Execute the parsed command."""
    registry = register_default_demos()

    if args.command == "list":
        demos = [r.to_dict() for r in registry.list_registrations()]
        print(format_output({"demos": demos}, args.format))
    elif args.command == "run":
        if args.demo == "all":
            _run_all(registry, config_manager.app_config.demo_order)
        else:
            registry.run_demo(args.demo)
    elif args.command == "draw":
        ShapeFactory.create_shape(args.shape_type).draw()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    try:
        config_manager = ConfigurationManager(args.config)
        logging_config = config_manager.get_logging_config()
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        setup_logging(logging_config)

        logger = get_logger(__name__)
        logger.debug("Executing command", command=args.command, pid=os.getpid())

        execute_command(args, config_manager)
        return 0
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
