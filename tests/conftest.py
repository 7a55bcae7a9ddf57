import logging

import pytest
import structlog

from pattern_showcase.demos.registry import DemoRegistry
from pattern_showcase.domain.printing import Printer


@pytest.fixture(autouse=True)
def reset_printer_singleton():
    """Give every test a fresh, unconstructed printer singleton."""
    Printer.reset_instance()
    yield
    Printer.reset_instance()


@pytest.fixture
def demo_registry():
    """Empty demo registry, restored afterwards."""
    registry = DemoRegistry.get_instance()
    saved = registry.list_registrations()
    registry.clear_registrations()
    yield registry
    registry.clear_registrations()
    for registration in saved:
        registry.register_demo(
            registration.name,
            registration.title,
            registration.description,
            registration.runner,
        )


@pytest.fixture
def restore_root_logging():
    """Undo handler and level changes made by setup_logging()."""
    root_logger = logging.getLogger()
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)
