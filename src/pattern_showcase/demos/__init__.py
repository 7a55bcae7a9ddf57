"""Demonstration entry points, one module per pattern."""

from .registry import (
    DemoRegistration,
    DemoRegistry,
    UnknownDemoError,
    get_demo_registry,
    register_default_demos,
)

__all__ = [
    "DemoRegistration",
    "DemoRegistry",
    "UnknownDemoError",
    "get_demo_registry",
    "register_default_demos",
]
