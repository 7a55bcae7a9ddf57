"""Demo Registry - maps demo names to their entry points.

New demos are added by registering their runner, without touching the CLI.
"""

import threading
from typing import Callable, Dict, List, Optional

from pattern_showcase.domain.base.exceptions import ConfigurationError, UnrecognizedTypeError
from pattern_showcase.infrastructure.logging.logger import get_logger


class UnknownDemoError(UnrecognizedTypeError):
    """Exception raised when an unregistered demo is requested."""

    def __init__(self, demo_name: str, supported: List[str]):
        super().__init__("demo", demo_name, supported)


class DemoRegistration:
    """Container for demo registration information."""

    def __init__(self, name: str, title: str, description: str, runner: Callable[[], None]):
        """
        Initialize demo registration.

        Args:
            name: Key used on the command line (e.g., 'observer')
            title: Human-readable pattern name (e.g., 'Observer')
            description: One-line summary of what the demo shows
            runner: Zero-argument callable that runs the demo
        """
        self.name = name
        self.title = title
        self.description = description
        self.runner = runner

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "title": self.title, "description": self.description}


class DemoRegistry:
    """
    Registry of runnable demos, preserving registration order.

    Thread-safe singleton implementation.
    """

    _instance: Optional["DemoRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize demo registry."""
        self._registrations: Dict[str, DemoRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "DemoRegistry":
        """Get singleton instance of demo registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def register_demo(
        self, name: str, title: str, description: str, runner: Callable[[], None]
    ) -> None:
        """
        Register a demo runner.

        Raises:
            ConfigurationError: If a demo with this name is already registered
        """
        with self._registration_lock:
            if name in self._registrations:
                raise ConfigurationError(f"Demo '{name}' is already registered")
            self._registrations[name] = DemoRegistration(name, title, description, runner)
            self._logger.debug("Registered demo", demo=name)

    def register_demo_if_absent(
        self, name: str, title: str, description: str, runner: Callable[[], None]
    ) -> bool:
        """Register a demo unless the name is taken; returns True if it was added."""
        with self._registration_lock:
            if name in self._registrations:
                return False
            self.register_demo(name, title, description, runner)
            return True

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def get_registration(self, name: str) -> DemoRegistration:
        """
        Get the registration for a demo.

        Raises:
            UnknownDemoError: If no demo with this name is registered
        """
        registration = self._registrations.get(name)
        if registration is None:
            raise UnknownDemoError(name, self.get_registered_demos())
        return registration

    def get_registered_demos(self) -> List[str]:
        """Get registered demo names in registration order."""
        return list(self._registrations)

    def list_registrations(self) -> List[DemoRegistration]:
        return list(self._registrations.values())

    def run_demo(self, name: str) -> None:
        """Run a registered demo by name."""
        registration = self.get_registration(name)
        self._logger.info("Running demo", demo=name)
        registration.runner()

    def clear_registrations(self) -> None:
        """Clear all registrations (mainly for testing)."""
        with self._registration_lock:
            self._registrations.clear()


def get_demo_registry() -> DemoRegistry:
    """Get the singleton demo registry instance."""
    return DemoRegistry.get_instance()


def register_default_demos(registry: Optional[DemoRegistry] = None) -> DemoRegistry:
    """Register the six bundled demos; already-registered names are skipped."""
    from pattern_showcase.demos import adapter, decorator, factory, observer, singleton, strategy

    registry = registry or get_demo_registry()
    defaults = [
        ("observer", "Observer", "A stock notifies its displays of price changes", observer.main),
        ("strategy", "Strategy", "A cart pays through an interchangeable strategy", strategy.main),
        ("singleton", "Singleton", "One lazily built printer for the whole process", singleton.main),
        ("factory", "Factory Method", "Shapes created from case-insensitive keys", factory.main),
        ("adapter", "Adapter", "A legacy printer behind the modern interface", adapter.main),
        ("decorator", "Decorator", "Coffee add-ons stacking description and cost", decorator.main),
    ]
    for name, title, description, runner in defaults:
        registry.register_demo_if_absent(name, title, description, runner)
    return registry
