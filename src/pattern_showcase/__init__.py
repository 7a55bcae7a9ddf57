"""Pattern Showcase - Root Package.

This package provides small, runnable demonstrations of classic object-oriented
design patterns. Each demonstration builds a tiny object graph and prints the
code path it executed.

Key Components:
    - domain: The pattern participants (subjects, strategies, factories, ...)
    - demos: Fixed-input demonstration entry points, one per pattern
    - config: Configuration schema and loading
    - infrastructure: Logging and registries
    - cli: Command line runner

Usage:
    >>> pattern-showcase list
    >>> pattern-showcase run decorator
    >>> python -m pattern_showcase.demos.observer
"""

__version__ = "1.0.0"
__author__ = "Pattern Showcase Contributors"
