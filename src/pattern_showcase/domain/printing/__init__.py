"""Singleton accessor - Singleton pattern example."""

from .printer import Printer

__all__ = ["Printer"]
