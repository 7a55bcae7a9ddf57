"""Configuration package.

The configuration manager lives in ``pattern_showcase.config.manager`` and is
imported from there directly; only the schemas are re-exported here.
"""

from .schemas import AppConfig, LoggingConfig

__all__ = ["AppConfig", "LoggingConfig"]
