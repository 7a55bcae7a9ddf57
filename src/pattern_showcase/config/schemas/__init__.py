"""Configuration schemas."""

from .app_schema import AppConfig, LoggingConfig

__all__ = ["AppConfig", "LoggingConfig"]
