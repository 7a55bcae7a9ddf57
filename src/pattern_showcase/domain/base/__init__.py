"""Base domain components shared by every example."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    InvalidArgumentError,
    InvalidStateError,
    UnrecognizedTypeError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "InvalidArgumentError",
    "UnrecognizedTypeError",
    "InvalidStateError",
    "ConfigurationError",
]
