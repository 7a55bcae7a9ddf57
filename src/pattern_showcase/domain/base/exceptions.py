"""Domain exceptions - error taxonomy shared by all examples."""
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class InvalidArgumentError(ValidationError):
    """Raised when a required collaborator is missing or of the wrong kind."""
    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(message or f"Argument '{argument}' must not be None")
        self.argument = argument


class UnrecognizedTypeError(ValidationError):
    """Raised when a discriminator value is outside the known set."""
    def __init__(self, kind: str, type_name: Any, supported: Iterable[str] = ()):
        self.kind = kind
        self.type_name = type_name
        self.supported = sorted(supported)
        super().__init__(
            f"Unrecognized {kind} type: {type_name!r}",
            {"supported": self.supported},
        )


class InvalidStateError(DomainException):
    """Raised when an operation is invoked before its preconditions hold."""
    def __init__(self, operation: str, reason: str):
        super().__init__(f"Cannot {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
