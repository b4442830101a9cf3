"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    OneSignalError,
    TransportError,
    UnknownError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "OneSignalError",
    "TransportError",
    "UnknownError",
    "ValidationError",
]
