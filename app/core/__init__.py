"""
Core application components
"""
from .exceptions import (
    EventRegistryException,
    ValidationError,
    NoFieldsProvidedError,
    UnknownFieldError,
    NotFoundError,
    DatabaseError
)

__all__ = [
    # Exceptions
    "EventRegistryException",
    "ValidationError",
    "NoFieldsProvidedError",
    "UnknownFieldError",
    "NotFoundError",
    "DatabaseError"
]
