"""
Custom exceptions for the event registry application
"""
from typing import Any, Dict, Iterable, Optional


class EventRegistryException(Exception):
    """Base exception for the event registry application"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(EventRegistryException):
    """Client supplied data the service cannot act on"""
    pass


class NoFieldsProvidedError(ValidationError):
    """Partial update payload carried no fields"""

    def __init__(self, message: str = "Nenhum campo enviado para atualização.", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class UnknownFieldError(ValidationError):
    """Partial update payload named fields outside the entity's allow-list"""

    def __init__(self, fields: Iterable[str], table: Optional[str] = None):
        fields = sorted(fields)
        details: Dict[str, Any] = {"fields": fields}
        if table:
            details["table"] = table
        super().__init__(f"Campos não permitidos para atualização: {', '.join(fields)}", details)


class NotFoundError(EventRegistryException):
    """Resource not found errors"""
    pass


class DatabaseError(EventRegistryException):
    """Database operation errors"""
    pass
