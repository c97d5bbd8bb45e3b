"""
Database models package
"""
from .base import Base, BaseModel, IdentifierMixin, CreatedAtMixin
from .organizer import Organizador
from .event import Evento
from .participant import Participante
from .registration import Registro

__all__ = [
    "Base",
    "BaseModel",
    "IdentifierMixin",
    "CreatedAtMixin",
    "Organizador",
    "Evento",
    "Participante",
    "Registro"
]
