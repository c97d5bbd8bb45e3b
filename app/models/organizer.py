"""
Organizer database model
"""
from typing import List, Optional
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import BaseModel


class Organizador(BaseModel):
    """Event organizer"""
    __tablename__ = "organizador"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    eventos: Mapped[List["Evento"]] = relationship(
        "Evento", back_populates="organizador", cascade="all, delete-orphan", passive_deletes=True
    )
