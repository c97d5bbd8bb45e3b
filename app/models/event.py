"""
Event database model
"""
from datetime import datetime
from typing import List, Optional
from sqlalchemy import String, Text, Integer, Numeric, ForeignKey, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import BaseModel


class Evento(BaseModel):
    """Event published by an organizer"""
    __tablename__ = "evento"

    organizador_id: Mapped[str] = mapped_column(
        ForeignKey("organizador.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    start_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Numeric(10, 2), nullable=True)
    # free text, conventionally draft / published
    status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    organizador: Mapped["Organizador"] = relationship("Organizador", back_populates="eventos")
    registros: Mapped[List["Registro"]] = relationship(
        "Registro", back_populates="evento", cascade="all, delete-orphan", passive_deletes=True
    )
