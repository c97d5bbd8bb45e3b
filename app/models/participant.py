"""
Participant database model
"""
from datetime import date
from typing import Any, Dict, List, Optional
from sqlalchemy import JSON, String, Date
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import BaseModel, CreatedAtMixin


class Participante(BaseModel, CreatedAtMixin):
    """Person who registers for events"""
    __tablename__ = "participante"

    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    profile: Mapped[Optional[Dict[str, Any]]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=True
    )

    registros: Mapped[List["Registro"]] = relationship(
        "Registro", back_populates="participante", cascade="all, delete-orphan", passive_deletes=True
    )
