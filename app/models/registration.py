"""
Registration database model
"""
from typing import Optional
from sqlalchemy import String, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import BaseModel, CreatedAtMixin


class Registro(BaseModel, CreatedAtMixin):
    """Registration of a participant in an event"""
    __tablename__ = "registro"

    evento_id: Mapped[str] = mapped_column(
        ForeignKey("evento.id", ondelete="CASCADE"), nullable=False, index=True
    )
    participante_id: Mapped[str] = mapped_column(
        ForeignKey("participante.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # free text, conventionally pending / confirmed / canceled
    status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    paid_amount: Mapped[Optional[float]] = mapped_column(Numeric(10, 2), nullable=True)

    evento: Mapped["Evento"] = relationship("Evento", back_populates="registros")
    participante: Mapped["Participante"] = relationship("Participante", back_populates="registros")
