"""
Base model classes and utilities
"""
from datetime import datetime
from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models"""
    pass


class IdentifierMixin:
    """String primary key holding a UUID4 assigned on insert"""

    id: Mapped[str] = mapped_column(String(36), primary_key=True)


class CreatedAtMixin:
    """Mixin for a created_at timestamp set once by the database"""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )


class BaseModel(Base, IdentifierMixin):
    """Base model with common fields"""
    __abstract__ = True
