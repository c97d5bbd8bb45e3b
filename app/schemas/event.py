"""
Event-related Pydantic schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import Field, ConfigDict

from .base import BaseSchema, UpdateSchema


class EventBase(BaseSchema):
    """Base event schema"""
    organizador_id: str = Field(..., description="ID do organizador", examples=["org-001"])
    title: str = Field(..., min_length=1, max_length=255, description="Título", examples=["Workshop de Programação"])
    description: Optional[str] = Field(None, description="Descrição")
    location: Optional[str] = Field(None, max_length=255, description="Local", examples=["São Paulo - Centro"])
    start_at: datetime = Field(..., description="Início", examples=["2025-10-10T09:00:00-03:00"])
    end_at: Optional[datetime] = Field(None, description="Término", examples=["2025-10-10T17:00:00-03:00"])
    capacity: Optional[int] = Field(None, description="Capacidade", examples=[40])
    price: Optional[float] = Field(None, description="Preço", examples=[120.0])
    status: Optional[str] = Field(None, max_length=20, description="Situação, ex.: draft ou published", examples=["draft"])


class EventCreate(EventBase):
    """Schema for creating an event"""
    pass


class EventUpdate(UpdateSchema):
    """Schema for updating an event"""
    organizador_id: Optional[str] = None
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    capacity: Optional[int] = None
    price: Optional[float] = None
    status: Optional[str] = Field(None, max_length=20)


class Event(BaseSchema):
    """Schema for event response"""
    id: str
    organizador_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    capacity: Optional[int] = None
    price: Optional[float] = None
    status: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
