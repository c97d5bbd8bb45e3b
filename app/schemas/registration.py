"""
Registration-related Pydantic schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import Field, ConfigDict

from .base import BaseSchema, UpdateSchema


class RegistrationBase(BaseSchema):
    """Base registration schema"""
    evento_id: str = Field(..., description="ID do evento")
    participante_id: str = Field(..., description="ID do participante")
    status: Optional[str] = Field(None, max_length=20, description="Situação, ex.: pending, confirmed ou canceled", examples=["pending"])
    paid_amount: Optional[float] = Field(None, description="Valor pago", examples=[0.0])


class RegistrationCreate(RegistrationBase):
    """Schema for creating a registration"""
    pass


class RegistrationUpdate(UpdateSchema):
    """Schema for updating a registration"""
    evento_id: Optional[str] = None
    participante_id: Optional[str] = None
    status: Optional[str] = Field(None, max_length=20)
    paid_amount: Optional[float] = None


class Registration(BaseSchema):
    """Schema for registration response"""
    id: str
    evento_id: Optional[str] = None
    participante_id: Optional[str] = None
    status: Optional[str] = None
    paid_amount: Optional[float] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class RegistrationDetail(Registration):
    """Registration joined with participant name and event title"""
    full_name: Optional[str] = Field(None, description="Nome do participante")
    title: Optional[str] = Field(None, description="Título do evento")
