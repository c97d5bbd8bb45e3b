"""
Participant-related Pydantic schemas
"""
from datetime import date, datetime
from typing import Any, Dict, Optional
from pydantic import Field, ConfigDict

from .base import BaseSchema, UpdateSchema


class ParticipantBase(BaseSchema):
    """Base participant schema"""
    full_name: str = Field(..., min_length=1, max_length=255, description="Nome completo", examples=["Ana Maria Silva"])
    email: Optional[str] = Field(None, max_length=255, description="E-mail", examples=["ana.silva@example.com"])
    phone: Optional[str] = Field(None, max_length=50, description="Telefone", examples=["11991234567"])
    date_of_birth: Optional[date] = Field(None, description="Data de nascimento", examples=["1990-05-20"])
    profile: Optional[Dict[str, Any]] = Field(None, description="Perfil livre (documento JSON)", examples=[{"interesses": ["IA", "Cloud"]}])


class ParticipantCreate(ParticipantBase):
    """Schema for creating a participant"""
    pass


class ParticipantUpdate(UpdateSchema):
    """Schema for updating a participant"""
    full_name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    date_of_birth: Optional[date] = None
    profile: Optional[Dict[str, Any]] = None


class Participant(BaseSchema):
    """Schema for participant response"""
    id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    profile: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
