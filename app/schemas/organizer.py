"""
Organizer-related Pydantic schemas
"""
from typing import Optional
from pydantic import Field, ConfigDict

from .base import BaseSchema, UpdateSchema


class OrganizerBase(BaseSchema):
    """Base organizer schema"""
    name: str = Field(..., min_length=1, max_length=255, description="Nome do organizador", examples=["Tech Events Brasil"])
    email: Optional[str] = Field(None, max_length=255, description="E-mail de contato", examples=["contato@techevents.com.br"])
    contact_phone: Optional[str] = Field(None, max_length=50, description="Telefone de contato", examples=["11987654321"])


class OrganizerCreate(OrganizerBase):
    """Schema for creating an organizer"""
    pass


class OrganizerUpdate(UpdateSchema):
    """Schema for updating an organizer"""
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    contact_phone: Optional[str] = Field(None, max_length=50)


class Organizer(BaseSchema):
    """Schema for organizer response"""
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    contact_phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
