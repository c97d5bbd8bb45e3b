"""
Pydantic schemas package
"""
from .base import (
    BaseSchema,
    UpdateSchema,
    ErrorResponse,
    MessageResponse
)
from .organizer import Organizer, OrganizerCreate, OrganizerUpdate
from .event import Event, EventCreate, EventUpdate
from .participant import Participant, ParticipantCreate, ParticipantUpdate
from .registration import Registration, RegistrationCreate, RegistrationUpdate, RegistrationDetail

__all__ = [
    # Base
    "BaseSchema", "UpdateSchema", "ErrorResponse", "MessageResponse",
    # Organizer
    "Organizer", "OrganizerCreate", "OrganizerUpdate",
    # Event
    "Event", "EventCreate", "EventUpdate",
    # Participant
    "Participant", "ParticipantCreate", "ParticipantUpdate",
    # Registration
    "Registration", "RegistrationCreate", "RegistrationUpdate", "RegistrationDetail"
]
