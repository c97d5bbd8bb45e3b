"""
Data access package
"""
from .base import ResourceRepository
from .organizer import OrganizerRepository
from .event import EventRepository
from .participant import ParticipantRepository
from .registration import RegistrationRepository

__all__ = [
    "ResourceRepository",
    "OrganizerRepository",
    "EventRepository",
    "ParticipantRepository",
    "RegistrationRepository"
]
