"""
Organizer repository
"""
from .base import ResourceRepository


class OrganizerRepository(ResourceRepository):
    table = "organizador"
    entity_name = "Organizador"
    columns = ("name", "email", "contact_phone")
    mutable_fields = frozenset(columns)
