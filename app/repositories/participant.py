"""
Participant repository
"""
from .base import ResourceRepository


class ParticipantRepository(ResourceRepository):
    table = "participante"
    entity_name = "Participante"
    columns = ("full_name", "email", "phone", "date_of_birth", "profile")
    # created_at is written once by the database
    mutable_fields = frozenset(columns)
    json_fields = frozenset({"profile"})
