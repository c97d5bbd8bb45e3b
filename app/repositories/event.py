"""
Event repository
"""
from .base import ResourceRepository


class EventRepository(ResourceRepository):
    table = "evento"
    entity_name = "Evento"
    columns = (
        "organizador_id",
        "title",
        "description",
        "location",
        "start_at",
        "end_at",
        "capacity",
        "price",
        "status",
    )
    mutable_fields = frozenset(columns)
