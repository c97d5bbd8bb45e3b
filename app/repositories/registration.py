"""
Registration repository

Reads join the participant's name and the event's title onto each row.
"""
from .base import ResourceRepository


class RegistrationRepository(ResourceRepository):
    table = "registro"
    entity_name = "Registro"
    columns = ("evento_id", "participante_id", "status", "paid_amount")
    mutable_fields = frozenset(columns)

    def _select_sql(self) -> str:
        return (
            "SELECT r.*, p.full_name, e.title "
            "FROM registro r "
            "JOIN participante p ON p.id = r.participante_id "
            "JOIN evento e ON e.id = r.evento_id"
        )

    def _select_by_id_sql(self) -> str:
        return f"{self._select_sql()} WHERE r.id={self.db.binder.placeholder(1)}"
