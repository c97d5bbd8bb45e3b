"""
Base repository with the CRUD statements shared by every resource
"""
import json
import logging
import uuid
from typing import Any, Dict, FrozenSet, List, Mapping, Tuple

from app.core.database import Database, QueryResult
from app.core.exceptions import NotFoundError
from app.db.update_builder import PartialUpdateBuilder, validate_identifier

logger = logging.getLogger(__name__)


class ResourceRepository:
    """
    Raw-SQL data access for one table.

    Subclasses declare the table, the insertable columns (in statement order)
    and the allow-list of fields a partial update may touch. Each method issues
    exactly one statement through the shared ``Database``.
    """

    table: str
    entity_name: str
    columns: Tuple[str, ...] = ()
    mutable_fields: FrozenSet[str] = frozenset()
    json_fields: FrozenSet[str] = frozenset()
    id_column: str = "id"

    def __init__(self, db: Database):
        self.db = db
        self.update_builder = PartialUpdateBuilder(
            self.table,
            self.mutable_fields,
            binder=db.binder,
            id_column=self.id_column,
        )

    @property
    def not_found_message(self) -> str:
        return f"{self.entity_name} não encontrado"

    @property
    def deleted_message(self) -> str:
        return f"{self.entity_name} removido"

    def _encode(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Serialize JSON document fields so they bind as text on every driver"""
        encoded = dict(payload)
        for key in self.json_fields:
            if encoded.get(key) is not None and not isinstance(encoded[key], str):
                encoded[key] = json.dumps(encoded[key])
        return encoded

    def _decode(self, row: Dict[str, Any]) -> Dict[str, Any]:
        for key in self.json_fields:
            if isinstance(row.get(key), str):
                row[key] = json.loads(row[key])
        return row

    def _one(self, result: QueryResult, record_id: Any) -> Dict[str, Any]:
        row = result.first()
        if row is None:
            raise NotFoundError(self.not_found_message, {"id": record_id, "table": self.table})
        return self._decode(row)

    def _select_sql(self) -> str:
        return f"SELECT * FROM {self.table}"

    def _select_by_id_sql(self) -> str:
        return f"{self._select_sql()} WHERE {self.id_column}={self.db.binder.placeholder(1)}"

    async def list(self) -> List[Dict[str, Any]]:
        """Every row of the table"""
        result = await self.db.execute(self._select_sql())
        return [self._decode(row) for row in result.rows]

    async def create(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Insert one row; unsupplied columns bind as NULL"""
        values = self._encode(payload)
        record_id = str(uuid.uuid4())
        columns = (self.id_column,) + tuple(self.columns)
        params = [record_id] + [values.get(column) for column in self.columns]
        placeholders = self.db.binder.placeholders(len(params))

        statement = (
            f"INSERT INTO {self.table} ({', '.join(columns)}) "
            f"VALUES ({', '.join(placeholders)}) RETURNING *"
        )
        result = await self.db.execute(statement, params)
        logger.info(f"Created {self.table} {record_id}")
        return self._decode(result.rows[0])

    async def get_by_id(self, record_id: Any) -> Dict[str, Any]:
        """One row by identifier, NotFoundError when absent"""
        result = await self.db.execute(self._select_by_id_sql(), [record_id])
        return self._one(result, record_id)

    async def update(self, record_id: Any, partial_payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Write only the supplied fields and return the updated row

        Raises:
            NoFieldsProvidedError: empty payload, nothing is sent to the store
            UnknownFieldError: a key is outside ``mutable_fields``
            NotFoundError: no row has this identifier
        """
        statement = self.update_builder.build(record_id, self._encode(partial_payload))
        result = await self.db.execute(statement.text, statement.params)
        if result.affected_count == 0:
            raise NotFoundError(self.not_found_message, {"id": record_id, "table": self.table})
        logger.info(f"Updated {self.table} {record_id}: {', '.join(partial_payload.keys())}")
        return self._decode(result.rows[0])

    async def delete(self, record_id: Any) -> None:
        """Delete one row, NotFoundError when absent"""
        statement = f"DELETE FROM {self.table} WHERE {self.id_column}={self.db.binder.placeholder(1)}"
        result = await self.db.execute(statement, [record_id])
        if result.affected_count == 0:
            raise NotFoundError(self.not_found_message, {"id": record_id, "table": self.table})
        logger.info(f"Deleted {self.table} {record_id}")

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if hasattr(cls, "table"):
            validate_identifier(cls.table)
            for column in cls.columns:
                validate_identifier(column)
