"""
Partial update (PATCH-like) statement builder

Turns ``{field: value}`` into ``UPDATE <table> SET f1=$1, f2=$2 WHERE id=$3
RETURNING *`` plus the matching parameter list. Only column names reach the
statement text, and only after they pass the entity's allow-list; values are
always bound.
"""
import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from app.core.exceptions import NoFieldsProvidedError, UnknownFieldError
from .binder import ParameterBinder

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_identifier(name: str) -> str:
    """Reject anything that is not a bare SQL identifier"""
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return name


@dataclass(frozen=True)
class UpdateStatement:
    """Statement text plus its ordered bind parameters"""
    text: str
    params: List[Any]


class PartialUpdateBuilder:
    """Builds single-row partial updates for one table"""

    def __init__(
        self,
        table: str,
        allowed_fields: Iterable[str],
        binder: Optional[ParameterBinder] = None,
        id_column: str = "id",
        returning: bool = True,
    ):
        self.table = validate_identifier(table)
        self.id_column = validate_identifier(id_column)
        self.allowed_fields = frozenset(validate_identifier(field) for field in allowed_fields)
        if self.id_column in self.allowed_fields:
            raise ValueError(f"Identifier column '{self.id_column}' cannot be an update target")
        self.binder = binder or ParameterBinder()
        self.returning = returning

    def build(self, record_id: Any, fields: Mapping[str, Any]) -> UpdateStatement:
        """
        Build the UPDATE for ``record_id`` from ``fields``.

        Raises:
            UnknownFieldError: a key is not in the allow-list
            NoFieldsProvidedError: ``fields`` is empty
        """
        unknown = [key for key in fields if key not in self.allowed_fields]
        if unknown:
            raise UnknownFieldError(unknown, table=self.table)
        if not fields:
            raise NoFieldsProvidedError()

        columns = list(fields.keys())
        tokens = self.binder.placeholders(len(columns) + 1)
        assignments = ", ".join(f"{column}={token}" for column, token in zip(columns, tokens))

        text = f"UPDATE {self.table} SET {assignments} WHERE {self.id_column}={tokens[-1]}"
        if self.returning:
            text += " RETURNING *"

        params = [fields[column] for column in columns]
        params.append(record_id)
        return UpdateStatement(text=text, params=params)
