"""
Bind-parameter placeholders for raw SQL statements
"""
from enum import Enum
from typing import Any, Dict, List, Sequence, Union


class ParamStyle(str, Enum):
    """Placeholder syntax of a query dialect"""
    NUMERIC_DOLLAR = "numeric_dollar"  # $1, $2 (PostgreSQL / asyncpg)
    QMARK = "qmark"                    # ?, ? (sqlite3)
    NAMED = "named"                    # :p1, :p2 (SQLAlchemy text())


class ParameterBinder:
    """
    Produces placeholder tokens and driver-ready parameters for one dialect.

    Ordinals are 1-based and follow encounter order, so the n-th token in the
    statement always refers to the n-th value handed to ``bind``.
    """

    def __init__(self, style: ParamStyle = ParamStyle.NUMERIC_DOLLAR, prefix: str = "p"):
        self.style = ParamStyle(style)
        self.prefix = prefix

    def placeholder(self, ordinal: int) -> str:
        """Token for a single 1-based ordinal"""
        if ordinal < 1:
            raise ValueError(f"Placeholder ordinals start at 1, got {ordinal}")
        if self.style is ParamStyle.NUMERIC_DOLLAR:
            return f"${ordinal}"
        if self.style is ParamStyle.NAMED:
            return f":{self.prefix}{ordinal}"
        return "?"

    def placeholders(self, count: int, start: int = 1) -> List[str]:
        """Ordered placeholder tokens for ``count`` consecutive slots"""
        if count < 0:
            raise ValueError(f"Placeholder count must be non-negative, got {count}")
        return [self.placeholder(ordinal) for ordinal in range(start, start + count)]

    def bind(self, values: Sequence[Any]) -> Union[List[Any], Dict[str, Any]]:
        """Shape a positional value list the way the driver call expects it"""
        if self.style is ParamStyle.NAMED:
            return {f"{self.prefix}{ordinal}": value for ordinal, value in enumerate(values, start=1)}
        return list(values)

    def __repr__(self) -> str:
        return f"ParameterBinder(style={self.style.value!r})"
