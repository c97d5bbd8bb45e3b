"""
SQL statement construction helpers
"""
from .binder import ParamStyle, ParameterBinder
from .update_builder import PartialUpdateBuilder, UpdateStatement, validate_identifier

__all__ = [
    "ParamStyle",
    "ParameterBinder",
    "PartialUpdateBuilder",
    "UpdateStatement",
    "validate_identifier",
]
