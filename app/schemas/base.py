"""
Base schema classes and utilities
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator


class BaseSchema(BaseModel):
    """Base schema with common configuration"""
    model_config = ConfigDict(from_attributes=True)


class UpdateSchema(BaseSchema):
    """Partial update payload: every field optional, unknown keys rejected"""
    model_config = ConfigDict(extra="forbid")

    _key_order: List[str] = PrivateAttr(default_factory=list)

    @model_validator(mode="wrap")
    @classmethod
    def remember_key_order(cls, data: Any, handler):
        instance = handler(data)
        if isinstance(data, dict):
            instance._key_order = list(data.keys())
        return instance

    def to_fields(self) -> Dict[str, Any]:
        """Only the fields the client actually sent, in the order they were sent"""
        sent = self.model_dump(exclude_unset=True)
        ordered = {key: sent[key] for key in self._key_order if key in sent}
        ordered.update((key, value) for key, value in sent.items() if key not in ordered)
        return ordered


class ErrorResponse(BaseSchema):
    """Error response schema"""
    error: str
    message: str
    details: Optional[Dict[str, Any]] = None
    timestamp: datetime
    path: str


class MessageResponse(BaseSchema):
    """Plain acknowledgement, e.g. after a delete"""
    msg: str
