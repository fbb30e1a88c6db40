"""
Shared base model and response schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every wire model.

    Attributes are snake_case in Python and camelCase in JSON; requests
    may use either spelling.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Health Check Schema
class HealthCheck(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    version: str
    timestamp: datetime = Field(default_factory=datetime.now)


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    message: str
    errors: Optional[list] = None
