from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from betaalservice.schemas.shared import reject_null


class ServiceCreate(BaseModel):
    organization_id: UUID
    type: str = Field(..., min_length=1, max_length=50, examples=["mollie", "sumup"])
    authorization: str | None = Field(default=None, max_length=255)
    configuration: dict[str, Any] = Field(default_factory=dict)


class ServiceUpdate(BaseModel):
    type: str | None = Field(default=None, min_length=1, max_length=50)
    authorization: str | None = Field(default=None, max_length=255)
    configuration: dict[str, Any] | None = None

    @field_validator("type")
    @classmethod
    def type_not_null(cls, value: str | None) -> str:
        return reject_null(value)


class ServiceResponse(BaseModel):
    """Service representation; the authorization secret is never returned."""

    id: UUID
    organization_id: UUID
    type: str
    configuration: dict[str, Any] | None
    created_at: datetime

    model_config = {"from_attributes": True}
