from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from betaalservice.schemas.shared import reject_null


class OrganizationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    rsin: str | None = Field(default=None, max_length=255)


class OrganizationUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    rsin: str | None = Field(default=None, max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value: str | None) -> str:
        return reject_null(value)


class OrganizationResponse(BaseModel):
    id: UUID
    name: str
    description: str | None
    rsin: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
