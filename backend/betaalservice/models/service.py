"""Service model - a payment provider integration configured on an organization."""

from enum import Enum

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String

from betaalservice.core.database import Base
from betaalservice.models.shared import UUIDType, generate_uuid, utc_now


class ServiceType(str, Enum):
    """Payment provider types with a known integration."""

    MOLLIE = "mollie"
    SUMUP = "sumup"


class Service(Base):
    """Payment provider configuration.

    ``type`` is kept as a free string so that services for providers without an
    integration can still be stored; they are skipped when creating payments.
    """

    __tablename__ = "services"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    organization_id = Column(
        UUIDType,
        ForeignKey("organizations.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    type = Column(String(50), nullable=False)
    authorization = Column(String(255), nullable=True)
    configuration = Column(JSON, nullable=True, default=dict)

    # Microsecond precision, the first service of an organization is the active one
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
