"""Payment model for tracking payments made against invoices."""

from enum import Enum

from sqlalchemy import Column, DateTime, ForeignKey, String, func

from betaalservice.core.database import Base
from betaalservice.models.shared import UUIDType, generate_uuid


class PaymentStatus(str, Enum):
    """Payment status as reported by the provider."""

    OPEN = "open"
    PAID = "paid"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class Payment(Base):
    """Payment model - a payment attempt for an invoice."""

    __tablename__ = "payments"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    invoice_id = Column(
        UUIDType, ForeignKey("invoices.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    service_id = Column(
        UUIDType, ForeignKey("services.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Provider reference, e.g. tr_WDqYK6vllg for Mollie
    payment_id = Column(String(255), nullable=True, index=True)
    status = Column(String(20), nullable=False, default=PaymentStatus.OPEN.value)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
