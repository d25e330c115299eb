from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func

from betaalservice.core.database import Base
from betaalservice.models.shared import MoneyType, UUIDType, generate_uuid


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    organization_id = Column(
        UUIDType,
        ForeignKey("organizations.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    reference = Column(String(50), unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)

    # Links to resources in other components
    customer = Column(String(255), nullable=True)
    order = Column(String(255), nullable=True)

    # Totals are derived from the items
    price = Column(MoneyType, nullable=False, default=0)
    tax = Column(MoneyType, nullable=False, default=0)
    price_currency = Column(String(3), nullable=False, default="EUR")

    payment_url = Column(String(2048), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
