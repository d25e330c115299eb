"""InvoiceItem model - a priced line on an invoice."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from betaalservice.core.database import Base
from betaalservice.models.shared import MoneyType, UUIDType, generate_uuid, utc_now


class InvoiceItem(Base):
    """An item placed on an invoice, referencing the offer it was ordered from."""

    __tablename__ = "invoice_items"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    invoice_id = Column(
        UUIDType,
        ForeignKey("invoices.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(255), nullable=False)
    description = Column(String(2550), nullable=True)
    offer = Column(String(255), nullable=False)
    _product = Column("product", String(255), nullable=True)
    quantity = Column(Integer, nullable=False)
    price = Column(MoneyType, nullable=False)
    price_currency = Column(String(3), nullable=False, default="EUR")
    tax_percentage = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    @property
    def product(self) -> str | None:
        """Deprecated, replaced by ``offer``.

        Falls back to the offer when no product was ever set.
        """
        if self._product:
            return self._product
        return self.offer

    @product.setter
    def product(self, value: str | None) -> None:
        self._product = value
