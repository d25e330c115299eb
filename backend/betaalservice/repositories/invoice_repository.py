from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy.orm import Session

from betaalservice.models.currency import CurrencyCode
from betaalservice.models.invoice import Invoice
from betaalservice.models.invoice_item import InvoiceItem
from betaalservice.models.payment import Payment
from betaalservice.models.shared import quantize_money
from betaalservice.schemas.invoice import InvoiceCreate, InvoiceUpdate


class InvoiceRepository:
    def __init__(self, db: Session):
        self.db = db

    def _generate_reference(self) -> str:
        """Generate a unique invoice reference."""
        today = datetime.now().strftime("%Y%m%d")
        prefix = f"INV-{today}-"

        # Get the highest reference for today
        result = (
            self.db.query(Invoice.reference)
            .filter(Invoice.reference.like(f"{prefix}%"))
            .order_by(Invoice.reference.desc())
            .first()
        )

        if result:
            # Extract number from INV-YYYYMMDD-XXXX format
            try:
                new_num = int(result[0].split("-")[-1]) + 1
            except (ValueError, IndexError):
                new_num = 1
        else:
            new_num = 1

        return f"{prefix}{new_num:04d}"

    def ensure_item_currency(self, invoice: Invoice, currency: str) -> None:
        """Raise ValueError when an item currency differs from the invoice's."""
        invoice_currency = CurrencyCode(invoice.price_currency).value
        item_currency = CurrencyCode(currency).value
        if item_currency != invoice_currency:
            msg = (
                f"item is priced in {item_currency}, "
                f"invoice {invoice.reference} is in {invoice_currency}"
            )
            raise ValueError(msg)

    def get_all(
        self,
        organization_id: UUID | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[Invoice]:
        query = self.db.query(Invoice)
        if organization_id is not None:
            query = query.filter(Invoice.organization_id == organization_id)
        return query.order_by(Invoice.created_at.desc()).offset(skip).limit(limit).all()

    def count(self, organization_id: UUID | None = None) -> int:
        query = self.db.query(Invoice)
        if organization_id is not None:
            query = query.filter(Invoice.organization_id == organization_id)
        return query.count()

    def get_by_id(self, invoice_id: UUID) -> Invoice | None:
        return self.db.query(Invoice).filter(Invoice.id == invoice_id).first()

    def get_by_reference(self, reference: str) -> Invoice | None:
        return self.db.query(Invoice).filter(Invoice.reference == reference).first()

    def get_items(self, invoice_id: UUID) -> list[InvoiceItem]:
        return (
            self.db.query(InvoiceItem)
            .filter(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.created_at.asc())
            .all()
        )

    def create(self, data: InvoiceCreate) -> Invoice:
        invoice = Invoice(
            **data.model_dump(exclude={"items"}),
            reference=self._generate_reference(),
        )
        self.db.add(invoice)
        self.db.flush()

        for item in data.items:
            self.db.add(InvoiceItem(**item.model_dump(), invoice_id=invoice.id))
        self.db.flush()

        self._apply_totals(invoice)
        self.db.commit()
        self.db.refresh(invoice)
        return invoice

    def update(self, invoice_id: UUID, data: InvoiceUpdate) -> Invoice | None:
        invoice = self.get_by_id(invoice_id)
        if not invoice:
            return None
        changes = data.model_dump(exclude_unset=True)
        currency = changes.get("price_currency")
        if currency is not None:
            code = CurrencyCode(currency).value
            for item in self.get_items(invoice_id):
                item_currency = CurrencyCode(item.price_currency).value
                if item_currency != code:
                    msg = f"invoice {invoice.reference} has items priced in {item_currency}"
                    raise ValueError(msg)
        for key, value in changes.items():
            setattr(invoice, key, value)
        self.db.commit()
        self.db.refresh(invoice)
        return invoice

    def _apply_totals(self, invoice: Invoice) -> None:
        price = Decimal(0)
        tax = Decimal(0)
        for item in self.get_items(invoice.id):  # type: ignore[arg-type]
            line = Decimal(str(item.price)) * int(item.quantity)  # type: ignore[arg-type]
            price += line
            tax += line * int(item.tax_percentage) / 100  # type: ignore[arg-type]
        invoice.price = quantize_money(price)  # type: ignore[assignment]
        invoice.tax = quantize_money(tax)  # type: ignore[assignment]

    def recalculate_totals(self, invoice_id: UUID) -> Invoice | None:
        """Recompute price and tax from the invoice's items."""
        invoice = self.get_by_id(invoice_id)
        if not invoice:
            return None
        self._apply_totals(invoice)
        self.db.commit()
        self.db.refresh(invoice)
        return invoice

    def set_payment_url(self, invoice: Invoice, payment_url: str) -> Invoice:
        invoice.payment_url = payment_url  # type: ignore[assignment]
        self.db.commit()
        self.db.refresh(invoice)
        return invoice

    def has_payments(self, invoice_id: UUID) -> bool:
        return self.db.query(Payment).filter(Payment.invoice_id == invoice_id).first() is not None

    def delete(self, invoice_id: UUID) -> bool:
        """Delete an invoice together with its items."""
        invoice = self.get_by_id(invoice_id)
        if not invoice:
            return False
        self.db.query(InvoiceItem).filter(InvoiceItem.invoice_id == invoice_id).delete()
        self.db.delete(invoice)
        self.db.commit()
        return True
