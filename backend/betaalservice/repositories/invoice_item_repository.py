from uuid import UUID

from sqlalchemy.orm import Session

from betaalservice.models.invoice_item import InvoiceItem
from betaalservice.repositories.invoice_repository import InvoiceRepository
from betaalservice.schemas.invoice_item import InvoiceItemCreate, InvoiceItemUpdate


class InvoiceItemRepository:
    """Invoice item persistence; every write refreshes the owning invoice's totals."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(
        self,
        invoice_id: UUID | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[InvoiceItem]:
        query = self.db.query(InvoiceItem)
        if invoice_id is not None:
            query = query.filter(InvoiceItem.invoice_id == invoice_id)
        return query.order_by(InvoiceItem.created_at.asc()).offset(skip).limit(limit).all()

    def count(self, invoice_id: UUID | None = None) -> int:
        query = self.db.query(InvoiceItem)
        if invoice_id is not None:
            query = query.filter(InvoiceItem.invoice_id == invoice_id)
        return query.count()

    def get_by_id(self, item_id: UUID) -> InvoiceItem | None:
        return self.db.query(InvoiceItem).filter(InvoiceItem.id == item_id).first()

    def create(self, data: InvoiceItemCreate) -> InvoiceItem:
        invoice_repo = InvoiceRepository(self.db)
        invoice = invoice_repo.get_by_id(data.invoice_id)
        if invoice:
            invoice_repo.ensure_item_currency(invoice, data.price_currency)
        item = InvoiceItem(**data.model_dump())
        self.db.add(item)
        self.db.commit()
        invoice_repo.recalculate_totals(data.invoice_id)
        self.db.refresh(item)
        return item

    def update(self, item_id: UUID, data: InvoiceItemUpdate) -> InvoiceItem | None:
        item = self.get_by_id(item_id)
        if not item:
            return None
        changes = data.model_dump(exclude_unset=True)
        invoice_repo = InvoiceRepository(self.db)
        if "price_currency" in changes:
            invoice = invoice_repo.get_by_id(item.invoice_id)  # type: ignore[arg-type]
            if invoice:
                invoice_repo.ensure_item_currency(invoice, changes["price_currency"])
        for key, value in changes.items():
            setattr(item, key, value)
        self.db.commit()
        invoice_repo.recalculate_totals(item.invoice_id)  # type: ignore[arg-type]
        self.db.refresh(item)
        return item

    def delete(self, item_id: UUID) -> bool:
        item = self.get_by_id(item_id)
        if not item:
            return False
        invoice_id = item.invoice_id
        self.db.delete(item)
        self.db.commit()
        InvoiceRepository(self.db).recalculate_totals(invoice_id)  # type: ignore[arg-type]
        return True
