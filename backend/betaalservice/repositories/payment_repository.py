"""Payment repository for data access."""

from uuid import UUID

from sqlalchemy.orm import Session

from betaalservice.models.payment import Payment, PaymentStatus
from betaalservice.schemas.payment import PaymentCreate, PaymentUpdate


class PaymentRepository:
    """Repository for Payment model."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        invoice_id: UUID | None = None,
        status: PaymentStatus | None = None,
    ) -> list[Payment]:
        """Get all payments with optional filters."""
        query = self.db.query(Payment)

        if invoice_id:
            query = query.filter(Payment.invoice_id == invoice_id)
        if status:
            query = query.filter(Payment.status == status.value)

        return query.order_by(Payment.created_at.desc()).offset(skip).limit(limit).all()

    def count(self, invoice_id: UUID | None = None) -> int:
        query = self.db.query(Payment)
        if invoice_id:
            query = query.filter(Payment.invoice_id == invoice_id)
        return query.count()

    def get_by_id(self, payment_id: UUID) -> Payment | None:
        """Get a payment by ID."""
        return self.db.query(Payment).filter(Payment.id == payment_id).first()

    def create(self, data: PaymentCreate) -> Payment:
        """Create a new payment record."""
        payment = Payment(**data.model_dump())
        self.db.add(payment)
        self.db.commit()
        self.db.refresh(payment)
        return payment

    def update(self, payment_id: UUID, data: PaymentUpdate) -> Payment | None:
        """Update a payment."""
        payment = self.get_by_id(payment_id)
        if not payment:
            return None
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(payment, key, value)
        self.db.commit()
        self.db.refresh(payment)
        return payment

    def delete(self, payment_id: UUID) -> bool:
        """Delete a payment."""
        payment = self.get_by_id(payment_id)
        if not payment:
            return False
        self.db.delete(payment)
        self.db.commit()
        return True
