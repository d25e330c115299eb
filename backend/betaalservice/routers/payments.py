"""Payment API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from betaalservice.core.database import get_db
from betaalservice.models.payment import Payment, PaymentStatus
from betaalservice.repositories.invoice_repository import InvoiceRepository
from betaalservice.repositories.payment_repository import PaymentRepository
from betaalservice.repositories.service_repository import ServiceRepository
from betaalservice.schemas.payment import PaymentCreate, PaymentResponse, PaymentUpdate

router = APIRouter()


@router.get("/", response_model=list[PaymentResponse], summary="List payments")
async def list_payments(
    response: Response,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    invoice_id: UUID | None = None,
    status: PaymentStatus | None = None,
    db: Session = Depends(get_db),
) -> list[Payment]:
    """List payments with optional filters."""
    repo = PaymentRepository(db)
    response.headers["X-Total-Count"] = str(repo.count(invoice_id))
    return repo.get_all(skip=skip, limit=limit, invoice_id=invoice_id, status=status)


@router.post(
    "/",
    response_model=PaymentResponse,
    status_code=201,
    summary="Record payment",
    responses={404: {"description": "Invoice or service not found"}},
)
async def create_payment(
    data: PaymentCreate,
    db: Session = Depends(get_db),
) -> Payment:
    """Record a payment made for an invoice."""
    if not InvoiceRepository(db).get_by_id(data.invoice_id):
        raise HTTPException(status_code=404, detail="Invoice not found")
    if data.service_id and not ServiceRepository(db).get_by_id(data.service_id):
        raise HTTPException(status_code=404, detail="Service not found")
    return PaymentRepository(db).create(data)


@router.get(
    "/{payment_id}",
    response_model=PaymentResponse,
    summary="Get payment",
    responses={404: {"description": "Payment not found"}},
)
async def get_payment(
    payment_id: UUID,
    db: Session = Depends(get_db),
) -> Payment:
    """Get a payment by ID."""
    payment = PaymentRepository(db).get_by_id(payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.put(
    "/{payment_id}",
    response_model=PaymentResponse,
    summary="Update payment",
    responses={404: {"description": "Payment not found"}},
)
async def update_payment(
    payment_id: UUID,
    data: PaymentUpdate,
    db: Session = Depends(get_db),
) -> Payment:
    payment = PaymentRepository(db).update(payment_id, data)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.delete(
    "/{payment_id}",
    status_code=204,
    summary="Delete payment",
    responses={404: {"description": "Payment not found"}},
)
async def delete_payment(
    payment_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    if not PaymentRepository(db).delete(payment_id):
        raise HTTPException(status_code=404, detail="Payment not found")
