"""Invoice endpoints.

Creates and updates go through the payment creation interceptor, which answers
with the invoice as HAL JSON including its payment URL.
"""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from betaalservice.core.database import get_db
from betaalservice.core.interceptors import with_view_interceptors
from betaalservice.models.invoice import Invoice
from betaalservice.repositories.invoice_repository import InvoiceRepository
from betaalservice.repositories.organization_repository import OrganizationRepository
from betaalservice.schemas.invoice import InvoiceCreate, InvoiceResponse, InvoiceUpdate
from betaalservice.schemas.invoice_item import InvoiceItemResponse
from betaalservice.services.hal import HAL_MEDIA_TYPE
from betaalservice.services.payment_interceptor import PaymentCreationInterceptor

router = APIRouter()

HAL_RESPONSE = {
    200: {
        "description": "Invoice with its payment URL",
        "content": {HAL_MEDIA_TYPE: {}},
    },
    502: {"description": "Payment provider error"},
}


def _invoice_response(invoice: Invoice, repo: InvoiceRepository) -> InvoiceResponse:
    items = repo.get_items(invoice.id)  # type: ignore[arg-type]
    return InvoiceResponse.model_validate(invoice).model_copy(
        update={"items": [InvoiceItemResponse.model_validate(item) for item in items]}
    )


@router.get("/", response_model=list[InvoiceResponse], summary="List invoices")
async def list_invoices(
    response: Response,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    organization_id: UUID | None = None,
    db: Session = Depends(get_db),
) -> list[InvoiceResponse]:
    repo = InvoiceRepository(db)
    response.headers["X-Total-Count"] = str(repo.count(organization_id))
    invoices = repo.get_all(organization_id=organization_id, skip=skip, limit=limit)
    return [_invoice_response(invoice, repo) for invoice in invoices]


@router.post(
    "/",
    response_model=InvoiceResponse,
    status_code=201,
    summary="Create invoice",
    responses={**HAL_RESPONSE, 404: {"description": "Organization not found"}},
)
@with_view_interceptors(PaymentCreationInterceptor)
async def create_invoice(
    data: InvoiceCreate,
    request: Request,
    db: Session = Depends(get_db),
) -> Any:
    """Create an invoice with its items and request a payment URL for it."""
    if not OrganizationRepository(db).get_by_id(data.organization_id):
        raise HTTPException(status_code=404, detail="Organization not found")
    return InvoiceRepository(db).create(data)


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    summary="Get invoice",
    responses={404: {"description": "Invoice not found"}},
)
async def get_invoice(
    invoice_id: UUID,
    db: Session = Depends(get_db),
) -> InvoiceResponse:
    repo = InvoiceRepository(db)
    invoice = repo.get_by_id(invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return _invoice_response(invoice, repo)


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    summary="Update invoice",
    responses={
        **HAL_RESPONSE,
        404: {"description": "Invoice not found"},
        422: {"description": "Invoice has items priced in another currency"},
    },
)
@with_view_interceptors(PaymentCreationInterceptor)
async def update_invoice(
    invoice_id: UUID,
    data: InvoiceUpdate,
    request: Request,
    db: Session = Depends(get_db),
) -> Any:
    """Update an invoice and request a fresh payment URL for it."""
    try:
        invoice = InvoiceRepository(db).update(invoice_id, data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.delete(
    "/{invoice_id}",
    status_code=204,
    summary="Delete invoice",
    responses={
        404: {"description": "Invoice not found"},
        409: {"description": "Invoice has payments"},
    },
)
async def delete_invoice(
    invoice_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    """Delete an invoice and its items."""
    repo = InvoiceRepository(db)
    invoice = repo.get_by_id(invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    if repo.has_payments(invoice_id):
        raise HTTPException(status_code=409, detail="Invoice has payments")
    repo.delete(invoice_id)
