"""Invoice item endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from betaalservice.core.database import get_db
from betaalservice.models.invoice_item import InvoiceItem
from betaalservice.repositories.invoice_item_repository import InvoiceItemRepository
from betaalservice.repositories.invoice_repository import InvoiceRepository
from betaalservice.schemas.invoice_item import (
    InvoiceItemCreate,
    InvoiceItemResponse,
    InvoiceItemUpdate,
)

router = APIRouter()


@router.get("/", response_model=list[InvoiceItemResponse], summary="List invoice items")
async def list_invoice_items(
    response: Response,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    invoice_id: UUID | None = None,
    db: Session = Depends(get_db),
) -> list[InvoiceItem]:
    repo = InvoiceItemRepository(db)
    response.headers["X-Total-Count"] = str(repo.count(invoice_id))
    return repo.get_all(invoice_id=invoice_id, skip=skip, limit=limit)


@router.post(
    "/",
    response_model=InvoiceItemResponse,
    status_code=201,
    summary="Create invoice item",
    responses={
        404: {"description": "Invoice not found"},
        422: {"description": "Item currency differs from the invoice currency"},
    },
)
async def create_invoice_item(
    data: InvoiceItemCreate,
    db: Session = Depends(get_db),
) -> InvoiceItem:
    """Add an item to an invoice; the invoice totals follow."""
    if not InvoiceRepository(db).get_by_id(data.invoice_id):
        raise HTTPException(status_code=404, detail="Invoice not found")
    try:
        return InvoiceItemRepository(db).create(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None


@router.get(
    "/{item_id}",
    response_model=InvoiceItemResponse,
    summary="Get invoice item",
    responses={404: {"description": "Invoice item not found"}},
)
async def get_invoice_item(
    item_id: UUID,
    db: Session = Depends(get_db),
) -> InvoiceItem:
    item = InvoiceItemRepository(db).get_by_id(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Invoice item not found")
    return item


@router.put(
    "/{item_id}",
    response_model=InvoiceItemResponse,
    summary="Update invoice item",
    responses={
        404: {"description": "Invoice item not found"},
        422: {"description": "Item currency differs from the invoice currency"},
    },
)
async def update_invoice_item(
    item_id: UUID,
    data: InvoiceItemUpdate,
    db: Session = Depends(get_db),
) -> InvoiceItem:
    try:
        item = InvoiceItemRepository(db).update(item_id, data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None
    if not item:
        raise HTTPException(status_code=404, detail="Invoice item not found")
    return item


@router.delete(
    "/{item_id}",
    status_code=204,
    summary="Delete invoice item",
    responses={404: {"description": "Invoice item not found"}},
)
async def delete_invoice_item(
    item_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    if not InvoiceItemRepository(db).delete(item_id):
        raise HTTPException(status_code=404, detail="Invoice item not found")
