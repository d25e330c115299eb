"""HAL representation of invoices.

Relations are rendered as ``_links``; items are embedded one level deep and
only link back to their invoice, so serialization never recurses.
"""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from betaalservice.models.invoice import Invoice
from betaalservice.models.invoice_item import InvoiceItem

HAL_MEDIA_TYPE = "application/json+hal"

INVOICE_FIELDS = (
    "id",
    "reference",
    "name",
    "description",
    "customer",
    "order",
    "price",
    "tax",
    "price_currency",
    "payment_url",
    "created_at",
    "updated_at",
)

INVOICE_ITEM_FIELDS = (
    "id",
    "name",
    "description",
    "offer",
    "product",
    "quantity",
    "price",
    "price_currency",
    "tax_percentage",
    "created_at",
)


def camelize(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.title() for part in tail)


def _value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return f"{value:.2f}"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    return value


def _link(href: str) -> dict[str, str]:
    return {"href": href}


def _fields(obj: Any, names: Iterable[str]) -> dict[str, Any]:
    return {camelize(name): _value(getattr(obj, name)) for name in names}


def serialize_invoice_item(item: InvoiceItem) -> dict[str, Any]:
    return {
        "_links": {
            "self": _link(f"/v1/invoice_items/{item.id}"),
            "invoice": _link(f"/v1/invoices/{item.invoice_id}"),
        },
        **_fields(item, INVOICE_ITEM_FIELDS),
    }


def serialize_invoice(invoice: Invoice, items: Iterable[InvoiceItem] = ()) -> dict[str, Any]:
    items = list(items)
    return {
        "_links": {
            "self": _link(f"/v1/invoices/{invoice.id}"),
            "organization": _link(f"/v1/organizations/{invoice.organization_id}"),
            "items": [_link(f"/v1/invoice_items/{item.id}") for item in items],
        },
        **_fields(invoice, INVOICE_FIELDS),
        "_embedded": {"items": [serialize_invoice_item(item) for item in items]},
    }
