import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from betaalservice.core.config import settings
from betaalservice.routers import invoice_items, invoices, organizations, payments, services
from betaalservice.services.payment_provider import PaymentProviderError

logging.getLogger("betaalservice").setLevel(settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Organizations", "description": "Manage organizations."},
    {"name": "Services", "description": "Configure payment providers (Mollie, SumUp)."},
    {"name": "Invoices", "description": "Create invoices and obtain their payment URL."},
    {"name": "Invoice Items", "description": "Manage the priced lines of an invoice."},
    {"name": "Payments", "description": "Record payments made against invoices."},
]

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.version,
    description=(
        "Invoicing API. Invoices written through the API are handed to the "
        "organization's payment provider and returned with a payment URL."
    ),
    openapi_tags=OPENAPI_TAGS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count"],
)


@app.exception_handler(PaymentProviderError)
async def payment_provider_error_handler(
    request: Request, exc: PaymentProviderError
) -> JSONResponse:
    logger.error("Payment provider failed for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


app.include_router(organizations.router, prefix="/v1/organizations", tags=["Organizations"])
app.include_router(services.router, prefix="/v1/services", tags=["Services"])
app.include_router(invoices.router, prefix="/v1/invoices", tags=["Invoices"])
app.include_router(invoice_items.router, prefix="/v1/invoice_items", tags=["Invoice Items"])
app.include_router(payments.router, prefix="/v1/payments", tags=["Payments"])


@app.get("/")
async def root() -> dict[str, str]:
    return {
        "app": settings.APP_NAME,
        "version": settings.version,
        "domain": settings.APP_DOMAIN,
        "status": "running",
    }
