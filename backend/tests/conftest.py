"""Shared test fixtures for all test modules."""

import contextlib

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import betaalservice.models  # noqa: F401  registers all tables on Base.metadata
from betaalservice.core import database as db_module
from betaalservice.core.database import Base, get_db
from betaalservice.main import app
from betaalservice.models.organization import Organization
from betaalservice.models.shared import DEFAULT_ORGANIZATION_ID
from betaalservice.repositories.invoice_repository import InvoiceRepository
from betaalservice.repositories.service_repository import ServiceRepository
from betaalservice.schemas.invoice import InvoiceCreate
from betaalservice.schemas.service import ServiceCreate
from tests.factories import make_item

# Create an in-memory SQLite engine with StaticPool so all connections
# share the same database state and there are no file-locking issues.
_test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_test_engine)

DEFAULT_ORG_ID = DEFAULT_ORGANIZATION_ID


def _seed_default_organization(session: Session) -> None:
    """Insert a default organization used by all tests."""
    org = session.query(Organization).filter(Organization.id == DEFAULT_ORG_ID).first()
    if org is None:
        session.add(Organization(id=DEFAULT_ORG_ID, name="Default Test Organization"))
        session.commit()


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and truncate all data after.

    Patches the module-level engine and SessionLocal so all application code
    uses the in-memory test database.
    """
    original_engine = db_module.engine
    original_session = db_module.SessionLocal
    db_module.engine = _test_engine
    db_module.SessionLocal = _TestSessionLocal

    Base.metadata.create_all(bind=_test_engine)

    session = _TestSessionLocal()
    try:
        _seed_default_organization(session)
    finally:
        session.close()

    yield
    with _test_engine.connect() as conn:
        conn.execute(text("PRAGMA foreign_keys = OFF"))
        for table in reversed(Base.metadata.sorted_tables):
            with contextlib.suppress(OperationalError):
                conn.execute(table.delete())
        conn.execute(text("PRAGMA foreign_keys = ON"))
        conn.commit()

    db_module.engine = original_engine
    db_module.SessionLocal = original_session


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def db_session():
    """Create a database session for direct repository testing."""
    gen = get_db()
    db = next(gen)
    try:
        yield db
    finally:
        for _ in gen:
            pass


@pytest.fixture
def default_org_id():
    """Return the default organization ID for tests."""
    return DEFAULT_ORG_ID


@pytest.fixture
def add_service(db_session, default_org_id):
    """Configure a payment service of the given type on the default organization."""

    def _add(service_type: str, **configuration):
        return ServiceRepository(db_session).create(
            ServiceCreate(
                organization_id=default_org_id,
                type=service_type,
                authorization="test_api_key",
                configuration=configuration,
            )
        )

    return _add


@pytest.fixture
def invoice(db_session, default_org_id):
    """An invoice with one item: 2 x 50.00 at 21% tax."""
    return InvoiceRepository(db_session).create(
        InvoiceCreate(
            organization_id=default_org_id,
            name="Parking permit 2026",
            items=[make_item()],
        )
    )
