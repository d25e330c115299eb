from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from betaalservice.models.invoice_item import InvoiceItem
from betaalservice.models.service import Service
from betaalservice.repositories.invoice_item_repository import InvoiceItemRepository
from betaalservice.repositories.invoice_repository import InvoiceRepository
from betaalservice.repositories.organization_repository import OrganizationRepository
from betaalservice.repositories.service_repository import ServiceRepository
from betaalservice.schemas.invoice import InvoiceCreate, InvoiceUpdate
from betaalservice.schemas.invoice_item import InvoiceItemCreate, InvoiceItemUpdate
from betaalservice.schemas.organization import OrganizationCreate
from tests.factories import item_payload, make_item


class TestInvoiceRepository:
    def test_create_computes_totals(self, invoice):
        assert invoice.price == Decimal("100.00")
        assert invoice.tax == Decimal("21.00")
        assert invoice.price_currency == "EUR"
        assert invoice.payment_url is None

    def test_create_stores_items(self, db_session, invoice):
        items = InvoiceRepository(db_session).get_items(invoice.id)
        assert len(items) == 1
        assert items[0].invoice_id == invoice.id
        assert items[0].quantity == 2

    def test_references_are_sequential(self, db_session, default_org_id):
        repo = InvoiceRepository(db_session)
        first = repo.create(InvoiceCreate(organization_id=default_org_id))
        second = repo.create(InvoiceCreate(organization_id=default_org_id))
        prefix = f"INV-{datetime.now().strftime('%Y%m%d')}-"
        assert first.reference == f"{prefix}0001"
        assert second.reference == f"{prefix}0002"
        assert repo.get_by_reference(second.reference).id == second.id

    def test_totals_over_multiple_items(self, db_session, default_org_id):
        invoice = InvoiceRepository(db_session).create(
            InvoiceCreate(
                organization_id=default_org_id,
                items=[
                    make_item(quantity=3, price=Decimal("9.99"), tax_percentage=9),
                    make_item(quantity=1, price=Decimal("0.50"), tax_percentage=0),
                ],
            )
        )
        assert invoice.price == Decimal("30.47")
        # 29.97 * 9% = 2.6973
        assert invoice.tax == Decimal("2.70")

    def test_update(self, db_session, invoice):
        updated = InvoiceRepository(db_session).update(
            invoice.id, InvoiceUpdate(name="Renamed")
        )
        assert updated.name == "Renamed"
        assert updated.price == Decimal("100.00")

    def test_update_currency_with_items_rejected(self, db_session, invoice):
        repo = InvoiceRepository(db_session)
        with pytest.raises(ValueError, match="items priced in EUR"):
            repo.update(invoice.id, InvoiceUpdate(price_currency="USD"))
        assert repo.get_by_id(invoice.id).price_currency == "EUR"

    def test_set_payment_url_persists(self, db_session, invoice):
        repo = InvoiceRepository(db_session)
        repo.set_payment_url(invoice, "https://pay.example.com/abc")
        db_session.expire_all()
        assert repo.get_by_id(invoice.id).payment_url == "https://pay.example.com/abc"

    def test_delete_removes_items(self, db_session, invoice):
        repo = InvoiceRepository(db_session)
        assert repo.delete(invoice.id) is True
        assert repo.get_by_id(invoice.id) is None
        assert db_session.query(InvoiceItem).count() == 0

    def test_delete_missing(self, db_session):
        assert InvoiceRepository(db_session).delete(uuid4()) is False


class TestInvoiceItemRepository:
    def test_create_updates_invoice_totals(self, db_session, invoice):
        InvoiceItemRepository(db_session).create(
            InvoiceItemCreate(invoice_id=invoice.id, **item_payload(quantity=1, price="10.00"))
        )
        refreshed = InvoiceRepository(db_session).get_by_id(invoice.id)
        assert refreshed.price == Decimal("110.00")
        assert refreshed.tax == Decimal("23.10")

    def test_update_and_delete_update_totals(self, db_session, invoice):
        item_repo = InvoiceItemRepository(db_session)
        item = item_repo.get_all(invoice_id=invoice.id)[0]

        item_repo.update(item.id, InvoiceItemUpdate(quantity=1))
        assert InvoiceRepository(db_session).get_by_id(invoice.id).price == Decimal("50.00")

        item_repo.delete(item.id)
        refreshed = InvoiceRepository(db_session).get_by_id(invoice.id)
        assert refreshed.price == Decimal("0.00")
        assert refreshed.tax == Decimal("0.00")

    def test_create_rejects_other_currency(self, db_session, invoice):
        item_repo = InvoiceItemRepository(db_session)
        with pytest.raises(ValueError, match="priced in USD"):
            item_repo.create(
                InvoiceItemCreate(invoice_id=invoice.id, **item_payload(price_currency="USD"))
            )
        assert len(item_repo.get_all(invoice_id=invoice.id)) == 1
        assert InvoiceRepository(db_session).get_by_id(invoice.id).price == Decimal("100.00")

    def test_update_rejects_other_currency(self, db_session, invoice):
        item_repo = InvoiceItemRepository(db_session)
        item = item_repo.get_all(invoice_id=invoice.id)[0]
        with pytest.raises(ValueError, match="priced in JPY"):
            item_repo.update(item.id, InvoiceItemUpdate(price_currency="JPY"))
        assert item_repo.get_by_id(item.id).price_currency == "EUR"


class TestServiceRepository:
    def test_first_service_is_oldest(self, add_service, db_session, default_org_id):
        first = add_service("sumup", merchant_code="M123")
        add_service("mollie")
        found = ServiceRepository(db_session).get_first_for_organization(default_org_id)
        assert found.id == first.id
        assert found.type == "sumup"

    def test_first_service_ties_resolved_by_id(self, db_session, default_org_id):
        created_at = datetime(2026, 10, 16, 12, 0, tzinfo=UTC)
        high = Service(
            id=UUID("ffffffff-0000-4000-8000-000000000000"),
            organization_id=default_org_id,
            type="mollie",
            created_at=created_at,
        )
        low = Service(
            id=UUID("00000000-0000-4000-8000-000000000000"),
            organization_id=default_org_id,
            type="sumup",
            created_at=created_at,
        )
        db_session.add_all([high, low])
        db_session.commit()

        repo = ServiceRepository(db_session)
        assert repo.get_first_for_organization(default_org_id).type == "sumup"
        assert [s.type for s in repo.get_all(default_org_id)] == ["sumup", "mollie"]

    def test_no_services(self, db_session, default_org_id):
        assert ServiceRepository(db_session).get_first_for_organization(default_org_id) is None

    def test_filter_by_type(self, add_service, db_session, default_org_id):
        add_service("sumup", merchant_code="M123")
        add_service("mollie")
        services = ServiceRepository(db_session).get_all(default_org_id, type="mollie")
        assert [s.type for s in services] == ["mollie"]


class TestOrganizationRepository:
    def test_has_dependents(self, db_session, default_org_id, add_service):
        repo = OrganizationRepository(db_session)
        other = repo.create(OrganizationCreate(name="Gemeente Utrecht"))
        assert repo.has_dependents(other.id) is False
        add_service("mollie")
        assert repo.has_dependents(default_org_id) is True
