from uuid import UUID

from sqlalchemy.orm import Session

from betaalservice.models.invoice import Invoice
from betaalservice.models.organization import Organization
from betaalservice.models.service import Service
from betaalservice.schemas.organization import OrganizationCreate, OrganizationUpdate


class OrganizationRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Organization]:
        return (
            self.db.query(Organization)
            .order_by(Organization.created_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count(self) -> int:
        return self.db.query(Organization).count()

    def get_by_id(self, org_id: UUID) -> Organization | None:
        return self.db.query(Organization).filter(Organization.id == org_id).first()

    def create(self, data: OrganizationCreate) -> Organization:
        org = Organization(**data.model_dump())
        self.db.add(org)
        self.db.commit()
        self.db.refresh(org)
        return org

    def update(self, org_id: UUID, data: OrganizationUpdate) -> Organization | None:
        org = self.get_by_id(org_id)
        if not org:
            return None
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(org, key, value)
        self.db.commit()
        self.db.refresh(org)
        return org

    def has_dependents(self, org_id: UUID) -> bool:
        """Check whether invoices or services still reference the organization."""
        if self.db.query(Service).filter(Service.organization_id == org_id).first():
            return True
        return self.db.query(Invoice).filter(Invoice.organization_id == org_id).first() is not None

    def delete(self, org_id: UUID) -> bool:
        org = self.get_by_id(org_id)
        if not org:
            return False
        self.db.delete(org)
        self.db.commit()
        return True
