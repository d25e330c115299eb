from uuid import UUID

from sqlalchemy.orm import Session

from betaalservice.models.service import Service
from betaalservice.schemas.service import ServiceCreate, ServiceUpdate


class ServiceRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(
        self,
        organization_id: UUID | None = None,
        skip: int = 0,
        limit: int = 100,
        type: str | None = None,
    ) -> list[Service]:
        query = self.db.query(Service)
        if organization_id is not None:
            query = query.filter(Service.organization_id == organization_id)
        if type:
            query = query.filter(Service.type == type)
        query = query.order_by(Service.created_at.asc(), Service.id.asc())
        return query.offset(skip).limit(limit).all()

    def count(self, organization_id: UUID | None = None) -> int:
        query = self.db.query(Service)
        if organization_id is not None:
            query = query.filter(Service.organization_id == organization_id)
        return query.count()

    def get_by_id(self, service_id: UUID) -> Service | None:
        return self.db.query(Service).filter(Service.id == service_id).first()

    def get_first_for_organization(self, organization_id: UUID) -> Service | None:
        """Return the earliest configured service of an organization."""
        return (
            self.db.query(Service)
            .filter(Service.organization_id == organization_id)
            .order_by(Service.created_at.asc(), Service.id.asc())
            .first()
        )

    def create(self, data: ServiceCreate) -> Service:
        service = Service(**data.model_dump())
        self.db.add(service)
        self.db.commit()
        self.db.refresh(service)
        return service

    def update(self, service_id: UUID, data: ServiceUpdate) -> Service | None:
        service = self.get_by_id(service_id)
        if not service:
            return None
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(service, key, value)
        self.db.commit()
        self.db.refresh(service)
        return service

    def delete(self, service_id: UUID) -> bool:
        service = self.get_by_id(service_id)
        if not service:
            return False
        self.db.delete(service)
        self.db.commit()
        return True
