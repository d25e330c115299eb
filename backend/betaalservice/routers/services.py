"""Payment service (provider configuration) endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from betaalservice.core.database import get_db
from betaalservice.models.service import Service
from betaalservice.repositories.organization_repository import OrganizationRepository
from betaalservice.repositories.service_repository import ServiceRepository
from betaalservice.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate

router = APIRouter()


@router.get("/", response_model=list[ServiceResponse], summary="List services")
async def list_services(
    response: Response,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    organization_id: UUID | None = None,
    type: str | None = None,
    db: Session = Depends(get_db),
) -> list[Service]:
    """List services, oldest first; the first one of an organization is used for payments."""
    repo = ServiceRepository(db)
    response.headers["X-Total-Count"] = str(repo.count(organization_id))
    return repo.get_all(organization_id=organization_id, skip=skip, limit=limit, type=type)


@router.post(
    "/",
    response_model=ServiceResponse,
    status_code=201,
    summary="Create service",
    responses={404: {"description": "Organization not found"}},
)
async def create_service(
    data: ServiceCreate,
    db: Session = Depends(get_db),
) -> Service:
    if not OrganizationRepository(db).get_by_id(data.organization_id):
        raise HTTPException(status_code=404, detail="Organization not found")
    return ServiceRepository(db).create(data)


@router.get(
    "/{service_id}",
    response_model=ServiceResponse,
    summary="Get service",
    responses={404: {"description": "Service not found"}},
)
async def get_service(
    service_id: UUID,
    db: Session = Depends(get_db),
) -> Service:
    service = ServiceRepository(db).get_by_id(service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.put(
    "/{service_id}",
    response_model=ServiceResponse,
    summary="Update service",
    responses={404: {"description": "Service not found"}},
)
async def update_service(
    service_id: UUID,
    data: ServiceUpdate,
    db: Session = Depends(get_db),
) -> Service:
    service = ServiceRepository(db).update(service_id, data)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.delete(
    "/{service_id}",
    status_code=204,
    summary="Delete service",
    responses={404: {"description": "Service not found"}},
)
async def delete_service(
    service_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    if not ServiceRepository(db).delete(service_id):
        raise HTTPException(status_code=404, detail="Service not found")
