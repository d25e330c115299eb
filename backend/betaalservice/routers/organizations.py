"""Organization management endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from betaalservice.core.database import get_db
from betaalservice.models.organization import Organization
from betaalservice.repositories.organization_repository import OrganizationRepository
from betaalservice.schemas.organization import (
    OrganizationCreate,
    OrganizationResponse,
    OrganizationUpdate,
)

router = APIRouter()


@router.get("/", response_model=list[OrganizationResponse], summary="List organizations")
async def list_organizations(
    response: Response,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
) -> list[Organization]:
    repo = OrganizationRepository(db)
    response.headers["X-Total-Count"] = str(repo.count())
    return repo.get_all(skip=skip, limit=limit)


@router.post(
    "/",
    response_model=OrganizationResponse,
    status_code=201,
    summary="Create organization",
    responses={422: {"description": "Validation error"}},
)
async def create_organization(
    data: OrganizationCreate,
    db: Session = Depends(get_db),
) -> Organization:
    return OrganizationRepository(db).create(data)


@router.get(
    "/{organization_id}",
    response_model=OrganizationResponse,
    summary="Get organization",
    responses={404: {"description": "Organization not found"}},
)
async def get_organization(
    organization_id: UUID,
    db: Session = Depends(get_db),
) -> Organization:
    org = OrganizationRepository(db).get_by_id(organization_id)
    if not org:
        raise HTTPException(status_code=404, detail="Organization not found")
    return org


@router.put(
    "/{organization_id}",
    response_model=OrganizationResponse,
    summary="Update organization",
    responses={404: {"description": "Organization not found"}},
)
async def update_organization(
    organization_id: UUID,
    data: OrganizationUpdate,
    db: Session = Depends(get_db),
) -> Organization:
    org = OrganizationRepository(db).update(organization_id, data)
    if not org:
        raise HTTPException(status_code=404, detail="Organization not found")
    return org


@router.delete(
    "/{organization_id}",
    status_code=204,
    summary="Delete organization",
    responses={
        404: {"description": "Organization not found"},
        409: {"description": "Organization still has services or invoices"},
    },
)
async def delete_organization(
    organization_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    repo = OrganizationRepository(db)
    if not repo.get_by_id(organization_id):
        raise HTTPException(status_code=404, detail="Organization not found")
    if repo.has_dependents(organization_id):
        raise HTTPException(
            status_code=409,
            detail="Organization still has services or invoices",
        )
    repo.delete(organization_id)
