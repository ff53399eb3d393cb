"""
Admin API Routes - Platform Tenant Administration

Tenants live outside any tenant context, so these endpoints are
authenticated with the Admin API Key rather than user JWTs.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    CreateTenantCommand,
    CreateTenantUseCase,
    DeleteTenantUseCase,
    GetTenantUseCase,
    ListTenantsQuery,
    ListTenantsUseCase,
    RestoreTenantUseCase,
    SuspendTenantUseCase,
    TenantListResponse,
    TenantResponse,
    TenantStatusResponse,
    UpdateTenantCommand,
    UpdateTenantUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import TenantStatus

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(verify_admin_api_key)],
)

SUBDOMAIN_PATTERN = r"^[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$"


class CreateTenantRequest(BaseModel):
    """
    Create tenant HTTP request payload

    Validates incoming request before converting to CreateTenantCommand.
    """

    name: str = Field(..., min_length=1, max_length=255)
    subdomain: str = Field(..., max_length=63, pattern=SUBDOMAIN_PATTERN)
    domain: Optional[str] = Field(None, min_length=1, max_length=255)
    status: TenantStatus = TenantStatus.active
    expires_at: Optional[datetime] = None
    settings: Optional[dict] = None


class UpdateTenantRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    subdomain: Optional[str] = Field(None, max_length=63, pattern=SUBDOMAIN_PATTERN)
    domain: Optional[str] = Field(None, min_length=1, max_length=255)
    status: Optional[TenantStatus] = None
    expires_at: Optional[datetime] = None
    settings: Optional[dict] = None


@router.get("/tenants", status_code=status.HTTP_200_OK, response_model=TenantListResponse)
async def list_tenants(
    uow: UnitOfWork = Depends(get_unit_of_work),
    status_filter: Optional[TenantStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    per_page: int = Query(
        ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE
    ),
):
    """
    List Tenants

    Query Parameters:
        - status: active | inactive | suspended
        - search: matches name or subdomain
        - page, per_page: pagination
    """
    use_case = ListTenantsUseCase(uow)
    result = await use_case.execute(
        ListTenantsQuery(status=status_filter, search=search, page=page, per_page=per_page)
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/tenants", status_code=status.HTTP_201_CREATED, response_model=TenantResponse)
async def create_tenant(
    request: CreateTenantRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Tenant

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 409 Conflict: SUBDOMAIN_TAKEN, DOMAIN_TAKEN
        - 422 Unprocessable Entity: Invalid payload
    """
    use_case = CreateTenantUseCase(uow)
    result = await use_case.execute(CreateTenantCommand(**request.model_dump()))
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/tenants/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantResponse
)
async def get_tenant(tenant_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = GetTenantUseCase(uow)
    result = await use_case.execute(tenant_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/tenants/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantResponse
)
async def update_tenant(
    tenant_id: UUID,
    request: UpdateTenantRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Tenant (partial)

    Raises:
        - 404 Not Found: TENANT_NOT_FOUND
        - 409 Conflict: SUBDOMAIN_TAKEN, DOMAIN_TAKEN
    """
    command = UpdateTenantCommand(**request.model_dump(exclude_unset=True))
    use_case = UpdateTenantUseCase(uow)
    result = await use_case.execute(tenant_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/tenants/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant(tenant_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Soft-delete Tenant

    Raises:
        - 404 Not Found: TENANT_NOT_FOUND
        - 409 Conflict: TENANT_HAS_ORGANIZATIONS
    """
    use_case = DeleteTenantUseCase(uow)
    result = await use_case.execute(tenant_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/tenants/{tenant_id}/suspend",
    status_code=status.HTTP_200_OK,
    response_model=TenantStatusResponse,
)
async def suspend_tenant(tenant_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Suspend Tenant

    Suspended tenants are no longer resolvable by subdomain or domain;
    requests addressing them by X-Tenant-ID receive 403 TENANT_INACTIVE.
    """
    use_case = SuspendTenantUseCase(uow)
    result = await use_case.execute(tenant_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/tenants/{tenant_id}/restore",
    status_code=status.HTTP_200_OK,
    response_model=TenantStatusResponse,
)
async def restore_tenant(tenant_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = RestoreTenantUseCase(uow)
    result = await use_case.execute(tenant_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
