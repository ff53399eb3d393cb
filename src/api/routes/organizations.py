"""
Organization API Routes

All endpoints require a resolved tenant and a Bearer token.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.context import RequestContext
from src.app.use_cases.organizations import (
    BranchResponse,
    CreateBranchCommand,
    CreateBranchUseCase,
    CreateOrganizationCommand,
    CreateOrganizationUseCase,
    DeleteOrganizationUseCase,
    GetOrganizationUseCase,
    ListBranchesUseCase,
    ListOrganizationsQuery,
    ListOrganizationsUseCase,
    OrganizationListResponse,
    OrganizationResponse,
    UpdateOrganizationCommand,
    UpdateOrganizationUseCase,
)
from src.depends import get_request_context, get_unit_of_work
from src.domain.entities import OrganizationStatus

router = APIRouter(prefix="/organizations", tags=["Organizations"])


class CreateOrganizationRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    code: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = Field(None, max_length=255)
    currency_code: str = Field(ApplicationConfig.DEFAULT_CURRENCY, min_length=3, max_length=3)
    timezone: str = Field("UTC", max_length=64)
    status: OrganizationStatus = OrganizationStatus.active
    settings: Optional[dict] = None


class UpdateOrganizationRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    code: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = Field(None, max_length=255)
    currency_code: Optional[str] = Field(None, min_length=3, max_length=3)
    timezone: Optional[str] = Field(None, max_length=64)
    status: Optional[OrganizationStatus] = None
    settings: Optional[dict] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=OrganizationListResponse)
async def list_organizations(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    status_filter: Optional[OrganizationStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    per_page: int = Query(
        ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE
    ),
):
    result = await ListOrganizationsUseCase(uow).execute(
        context.tenant_id,
        ListOrganizationsQuery(
            status=status_filter, search=search, page=page, per_page=per_page
        ),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=OrganizationResponse)
async def create_organization(
    request: CreateOrganizationRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateOrganizationUseCase(uow).execute(
        context.tenant_id, CreateOrganizationCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{organization_id}", status_code=status.HTTP_200_OK, response_model=OrganizationResponse
)
async def get_organization(
    organization_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetOrganizationUseCase(uow).execute(context.tenant_id, organization_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{organization_id}", status_code=status.HTTP_200_OK, response_model=OrganizationResponse
)
async def update_organization(
    organization_id: UUID,
    request: UpdateOrganizationRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateOrganizationUseCase(uow).execute(
        context.tenant_id,
        organization_id,
        UpdateOrganizationCommand(**request.model_dump(exclude_unset=True)),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{organization_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_organization(
    organization_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteOrganizationUseCase(uow).execute(context.tenant_id, organization_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


class CreateBranchRequest(BaseModel):
    parent_id: Optional[UUID] = None
    name: str = Field(..., min_length=1, max_length=255)
    code: Optional[str] = Field(None, max_length=50)
    status: OrganizationStatus = OrganizationStatus.active


@router.get(
    "/{organization_id}/branches",
    status_code=status.HTTP_200_OK,
    response_model=List[BranchResponse],
)
async def list_branches(
    organization_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListBranchesUseCase(uow).execute(context.tenant_id, organization_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{organization_id}/branches",
    status_code=status.HTTP_201_CREATED,
    response_model=BranchResponse,
)
async def create_branch(
    organization_id: UUID,
    request: CreateBranchRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateBranchUseCase(uow).execute(
        context.tenant_id, organization_id, CreateBranchCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
