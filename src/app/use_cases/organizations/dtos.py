"""
Organization Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.app.use_cases.common import PageMeta
from src.domain.entities import Branch, Organization, OrganizationStatus


class CreateOrganizationCommand(BaseModel):
    name: str
    code: Optional[str] = None
    email: Optional[str] = None
    currency_code: str = "USD"
    timezone: str = "UTC"
    status: OrganizationStatus = OrganizationStatus.active
    settings: Optional[dict] = None


class UpdateOrganizationCommand(BaseModel):
    """Partial update - only fields explicitly set are applied"""

    name: Optional[str] = None
    code: Optional[str] = None
    email: Optional[str] = None
    currency_code: Optional[str] = None
    timezone: Optional[str] = None
    status: Optional[OrganizationStatus] = None
    settings: Optional[dict] = None


class ListOrganizationsQuery(BaseModel):
    status: Optional[OrganizationStatus] = None
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1)


class OrganizationResponse(BaseModel):
    id: str
    tenant_id: str
    name: str
    code: Optional[str]
    email: Optional[str]
    currency_code: str
    timezone: str
    status: str
    settings: Optional[dict]
    created_at: datetime

    @classmethod
    def from_entity(cls, organization: Organization) -> "OrganizationResponse":
        return cls(
            id=str(organization.id),
            tenant_id=str(organization.tenant_id),
            name=organization.name,
            code=organization.code,
            email=organization.email,
            currency_code=organization.currency_code,
            timezone=organization.timezone,
            status=OrganizationStatus(organization.status).value,
            settings=organization.settings,
            created_at=organization.created_at,
        )


class OrganizationListResponse(BaseModel):
    data: List[OrganizationResponse]
    meta: PageMeta


class CreateBranchCommand(BaseModel):
    parent_id: Optional[UUID] = None
    name: str
    code: Optional[str] = None
    status: OrganizationStatus = OrganizationStatus.active


class BranchResponse(BaseModel):
    id: str
    organization_id: str
    parent_id: Optional[str]
    name: str
    code: Optional[str]
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, branch: Branch) -> "BranchResponse":
        return cls(
            id=str(branch.id),
            organization_id=str(branch.organization_id),
            parent_id=str(branch.parent_id) if branch.parent_id else None,
            name=branch.name,
            code=branch.code,
            status=OrganizationStatus(branch.status).value,
            created_at=branch.created_at,
        )
