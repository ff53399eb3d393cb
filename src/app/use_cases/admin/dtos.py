"""
Tenant Administration DTOs (Data Transfer Objects)

Command and Response classes for platform-level tenant management.
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, Field

from src.app.use_cases.common import PageMeta
from src.domain.base import to_naive_utc
from src.domain.entities import Tenant, TenantStatus

UtcDateTime = Annotated[Optional[datetime], AfterValidator(to_naive_utc)]


# ============================================================================
# Commands
# ============================================================================


class CreateTenantCommand(BaseModel):
    """Create tenant command - validated platform admin intent"""

    name: str
    subdomain: str
    domain: Optional[str] = None
    status: TenantStatus = TenantStatus.active
    expires_at: UtcDateTime = None
    settings: Optional[dict] = None


class UpdateTenantCommand(BaseModel):
    """
    Partial update - only fields explicitly set are applied.

    Setting domain or expires_at to null clears them.
    """

    name: Optional[str] = None
    subdomain: Optional[str] = None
    domain: Optional[str] = None
    status: Optional[TenantStatus] = None
    expires_at: UtcDateTime = None
    settings: Optional[dict] = None


class ListTenantsQuery(BaseModel):
    status: Optional[TenantStatus] = None
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1)


# ============================================================================
# Response DTOs
# ============================================================================


class TenantResponse(BaseModel):
    """Tenant representation"""

    id: str
    name: str
    subdomain: str
    domain: Optional[str]
    status: str
    is_active: bool
    expires_at: Optional[datetime]
    settings: Optional[dict]
    created_at: datetime

    @classmethod
    def from_entity(cls, tenant: Tenant) -> "TenantResponse":
        return cls(
            id=str(tenant.id),
            name=tenant.name,
            subdomain=tenant.subdomain,
            domain=tenant.domain,
            status=TenantStatus(tenant.status).value,
            is_active=tenant.is_active(),
            expires_at=tenant.expires_at,
            settings=tenant.settings,
            created_at=tenant.created_at,
        )


class TenantListResponse(BaseModel):
    data: List[TenantResponse]
    meta: PageMeta


class TenantStatusResponse(BaseModel):
    """Response for suspend / restore"""

    id: str
    status: str
