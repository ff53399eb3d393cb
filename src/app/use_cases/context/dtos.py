"""
Tenant Context DTOs

The per-request tenant handle produced by tenant resolution. It is a
snapshot of plain values so it never triggers lazy loads once the
resolving session is closed.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import TenantResolution


class TenantContext(BaseModel):
    """Tenant the current request is scoped to"""

    model_config = ConfigDict(frozen=True)

    tenant_id: UUID
    name: str
    subdomain: str
    domain: Optional[str] = None
    status: str
    resolved_by: TenantResolution


class RequestContext(BaseModel):
    """Tenant plus acting user, threaded into business use cases"""

    model_config = ConfigDict(frozen=True)

    tenant: TenantContext
    user_id: UUID
    role: str

    @property
    def tenant_id(self) -> UUID:
        return self.tenant.tenant_id
