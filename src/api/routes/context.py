"""
Context API Route

Shows which tenant a request resolves to and how.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.app.use_cases.context import RequestContext
from src.depends import get_request_context

router = APIRouter(tags=["Context"])


class TenantContextResponse(BaseModel):
    id: str
    name: str
    subdomain: str
    domain: Optional[str]
    status: str
    resolved_by: str


class ContextResponse(BaseModel):
    """GET /context response payload"""

    tenant: TenantContextResponse
    user_id: str
    role: str


@router.get("/context", status_code=status.HTTP_200_OK, response_model=ContextResponse)
async def get_context(context: RequestContext = Depends(get_request_context)):
    """
    Current Tenant Context

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: TENANT_INACTIVE, TENANT_MISMATCH
        - 404 Not Found: TENANT_NOT_FOUND
    """
    tenant = context.tenant
    return ContextResponse(
        tenant=TenantContextResponse(
            id=str(tenant.tenant_id),
            name=tenant.name,
            subdomain=tenant.subdomain,
            domain=tenant.domain,
            status=tenant.status,
            resolved_by=tenant.resolved_by.value,
        ),
        user_id=str(context.user_id),
        role=context.role,
    )
