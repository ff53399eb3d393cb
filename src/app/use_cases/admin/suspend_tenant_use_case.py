"""
Use Case: Suspend Tenant

Billing/support endpoint to suspend a tenant. A suspended tenant is no
longer resolvable by subdomain or domain, and requests reaching it by
X-Tenant-ID are rejected as inactive.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, TenantStatus

from .dtos import TenantStatusResponse


class SuspendTenantUseCase:
    """
    Business Logic:
    1. Validate tenant exists
    2. Update tenant status to suspended
    3. Create audit event

    Idempotent: suspending an already-suspended tenant succeeds
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> Result[TenantStatusResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if not tenant:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            previous = TenantStatus(tenant.status)
            tenant.status = TenantStatus.suspended
            tenant.updated_at = utcnow()
            await self.uow.tenants.update(tenant)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=None,  # System action, no specific user
                    action="tenant_suspended",
                    event_metadata={"previous_status": previous.value},
                )
            )

            await self.uow.commit()

            return Return.ok(
                TenantStatusResponse(id=str(tenant_id), status=TenantStatus.suspended.value)
            )
