"""
Use Case: Restore Tenant

Sets a suspended or inactive tenant back to active. Expiry is left
untouched, so an expired tenant stays inactive until expires_at is moved.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, TenantStatus

from .dtos import TenantStatusResponse


class RestoreTenantUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> Result[TenantStatusResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if not tenant:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            previous = TenantStatus(tenant.status)
            tenant.status = TenantStatus.active
            tenant.updated_at = utcnow()
            await self.uow.tenants.update(tenant)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    action="tenant_restored",
                    event_metadata={"previous_status": previous.value},
                )
            )

            await self.uow.commit()

            return Return.ok(
                TenantStatusResponse(id=str(tenant_id), status=TenantStatus.active.value)
            )
