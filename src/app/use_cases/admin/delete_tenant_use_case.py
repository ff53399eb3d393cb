"""
Use Case: Delete Tenant

Soft-deletes a tenant. Tenants are never removed while organizations
still reference them.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent


class DeleteTenantUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> Result[None]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if not tenant:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            organizations = await self.uow.organizations.count_by_tenant(tenant_id)
            if organizations > 0:
                return Return.err(
                    Error(
                        "TENANT_HAS_ORGANIZATIONS",
                        f"Tenant still has {organizations} organization(s)",
                    )
                )

            tenant.deleted_at = utcnow()
            await self.uow.tenants.update(tenant)

            await self.uow.audit_events.create(
                AuditEvent(tenant_id=tenant_id, action="tenant_deleted")
            )

            await self.uow.commit()

            return Return.ok(None)
