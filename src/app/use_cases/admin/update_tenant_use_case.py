"""
Use Case: Update Tenant

Partial update of tenant attributes by the platform admin.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent

from .dtos import TenantResponse, UpdateTenantCommand


class UpdateTenantUseCase:
    """
    Business Rules:
    - Only fields present in the command are changed
    - subdomain / domain stay unique across tenants
    - name and subdomain cannot be cleared
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: UpdateTenantCommand
    ) -> Result[TenantResponse]:
        changes = command.model_dump(exclude_unset=True)

        for required in ("name", "subdomain", "status"):
            if required in changes and changes[required] is None:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Field '{required}' cannot be null")
                )

        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if not tenant:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            if "subdomain" in changes:
                changes["subdomain"] = changes["subdomain"].strip().lower()
                existing = await self.uow.tenants.get_by_subdomain(changes["subdomain"])
                if existing and existing.id != tenant.id:
                    return Return.err(
                        Error("SUBDOMAIN_TAKEN", "Subdomain is already in use")
                    )

            if changes.get("domain"):
                changes["domain"] = changes["domain"].strip().lower()
                existing = await self.uow.tenants.get_by_domain(changes["domain"])
                if existing and existing.id != tenant.id:
                    return Return.err(Error("DOMAIN_TAKEN", "Domain is already in use"))

            for field, value in changes.items():
                setattr(tenant, field, value)
            tenant.updated_at = utcnow()
            tenant = await self.uow.tenants.update(tenant)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    action="tenant_updated",
                    event_metadata={"fields": sorted(changes.keys())},
                )
            )

            await self.uow.commit()

            return Return.ok(TenantResponse.from_entity(tenant))
