"""
Use Case: Create Tenant

Platform admin provisions a new tenant workspace.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, Tenant

from .dtos import CreateTenantCommand, TenantResponse


class CreateTenantUseCase:
    """
    Business Logic:
    1. Normalize subdomain / domain to lower case
    2. Reject duplicate subdomain (SUBDOMAIN_TAKEN) or domain (DOMAIN_TAKEN),
       soft-deleted tenants included since the columns are unique
    3. Create tenant and audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateTenantCommand) -> Result[TenantResponse]:
        subdomain = command.subdomain.strip().lower()
        domain = command.domain.strip().lower() if command.domain else None

        async with self.uow:
            if await self.uow.tenants.get_by_subdomain(subdomain):
                return Return.err(Error("SUBDOMAIN_TAKEN", "Subdomain is already in use"))

            if domain and await self.uow.tenants.get_by_domain(domain):
                return Return.err(Error("DOMAIN_TAKEN", "Domain is already in use"))

            tenant = Tenant(
                name=command.name,
                subdomain=subdomain,
                domain=domain,
                status=command.status,
                expires_at=command.expires_at,
                settings=command.settings,
            )
            tenant = await self.uow.tenants.create(tenant)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    action="tenant_created",
                    event_metadata={"subdomain": subdomain, "domain": domain},
                )
            )

            await self.uow.commit()

            return Return.ok(TenantResponse.from_entity(tenant))
