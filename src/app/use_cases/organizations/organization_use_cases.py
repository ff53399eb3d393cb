"""
Organization Use Cases

CRUD over organizations, always scoped to the resolved tenant. An
organization of another tenant is reported as ORGANIZATION_NOT_FOUND.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import build_page_meta
from src.domain.base import utcnow
from src.domain.entities import Organization

from .dtos import (
    CreateOrganizationCommand,
    ListOrganizationsQuery,
    OrganizationListResponse,
    OrganizationResponse,
    UpdateOrganizationCommand,
)

NOT_FOUND = Error("ORGANIZATION_NOT_FOUND", "Organization not found")


class CreateOrganizationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: CreateOrganizationCommand
    ) -> Result[OrganizationResponse]:
        async with self.uow:
            organization = Organization(tenant_id=tenant_id, **command.model_dump())
            organization = await self.uow.organizations.create(organization)
            await self.uow.commit()
            return Return.ok(OrganizationResponse.from_entity(organization))


class ListOrganizationsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, query: ListOrganizationsQuery
    ) -> Result[OrganizationListResponse]:
        async with self.uow:
            organizations, total = await self.uow.organizations.list_by_tenant_paginated(
                tenant_id,
                status=query.status,
                search=query.search,
                page=query.page,
                per_page=query.per_page,
            )
            return Return.ok(
                OrganizationListResponse(
                    data=[OrganizationResponse.from_entity(o) for o in organizations],
                    meta=build_page_meta(query.page, query.per_page, total),
                )
            )


class GetOrganizationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, organization_id: UUID
    ) -> Result[OrganizationResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                organization_id, tenant_id
            )
            if not organization:
                return Return.err(NOT_FOUND)
            return Return.ok(OrganizationResponse.from_entity(organization))


class UpdateOrganizationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        organization_id: UUID,
        command: UpdateOrganizationCommand,
    ) -> Result[OrganizationResponse]:
        changes = command.model_dump(exclude_unset=True)
        for required in ("name", "currency_code", "timezone", "status"):
            if required in changes and changes[required] is None:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Field '{required}' cannot be null")
                )

        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                organization_id, tenant_id
            )
            if not organization:
                return Return.err(NOT_FOUND)

            for field, value in changes.items():
                setattr(organization, field, value)
            organization.updated_at = utcnow()
            organization = await self.uow.organizations.update(organization)
            await self.uow.commit()
            return Return.ok(OrganizationResponse.from_entity(organization))


class DeleteOrganizationUseCase:
    """Soft delete; accounts and entries stay in place but become unreachable"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, organization_id: UUID) -> Result[None]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                organization_id, tenant_id
            )
            if not organization:
                return Return.err(NOT_FOUND)

            organization.deleted_at = utcnow()
            await self.uow.organizations.update(organization)
            await self.uow.commit()
            return Return.ok(None)
