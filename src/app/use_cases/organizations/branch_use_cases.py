"""
Branch Use Cases

Branches hang off an organization. Their hierarchy is set on creation
only, so it cannot form a cycle.
"""

from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Branch

from .dtos import BranchResponse, CreateBranchCommand
from .organization_use_cases import NOT_FOUND


class CreateBranchUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, organization_id: UUID, command: CreateBranchCommand
    ) -> Result[BranchResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                organization_id, tenant_id
            )
            if not organization:
                return Return.err(NOT_FOUND)

            if command.parent_id is not None:
                parent = await self.uow.branches.get_by_id_for_organization(
                    command.parent_id, organization.id
                )
                if not parent:
                    return Return.err(Error("BRANCH_NOT_FOUND", "Parent branch not found"))

            branch = Branch(organization_id=organization.id, **command.model_dump())
            branch = await self.uow.branches.create(branch)
            await self.uow.commit()
            return Return.ok(BranchResponse.from_entity(branch))


class ListBranchesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, organization_id: UUID
    ) -> Result[List[BranchResponse]]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                organization_id, tenant_id
            )
            if not organization:
                return Return.err(NOT_FOUND)
            branches = await self.uow.branches.list_for_organization(organization.id)
            return Return.ok([BranchResponse.from_entity(b) for b in branches])
