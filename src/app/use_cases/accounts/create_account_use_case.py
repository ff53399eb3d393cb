"""
Use Case: Create Account
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account

from .dtos import AccountResponse, CreateAccountCommand


class CreateAccountUseCase:
    """
    Business Rules:
    - Organization must belong to the caller's tenant
    - code is unique within the organization
    - parent (if any) must be an account of the same organization
    - currency defaults to the organization's currency
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: CreateAccountCommand
    ) -> Result[AccountResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                command.organization_id, tenant_id
            )
            if not organization:
                return Return.err(
                    Error("ORGANIZATION_NOT_FOUND", "Organization not found")
                )

            if await self.uow.accounts.get_by_code(organization.id, command.code):
                return Return.err(
                    Error("ACCOUNT_CODE_TAKEN", f"Account code {command.code} already exists")
                )

            if command.parent_id is not None:
                parent = await self.uow.accounts.get_by_id_for_tenant(
                    command.parent_id, tenant_id
                )
                if not parent or parent.organization_id != organization.id:
                    return Return.err(
                        Error("PARENT_ACCOUNT_NOT_FOUND", "Parent account not found")
                    )

            account = Account(
                organization_id=organization.id,
                parent_id=command.parent_id,
                code=command.code,
                name=command.name,
                account_type=command.account_type,
                currency_code=command.currency_code or organization.currency_code,
                description=command.description,
                is_active=command.is_active,
            )
            account = await self.uow.accounts.create(account)
            await self.uow.commit()

            return Return.ok(AccountResponse.from_entity(account))
