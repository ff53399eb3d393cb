"""
Account read and delete use cases.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import build_page_meta
from src.domain.base import utcnow

from .dtos import AccountListResponse, AccountResponse, ListAccountsQuery

NOT_FOUND = Error("ACCOUNT_NOT_FOUND", "Account not found")


class ListAccountsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, query: ListAccountsQuery
    ) -> Result[AccountListResponse]:
        async with self.uow:
            accounts, total = await self.uow.accounts.list_for_tenant_paginated(
                tenant_id,
                organization_id=query.organization_id,
                account_type=query.account_type,
                is_active=query.is_active,
                search=query.search,
                page=query.page,
                per_page=query.per_page,
            )
            return Return.ok(
                AccountListResponse(
                    data=[AccountResponse.from_entity(a) for a in accounts],
                    meta=build_page_meta(query.page, query.per_page, total),
                )
            )


class GetAccountUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, account_id: UUID) -> Result[AccountResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id_for_tenant(account_id, tenant_id)
            if not account:
                return Return.err(NOT_FOUND)
            return Return.ok(AccountResponse.from_entity(account))


class DeleteAccountUseCase:
    """Soft delete; existing journal lines keep referencing the account"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, account_id: UUID) -> Result[None]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id_for_tenant(account_id, tenant_id)
            if not account:
                return Return.err(NOT_FOUND)

            account.deleted_at = utcnow()
            await self.uow.accounts.update(account)
            await self.uow.commit()
            return Return.ok(None)
