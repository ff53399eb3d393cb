"""
Use Case: Get Account Balance

Balance = debits - credits for debit-normal accounts (asset, expense),
credits - debits for credit-normal ones (liability, equity, revenue).
Always a fresh aggregation; nothing is cached.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccountType
from src.domain.ledger import is_debit_normal, signed_balance

from .dtos import AccountBalanceResponse


class GetAccountBalanceUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, account_id: UUID, posted_only: bool = False
    ) -> Result[AccountBalanceResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id_for_tenant(account_id, tenant_id)
            if not account:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            debits, credits = await self.uow.journal_entries.sum_lines_for_account(
                account.id, posted_only=posted_only
            )
            account_type = AccountType(account.account_type)

            return Return.ok(
                AccountBalanceResponse(
                    account_id=str(account.id),
                    account_type=account_type.value,
                    normal_balance="debit" if is_debit_normal(account_type) else "credit",
                    total_debit=debits,
                    total_credit=credits,
                    balance=signed_balance(account_type, debits, credits),
                    posted_only=posted_only,
                )
            )
