"""
Use Case: Update Account

Partial update including re-parenting within the chart of accounts.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Account

from .dtos import AccountResponse, UpdateAccountCommand


class UpdateAccountUseCase:
    """
    Business Rules:
    - code stays unique within the organization
    - new parent must be in the same organization
    - re-parenting may not create a cycle (ACCOUNT_HIERARCHY_CYCLE)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, account_id: UUID, command: UpdateAccountCommand
    ) -> Result[AccountResponse]:
        changes = command.model_dump(exclude_unset=True)
        for required in ("code", "name", "account_type", "currency_code", "is_active"):
            if required in changes and changes[required] is None:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Field '{required}' cannot be null")
                )

        async with self.uow:
            account = await self.uow.accounts.get_by_id_for_tenant(account_id, tenant_id)
            if not account:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            if "code" in changes and changes["code"] != account.code:
                existing = await self.uow.accounts.get_by_code(
                    account.organization_id, changes["code"]
                )
                if existing and existing.id != account.id:
                    return Return.err(
                        Error(
                            "ACCOUNT_CODE_TAKEN",
                            f"Account code {changes['code']} already exists",
                        )
                    )

            new_parent_id = changes.get("parent_id")
            if new_parent_id is not None:
                parent = await self.uow.accounts.get_by_id_for_tenant(
                    new_parent_id, tenant_id
                )
                if not parent or parent.organization_id != account.organization_id:
                    return Return.err(
                        Error("PARENT_ACCOUNT_NOT_FOUND", "Parent account not found")
                    )
                if await self._creates_cycle(account, parent):
                    return Return.err(
                        Error(
                            "ACCOUNT_HIERARCHY_CYCLE",
                            "Account cannot be placed under itself or its descendants",
                        )
                    )

            for field, value in changes.items():
                setattr(account, field, value)
            account.updated_at = utcnow()
            account = await self.uow.accounts.update(account)
            await self.uow.commit()

            return Return.ok(AccountResponse.from_entity(account))

    async def _creates_cycle(self, account: Account, parent: Account) -> bool:
        """Walk up from the proposed parent; hitting the account means a cycle."""
        seen = set()
        current: Optional[Account] = parent
        while current is not None:
            if current.id == account.id:
                return True
            if current.id in seen:
                # pre-existing cycle above the parent; refuse to extend it
                return True
            seen.add(current.id)
            if current.parent_id is None:
                return False
            current = await self.uow.accounts.get_by_id(current.parent_id)
        return False
