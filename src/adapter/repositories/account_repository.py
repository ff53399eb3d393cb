from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.pagination import paginate
from src.app.repositories.account_repository import IAccountRepository
from src.domain.entities import Account, AccountType, Organization


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _for_tenant(self, tenant_id: UUID):
        return (
            select(Account)
            .join(Organization, Organization.id == Account.organization_id)
            .where(
                Organization.tenant_id == tenant_id,
                col(Organization.deleted_at).is_(None),
                col(Account.deleted_at).is_(None),
            )
        )

    async def get_by_id_for_tenant(
        self, account_id: UUID, tenant_id: UUID
    ) -> Optional[Account]:
        stmt = self._for_tenant(tenant_id).where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        stmt = select(Account).where(
            Account.id == account_id, col(Account.deleted_at).is_(None)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_code(self, organization_id: UUID, code: str) -> Optional[Account]:
        stmt = select(Account).where(
            Account.organization_id == organization_id, Account.code == code
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_many_for_organization(
        self, account_ids: Iterable[UUID], organization_id: UUID
    ) -> List[Account]:
        ids = list(set(account_ids))
        if not ids:
            return []
        stmt = select(Account).where(
            col(Account.id).in_(ids),
            Account.organization_id == organization_id,
            col(Account.deleted_at).is_(None),
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_tenant_paginated(
        self,
        tenant_id: UUID,
        organization_id: Optional[UUID] = None,
        account_type: Optional[AccountType] = None,
        is_active: Optional[bool] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[Account], int]:
        stmt = self._for_tenant(tenant_id)
        if organization_id is not None:
            stmt = stmt.where(Account.organization_id == organization_id)
        if account_type is not None:
            stmt = stmt.where(Account.account_type == account_type)
        if is_active is not None:
            stmt = stmt.where(Account.is_active == is_active)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(col(Account.name).ilike(pattern), col(Account.code).ilike(pattern))
            )
        stmt = stmt.order_by(col(Account.code))
        return await paginate(self.session, stmt, page, per_page)

    async def create(self, account: Account) -> Account:
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account
