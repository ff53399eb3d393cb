from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.branch_repository import IBranchRepository
from src.domain.entities import Branch


class BranchRepository(IBranchRepository):
    """Branch repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id_for_organization(
        self, branch_id: UUID, organization_id: UUID
    ) -> Optional[Branch]:
        stmt = select(Branch).where(
            Branch.id == branch_id,
            Branch.organization_id == organization_id,
            col(Branch.deleted_at).is_(None),
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_for_organization(self, organization_id: UUID) -> List[Branch]:
        stmt = (
            select(Branch)
            .where(
                Branch.organization_id == organization_id,
                col(Branch.deleted_at).is_(None),
            )
            .order_by(col(Branch.name))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, branch: Branch) -> Branch:
        self.session.add(branch)
        await self.session.flush()
        await self.session.refresh(branch)
        return branch
