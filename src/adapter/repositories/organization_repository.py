from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.pagination import paginate
from src.app.repositories.organization_repository import IOrganizationRepository
from src.domain.entities import Organization, OrganizationStatus


class OrganizationRepository(IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id_for_tenant(
        self, organization_id: UUID, tenant_id: UUID
    ) -> Optional[Organization]:
        stmt = select(Organization).where(
            Organization.id == organization_id,
            Organization.tenant_id == tenant_id,
            col(Organization.deleted_at).is_(None),
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_by_tenant_paginated(
        self,
        tenant_id: UUID,
        status: Optional[OrganizationStatus] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[Organization], int]:
        stmt = select(Organization).where(
            Organization.tenant_id == tenant_id,
            col(Organization.deleted_at).is_(None),
        )
        if status is not None:
            stmt = stmt.where(Organization.status == status)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(col(Organization.name).ilike(pattern), col(Organization.code).ilike(pattern))
            )
        stmt = stmt.order_by(col(Organization.name))
        return await paginate(self.session, stmt, page, per_page)

    async def count_by_tenant(self, tenant_id: UUID) -> int:
        stmt = select(func.count()).select_from(Organization).where(
            Organization.tenant_id == tenant_id,
            col(Organization.deleted_at).is_(None),
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, organization: Organization) -> Organization:
        self.session.add(organization)
        await self.session.flush()
        await self.session.refresh(organization)
        return organization

    async def update(self, organization: Organization) -> Organization:
        self.session.add(organization)
        await self.session.flush()
        await self.session.refresh(organization)
        return organization
