from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.pagination import paginate
from src.app.repositories.tenant_repository import ITenantRepository
from src.domain.entities import Tenant, TenantStatus


class TenantRepository(ITenantRepository):
    """Tenant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _active(self, stmt, now: datetime):
        return stmt.where(
            Tenant.status == TenantStatus.active,
            col(Tenant.deleted_at).is_(None),
            or_(col(Tenant.expires_at).is_(None), col(Tenant.expires_at) > now),
        )

    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID"""
        stmt = select(Tenant).where(
            Tenant.id == tenant_id, col(Tenant.deleted_at).is_(None)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_active_by_subdomain(
        self, subdomain: str, now: datetime
    ) -> Optional[Tenant]:
        stmt = self._active(select(Tenant).where(Tenant.subdomain == subdomain), now)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_active_by_domain(self, domain: str, now: datetime) -> Optional[Tenant]:
        stmt = self._active(select(Tenant).where(Tenant.domain == domain), now)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_subdomain(self, subdomain: str) -> Optional[Tenant]:
        stmt = select(Tenant).where(Tenant.subdomain == subdomain)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_domain(self, domain: str) -> Optional[Tenant]:
        stmt = select(Tenant).where(Tenant.domain == domain)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_paginated(
        self,
        status: Optional[TenantStatus] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[Tenant], int]:
        stmt = select(Tenant).where(col(Tenant.deleted_at).is_(None))
        if status is not None:
            stmt = stmt.where(Tenant.status == status)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(col(Tenant.name).ilike(pattern), col(Tenant.subdomain).ilike(pattern))
            )
        stmt = stmt.order_by(col(Tenant.created_at).desc())
        return await paginate(self.session, stmt, page, per_page)

    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant
