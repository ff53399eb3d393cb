from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.pagination import paginate
from src.app.repositories.customer_repository import ICustomerRepository
from src.domain.entities import Customer, CustomerStatus, Organization


class CustomerRepository(ICustomerRepository):
    """Customer repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _for_tenant(self, tenant_id: UUID):
        return (
            select(Customer)
            .join(Organization, Organization.id == Customer.organization_id)
            .where(
                Organization.tenant_id == tenant_id,
                col(Organization.deleted_at).is_(None),
                col(Customer.deleted_at).is_(None),
            )
        )

    async def get_by_id_for_tenant(
        self, customer_id: UUID, tenant_id: UUID
    ) -> Optional[Customer]:
        stmt = self._for_tenant(tenant_id).where(Customer.id == customer_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_id_for_organization(
        self, customer_id: UUID, organization_id: UUID
    ) -> Optional[Customer]:
        stmt = select(Customer).where(
            Customer.id == customer_id,
            Customer.organization_id == organization_id,
            col(Customer.deleted_at).is_(None),
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_code(self, organization_id: UUID, code: str) -> Optional[Customer]:
        stmt = select(Customer).where(
            Customer.organization_id == organization_id, Customer.code == code
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_for_tenant_paginated(
        self,
        tenant_id: UUID,
        organization_id: Optional[UUID] = None,
        status: Optional[CustomerStatus] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[Customer], int]:
        stmt = self._for_tenant(tenant_id)
        if organization_id is not None:
            stmt = stmt.where(Customer.organization_id == organization_id)
        if status is not None:
            stmt = stmt.where(Customer.status == status)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    col(Customer.name).ilike(pattern),
                    col(Customer.code).ilike(pattern),
                    col(Customer.email).ilike(pattern),
                )
            )
        stmt = stmt.order_by(col(Customer.name))
        return await paginate(self.session, stmt, page, per_page)

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def update(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer
