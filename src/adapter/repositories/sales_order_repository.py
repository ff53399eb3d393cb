from datetime import date
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.pagination import paginate
from src.app.repositories.sales_order_repository import ISalesOrderRepository
from src.domain.entities import Organization, SalesOrder, SalesOrderLine, SalesOrderStatus
from src.domain.sales import OPEN_STATUSES


class SalesOrderRepository(ISalesOrderRepository):
    """SalesOrder repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _for_tenant(self, tenant_id: UUID):
        return (
            select(SalesOrder)
            .join(Organization, Organization.id == SalesOrder.organization_id)
            .where(
                Organization.tenant_id == tenant_id,
                col(Organization.deleted_at).is_(None),
                col(SalesOrder.deleted_at).is_(None),
            )
        )

    async def get_by_id_for_tenant(
        self, order_id: UUID, tenant_id: UUID, for_update: bool = False
    ) -> Optional[SalesOrder]:
        stmt = self._for_tenant(tenant_id).where(SalesOrder.id == order_id)
        if for_update:
            stmt = stmt.with_for_update(of=SalesOrder)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_number(
        self, organization_id: UUID, order_number: str
    ) -> Optional[SalesOrder]:
        stmt = select(SalesOrder).where(
            SalesOrder.organization_id == organization_id,
            SalesOrder.order_number == order_number,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_for_tenant_paginated(
        self,
        tenant_id: UUID,
        organization_id: Optional[UUID] = None,
        branch_id: Optional[UUID] = None,
        customer_id: Optional[UUID] = None,
        status: Optional[SalesOrderStatus] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[SalesOrder], int]:
        stmt = self._for_tenant(tenant_id)
        if organization_id is not None:
            stmt = stmt.where(SalesOrder.organization_id == organization_id)
        if branch_id is not None:
            stmt = stmt.where(SalesOrder.branch_id == branch_id)
        if customer_id is not None:
            stmt = stmt.where(SalesOrder.customer_id == customer_id)
        if status is not None:
            stmt = stmt.where(SalesOrder.status == status)
        if from_date is not None:
            stmt = stmt.where(SalesOrder.order_date >= from_date)
        if to_date is not None:
            stmt = stmt.where(SalesOrder.order_date <= to_date)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    col(SalesOrder.order_number).ilike(pattern),
                    col(SalesOrder.reference).ilike(pattern),
                )
            )
        stmt = stmt.order_by(
            col(SalesOrder.order_date).desc(), col(SalesOrder.created_at).desc()
        )
        return await paginate(self.session, stmt, page, per_page)

    async def count_open_for_customer(self, customer_id: UUID) -> int:
        stmt = select(func.count()).where(
            SalesOrder.customer_id == customer_id,
            col(SalesOrder.status).in_(list(OPEN_STATUSES)),
            col(SalesOrder.deleted_at).is_(None),
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def get_lines(self, order_id: UUID) -> List[SalesOrderLine]:
        stmt = (
            select(SalesOrderLine)
            .where(SalesOrderLine.sales_order_id == order_id)
            .order_by(col(SalesOrderLine.line_number))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_lines_for_orders(
        self, order_ids: List[UUID]
    ) -> Dict[UUID, List[SalesOrderLine]]:
        lines_by_order: Dict[UUID, List[SalesOrderLine]] = {
            order_id: [] for order_id in order_ids
        }
        if not order_ids:
            return lines_by_order
        stmt = (
            select(SalesOrderLine)
            .where(col(SalesOrderLine.sales_order_id).in_(order_ids))
            .order_by(col(SalesOrderLine.line_number))
        )
        result = await self.session.exec(stmt)
        for line in result.all():
            lines_by_order[line.sales_order_id].append(line)
        return lines_by_order

    async def create(self, order: SalesOrder, lines: List[SalesOrderLine]) -> SalesOrder:
        self.session.add(order)
        await self.session.flush()
        for line in lines:
            line.sales_order_id = order.id
            self.session.add(line)
        await self.session.flush()
        await self.session.refresh(order)
        return order

    async def replace_lines(
        self, order_id: UUID, lines: List[SalesOrderLine]
    ) -> List[SalesOrderLine]:
        await self.session.execute(
            delete(SalesOrderLine).where(SalesOrderLine.sales_order_id == order_id)
        )
        for line in lines:
            line.sales_order_id = order_id
            self.session.add(line)
        await self.session.flush()
        return lines

    async def update(self, order: SalesOrder) -> SalesOrder:
        self.session.add(order)
        await self.session.flush()
        await self.session.refresh(order)
        return order
