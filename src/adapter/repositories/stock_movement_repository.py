from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import case, func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.pagination import paginate
from src.app.repositories.stock_movement_repository import IStockMovementRepository
from src.domain.entities import Organization, StockMovement, StockMovementType
from src.domain.ledger import to_amount


class StockMovementRepository(IStockMovementRepository):
    """StockMovement repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _for_tenant(self, tenant_id: UUID):
        return (
            select(StockMovement)
            .join(Organization, Organization.id == StockMovement.organization_id)
            .where(
                Organization.tenant_id == tenant_id,
                col(Organization.deleted_at).is_(None),
            )
        )

    async def get_by_id_for_tenant(
        self, movement_id: UUID, tenant_id: UUID
    ) -> Optional[StockMovement]:
        stmt = self._for_tenant(tenant_id).where(StockMovement.id == movement_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_for_tenant_paginated(
        self,
        tenant_id: UUID,
        organization_id: Optional[UUID] = None,
        product_id: Optional[UUID] = None,
        location_id: Optional[UUID] = None,
        movement_type: Optional[StockMovementType] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[StockMovement], int]:
        stmt = self._for_tenant(tenant_id)
        if organization_id is not None:
            stmt = stmt.where(StockMovement.organization_id == organization_id)
        if product_id is not None:
            stmt = stmt.where(StockMovement.product_id == product_id)
        if location_id is not None:
            stmt = stmt.where(StockMovement.location_id == location_id)
        if movement_type is not None:
            stmt = stmt.where(StockMovement.movement_type == movement_type)
        if from_date is not None:
            stmt = stmt.where(
                col(StockMovement.movement_date) >= datetime.combine(from_date, time.min)
            )
        if to_date is not None:
            stmt = stmt.where(
                col(StockMovement.movement_date)
                < datetime.combine(to_date + timedelta(days=1), time.min)
            )
        stmt = stmt.order_by(
            col(StockMovement.movement_date).desc(), col(StockMovement.created_at).desc()
        )
        return await paginate(self.session, stmt, page, per_page)

    async def create(self, movement: StockMovement) -> StockMovement:
        self.session.add(movement)
        await self.session.flush()
        await self.session.refresh(movement)
        return movement

    async def update(self, movement: StockMovement) -> StockMovement:
        self.session.add(movement)
        await self.session.flush()
        await self.session.refresh(movement)
        return movement

    async def delete(self, movement: StockMovement) -> None:
        await self.session.delete(movement)
        await self.session.flush()

    async def sum_signed_quantity(
        self, product_id: UUID, location_id: Optional[UUID] = None
    ) -> Decimal:
        signed = case(
            (
                StockMovement.movement_type == StockMovementType.stock_in,
                col(StockMovement.quantity),
            ),
            else_=-col(StockMovement.quantity),
        )
        stmt = select(func.coalesce(func.sum(signed), 0)).where(
            StockMovement.product_id == product_id
        )
        if location_id is not None:
            stmt = stmt.where(StockMovement.location_id == location_id)
        result = await self.session.exec(stmt)
        return to_amount(result.one())
