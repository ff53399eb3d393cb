from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import StockMovement, StockMovementType


class IStockMovementRepository(ABC):
    """StockMovement repository interface - application layer"""

    @abstractmethod
    async def get_by_id_for_tenant(
        self, movement_id: UUID, tenant_id: UUID
    ) -> Optional[StockMovement]:
        pass

    @abstractmethod
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
        """List movements ordered by movement_date DESC; dates are inclusive"""
        pass

    @abstractmethod
    async def create(self, movement: StockMovement) -> StockMovement:
        pass

    @abstractmethod
    async def update(self, movement: StockMovement) -> StockMovement:
        pass

    @abstractmethod
    async def delete(self, movement: StockMovement) -> None:
        pass

    @abstractmethod
    async def sum_signed_quantity(
        self, product_id: UUID, location_id: Optional[UUID] = None
    ) -> Decimal:
        """Stock on hand: receipts minus every other movement type"""
        pass
