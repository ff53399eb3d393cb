from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from src.domain.entities import SalesOrder, SalesOrderLine, SalesOrderStatus


class ISalesOrderRepository(ABC):
    """SalesOrder repository interface - application layer"""

    @abstractmethod
    async def get_by_id_for_tenant(
        self, order_id: UUID, tenant_id: UUID, for_update: bool = False
    ) -> Optional[SalesOrder]:
        """
        Get sales order by ID, only if its organization belongs to the tenant.

        for_update=True locks the row until the transaction ends.
        """
        pass

    @abstractmethod
    async def get_by_number(
        self, organization_id: UUID, order_number: str
    ) -> Optional[SalesOrder]:
        pass

    @abstractmethod
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
        """List orders ordered by order_date DESC"""
        pass

    @abstractmethod
    async def count_open_for_customer(self, customer_id: UUID) -> int:
        """Live orders of the customer that are not completed or cancelled"""
        pass

    @abstractmethod
    async def get_lines(self, order_id: UUID) -> List[SalesOrderLine]:
        pass

    @abstractmethod
    async def get_lines_for_orders(
        self, order_ids: List[UUID]
    ) -> Dict[UUID, List[SalesOrderLine]]:
        pass

    @abstractmethod
    async def create(self, order: SalesOrder, lines: List[SalesOrderLine]) -> SalesOrder:
        pass

    @abstractmethod
    async def replace_lines(
        self, order_id: UUID, lines: List[SalesOrderLine]
    ) -> List[SalesOrderLine]:
        pass

    @abstractmethod
    async def update(self, order: SalesOrder) -> SalesOrder:
        pass
