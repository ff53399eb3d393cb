from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Customer, CustomerStatus


class ICustomerRepository(ABC):
    """Customer repository interface - application layer"""

    @abstractmethod
    async def get_by_id_for_tenant(
        self, customer_id: UUID, tenant_id: UUID
    ) -> Optional[Customer]:
        pass

    @abstractmethod
    async def get_by_id_for_organization(
        self, customer_id: UUID, organization_id: UUID
    ) -> Optional[Customer]:
        pass

    @abstractmethod
    async def get_by_code(self, organization_id: UUID, code: str) -> Optional[Customer]:
        pass

    @abstractmethod
    async def list_for_tenant_paginated(
        self,
        tenant_id: UUID,
        organization_id: Optional[UUID] = None,
        status: Optional[CustomerStatus] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[Customer], int]:
        pass

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        pass
