from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Product, ProductStatus, ProductType


class IProductRepository(ABC):
    """Product repository interface - application layer"""

    @abstractmethod
    async def get_by_id_for_tenant(
        self, product_id: UUID, tenant_id: UUID
    ) -> Optional[Product]:
        """Get product by ID, only if its organization belongs to the tenant"""
        pass

    @abstractmethod
    async def get_by_id_for_organization(
        self, product_id: UUID, organization_id: UUID
    ) -> Optional[Product]:
        pass

    @abstractmethod
    async def get_by_code(self, organization_id: UUID, code: str) -> Optional[Product]:
        pass

    @abstractmethod
    async def get_many_for_organization(
        self, product_ids: Iterable[UUID], organization_id: UUID
    ) -> List[Product]:
        """Get the subset of product_ids that exist in the organization"""
        pass

    @abstractmethod
    async def list_for_tenant_paginated(
        self,
        tenant_id: UUID,
        organization_id: Optional[UUID] = None,
        product_type: Optional[ProductType] = None,
        status: Optional[ProductStatus] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[Product], int]:
        pass

    @abstractmethod
    async def create(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        pass
