from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Organization, OrganizationStatus


class IOrganizationRepository(ABC):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_by_id_for_tenant(
        self, organization_id: UUID, tenant_id: UUID
    ) -> Optional[Organization]:
        """Get organization by ID, only if it belongs to the tenant"""
        pass

    @abstractmethod
    async def list_by_tenant_paginated(
        self,
        tenant_id: UUID,
        status: Optional[OrganizationStatus] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[Organization], int]:
        pass

    @abstractmethod
    async def count_by_tenant(self, tenant_id: UUID) -> int:
        """Count live (not soft-deleted) organizations of a tenant"""
        pass

    @abstractmethod
    async def create(self, organization: Organization) -> Organization:
        pass

    @abstractmethod
    async def update(self, organization: Organization) -> Organization:
        pass
