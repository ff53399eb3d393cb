from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Tenant, TenantStatus


class ITenantRepository(ABC):
    """Tenant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID regardless of status (soft-deleted excluded)"""
        pass

    @abstractmethod
    async def get_active_by_subdomain(
        self, subdomain: str, now: datetime
    ) -> Optional[Tenant]:
        """Get an active, unexpired tenant by subdomain"""
        pass

    @abstractmethod
    async def get_active_by_domain(self, domain: str, now: datetime) -> Optional[Tenant]:
        """Get an active, unexpired tenant by exact custom domain"""
        pass

    @abstractmethod
    async def get_by_subdomain(self, subdomain: str) -> Optional[Tenant]:
        """Get tenant by subdomain, including soft-deleted rows"""
        pass

    @abstractmethod
    async def get_by_domain(self, domain: str) -> Optional[Tenant]:
        """Get tenant by custom domain, including soft-deleted rows"""
        pass

    @abstractmethod
    async def list_paginated(
        self,
        status: Optional[TenantStatus] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[Tenant], int]:
        """List tenants; returns (page items, total count)"""
        pass

    @abstractmethod
    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        pass

    @abstractmethod
    async def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        pass
