from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Account, AccountType


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_id_for_tenant(
        self, account_id: UUID, tenant_id: UUID
    ) -> Optional[Account]:
        """Get account by ID, only if its organization belongs to the tenant"""
        pass

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        pass

    @abstractmethod
    async def get_by_code(self, organization_id: UUID, code: str) -> Optional[Account]:
        pass

    @abstractmethod
    async def get_many_for_organization(
        self, account_ids: Iterable[UUID], organization_id: UUID
    ) -> List[Account]:
        """Get the subset of account_ids that exist in the organization"""
        pass

    @abstractmethod
    async def list_for_tenant_paginated(
        self,
        tenant_id: UUID,
        organization_id: Optional[UUID] = None,
        account_type: Optional[AccountType] = None,
        is_active: Optional[bool] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[Account], int]:
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        pass
