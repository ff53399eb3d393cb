from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Branch


class IBranchRepository(ABC):
    """Branch repository interface - application layer"""

    @abstractmethod
    async def get_by_id_for_organization(
        self, branch_id: UUID, organization_id: UUID
    ) -> Optional[Branch]:
        """Get branch by ID, only if it belongs to the organization"""
        pass

    @abstractmethod
    async def list_for_organization(self, organization_id: UUID) -> List[Branch]:
        pass

    @abstractmethod
    async def create(self, branch: Branch) -> Branch:
        pass
