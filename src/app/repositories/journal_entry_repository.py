from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from src.domain.entities import JournalEntry, JournalEntryLine, JournalEntryStatus


class IJournalEntryRepository(ABC):
    """JournalEntry repository interface - application layer"""

    @abstractmethod
    async def get_by_id_for_tenant(
        self, entry_id: UUID, tenant_id: UUID, for_update: bool = False
    ) -> Optional[JournalEntry]:
        """
        Get journal entry by ID, only if its organization belongs to the tenant.

        for_update=True locks the row until the transaction ends.
        """
        pass

    @abstractmethod
    async def get_by_number(
        self, organization_id: UUID, entry_number: str
    ) -> Optional[JournalEntry]:
        pass

    @abstractmethod
    async def list_for_tenant_paginated(
        self,
        tenant_id: UUID,
        organization_id: Optional[UUID] = None,
        branch_id: Optional[UUID] = None,
        status: Optional[JournalEntryStatus] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[JournalEntry], int]:
        """List entries ordered by entry_date DESC"""
        pass

    @abstractmethod
    async def get_lines(self, entry_id: UUID) -> List[JournalEntryLine]:
        """Lines of one entry ordered by line_number"""
        pass

    @abstractmethod
    async def get_lines_for_entries(
        self, entry_ids: List[UUID]
    ) -> Dict[UUID, List[JournalEntryLine]]:
        pass

    @abstractmethod
    async def create(
        self, entry: JournalEntry, lines: List[JournalEntryLine]
    ) -> JournalEntry:
        """Create entry together with its lines"""
        pass

    @abstractmethod
    async def replace_lines(
        self, entry_id: UUID, lines: List[JournalEntryLine]
    ) -> List[JournalEntryLine]:
        """Delete all lines of the entry and insert the given ones"""
        pass

    @abstractmethod
    async def update(self, entry: JournalEntry) -> JournalEntry:
        pass

    @abstractmethod
    async def sum_lines_for_account(
        self, account_id: UUID, posted_only: bool = False
    ) -> Tuple[Decimal, Decimal]:
        """
        Aggregate (sum(debit), sum(credit)) over lines referencing the account.

        Lines of soft-deleted entries are excluded.
        """
        pass
