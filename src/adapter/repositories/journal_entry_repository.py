from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.pagination import paginate
from src.app.repositories.journal_entry_repository import IJournalEntryRepository
from src.domain.entities import (
    JournalEntry,
    JournalEntryLine,
    JournalEntryStatus,
    Organization,
)
from src.domain.ledger import to_amount


class JournalEntryRepository(IJournalEntryRepository):
    """JournalEntry repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _for_tenant(self, tenant_id: UUID):
        return (
            select(JournalEntry)
            .join(Organization, Organization.id == JournalEntry.organization_id)
            .where(
                Organization.tenant_id == tenant_id,
                col(Organization.deleted_at).is_(None),
                col(JournalEntry.deleted_at).is_(None),
            )
        )

    async def get_by_id_for_tenant(
        self, entry_id: UUID, tenant_id: UUID, for_update: bool = False
    ) -> Optional[JournalEntry]:
        stmt = self._for_tenant(tenant_id).where(JournalEntry.id == entry_id)
        if for_update:
            # Ignored by SQLite; row lock on PostgreSQL/MySQL
            stmt = stmt.with_for_update(of=JournalEntry)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_number(
        self, organization_id: UUID, entry_number: str
    ) -> Optional[JournalEntry]:
        stmt = select(JournalEntry).where(
            JournalEntry.organization_id == organization_id,
            JournalEntry.entry_number == entry_number,
        )
        result = await self.session.exec(stmt)
        return result.first()

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
        stmt = self._for_tenant(tenant_id)
        if organization_id is not None:
            stmt = stmt.where(JournalEntry.organization_id == organization_id)
        if branch_id is not None:
            stmt = stmt.where(JournalEntry.branch_id == branch_id)
        if status is not None:
            stmt = stmt.where(JournalEntry.status == status)
        if from_date is not None:
            stmt = stmt.where(JournalEntry.entry_date >= from_date)
        if to_date is not None:
            stmt = stmt.where(JournalEntry.entry_date <= to_date)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    col(JournalEntry.entry_number).ilike(pattern),
                    col(JournalEntry.reference).ilike(pattern),
                )
            )
        stmt = stmt.order_by(
            col(JournalEntry.entry_date).desc(), col(JournalEntry.created_at).desc()
        )
        return await paginate(self.session, stmt, page, per_page)

    async def get_lines(self, entry_id: UUID) -> List[JournalEntryLine]:
        stmt = (
            select(JournalEntryLine)
            .where(JournalEntryLine.journal_entry_id == entry_id)
            .order_by(col(JournalEntryLine.line_number))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_lines_for_entries(
        self, entry_ids: List[UUID]
    ) -> Dict[UUID, List[JournalEntryLine]]:
        lines_by_entry: Dict[UUID, List[JournalEntryLine]] = {
            entry_id: [] for entry_id in entry_ids
        }
        if not entry_ids:
            return lines_by_entry
        stmt = (
            select(JournalEntryLine)
            .where(col(JournalEntryLine.journal_entry_id).in_(entry_ids))
            .order_by(col(JournalEntryLine.line_number))
        )
        result = await self.session.exec(stmt)
        for line in result.all():
            lines_by_entry[line.journal_entry_id].append(line)
        return lines_by_entry

    async def create(
        self, entry: JournalEntry, lines: List[JournalEntryLine]
    ) -> JournalEntry:
        self.session.add(entry)
        await self.session.flush()
        for line in lines:
            line.journal_entry_id = entry.id
            self.session.add(line)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def replace_lines(
        self, entry_id: UUID, lines: List[JournalEntryLine]
    ) -> List[JournalEntryLine]:
        await self.session.execute(
            delete(JournalEntryLine).where(JournalEntryLine.journal_entry_id == entry_id)
        )
        for line in lines:
            line.journal_entry_id = entry_id
            self.session.add(line)
        await self.session.flush()
        return lines

    async def update(self, entry: JournalEntry) -> JournalEntry:
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def sum_lines_for_account(
        self, account_id: UUID, posted_only: bool = False
    ) -> Tuple[Decimal, Decimal]:
        stmt = (
            select(
                func.coalesce(func.sum(JournalEntryLine.debit), 0),
                func.coalesce(func.sum(JournalEntryLine.credit), 0),
            )
            .join(JournalEntry, JournalEntry.id == JournalEntryLine.journal_entry_id)
            .where(
                JournalEntryLine.account_id == account_id,
                col(JournalEntry.deleted_at).is_(None),
            )
        )
        if posted_only:
            stmt = stmt.where(JournalEntry.status == JournalEntryStatus.posted)
        result = await self.session.exec(stmt)
        debits, credits = result.one()
        return to_amount(debits), to_amount(credits)
