"""
Journal entry read use cases: list, get, balance check.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import build_page_meta
from src.domain.entities import JournalEntryStatus
from src.domain.ledger import compute_totals

from .dtos import (
    JournalEntryBalanceResponse,
    JournalEntryListResponse,
    JournalEntryResponse,
    ListJournalEntriesQuery,
)

NOT_FOUND = Error("ENTRY_NOT_FOUND", "Journal entry not found")


class ListJournalEntriesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, query: ListJournalEntriesQuery
    ) -> Result[JournalEntryListResponse]:
        async with self.uow:
            entries, total = await self.uow.journal_entries.list_for_tenant_paginated(
                tenant_id,
                organization_id=query.organization_id,
                branch_id=query.branch_id,
                status=query.status,
                from_date=query.from_date,
                to_date=query.to_date,
                search=query.search,
                page=query.page,
                per_page=query.per_page,
            )
            lines_by_entry = await self.uow.journal_entries.get_lines_for_entries(
                [entry.id for entry in entries]
            )
            return Return.ok(
                JournalEntryListResponse(
                    data=[
                        JournalEntryResponse.from_entity(entry, lines_by_entry[entry.id])
                        for entry in entries
                    ],
                    meta=build_page_meta(query.page, query.per_page, total),
                )
            )


class GetJournalEntryUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, entry_id: UUID) -> Result[JournalEntryResponse]:
        async with self.uow:
            entry = await self.uow.journal_entries.get_by_id_for_tenant(entry_id, tenant_id)
            if not entry:
                return Return.err(NOT_FOUND)
            lines = await self.uow.journal_entries.get_lines(entry.id)
            return Return.ok(JournalEntryResponse.from_entity(entry, lines))


class CheckJournalEntryBalanceUseCase:
    """Exposes the balance check and current status without changing anything"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, entry_id: UUID
    ) -> Result[JournalEntryBalanceResponse]:
        async with self.uow:
            entry = await self.uow.journal_entries.get_by_id_for_tenant(entry_id, tenant_id)
            if not entry:
                return Return.err(NOT_FOUND)
            totals = compute_totals(await self.uow.journal_entries.get_lines(entry.id))
            return Return.ok(
                JournalEntryBalanceResponse(
                    entry_id=str(entry.id),
                    status=JournalEntryStatus(entry.status).value,
                    total_debit=totals.total_debit,
                    total_credit=totals.total_credit,
                    difference=totals.difference,
                    is_balanced=totals.is_balanced,
                )
            )
