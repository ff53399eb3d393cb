"""
Use Case: Post Journal Entry

draft -> posted, guarded by the double-entry balance check. The read of
the lines, the check and the status write happen in one transaction with
the entry row locked, so concurrent line edits cannot slip in between.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, JournalEntryStatus
from src.domain.ledger import can_transition, compute_totals

from .dtos import JournalEntryResponse

logger = logging.getLogger(__name__)


class PostJournalEntryUseCase:
    """
    Business Logic:
    1. Load and lock the entry (tenant-scoped)
    2. posted -> ENTRY_ALREADY_POSTED; posted_at is never re-stamped
    3. cancelled -> INVALID_STATUS_TRANSITION
    4. debits != credits at 2 dp -> UNBALANCED_ENTRY, status stays draft
    5. Set status=posted, posted_at=now, posted_by=acting user
    6. Record audit event and commit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, entry_id: UUID, user_id: UUID
    ) -> Result[JournalEntryResponse]:
        async with self.uow:
            entry = await self.uow.journal_entries.get_by_id_for_tenant(
                entry_id, tenant_id, for_update=True
            )
            if not entry:
                return Return.err(Error("ENTRY_NOT_FOUND", "Journal entry not found"))

            status = JournalEntryStatus(entry.status)
            if status == JournalEntryStatus.posted:
                return Return.err(
                    Error("ENTRY_ALREADY_POSTED", "Journal entry is already posted")
                )
            if not can_transition(status, JournalEntryStatus.posted):
                return Return.err(
                    Error(
                        "INVALID_STATUS_TRANSITION",
                        f"Cannot post a {status.value} journal entry",
                    )
                )

            lines = await self.uow.journal_entries.get_lines(entry.id)
            totals = compute_totals(lines)
            if not totals.is_balanced:
                logger.info(
                    "Refused to post unbalanced entry %s (debit=%s credit=%s)",
                    entry.id,
                    totals.total_debit,
                    totals.total_credit,
                )
                return Return.err(
                    Error(
                        "UNBALANCED_ENTRY",
                        f"Debits ({totals.total_debit}) must equal credits "
                        f"({totals.total_credit})",
                    )
                )

            entry.status = JournalEntryStatus.posted
            entry.posted_at = utcnow()
            entry.posted_by = user_id
            entry.updated_at = entry.posted_at
            entry = await self.uow.journal_entries.update(entry)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=user_id,
                    action="journal_entry_posted",
                    event_metadata={
                        "entry_id": str(entry.id),
                        "entry_number": entry.entry_number,
                        "total": str(totals.total_debit),
                    },
                )
            )

            await self.uow.commit()
            logger.info("Posted journal entry %s by user %s", entry.id, user_id)

            return Return.ok(JournalEntryResponse.from_entity(entry, lines))
