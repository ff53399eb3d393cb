"""
Use Case: Cancel Journal Entry

draft -> cancelled, unconditionally. Posted and cancelled are terminal.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, JournalEntryStatus
from src.domain.ledger import can_transition

from .dtos import JournalEntryResponse

logger = logging.getLogger(__name__)


class CancelJournalEntryUseCase:
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
                    Error("ENTRY_ALREADY_POSTED", "Posted journal entries cannot be cancelled")
                )
            if not can_transition(status, JournalEntryStatus.cancelled):
                return Return.err(
                    Error(
                        "INVALID_STATUS_TRANSITION",
                        f"Cannot cancel a {status.value} journal entry",
                    )
                )

            entry.status = JournalEntryStatus.cancelled
            entry.updated_at = utcnow()
            entry = await self.uow.journal_entries.update(entry)
            lines = await self.uow.journal_entries.get_lines(entry.id)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=user_id,
                    action="journal_entry_cancelled",
                    event_metadata={
                        "entry_id": str(entry.id),
                        "entry_number": entry.entry_number,
                    },
                )
            )

            await self.uow.commit()
            logger.info("Cancelled journal entry %s by user %s", entry.id, user_id)

            return Return.ok(JournalEntryResponse.from_entity(entry, lines))
