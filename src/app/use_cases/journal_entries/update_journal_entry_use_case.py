"""
Use Case: Update Journal Entry

Only draft entries can change. Posted entries are immutable
(ENTRY_ALREADY_POSTED); cancelled ones are frozen (ENTRY_NOT_EDITABLE).
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import JournalEntry, JournalEntryStatus

from .dtos import JournalEntryResponse, UpdateJournalEntryCommand
from .lines import build_lines


def editability_error(entry: JournalEntry):
    status = JournalEntryStatus(entry.status)
    if status == JournalEntryStatus.posted:
        return Error("ENTRY_ALREADY_POSTED", "Posted journal entries cannot be modified")
    if status != JournalEntryStatus.draft:
        return Error("ENTRY_NOT_EDITABLE", f"Journal entry is {status.value}")
    return None


class UpdateJournalEntryUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, entry_id: UUID, command: UpdateJournalEntryCommand
    ) -> Result[JournalEntryResponse]:
        changes = command.model_dump(exclude_unset=True, exclude={"lines"})
        for required in ("entry_number", "entry_date", "currency_code"):
            if required in changes and changes[required] is None:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Field '{required}' cannot be null")
                )
        if "lines" in command.model_fields_set and command.lines is None:
            return Return.err(Error("VALIDATION_ERROR", "Field 'lines' cannot be null"))

        async with self.uow:
            # Lock so a concurrent post cannot interleave with the line swap
            entry = await self.uow.journal_entries.get_by_id_for_tenant(
                entry_id, tenant_id, for_update=True
            )
            if not entry:
                return Return.err(Error("ENTRY_NOT_FOUND", "Journal entry not found"))

            error = editability_error(entry)
            if error:
                return Return.err(error)

            if changes.get("branch_id") is not None:
                branch = await self.uow.branches.get_by_id_for_organization(
                    changes["branch_id"], entry.organization_id
                )
                if not branch:
                    return Return.err(Error("BRANCH_NOT_FOUND", "Branch not found"))

            if "entry_number" in changes and changes["entry_number"] != entry.entry_number:
                existing = await self.uow.journal_entries.get_by_number(
                    entry.organization_id, changes["entry_number"]
                )
                if existing and existing.id != entry.id:
                    return Return.err(
                        Error(
                            "ENTRY_NUMBER_TAKEN",
                            f"Entry number {changes['entry_number']} already exists",
                        )
                    )

            if command.lines is not None:
                lines = await build_lines(
                    self.uow,
                    entry.organization_id,
                    changes.get("currency_code") or entry.currency_code,
                    command.lines,
                )
                if isinstance(lines, Error):
                    return Return.err(lines)
                await self.uow.journal_entries.replace_lines(entry.id, lines)

            for field, value in changes.items():
                setattr(entry, field, value)
            entry.updated_at = utcnow()
            entry = await self.uow.journal_entries.update(entry)
            lines = await self.uow.journal_entries.get_lines(entry.id)
            await self.uow.commit()

            return Return.ok(JournalEntryResponse.from_entity(entry, lines))


class DeleteJournalEntryUseCase:
    """Soft delete of a draft entry"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, entry_id: UUID) -> Result[None]:
        async with self.uow:
            entry = await self.uow.journal_entries.get_by_id_for_tenant(
                entry_id, tenant_id, for_update=True
            )
            if not entry:
                return Return.err(Error("ENTRY_NOT_FOUND", "Journal entry not found"))

            error = editability_error(entry)
            if error:
                return Return.err(error)

            entry.deleted_at = utcnow()
            await self.uow.journal_entries.update(entry)
            await self.uow.commit()
            return Return.ok(None)
