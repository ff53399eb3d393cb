"""
Use Case: Create Journal Entry

Creates a draft entry with its lines. Balance is not required at this
point; it is enforced when the entry is posted.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import JournalEntry, JournalEntryStatus

from .dtos import CreateJournalEntryCommand, JournalEntryResponse
from .lines import build_lines


class CreateJournalEntryUseCase:
    """
    Business Rules:
    - Organization must belong to the caller's tenant
    - Branch (if any) must belong to the organization
    - entry_number is unique within the organization
    - At least two lines, every account in the organization
    - Status is always draft on creation
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: CreateJournalEntryCommand
    ) -> Result[JournalEntryResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                command.organization_id, tenant_id
            )
            if not organization:
                return Return.err(
                    Error("ORGANIZATION_NOT_FOUND", "Organization not found")
                )

            if command.branch_id is not None:
                branch = await self.uow.branches.get_by_id_for_organization(
                    command.branch_id, organization.id
                )
                if not branch:
                    return Return.err(Error("BRANCH_NOT_FOUND", "Branch not found"))

            if await self.uow.journal_entries.get_by_number(
                organization.id, command.entry_number
            ):
                return Return.err(
                    Error(
                        "ENTRY_NUMBER_TAKEN",
                        f"Entry number {command.entry_number} already exists",
                    )
                )

            currency_code = command.currency_code or organization.currency_code
            lines = await build_lines(
                self.uow, organization.id, currency_code, command.lines
            )
            if isinstance(lines, Error):
                return Return.err(lines)

            entry = JournalEntry(
                organization_id=organization.id,
                branch_id=command.branch_id,
                entry_number=command.entry_number,
                entry_date=command.entry_date,
                reference=command.reference,
                description=command.description,
                currency_code=currency_code,
                status=JournalEntryStatus.draft,
            )
            entry = await self.uow.journal_entries.create(entry, lines)
            await self.uow.commit()

            return Return.ok(JournalEntryResponse.from_entity(entry, lines))
