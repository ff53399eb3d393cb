"""
Line validation shared by create and update.
"""

from typing import List, Union
from uuid import UUID

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import JournalEntryLine
from src.domain.ledger import MAX_AMOUNT, ZERO, to_amount

from .dtos import JournalLineCommand

MIN_LINES = 2


async def build_lines(
    uow: UnitOfWork,
    organization_id: UUID,
    currency_code: str,
    commands: List[JournalLineCommand],
) -> Union[List[JournalEntryLine], Error]:
    """
    Validate line commands and build entities, numbered in input order.

    Returns an Error instead of lines when validation fails.
    """
    if len(commands) < MIN_LINES:
        return Error(
            "INVALID_LINES", f"A journal entry needs at least {MIN_LINES} lines"
        )

    lines = []
    for index, command in enumerate(commands, start=1):
        debit = to_amount(command.debit)
        credit = to_amount(command.credit)
        if debit < ZERO or credit < ZERO:
            return Error("INVALID_LINES", f"Line {index}: amounts must be non-negative")
        if debit > MAX_AMOUNT or credit > MAX_AMOUNT:
            return Error(
                "INVALID_LINES", f"Line {index}: amounts may not exceed {MAX_AMOUNT}"
            )
        lines.append(
            JournalEntryLine(
                account_id=command.account_id,
                line_number=index,
                description=command.description,
                debit=debit,
                credit=credit,
                currency_code=command.currency_code or currency_code,
            )
        )

    requested = {line.account_id for line in lines}
    found = await uow.accounts.get_many_for_organization(requested, organization_id)
    missing = requested - {account.id for account in found}
    if missing:
        return Error(
            "ACCOUNT_NOT_FOUND",
            "Accounts not found in organization: "
            + ", ".join(sorted(str(account_id) for account_id in missing)),
        )

    return lines
