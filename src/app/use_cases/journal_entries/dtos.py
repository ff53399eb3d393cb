"""
Journal Entry Use Case DTOs

Amounts are Decimal end to end; they serialize as fixed 2-decimal strings.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.app.use_cases.common import PageMeta
from src.domain.entities import JournalEntry, JournalEntryLine, JournalEntryStatus
from src.domain.ledger import MAX_AMOUNT, compute_totals, to_amount


# ============================================================================
# Commands
# ============================================================================


class JournalLineCommand(BaseModel):
    account_id: UUID
    debit: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    credit: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    description: Optional[str] = None
    currency_code: Optional[str] = None


class CreateJournalEntryCommand(BaseModel):
    """New entries always start as draft; posting is a separate transition"""

    organization_id: UUID
    branch_id: Optional[UUID] = None
    entry_number: str
    entry_date: date
    reference: Optional[str] = None
    description: Optional[str] = None
    currency_code: Optional[str] = None
    lines: List[JournalLineCommand]


class UpdateJournalEntryCommand(BaseModel):
    """Partial update; when lines are given they replace the existing set"""

    branch_id: Optional[UUID] = None
    entry_number: Optional[str] = None
    entry_date: Optional[date] = None
    reference: Optional[str] = None
    description: Optional[str] = None
    currency_code: Optional[str] = None
    lines: Optional[List[JournalLineCommand]] = None


class ListJournalEntriesQuery(BaseModel):
    organization_id: Optional[UUID] = None
    branch_id: Optional[UUID] = None
    status: Optional[JournalEntryStatus] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1)


# ============================================================================
# Response DTOs
# ============================================================================


class JournalLineResponse(BaseModel):
    id: str
    account_id: str
    line_number: int
    description: Optional[str]
    debit: Decimal
    credit: Decimal
    currency_code: str

    @classmethod
    def from_entity(cls, line: JournalEntryLine) -> "JournalLineResponse":
        return cls(
            id=str(line.id),
            account_id=str(line.account_id),
            line_number=line.line_number,
            description=line.description,
            debit=to_amount(line.debit),
            credit=to_amount(line.credit),
            currency_code=line.currency_code,
        )


class JournalEntryResponse(BaseModel):
    id: str
    organization_id: str
    branch_id: Optional[str]
    entry_number: str
    entry_date: date
    reference: Optional[str]
    description: Optional[str]
    currency_code: str
    status: str
    posted_at: Optional[datetime]
    posted_by: Optional[str]
    total_debit: Decimal
    total_credit: Decimal
    is_balanced: bool
    lines: List[JournalLineResponse]
    created_at: datetime

    @classmethod
    def from_entity(
        cls, entry: JournalEntry, lines: List[JournalEntryLine]
    ) -> "JournalEntryResponse":
        totals = compute_totals(lines)
        return cls(
            id=str(entry.id),
            organization_id=str(entry.organization_id),
            branch_id=str(entry.branch_id) if entry.branch_id else None,
            entry_number=entry.entry_number,
            entry_date=entry.entry_date,
            reference=entry.reference,
            description=entry.description,
            currency_code=entry.currency_code,
            status=JournalEntryStatus(entry.status).value,
            posted_at=entry.posted_at,
            posted_by=str(entry.posted_by) if entry.posted_by else None,
            total_debit=totals.total_debit,
            total_credit=totals.total_credit,
            is_balanced=totals.is_balanced,
            lines=[JournalLineResponse.from_entity(line) for line in lines],
            created_at=entry.created_at,
        )


class JournalEntryListResponse(BaseModel):
    data: List[JournalEntryResponse]
    meta: PageMeta


class JournalEntryBalanceResponse(BaseModel):
    """Balance check result plus current status, so callers can gate edits"""

    entry_id: str
    status: str
    total_debit: Decimal
    total_credit: Decimal
    difference: Decimal
    is_balanced: bool
