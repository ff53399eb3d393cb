"""
JournalEntry Entity

One accounting transaction: a balanced set of debit/credit lines.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from src.domain.base import utcnow

from .enums import JournalEntryStatus


class JournalEntry(SQLModel, table=True):
    """
    JournalEntry entity.

    Business Rules:
    - draft -> posted only when debits equal credits (2 dp)
    - draft -> cancelled unconditionally
    - posted and cancelled are terminal; posted entries are immutable
    """

    __tablename__ = "journal_entries"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)
    branch_id: Optional[UUID] = Field(default=None, foreign_key="branches.id")

    entry_number: str = Field(max_length=50)
    entry_date: date
    reference: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None)
    currency_code: str = Field(default="USD", max_length=3)

    status: JournalEntryStatus = Field(default=JournalEntryStatus.draft)
    posted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    posted_by: Optional[UUID] = Field(default=None)

    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("organization_id", "entry_number", name="uq_journal_org_number"),
        Index("idx_journal_org_status_date", "organization_id", "status", "entry_date"),
    )
