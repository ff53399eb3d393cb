"""
JournalEntryLine Entity

A single debit or credit posting against one account.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Numeric
from sqlmodel import Column, Field, Index, SQLModel


class JournalEntryLine(SQLModel, table=True):
    __tablename__ = "journal_entry_lines"
    __table_args__ = (
        CheckConstraint("debit >= 0", name="line_debit_non_negative"),
        CheckConstraint("credit >= 0", name="line_credit_non_negative"),
        Index("idx_line_entry_account", "journal_entry_id", "account_id"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    journal_entry_id: UUID = Field(foreign_key="journal_entries.id", index=True)
    account_id: UUID = Field(foreign_key="accounts.id", index=True)

    line_number: int = Field(default=0)
    description: Optional[str] = Field(default=None)
    debit: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
    credit: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
    currency_code: str = Field(default="USD", max_length=3)
