"""
Account Entity

Chart-of-accounts node. Accounts form a tree through parent_id.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from src.domain.base import utcnow

from .enums import AccountType


class Account(SQLModel, table=True):
    """
    Account entity.

    Business Rules:
    - code is unique within an organization
    - parent must belong to the same organization; no cycles
    - Balance polarity depends on account_type (see src.domain.ledger)
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)
    parent_id: Optional[UUID] = Field(default=None, foreign_key="accounts.id")

    code: str = Field(max_length=50)
    name: str = Field(max_length=255)
    account_type: AccountType
    currency_code: str = Field(default="USD", max_length=3)
    description: Optional[str] = Field(default=None)
    is_active: bool = Field(default=True)

    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("organization_id", "code", name="uq_account_org_code"),
        Index("idx_account_org_type", "organization_id", "account_type"),
    )
