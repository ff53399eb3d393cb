"""
Account Use Case DTOs
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.app.use_cases.common import PageMeta
from src.domain.entities import Account, AccountType


class CreateAccountCommand(BaseModel):
    organization_id: UUID
    parent_id: Optional[UUID] = None
    code: str
    name: str
    account_type: AccountType
    currency_code: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True


class UpdateAccountCommand(BaseModel):
    """
    Partial update - only fields explicitly set are applied.

    parent_id=null detaches the account from its parent.
    """

    parent_id: Optional[UUID] = None
    code: Optional[str] = None
    name: Optional[str] = None
    account_type: Optional[AccountType] = None
    currency_code: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


class ListAccountsQuery(BaseModel):
    organization_id: Optional[UUID] = None
    account_type: Optional[AccountType] = None
    is_active: Optional[bool] = None
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1)


class AccountResponse(BaseModel):
    id: str
    organization_id: str
    parent_id: Optional[str]
    code: str
    name: str
    account_type: str
    currency_code: str
    description: Optional[str]
    is_active: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResponse":
        return cls(
            id=str(account.id),
            organization_id=str(account.organization_id),
            parent_id=str(account.parent_id) if account.parent_id else None,
            code=account.code,
            name=account.name,
            account_type=AccountType(account.account_type).value,
            currency_code=account.currency_code,
            description=account.description,
            is_active=account.is_active,
            created_at=account.created_at,
        )


class AccountListResponse(BaseModel):
    data: List[AccountResponse]
    meta: PageMeta


class AccountBalanceResponse(BaseModel):
    """Fresh aggregation of all lines referencing the account"""

    account_id: str
    account_type: str
    normal_balance: str
    total_debit: Decimal
    total_credit: Decimal
    balance: Decimal
    posted_only: bool
