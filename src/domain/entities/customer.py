"""
Customer Entity

Party that sales orders are raised against.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Numeric
from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from src.domain.base import utcnow

from .enums import CustomerStatus


class Customer(SQLModel, table=True):
    __tablename__ = "customers"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)

    code: str = Field(max_length=50)
    name: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    mobile: Optional[str] = Field(default=None, max_length=50)
    website: Optional[str] = Field(default=None, max_length=255)
    tax_id: Optional[str] = Field(default=None, max_length=50)

    billing_address: Optional[str] = Field(default=None)
    billing_city: Optional[str] = Field(default=None, max_length=100)
    billing_state: Optional[str] = Field(default=None, max_length=100)
    billing_country: Optional[str] = Field(default=None, max_length=100)
    billing_postal_code: Optional[str] = Field(default=None, max_length=20)
    shipping_address: Optional[str] = Field(default=None)
    shipping_city: Optional[str] = Field(default=None, max_length=100)
    shipping_state: Optional[str] = Field(default=None, max_length=100)
    shipping_country: Optional[str] = Field(default=None, max_length=100)
    shipping_postal_code: Optional[str] = Field(default=None, max_length=20)

    payment_terms: Optional[int] = Field(default=None)  # days
    credit_limit: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
    currency_code: str = Field(default="USD", max_length=3)
    status: CustomerStatus = Field(default=CustomerStatus.active)

    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("organization_id", "code", name="uq_customer_org_code"),
        Index("idx_customer_org_status", "organization_id", "status"),
    )
