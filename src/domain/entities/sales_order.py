"""
SalesOrder Entity

Order header; monetary totals are recomputed from the lines on every write.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Numeric
from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from src.domain.base import utcnow

from .enums import SalesOrderStatus


class SalesOrder(SQLModel, table=True):
    """
    SalesOrder entity.

    Business Rules:
    - subtotal = sum(line_total); total = subtotal + tax_amount - discount_amount
    - draft -> confirmed -> processing -> completed; any open state -> cancelled
    - only drafts can be edited or deleted
    """

    __tablename__ = "sales_orders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)
    branch_id: Optional[UUID] = Field(default=None, foreign_key="branches.id")
    customer_id: UUID = Field(foreign_key="customers.id")

    order_number: str = Field(max_length=50)
    order_date: date
    delivery_date: Optional[date] = Field(default=None)
    reference: Optional[str] = Field(default=None, max_length=255)
    currency_code: str = Field(default="USD", max_length=3)

    subtotal: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
    tax_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
    discount_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
    total_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )

    status: SalesOrderStatus = Field(default=SalesOrderStatus.draft)
    notes: Optional[str] = Field(default=None)

    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("organization_id", "order_number", name="uq_sales_order_org_number"),
        Index("idx_sales_order_org_status_date", "organization_id", "status", "order_date"),
        Index("idx_sales_order_customer_status", "customer_id", "status"),
    )
