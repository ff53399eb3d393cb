"""
SalesOrderLine Entity
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Numeric
from sqlmodel import Column, Field, SQLModel


class SalesOrderLine(SQLModel, table=True):
    __tablename__ = "sales_order_lines"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="order_line_quantity_positive"),
        CheckConstraint("unit_price >= 0", name="order_line_price_non_negative"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    sales_order_id: UUID = Field(foreign_key="sales_orders.id", index=True)
    product_id: Optional[UUID] = Field(default=None, foreign_key="products.id")

    line_number: int = Field(default=0)
    description: Optional[str] = Field(default=None)
    quantity: Decimal = Field(
        default=Decimal("1.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=1),
    )
    unit_price: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
    discount_percent: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(5, 2), nullable=False, default=0),
    )
    tax_percent: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(5, 2), nullable=False, default=0),
    )
    line_total: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
