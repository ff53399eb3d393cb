"""
StockMovement Entity

One quantity change of a product, optionally at a branch (location).
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Numeric
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import StockMovementType


class StockMovement(SQLModel, table=True):
    __tablename__ = "stock_movements"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="movement_quantity_positive"),
        Index("idx_movement_org_product_location", "organization_id", "product_id", "location_id"),
        Index("idx_movement_type_date", "movement_type", "movement_date"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)
    product_id: UUID = Field(foreign_key="products.id", index=True)
    location_id: Optional[UUID] = Field(default=None, foreign_key="branches.id")

    movement_type: StockMovementType
    reference_type: Optional[str] = Field(default=None, max_length=100)  # e.g. "sales_order"
    reference_id: Optional[UUID] = Field(default=None)
    # Always positive; the direction comes from movement_type
    quantity: Decimal = Field(sa_column=Column(Numeric(12, 2), nullable=False))
    unit_cost: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
    movement_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    notes: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
