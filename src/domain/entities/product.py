"""
Product Entity

Catalogue item of an organization. Stock on hand is derived from
stock movements, never stored on the product.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Numeric
from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from src.domain.base import utcnow

from .enums import ProductStatus, ProductType


class Product(SQLModel, table=True):
    """
    Product entity.

    Business Rules:
    - code is unique within an organization
    - category (a parent product) must belong to the same organization
    - services and products with track_inventory=False take no stock movements
    """

    __tablename__ = "products"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)
    category_id: Optional[UUID] = Field(default=None, foreign_key="products.id")

    code: str = Field(max_length=50)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    product_type: ProductType = Field(default=ProductType.goods)
    unit_of_measure: Optional[str] = Field(default=None, max_length=20)
    cost_price: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
    selling_price: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
    )
    barcode: Optional[str] = Field(default=None, max_length=100)
    sku: Optional[str] = Field(default=None, max_length=100)
    track_inventory: bool = Field(default=True)
    reorder_level: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
    )
    status: ProductStatus = Field(default=ProductStatus.active)

    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("organization_id", "code", name="uq_product_org_code"),
        Index("idx_product_org_type_status", "organization_id", "product_type", "status"),
    )
