"""
Inventory Use Case DTOs
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.app.use_cases.common import PageMeta
from src.domain.entities import (
    Product,
    ProductStatus,
    ProductType,
    StockMovement,
    StockMovementType,
)
from src.domain.inventory import MAX_QUANTITY, signed_quantity
from src.domain.ledger import MAX_AMOUNT, to_amount


# ============================================================================
# Products
# ============================================================================


class CreateProductCommand(BaseModel):
    organization_id: UUID
    category_id: Optional[UUID] = None
    code: str
    name: str
    description: Optional[str] = None
    product_type: ProductType = ProductType.goods
    unit_of_measure: Optional[str] = None
    cost_price: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    selling_price: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    barcode: Optional[str] = None
    sku: Optional[str] = None
    track_inventory: bool = True
    reorder_level: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_QUANTITY)
    status: ProductStatus = ProductStatus.active


class UpdateProductCommand(BaseModel):
    """Partial update - only fields explicitly set are applied"""

    category_id: Optional[UUID] = None
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    product_type: Optional[ProductType] = None
    unit_of_measure: Optional[str] = None
    cost_price: Optional[Decimal] = Field(default=None, ge=0, le=MAX_AMOUNT)
    selling_price: Optional[Decimal] = Field(default=None, ge=0, le=MAX_AMOUNT)
    barcode: Optional[str] = None
    sku: Optional[str] = None
    track_inventory: Optional[bool] = None
    reorder_level: Optional[Decimal] = Field(default=None, ge=0, le=MAX_QUANTITY)
    status: Optional[ProductStatus] = None


class ListProductsQuery(BaseModel):
    organization_id: Optional[UUID] = None
    product_type: Optional[ProductType] = None
    status: Optional[ProductStatus] = None
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1)


class ProductResponse(BaseModel):
    id: str
    organization_id: str
    category_id: Optional[str]
    code: str
    name: str
    description: Optional[str]
    product_type: str
    unit_of_measure: Optional[str]
    cost_price: Decimal
    selling_price: Decimal
    barcode: Optional[str]
    sku: Optional[str]
    track_inventory: bool
    reorder_level: Decimal
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            organization_id=str(product.organization_id),
            category_id=str(product.category_id) if product.category_id else None,
            code=product.code,
            name=product.name,
            description=product.description,
            product_type=ProductType(product.product_type).value,
            unit_of_measure=product.unit_of_measure,
            cost_price=to_amount(product.cost_price),
            selling_price=to_amount(product.selling_price),
            barcode=product.barcode,
            sku=product.sku,
            track_inventory=product.track_inventory,
            reorder_level=to_amount(product.reorder_level),
            status=ProductStatus(product.status).value,
            created_at=product.created_at,
        )


class ProductListResponse(BaseModel):
    data: List[ProductResponse]
    meta: PageMeta


class ProductStockResponse(BaseModel):
    """Stock on hand from a fresh aggregation of movements"""

    product_id: str
    location_id: Optional[str]
    quantity_on_hand: Decimal
    reorder_level: Decimal
    needs_reorder: bool


# ============================================================================
# Stock movements
# ============================================================================


class CreateStockMovementCommand(BaseModel):
    organization_id: UUID
    product_id: UUID
    location_id: Optional[UUID] = None
    movement_type: StockMovementType
    reference_type: Optional[str] = None
    reference_id: Optional[UUID] = None
    quantity: Decimal = Field(..., gt=0, le=MAX_QUANTITY)
    unit_cost: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    movement_date: datetime
    notes: Optional[str] = None


class UpdateStockMovementCommand(BaseModel):
    """Partial update; the organization of a movement never changes"""

    product_id: Optional[UUID] = None
    location_id: Optional[UUID] = None
    movement_type: Optional[StockMovementType] = None
    reference_type: Optional[str] = None
    reference_id: Optional[UUID] = None
    quantity: Optional[Decimal] = Field(default=None, gt=0, le=MAX_QUANTITY)
    unit_cost: Optional[Decimal] = Field(default=None, ge=0, le=MAX_AMOUNT)
    movement_date: Optional[datetime] = None
    notes: Optional[str] = None


class ListStockMovementsQuery(BaseModel):
    organization_id: Optional[UUID] = None
    product_id: Optional[UUID] = None
    location_id: Optional[UUID] = None
    movement_type: Optional[StockMovementType] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1)


class StockMovementResponse(BaseModel):
    id: str
    organization_id: str
    product_id: str
    location_id: Optional[str]
    movement_type: str
    reference_type: Optional[str]
    reference_id: Optional[str]
    quantity: Decimal
    signed_quantity: Decimal
    unit_cost: Decimal
    movement_date: datetime
    notes: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, movement: StockMovement) -> "StockMovementResponse":
        movement_type = StockMovementType(movement.movement_type)
        return cls(
            id=str(movement.id),
            organization_id=str(movement.organization_id),
            product_id=str(movement.product_id),
            location_id=str(movement.location_id) if movement.location_id else None,
            movement_type=movement_type.value,
            reference_type=movement.reference_type,
            reference_id=str(movement.reference_id) if movement.reference_id else None,
            quantity=to_amount(movement.quantity),
            signed_quantity=signed_quantity(movement_type, movement.quantity),
            unit_cost=to_amount(movement.unit_cost),
            movement_date=movement.movement_date,
            notes=movement.notes,
            created_at=movement.created_at,
        )


class StockMovementListResponse(BaseModel):
    data: List[StockMovementResponse]
    meta: PageMeta
