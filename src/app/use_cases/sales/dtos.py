"""
Sales Use Case DTOs

Money and quantities are Decimal; they serialize as fixed 2-decimal strings.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.app.use_cases.common import PageMeta
from src.domain.entities import (
    Customer,
    CustomerStatus,
    SalesOrder,
    SalesOrderLine,
    SalesOrderStatus,
)
from src.domain.inventory import MAX_QUANTITY
from src.domain.ledger import MAX_AMOUNT, to_amount


# ============================================================================
# Customers
# ============================================================================


class CreateCustomerCommand(BaseModel):
    organization_id: UUID
    code: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    website: Optional[str] = None
    tax_id: Optional[str] = None
    billing_address: Optional[str] = None
    billing_city: Optional[str] = None
    billing_state: Optional[str] = None
    billing_country: Optional[str] = None
    billing_postal_code: Optional[str] = None
    shipping_address: Optional[str] = None
    shipping_city: Optional[str] = None
    shipping_state: Optional[str] = None
    shipping_country: Optional[str] = None
    shipping_postal_code: Optional[str] = None
    payment_terms: Optional[int] = Field(default=None, ge=0)
    credit_limit: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    currency_code: Optional[str] = None
    status: CustomerStatus = CustomerStatus.active


class UpdateCustomerCommand(BaseModel):
    """Partial update - only fields explicitly set are applied"""

    code: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    website: Optional[str] = None
    tax_id: Optional[str] = None
    billing_address: Optional[str] = None
    billing_city: Optional[str] = None
    billing_state: Optional[str] = None
    billing_country: Optional[str] = None
    billing_postal_code: Optional[str] = None
    shipping_address: Optional[str] = None
    shipping_city: Optional[str] = None
    shipping_state: Optional[str] = None
    shipping_country: Optional[str] = None
    shipping_postal_code: Optional[str] = None
    payment_terms: Optional[int] = Field(default=None, ge=0)
    credit_limit: Optional[Decimal] = Field(default=None, ge=0, le=MAX_AMOUNT)
    currency_code: Optional[str] = None
    status: Optional[CustomerStatus] = None


class ListCustomersQuery(BaseModel):
    organization_id: Optional[UUID] = None
    status: Optional[CustomerStatus] = None
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1)


class CustomerResponse(BaseModel):
    id: str
    organization_id: str
    code: str
    name: str
    email: Optional[str]
    phone: Optional[str]
    mobile: Optional[str]
    website: Optional[str]
    tax_id: Optional[str]
    billing_address: Optional[str]
    billing_city: Optional[str]
    billing_state: Optional[str]
    billing_country: Optional[str]
    billing_postal_code: Optional[str]
    shipping_address: Optional[str]
    shipping_city: Optional[str]
    shipping_state: Optional[str]
    shipping_country: Optional[str]
    shipping_postal_code: Optional[str]
    payment_terms: Optional[int]
    credit_limit: Decimal
    currency_code: str
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        data = customer.model_dump(
            exclude={
                "id",
                "organization_id",
                "credit_limit",
                "status",
                "deleted_at",
                "updated_at",
            }
        )
        return cls(
            id=str(customer.id),
            organization_id=str(customer.organization_id),
            credit_limit=to_amount(customer.credit_limit),
            status=CustomerStatus(customer.status).value,
            **data,
        )


class CustomerListResponse(BaseModel):
    data: List[CustomerResponse]
    meta: PageMeta


# ============================================================================
# Sales orders
# ============================================================================


class SalesOrderLineCommand(BaseModel):
    product_id: Optional[UUID] = None
    description: Optional[str] = None
    quantity: Decimal = Field(default=Decimal("1"), gt=0, le=MAX_QUANTITY)
    unit_price: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    discount_percent: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    tax_percent: Decimal = Field(default=Decimal("0"), ge=0, le=100)


class CreateSalesOrderCommand(BaseModel):
    """New orders always start as draft; status moves through transitions"""

    organization_id: UUID
    branch_id: Optional[UUID] = None
    customer_id: UUID
    order_number: str
    order_date: date
    delivery_date: Optional[date] = None
    reference: Optional[str] = None
    currency_code: Optional[str] = None
    tax_amount: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    discount_amount: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    notes: Optional[str] = None
    lines: List[SalesOrderLineCommand] = Field(default_factory=list)


class UpdateSalesOrderCommand(BaseModel):
    """Partial update; when lines are given they replace the existing set"""

    branch_id: Optional[UUID] = None
    customer_id: Optional[UUID] = None
    order_number: Optional[str] = None
    order_date: Optional[date] = None
    delivery_date: Optional[date] = None
    reference: Optional[str] = None
    currency_code: Optional[str] = None
    tax_amount: Optional[Decimal] = Field(default=None, ge=0, le=MAX_AMOUNT)
    discount_amount: Optional[Decimal] = Field(default=None, ge=0, le=MAX_AMOUNT)
    notes: Optional[str] = None
    lines: Optional[List[SalesOrderLineCommand]] = None


class ListSalesOrdersQuery(BaseModel):
    organization_id: Optional[UUID] = None
    branch_id: Optional[UUID] = None
    customer_id: Optional[UUID] = None
    status: Optional[SalesOrderStatus] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1)


class SalesOrderLineResponse(BaseModel):
    id: str
    product_id: Optional[str]
    line_number: int
    description: Optional[str]
    quantity: Decimal
    unit_price: Decimal
    discount_percent: Decimal
    tax_percent: Decimal
    line_total: Decimal

    @classmethod
    def from_entity(cls, line: SalesOrderLine) -> "SalesOrderLineResponse":
        return cls(
            id=str(line.id),
            product_id=str(line.product_id) if line.product_id else None,
            line_number=line.line_number,
            description=line.description,
            quantity=to_amount(line.quantity),
            unit_price=to_amount(line.unit_price),
            discount_percent=to_amount(line.discount_percent),
            tax_percent=to_amount(line.tax_percent),
            line_total=to_amount(line.line_total),
        )


class SalesOrderResponse(BaseModel):
    id: str
    organization_id: str
    branch_id: Optional[str]
    customer_id: str
    order_number: str
    order_date: date
    delivery_date: Optional[date]
    reference: Optional[str]
    currency_code: str
    subtotal: Decimal
    tax_amount: Decimal
    discount_amount: Decimal
    total_amount: Decimal
    status: str
    notes: Optional[str]
    lines: List[SalesOrderLineResponse]
    created_at: datetime

    @classmethod
    def from_entity(
        cls, order: SalesOrder, lines: List[SalesOrderLine]
    ) -> "SalesOrderResponse":
        return cls(
            id=str(order.id),
            organization_id=str(order.organization_id),
            branch_id=str(order.branch_id) if order.branch_id else None,
            customer_id=str(order.customer_id),
            order_number=order.order_number,
            order_date=order.order_date,
            delivery_date=order.delivery_date,
            reference=order.reference,
            currency_code=order.currency_code,
            subtotal=to_amount(order.subtotal),
            tax_amount=to_amount(order.tax_amount),
            discount_amount=to_amount(order.discount_amount),
            total_amount=to_amount(order.total_amount),
            status=SalesOrderStatus(order.status).value,
            notes=order.notes,
            lines=[SalesOrderLineResponse.from_entity(line) for line in lines],
            created_at=order.created_at,
        )


class SalesOrderListResponse(BaseModel):
    data: List[SalesOrderResponse]
    meta: PageMeta
