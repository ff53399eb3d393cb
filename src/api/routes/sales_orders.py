"""
Sales Orders API Routes

Draft CRUD plus the status lifecycle.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.context import RequestContext
from src.app.use_cases.sales import (
    ChangeSalesOrderStatusUseCase,
    CreateSalesOrderCommand,
    CreateSalesOrderUseCase,
    DeleteSalesOrderUseCase,
    GetSalesOrderUseCase,
    ListSalesOrdersQuery,
    ListSalesOrdersUseCase,
    SalesOrderListResponse,
    SalesOrderResponse,
    UpdateSalesOrderCommand,
    UpdateSalesOrderUseCase,
)
from src.depends import get_request_context, get_unit_of_work
from src.domain.entities import SalesOrderStatus
from src.domain.inventory import MAX_QUANTITY
from src.domain.ledger import MAX_AMOUNT

router = APIRouter(prefix="/sales-orders", tags=["Sales Orders"])


class SalesOrderLineRequest(BaseModel):
    product_id: Optional[UUID] = None
    description: Optional[str] = Field(None, max_length=500)
    quantity: Decimal = Field(Decimal("1"), gt=0, le=MAX_QUANTITY)
    unit_price: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    discount_percent: Decimal = Field(Decimal("0"), ge=0, le=100)
    tax_percent: Decimal = Field(Decimal("0"), ge=0, le=100)


class CreateSalesOrderRequest(BaseModel):
    organization_id: UUID
    branch_id: Optional[UUID] = None
    customer_id: UUID
    order_number: str = Field(..., min_length=1, max_length=50)
    order_date: date
    delivery_date: Optional[date] = None
    reference: Optional[str] = Field(None, max_length=100)
    currency_code: Optional[str] = Field(None, min_length=3, max_length=3)
    tax_amount: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    discount_amount: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    notes: Optional[str] = None
    lines: List[SalesOrderLineRequest] = Field(default_factory=list)


class UpdateSalesOrderRequest(BaseModel):
    branch_id: Optional[UUID] = None
    customer_id: Optional[UUID] = None
    order_number: Optional[str] = Field(None, min_length=1, max_length=50)
    order_date: Optional[date] = None
    delivery_date: Optional[date] = None
    reference: Optional[str] = Field(None, max_length=100)
    currency_code: Optional[str] = Field(None, min_length=3, max_length=3)
    tax_amount: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT)
    discount_amount: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT)
    notes: Optional[str] = None
    lines: Optional[List[SalesOrderLineRequest]] = None


class ChangeStatusRequest(BaseModel):
    status: SalesOrderStatus


@router.get("", status_code=status.HTTP_200_OK, response_model=SalesOrderListResponse)
async def list_sales_orders(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    organization_id: Optional[UUID] = Query(None),
    branch_id: Optional[UUID] = Query(None),
    customer_id: Optional[UUID] = Query(None),
    order_status: Optional[SalesOrderStatus] = Query(None, alias="status"),
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    search: Optional[str] = Query(None, description="Matches order number or reference"),
    page: int = Query(1, ge=1),
    per_page: int = Query(
        ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE
    ),
):
    result = await ListSalesOrdersUseCase(uow).execute(
        context.tenant_id,
        ListSalesOrdersQuery(
            organization_id=organization_id,
            branch_id=branch_id,
            customer_id=customer_id,
            status=order_status,
            from_date=from_date,
            to_date=to_date,
            search=search,
            page=page,
            per_page=per_page,
        ),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SalesOrderResponse)
async def create_sales_order(
    request: CreateSalesOrderRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Sales Order (draft)

    Line totals and order totals are computed from the lines.

    Raises:
        - 404 Not Found: ORGANIZATION_NOT_FOUND, CUSTOMER_NOT_FOUND, BRANCH_NOT_FOUND,
          PRODUCT_NOT_FOUND
        - 409 Conflict: ORDER_NUMBER_TAKEN
        - 422 Unprocessable Entity: CUSTOMER_INACTIVE, INVALID_LINES, INVALID_ORDER_TOTALS
    """
    result = await CreateSalesOrderUseCase(uow).execute(
        context.tenant_id, CreateSalesOrderCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{order_id}", status_code=status.HTTP_200_OK, response_model=SalesOrderResponse)
async def get_sales_order(
    order_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetSalesOrderUseCase(uow).execute(context.tenant_id, order_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{order_id}", status_code=status.HTTP_200_OK, response_model=SalesOrderResponse
)
async def update_sales_order(
    order_id: UUID,
    request: UpdateSalesOrderRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Sales Order (partial, drafts only)

    Raises:
        - 404 Not Found: ORDER_NOT_FOUND, CUSTOMER_NOT_FOUND, BRANCH_NOT_FOUND,
          PRODUCT_NOT_FOUND
        - 409 Conflict: ORDER_NUMBER_TAKEN
        - 422 Unprocessable Entity: ORDER_NOT_EDITABLE, INVALID_LINES,
          INVALID_ORDER_TOTALS
    """
    result = await UpdateSalesOrderUseCase(uow).execute(
        context.tenant_id,
        order_id,
        UpdateSalesOrderCommand(**request.model_dump(exclude_unset=True)),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sales_order(
    order_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteSalesOrderUseCase(uow).execute(context.tenant_id, order_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{order_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=SalesOrderResponse,
)
async def change_sales_order_status(
    order_id: UUID,
    request: ChangeStatusRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Sales Order Status

    Raises:
        - 404 Not Found: ORDER_NOT_FOUND
        - 422 Unprocessable Entity: INVALID_STATUS_TRANSITION, EMPTY_ORDER
    """
    result = await ChangeSalesOrderStatusUseCase(uow).execute(
        context.tenant_id, order_id, request.status, context.user_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
