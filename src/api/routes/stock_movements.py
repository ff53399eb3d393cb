"""
Stock Movements API Routes
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.context import RequestContext
from src.app.use_cases.inventory import (
    CreateStockMovementCommand,
    CreateStockMovementUseCase,
    DeleteStockMovementUseCase,
    GetStockMovementUseCase,
    ListStockMovementsQuery,
    ListStockMovementsUseCase,
    StockMovementListResponse,
    StockMovementResponse,
    UpdateStockMovementCommand,
    UpdateStockMovementUseCase,
)
from src.depends import get_request_context, get_unit_of_work
from src.domain.entities import StockMovementType
from src.domain.inventory import MAX_QUANTITY
from src.domain.ledger import MAX_AMOUNT

router = APIRouter(prefix="/stock-movements", tags=["Stock Movements"])


class CreateStockMovementRequest(BaseModel):
    organization_id: UUID
    product_id: UUID
    location_id: Optional[UUID] = None
    movement_type: StockMovementType
    reference_type: Optional[str] = Field(None, max_length=50)
    reference_id: Optional[UUID] = None
    quantity: Decimal = Field(..., gt=0, le=MAX_QUANTITY)
    unit_cost: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    movement_date: datetime
    notes: Optional[str] = None


class UpdateStockMovementRequest(BaseModel):
    product_id: Optional[UUID] = None
    location_id: Optional[UUID] = None
    movement_type: Optional[StockMovementType] = None
    reference_type: Optional[str] = Field(None, max_length=50)
    reference_id: Optional[UUID] = None
    quantity: Optional[Decimal] = Field(None, gt=0, le=MAX_QUANTITY)
    unit_cost: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT)
    movement_date: Optional[datetime] = None
    notes: Optional[str] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=StockMovementListResponse)
async def list_stock_movements(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    organization_id: Optional[UUID] = Query(None),
    product_id: Optional[UUID] = Query(None),
    location_id: Optional[UUID] = Query(None),
    movement_type: Optional[StockMovementType] = Query(None),
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    page: int = Query(1, ge=1),
    per_page: int = Query(
        ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE
    ),
):
    result = await ListStockMovementsUseCase(uow).execute(
        context.tenant_id,
        ListStockMovementsQuery(
            organization_id=organization_id,
            product_id=product_id,
            location_id=location_id,
            movement_type=movement_type,
            from_date=from_date,
            to_date=to_date,
            page=page,
            per_page=per_page,
        ),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=StockMovementResponse)
async def create_stock_movement(
    request: CreateStockMovementRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Record Stock Movement

    quantity is always positive; movement_type decides the sign.

    Raises:
        - 404 Not Found: ORGANIZATION_NOT_FOUND, PRODUCT_NOT_FOUND, BRANCH_NOT_FOUND
        - 422 Unprocessable Entity: PRODUCT_NOT_STOCKED
    """
    result = await CreateStockMovementUseCase(uow).execute(
        context.tenant_id, CreateStockMovementCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{movement_id}", status_code=status.HTTP_200_OK, response_model=StockMovementResponse
)
async def get_stock_movement(
    movement_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetStockMovementUseCase(uow).execute(context.tenant_id, movement_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{movement_id}", status_code=status.HTTP_200_OK, response_model=StockMovementResponse
)
async def update_stock_movement(
    movement_id: UUID,
    request: UpdateStockMovementRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Stock Movement (partial)

    Raises:
        - 404 Not Found: MOVEMENT_NOT_FOUND, PRODUCT_NOT_FOUND, BRANCH_NOT_FOUND
        - 422 Unprocessable Entity: PRODUCT_NOT_STOCKED
    """
    result = await UpdateStockMovementUseCase(uow).execute(
        context.tenant_id,
        movement_id,
        UpdateStockMovementCommand(**request.model_dump(exclude_unset=True)),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{movement_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_stock_movement(
    movement_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteStockMovementUseCase(uow).execute(context.tenant_id, movement_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
