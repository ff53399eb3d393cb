"""
Products API Routes
"""

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
    CreateProductCommand,
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductStockUseCase,
    GetProductUseCase,
    ListProductsQuery,
    ListProductsUseCase,
    ProductListResponse,
    ProductResponse,
    ProductStockResponse,
    UpdateProductCommand,
    UpdateProductUseCase,
)
from src.depends import get_request_context, get_unit_of_work
from src.domain.entities import ProductStatus, ProductType
from src.domain.inventory import MAX_QUANTITY
from src.domain.ledger import MAX_AMOUNT

router = APIRouter(prefix="/products", tags=["Products"])


class CreateProductRequest(BaseModel):
    organization_id: UUID
    category_id: Optional[UUID] = None
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    product_type: ProductType = ProductType.goods
    unit_of_measure: Optional[str] = Field(None, max_length=20)
    cost_price: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    selling_price: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    barcode: Optional[str] = Field(None, max_length=100)
    sku: Optional[str] = Field(None, max_length=100)
    track_inventory: bool = True
    reorder_level: Decimal = Field(Decimal("0"), ge=0, le=MAX_QUANTITY)
    status: ProductStatus = ProductStatus.active


class UpdateProductRequest(BaseModel):
    category_id: Optional[UUID] = None
    code: Optional[str] = Field(None, min_length=1, max_length=50)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    product_type: Optional[ProductType] = None
    unit_of_measure: Optional[str] = Field(None, max_length=20)
    cost_price: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT)
    selling_price: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT)
    barcode: Optional[str] = Field(None, max_length=100)
    sku: Optional[str] = Field(None, max_length=100)
    track_inventory: Optional[bool] = None
    reorder_level: Optional[Decimal] = Field(None, ge=0, le=MAX_QUANTITY)
    status: Optional[ProductStatus] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=ProductListResponse)
async def list_products(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    organization_id: Optional[UUID] = Query(None),
    product_type: Optional[ProductType] = Query(None),
    product_status: Optional[ProductStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None, description="Matches name, code, sku or barcode"),
    page: int = Query(1, ge=1),
    per_page: int = Query(
        ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE
    ),
):
    result = await ListProductsUseCase(uow).execute(
        context.tenant_id,
        ListProductsQuery(
            organization_id=organization_id,
            product_type=product_type,
            status=product_status,
            search=search,
            page=page,
            per_page=per_page,
        ),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProductResponse)
async def create_product(
    request: CreateProductRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Product

    Raises:
        - 404 Not Found: ORGANIZATION_NOT_FOUND, CATEGORY_NOT_FOUND
        - 409 Conflict: PRODUCT_CODE_TAKEN
    """
    result = await CreateProductUseCase(uow).execute(
        context.tenant_id, CreateProductCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{product_id}", status_code=status.HTTP_200_OK, response_model=ProductResponse)
async def get_product(
    product_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetProductUseCase(uow).execute(context.tenant_id, product_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{product_id}", status_code=status.HTTP_200_OK, response_model=ProductResponse)
async def update_product(
    product_id: UUID,
    request: UpdateProductRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Product (partial)

    Raises:
        - 404 Not Found: PRODUCT_NOT_FOUND, CATEGORY_NOT_FOUND
        - 409 Conflict: PRODUCT_CODE_TAKEN
        - 422 Unprocessable Entity: PRODUCT_HIERARCHY_CYCLE
    """
    result = await UpdateProductUseCase(uow).execute(
        context.tenant_id,
        product_id,
        UpdateProductCommand(**request.model_dump(exclude_unset=True)),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteProductUseCase(uow).execute(context.tenant_id, product_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{product_id}/stock",
    status_code=status.HTTP_200_OK,
    response_model=ProductStockResponse,
)
async def get_product_stock(
    product_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    location_id: Optional[UUID] = Query(None, description="Limit to one branch"),
):
    """
    Stock on hand

    Receipts minus issues, adjustments and transfers.

    Raises:
        - 404 Not Found: PRODUCT_NOT_FOUND, BRANCH_NOT_FOUND
    """
    result = await GetProductStockUseCase(uow).execute(
        context.tenant_id, product_id, location_id=location_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
