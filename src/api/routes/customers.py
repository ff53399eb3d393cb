"""
Customers API Routes
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
from src.app.use_cases.sales import (
    CreateCustomerCommand,
    CreateCustomerUseCase,
    CustomerListResponse,
    CustomerResponse,
    DeleteCustomerUseCase,
    GetCustomerUseCase,
    ListCustomersQuery,
    ListCustomersUseCase,
    UpdateCustomerCommand,
    UpdateCustomerUseCase,
)
from src.depends import get_request_context, get_unit_of_work
from src.domain.entities import CustomerStatus
from src.domain.ledger import MAX_AMOUNT

router = APIRouter(prefix="/customers", tags=["Customers"])


class CustomerFields(BaseModel):
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    mobile: Optional[str] = Field(None, max_length=50)
    website: Optional[str] = Field(None, max_length=255)
    tax_id: Optional[str] = Field(None, max_length=50)
    billing_address: Optional[str] = None
    billing_city: Optional[str] = Field(None, max_length=100)
    billing_state: Optional[str] = Field(None, max_length=100)
    billing_country: Optional[str] = Field(None, max_length=100)
    billing_postal_code: Optional[str] = Field(None, max_length=20)
    shipping_address: Optional[str] = None
    shipping_city: Optional[str] = Field(None, max_length=100)
    shipping_state: Optional[str] = Field(None, max_length=100)
    shipping_country: Optional[str] = Field(None, max_length=100)
    shipping_postal_code: Optional[str] = Field(None, max_length=20)
    payment_terms: Optional[int] = Field(None, ge=0, description="Days until payment is due")
    currency_code: Optional[str] = Field(None, min_length=3, max_length=3)


class CreateCustomerRequest(CustomerFields):
    organization_id: UUID
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    credit_limit: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    status: CustomerStatus = CustomerStatus.active


class UpdateCustomerRequest(CustomerFields):
    code: Optional[str] = Field(None, min_length=1, max_length=50)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    credit_limit: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT)
    status: Optional[CustomerStatus] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=CustomerListResponse)
async def list_customers(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    organization_id: Optional[UUID] = Query(None),
    customer_status: Optional[CustomerStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None, description="Matches name, code or email"),
    page: int = Query(1, ge=1),
    per_page: int = Query(
        ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE
    ),
):
    result = await ListCustomersUseCase(uow).execute(
        context.tenant_id,
        ListCustomersQuery(
            organization_id=organization_id,
            status=customer_status,
            search=search,
            page=page,
            per_page=per_page,
        ),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CustomerResponse)
async def create_customer(
    request: CreateCustomerRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Customer

    Raises:
        - 404 Not Found: ORGANIZATION_NOT_FOUND
        - 409 Conflict: CUSTOMER_CODE_TAKEN
    """
    result = await CreateCustomerUseCase(uow).execute(
        context.tenant_id, CreateCustomerCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{customer_id}", status_code=status.HTTP_200_OK, response_model=CustomerResponse)
async def get_customer(
    customer_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetCustomerUseCase(uow).execute(context.tenant_id, customer_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{customer_id}", status_code=status.HTTP_200_OK, response_model=CustomerResponse
)
async def update_customer(
    customer_id: UUID,
    request: UpdateCustomerRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Customer (partial)

    Raises:
        - 404 Not Found: CUSTOMER_NOT_FOUND
        - 409 Conflict: CUSTOMER_CODE_TAKEN
    """
    result = await UpdateCustomerUseCase(uow).execute(
        context.tenant_id,
        customer_id,
        UpdateCustomerCommand(**request.model_dump(exclude_unset=True)),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Customer (soft)

    Raises:
        - 404 Not Found: CUSTOMER_NOT_FOUND
        - 409 Conflict: CUSTOMER_HAS_OPEN_ORDERS
    """
    result = await DeleteCustomerUseCase(uow).execute(context.tenant_id, customer_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
