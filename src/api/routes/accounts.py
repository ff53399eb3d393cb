"""
Chart of Accounts API Routes
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.accounts import (
    AccountBalanceResponse,
    AccountListResponse,
    AccountResponse,
    CreateAccountCommand,
    CreateAccountUseCase,
    DeleteAccountUseCase,
    GetAccountBalanceUseCase,
    GetAccountUseCase,
    ListAccountsQuery,
    ListAccountsUseCase,
    UpdateAccountCommand,
    UpdateAccountUseCase,
)
from src.app.use_cases.context import RequestContext
from src.depends import get_request_context, get_unit_of_work
from src.domain.entities import AccountType

router = APIRouter(prefix="/accounts", tags=["Accounts"])


class CreateAccountRequest(BaseModel):
    organization_id: UUID
    parent_id: Optional[UUID] = None
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    account_type: AccountType
    currency_code: Optional[str] = Field(None, min_length=3, max_length=3)
    description: Optional[str] = None
    is_active: bool = True


class UpdateAccountRequest(BaseModel):
    parent_id: Optional[UUID] = None
    code: Optional[str] = Field(None, min_length=1, max_length=50)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    account_type: Optional[AccountType] = None
    currency_code: Optional[str] = Field(None, min_length=3, max_length=3)
    description: Optional[str] = None
    is_active: Optional[bool] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=AccountListResponse)
async def list_accounts(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    organization_id: Optional[UUID] = Query(None),
    account_type: Optional[AccountType] = Query(None),
    is_active: Optional[bool] = Query(None),
    search: Optional[str] = Query(None, description="Matches name or code"),
    page: int = Query(1, ge=1),
    per_page: int = Query(
        ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE
    ),
):
    result = await ListAccountsUseCase(uow).execute(
        context.tenant_id,
        ListAccountsQuery(
            organization_id=organization_id,
            account_type=account_type,
            is_active=is_active,
            search=search,
            page=page,
            per_page=per_page,
        ),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AccountResponse)
async def create_account(
    request: CreateAccountRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Account

    Raises:
        - 404 Not Found: ORGANIZATION_NOT_FOUND, PARENT_ACCOUNT_NOT_FOUND
        - 409 Conflict: ACCOUNT_CODE_TAKEN
    """
    result = await CreateAccountUseCase(uow).execute(
        context.tenant_id, CreateAccountCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{account_id}", status_code=status.HTTP_200_OK, response_model=AccountResponse)
async def get_account(
    account_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetAccountUseCase(uow).execute(context.tenant_id, account_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{account_id}", status_code=status.HTTP_200_OK, response_model=AccountResponse)
async def update_account(
    account_id: UUID,
    request: UpdateAccountRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Account (partial)

    Raises:
        - 404 Not Found: ACCOUNT_NOT_FOUND, PARENT_ACCOUNT_NOT_FOUND
        - 409 Conflict: ACCOUNT_CODE_TAKEN
        - 422 Unprocessable Entity: ACCOUNT_HIERARCHY_CYCLE
    """
    result = await UpdateAccountUseCase(uow).execute(
        context.tenant_id,
        account_id,
        UpdateAccountCommand(**request.model_dump(exclude_unset=True)),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    account_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteAccountUseCase(uow).execute(context.tenant_id, account_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{account_id}/balance",
    status_code=status.HTTP_200_OK,
    response_model=AccountBalanceResponse,
)
async def get_account_balance(
    account_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    posted_only: bool = Query(False, description="Only count lines of posted entries"),
):
    """
    Account Balance

    debits - credits for asset/expense accounts, credits - debits otherwise.
    """
    result = await GetAccountBalanceUseCase(uow).execute(
        context.tenant_id, account_id, posted_only=posted_only
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
