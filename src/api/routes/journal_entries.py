"""
Journal Entry API Routes

Draft CRUD plus the posting and cancellation transitions.
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
from src.app.use_cases.journal_entries import (
    CancelJournalEntryUseCase,
    CheckJournalEntryBalanceUseCase,
    CreateJournalEntryCommand,
    CreateJournalEntryUseCase,
    DeleteJournalEntryUseCase,
    GetJournalEntryUseCase,
    JournalEntryBalanceResponse,
    JournalEntryListResponse,
    JournalEntryResponse,
    ListJournalEntriesQuery,
    ListJournalEntriesUseCase,
    PostJournalEntryUseCase,
    UpdateJournalEntryCommand,
    UpdateJournalEntryUseCase,
)
from src.depends import get_request_context, get_unit_of_work
from src.domain.entities import JournalEntryStatus
from src.domain.ledger import MAX_AMOUNT

router = APIRouter(prefix="/journal-entries", tags=["Journal Entries"])


class JournalLineRequest(BaseModel):
    account_id: UUID
    debit: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    credit: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    description: Optional[str] = Field(None, max_length=500)
    currency_code: Optional[str] = Field(None, min_length=3, max_length=3)


class CreateJournalEntryRequest(BaseModel):
    organization_id: UUID
    branch_id: Optional[UUID] = None
    entry_number: str = Field(..., min_length=1, max_length=50)
    entry_date: date
    reference: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    currency_code: Optional[str] = Field(None, min_length=3, max_length=3)
    lines: List[JournalLineRequest] = Field(..., min_length=2)


class UpdateJournalEntryRequest(BaseModel):
    branch_id: Optional[UUID] = None
    entry_number: Optional[str] = Field(None, min_length=1, max_length=50)
    entry_date: Optional[date] = None
    reference: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    currency_code: Optional[str] = Field(None, min_length=3, max_length=3)
    lines: Optional[List[JournalLineRequest]] = Field(None, min_length=2)


@router.get("", status_code=status.HTTP_200_OK, response_model=JournalEntryListResponse)
async def list_journal_entries(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    organization_id: Optional[UUID] = Query(None),
    branch_id: Optional[UUID] = Query(None),
    entry_status: Optional[JournalEntryStatus] = Query(None, alias="status"),
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    search: Optional[str] = Query(None, description="Matches entry number or reference"),
    page: int = Query(1, ge=1),
    per_page: int = Query(
        ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE
    ),
):
    result = await ListJournalEntriesUseCase(uow).execute(
        context.tenant_id,
        ListJournalEntriesQuery(
            organization_id=organization_id,
            branch_id=branch_id,
            status=entry_status,
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


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JournalEntryResponse)
async def create_journal_entry(
    request: CreateJournalEntryRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Journal Entry

    The entry is stored as draft regardless of balance. Use
    POST /journal-entries/{id}/post to post it.

    Raises:
        - 404 Not Found: ORGANIZATION_NOT_FOUND, BRANCH_NOT_FOUND, ACCOUNT_NOT_FOUND
        - 409 Conflict: ENTRY_NUMBER_TAKEN
        - 422 Unprocessable Entity: fewer than two lines
    """
    result = await CreateJournalEntryUseCase(uow).execute(
        context.tenant_id, CreateJournalEntryCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{entry_id}", status_code=status.HTTP_200_OK, response_model=JournalEntryResponse
)
async def get_journal_entry(
    entry_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetJournalEntryUseCase(uow).execute(context.tenant_id, entry_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{entry_id}", status_code=status.HTTP_200_OK, response_model=JournalEntryResponse
)
async def update_journal_entry(
    entry_id: UUID,
    request: UpdateJournalEntryRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Draft Journal Entry

    Raises:
        - 404 Not Found: ENTRY_NOT_FOUND, BRANCH_NOT_FOUND, ACCOUNT_NOT_FOUND
        - 409 Conflict: ENTRY_NUMBER_TAKEN
        - 422 Unprocessable Entity: ENTRY_ALREADY_POSTED, ENTRY_NOT_EDITABLE
    """
    result = await UpdateJournalEntryUseCase(uow).execute(
        context.tenant_id,
        entry_id,
        UpdateJournalEntryCommand(**request.model_dump(exclude_unset=True)),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_journal_entry(
    entry_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteJournalEntryUseCase(uow).execute(context.tenant_id, entry_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{entry_id}/post",
    status_code=status.HTTP_200_OK,
    response_model=JournalEntryResponse,
)
async def post_journal_entry(
    entry_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Post Journal Entry

    Raises:
        - 404 Not Found: ENTRY_NOT_FOUND
        - 422 Unprocessable Entity: ENTRY_ALREADY_POSTED, UNBALANCED_ENTRY,
          INVALID_STATUS_TRANSITION
    """
    result = await PostJournalEntryUseCase(uow).execute(
        context.tenant_id, entry_id, context.user_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{entry_id}/cancel",
    status_code=status.HTTP_200_OK,
    response_model=JournalEntryResponse,
)
async def cancel_journal_entry(
    entry_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CancelJournalEntryUseCase(uow).execute(
        context.tenant_id, entry_id, context.user_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{entry_id}/balance",
    status_code=status.HTTP_200_OK,
    response_model=JournalEntryBalanceResponse,
)
async def check_journal_entry_balance(
    entry_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CheckJournalEntryBalanceUseCase(uow).execute(context.tenant_id, entry_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
