"""
Unit tests for Chart of Accounts Use Cases
Tests ownership, hierarchy and balance rules with mocked dependencies.
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

from src.app.use_cases.accounts import (
    CreateAccountCommand,
    CreateAccountUseCase,
    GetAccountBalanceUseCase,
    UpdateAccountCommand,
    UpdateAccountUseCase,
)
from src.domain.entities import Account, Organization
from src.domain.entities.enums import AccountType


def make_account(organization_id, account_type=AccountType.asset, parent_id=None, code="1000"):
    return Account(
        id=uuid4(),
        organization_id=organization_id,
        parent_id=parent_id,
        code=code,
        name=f"Account {code}",
        account_type=account_type,
    )


@pytest.mark.asyncio
async def test_create_account_defaults_currency_to_organization(mock_uow):
    tenant_id = uuid4()
    organization = Organization(id=uuid4(), tenant_id=tenant_id, name="Acme", currency_code="EUR")
    mock_uow.organizations.get_by_id_for_tenant = AsyncMock(return_value=organization)
    mock_uow.accounts.get_by_code = AsyncMock(return_value=None)
    mock_uow.accounts.create = AsyncMock(side_effect=lambda a: a)

    result = await CreateAccountUseCase(mock_uow).execute(
        tenant_id,
        CreateAccountCommand(
            organization_id=organization.id,
            code="1000",
            name="Cash",
            account_type=AccountType.asset,
        ),
    )

    assert result.is_ok()
    assert result.value.currency_code == "EUR"
    assert result.value.account_type == "asset"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_account_duplicate_code(mock_uow):
    organization = Organization(id=uuid4(), tenant_id=uuid4(), name="Acme")
    mock_uow.organizations.get_by_id_for_tenant = AsyncMock(return_value=organization)
    mock_uow.accounts.get_by_code = AsyncMock(return_value=make_account(organization.id))

    result = await CreateAccountUseCase(mock_uow).execute(
        organization.tenant_id,
        CreateAccountCommand(
            organization_id=organization.id,
            code="1000",
            name="Cash",
            account_type=AccountType.asset,
        ),
    )

    assert result.is_err()
    assert result.error.code == "ACCOUNT_CODE_TAKEN"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_account_parent_in_other_organization(mock_uow):
    organization = Organization(id=uuid4(), tenant_id=uuid4(), name="Acme")
    foreign_parent = make_account(uuid4())
    mock_uow.organizations.get_by_id_for_tenant = AsyncMock(return_value=organization)
    mock_uow.accounts.get_by_code = AsyncMock(return_value=None)
    mock_uow.accounts.get_by_id_for_tenant = AsyncMock(return_value=foreign_parent)

    result = await CreateAccountUseCase(mock_uow).execute(
        organization.tenant_id,
        CreateAccountCommand(
            organization_id=organization.id,
            parent_id=foreign_parent.id,
            code="1010",
            name="Petty cash",
            account_type=AccountType.asset,
        ),
    )

    assert result.is_err()
    assert result.error.code == "PARENT_ACCOUNT_NOT_FOUND"


@pytest.mark.asyncio
async def test_reparent_under_own_descendant_is_rejected(mock_uow):
    """A -> B -> C; moving A under C would close a loop"""
    organization_id = uuid4()
    a = make_account(organization_id, code="1000")
    b = make_account(organization_id, parent_id=a.id, code="1100")
    c = make_account(organization_id, parent_id=b.id, code="1110")
    by_id = {a.id: a, b.id: b, c.id: c}

    async def get_for_tenant(account_id, tenant_id):
        return by_id.get(account_id)

    async def get_by_id(account_id):
        return by_id.get(account_id)

    mock_uow.accounts.get_by_id_for_tenant = AsyncMock(side_effect=get_for_tenant)
    mock_uow.accounts.get_by_id = AsyncMock(side_effect=get_by_id)
    mock_uow.accounts.update = AsyncMock()

    result = await UpdateAccountUseCase(mock_uow).execute(
        uuid4(), a.id, UpdateAccountCommand(parent_id=c.id)
    )

    assert result.is_err()
    assert result.error.code == "ACCOUNT_HIERARCHY_CYCLE"
    assert a.parent_id is None
    mock_uow.accounts.update.assert_not_called()


@pytest.mark.asyncio
async def test_reparent_under_itself_is_rejected(mock_uow):
    a = make_account(uuid4())
    mock_uow.accounts.get_by_id_for_tenant = AsyncMock(return_value=a)

    result = await UpdateAccountUseCase(mock_uow).execute(
        uuid4(), a.id, UpdateAccountCommand(parent_id=a.id)
    )

    assert result.is_err()
    assert result.error.code == "ACCOUNT_HIERARCHY_CYCLE"


@pytest.mark.asyncio
async def test_reparent_to_sibling_branch(mock_uow):
    organization_id = uuid4()
    root = make_account(organization_id, code="1000")
    a = make_account(organization_id, parent_id=root.id, code="1100")
    b = make_account(organization_id, parent_id=root.id, code="1200")
    by_id = {root.id: root, a.id: a, b.id: b}

    async def get_for_tenant(account_id, tenant_id):
        return by_id.get(account_id)

    async def get_by_id(account_id):
        return by_id.get(account_id)

    mock_uow.accounts.get_by_id_for_tenant = AsyncMock(side_effect=get_for_tenant)
    mock_uow.accounts.get_by_id = AsyncMock(side_effect=get_by_id)
    mock_uow.accounts.update = AsyncMock(side_effect=lambda acc: acc)

    result = await UpdateAccountUseCase(mock_uow).execute(
        uuid4(), a.id, UpdateAccountCommand(parent_id=b.id)
    )

    assert result.is_ok()
    assert result.value.parent_id == str(b.id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_rejects_null_required_field(mock_uow):
    result = await UpdateAccountUseCase(mock_uow).execute(
        uuid4(), uuid4(), UpdateAccountCommand(name=None)
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "account_type, normal_balance, expected",
    [
        (AccountType.asset, "debit", Decimal("300.00")),
        (AccountType.revenue, "credit", Decimal("-300.00")),
    ],
)
async def test_account_balance_polarity(mock_uow, account_type, normal_balance, expected):
    account = make_account(uuid4(), account_type=account_type)
    mock_uow.accounts.get_by_id_for_tenant = AsyncMock(return_value=account)
    mock_uow.journal_entries.sum_lines_for_account = AsyncMock(
        return_value=(Decimal("500.00"), Decimal("200.00"))
    )

    result = await GetAccountBalanceUseCase(mock_uow).execute(uuid4(), account.id)

    assert result.is_ok()
    assert result.value.normal_balance == normal_balance
    assert result.value.balance == expected
    assert result.value.total_debit == Decimal("500.00")
    mock_uow.journal_entries.sum_lines_for_account.assert_called_once_with(
        account.id, posted_only=False
    )


@pytest.mark.asyncio
async def test_account_balance_not_found(mock_uow):
    mock_uow.accounts.get_by_id_for_tenant = AsyncMock(return_value=None)

    result = await GetAccountBalanceUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "ACCOUNT_NOT_FOUND"
