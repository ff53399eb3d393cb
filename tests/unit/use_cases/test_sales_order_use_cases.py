"""
Unit tests for Customer and Sales Order Use Cases
Tests pricing, draft-only edits and the status lifecycle with mocked dependencies.
"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

from src.app.use_cases.sales import (
    ChangeSalesOrderStatusUseCase,
    CreateSalesOrderCommand,
    CreateSalesOrderUseCase,
    DeleteCustomerUseCase,
    DeleteSalesOrderUseCase,
    SalesOrderLineCommand,
    UpdateSalesOrderCommand,
    UpdateSalesOrderUseCase,
)
from src.domain.entities import (
    Customer,
    Organization,
    Product,
    SalesOrder,
    SalesOrderLine,
)
from src.domain.entities.enums import CustomerStatus, SalesOrderStatus


def make_customer(organization_id, status=CustomerStatus.active):
    return Customer(
        id=uuid4(),
        organization_id=organization_id,
        code="C-001",
        name="Initech",
        currency_code="EUR",
        status=status,
    )


def make_order(status=SalesOrderStatus.draft, **kwargs):
    return SalesOrder(
        id=uuid4(),
        organization_id=uuid4(),
        customer_id=uuid4(),
        order_number="SO-0001",
        order_date=date(2024, 2, 1),
        status=status,
        **kwargs,
    )


def make_line(order, line_total="100"):
    return SalesOrderLine(
        id=uuid4(),
        sales_order_id=order.id,
        line_number=1,
        description="Consulting",
        quantity=Decimal("1"),
        unit_price=Decimal(line_total),
        line_total=Decimal(line_total),
    )


def arrange_create(mock_uow, organization, customer, products=()):
    mock_uow.organizations.get_by_id_for_tenant = AsyncMock(return_value=organization)
    mock_uow.customers.get_by_id_for_organization = AsyncMock(return_value=customer)
    mock_uow.sales_orders.get_by_number = AsyncMock(return_value=None)
    mock_uow.products.get_many_for_organization = AsyncMock(return_value=list(products))
    mock_uow.sales_orders.create = AsyncMock(side_effect=lambda order, lines: order)


def order_command(organization_id, customer_id, lines, **kwargs):
    return CreateSalesOrderCommand(
        organization_id=organization_id,
        customer_id=customer_id,
        order_number="SO-0001",
        order_date=date(2024, 2, 1),
        lines=lines,
        **kwargs,
    )


@pytest.mark.asyncio
async def test_create_order_computes_totals(mock_uow):
    """Test line and order totals are derived and status starts as draft"""
    # Arrange
    organization = Organization(id=uuid4(), tenant_id=uuid4(), name="Acme")
    customer = make_customer(organization.id)
    product = Product(id=uuid4(), organization_id=organization.id, code="W", name="Widget")
    arrange_create(mock_uow, organization, customer, products=[product])

    # Act
    result = await CreateSalesOrderUseCase(mock_uow).execute(
        organization.tenant_id,
        order_command(
            organization.id,
            customer.id,
            [
                SalesOrderLineCommand(
                    product_id=product.id,
                    quantity=Decimal("2"),
                    unit_price=Decimal("100"),
                    discount_percent=Decimal("10"),
                    tax_percent=Decimal("5"),
                ),
                SalesOrderLineCommand(description="Delivery", unit_price=Decimal("11")),
            ],
            tax_amount=Decimal("5"),
            discount_amount=Decimal("20.50"),
        ),
    )

    # Assert
    assert result.is_ok()
    order = result.value
    assert order.status == "draft"
    assert order.currency_code == "EUR"
    assert [line.line_total for line in order.lines] == [Decimal("189.00"), Decimal("11.00")]
    assert order.lines[0].description == "Widget"
    assert order.subtotal == Decimal("200.00")
    assert order.total_amount == Decimal("184.50")
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_order_for_inactive_customer(mock_uow):
    organization = Organization(id=uuid4(), tenant_id=uuid4(), name="Acme")
    customer = make_customer(organization.id, status=CustomerStatus.inactive)
    arrange_create(mock_uow, organization, customer)

    result = await CreateSalesOrderUseCase(mock_uow).execute(
        organization.tenant_id, order_command(organization.id, customer.id, [])
    )

    assert result.is_err()
    assert result.error.code == "CUSTOMER_INACTIVE"
    mock_uow.sales_orders.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_order_with_product_of_other_organization(mock_uow):
    organization = Organization(id=uuid4(), tenant_id=uuid4(), name="Acme")
    customer = make_customer(organization.id)
    arrange_create(mock_uow, organization, customer, products=[])

    result = await CreateSalesOrderUseCase(mock_uow).execute(
        organization.tenant_id,
        order_command(
            organization.id, customer.id, [SalesOrderLineCommand(product_id=uuid4())]
        ),
    )

    assert result.is_err()
    assert result.error.code == "PRODUCT_NOT_FOUND"


@pytest.mark.asyncio
async def test_create_order_line_without_description(mock_uow):
    organization = Organization(id=uuid4(), tenant_id=uuid4(), name="Acme")
    arrange_create(mock_uow, organization, make_customer(organization.id))

    result = await CreateSalesOrderUseCase(mock_uow).execute(
        organization.tenant_id,
        order_command(organization.id, uuid4(), [SalesOrderLineCommand(unit_price=1)]),
    )

    assert result.is_err()
    assert result.error.code == "INVALID_LINES"


@pytest.mark.asyncio
async def test_create_order_discount_above_value(mock_uow):
    organization = Organization(id=uuid4(), tenant_id=uuid4(), name="Acme")
    arrange_create(mock_uow, organization, make_customer(organization.id))

    result = await CreateSalesOrderUseCase(mock_uow).execute(
        organization.tenant_id,
        order_command(
            organization.id,
            uuid4(),
            [SalesOrderLineCommand(description="Setup", unit_price=Decimal("50"))],
            discount_amount=Decimal("50.01"),
        ),
    )

    assert result.is_err()
    assert result.error.code == "INVALID_ORDER_TOTALS"
    mock_uow.sales_orders.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_order_delivery_before_order_date(mock_uow):
    result = await CreateSalesOrderUseCase(mock_uow).execute(
        uuid4(),
        order_command(uuid4(), uuid4(), [], delivery_date=date(2024, 1, 31)),
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_update_confirmed_order_is_rejected(mock_uow):
    order = make_order(status=SalesOrderStatus.confirmed)
    mock_uow.sales_orders.get_by_id_for_tenant = AsyncMock(return_value=order)

    result = await UpdateSalesOrderUseCase(mock_uow).execute(
        uuid4(), order.id, UpdateSalesOrderCommand(notes="late change")
    )

    assert result.is_err()
    assert result.error.code == "ORDER_NOT_EDITABLE"
    mock_uow.sales_orders.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_discount_recomputes_total(mock_uow):
    order = make_order()
    lines = [make_line(order, "100")]
    mock_uow.sales_orders.get_by_id_for_tenant = AsyncMock(return_value=order)
    mock_uow.sales_orders.get_lines = AsyncMock(return_value=lines)
    mock_uow.sales_orders.update = AsyncMock(side_effect=lambda o: o)

    result = await UpdateSalesOrderUseCase(mock_uow).execute(
        uuid4(), order.id, UpdateSalesOrderCommand(discount_amount=Decimal("15"))
    )

    assert result.is_ok()
    assert result.value.subtotal == Decimal("100.00")
    assert result.value.total_amount == Decimal("85.00")
    mock_uow.sales_orders.replace_lines.assert_not_called()


@pytest.mark.asyncio
async def test_delete_processing_order_is_rejected(mock_uow):
    order = make_order(status=SalesOrderStatus.processing)
    mock_uow.sales_orders.get_by_id_for_tenant = AsyncMock(return_value=order)

    result = await DeleteSalesOrderUseCase(mock_uow).execute(uuid4(), order.id)

    assert result.is_err()
    assert result.error.code == "ORDER_NOT_EDITABLE"
    assert order.deleted_at is None


@pytest.mark.asyncio
async def test_confirm_order_without_lines(mock_uow):
    order = make_order()
    mock_uow.sales_orders.get_by_id_for_tenant = AsyncMock(return_value=order)
    mock_uow.sales_orders.get_lines = AsyncMock(return_value=[])

    result = await ChangeSalesOrderStatusUseCase(mock_uow).execute(
        uuid4(), order.id, SalesOrderStatus.confirmed, uuid4()
    )

    assert result.is_err()
    assert result.error.code == "EMPTY_ORDER"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_order_records_audit_event(mock_uow):
    tenant_id, user_id = uuid4(), uuid4()
    order = make_order()
    mock_uow.sales_orders.get_by_id_for_tenant = AsyncMock(return_value=order)
    mock_uow.sales_orders.get_lines = AsyncMock(return_value=[make_line(order)])
    mock_uow.sales_orders.update = AsyncMock(side_effect=lambda o: o)
    mock_uow.audit_events.create = AsyncMock()

    result = await ChangeSalesOrderStatusUseCase(mock_uow).execute(
        tenant_id, order.id, SalesOrderStatus.confirmed, user_id
    )

    assert result.is_ok()
    assert result.value.status == "confirmed"
    event = mock_uow.audit_events.create.call_args.args[0]
    assert event.action == "sales_order_status_changed"
    assert event.user_id == user_id
    assert event.event_metadata["from"] == "draft"
    assert event.event_metadata["to"] == "confirmed"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_completed_order_is_terminal(mock_uow):
    order = make_order(status=SalesOrderStatus.completed)
    mock_uow.sales_orders.get_by_id_for_tenant = AsyncMock(return_value=order)

    result = await ChangeSalesOrderStatusUseCase(mock_uow).execute(
        uuid4(), order.id, SalesOrderStatus.cancelled, uuid4()
    )

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS_TRANSITION"


@pytest.mark.asyncio
async def test_delete_customer_with_open_orders(mock_uow):
    customer = make_customer(uuid4())
    mock_uow.customers.get_by_id_for_tenant = AsyncMock(return_value=customer)
    mock_uow.sales_orders.count_open_for_customer = AsyncMock(return_value=2)

    result = await DeleteCustomerUseCase(mock_uow).execute(uuid4(), customer.id)

    assert result.is_err()
    assert result.error.code == "CUSTOMER_HAS_OPEN_ORDERS"
    assert customer.deleted_at is None
    mock_uow.commit.assert_not_called()
