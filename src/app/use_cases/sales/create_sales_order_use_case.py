"""
Use Case: Create Sales Order

Creates a draft order with priced lines and computed totals.
"""

from typing import Optional, Union
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Customer, CustomerStatus, SalesOrder, SalesOrderStatus

from .dtos import CreateSalesOrderCommand, SalesOrderResponse
from .order_lines import apply_totals, build_order_lines


async def find_active_customer(
    uow: UnitOfWork, customer_id: UUID, organization_id: UUID
) -> Union[Customer, Error]:
    customer: Optional[Customer] = await uow.customers.get_by_id_for_organization(
        customer_id, organization_id
    )
    if not customer:
        return Error("CUSTOMER_NOT_FOUND", "Customer not found")
    if CustomerStatus(customer.status) != CustomerStatus.active:
        return Error("CUSTOMER_INACTIVE", f"Customer {customer.code} is inactive")
    return customer


class CreateSalesOrderUseCase:
    """
    Business Rules:
    - Organization must belong to the caller's tenant
    - Customer must be an active customer of the organization
    - Branch (if any) must belong to the organization
    - order_number is unique within the organization
    - delivery_date may not precede order_date
    - line_total and order totals are always computed, never taken as input
    - Status is always draft on creation
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: CreateSalesOrderCommand
    ) -> Result[SalesOrderResponse]:
        if command.delivery_date and command.delivery_date < command.order_date:
            return Return.err(
                Error("VALIDATION_ERROR", "delivery_date cannot be before order_date")
            )

        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                command.organization_id, tenant_id
            )
            if not organization:
                return Return.err(
                    Error("ORGANIZATION_NOT_FOUND", "Organization not found")
                )

            customer = await find_active_customer(
                self.uow, command.customer_id, organization.id
            )
            if isinstance(customer, Error):
                return Return.err(customer)

            if command.branch_id is not None:
                branch = await self.uow.branches.get_by_id_for_organization(
                    command.branch_id, organization.id
                )
                if not branch:
                    return Return.err(Error("BRANCH_NOT_FOUND", "Branch not found"))

            if await self.uow.sales_orders.get_by_number(
                organization.id, command.order_number
            ):
                return Return.err(
                    Error(
                        "ORDER_NUMBER_TAKEN",
                        f"Order number {command.order_number} already exists",
                    )
                )

            lines = await build_order_lines(self.uow, organization.id, command.lines)
            if isinstance(lines, Error):
                return Return.err(lines)

            order = SalesOrder(
                organization_id=organization.id,
                branch_id=command.branch_id,
                customer_id=customer.id,
                order_number=command.order_number,
                order_date=command.order_date,
                delivery_date=command.delivery_date,
                reference=command.reference,
                currency_code=command.currency_code or customer.currency_code,
                status=SalesOrderStatus.draft,
                notes=command.notes,
            )
            error = apply_totals(order, lines, command.tax_amount, command.discount_amount)
            if error:
                return Return.err(error)

            order = await self.uow.sales_orders.create(order, lines)
            await self.uow.commit()

            return Return.ok(SalesOrderResponse.from_entity(order, lines))
