"""
Use Case: Update / Delete Sales Order

Only draft orders change. Totals are recomputed on every update because
lines, tax_amount and discount_amount all feed them.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import SalesOrder, SalesOrderStatus
from src.domain.sales import is_editable

from .create_sales_order_use_case import find_active_customer
from .dtos import SalesOrderResponse, UpdateSalesOrderCommand
from .order_lines import apply_totals, build_order_lines

NOT_FOUND = Error("ORDER_NOT_FOUND", "Sales order not found")


def editability_error(order: SalesOrder):
    status = SalesOrderStatus(order.status)
    if not is_editable(status):
        return Error("ORDER_NOT_EDITABLE", f"Sales order is {status.value}")
    return None


class UpdateSalesOrderUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, order_id: UUID, command: UpdateSalesOrderCommand
    ) -> Result[SalesOrderResponse]:
        changes = command.model_dump(
            exclude_unset=True, exclude={"lines", "tax_amount", "discount_amount"}
        )
        required_fields = (
            "customer_id",
            "order_number",
            "order_date",
            "currency_code",
            "tax_amount",
            "discount_amount",
            "lines",
        )
        for required in required_fields:
            if required in command.model_fields_set and getattr(command, required) is None:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Field '{required}' cannot be null")
                )

        async with self.uow:
            order = await self.uow.sales_orders.get_by_id_for_tenant(
                order_id, tenant_id, for_update=True
            )
            if not order:
                return Return.err(NOT_FOUND)

            error = editability_error(order)
            if error:
                return Return.err(error)

            order_date = changes.get("order_date", order.order_date)
            delivery_date = changes.get("delivery_date", order.delivery_date)
            if delivery_date and delivery_date < order_date:
                return Return.err(
                    Error("VALIDATION_ERROR", "delivery_date cannot be before order_date")
                )

            if "customer_id" in changes and changes["customer_id"] != order.customer_id:
                customer = await find_active_customer(
                    self.uow, changes["customer_id"], order.organization_id
                )
                if isinstance(customer, Error):
                    return Return.err(customer)

            if changes.get("branch_id") is not None:
                branch = await self.uow.branches.get_by_id_for_organization(
                    changes["branch_id"], order.organization_id
                )
                if not branch:
                    return Return.err(Error("BRANCH_NOT_FOUND", "Branch not found"))

            if "order_number" in changes and changes["order_number"] != order.order_number:
                existing = await self.uow.sales_orders.get_by_number(
                    order.organization_id, changes["order_number"]
                )
                if existing and existing.id != order.id:
                    return Return.err(
                        Error(
                            "ORDER_NUMBER_TAKEN",
                            f"Order number {changes['order_number']} already exists",
                        )
                    )

            if command.lines is not None:
                lines = await build_order_lines(
                    self.uow, order.organization_id, command.lines
                )
                if isinstance(lines, Error):
                    return Return.err(lines)
            else:
                lines = await self.uow.sales_orders.get_lines(order.id)

            tax_amount = (
                command.tax_amount if command.tax_amount is not None else order.tax_amount
            )
            discount_amount = (
                command.discount_amount
                if command.discount_amount is not None
                else order.discount_amount
            )
            error = apply_totals(order, lines, tax_amount, discount_amount)
            if error:
                return Return.err(error)

            if command.lines is not None:
                await self.uow.sales_orders.replace_lines(order.id, lines)

            for field, value in changes.items():
                setattr(order, field, value)
            order.updated_at = utcnow()
            order = await self.uow.sales_orders.update(order)
            lines = await self.uow.sales_orders.get_lines(order.id)
            await self.uow.commit()

            return Return.ok(SalesOrderResponse.from_entity(order, lines))


class DeleteSalesOrderUseCase:
    """Soft delete of a draft order"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, order_id: UUID) -> Result[None]:
        async with self.uow:
            order = await self.uow.sales_orders.get_by_id_for_tenant(
                order_id, tenant_id, for_update=True
            )
            if not order:
                return Return.err(NOT_FOUND)

            error = editability_error(order)
            if error:
                return Return.err(error)

            order.deleted_at = utcnow()
            await self.uow.sales_orders.update(order)
            await self.uow.commit()
            return Return.ok(None)
