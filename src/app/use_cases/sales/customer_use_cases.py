"""
Customer use cases.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import build_page_meta
from src.domain.base import utcnow
from src.domain.entities import Customer
from src.domain.ledger import to_amount

from .dtos import (
    CreateCustomerCommand,
    CustomerListResponse,
    CustomerResponse,
    ListCustomersQuery,
    UpdateCustomerCommand,
)

NOT_FOUND = Error("CUSTOMER_NOT_FOUND", "Customer not found")


def code_taken(code: str) -> Error:
    return Error("CUSTOMER_CODE_TAKEN", f"Customer code {code} already exists")


class CreateCustomerUseCase:
    """
    Business Rules:
    - Organization must belong to the caller's tenant
    - code is unique within the organization
    - currency defaults to the organization's currency
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: CreateCustomerCommand
    ) -> Result[CustomerResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                command.organization_id, tenant_id
            )
            if not organization:
                return Return.err(
                    Error("ORGANIZATION_NOT_FOUND", "Organization not found")
                )

            if await self.uow.customers.get_by_code(organization.id, command.code):
                return Return.err(code_taken(command.code))

            values = command.model_dump()
            values["credit_limit"] = to_amount(values["credit_limit"])
            values["currency_code"] = command.currency_code or organization.currency_code
            customer = await self.uow.customers.create(Customer(**values))
            await self.uow.commit()

            return Return.ok(CustomerResponse.from_entity(customer))


class ListCustomersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, query: ListCustomersQuery
    ) -> Result[CustomerListResponse]:
        async with self.uow:
            customers, total = await self.uow.customers.list_for_tenant_paginated(
                tenant_id,
                organization_id=query.organization_id,
                status=query.status,
                search=query.search,
                page=query.page,
                per_page=query.per_page,
            )
            return Return.ok(
                CustomerListResponse(
                    data=[CustomerResponse.from_entity(c) for c in customers],
                    meta=build_page_meta(query.page, query.per_page, total),
                )
            )


class GetCustomerUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, customer_id: UUID) -> Result[CustomerResponse]:
        async with self.uow:
            customer = await self.uow.customers.get_by_id_for_tenant(customer_id, tenant_id)
            if not customer:
                return Return.err(NOT_FOUND)
            return Return.ok(CustomerResponse.from_entity(customer))


class UpdateCustomerUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, customer_id: UUID, command: UpdateCustomerCommand
    ) -> Result[CustomerResponse]:
        changes = command.model_dump(exclude_unset=True)
        for required in ("code", "name", "credit_limit", "currency_code", "status"):
            if required in changes and changes[required] is None:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Field '{required}' cannot be null")
                )
        if "credit_limit" in changes:
            changes["credit_limit"] = to_amount(changes["credit_limit"])

        async with self.uow:
            customer = await self.uow.customers.get_by_id_for_tenant(customer_id, tenant_id)
            if not customer:
                return Return.err(NOT_FOUND)

            if "code" in changes and changes["code"] != customer.code:
                existing = await self.uow.customers.get_by_code(
                    customer.organization_id, changes["code"]
                )
                if existing and existing.id != customer.id:
                    return Return.err(code_taken(changes["code"]))

            for field, value in changes.items():
                setattr(customer, field, value)
            customer.updated_at = utcnow()
            customer = await self.uow.customers.update(customer)
            await self.uow.commit()

            return Return.ok(CustomerResponse.from_entity(customer))


class DeleteCustomerUseCase:
    """Soft delete, refused while the customer has open sales orders"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, customer_id: UUID) -> Result[None]:
        async with self.uow:
            customer = await self.uow.customers.get_by_id_for_tenant(customer_id, tenant_id)
            if not customer:
                return Return.err(NOT_FOUND)

            open_orders = await self.uow.sales_orders.count_open_for_customer(customer.id)
            if open_orders:
                return Return.err(
                    Error(
                        "CUSTOMER_HAS_OPEN_ORDERS",
                        f"Customer has {open_orders} open sales order(s)",
                    )
                )

            customer.deleted_at = utcnow()
            await self.uow.customers.update(customer)
            await self.uow.commit()
            return Return.ok(None)
