"""
Sales order read use cases: list, get.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import build_page_meta

from .dtos import ListSalesOrdersQuery, SalesOrderListResponse, SalesOrderResponse


class ListSalesOrdersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, query: ListSalesOrdersQuery
    ) -> Result[SalesOrderListResponse]:
        async with self.uow:
            orders, total = await self.uow.sales_orders.list_for_tenant_paginated(
                tenant_id,
                organization_id=query.organization_id,
                branch_id=query.branch_id,
                customer_id=query.customer_id,
                status=query.status,
                from_date=query.from_date,
                to_date=query.to_date,
                search=query.search,
                page=query.page,
                per_page=query.per_page,
            )
            lines_by_order = await self.uow.sales_orders.get_lines_for_orders(
                [order.id for order in orders]
            )
            return Return.ok(
                SalesOrderListResponse(
                    data=[
                        SalesOrderResponse.from_entity(order, lines_by_order[order.id])
                        for order in orders
                    ],
                    meta=build_page_meta(query.page, query.per_page, total),
                )
            )


class GetSalesOrderUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, order_id: UUID) -> Result[SalesOrderResponse]:
        async with self.uow:
            order = await self.uow.sales_orders.get_by_id_for_tenant(order_id, tenant_id)
            if not order:
                return Return.err(Error("ORDER_NOT_FOUND", "Sales order not found"))
            lines = await self.uow.sales_orders.get_lines(order.id)
            return Return.ok(SalesOrderResponse.from_entity(order, lines))
