"""
Use Case: List Tenants
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import build_page_meta

from .dtos import ListTenantsQuery, TenantListResponse, TenantResponse


class ListTenantsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: ListTenantsQuery) -> Result[TenantListResponse]:
        async with self.uow:
            tenants, total = await self.uow.tenants.list_paginated(
                status=query.status,
                search=query.search,
                page=query.page,
                per_page=query.per_page,
            )
            return Return.ok(
                TenantListResponse(
                    data=[TenantResponse.from_entity(t) for t in tenants],
                    meta=build_page_meta(query.page, query.per_page, total),
                )
            )
