"""
Product catalogue use cases, including the stock level read.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import build_page_meta
from src.domain.base import utcnow
from src.domain.entities import Product
from src.domain.inventory import needs_reorder
from src.domain.ledger import to_amount

from .dtos import (
    CreateProductCommand,
    ListProductsQuery,
    ProductListResponse,
    ProductResponse,
    ProductStockResponse,
    UpdateProductCommand,
)

NOT_FOUND = Error("PRODUCT_NOT_FOUND", "Product not found")
AMOUNT_FIELDS = ("cost_price", "selling_price", "reorder_level")


def code_taken(code: str) -> Error:
    return Error("PRODUCT_CODE_TAKEN", f"Product code {code} already exists")


class CreateProductUseCase:
    """
    Business Rules:
    - Organization must belong to the caller's tenant
    - code is unique within the organization
    - category (if any) must be a product of the same organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: CreateProductCommand
    ) -> Result[ProductResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                command.organization_id, tenant_id
            )
            if not organization:
                return Return.err(
                    Error("ORGANIZATION_NOT_FOUND", "Organization not found")
                )

            if await self.uow.products.get_by_code(organization.id, command.code):
                return Return.err(code_taken(command.code))

            if command.category_id is not None:
                category = await self.uow.products.get_by_id_for_organization(
                    command.category_id, organization.id
                )
                if not category:
                    return Return.err(Error("CATEGORY_NOT_FOUND", "Category not found"))

            values = command.model_dump()
            for field in AMOUNT_FIELDS:
                values[field] = to_amount(values[field])
            product = await self.uow.products.create(Product(**values))
            await self.uow.commit()

            return Return.ok(ProductResponse.from_entity(product))


class ListProductsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, query: ListProductsQuery
    ) -> Result[ProductListResponse]:
        async with self.uow:
            products, total = await self.uow.products.list_for_tenant_paginated(
                tenant_id,
                organization_id=query.organization_id,
                product_type=query.product_type,
                status=query.status,
                search=query.search,
                page=query.page,
                per_page=query.per_page,
            )
            return Return.ok(
                ProductListResponse(
                    data=[ProductResponse.from_entity(p) for p in products],
                    meta=build_page_meta(query.page, query.per_page, total),
                )
            )


class GetProductUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, product_id: UUID) -> Result[ProductResponse]:
        async with self.uow:
            product = await self.uow.products.get_by_id_for_tenant(product_id, tenant_id)
            if not product:
                return Return.err(NOT_FOUND)
            return Return.ok(ProductResponse.from_entity(product))


class UpdateProductUseCase:
    """
    Business Rules:
    - code stays unique within the organization
    - category must be in the same organization and may not be the product
      itself or one of its sub-products
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, product_id: UUID, command: UpdateProductCommand
    ) -> Result[ProductResponse]:
        changes = command.model_dump(exclude_unset=True)
        required_fields = ("code", "name", "product_type", "track_inventory", "status")
        for required in required_fields + AMOUNT_FIELDS:
            if required in changes and changes[required] is None:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Field '{required}' cannot be null")
                )

        async with self.uow:
            product = await self.uow.products.get_by_id_for_tenant(product_id, tenant_id)
            if not product:
                return Return.err(NOT_FOUND)

            if "code" in changes and changes["code"] != product.code:
                existing = await self.uow.products.get_by_code(
                    product.organization_id, changes["code"]
                )
                if existing and existing.id != product.id:
                    return Return.err(code_taken(changes["code"]))

            if changes.get("category_id") is not None:
                category = await self.uow.products.get_by_id_for_organization(
                    changes["category_id"], product.organization_id
                )
                if not category:
                    return Return.err(Error("CATEGORY_NOT_FOUND", "Category not found"))
                if await self._creates_cycle(product, category):
                    return Return.err(
                        Error(
                            "PRODUCT_HIERARCHY_CYCLE",
                            "Product cannot be filed under itself or its sub-products",
                        )
                    )

            for field in AMOUNT_FIELDS:
                if field in changes:
                    changes[field] = to_amount(changes[field])
            for field, value in changes.items():
                setattr(product, field, value)
            product.updated_at = utcnow()
            product = await self.uow.products.update(product)
            await self.uow.commit()

            return Return.ok(ProductResponse.from_entity(product))

    async def _creates_cycle(self, product: Product, category: Product) -> bool:
        seen = set()
        current: Optional[Product] = category
        while current is not None:
            if current.id == product.id or current.id in seen:
                return True
            seen.add(current.id)
            if current.category_id is None:
                return False
            current = await self.uow.products.get_by_id_for_organization(
                current.category_id, product.organization_id
            )
        return False


class DeleteProductUseCase:
    """Soft delete; movements and order lines keep referencing the product"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, product_id: UUID) -> Result[None]:
        async with self.uow:
            product = await self.uow.products.get_by_id_for_tenant(product_id, tenant_id)
            if not product:
                return Return.err(NOT_FOUND)

            product.deleted_at = utcnow()
            await self.uow.products.update(product)
            await self.uow.commit()
            return Return.ok(None)


class GetProductStockUseCase:
    """
    Stock on hand = receipts - (issues + adjustments + transfers), summed
    fresh from the movements, optionally for one location.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, product_id: UUID, location_id: Optional[UUID] = None
    ) -> Result[ProductStockResponse]:
        async with self.uow:
            product = await self.uow.products.get_by_id_for_tenant(product_id, tenant_id)
            if not product:
                return Return.err(NOT_FOUND)

            if location_id is not None:
                branch = await self.uow.branches.get_by_id_for_organization(
                    location_id, product.organization_id
                )
                if not branch:
                    return Return.err(Error("BRANCH_NOT_FOUND", "Branch not found"))

            quantity = await self.uow.stock_movements.sum_signed_quantity(
                product.id, location_id=location_id
            )
            return Return.ok(
                ProductStockResponse(
                    product_id=str(product.id),
                    location_id=str(location_id) if location_id else None,
                    quantity_on_hand=quantity,
                    reorder_level=to_amount(product.reorder_level),
                    needs_reorder=needs_reorder(product, quantity),
                )
            )
