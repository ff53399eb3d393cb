"""
Stock movement use cases.

Quantities are stored positive and rounded to cents; the movement type
gives the direction. Movements are hard-deleted.
"""

import logging
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import build_page_meta
from src.domain.base import to_naive_utc, utcnow
from src.domain.entities import Product, StockMovement
from src.domain.inventory import MAX_QUANTITY, tracks_stock
from src.domain.ledger import ZERO, to_amount

from .dtos import (
    CreateStockMovementCommand,
    ListStockMovementsQuery,
    StockMovementListResponse,
    StockMovementResponse,
    UpdateStockMovementCommand,
)

logger = logging.getLogger(__name__)

NOT_FOUND = Error("MOVEMENT_NOT_FOUND", "Stock movement not found")


def normalize_quantity(value) -> Union[Decimal, Error]:
    quantity = to_amount(value)
    if quantity <= ZERO or quantity > MAX_QUANTITY:
        return Error(
            "VALIDATION_ERROR", f"Quantity must be between 0.01 and {MAX_QUANTITY}"
        )
    return quantity


async def check_product_and_location(
    uow: UnitOfWork,
    organization_id: UUID,
    product_id: UUID,
    location_id: Optional[UUID],
) -> Optional[Error]:
    product: Optional[Product] = await uow.products.get_by_id_for_organization(
        product_id, organization_id
    )
    if not product:
        return Error("PRODUCT_NOT_FOUND", "Product not found")
    if not tracks_stock(product):
        return Error(
            "PRODUCT_NOT_STOCKED", f"Product {product.code} does not track inventory"
        )
    if location_id is not None:
        branch = await uow.branches.get_by_id_for_organization(location_id, organization_id)
        if not branch:
            return Error("BRANCH_NOT_FOUND", "Branch not found")
    return None


class CreateStockMovementUseCase:
    """
    Business Rules:
    - Organization must belong to the caller's tenant
    - Product must be a stocked product of the organization
    - Location (if any) must be a branch of the organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: CreateStockMovementCommand
    ) -> Result[StockMovementResponse]:
        quantity = normalize_quantity(command.quantity)
        if isinstance(quantity, Error):
            return Return.err(quantity)

        async with self.uow:
            organization = await self.uow.organizations.get_by_id_for_tenant(
                command.organization_id, tenant_id
            )
            if not organization:
                return Return.err(
                    Error("ORGANIZATION_NOT_FOUND", "Organization not found")
                )

            error = await check_product_and_location(
                self.uow, organization.id, command.product_id, command.location_id
            )
            if error:
                return Return.err(error)

            movement = StockMovement(
                organization_id=organization.id,
                product_id=command.product_id,
                location_id=command.location_id,
                movement_type=command.movement_type,
                reference_type=command.reference_type,
                reference_id=command.reference_id,
                quantity=quantity,
                unit_cost=to_amount(command.unit_cost),
                movement_date=to_naive_utc(command.movement_date),
                notes=command.notes,
            )
            movement = await self.uow.stock_movements.create(movement)
            await self.uow.commit()
            logger.info(
                "Recorded %s movement of %s for product %s",
                command.movement_type.value,
                quantity,
                command.product_id,
            )

            return Return.ok(StockMovementResponse.from_entity(movement))


class ListStockMovementsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, query: ListStockMovementsQuery
    ) -> Result[StockMovementListResponse]:
        async with self.uow:
            movements, total = await self.uow.stock_movements.list_for_tenant_paginated(
                tenant_id,
                organization_id=query.organization_id,
                product_id=query.product_id,
                location_id=query.location_id,
                movement_type=query.movement_type,
                from_date=query.from_date,
                to_date=query.to_date,
                page=query.page,
                per_page=query.per_page,
            )
            return Return.ok(
                StockMovementListResponse(
                    data=[StockMovementResponse.from_entity(m) for m in movements],
                    meta=build_page_meta(query.page, query.per_page, total),
                )
            )


class GetStockMovementUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, movement_id: UUID
    ) -> Result[StockMovementResponse]:
        async with self.uow:
            movement = await self.uow.stock_movements.get_by_id_for_tenant(
                movement_id, tenant_id
            )
            if not movement:
                return Return.err(NOT_FOUND)
            return Return.ok(StockMovementResponse.from_entity(movement))


class UpdateStockMovementUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, movement_id: UUID, command: UpdateStockMovementCommand
    ) -> Result[StockMovementResponse]:
        changes = command.model_dump(exclude_unset=True)
        required_fields = (
            "product_id", "movement_type", "quantity", "unit_cost", "movement_date"
        )
        for required in required_fields:
            if required in changes and changes[required] is None:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Field '{required}' cannot be null")
                )
        if "quantity" in changes:
            quantity = normalize_quantity(changes["quantity"])
            if isinstance(quantity, Error):
                return Return.err(quantity)
            changes["quantity"] = quantity
        if "unit_cost" in changes:
            changes["unit_cost"] = to_amount(changes["unit_cost"])
        if "movement_date" in changes:
            changes["movement_date"] = to_naive_utc(changes["movement_date"])

        async with self.uow:
            movement = await self.uow.stock_movements.get_by_id_for_tenant(
                movement_id, tenant_id
            )
            if not movement:
                return Return.err(NOT_FOUND)

            if "product_id" in changes or "location_id" in changes:
                error = await check_product_and_location(
                    self.uow,
                    movement.organization_id,
                    changes.get("product_id", movement.product_id),
                    changes.get("location_id", movement.location_id),
                )
                if error:
                    return Return.err(error)

            for field, value in changes.items():
                setattr(movement, field, value)
            movement.updated_at = utcnow()
            movement = await self.uow.stock_movements.update(movement)
            await self.uow.commit()

            return Return.ok(StockMovementResponse.from_entity(movement))


class DeleteStockMovementUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, movement_id: UUID) -> Result[None]:
        async with self.uow:
            movement = await self.uow.stock_movements.get_by_id_for_tenant(
                movement_id, tenant_id
            )
            if not movement:
                return Return.err(NOT_FOUND)

            await self.uow.stock_movements.delete(movement)
            await self.uow.commit()
            return Return.ok(None)
