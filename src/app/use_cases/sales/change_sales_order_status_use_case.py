"""
Use Case: Change Sales Order Status

draft -> confirmed -> processing -> completed, with cancellation allowed
from any open status. Completed and cancelled are terminal.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, SalesOrderStatus
from src.domain.sales import can_transition

from .dtos import SalesOrderResponse

logger = logging.getLogger(__name__)


class ChangeSalesOrderStatusUseCase:
    """
    Business Rules:
    - Only the moves in the lifecycle table are accepted
    - An order needs at least one line to be confirmed
    - Every change is recorded as an audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        order_id: UUID,
        target: SalesOrderStatus,
        user_id: UUID,
    ) -> Result[SalesOrderResponse]:
        target = SalesOrderStatus(target)

        async with self.uow:
            order = await self.uow.sales_orders.get_by_id_for_tenant(
                order_id, tenant_id, for_update=True
            )
            if not order:
                return Return.err(Error("ORDER_NOT_FOUND", "Sales order not found"))

            current = SalesOrderStatus(order.status)
            if not can_transition(current, target):
                return Return.err(
                    Error(
                        "INVALID_STATUS_TRANSITION",
                        f"Cannot move a {current.value} sales order to {target.value}",
                    )
                )

            lines = await self.uow.sales_orders.get_lines(order.id)
            if target == SalesOrderStatus.confirmed and not lines:
                return Return.err(
                    Error("EMPTY_ORDER", "A sales order needs at least one line")
                )

            order.status = target
            order.updated_at = utcnow()
            order = await self.uow.sales_orders.update(order)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=user_id,
                    action="sales_order_status_changed",
                    event_metadata={
                        "order_id": str(order.id),
                        "order_number": order.order_number,
                        "from": current.value,
                        "to": target.value,
                    },
                )
            )

            await self.uow.commit()
            logger.info(
                "Sales order %s moved from %s to %s by user %s",
                order.id,
                current.value,
                target.value,
                user_id,
            )

            return Return.ok(SalesOrderResponse.from_entity(order, lines))
