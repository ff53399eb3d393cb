"""
Line pricing and order totals shared by create and update.
"""

from typing import List, Optional, Union
from uuid import UUID

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SalesOrder, SalesOrderLine
from src.domain.inventory import MAX_QUANTITY
from src.domain.ledger import MAX_AMOUNT, ZERO, to_amount
from src.domain.sales import compute_order_totals, line_total

from .dtos import SalesOrderLineCommand


async def build_order_lines(
    uow: UnitOfWork, organization_id: UUID, commands: List[SalesOrderLineCommand]
) -> Union[List[SalesOrderLine], Error]:
    """
    Validate line commands and build priced entities, numbered in input order.

    A line without a product takes its description from the caller; a line
    with one defaults to the product name.
    """
    requested = {command.product_id for command in commands if command.product_id}
    products = {}
    if requested:
        found = await uow.products.get_many_for_organization(requested, organization_id)
        products = {product.id: product for product in found}
        missing = requested - products.keys()
        if missing:
            return Error(
                "PRODUCT_NOT_FOUND",
                "Products not found in organization: "
                + ", ".join(sorted(str(product_id) for product_id in missing)),
            )

    lines = []
    for index, command in enumerate(commands, start=1):
        quantity = to_amount(command.quantity)
        unit_price = to_amount(command.unit_price)
        if quantity <= ZERO or quantity > MAX_QUANTITY:
            return Error(
                "INVALID_LINES",
                f"Line {index}: quantity must be between 0.01 and {MAX_QUANTITY}",
            )
        if unit_price > MAX_AMOUNT:
            return Error("INVALID_LINES", f"Line {index}: unit price exceeds {MAX_AMOUNT}")

        product = products.get(command.product_id)
        description = command.description or (product.name if product else None)
        if not description:
            return Error("INVALID_LINES", f"Line {index}: needs a product or a description")

        total = line_total(quantity, unit_price, command.discount_percent, command.tax_percent)
        if total > MAX_AMOUNT:
            return Error("INVALID_LINES", f"Line {index}: line total exceeds {MAX_AMOUNT}")

        lines.append(
            SalesOrderLine(
                product_id=command.product_id,
                line_number=index,
                description=description,
                quantity=quantity,
                unit_price=unit_price,
                discount_percent=to_amount(command.discount_percent),
                tax_percent=to_amount(command.tax_percent),
                line_total=total,
            )
        )
    return lines


def apply_totals(
    order: SalesOrder, lines: List[SalesOrderLine], tax_amount, discount_amount
) -> Optional[Error]:
    """Recompute subtotal and total on the order; nothing is set on error."""
    totals = compute_order_totals(
        (line.line_total for line in lines), tax_amount, discount_amount
    )
    if totals.total_amount < ZERO:
        return Error("INVALID_ORDER_TOTALS", "Discount exceeds the order value")
    if totals.subtotal > MAX_AMOUNT or totals.total_amount > MAX_AMOUNT:
        return Error("INVALID_ORDER_TOTALS", f"Order total exceeds {MAX_AMOUNT}")

    order.subtotal = totals.subtotal
    order.tax_amount = totals.tax_amount
    order.discount_amount = totals.discount_amount
    order.total_amount = totals.total_amount
    return None
