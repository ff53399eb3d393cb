"""
Stock rules.

Movements carry a positive quantity; the movement type decides whether it
adds to or removes from stock on hand.
"""

from decimal import Decimal

from src.domain.entities.enums import ProductType, StockMovementType
from src.domain.ledger import Amount, to_amount

# Largest quantity a Numeric(12, 2) column holds exactly
MAX_QUANTITY = Decimal("9999999999.99")

INBOUND_TYPES = frozenset({StockMovementType.stock_in})


def signed_quantity(movement_type: StockMovementType, quantity: Amount) -> Decimal:
    """Receipts count positive; out, adjustment and transfer count negative."""
    quantity = to_amount(quantity)
    if StockMovementType(movement_type) in INBOUND_TYPES:
        return quantity
    return -quantity


def tracks_stock(product) -> bool:
    if not product.track_inventory:
        return False
    return ProductType(product.product_type) != ProductType.service


def needs_reorder(product, quantity_on_hand: Amount) -> bool:
    """Stock at or below the reorder level of a stocked product."""
    if not tracks_stock(product):
        return False
    return to_amount(quantity_on_hand) <= to_amount(product.reorder_level)
