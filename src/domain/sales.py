"""
Sales order pricing and lifecycle rules.

Line total = (quantity * unit_price) less discount_percent, plus
tax_percent on the discounted amount; rounded half-up to cents once, at
the end. Order total = subtotal + tax_amount - discount_amount.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from src.domain.entities.enums import SalesOrderStatus
from src.domain.ledger import ZERO, Amount, to_amount

HUNDRED = Decimal("100")

OPEN_STATUSES = frozenset(
    {SalesOrderStatus.draft, SalesOrderStatus.confirmed, SalesOrderStatus.processing}
)

ALLOWED_TRANSITIONS = {
    SalesOrderStatus.draft: frozenset(
        {SalesOrderStatus.confirmed, SalesOrderStatus.cancelled}
    ),
    SalesOrderStatus.confirmed: frozenset(
        {SalesOrderStatus.processing, SalesOrderStatus.cancelled}
    ),
    SalesOrderStatus.processing: frozenset(
        {SalesOrderStatus.completed, SalesOrderStatus.cancelled}
    ),
    SalesOrderStatus.completed: frozenset(),
    SalesOrderStatus.cancelled: frozenset(),
}


def line_total(
    quantity: Amount,
    unit_price: Amount,
    discount_percent: Amount = None,
    tax_percent: Amount = None,
) -> Decimal:
    gross = to_amount(quantity) * to_amount(unit_price)
    discount = gross * to_amount(discount_percent) / HUNDRED
    taxable = gross - discount
    tax = taxable * to_amount(tax_percent) / HUNDRED
    return to_amount(taxable + tax)


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    tax_amount: Decimal
    discount_amount: Decimal

    @property
    def total_amount(self) -> Decimal:
        return self.subtotal + self.tax_amount - self.discount_amount


def compute_order_totals(
    line_totals: Iterable[Amount], tax_amount: Amount = None, discount_amount: Amount = None
) -> OrderTotals:
    subtotal = ZERO
    for value in line_totals:
        subtotal += to_amount(value)
    return OrderTotals(
        subtotal=subtotal,
        tax_amount=to_amount(tax_amount),
        discount_amount=to_amount(discount_amount),
    )


def can_transition(current: SalesOrderStatus, target: SalesOrderStatus) -> bool:
    return SalesOrderStatus(target) in ALLOWED_TRANSITIONS[SalesOrderStatus(current)]


def is_editable(status: SalesOrderStatus) -> bool:
    return SalesOrderStatus(status) == SalesOrderStatus.draft


def is_open(status: SalesOrderStatus) -> bool:
    return SalesOrderStatus(status) in OPEN_STATUSES
