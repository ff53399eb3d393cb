"""
Double-entry ledger rules.

Pure functions over amounts and statuses; persistence and transactions
belong to the use cases that call them.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Union

from src.domain.entities.enums import AccountType, JournalEntryStatus

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0.00")
# Largest amount a Numeric(15, 2) column holds exactly
MAX_AMOUNT = Decimal("9999999999999.99")

DEBIT_NORMAL_TYPES = frozenset({AccountType.asset, AccountType.expense})

ALLOWED_TRANSITIONS = {
    JournalEntryStatus.draft: frozenset(
        {JournalEntryStatus.posted, JournalEntryStatus.cancelled}
    ),
    JournalEntryStatus.posted: frozenset(),
    JournalEntryStatus.cancelled: frozenset(),
}

Amount = Union[Decimal, int, float, str, None]


def to_amount(value: Amount) -> Decimal:
    """Quantize to 2 decimal places, half-up. Floats go through str()."""
    if value is None:
        return ZERO
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class LedgerTotals:
    total_debit: Decimal
    total_credit: Decimal

    @property
    def difference(self) -> Decimal:
        return self.total_debit - self.total_credit

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit


def compute_totals(lines: Iterable) -> LedgerTotals:
    """Sum debit and credit of lines, each rounded to 2 dp first."""
    total_debit = ZERO
    total_credit = ZERO
    for line in lines:
        total_debit += to_amount(line.debit)
        total_credit += to_amount(line.credit)
    return LedgerTotals(total_debit=total_debit, total_credit=total_credit)


def is_balanced(lines: Iterable) -> bool:
    return compute_totals(lines).is_balanced


def is_debit_normal(account_type: AccountType) -> bool:
    return AccountType(account_type) in DEBIT_NORMAL_TYPES


def signed_balance(account_type: AccountType, debits: Amount, credits: Amount) -> Decimal:
    """
    Balance of an account from its aggregated debits and credits.

    Debit-normal accounts (asset, expense) grow with debits; the rest
    (liability, equity, revenue) grow with credits.
    """
    debits = to_amount(debits)
    credits = to_amount(credits)
    if is_debit_normal(account_type):
        return debits - credits
    return credits - debits


def can_transition(current: JournalEntryStatus, target: JournalEntryStatus) -> bool:
    return JournalEntryStatus(target) in ALLOWED_TRANSITIONS[JournalEntryStatus(current)]


def is_editable(status: JournalEntryStatus) -> bool:
    return JournalEntryStatus(status) == JournalEntryStatus.draft
