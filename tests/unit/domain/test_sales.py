"""
Unit tests for sales order pricing and lifecycle.
Pure functions, no database.
"""

from decimal import Decimal

import pytest

from src.domain.entities.enums import SalesOrderStatus
from src.domain.sales import (
    can_transition,
    compute_order_totals,
    is_editable,
    is_open,
    line_total,
)


def test_line_total_plain():
    assert line_total("3", "19.99") == Decimal("59.97")


def test_line_total_discount_then_tax():
    # 2 * 100 = 200, less 10% = 180, plus 5% tax = 189
    assert line_total("2", "100", "10", "5") == Decimal("189.00")


def test_line_total_rounds_once_at_the_end():
    # 1 * 0.10 less 33.33% = 0.06667, plus 7.5% = 0.07167
    assert line_total("1", "0.10", "33.33", "7.5") == Decimal("0.07")
    assert line_total("3", "0.335") == Decimal("1.02")


def test_order_totals():
    totals = compute_order_totals([Decimal("189.00"), "11"], tax_amount="5", discount_amount="20.5")

    assert totals.subtotal == Decimal("200.00")
    assert totals.tax_amount == Decimal("5.00")
    assert totals.discount_amount == Decimal("20.50")
    assert totals.total_amount == Decimal("184.50")


def test_order_totals_without_lines():
    totals = compute_order_totals([])

    assert totals.subtotal == Decimal("0.00")
    assert totals.total_amount == Decimal("0.00")


@pytest.mark.parametrize(
    "current, target",
    [
        (SalesOrderStatus.draft, SalesOrderStatus.confirmed),
        (SalesOrderStatus.draft, SalesOrderStatus.cancelled),
        (SalesOrderStatus.confirmed, SalesOrderStatus.processing),
        (SalesOrderStatus.confirmed, SalesOrderStatus.cancelled),
        (SalesOrderStatus.processing, SalesOrderStatus.completed),
        (SalesOrderStatus.processing, SalesOrderStatus.cancelled),
    ],
)
def test_allowed_transitions(current, target):
    assert can_transition(current, target) is True


@pytest.mark.parametrize(
    "current, target",
    [
        (SalesOrderStatus.draft, SalesOrderStatus.processing),
        (SalesOrderStatus.draft, SalesOrderStatus.completed),
        (SalesOrderStatus.confirmed, SalesOrderStatus.draft),
        (SalesOrderStatus.completed, SalesOrderStatus.cancelled),
        (SalesOrderStatus.cancelled, SalesOrderStatus.draft),
        (SalesOrderStatus.draft, SalesOrderStatus.draft),
    ],
)
def test_rejected_transitions(current, target):
    assert can_transition(current, target) is False


def test_only_drafts_are_editable():
    assert is_editable(SalesOrderStatus.draft) is True
    assert is_editable(SalesOrderStatus.confirmed) is False


def test_open_statuses():
    assert is_open("processing") is True
    assert is_open(SalesOrderStatus.completed) is False
    assert is_open(SalesOrderStatus.cancelled) is False
