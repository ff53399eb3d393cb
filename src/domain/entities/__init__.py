"""
Ledger Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AccountType,
    CustomerStatus,
    JournalEntryStatus,
    OrganizationStatus,
    ProductStatus,
    ProductType,
    SalesOrderStatus,
    StockMovementType,
    TenantResolution,
    TenantStatus,
)

# Export all entities
from .tenant import Tenant
from .organization import Organization
from .branch import Branch
from .account import Account
from .journal_entry import JournalEntry
from .journal_entry_line import JournalEntryLine
from .product import Product
from .stock_movement import StockMovement
from .customer import Customer
from .sales_order import SalesOrder
from .sales_order_line import SalesOrderLine
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "AccountType",
    "CustomerStatus",
    "JournalEntryStatus",
    "OrganizationStatus",
    "ProductStatus",
    "ProductType",
    "SalesOrderStatus",
    "StockMovementType",
    "TenantResolution",
    "TenantStatus",
    # Entities
    "Tenant",
    "Organization",
    "Branch",
    "Account",
    "JournalEntry",
    "JournalEntryLine",
    "Product",
    "StockMovement",
    "Customer",
    "SalesOrder",
    "SalesOrderLine",
    "AuditEvent",
]
