"""
Ledger Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TenantStatus(str, Enum):
    """Tenant status"""

    active = "active"
    inactive = "inactive"
    suspended = "suspended"


class OrganizationStatus(str, Enum):
    """Organization / branch status"""

    active = "active"
    inactive = "inactive"


class AccountType(str, Enum):
    """Chart of accounts classification"""

    asset = "asset"
    liability = "liability"
    equity = "equity"
    revenue = "revenue"
    expense = "expense"


class JournalEntryStatus(str, Enum):
    """Journal entry lifecycle: draft -> posted | cancelled"""

    draft = "draft"
    posted = "posted"
    cancelled = "cancelled"


class TenantResolution(str, Enum):
    """Which lookup step matched the tenant for a request"""

    id_header = "id_header"
    subdomain_header = "subdomain_header"
    host_subdomain = "host_subdomain"
    custom_domain = "custom_domain"


class ProductType(str, Enum):
    """Catalogue item kind; services never carry stock"""

    goods = "goods"
    service = "service"
    consumable = "consumable"


class ProductStatus(str, Enum):
    active = "active"
    inactive = "inactive"


class StockMovementType(str, Enum):
    """Direction of a stock movement; only receipts add to stock on hand"""

    stock_in = "in"
    stock_out = "out"
    adjustment = "adjustment"
    transfer = "transfer"


class CustomerStatus(str, Enum):
    active = "active"
    inactive = "inactive"


class SalesOrderStatus(str, Enum):
    """Sales order lifecycle: draft -> confirmed -> processing -> completed"""

    draft = "draft"
    confirmed = "confirmed"
    processing = "processing"
    completed = "completed"
    cancelled = "cancelled"
