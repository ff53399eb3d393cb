"""
Sales Use Cases

Customers and sales orders with computed totals and a status lifecycle.
"""

from .change_sales_order_status_use_case import ChangeSalesOrderStatusUseCase
from .create_sales_order_use_case import CreateSalesOrderUseCase
from .customer_use_cases import (
    CreateCustomerUseCase,
    DeleteCustomerUseCase,
    GetCustomerUseCase,
    ListCustomersUseCase,
    UpdateCustomerUseCase,
)
from .dtos import (
    CreateCustomerCommand,
    CreateSalesOrderCommand,
    CustomerListResponse,
    CustomerResponse,
    ListCustomersQuery,
    ListSalesOrdersQuery,
    SalesOrderLineCommand,
    SalesOrderLineResponse,
    SalesOrderListResponse,
    SalesOrderResponse,
    UpdateCustomerCommand,
    UpdateSalesOrderCommand,
)
from .sales_order_queries import GetSalesOrderUseCase, ListSalesOrdersUseCase
from .update_sales_order_use_case import DeleteSalesOrderUseCase, UpdateSalesOrderUseCase

__all__ = [
    "CreateCustomerUseCase",
    "ListCustomersUseCase",
    "GetCustomerUseCase",
    "UpdateCustomerUseCase",
    "DeleteCustomerUseCase",
    "CreateSalesOrderUseCase",
    "ListSalesOrdersUseCase",
    "GetSalesOrderUseCase",
    "UpdateSalesOrderUseCase",
    "DeleteSalesOrderUseCase",
    "ChangeSalesOrderStatusUseCase",
    "CreateCustomerCommand",
    "UpdateCustomerCommand",
    "ListCustomersQuery",
    "CustomerResponse",
    "CustomerListResponse",
    "CreateSalesOrderCommand",
    "UpdateSalesOrderCommand",
    "ListSalesOrdersQuery",
    "SalesOrderLineCommand",
    "SalesOrderLineResponse",
    "SalesOrderResponse",
    "SalesOrderListResponse",
]
