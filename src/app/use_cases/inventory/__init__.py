"""
Inventory Use Cases

Product catalogue, stock movements and stock on hand.
"""

from .dtos import (
    CreateProductCommand,
    CreateStockMovementCommand,
    ListProductsQuery,
    ListStockMovementsQuery,
    ProductListResponse,
    ProductResponse,
    ProductStockResponse,
    StockMovementListResponse,
    StockMovementResponse,
    UpdateProductCommand,
    UpdateStockMovementCommand,
)
from .product_use_cases import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductStockUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from .stock_movement_use_cases import (
    CreateStockMovementUseCase,
    DeleteStockMovementUseCase,
    GetStockMovementUseCase,
    ListStockMovementsUseCase,
    UpdateStockMovementUseCase,
)

__all__ = [
    "CreateProductUseCase",
    "ListProductsUseCase",
    "GetProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
    "GetProductStockUseCase",
    "CreateStockMovementUseCase",
    "ListStockMovementsUseCase",
    "GetStockMovementUseCase",
    "UpdateStockMovementUseCase",
    "DeleteStockMovementUseCase",
    "CreateProductCommand",
    "UpdateProductCommand",
    "ListProductsQuery",
    "ProductResponse",
    "ProductListResponse",
    "ProductStockResponse",
    "CreateStockMovementCommand",
    "UpdateStockMovementCommand",
    "ListStockMovementsQuery",
    "StockMovementResponse",
    "StockMovementListResponse",
]
