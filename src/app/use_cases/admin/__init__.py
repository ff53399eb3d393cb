"""
Tenant Administration Use Cases

Platform-level tenant lifecycle, authenticated by admin API key.
"""

from .create_tenant_use_case import CreateTenantUseCase
from .delete_tenant_use_case import DeleteTenantUseCase
from .dtos import (
    CreateTenantCommand,
    ListTenantsQuery,
    TenantListResponse,
    TenantResponse,
    TenantStatusResponse,
    UpdateTenantCommand,
)
from .get_tenant_use_case import GetTenantUseCase
from .list_tenants_use_case import ListTenantsUseCase
from .restore_tenant_use_case import RestoreTenantUseCase
from .suspend_tenant_use_case import SuspendTenantUseCase
from .update_tenant_use_case import UpdateTenantUseCase

__all__ = [
    "CreateTenantUseCase",
    "ListTenantsUseCase",
    "GetTenantUseCase",
    "UpdateTenantUseCase",
    "DeleteTenantUseCase",
    "SuspendTenantUseCase",
    "RestoreTenantUseCase",
    "CreateTenantCommand",
    "UpdateTenantCommand",
    "ListTenantsQuery",
    "TenantResponse",
    "TenantListResponse",
    "TenantStatusResponse",
]
