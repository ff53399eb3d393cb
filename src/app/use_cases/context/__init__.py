"""
Tenant Context Use Cases

Per-request tenant resolution.
"""

from .dtos import RequestContext, TenantContext
from .resolve_tenant_use_case import ResolveTenantUseCase, host_subdomain, normalize_host

__all__ = [
    "ResolveTenantUseCase",
    "TenantContext",
    "RequestContext",
    "host_subdomain",
    "normalize_host",
]
