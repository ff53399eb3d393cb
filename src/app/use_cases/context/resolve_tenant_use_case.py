"""
Use Case: Resolve Tenant

Determines which tenant an incoming request is scoped to.

Lookup chain (first match wins):
1. X-Tenant-ID header -> tenant by primary key, any status
2. X-Tenant-Subdomain header -> active tenant by subdomain
3. Host with >= 3 labels -> active tenant by first label
4. Host -> active tenant by exact custom domain

A tenant found by ID but not active yields TENANT_INACTIVE, distinct from
TENANT_NOT_FOUND so the API can answer 403 instead of 404.
"""

import logging
from datetime import datetime
from typing import Optional, Tuple
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Tenant, TenantResolution, TenantStatus

from .dtos import TenantContext

logger = logging.getLogger(__name__)


def normalize_host(host: Optional[str]) -> Optional[str]:
    """Lower-case the host and strip any port."""
    if not host:
        return None
    host = host.strip().lower()
    if host.startswith("["):
        # IPv6 literal, never a tenant subdomain
        return host.split("]")[0].lstrip("[") or None
    if ":" in host:
        host = host.rsplit(":", 1)[0]
    return host.rstrip(".") or None


def host_subdomain(host: Optional[str]) -> Optional[str]:
    """First label of a host with at least three labels, else None."""
    if not host:
        return None
    labels = host.split(".")
    if len(labels) >= 3 and labels[0]:
        return labels[0]
    return None


class ResolveTenantUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id_header: Optional[str] = None,
        subdomain_header: Optional[str] = None,
        host: Optional[str] = None,
    ) -> Result[TenantContext]:
        async with self.uow:
            now = utcnow()
            tenant, resolved_by = await self._identify(
                tenant_id_header, subdomain_header, normalize_host(host), now
            )

            if tenant is None:
                return Return.err(
                    Error("TENANT_NOT_FOUND", "Tenant not found or invalid tenant context")
                )

            if not tenant.is_active(now):
                return Return.err(
                    Error("TENANT_INACTIVE", "Tenant is not active or has expired")
                )

            logger.debug("Resolved tenant %s via %s", tenant.id, resolved_by.value)

            return Return.ok(
                TenantContext(
                    tenant_id=tenant.id,
                    name=tenant.name,
                    subdomain=tenant.subdomain,
                    domain=tenant.domain,
                    status=TenantStatus(tenant.status).value,
                    resolved_by=resolved_by,
                )
            )

    async def _identify(
        self,
        tenant_id_header: Optional[str],
        subdomain_header: Optional[str],
        host: Optional[str],
        now: datetime,
    ) -> Tuple[Optional[Tenant], Optional[TenantResolution]]:
        if tenant_id_header:
            tenant_id = _parse_uuid(tenant_id_header)
            if tenant_id is not None:
                tenant = await self.uow.tenants.get_by_id(tenant_id)
                if tenant:
                    return tenant, TenantResolution.id_header

        if subdomain_header and subdomain_header.strip():
            tenant = await self.uow.tenants.get_active_by_subdomain(
                subdomain_header.strip().lower(), now
            )
            if tenant:
                return tenant, TenantResolution.subdomain_header

        subdomain = host_subdomain(host)
        if subdomain:
            tenant = await self.uow.tenants.get_active_by_subdomain(subdomain, now)
            if tenant:
                return tenant, TenantResolution.host_subdomain

        if host:
            tenant = await self.uow.tenants.get_active_by_domain(host, now)
            if tenant:
                return tenant, TenantResolution.custom_domain

        return None, None


def _parse_uuid(value: str) -> Optional[UUID]:
    try:
        return UUID(value.strip())
    except ValueError:
        return None
