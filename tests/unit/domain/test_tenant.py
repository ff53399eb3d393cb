"""
Unit tests for the tenant activity rule.
"""

from datetime import datetime, timedelta

from src.domain.entities import Tenant
from src.domain.entities.enums import TenantStatus

NOW = datetime(2024, 6, 1, 12, 0, 0)


def make_tenant(**kwargs):
    return Tenant(name="Acme", subdomain="acme", **kwargs)


def test_active_without_expiry():
    assert make_tenant(status=TenantStatus.active).is_active(NOW)


def test_active_with_future_expiry():
    tenant = make_tenant(status=TenantStatus.active, expires_at=NOW + timedelta(days=1))
    assert tenant.is_active(NOW)


def test_expired_tenant_is_inactive():
    tenant = make_tenant(status=TenantStatus.active, expires_at=NOW - timedelta(seconds=1))
    assert not tenant.is_active(NOW)


def test_expiry_equal_to_now_is_inactive():
    tenant = make_tenant(status=TenantStatus.active, expires_at=NOW)
    assert not tenant.is_active(NOW)


def test_non_active_status_is_inactive():
    assert not make_tenant(status=TenantStatus.inactive).is_active(NOW)
    assert not make_tenant(status=TenantStatus.suspended).is_active(NOW)
