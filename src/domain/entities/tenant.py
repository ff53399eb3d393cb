"""
Tenant Entity

Top-level isolation boundary. Owns one or more organizations.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import TenantStatus


class Tenant(SQLModel, table=True):
    """
    Tenant entity - isolated workspace for organizations.

    Business Rules:
    - subdomain and custom domain are unique across tenants
    - Active iff status is active AND (no expiry OR expiry in the future)
    - Soft delete only: deleted_at hides the tenant from every lookup
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    subdomain: str = Field(max_length=255, unique=True)
    domain: Optional[str] = Field(default=None, max_length=255, unique=True)

    status: TenantStatus = Field(default=TenantStatus.active)
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    settings: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Soft delete support
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_tenant_status", "status"),
        Index("idx_tenant_deleted_at", "deleted_at"),
    )

    def is_active(self, now: Optional[datetime] = None) -> bool:
        now = now or utcnow()
        if self.status != TenantStatus.active:
            return False
        return self.expires_at is None or self.expires_at > now
