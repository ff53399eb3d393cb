"""
Branch Entity

Optional sub-unit of an organization; journal entries may be tagged with one.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

from .enums import OrganizationStatus


class Branch(SQLModel, table=True):
    __tablename__ = "branches"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)
    parent_id: Optional[UUID] = Field(default=None, foreign_key="branches.id")

    name: str = Field(max_length=255)
    code: Optional[str] = Field(default=None, max_length=50)
    status: OrganizationStatus = Field(default=OrganizationStatus.active)

    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
