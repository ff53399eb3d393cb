from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.pagination import paginate
from src.app.repositories.product_repository import IProductRepository
from src.domain.entities import Organization, Product, ProductStatus, ProductType


class ProductRepository(IProductRepository):
    """Product repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _for_tenant(self, tenant_id: UUID):
        return (
            select(Product)
            .join(Organization, Organization.id == Product.organization_id)
            .where(
                Organization.tenant_id == tenant_id,
                col(Organization.deleted_at).is_(None),
                col(Product.deleted_at).is_(None),
            )
        )

    async def get_by_id_for_tenant(
        self, product_id: UUID, tenant_id: UUID
    ) -> Optional[Product]:
        stmt = self._for_tenant(tenant_id).where(Product.id == product_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_id_for_organization(
        self, product_id: UUID, organization_id: UUID
    ) -> Optional[Product]:
        stmt = select(Product).where(
            Product.id == product_id,
            Product.organization_id == organization_id,
            col(Product.deleted_at).is_(None),
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_code(self, organization_id: UUID, code: str) -> Optional[Product]:
        stmt = select(Product).where(
            Product.organization_id == organization_id, Product.code == code
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_many_for_organization(
        self, product_ids: Iterable[UUID], organization_id: UUID
    ) -> List[Product]:
        ids = list(set(product_ids))
        if not ids:
            return []
        stmt = select(Product).where(
            col(Product.id).in_(ids),
            Product.organization_id == organization_id,
            col(Product.deleted_at).is_(None),
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_tenant_paginated(
        self,
        tenant_id: UUID,
        organization_id: Optional[UUID] = None,
        product_type: Optional[ProductType] = None,
        status: Optional[ProductStatus] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 15,
    ) -> Tuple[List[Product], int]:
        stmt = self._for_tenant(tenant_id)
        if organization_id is not None:
            stmt = stmt.where(Product.organization_id == organization_id)
        if product_type is not None:
            stmt = stmt.where(Product.product_type == product_type)
        if status is not None:
            stmt = stmt.where(Product.status == status)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    col(Product.name).ilike(pattern),
                    col(Product.code).ilike(pattern),
                    col(Product.sku).ilike(pattern),
                    col(Product.barcode).ilike(pattern),
                )
            )
        stmt = stmt.order_by(col(Product.code))
        return await paginate(self.session, stmt, page, per_page)

    async def create(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def update(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product
