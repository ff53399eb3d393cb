from typing import List, Tuple

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession


async def paginate(
    session: AsyncSession, stmt, page: int, per_page: int
) -> Tuple[List, int]:
    """Run an ordered select for one page; returns (items, total)."""
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await session.exec(count_stmt)).one()

    offset = (max(page, 1) - 1) * per_page
    result = await session.exec(stmt.offset(offset).limit(per_page))
    return list(result.all()), total
