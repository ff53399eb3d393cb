"""
Shared DTOs for paginated list use cases.
"""

import math

from pydantic import BaseModel


class PageMeta(BaseModel):
    """Offset pagination metadata"""

    page: int
    per_page: int
    total: int
    last_page: int


def build_page_meta(page: int, per_page: int, total: int) -> PageMeta:
    return PageMeta(
        page=page,
        per_page=per_page,
        total=total,
        last_page=max(1, math.ceil(total / per_page)) if per_page else 1,
    )
