import math
from typing import Any

from pydantic import BaseModel, computed_field
from sqlalchemy.orm import Query


class Page(BaseModel):
    """A single page of query results"""

    items: list[Any]
    total: int
    per_page: int
    page: int = 1

    @computed_field
    @property
    def last_page(self) -> int:
        return max(math.ceil(self.total / self.per_page), 1)

    @computed_field
    @property
    def has_more_pages(self) -> bool:
        return self.page < self.last_page


def paginate(query: Query, per_page: int, page: int = 1) -> Page:
    """
    Slice ``query`` into a page.

    Args:
        query: The query to paginate, filters already applied
        per_page: Page size, must be positive
        page: 1-based page number, values below 1 are treated as 1
    """
    per_page = int(per_page)
    if per_page < 1:
        raise ValueError(f"per_page must be a positive integer, got {per_page}")
    page = max(int(page or 1), 1)

    total = query.order_by(None).count()
    items = query.limit(per_page).offset((page - 1) * per_page).all()
    return Page(items=list(items), total=total, per_page=per_page, page=page)
