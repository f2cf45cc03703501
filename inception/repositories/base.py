"""Shared helpers for the Inception persistence layer.

Repositories call add()/flush()/refresh()/delete() only, never commit().
The session dependency handles commit/rollback (Unit-of-Work).
"""

from typing import Any

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from inception.models.common import Paging, SortDirection


def contains_ignore_case(filter_text: str, *columns: InstrumentedAttribute) -> Any:
    """WHERE clause: any column contains filter_text, case-insensitively."""
    needle = filter_text.strip().lower()
    return or_(*(func.lower(col).contains(needle, autoescape=True) for col in columns))


def ordered(column: InstrumentedAttribute, direction: SortDirection) -> Any:
    return column.desc() if direction == SortDirection.DESCENDING else column.asc()


async def fetch_page(
    session: AsyncSession,
    stmt: Select,
    *,
    order_by: list[Any],
    paging: Paging,
) -> tuple[list[Any], int]:
    """Run stmt for one page. Returns (rows, total matching rows)."""
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await session.execute(count_stmt)).scalar_one()
    result = await session.execute(
        stmt.order_by(*order_by).offset(paging.offset).limit(paging.page_size)
    )
    return list(result.scalars().all()), total
