# staffboard/crud/pagination.py
from typing import Any, Callable, TypeVar

from sqlalchemy.orm import Query

from staffboard.schemas.pagination import PaginatedResult, PaginationParams

T = TypeVar("T")


def paginate(query: Query, params: PaginationParams, projector: Callable[[Any], T]) -> PaginatedResult[T]:
    """
    count по всему отфильтрованному запросу, затем skip/take и проекция каждой строки.
    page_number/page_size здесь не проверяются.
    """
    total_count = query.order_by(None).count()
    rows = (
        query
        .offset((params.page_number - 1) * params.page_size)
        .limit(params.page_size)
        .all()
    )
    return PaginatedResult(
        items=[projector(row) for row in rows],
        page_number=params.page_number,
        page_size=params.page_size,
        total_count=total_count,
    )
