# staffboard/schemas/pagination.py
import math
from typing import Generic, List, TypeVar

from pydantic import Field, computed_field

from staffboard.schemas.base import ApiModel

T = TypeVar("T")

class PaginationParams(ApiModel):
    """
    PaginationParams — номер страницы (с 1) и размер страницы.
    Границы не проверяются здесь, их проверяет слой API.
    """
    page_number: int = Field(1, description="Номер страницы (с 1)")
    page_size: int = Field(10, description="Размер страницы")

class PaginatedResult(ApiModel, Generic[T]):
    """
    PaginatedResult — стандартный конверт для списков: элементы + метаданные страницы.
    """
    items: List[T] = Field(default_factory=list, description="Элементы текущей страницы")
    page_number: int
    page_size: int
    total_count: int = Field(..., description="Всего элементов (до skip/take)")

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @computed_field(alias="hasPreviousPage")
    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @computed_field(alias="hasNextPage")
    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages
