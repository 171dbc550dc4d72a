"""
Pagination and sorting parameters for list queries.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel


@dataclass
class Filters:
    page: int = 1
    page_size: int = 20
    sort: str = "id"
    sort_safelist: List[str] = field(default_factory=list)

    def sort_column(self) -> str:
        # The sort value is interpolated into the query, so it must come
        # from the safelist.
        if self.sort in self.sort_safelist:
            return self.sort.lstrip("-")
        raise ValueError(f"unsafe sort parameter: {self.sort}")

    def sort_descending(self) -> bool:
        return self.sort.startswith("-")

    def limit(self) -> int:
        return self.page_size

    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class Metadata(BaseModel):
    """Pagination metadata; all fields absent when there are no records"""

    current_page: Optional[int] = None
    page_size: Optional[int] = None
    first_page: Optional[int] = None
    last_page: Optional[int] = None
    total_records: Optional[int] = None


def calculate_metadata(total_records: int, page: int, page_size: int) -> Metadata:
    if total_records == 0:
        return Metadata()

    return Metadata(
        current_page=page,
        page_size=page_size,
        first_page=1,
        last_page=math.ceil(total_records / page_size),
        total_records=total_records,
    )
