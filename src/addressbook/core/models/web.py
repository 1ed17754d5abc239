"""Response envelopes shared by every endpoint."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageMetadata(BaseModel):
    """Paging information returned next to a list of results."""

    page: int = Field(description="1-based page number")
    size: int = Field(description="Requested page size")
    total_item: int = Field(description="Matches across all pages")
    total_page: int = Field(description="Number of pages")

    @classmethod
    def build(cls, page: int, size: int, total_item: int) -> "PageMetadata":
        return cls(
            page=page,
            size=size,
            total_item=total_item,
            total_page=math.ceil(total_item / size) if size > 0 else 0,
        )


class WebResponse(BaseModel, Generic[T]):
    data: T


class PagedResponse(BaseModel, Generic[T]):
    data: list[T]
    paging: PageMetadata


class ErrorResponse(BaseModel):
    errors: str
