"""Pagination models shared by listing use cases."""

import math

from pydantic import BaseModel, Field


class PageRequest(BaseModel):
    """Page selection for list endpoints."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    """Pagination metadata returned with a page of results."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: PageRequest, total: int) -> "Pagination":
        return cls(
            page=page.page,
            limit=page.limit,
            total=total,
            pages=math.ceil(total / page.limit),
        )
