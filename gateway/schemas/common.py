"""Upstream list/detail envelope: {"data": ..., "meta": {"pagination": ...}}."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class Links(BaseModel):
    next: str | None = None
    current: str | None = None
    previous: str | None = None


class Pagination(BaseModel):
    total: int = 0
    count: int = 0
    per_page: int = 0
    current_page: int = 0
    total_pages: int = 0
    links: Links | None = None


class Meta(BaseModel):
    model_config = ConfigDict(extra="allow")

    pagination: Pagination | None = None


class Envelope(BaseModel, Generic[T]):
    data: T | None = None
    meta: Meta | None = None
