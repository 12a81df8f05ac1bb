"""
Category API schemas.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import ApiModel


class CategoryCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=80)


class CategoryUpdate(ApiModel):
    not_null_fields = frozenset({"name"})

    name: str | None = Field(default=None, min_length=1, max_length=80)


class CategoryResponse(ApiModel):
    id: int
    name: str
