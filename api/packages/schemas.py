"""
Package API schemas.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import ApiModel


class PackageCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: str | None = None
    image: str | None = Field(default=None, max_length=500)


class PackageUpdate(ApiModel):
    not_null_fields = frozenset({"name"})

    name: str | None = Field(default=None, min_length=1, max_length=150)
    description: str | None = None
    image: str | None = Field(default=None, max_length=500)


class PackageResponse(ApiModel):
    id: int
    name: str
    description: str | None = None
    image: str | None = None


class PackageArticleRequest(ApiModel):
    id_article: int = Field(..., ge=1)


class PackageArticleResponse(ApiModel):
    id: int
    id_article: int
    id_package: int
