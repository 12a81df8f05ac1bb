"""
Join-table API schemas.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import ApiModel


class ArticleCategoryCreate(ApiModel):
    id_article: int = Field(..., ge=1)
    id_category: int = Field(..., ge=1)


class ArticleCategoryUpdate(ApiModel):
    not_null_fields = frozenset({"id_article", "id_category"})

    id_article: int | None = Field(default=None, ge=1)
    id_category: int | None = Field(default=None, ge=1)


class ArticleCategoryResponse(ApiModel):
    id: int
    id_article: int
    id_category: int


class ArticlePackageCreate(ApiModel):
    id_article: int = Field(..., ge=1)
    id_package: int = Field(..., ge=1)


class ArticlePackageUpdate(ApiModel):
    not_null_fields = frozenset({"id_article", "id_package"})

    id_article: int | None = Field(default=None, ge=1)
    id_package: int | None = Field(default=None, ge=1)


class ArticlePackageResponse(ApiModel):
    id: int
    id_article: int
    id_package: int


class PackageCategoryCreate(ApiModel):
    id_package: int = Field(..., ge=1)
    id_category: int = Field(..., ge=1)


class PackageCategoryUpdate(ApiModel):
    not_null_fields = frozenset({"id_package", "id_category"})

    id_package: int | None = Field(default=None, ge=1)
    id_category: int | None = Field(default=None, ge=1)


class PackageCategoryResponse(ApiModel):
    id: int
    id_package: int
    id_category: int
