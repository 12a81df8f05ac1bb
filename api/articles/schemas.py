"""
Article API schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from core.schemas import ApiModel


class ArticleCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=150)
    id_user: int = Field(..., ge=1)
    main_image: str | None = Field(default=None, max_length=500)
    main_content: str | None = None


class ArticleUpdate(ApiModel):
    not_null_fields = frozenset({"title", "id_user"})

    title: str | None = Field(default=None, max_length=150)
    id_user: int | None = Field(default=None, ge=1)
    main_image: str | None = Field(default=None, max_length=500)
    main_content: str | None = None


class ArticleResponse(ApiModel):
    id: int
    title: str
    id_user: int
    main_image: str | None = None
    main_content: str | None = None
    creation_date: datetime | None = None
    last_update_date: datetime | None = None
