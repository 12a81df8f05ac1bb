"""
Comment API schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from core.schemas import ApiModel


class CommentCreate(ApiModel):
    id_article: int = Field(..., ge=1)
    text: str = Field(..., min_length=1, max_length=5000)


class CommentUpdate(ApiModel):
    not_null_fields = frozenset({"id_article", "text"})

    id_article: int | None = Field(default=None, ge=1)
    text: str | None = Field(default=None, min_length=1, max_length=5000)


class CommentResponse(ApiModel):
    id: int
    id_user: int
    id_article: int
    text: str
    post_date: datetime | None = None
