"""
Completed-article API schemas.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import ApiModel


class CompletedArticleCreate(ApiModel):
    id_article: int = Field(..., ge=1)
    rating: int | None = Field(default=None, ge=0, le=5)


class CompletedArticleResponse(ApiModel):
    id: int
    id_user: int
    id_article: int
    rating: int | None = None
