"""
Bookmark API schemas.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import ApiModel


class BookmarkCreate(ApiModel):
    id_article: int = Field(..., ge=1)


class BookmarkResponse(ApiModel):
    id: int
    id_user: int
    id_article: int
