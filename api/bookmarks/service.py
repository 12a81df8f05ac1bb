"""
Bookmark business logic.
"""

from __future__ import annotations

from typing import Any

from articles import service as article_service
from core import gates
from core.errors import NotFoundError
from users import service as user_service

from . import repository

BOOKMARK_NOT_FOUND = "This bookmark does not exist."
ALREADY_BOOKMARKED = "This article is already bookmarked."


async def list_bookmarks(user_id: int) -> list[dict[str, Any]]:
    return await repository.list_bookmarks_by_user(user_id)


async def get_bookmark(user_id: int, article_id: int) -> dict[str, Any]:
    return await gates.ensure_exists(repository.get_bookmark(user_id, article_id), BOOKMARK_NOT_FOUND)


async def add_bookmark(user_id: int, article_id: int) -> dict[str, Any]:
    await user_service.get_existing_user(user_id)
    await article_service.get_existing_article(article_id)
    await gates.ensure_absent(repository.get_bookmark(user_id, article_id), ALREADY_BOOKMARKED)

    bookmark_id = await repository.insert_bookmark(user_id=user_id, article_id=article_id)
    return {"id": bookmark_id, "id_user": user_id, "id_article": article_id}


async def delete_bookmark(user_id: int, article_id: int) -> None:
    result = await repository.delete_bookmark(user_id, article_id)
    gates.require_ok(result, "Bookmark cannot be deleted.")
    if result.rows_affected == 0:
        raise NotFoundError(BOOKMARK_NOT_FOUND)


async def delete_all_bookmarks(user_id: int) -> int:
    result = await repository.delete_all_by_user(user_id)
    gates.require_ok(result, "Bookmarks cannot be deleted.")
    return result.rows_affected
