"""
Bookmark persistence: a user's saved articles.
"""

from __future__ import annotations

from typing import Any

from core import db
from core.results import MutationResult


async def list_bookmarks_by_user(user_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, id_user, id_article
        FROM bookmarks
        WHERE id_user = $1
        ORDER BY id
        """,
        user_id,
    )


async def get_bookmark(user_id: int, article_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, id_user, id_article
        FROM bookmarks
        WHERE id_user = $1
          AND id_article = $2
        LIMIT 1
        """,
        user_id,
        article_id,
    )


async def insert_bookmark(*, user_id: int, article_id: int) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO bookmarks (id_user, id_article)
        VALUES ($1, $2)
        RETURNING id
        """,
        user_id,
        article_id,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert bookmark.")
    return int(row["id"])


async def delete_bookmark(user_id: int, article_id: int) -> MutationResult:
    return await db.execute(
        "DELETE FROM bookmarks WHERE id_user = $1 AND id_article = $2",
        user_id,
        article_id,
    )


async def delete_all_by_user(user_id: int) -> MutationResult:
    return await db.execute("DELETE FROM bookmarks WHERE id_user = $1", user_id)


async def delete_all_by_article(article_id: int) -> MutationResult:
    return await db.execute("DELETE FROM bookmarks WHERE id_article = $1", article_id)
