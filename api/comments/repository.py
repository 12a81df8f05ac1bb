"""
Comment persistence.
"""

from __future__ import annotations

from typing import Any, Mapping

from core import db, partial_update
from core.results import MutationResult

UPDATABLE_COLUMNS = frozenset({"text", "id_article"})


async def list_comments() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, id_user, id_article, text, post_date
        FROM comments
        ORDER BY post_date DESC, id DESC
        """
    )


async def list_comments_by_article(article_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, id_user, id_article, text, post_date
        FROM comments
        WHERE id_article = $1
        ORDER BY post_date DESC, id DESC
        """,
        article_id,
    )


async def get_comment_by_id(comment_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, id_user, id_article, text, post_date
        FROM comments
        WHERE id = $1
        """,
        comment_id,
    )


async def insert_comment(*, user_id: int, article_id: int, text: str) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO comments (id_user, id_article, text, post_date)
        VALUES ($1, $2, $3, now())
        RETURNING id
        """,
        user_id,
        article_id,
        text,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert comment.")
    return int(row["id"])


async def update_comment(comment_id: int, fields: Mapping[str, Any], *, user_id: int) -> MutationResult:
    """
    Partial update scoped to the comment's author.
    """
    return await partial_update.update_by_id(
        "comments",
        comment_id,
        fields,
        allowed=UPDATABLE_COLUMNS,
        scope={"id_user": user_id},
    )


async def delete_comment(comment_id: int) -> MutationResult:
    return await db.execute("DELETE FROM comments WHERE id = $1", comment_id)


async def delete_all_by_user(user_id: int) -> MutationResult:
    return await db.execute("DELETE FROM comments WHERE id_user = $1", user_id)


async def delete_all_by_article(article_id: int) -> MutationResult:
    return await db.execute("DELETE FROM comments WHERE id_article = $1", article_id)
