"""
Completed-article persistence: which articles a user finished, with a rating.
"""

from __future__ import annotations

from typing import Any

from core import db
from core.results import MutationResult


async def list_by_user(user_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, id_user, id_article, rating
        FROM completed_articles
        WHERE id_user = $1
        ORDER BY id
        """,
        user_id,
    )


async def get_by_user_and_article(user_id: int, article_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, id_user, id_article, rating
        FROM completed_articles
        WHERE id_user = $1
          AND id_article = $2
        LIMIT 1
        """,
        user_id,
        article_id,
    )


async def list_by_user_and_package(user_id: int, package_id: int) -> list[dict[str, Any]]:
    """
    Completed articles of a user restricted to the articles of one package.
    """
    return await db.fetch_all(
        """
        SELECT ca.id, ca.id_user, ca.id_article, ca.rating
        FROM completed_articles ca
        JOIN articles_packages ap ON ap.id_article = ca.id_article
        WHERE ca.id_user = $1
          AND ap.id_package = $2
        ORDER BY ca.id
        """,
        user_id,
        package_id,
    )


async def insert_completed_article(*, user_id: int, article_id: int, rating: int | None) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO completed_articles (id_user, id_article, rating)
        VALUES ($1, $2, $3)
        RETURNING id
        """,
        user_id,
        article_id,
        rating,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert completed article.")
    return int(row["id"])


async def delete_all_by_user(user_id: int) -> MutationResult:
    return await db.execute("DELETE FROM completed_articles WHERE id_user = $1", user_id)


async def delete_all_by_article(article_id: int) -> MutationResult:
    return await db.execute("DELETE FROM completed_articles WHERE id_article = $1", article_id)
