"""
Category persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any, Mapping

from core import db, partial_update
from core.results import MutationResult

UPDATABLE_COLUMNS = frozenset({"name"})


async def list_categories() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT id, name FROM categories ORDER BY id")


async def get_category_by_id(category_id: int) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT id, name FROM categories WHERE id = $1", category_id)


async def list_categories_by_article(article_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT c.id, c.name
        FROM categories c
        JOIN articles_categories ac ON ac.id_category = c.id
        WHERE ac.id_article = $1
        ORDER BY c.id
        """,
        article_id,
    )


async def list_categories_by_package(package_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT c.id, c.name
        FROM categories c
        JOIN packages_categories pc ON pc.id_category = c.id
        WHERE pc.id_package = $1
        ORDER BY c.id
        """,
        package_id,
    )


async def insert_category(*, name: str) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO categories (name)
        VALUES ($1)
        RETURNING id
        """,
        name,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert category.")
    return int(row["id"])


async def update_category(category_id: int, fields: Mapping[str, Any]) -> MutationResult:
    return await partial_update.update_by_id(
        "categories",
        category_id,
        fields,
        allowed=UPDATABLE_COLUMNS,
    )


async def delete_category(category_id: int) -> MutationResult:
    return await db.execute("DELETE FROM categories WHERE id = $1", category_id)
