"""
Package persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any, Mapping

from core import db, partial_update
from core.results import MutationResult

UPDATABLE_COLUMNS = frozenset({"name", "description", "image"})


async def list_packages() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, description, image
        FROM packages
        ORDER BY id
        """
    )


async def list_packages_not_followed_by_user(user_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT p.id, p.name, p.description, p.image
        FROM packages p
        WHERE NOT EXISTS (
          SELECT 1
          FROM followed_packages fp
          WHERE fp.id_package = p.id
            AND fp.id_user = $1
        )
        ORDER BY p.id
        """,
        user_id,
    )


async def get_package_by_id(package_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, name, description, image
        FROM packages
        WHERE id = $1
        """,
        package_id,
    )


async def insert_package(*, name: str, description: str | None, image: str | None) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO packages (name, description, image)
        VALUES ($1, $2, $3)
        RETURNING id
        """,
        name,
        description,
        image,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert package.")
    return int(row["id"])


async def update_package(package_id: int, fields: Mapping[str, Any]) -> MutationResult:
    return await partial_update.update_by_id(
        "packages",
        package_id,
        fields,
        allowed=UPDATABLE_COLUMNS,
    )


async def delete_package(package_id: int) -> MutationResult:
    return await db.execute("DELETE FROM packages WHERE id = $1", package_id)
