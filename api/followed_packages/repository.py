"""
Followed-package persistence: a user's package subscriptions.

There is no unique constraint on (id_user, id_package); the service checks
for an existing row before inserting.
"""

from __future__ import annotations

from typing import Any

from core import db
from core.results import MutationResult


async def get_followed_package(user_id: int, package_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, id_user, id_package
        FROM followed_packages
        WHERE id_user = $1
          AND id_package = $2
        LIMIT 1
        """,
        user_id,
        package_id,
    )


async def list_packages_followed_by_user(user_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT p.id, p.name, p.description, p.image
        FROM packages p
        JOIN followed_packages fp ON fp.id_package = p.id
        WHERE fp.id_user = $1
        ORDER BY p.id
        """,
        user_id,
    )


async def insert_followed_package(*, user_id: int, package_id: int) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO followed_packages (id_user, id_package)
        VALUES ($1, $2)
        RETURNING id
        """,
        user_id,
        package_id,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert followed package.")
    return int(row["id"])


async def delete_followed_package(user_id: int, package_id: int) -> MutationResult:
    return await db.execute(
        "DELETE FROM followed_packages WHERE id_user = $1 AND id_package = $2",
        user_id,
        package_id,
    )


async def delete_all_by_user(user_id: int) -> MutationResult:
    return await db.execute("DELETE FROM followed_packages WHERE id_user = $1", user_id)


async def delete_all_by_package(package_id: int) -> MutationResult:
    return await db.execute("DELETE FROM followed_packages WHERE id_package = $1", package_id)
