"""
User persistence (raw SQL).

`password_hash` is written but never selected, so it cannot leak into a
response.
"""

from __future__ import annotations

from typing import Any, Mapping

from core import db, partial_update
from core.results import MutationResult

USER_COLUMNS = """
    id, first_name, last_name, phone_number, email, user_picture,
    id_theme, id_language, is_admin, registration_date
"""

UPDATABLE_COLUMNS = frozenset(
    {
        "first_name",
        "last_name",
        "phone_number",
        "email",
        "user_picture",
        "password_hash",
        "id_theme",
        "id_language",
        "is_admin",
    }
)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def list_users() -> list[dict[str, Any]]:
    return await db.fetch_all(f"SELECT {USER_COLUMNS} FROM users ORDER BY id")


async def get_user_by_id(user_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {USER_COLUMNS}
        FROM users
        WHERE id = $1
        """,
        user_id,
    )


async def get_user_by_email(email: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {USER_COLUMNS}
        FROM users
        WHERE lower(email) = $1
        """,
        normalize_email(email),
    )


async def insert_user(
    *,
    first_name: str,
    last_name: str,
    email: str,
    password_hash: str,
    phone_number: str | None = None,
    user_picture: str | None = None,
    id_theme: int | None = None,
    id_language: int | None = None,
    is_admin: int = 0,
) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO users (
          first_name, last_name, phone_number, email, user_picture,
          password_hash, id_theme, id_language, is_admin, registration_date
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, now())
        RETURNING id
        """,
        first_name,
        last_name,
        phone_number,
        normalize_email(email),
        user_picture,
        password_hash,
        id_theme,
        id_language,
        is_admin,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert user.")
    return int(row["id"])


async def update_user(user_id: int, fields: Mapping[str, Any]) -> MutationResult:
    if "email" in fields:
        fields = {**fields, "email": normalize_email(fields["email"])}
    return await partial_update.update_by_id(
        "users",
        user_id,
        fields,
        allowed=UPDATABLE_COLUMNS,
    )


async def delete_user(user_id: int) -> MutationResult:
    return await db.execute("DELETE FROM users WHERE id = $1", user_id)
