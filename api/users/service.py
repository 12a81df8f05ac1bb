"""
User business logic.

Deleting a user removes everything that points at it, in this order:
bookmarks, completed articles, followed packages, comments, then the user
row itself (see `core.cascade`).
"""

from __future__ import annotations

from typing import Any

from articles import repository as article_repository
from bookmarks import repository as bookmark_repository
from comments import repository as comment_repository
from completed_articles import repository as completed_repository
from core import cascade, gates
from core.errors import ConflictError
from followed_packages import repository as followed_repository

from . import repository, schemas, security

USER_NOT_FOUND = "This user does not exist."
EMAIL_TAKEN = "Email is already used."


async def get_existing_user(user_id: int) -> dict[str, Any]:
    return await gates.ensure_exists(repository.get_user_by_id(user_id), USER_NOT_FOUND)


async def ensure_email_free(email: str, *, exclude_user_id: int | None = None) -> None:
    existing = await repository.get_user_by_email(email)
    if existing is not None and int(existing["id"]) != exclude_user_id:
        raise ConflictError(EMAIL_TAKEN)


async def list_users() -> list[dict[str, Any]]:
    return await repository.list_users()


async def create_user(payload: schemas.UserCreate) -> dict[str, Any]:
    await ensure_email_free(payload.email)

    data = payload.model_dump(exclude={"password"})
    data["email"] = repository.normalize_email(data["email"])
    user_id = await repository.insert_user(
        password_hash=security.hash_password(payload.password),
        **data,
    )
    return {**data, "id": user_id}


async def update_user(user_id: int, payload: schemas.UserUpdate) -> dict[str, Any]:
    await get_existing_user(user_id)

    fields = payload.supplied_fields()
    if fields.get("email") is not None:
        await ensure_email_free(fields["email"], exclude_user_id=user_id)
    if "password" in fields:
        fields["password_hash"] = security.hash_password(fields.pop("password"))

    result = await repository.update_user(user_id, fields)
    gates.require_one(result, USER_NOT_FOUND)
    return await get_existing_user(user_id)


async def delete_user(user_id: int) -> dict[str, Any]:
    user = await get_existing_user(user_id)
    await cascade.delete_with_dependents(
        "user",
        user_id,
        steps=[
            cascade.CascadeStep("bookmarks", lambda: bookmark_repository.delete_all_by_user(user_id)),
            cascade.CascadeStep(
                "completed_articles",
                lambda: completed_repository.delete_all_by_user(user_id),
            ),
            cascade.CascadeStep(
                "followed_packages",
                lambda: followed_repository.delete_all_by_user(user_id),
            ),
            cascade.CascadeStep("comments", lambda: comment_repository.delete_all_by_user(user_id)),
        ],
        terminal=lambda: repository.delete_user(user_id),
    )
    return user


async def list_bookmarked_articles(user_id: int) -> list[dict[str, Any]]:
    await get_existing_user(user_id)
    return await article_repository.list_articles_bookmarked_by_user(user_id)
