"""
Comment business logic.
"""

from __future__ import annotations

from typing import Any

from articles import service as article_service
from core import gates
from core.errors import NotFoundError
from users import service as user_service

from . import repository, schemas

COMMENT_NOT_FOUND = "This comment does not exist."


async def get_existing_comment(comment_id: int) -> dict[str, Any]:
    return await gates.ensure_exists(repository.get_comment_by_id(comment_id), COMMENT_NOT_FOUND)


async def list_comments() -> list[dict[str, Any]]:
    return await repository.list_comments()


async def add_comment(user_id: int, payload: schemas.CommentCreate) -> dict[str, Any]:
    await user_service.get_existing_user(user_id)
    await article_service.get_existing_article(payload.id_article)

    comment_id = await repository.insert_comment(
        user_id=user_id,
        article_id=payload.id_article,
        text=payload.text,
    )
    return await get_existing_comment(comment_id)


async def update_comment(user_id: int, comment_id: int, payload: schemas.CommentUpdate) -> dict[str, Any]:
    comment = await get_existing_comment(comment_id)
    if int(comment["id_user"]) != user_id:
        # Someone else's comment looks the same as a missing one.
        raise NotFoundError(COMMENT_NOT_FOUND)

    fields = payload.supplied_fields()
    if "id_article" in fields:
        await article_service.get_existing_article(fields["id_article"])

    result = await repository.update_comment(comment_id, fields, user_id=user_id)
    gates.require_one(result, COMMENT_NOT_FOUND)
    return await get_existing_comment(comment_id)


async def delete_comment(comment_id: int) -> dict[str, Any]:
    comment = await get_existing_comment(comment_id)
    result = await repository.delete_comment(comment_id)
    gates.require_one(result, COMMENT_NOT_FOUND)
    return comment
