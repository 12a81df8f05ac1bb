"""
Completed-article business logic.
"""

from __future__ import annotations

from typing import Any

from articles import service as article_service
from core import gates
from packages import service as package_service
from users import service as user_service

from . import repository, schemas

COMPLETED_NOT_FOUND = "This article is not completed by the user."
ALREADY_COMPLETED = "This article is already completed by the user."


async def list_completed(user_id: int) -> list[dict[str, Any]]:
    return await repository.list_by_user(user_id)


async def get_completed(user_id: int, article_id: int) -> dict[str, Any]:
    return await gates.ensure_exists(
        repository.get_by_user_and_article(user_id, article_id),
        COMPLETED_NOT_FOUND,
    )


async def list_completed_in_package(user_id: int, package_id: int) -> list[dict[str, Any]]:
    await user_service.get_existing_user(user_id)
    await package_service.get_existing_package(package_id)
    return await repository.list_by_user_and_package(user_id, package_id)


async def add_completed(user_id: int, payload: schemas.CompletedArticleCreate) -> dict[str, Any]:
    await user_service.get_existing_user(user_id)
    await article_service.get_existing_article(payload.id_article)
    await gates.ensure_absent(
        repository.get_by_user_and_article(user_id, payload.id_article),
        ALREADY_COMPLETED,
    )

    completed_id = await repository.insert_completed_article(
        user_id=user_id,
        article_id=payload.id_article,
        rating=payload.rating,
    )
    return {**payload.model_dump(), "id": completed_id, "id_user": user_id}


async def delete_all_completed(user_id: int) -> int:
    result = await repository.delete_all_by_user(user_id)
    gates.require_ok(result, "Completed articles cannot be deleted.")
    return result.rows_affected
