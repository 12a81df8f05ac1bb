"""
Category business logic.
"""

from __future__ import annotations

from typing import Any

from associations import repository as link_repository
from core import cascade, gates

from . import repository, schemas

CATEGORY_NOT_FOUND = "This category does not exist."


async def get_existing_category(category_id: int) -> dict[str, Any]:
    return await gates.ensure_exists(repository.get_category_by_id(category_id), CATEGORY_NOT_FOUND)


async def list_categories() -> list[dict[str, Any]]:
    return await repository.list_categories()


async def create_category(payload: schemas.CategoryCreate) -> dict[str, Any]:
    category_id = await repository.insert_category(name=payload.name)
    return {**payload.model_dump(), "id": category_id}


async def update_category(category_id: int, payload: schemas.CategoryUpdate) -> dict[str, Any]:
    await get_existing_category(category_id)
    result = await repository.update_category(category_id, payload.supplied_fields())
    gates.require_one(result, CATEGORY_NOT_FOUND)
    return await get_existing_category(category_id)


async def delete_category(category_id: int) -> dict[str, Any]:
    category = await get_existing_category(category_id)
    await cascade.delete_with_dependents(
        "category",
        category_id,
        steps=[
            cascade.CascadeStep(
                "articles_categories",
                lambda: link_repository.delete_links_by(
                    link_repository.ARTICLES_CATEGORIES, "id_category", category_id
                ),
            ),
            cascade.CascadeStep(
                "packages_categories",
                lambda: link_repository.delete_links_by(
                    link_repository.PACKAGES_CATEGORIES, "id_category", category_id
                ),
            ),
        ],
        terminal=lambda: repository.delete_category(category_id),
    )
    return category
