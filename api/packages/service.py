"""
Package business logic.
"""

from __future__ import annotations

from typing import Any

from articles import repository as article_repository
from articles import service as article_service
from associations import repository as link_repository
from categories import repository as category_repository
from core import cascade, gates
from followed_packages import repository as followed_repository
from users import service as user_service

from . import repository, schemas

PACKAGE_NOT_FOUND = "This package does not exist."
ARTICLE_ALREADY_IN_PACKAGE = "This article is already in the package."


async def get_existing_package(package_id: int) -> dict[str, Any]:
    return await gates.ensure_exists(repository.get_package_by_id(package_id), PACKAGE_NOT_FOUND)


async def list_packages() -> list[dict[str, Any]]:
    return await repository.list_packages()


async def list_packages_not_followed(user_id: int) -> list[dict[str, Any]]:
    await user_service.get_existing_user(user_id)
    return await repository.list_packages_not_followed_by_user(user_id)


async def create_package(payload: schemas.PackageCreate) -> dict[str, Any]:
    package_id = await repository.insert_package(
        name=payload.name,
        description=payload.description,
        image=payload.image,
    )
    return {**payload.model_dump(), "id": package_id}


async def update_package(package_id: int, payload: schemas.PackageUpdate) -> dict[str, Any]:
    await get_existing_package(package_id)
    result = await repository.update_package(package_id, payload.supplied_fields())
    gates.require_one(result, PACKAGE_NOT_FOUND)
    return await get_existing_package(package_id)


async def delete_package(package_id: int) -> dict[str, Any]:
    package = await get_existing_package(package_id)
    await cascade.delete_with_dependents(
        "package",
        package_id,
        steps=[
            cascade.CascadeStep(
                "followed_packages",
                lambda: followed_repository.delete_all_by_package(package_id),
            ),
            cascade.CascadeStep(
                "articles_packages",
                lambda: link_repository.delete_links_by(
                    link_repository.ARTICLES_PACKAGES, "id_package", package_id
                ),
            ),
            cascade.CascadeStep(
                "packages_categories",
                lambda: link_repository.delete_links_by(
                    link_repository.PACKAGES_CATEGORIES, "id_package", package_id
                ),
            ),
        ],
        terminal=lambda: repository.delete_package(package_id),
    )
    return package


async def list_articles(package_id: int) -> list[dict[str, Any]]:
    return await article_repository.list_articles_by_package(package_id)


async def list_categories(package_id: int) -> list[dict[str, Any]]:
    return await category_repository.list_categories_by_package(package_id)


async def add_article(package_id: int, article_id: int) -> dict[str, Any]:
    """
    Link an article to a package. Gates: package exists, article exists,
    link absent.
    """
    link = link_repository.ARTICLES_PACKAGES
    await get_existing_package(package_id)
    await article_service.get_existing_article(article_id)
    await gates.ensure_absent(link_repository.get_link(link, article_id, package_id), ARTICLE_ALREADY_IN_PACKAGE)

    link_id = await link_repository.insert_link(link, article_id, package_id)
    return {"id": link_id, "id_article": article_id, "id_package": package_id}
