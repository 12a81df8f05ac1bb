"""
Article business logic.
"""

from __future__ import annotations

from typing import Any

from associations import repository as link_repository
from bookmarks import repository as bookmark_repository
from categories import repository as category_repository
from comments import repository as comment_repository
from completed_articles import repository as completed_repository
from core import cascade, gates
from users import repository as user_repository

from . import repository, schemas

ARTICLE_NOT_FOUND = "This article does not exist."
OWNER_NOT_FOUND = "The article owner does not exist."


async def get_existing_article(article_id: int) -> dict[str, Any]:
    return await gates.ensure_exists(repository.get_article_by_id(article_id), ARTICLE_NOT_FOUND)


async def list_articles(*, title: str = "", category_id: int | None = None) -> list[dict[str, Any]]:
    return await repository.list_articles(title=title, category_id=category_id)


async def create_article(payload: schemas.ArticleCreate) -> dict[str, Any]:
    await gates.ensure_exists(user_repository.get_user_by_id(payload.id_user), OWNER_NOT_FOUND)
    article_id = await repository.insert_article(
        title=payload.title,
        user_id=payload.id_user,
        main_image=payload.main_image,
        main_content=payload.main_content,
    )
    return {**payload.model_dump(), "id": article_id}


async def update_article(article_id: int, payload: schemas.ArticleUpdate) -> dict[str, Any]:
    await get_existing_article(article_id)
    fields = payload.supplied_fields()
    if "id_user" in fields:
        await gates.ensure_exists(user_repository.get_user_by_id(fields["id_user"]), OWNER_NOT_FOUND)
    result = await repository.update_article(article_id, fields)
    gates.require_one(result, ARTICLE_NOT_FOUND)
    return await get_existing_article(article_id)


async def delete_article(article_id: int) -> dict[str, Any]:
    article = await get_existing_article(article_id)
    await cascade.delete_with_dependents(
        "article",
        article_id,
        steps=[
            cascade.CascadeStep("bookmarks", lambda: bookmark_repository.delete_all_by_article(article_id)),
            cascade.CascadeStep(
                "completed_articles",
                lambda: completed_repository.delete_all_by_article(article_id),
            ),
            cascade.CascadeStep("comments", lambda: comment_repository.delete_all_by_article(article_id)),
            cascade.CascadeStep(
                "articles_categories",
                lambda: link_repository.delete_links_by(
                    link_repository.ARTICLES_CATEGORIES, "id_article", article_id
                ),
            ),
            cascade.CascadeStep(
                "articles_packages",
                lambda: link_repository.delete_links_by(
                    link_repository.ARTICLES_PACKAGES, "id_article", article_id
                ),
            ),
        ],
        terminal=lambda: repository.delete_article(article_id),
    )
    return article


async def list_categories(article_id: int) -> list[dict[str, Any]]:
    return await category_repository.list_categories_by_article(article_id)


async def list_comments(article_id: int) -> list[dict[str, Any]]:
    return await comment_repository.list_comments_by_article(article_id)
