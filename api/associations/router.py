"""
Join-table API endpoints.

The three join tables expose the same five routes; `_register` binds them
for one table. No `from __future__ import annotations` here: the body
types are closure variables and FastAPI has to see them as real classes.
"""

from typing import Any

from fastapi import APIRouter, Path, status

from core.schemas import ApiModel

from . import repository, schemas, service
from .repository import LinkTable

router = APIRouter()


def _register(
    path: str,
    link: LinkTable,
    create_model: type[ApiModel],
    update_model: type[ApiModel],
    response_model: type[ApiModel],
) -> None:
    @router.get(f"/{path}", response_model=list[response_model], name=f"list_{path}")
    async def list_links() -> list[dict[str, Any]]:
        return await service.list_links(link)

    @router.get(f"/{path}/{{link_id}}", response_model=response_model, name=f"get_{path}")
    async def get_link(link_id: int = Path(..., ge=1)) -> dict[str, Any]:
        return await service.get_existing_link(link, link_id)

    @router.post(
        f"/{path}",
        response_model=response_model,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{path}",
    )
    async def create_link(payload: create_model) -> dict[str, Any]:
        return await service.create_link(link, payload.supplied_fields())

    @router.put(f"/{path}/{{link_id}}", response_model=response_model, name=f"update_{path}")
    async def update_link(payload: update_model, link_id: int = Path(..., ge=1)) -> dict[str, Any]:
        return await service.update_link(link, link_id, payload.supplied_fields())

    @router.delete(f"/{path}/{{link_id}}", response_model=response_model, name=f"delete_{path}")
    async def delete_link(link_id: int = Path(..., ge=1)) -> dict[str, Any]:
        return await service.delete_link(link, link_id)


_register(
    "articlescategories",
    repository.ARTICLES_CATEGORIES,
    schemas.ArticleCategoryCreate,
    schemas.ArticleCategoryUpdate,
    schemas.ArticleCategoryResponse,
)
_register(
    "articlespackages",
    repository.ARTICLES_PACKAGES,
    schemas.ArticlePackageCreate,
    schemas.ArticlePackageUpdate,
    schemas.ArticlePackageResponse,
)
_register(
    "packagescategories",
    repository.PACKAGES_CATEGORIES,
    schemas.PackageCategoryCreate,
    schemas.PackageCategoryUpdate,
    schemas.PackageCategoryResponse,
)
