"""
Package API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, status

from articles.schemas import ArticleResponse
from categories.schemas import CategoryResponse

from . import schemas, service

router = APIRouter()


@router.get("/packages", response_model=list[schemas.PackageResponse])
async def list_packages() -> list[dict]:
    return await service.list_packages()


@router.get("/packages/{package_id}", response_model=schemas.PackageResponse)
async def get_package(package_id: int = Path(..., ge=1)) -> dict:
    return await service.get_existing_package(package_id)


@router.get("/users/{user_id}/packages", response_model=list[schemas.PackageResponse])
async def list_packages_not_followed(user_id: int = Path(..., ge=1)) -> list[dict]:
    """
    Packages the user does not follow yet.
    """
    return await service.list_packages_not_followed(user_id)


@router.post("/packages", response_model=schemas.PackageResponse, status_code=status.HTTP_201_CREATED)
async def create_package(payload: schemas.PackageCreate) -> dict:
    return await service.create_package(payload)


@router.put("/packages/{package_id}", response_model=schemas.PackageResponse)
async def update_package(payload: schemas.PackageUpdate, package_id: int = Path(..., ge=1)) -> dict:
    return await service.update_package(package_id, payload)


@router.delete("/packages/{package_id}", response_model=schemas.PackageResponse)
async def delete_package(package_id: int = Path(..., ge=1)) -> dict:
    return await service.delete_package(package_id)


@router.get("/packages/{package_id}/articles", response_model=list[ArticleResponse])
async def list_package_articles(package_id: int = Path(..., ge=1)) -> list[dict]:
    return await service.list_articles(package_id)


@router.post(
    "/packages/{package_id}/articles",
    response_model=schemas.PackageArticleResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_package_article(
    payload: schemas.PackageArticleRequest,
    package_id: int = Path(..., ge=1),
) -> dict:
    return await service.add_article(package_id, payload.id_article)


@router.get("/packages/{package_id}/categories", response_model=list[CategoryResponse])
async def list_package_categories(package_id: int = Path(..., ge=1)) -> list[dict]:
    return await service.list_categories(package_id)
