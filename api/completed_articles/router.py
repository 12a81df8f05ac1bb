"""
Completed-article API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, status

from . import schemas, service

router = APIRouter()


@router.get(
    "/users/{user_id}/completedArticles",
    response_model=list[schemas.CompletedArticleResponse],
)
async def list_completed(user_id: int = Path(..., ge=1)) -> list[dict]:
    return await service.list_completed(user_id)


@router.get(
    "/users/{user_id}/completedArticles/{article_id}",
    response_model=schemas.CompletedArticleResponse,
)
async def get_completed(user_id: int = Path(..., ge=1), article_id: int = Path(..., ge=1)) -> dict:
    return await service.get_completed(user_id, article_id)


@router.get(
    "/users/{user_id}/packages/{package_id}/completedArticles",
    response_model=list[schemas.CompletedArticleResponse],
)
async def list_completed_in_package(
    user_id: int = Path(..., ge=1),
    package_id: int = Path(..., ge=1),
) -> list[dict]:
    return await service.list_completed_in_package(user_id, package_id)


@router.post(
    "/users/{user_id}/completedArticles",
    response_model=schemas.CompletedArticleResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_completed(payload: schemas.CompletedArticleCreate, user_id: int = Path(..., ge=1)) -> dict:
    return await service.add_completed(user_id, payload)


@router.delete("/users/{user_id}/completedArticles", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_completed(user_id: int = Path(..., ge=1)) -> None:
    await service.delete_all_completed(user_id)
