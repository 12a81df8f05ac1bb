"""
Bookmark API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, status

from . import schemas, service

router = APIRouter()


@router.get("/users/{user_id}/bookmarks", response_model=list[schemas.BookmarkResponse])
async def list_bookmarks(user_id: int = Path(..., ge=1)) -> list[dict]:
    return await service.list_bookmarks(user_id)


@router.get("/users/{user_id}/bookmarks/{article_id}", response_model=schemas.BookmarkResponse)
async def get_bookmark(user_id: int = Path(..., ge=1), article_id: int = Path(..., ge=1)) -> dict:
    return await service.get_bookmark(user_id, article_id)


@router.post(
    "/users/{user_id}/bookmarks",
    response_model=schemas.BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_bookmark(payload: schemas.BookmarkCreate, user_id: int = Path(..., ge=1)) -> dict:
    return await service.add_bookmark(user_id, payload.id_article)


@router.delete("/users/{user_id}/bookmarks/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bookmark(user_id: int = Path(..., ge=1), article_id: int = Path(..., ge=1)) -> None:
    await service.delete_bookmark(user_id, article_id)


@router.delete("/users/{user_id}/bookmarks", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_bookmarks(user_id: int = Path(..., ge=1)) -> None:
    await service.delete_all_bookmarks(user_id)
