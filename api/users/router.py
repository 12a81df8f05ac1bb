"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, status

from articles.schemas import ArticleResponse

from . import schemas, service

router = APIRouter()


@router.get("/users", response_model=list[schemas.UserResponse])
async def list_users() -> list[dict]:
    return await service.list_users()


@router.get("/users/{user_id}", response_model=schemas.UserResponse)
async def get_user(user_id: int = Path(..., ge=1)) -> dict:
    return await service.get_existing_user(user_id)


@router.post("/users", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(payload: schemas.UserCreate) -> dict:
    return await service.create_user(payload)


@router.put("/users/{user_id}", response_model=schemas.UserResponse)
async def update_user(payload: schemas.UserUpdate, user_id: int = Path(..., ge=1)) -> dict:
    return await service.update_user(user_id, payload)


@router.delete("/users/{user_id}", response_model=schemas.UserResponse)
async def delete_user(user_id: int = Path(..., ge=1)) -> dict:
    """
    Delete a user with its bookmarks, completed articles, followed packages
    and comments. Returns the deleted user.
    """
    return await service.delete_user(user_id)


@router.get("/users/{user_id}/articles", response_model=list[ArticleResponse])
async def list_bookmarked_articles(user_id: int = Path(..., ge=1)) -> list[dict]:
    return await service.list_bookmarked_articles(user_id)
