"""
Comment API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, status

from . import schemas, service

router = APIRouter()


@router.get("/comments", response_model=list[schemas.CommentResponse])
async def list_comments() -> list[dict]:
    return await service.list_comments()


@router.get("/comments/{comment_id}", response_model=schemas.CommentResponse)
async def get_comment(comment_id: int = Path(..., ge=1)) -> dict:
    return await service.get_existing_comment(comment_id)


@router.post(
    "/users/{user_id}/comments",
    response_model=schemas.CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(payload: schemas.CommentCreate, user_id: int = Path(..., ge=1)) -> dict:
    return await service.add_comment(user_id, payload)


@router.put("/users/{user_id}/comments/{comment_id}", response_model=schemas.CommentResponse)
async def update_comment(
    payload: schemas.CommentUpdate,
    user_id: int = Path(..., ge=1),
    comment_id: int = Path(..., ge=1),
) -> dict:
    return await service.update_comment(user_id, comment_id, payload)


@router.delete("/comments/{comment_id}", response_model=schemas.CommentResponse)
async def delete_comment(comment_id: int = Path(..., ge=1)) -> dict:
    return await service.delete_comment(comment_id)
