"""
Article API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query

from categories.schemas import CategoryResponse
from comments.schemas import CommentResponse

from . import schemas, service

router = APIRouter()


@router.get("/articles", response_model=list[schemas.ArticleResponse])
async def list_articles(
    title: str = Query(default="", max_length=150),
    tag: int | None = Query(default=None, ge=1),
) -> list[dict]:
    """
    List articles, optionally filtered by a title fragment and/or a
    category id (`tag`). Both filters must match when both are given.
    """
    return await service.list_articles(title=title, category_id=tag)


@router.get("/articles/{article_id}", response_model=schemas.ArticleResponse)
async def get_article(article_id: int = Path(..., ge=1)) -> dict:
    return await service.get_existing_article(article_id)


@router.post("/articles", response_model=schemas.ArticleResponse, status_code=201)
async def create_article(payload: schemas.ArticleCreate) -> dict:
    return await service.create_article(payload)


@router.put("/articles/{article_id}", response_model=schemas.ArticleResponse)
async def update_article(payload: schemas.ArticleUpdate, article_id: int = Path(..., ge=1)) -> dict:
    return await service.update_article(article_id, payload)


@router.delete("/articles/{article_id}", response_model=schemas.ArticleResponse)
async def delete_article(article_id: int = Path(..., ge=1)) -> dict:
    return await service.delete_article(article_id)


@router.get("/articles/{article_id}/categories", response_model=list[CategoryResponse])
async def list_article_categories(article_id: int = Path(..., ge=1)) -> list[dict]:
    return await service.list_categories(article_id)


@router.get("/articles/{article_id}/comments", response_model=list[CommentResponse])
async def list_article_comments(article_id: int = Path(..., ge=1)) -> list[dict]:
    return await service.list_comments(article_id)
