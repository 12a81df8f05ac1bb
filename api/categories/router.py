"""
Category API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, status

from . import schemas, service

router = APIRouter()


@router.get("/categories", response_model=list[schemas.CategoryResponse])
async def list_categories() -> list[dict]:
    return await service.list_categories()


@router.get("/categories/{category_id}", response_model=schemas.CategoryResponse)
async def get_category(category_id: int = Path(..., ge=1)) -> dict:
    return await service.get_existing_category(category_id)


@router.post("/categories", response_model=schemas.CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(payload: schemas.CategoryCreate) -> dict:
    return await service.create_category(payload)


@router.put("/categories/{category_id}", response_model=schemas.CategoryResponse)
async def update_category(payload: schemas.CategoryUpdate, category_id: int = Path(..., ge=1)) -> dict:
    return await service.update_category(category_id, payload)


@router.delete("/categories/{category_id}", response_model=schemas.CategoryResponse)
async def delete_category(category_id: int = Path(..., ge=1)) -> dict:
    return await service.delete_category(category_id)
