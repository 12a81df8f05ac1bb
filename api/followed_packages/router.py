"""
Followed-package API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, status

from packages.schemas import PackageResponse

from . import schemas, service

router = APIRouter()


@router.get("/users/{user_id}/followedpackages", response_model=list[PackageResponse])
async def list_followed(user_id: int = Path(..., ge=1)) -> list[dict]:
    return await service.list_followed(user_id)


@router.get(
    "/users/{user_id}/followedpackages/{package_id}",
    response_model=schemas.FollowedPackageResponse,
)
async def get_followed(user_id: int = Path(..., ge=1), package_id: int = Path(..., ge=1)) -> dict:
    return await service.get_followed(user_id, package_id)


@router.post(
    "/users/{user_id}/followedpackages",
    response_model=schemas.FollowedPackageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def follow(payload: schemas.FollowRequest, user_id: int = Path(..., ge=1)) -> dict:
    return await service.follow(user_id, payload.id_package)


@router.delete("/users/{user_id}/followedpackages/{package_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unfollow(user_id: int = Path(..., ge=1), package_id: int = Path(..., ge=1)) -> None:
    await service.unfollow(user_id, package_id)


@router.delete("/users/{user_id}/followedpackages", status_code=status.HTTP_204_NO_CONTENT)
async def unfollow_all(user_id: int = Path(..., ge=1)) -> None:
    await service.unfollow_all(user_id)
