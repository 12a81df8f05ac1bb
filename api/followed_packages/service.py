"""
Followed-package business logic.

Following is guarded by three gates, checked in this order: the user
exists, the package exists, the user does not already follow it.
"""

from __future__ import annotations

from typing import Any

from core import gates
from core.errors import NotFoundError
from packages import service as package_service
from users import service as user_service

from . import repository

NOT_FOLLOWED = "This package is not followed by the user."
ALREADY_FOLLOWED = "This package is already followed by the user."


async def list_followed(user_id: int) -> list[dict[str, Any]]:
    await user_service.get_existing_user(user_id)
    return await repository.list_packages_followed_by_user(user_id)


async def get_followed(user_id: int, package_id: int) -> dict[str, Any]:
    return await gates.ensure_exists(repository.get_followed_package(user_id, package_id), NOT_FOLLOWED)


async def follow(user_id: int, package_id: int) -> dict[str, Any]:
    await user_service.get_existing_user(user_id)
    await package_service.get_existing_package(package_id)
    await gates.ensure_absent(repository.get_followed_package(user_id, package_id), ALREADY_FOLLOWED)

    followed_id = await repository.insert_followed_package(user_id=user_id, package_id=package_id)
    return {"id": followed_id, "id_user": user_id, "id_package": package_id}


async def unfollow(user_id: int, package_id: int) -> None:
    await get_followed(user_id, package_id)
    result = await repository.delete_followed_package(user_id, package_id)
    gates.require_ok(result, "Followed package cannot be deleted.")
    if result.rows_affected == 0:
        raise NotFoundError(NOT_FOLLOWED)


async def unfollow_all(user_id: int) -> int:
    result = await repository.delete_all_by_user(user_id)
    gates.require_ok(result, "Followed packages cannot be deleted.")
    return result.rows_affected
