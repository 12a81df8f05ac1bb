"""
Join-table business logic.

Both sides of a join row must exist and a pair may appear only once; both
rules are checked here before any write.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping

from articles import service as article_service
from categories import service as category_service
from core import gates
from core.errors import ConflictError
from packages import service as package_service

from . import repository
from .repository import LinkTable

LINK_NOT_FOUND = "This association does not exist."
LINK_EXISTS = "This association already exists."

_EXISTENCE_CHECKS: dict[str, Callable[[int], Awaitable[dict[str, Any]]]] = {
    "id_article": article_service.get_existing_article,
    "id_category": category_service.get_existing_category,
    "id_package": package_service.get_existing_package,
}


async def _ensure_sides_exist(fields: Mapping[str, int]) -> None:
    for column, value in fields.items():
        await _EXISTENCE_CHECKS[column](value)


async def get_existing_link(link: LinkTable, link_id: int) -> dict[str, Any]:
    return await gates.ensure_exists(repository.get_link_by_id(link, link_id), LINK_NOT_FOUND)


async def list_links(link: LinkTable) -> list[dict[str, Any]]:
    return await repository.list_links(link)


async def create_link(link: LinkTable, fields: Mapping[str, int]) -> dict[str, Any]:
    left_id, right_id = fields[link.left], fields[link.right]
    await _ensure_sides_exist({link.left: left_id, link.right: right_id})
    await gates.ensure_absent(repository.get_link(link, left_id, right_id), LINK_EXISTS)

    link_id = await repository.insert_link(link, left_id, right_id)
    return {"id": link_id, link.left: left_id, link.right: right_id}


async def update_link(link: LinkTable, link_id: int, fields: Mapping[str, int]) -> dict[str, Any]:
    current = await get_existing_link(link, link_id)
    if not fields:
        return current

    await _ensure_sides_exist(fields)
    merged = {**current, **fields}
    existing = await repository.get_link(link, merged[link.left], merged[link.right])
    if existing is not None and int(existing["id"]) != link_id:
        raise ConflictError(LINK_EXISTS)

    result = await repository.update_link(link, link_id, fields)
    gates.require_one(result, LINK_NOT_FOUND)
    return await get_existing_link(link, link_id)


async def delete_link(link: LinkTable, link_id: int) -> dict[str, Any]:
    current = await get_existing_link(link, link_id)
    result = await repository.delete_link_by_id(link, link_id)
    gates.require_one(result, LINK_NOT_FOUND)
    return current
