"""
Join-table persistence (articles_categories, articles_packages,
packages_categories).

A join row is a surrogate id plus two foreign ids. The three tables share
the same queries, parameterized by a `LinkTable` descriptor; table and
column names only ever come from the descriptors below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from core import db, partial_update
from core.results import MutationResult


@dataclass(frozen=True)
class LinkTable:
    table: str
    left: str
    right: str

    @property
    def columns(self) -> frozenset[str]:
        return frozenset({self.left, self.right})


ARTICLES_CATEGORIES = LinkTable("articles_categories", "id_article", "id_category")
ARTICLES_PACKAGES = LinkTable("articles_packages", "id_article", "id_package")
PACKAGES_CATEGORIES = LinkTable("packages_categories", "id_package", "id_category")


def _select(link: LinkTable) -> str:
    return f"SELECT id, {link.left}, {link.right} FROM {link.table}"


async def list_links(link: LinkTable) -> list[dict[str, Any]]:
    return await db.fetch_all(f"{_select(link)} ORDER BY id")


async def get_link_by_id(link: LinkTable, link_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(f"{_select(link)} WHERE id = $1", link_id)


async def get_link(link: LinkTable, left_id: int, right_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"{_select(link)} WHERE {link.left} = $1 AND {link.right} = $2 LIMIT 1",
        left_id,
        right_id,
    )


async def insert_link(link: LinkTable, left_id: int, right_id: int) -> int:
    row = await db.fetch_one(
        f"""
        INSERT INTO {link.table} ({link.left}, {link.right})
        VALUES ($1, $2)
        RETURNING id
        """,
        left_id,
        right_id,
    )
    if row is None or "id" not in row:
        raise RuntimeError(f"Failed to insert into {link.table}.")
    return int(row["id"])


async def update_link(link: LinkTable, link_id: int, fields: Mapping[str, Any]) -> MutationResult:
    return await partial_update.update_by_id(link.table, link_id, fields, allowed=link.columns)


async def delete_link_by_id(link: LinkTable, link_id: int) -> MutationResult:
    return await db.execute(f"DELETE FROM {link.table} WHERE id = $1", link_id)


async def delete_links_by(link: LinkTable, column: str, value: int) -> MutationResult:
    """
    Remove every join row pointing at one side, e.g. all categories of an article.
    """
    if column not in link.columns:
        raise ValueError(f"{column} is not a column of {link.table}")
    return await db.execute(f"DELETE FROM {link.table} WHERE {column} = $1", value)
