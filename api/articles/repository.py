"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any, Mapping

from core import db, partial_update
from core.results import MutationResult

ARTICLE_COLUMNS = """
    a.id, a.title, a.id_user, a.main_image, a.main_content,
    a.creation_date, a.last_update_date
"""

UPDATABLE_COLUMNS = frozenset({"title", "id_user", "main_image", "main_content"})


def like_pattern(fragment: str) -> str:
    """
    Wrap a user-supplied fragment for a substring LIKE match.

    LIKE wildcards inside the fragment are escaped so they match literally.
    """
    escaped = fragment.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def build_list_query(*, title: str = "", category_id: int | None = None) -> tuple[str, list[Any]]:
    """
    SELECT for the article list. Filters combine with AND.
    """
    joins = ""
    conditions: list[str] = []
    args: list[Any] = []

    if category_id is not None:
        joins = " JOIN articles_categories ac ON ac.id_article = a.id"
        args.append(category_id)
        conditions.append(f"ac.id_category = ${len(args)}")

    title = (title or "").strip()
    if title:
        args.append(like_pattern(title))
        conditions.append(f"a.title ILIKE ${len(args)}")

    where = f" WHERE {' AND '.join(conditions)}" if conditions else ""
    sql = f"SELECT DISTINCT {ARTICLE_COLUMNS} FROM articles a{joins}{where} ORDER BY a.id"
    return sql, args


async def list_articles(*, title: str = "", category_id: int | None = None) -> list[dict[str, Any]]:
    sql, args = build_list_query(title=title, category_id=category_id)
    return await db.fetch_all(sql, *args)


async def get_article_by_id(article_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {ARTICLE_COLUMNS}
        FROM articles a
        WHERE a.id = $1
        """,
        article_id,
    )


async def list_articles_bookmarked_by_user(user_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {ARTICLE_COLUMNS}
        FROM articles a
        JOIN bookmarks b ON b.id_article = a.id
        WHERE b.id_user = $1
        ORDER BY a.id
        """,
        user_id,
    )


async def list_articles_by_package(package_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {ARTICLE_COLUMNS}
        FROM articles a
        JOIN articles_packages ap ON ap.id_article = a.id
        WHERE ap.id_package = $1
        ORDER BY a.id
        """,
        package_id,
    )


async def insert_article(
    *,
    title: str,
    user_id: int,
    main_image: str | None,
    main_content: str | None,
) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO articles (title, id_user, main_image, main_content, creation_date, last_update_date)
        VALUES ($1, $2, $3, $4, now(), now())
        RETURNING id
        """,
        title,
        user_id,
        main_image,
        main_content,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert article.")
    return int(row["id"])


async def update_article(article_id: int, fields: Mapping[str, Any]) -> MutationResult:
    return await partial_update.update_by_id(
        "articles",
        article_id,
        fields,
        allowed=UPDATABLE_COLUMNS,
        touch_column="last_update_date",
    )


async def delete_article(article_id: int) -> MutationResult:
    return await db.execute("DELETE FROM articles WHERE id = $1", article_id)
