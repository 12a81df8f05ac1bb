"""
Partial UPDATE builder.

Only the fields the caller supplied end up in the SET clause. Presence is
decided by the caller (pydantic `model_dump(exclude_unset=True)`), not by
truthiness, so "" / 0 / None are legitimate values to write.

Table and column names come from repository constants; values are always
bound as $n parameters.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from . import db
from .results import MutationResult


def build_update(
    table: str,
    *,
    row_id: int,
    fields: Mapping[str, Any],
    allowed: Iterable[str],
    touch_column: str | None = None,
    scope: Mapping[str, Any] | None = None,
) -> tuple[str, list[Any]] | None:
    """
    Build `UPDATE <table> SET ... WHERE id = $n [AND <scope> ...]`.

    Returns None when `fields` is empty: there is nothing to set and the
    caller should treat the update as a no-op.
    """
    if row_id < 1:
        raise ValueError(f"Invalid id for {table}: {row_id}")

    allowed_set = set(allowed)
    unknown = sorted(set(fields) - allowed_set)
    if unknown:
        raise ValueError(f"Unknown column(s) for {table}: {', '.join(unknown)}")

    if not fields:
        return None

    assignments: list[str] = []
    args: list[Any] = []
    for column, value in fields.items():
        args.append(value)
        assignments.append(f"{column} = ${len(args)}")

    if touch_column:
        assignments.append(f"{touch_column} = now()")

    args.append(row_id)
    conditions = [f"id = ${len(args)}"]
    for column, value in (scope or {}).items():
        args.append(value)
        conditions.append(f"{column} = ${len(args)}")

    sql = f"UPDATE {table} SET {', '.join(assignments)} WHERE {' AND '.join(conditions)}"
    return sql, args


async def update_by_id(
    table: str,
    row_id: int,
    fields: Mapping[str, Any],
    *,
    allowed: Iterable[str],
    touch_column: str | None = None,
    scope: Mapping[str, Any] | None = None,
) -> MutationResult:
    statement = build_update(
        table,
        row_id=row_id,
        fields=fields,
        allowed=allowed,
        touch_column=touch_column,
        scope=scope,
    )
    if statement is None:
        return MutationResult.noop()
    sql, args = statement
    return await db.execute(sql, *args)
