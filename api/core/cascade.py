"""
Ordered deletion of dependent rows before their parent.

The schema has no ON DELETE CASCADE, so every parent delete goes through
here. Steps run in the given order inside one transaction; the first step
that fails aborts the cascade and the parent row is never touched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

from . import db
from .errors import MutationFailedError, NotFoundError
from .results import MutationResult

logger = logging.getLogger(__name__)

Mutation = Callable[[], Awaitable[MutationResult]]


@dataclass(frozen=True)
class CascadeStep:
    name: str
    run: Mutation


async def delete_with_dependents(
    entity: str,
    entity_id: int,
    *,
    steps: Sequence[CascadeStep],
    terminal: Mutation,
) -> dict[str, int]:
    """
    Run `steps` then `terminal`. Returns rows removed per step.

    - a step must report a row count (zero is fine)
    - the terminal delete must remove exactly one row
    """
    removed: dict[str, int] = {}
    async with db.transaction():
        for step in steps:
            result = await step.run()
            if not result.ok:
                logger.warning(
                    "cascade_aborted entity=%s id=%s step=%s",
                    entity,
                    entity_id,
                    step.name,
                )
                raise MutationFailedError(f"Could not delete {step.name} of {entity} {entity_id}.")
            removed[step.name] = result.rows_affected
            logger.info(
                "cascade_step entity=%s id=%s step=%s rows=%s",
                entity,
                entity_id,
                step.name,
                result.rows_affected,
            )

        result = await terminal()
        if not result.ok:
            raise MutationFailedError(f"Could not delete {entity} {entity_id}.")
        if result.rows_affected != 1:
            raise NotFoundError(f"This {entity} does not exist.")

    logger.info("cascade_done entity=%s id=%s", entity, entity_id)
    return removed
