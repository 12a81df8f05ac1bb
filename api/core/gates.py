"""
Precondition gates.

A gate is a read performed before a write. It either hands back what it
read or raises a typed failure, so chaining gates is just awaiting them in
order: the first one that raises stops the request before any write.
"""

from __future__ import annotations

import logging
from typing import Awaitable, TypeVar

from .errors import ConflictError, MutationFailedError, NotFoundError
from .results import MutationResult

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def ensure_exists(lookup: Awaitable[T | None], detail: str) -> T:
    row = await lookup
    if row is None:
        raise NotFoundError(detail)
    return row


async def ensure_absent(lookup: Awaitable[object | None], detail: str) -> None:
    row = await lookup
    if row is not None:
        logger.debug("gate_conflict detail=%s", detail)
        raise ConflictError(detail)


def require_one(result: MutationResult, detail: str) -> MutationResult:
    """
    Interpret a single-row mutation.

    Zero rows after an existence gate passed means the row went away in
    between, which callers report as not found.
    """
    if not result.ok:
        raise MutationFailedError(detail)
    if not result.exactly_one:
        raise NotFoundError(detail)
    return result


def require_ok(result: MutationResult, detail: str) -> MutationResult:
    if not result.ok:
        raise MutationFailedError(detail)
    return result
