"""
Outcome of a mutating statement.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MutationResult:
    rows_affected: int
    # True when no statement was sent (e.g. a partial update with nothing to set).
    skipped: bool = False

    @property
    def ok(self) -> bool:
        """
        The statement ran and reported a row count. Zero rows is fine here,
        which is what "delete all children" style operations need.
        """
        return self.skipped or self.rows_affected >= 0

    @property
    def exactly_one(self) -> bool:
        return self.skipped or self.rows_affected == 1

    @classmethod
    def noop(cls) -> "MutationResult":
        return cls(rows_affected=0, skipped=True)
