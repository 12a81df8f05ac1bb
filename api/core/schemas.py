"""
Base pydantic model for the public API.

Python attributes and SQL columns are snake_case; the JSON wire format is
camelCase (`idUser`, `mainImage`, ...). Both spellings are accepted on input.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Columns declared NOT NULL: an update may omit them but not send null.
    not_null_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_explicit_nulls(self) -> "ApiModel":
        nulled = sorted(
            name
            for name in self.not_null_fields
            if name in self.model_fields_set and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Field(s) cannot be null: {', '.join(nulled)}")
        return self

    def supplied_fields(self) -> dict[str, Any]:
        """
        Fields the client actually sent, keyed by column name.
        """
        return self.model_dump(exclude_unset=True, by_alias=False)
