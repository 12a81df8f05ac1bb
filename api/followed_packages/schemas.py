"""
Followed-package API schemas.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import ApiModel


class FollowRequest(ApiModel):
    id_package: int = Field(..., ge=1)


class FollowedPackageResponse(ApiModel):
    id: int
    id_user: int
    id_package: int
