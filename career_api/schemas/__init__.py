"""Pydantic schemas for API request/response validation."""

from career_api.schemas.common import ErrorDetail, ErrorResponse
from career_api.schemas.player import (
    Battletag,
    PlayerProfile,
    Rank,
    Role,
    Tier,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "Battletag",
    "PlayerProfile",
    "Rank",
    "Role",
    "Tier",
]
