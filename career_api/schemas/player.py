"""Schemas for player profiles (/player/{name}-{discriminator}).

PlayerProfile doubles as the cache payload: it is stored as JSON and must
round-trip exactly through model_validate_json.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Role(str, Enum):
    """Competitive role a rank is held in."""

    TANK = "tank"
    DAMAGE = "damage"
    SUPPORT = "support"


class Tier(str, Enum):
    """Competitive tier, lowest first."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"
    DIAMOND = "Diamond"
    MASTER = "Master"
    GRANDMASTER = "Grandmaster"


class Battletag(BaseModel):
    """Player identifier: name plus numeric discriminator."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    discriminator: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.name}#{self.discriminator}"

    @property
    def path_component(self) -> str:
        """Form used in career page URLs (e.g. "Player-1234")."""
        return f"{self.name}-{self.discriminator}"


class Rank(BaseModel):
    """A tier plus its subdivision (1-5)."""

    model_config = ConfigDict(frozen=True)

    tier: Tier
    tier_number: int = Field(ge=1, le=5)


class PlayerProfile(BaseModel):
    """Decoded career profile for one player."""

    model_config = ConfigDict(frozen=True)

    battletag: Battletag
    private: bool = False
    profile_picture: str | None = None
    title: str | None = None
    endorsement: int = Field(ge=1, le=5)
    tank: Rank | None = None
    damage: Rank | None = None
    support: Rank | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        """Display form of the battletag ("Name#1234")."""
        return str(self.battletag)
