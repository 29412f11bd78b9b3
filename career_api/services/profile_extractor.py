"""Assemble a player profile from one career page.

The document is parsed per request and dropped once extraction returns.
"""

from dataclasses import dataclass

from bs4 import BeautifulSoup

from career_api.schemas.player import Battletag, PlayerProfile, Rank, Role
from career_api.services.field_decoder import (
    decode_endorsement,
    decode_portrait,
    decode_role_entry,
    decode_title,
    is_private,
    role_wrappers,
)


@dataclass(frozen=True)
class ExtractedProfile:
    """Profile fields decoded from a page, before the battletag is attached."""

    private: bool
    profile_picture: str | None
    title: str | None
    endorsement: int
    tank: Rank | None = None
    damage: Rank | None = None
    support: Rank | None = None

    def with_battletag(self, battletag: Battletag) -> PlayerProfile:
        return PlayerProfile(
            battletag=battletag,
            private=self.private,
            profile_picture=self.profile_picture,
            title=self.title,
            endorsement=self.endorsement,
            tank=self.tank,
            damage=self.damage,
            support=self.support,
        )


def parse_document(html: str) -> BeautifulSoup:
    """Parse a career page body."""
    return BeautifulSoup(html, "html.parser")


def extract_profile(document: BeautifulSoup) -> ExtractedProfile:
    """Decode every profile field from a parsed career page.

    Unranked players have no role wrappers at all, which yields three empty
    rank slots. When a role appears twice the later wrapper wins.

    Raises:
        ProfileError: The first decoder failure encountered.
    """
    private = is_private(document)
    profile_picture = decode_portrait(document)
    title = decode_title(document)
    endorsement = decode_endorsement(document)

    ranks: dict[Role, Rank] = {}
    for wrapper in role_wrappers(document):
        role, rank = decode_role_entry(wrapper)
        ranks[role] = rank

    return ExtractedProfile(
        private=private,
        profile_picture=profile_picture,
        title=title,
        endorsement=endorsement,
        tank=ranks.get(Role.TANK),
        damage=ranks.get(Role.DAMAGE),
        support=ranks.get(Role.SUPPORT),
    )
