"""Field decoders for career page HTML.

Each decoder reads one semantic field through a fixed CSS selector and, where
the field is an icon, resolves the icon's file name through an exact-match
table. Anything not listed in a table is rejected rather than guessed:
- Missing always-present node/attribute -> StructuralAbsence
- Unknown icon file name or tier number -> ValueDecodeFailure
- src attribute that is not an absolute URL -> MalformedReference
"""

from urllib.parse import urlsplit

from bs4 import BeautifulSoup, Tag

from career_api.schemas.player import Rank, Role, Tier
from career_api.services.errors import (
    MalformedReference,
    StructuralAbsence,
    ValueDecodeFailure,
)

# ============================================================
# Selectors
# ============================================================

PRIVATE_SELECTOR = ".Profile-player--private"
PORTRAIT_SELECTOR = ".Profile-player--portrait"
TITLE_SELECTOR = ".Profile-player--title"
ENDORSEMENT_SELECTOR = ".Profile-playerSummary--endorsement"
ROLE_WRAPPER_SELECTOR = ".Profile-playerSummary--roleWrapper"
ROLE_ICON_SELECTOR = ".Profile-playerSummary--role > img"
TIER_ICON_SELECTOR = ".Profile-playerSummary--rank"

NO_TITLE = "No Title"

# ============================================================
# Icon tables (exact file names)
# ============================================================

ENDORSEMENT_ICONS: dict[str, int] = {
    "1-9de6d43ec5.svg": 1,
    "2-8b9f0faa25.svg": 2,
    "3-8ccb5f0aef.svg": 3,
    "4-48261e1164.svg": 4,
    "5-8697f241ca.svg": 5,
}

ROLE_ICONS: dict[str, Role] = {
    "tank-f64702b684.svg": Role.TANK,
    "offense-ab1756f419.svg": Role.DAMAGE,
    "support-0258e13d85.svg": Role.SUPPORT,
}

TIER_PREFIXES: dict[str, Tier] = {
    "BronzeTier": Tier.BRONZE,
    "SilverTier": Tier.SILVER,
    "GoldTier": Tier.GOLD,
    "PlatinumTier": Tier.PLATINUM,
    "DiamondTier": Tier.DIAMOND,
    "MasterTier": Tier.MASTER,
    "GrandmasterTier": Tier.GRANDMASTER,
}

_TIER_NUMBERS = range(1, 6)


# ============================================================
# Helpers
# ============================================================


def _select_required(node: BeautifulSoup | Tag, selector: str, field: str) -> Tag:
    found = node.select_one(selector)
    if found is None:
        raise StructuralAbsence(
            "Could not parse page",
            detail={"field": field, "selector": selector},
        )
    return found


def _required_src(node: Tag, field: str) -> str:
    src = node.get("src")
    if src is None:
        raise StructuralAbsence(
            "Could not parse page",
            detail={"field": field, "attribute": "src"},
        )
    return src


def url_file_name(url: str, field: str = "url") -> str:
    """Return the last path segment of an absolute URL.

    Raises:
        MalformedReference: If the value is not an absolute http(s)-style URL.
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise MalformedReference(
            f"Could not parse {field} URL", detail={"field": field, "url": url}
        ) from e
    if not parts.scheme or not parts.netloc:
        raise MalformedReference(
            f"Could not parse {field} URL", detail={"field": field, "url": url}
        )
    return parts.path.rsplit("/", 1)[-1]


# ============================================================
# Decoders
# ============================================================


def is_private(document: BeautifulSoup) -> bool:
    """Private profiles carry a marker node; its content is irrelevant."""
    return document.select_one(PRIVATE_SELECTOR) is not None


def decode_portrait(document: BeautifulSoup) -> str | None:
    """Decode the portrait image URL.

    The portrait node is always rendered; an empty or missing src means the
    player has no portrait.
    """
    node = _select_required(document, PORTRAIT_SELECTOR, "portrait")
    src = node.get("src")
    if not src:
        return None
    return src


def decode_title(document: BeautifulSoup) -> str | None:
    """Decode the player title, None if absent, empty or "No Title"."""
    node = document.select_one(TITLE_SELECTOR)
    if node is None:
        return None
    text = node.get_text()
    if not text or text == NO_TITLE:
        return None
    return text


def decode_endorsement(document: BeautifulSoup) -> int:
    """Decode the endorsement level (1-5) from the endorsement icon."""
    node = _select_required(document, ENDORSEMENT_SELECTOR, "endorsement")
    file_name = url_file_name(_required_src(node, "endorsement"), "endorsement")
    try:
        return ENDORSEMENT_ICONS[file_name]
    except KeyError:
        raise ValueDecodeFailure(
            "Found invalid endorsement level while parsing",
            detail={"icon": file_name},
        ) from None


def decode_tier(file_name: str) -> Rank:
    """Decode a tier icon file name such as "GoldTier-3-1a2b3c.png"."""
    tokens = file_name.split("-")
    tier = TIER_PREFIXES.get(tokens[0])
    if tier is None:
        raise ValueDecodeFailure(
            "Found invalid tier while parsing", detail={"icon": file_name}
        )

    number_text = tokens[1] if len(tokens) > 1 else ""
    if not (number_text.isascii() and number_text.isdigit()):
        raise ValueDecodeFailure(
            "Found invalid tier number while parsing", detail={"icon": file_name}
        )
    tier_number = int(number_text)
    if tier_number not in _TIER_NUMBERS:
        raise ValueDecodeFailure(
            "Found invalid tier number while parsing", detail={"icon": file_name}
        )

    return Rank(tier=tier, tier_number=tier_number)


def decode_role_entry(node: Tag) -> tuple[Role, Rank]:
    """Decode one role wrapper into its role and rank.

    Both icons are resolved before anything is returned: a rank is never
    produced without its role, or a tier without its number.
    """
    role_icon = _select_required(node, ROLE_ICON_SELECTOR, "role")
    tier_icon = _select_required(node, TIER_ICON_SELECTOR, "tier")

    role_file = url_file_name(_required_src(role_icon, "role"), "role")
    tier_file = url_file_name(_required_src(tier_icon, "tier"), "tier")

    role = ROLE_ICONS.get(role_file)
    if role is None:
        raise ValueDecodeFailure(
            "Found invalid role while parsing", detail={"icon": role_file}
        )

    return role, decode_tier(tier_file)


def role_wrappers(document: BeautifulSoup) -> list[Tag]:
    """All role wrapper nodes in document order (may be empty)."""
    return document.select(ROLE_WRAPPER_SELECTOR)
