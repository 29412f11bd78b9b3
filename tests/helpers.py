"""Synthetic career pages and instrumented collaborators for tests."""

import asyncio

from redis.exceptions import ConnectionError as RedisConnectionError

from career_api.schemas import Battletag
from career_api.services.career_client import OriginResponse

ICON_BASE = "https://static.playoverwatch.com/img/pages/career/icons"
PORTRAIT_URL = "https://d15f34w2p8l1cc.cloudfront.net/overwatch/portrait.png"

TANK_ICON = "tank-f64702b684.svg"
DAMAGE_ICON = "offense-ab1756f419.svg"
SUPPORT_ICON = "support-0258e13d85.svg"

_UNSET = object()


def build_career_page(
    *,
    private: bool = False,
    portrait: str | None | object = PORTRAIT_URL,
    title: str | None = "Ace Pilot",
    endorsement: str | None = "3-8ccb5f0aef.svg",
    roles: list[tuple[str, str]] | None = None,
) -> str:
    """Render a minimal career page.

    portrait: URL for src, "" for an empty src, None for no src attribute,
        _UNSET to omit the node entirely.
    endorsement: icon file name, or None to omit the node.
    roles: (role icon file, tier icon file) per wrapper, in document order.
    """
    parts = ['<html><body><div class="Profile-player">']
    if private:
        parts.append('<div class="Profile-player--private">This profile is currently private</div>')
    if portrait is not _UNSET:
        if portrait is None:
            parts.append('<img class="Profile-player--portrait">')
        else:
            parts.append(f'<img class="Profile-player--portrait" src="{portrait}">')
    if title is not None:
        parts.append(f'<h2 class="Profile-player--title">{title}</h2>')
    parts.append('<div class="Profile-playerSummary">')
    if endorsement is not None:
        parts.append(
            f'<img class="Profile-playerSummary--endorsement" '
            f'src="{ICON_BASE}/endorsement/{endorsement}">'
        )
    for role_icon, tier_icon in roles or []:
        parts.append(
            '<div class="Profile-playerSummary--roleWrapper">'
            f'<div class="Profile-playerSummary--role"><img src="{ICON_BASE}/role/{role_icon}"></div>'
            f'<img class="Profile-playerSummary--rank" src="{ICON_BASE}/rank/{tier_icon}">'
            "</div>"
        )
    parts.append("</div></div></body></html>")
    return "".join(parts)


class FakeCache:
    """In-memory cache recording every call."""

    def __init__(self) -> None:
        self.store: dict[str, bytes] = {}
        self.ttls: dict[str, int] = {}
        self.get_calls: list[str] = []
        self.set_calls: list[str] = []
        self.fail_get = False
        self.fail_set = False

    async def get(self, key: str) -> bytes | None:
        self.get_calls.append(key)
        if self.fail_get:
            raise RedisConnectionError("Connection refused")
        return self.store.get(key)

    async def set(self, key: str, value: bytes, ttl: int) -> None:
        self.set_calls.append(key)
        if self.fail_set:
            raise RedisConnectionError("Connection refused")
        self.store[key] = value
        self.ttls[key] = ttl


class FakeOrigin:
    """Origin returning a fixed response, tracking calls and concurrency."""

    def __init__(self, status_code: int = 200, text: str = "", delay: float = 0.0) -> None:
        self.status_code = status_code
        self.text = text
        self.delay = delay
        self.calls: list[Battletag] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.error: Exception | None = None

    async def fetch(self, battletag: Battletag) -> OriginResponse:
        self.calls.append(battletag)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.error is not None:
                raise self.error
            return OriginResponse(status_code=self.status_code, text=self.text)
        finally:
            self.in_flight -= 1
