"""Shared application context.

Built once at startup and handed to every request read-only: the origin
client, the profile cache and the admission controller.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from fastapi import Request

from career_api.schemas.player import Battletag
from career_api.services.admission import AdmissionController
from career_api.services.career_client import CareerPageClient, OriginResponse
from career_api.settings import Settings
from career_api.stores.redis import TTL_PLAYER_PROFILE, ProfileCache

logger = logging.getLogger("uvicorn.error")


class OriginFetcher(Protocol):
    async def fetch(self, battletag: Battletag) -> OriginResponse: ...


class ProfileStore(Protocol):
    async def get(self, key: str) -> bytes | None: ...

    async def set(self, key: str, value: bytes, ttl: int) -> None: ...


@dataclass(frozen=True)
class AppContext:
    origin: OriginFetcher
    cache: ProfileStore
    admission: AdmissionController
    cache_ttl: int = TTL_PLAYER_PROFILE


def build_context(settings: Settings) -> AppContext:
    """Create the origin client, cache pool and admission controller."""
    return AppContext(
        origin=CareerPageClient(
            base_url=settings.origin_base_url,
            user_agent=settings.origin_user_agent,
            timeout=settings.origin_timeout,
        ),
        cache=ProfileCache.from_url(
            settings.redis_url,
            max_connections=settings.redis_max_connections,
        ),
        admission=AdmissionController(settings.max_concurrent_fetches),
        cache_ttl=settings.profile_cache_ttl,
    )


async def close_context(ctx: AppContext) -> None:
    """Release pooled connections held by the context."""
    if isinstance(ctx.origin, CareerPageClient):
        await ctx.origin.close()
    if isinstance(ctx.cache, ProfileCache):
        await ctx.cache.close()


def get_context(request: Request) -> AppContext:
    """FastAPI dependency returning the context stored at startup."""
    ctx: AppContext | None = getattr(request.app.state, "context", None)
    if ctx is None:
        raise RuntimeError("Application context not initialized.")
    return ctx


async def ping_cache(ctx: AppContext) -> None:
    """Check Redis connectivity at startup (no-op for non-Redis stores)."""
    if isinstance(ctx.cache, ProfileCache):
        await ctx.cache.ping()
