"""Cache-aside lookup of player profiles.

Flow:
1. Check Redis for the profile -> return immediately on HIT
2. On MISS (or Redis unreachable), take an admission permit
3. Fetch the career page; the permit is released once the body is in
4. Classify status (404 -> not found, other non-2xx -> upstream failure)
5. Parse and extract the profile, attach the battletag
6. Best-effort cache write with the profile TTL

Cache failures never change the outcome of a request. A cached payload that
does not decode is the exception: it is reported, not treated as a miss.
Concurrent misses for the same battletag each fetch and write; the last write
wins.
"""

import logging
import time

from pydantic import ValidationError
from redis.exceptions import RedisError

from career_api.context import AppContext
from career_api.schemas.player import Battletag, PlayerProfile
from career_api.services.career_client import OriginResponse
from career_api.services.errors import (
    CorruptCacheEntry,
    UpstreamFailure,
    UpstreamNotFound,
)
from career_api.services.profile_extractor import extract_profile, parse_document
from career_api.stores.redis import player_cache_key

logger = logging.getLogger("uvicorn.error")


async def get_player_profile(battletag: Battletag, ctx: AppContext) -> PlayerProfile:
    """Get a player's profile, from cache when possible.

    Args:
        battletag: Player to look up.
        ctx: Shared application context.

    Returns:
        The decoded profile.

    Raises:
        UpstreamNotFound: Career page does not exist.
        UpstreamFailure: Origin error status or transport failure.
        CorruptCacheEntry: Cached payload could not be decoded.
        ProfileError: Any extraction failure (structure/value/reference).
    """
    cache_key = player_cache_key(battletag)

    cached = await _try_get_cached_profile(cache_key, ctx)
    if cached is not None:
        logger.info(f"Profile cache HIT for {battletag}")
        return cached

    logger.info(f"Profile cache MISS for {battletag}, fetching career page")

    async with ctx.admission.permit():
        response = await ctx.origin.fetch(battletag)

    _check_status(response, battletag)

    start = time.perf_counter()
    document = parse_document(response.text)
    profile = extract_profile(document).with_battletag(battletag)
    logger.info(f"Parsing career page for {battletag} took {time.perf_counter() - start:.3f}s")

    await _try_set_cached_profile(cache_key, profile, ctx)
    return profile


def _check_status(response: OriginResponse, battletag: Battletag) -> None:
    if response.status_code == 404:
        raise UpstreamNotFound("Player not found", detail={"battletag": str(battletag)})
    if not response.is_success:
        logger.error(f"Career page for {battletag} returned status {response.status_code}")
        raise UpstreamFailure(
            "Failed getting player",
            detail={"battletag": str(battletag), "status": response.status_code},
        )


async def _try_get_cached_profile(key: str, ctx: AppContext) -> PlayerProfile | None:
    try:
        payload = await ctx.cache.get(key)
    except RedisError as e:
        logger.warning(f"Redis cache read failed: {e}")
        return None
    if payload is None:
        return None

    try:
        return PlayerProfile.model_validate_json(payload)
    except ValidationError as e:
        logger.error(f"Corrupt cache entry for {key}: {e}")
        raise CorruptCacheEntry("Corrupt cache entry", detail={"key": key}) from e


async def _try_set_cached_profile(key: str, profile: PlayerProfile, ctx: AppContext) -> None:
    try:
        await ctx.cache.set(key, profile.model_dump_json().encode(), ctx.cache_ttl)
    except Exception as e:
        logger.warning(f"Redis cache write failed: {e}")
