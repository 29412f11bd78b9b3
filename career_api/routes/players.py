"""Player profile endpoint.

GET /player/{name}-{discriminator} -> PlayerProfile JSON.

Routers are thin: the cache-aside flow lives in services.player_profile.
"""

from fastapi import APIRouter, Depends, Path, Response

from career_api.context import AppContext, get_context
from career_api.schemas import Battletag, ErrorResponse, PlayerProfile
from career_api.services.player_profile import get_player_profile

router = APIRouter()


@router.get(
    "/player/{name}-{discriminator}",
    response_model=PlayerProfile,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_player(
    response: Response,
    name: str = Path(
        description="Battletag name",
        min_length=1,
        max_length=64,
        examples=["Player"],
    ),
    discriminator: int = Path(
        description="Battletag discriminator",
        ge=0,
        examples=[1234],
    ),
    ctx: AppContext = Depends(get_context),
) -> PlayerProfile:
    """Get the career profile of a player.

    Served from cache for up to ctx.cache_ttl seconds after the last fetch.

    Raises:
        ProfileError: Mapped to a structured error response by the app.
    """
    battletag = Battletag(name=name, discriminator=discriminator)
    profile = await get_player_profile(battletag, ctx)

    response.headers["Cache-Control"] = f"public, max-age={ctx.cache_ttl}"
    return profile
