"""API routes."""

from fastapi import APIRouter

from career_api.routes import players

api_router = APIRouter()

# Player career profiles
api_router.include_router(players.router, tags=["players"])
