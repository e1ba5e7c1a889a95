from fastapi import APIRouter
from cricket_league.franchises.controllers.franchise_controller import router as franchise_router
from cricket_league.franchises.controllers.franchise_views_controller import router as franchise_views_router
from cricket_league.teams.controllers.team_controller import router as team_router
from cricket_league.teams.controllers.team_views_controller import router as team_views_router
from cricket_league.players.controllers.player_controller import router as player_router
from cricket_league.players.controllers.player_views_controller import router as player_views_router
from cricket_league.sponsors.controllers.sponsor_controller import router as sponsor_router
from cricket_league.sponsors.controllers.sponsor_views_controller import router as sponsor_views_router

api_router = APIRouter()

# JSON endpoints
api_router.include_router(franchise_router, prefix="/Franchises", tags=["franchises"])
api_router.include_router(team_router, prefix="/Teams", tags=["teams"])
api_router.include_router(player_router, prefix="/Players", tags=["players"])
api_router.include_router(sponsor_router, prefix="/Sponsors", tags=["sponsors"])

# Server-rendered pages, kept out of the OpenAPI schema
api_router.include_router(franchise_views_router, prefix="/Franchises", include_in_schema=False)
api_router.include_router(team_views_router, prefix="/Teams", include_in_schema=False)
api_router.include_router(player_views_router, prefix="/Players", include_in_schema=False)
api_router.include_router(sponsor_views_router, prefix="/Sponsors", include_in_schema=False)
