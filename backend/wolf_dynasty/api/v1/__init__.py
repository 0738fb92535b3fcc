"""
API v1 routes.
"""

from fastapi import APIRouter

from wolf_dynasty.services import Services

from .endpoints.health import health_check
from .endpoints.player import PlayerHandler
from .endpoints.teams import TeamsHandler


def add_routes(services: Services, router: APIRouter) -> None:
    """Register every route served by the API on ``router``."""
    add_health_check_handler(router)
    add_teams_handler(services, router)
    add_player_handler(services, router)


def add_health_check_handler(router: APIRouter) -> None:
    router.add_api_route("/health", health_check, methods=["GET"], name="HealthCheck")


def add_teams_handler(services: Services, router: APIRouter) -> None:
    handler = TeamsHandler(services.teams_client, clock=services.clock)

    router.add_api_route(
        "/v1/teams", handler.get_teams, methods=["GET"], name="GetTeams", tags=["Teams"]
    )
    router.add_api_route(
        "/v1/teams", handler.create_team, methods=["POST"], name="CreateTeam", tags=["Teams"]
    )
    router.add_api_route(
        "/v1/teams/{guid}", handler.update_team, methods=["PATCH"], name="PatchTeam", tags=["Teams"]
    )
    router.add_api_route(
        "/v1/teams/{guid}", handler.delete_team, methods=["DELETE"], name="DeleteTeam", tags=["Teams"]
    )


def add_player_handler(services: Services, router: APIRouter) -> None:
    handler = PlayerHandler(services.yahoo_client)

    router.add_api_route(
        "/v1/player/{player_key}",
        handler.get_player,
        methods=["GET"],
        name="GetPlayer",
        tags=["Players"],
    )
