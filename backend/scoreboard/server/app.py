from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from scoreboard.controls.dispatcher import apply_action, apply_key
from scoreboard.controls.types import parse_action
from scoreboard.logic.clock import MILLIS_PER_MINUTE
from scoreboard.logic.match import Match, new_match
from scoreboard.logic.models import MatchInformation
from scoreboard.logic.types import build_snapshot
from scoreboard.server.settings import ScoreboardServerSettings
from scoreboard.server.types import KeyPressRequest, MatchSetupRequest
from scoreboard.views.handlers import create_templates, scoreboard_page
from shared.build_info import APP_VERSION, GIT_COMMIT
from shared.logging import setup_logging

logger = structlog.get_logger()

if TYPE_CHECKING:
    from starlette.requests import Request

_MAX_REQUEST_BODY_SIZE = 4096


class InvalidBodyError(Exception):
    def __init__(self, message: str, status_code: int = 422) -> None:
        super().__init__(message)
        self.status_code = status_code


async def _read_json_body(request: Request) -> dict[str, Any]:
    raw_body = await request.body()
    if len(raw_body) > _MAX_REQUEST_BODY_SIZE:
        raise InvalidBodyError("Request body too large", status_code=413)
    try:
        body = json.loads(raw_body)
    except (ValueError, UnicodeDecodeError) as e:
        raise InvalidBodyError("Invalid JSON body") from e
    if not isinstance(body, dict):
        raise InvalidBodyError("JSON body must be an object")
    return body


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _snapshot_response(match: Match, status_code: int = 200) -> JSONResponse:
    return JSONResponse(build_snapshot(match).model_dump(mode="json"), status_code=status_code)


async def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "version": APP_VERSION, "commit": GIT_COMMIT})


async def get_match(request: Request) -> JSONResponse:
    return _snapshot_response(request.app.state.match)


async def create_match(request: Request) -> JSONResponse:
    """POST /api/match - replace the current match with a fresh, unstarted one."""
    try:
        setup = MatchSetupRequest(**await _read_json_body(request))
    except InvalidBodyError as e:
        return _error(str(e), e.status_code)
    except (TypeError, ValidationError) as e:
        return _error(str(e), 422)

    match = new_match(
        setup.competitor_one.to_competitor(),
        setup.competitor_two.to_competitor(),
        setup.match_time_minutes,
        setup.mat_number,
        setup.fight_number,
    )
    request.app.state.match = match
    logger.info("new match created", mat=setup.mat_number, fight=setup.fight_number)
    return _snapshot_response(match, status_code=201)


async def setup_match(request: Request) -> JSONResponse:
    """PUT /api/match/setup - edit competitors and match details before the start."""
    try:
        setup = MatchSetupRequest(**await _read_json_body(request))
    except InvalidBodyError as e:
        return _error(str(e), e.status_code)
    except (TypeError, ValidationError) as e:
        return _error(str(e), 422)

    # No await from here on: the start check and the edit must see the same match.
    match: Match = request.app.state.match
    if match.clock.has_started:
        return _error("Match already started", 409)

    match.info.competitor_one = setup.competitor_one.to_competitor()
    match.info.competitor_two = setup.competitor_two.to_competitor()
    match.info.match_time_minutes = setup.match_time_minutes
    match.info.mat_number = setup.mat_number
    match.info.fight_number = setup.fight_number
    match.clock.duration_ms = setup.match_time_minutes * MILLIS_PER_MINUTE
    return _snapshot_response(match)


async def start_match(request: Request) -> JSONResponse:
    match: Match = request.app.state.match
    match.start_match()
    return _snapshot_response(match)


async def toggle_clock(request: Request) -> JSONResponse:
    match: Match = request.app.state.match
    match.toggle_clock()
    return _snapshot_response(match)


async def post_action(request: Request) -> JSONResponse:
    match: Match = request.app.state.match
    try:
        action = parse_action(await _read_json_body(request))
    except InvalidBodyError as e:
        return _error(str(e), e.status_code)
    except ValidationError as e:
        return _error(str(e), 422)

    apply_action(match, action)
    return _snapshot_response(match)


async def post_key(request: Request) -> JSONResponse:
    match: Match = request.app.state.match
    try:
        key_press = KeyPressRequest(**await _read_json_body(request))
    except InvalidBodyError as e:
        return _error(str(e), e.status_code)
    except (TypeError, ValidationError) as e:
        return _error(str(e), 422)

    if not apply_key(match, key_press.key):
        return _error(f"No action bound to key {key_press.key!r}", 404)
    return _snapshot_response(match)


def _default_match(settings: ScoreboardServerSettings) -> Match:
    return Match(
        info=MatchInformation(
            match_time_minutes=settings.default_match_minutes,
            mat_number=settings.default_mat_number,
            fight_number=settings.default_fight_number,
        ),
    )


def create_app(
    settings: ScoreboardServerSettings | None = None,
    match: Match | None = None,
) -> Starlette:
    """Build the scoreboard application.

    The application owns exactly one Match at a time (``app.state.match``).
    Request handlers are its only mutators.
    """
    if settings is None:  # pragma: no cover
        settings = ScoreboardServerSettings()

    if match is None:
        match = _default_match(settings)

    routes = [
        Route("/", scoreboard_page, methods=["GET"]),
        Route("/health", health, methods=["GET"]),
        Route("/api/match", get_match, methods=["GET"]),
        Route("/api/match", create_match, methods=["POST"]),
        Route("/api/match/setup", setup_match, methods=["PUT"]),
        Route("/api/match/start", start_match, methods=["POST"]),
        Route("/api/match/toggle", toggle_clock, methods=["POST"]),
        Route("/api/match/actions", post_action, methods=["POST"]),
        Route("/api/match/keys", post_key, methods=["POST"]),
    ]

    app = Starlette(routes=routes)
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["Content-Type"],
    )
    app.state.settings = settings
    app.state.match = match
    app.state.templates = create_templates()

    logger.info("scoreboard server ready")
    return app


def get_app() -> Starlette:  # pragma: no cover
    """ASGI application factory for production use (e.g., uvicorn --factory)."""
    settings = ScoreboardServerSettings()
    setup_logging(log_dir=settings.log_dir)
    return create_app(settings=settings)
