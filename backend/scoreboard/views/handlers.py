"""HTML scoreboard page for spectator displays."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from starlette.templating import Jinja2Templates

from scoreboard.controls.keymap import DEFAULT_KEY_BINDINGS
from scoreboard.logic.types import build_snapshot

if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def create_templates() -> Jinja2Templates:
    """Create Jinja2 template engine for scoreboard HTML templates."""
    return Jinja2Templates(directory=str(TEMPLATES_DIR))


async def scoreboard_page(request: Request) -> Response:
    """GET / - render the scoreboard; the page then polls /api/match every frame."""
    templates: Jinja2Templates = request.app.state.templates
    snapshot = build_snapshot(request.app.state.match)
    return templates.TemplateResponse(
        request,
        "scoreboard.html",
        {
            "snapshot": snapshot,
            "bound_keys": sorted(DEFAULT_KEY_BINDINGS),
        },
    )
