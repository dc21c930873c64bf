"""Route parsed operator actions and key presses onto a Match."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from scoreboard.controls.keymap import action_for_key
from scoreboard.controls.types import ActionType, AddPointsAction, ClockAction, CompetitorAction

if TYPE_CHECKING:
    from scoreboard.logic.match import Match

logger = structlog.get_logger()


def apply_action(match: Match, action: ClockAction | AddPointsAction | CompetitorAction) -> None:
    if isinstance(action, ClockAction):
        if action.action == ActionType.START_MATCH:
            match.start_match()
        else:
            match.toggle_clock()
    elif isinstance(action, AddPointsAction):
        match.add_points(action.points, action.competitor)
    elif isinstance(action, CompetitorAction):
        _apply_competitor_action(match, action)
    else:
        raise TypeError(f"Unsupported action: {action!r}")


def _apply_competitor_action(match: Match, action: CompetitorAction) -> None:
    if action.action == ActionType.ADD_ADVANTAGE:
        match.add_advantage(action.competitor)
    elif action.action == ActionType.ADD_PENALTY:
        match.add_penalty(action.competitor)
    elif action.action == ActionType.SUBTRACT_POINT:
        match.subtract_point(action.competitor)
    elif action.action == ActionType.SUBTRACT_ADVANTAGE:
        match.subtract_advantage(action.competitor)
    else:
        match.subtract_penalty(action.competitor)


def apply_key(match: Match, key: str) -> bool:
    """Apply the action bound to ``key``. Returns False for unbound keys."""
    action = action_for_key(key)
    if action is None:
        logger.debug("unbound key ignored", key=key)
        return False
    apply_action(match, action)
    return True
