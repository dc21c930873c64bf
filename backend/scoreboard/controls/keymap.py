"""
Operator keyboard layout.

Competitor one is driven from the top letter row, competitor two from the
home row, and the space bar pauses/resumes the clock:

    q/a  +2 points      r/f  +1 advantage   y/h  -1 point
    w/s  +3 points      t/g  +1 penalty     u/j  -1 advantage
    e/d  +4 points                          i/k  -1 penalty
"""

from scoreboard.controls.types import (
    ActionType,
    AddPointsAction,
    ClockAction,
    CompetitorAction,
)
from scoreboard.logic.enums import CompetitorNumber

SPACE_KEY = " "


def _competitor_bindings(
    keys: str,
    competitor: CompetitorNumber,
) -> dict[str, AddPointsAction | CompetitorAction]:
    """Bind eight keys, in layout order, to one competitor's scoring actions."""
    two, three, four, advantage, penalty, minus_point, minus_advantage, minus_penalty = keys
    return {
        two: AddPointsAction(competitor=competitor, points=2),
        three: AddPointsAction(competitor=competitor, points=3),
        four: AddPointsAction(competitor=competitor, points=4),
        advantage: CompetitorAction(action=ActionType.ADD_ADVANTAGE, competitor=competitor),
        penalty: CompetitorAction(action=ActionType.ADD_PENALTY, competitor=competitor),
        minus_point: CompetitorAction(action=ActionType.SUBTRACT_POINT, competitor=competitor),
        minus_advantage: CompetitorAction(action=ActionType.SUBTRACT_ADVANTAGE, competitor=competitor),
        minus_penalty: CompetitorAction(action=ActionType.SUBTRACT_PENALTY, competitor=competitor),
    }


DEFAULT_KEY_BINDINGS: dict[str, ClockAction | AddPointsAction | CompetitorAction] = {
    **_competitor_bindings("qwertyui", CompetitorNumber.ONE),
    **_competitor_bindings("asdfghjk", CompetitorNumber.TWO),
    SPACE_KEY: ClockAction(action=ActionType.TOGGLE_CLOCK),
}


def action_for_key(key: str) -> ClockAction | AddPointsAction | CompetitorAction | None:
    """Return the action bound to a key (case-insensitive), or None if unbound."""
    return DEFAULT_KEY_BINDINGS.get(key.lower())
