"""Run a match on a text terminal.

Draws the scoreboard with curses and applies the operator key bindings
(space pauses/resumes, Esc quits). The loop ends once time runs out.

Usage:
    uv run python bin/terminal-scoreboard.py
    uv run python bin/terminal-scoreboard.py --minutes 6 --mat 2 --fight 14 \
        --one "Shane Poppleton" --two "Ronaldo Mendes Dos Santos"
"""

from __future__ import annotations

import argparse
import curses
import logging

from scoreboard.controls.dispatcher import apply_key
from scoreboard.logic.enums import MatchState
from scoreboard.logic.models import Competitor
from scoreboard.logic.match import new_match
from scoreboard.views.terminal import render_lines
from shared.logging import setup_logging

ESCAPE = 27
POLL_INTERVAL_MS = 10


def _competitor(full_name: str) -> Competitor:
    first, _, last = full_name.strip().partition(" ")
    return Competitor(first_name=first, last_name=last)


def run(screen: curses.window, args: argparse.Namespace) -> None:
    curses.curs_set(0)
    screen.timeout(POLL_INTERVAL_MS)

    match = new_match(_competitor(args.one), _competitor(args.two), args.minutes, args.mat, args.fight)
    match.start_match()

    while match.match_state() is not MatchState.FINISHED:
        screen.erase()
        for row, line in enumerate(render_lines(match)):
            screen.addstr(row, 0, line)
        screen.refresh()

        key = screen.getch()
        if key == ESCAPE:
            break
        if 0 <= key < 256:
            apply_key(match, chr(key))


def main() -> None:
    parser = argparse.ArgumentParser(description="Terminal BJJ scoreboard")
    parser.add_argument("--minutes", type=int, default=5, help="match duration in minutes (default: 5)")
    parser.add_argument("--mat", type=int, default=1, help="mat number (default: 1)")
    parser.add_argument("--fight", type=int, default=1, help="fight number (default: 1)")
    parser.add_argument("--one", default="Competitor One", help="competitor one full name")
    parser.add_argument("--two", default="Competitor Two", help="competitor two full name")
    args = parser.parse_args()

    if args.minutes < 1:
        parser.error("--minutes must be at least 1")

    # only warnings reach stdout, so the engine's info events don't draw over the board
    setup_logging(level=logging.WARNING)
    curses.wrapper(run, args)


if __name__ == "__main__":
    main()
