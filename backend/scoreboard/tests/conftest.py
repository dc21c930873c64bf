from unittest.mock import patch

import pytest

from scoreboard.logic.match import Match
from scoreboard.tests.helpers import FakeWallClock, create_match


@pytest.fixture
def wall_clock():
    """Patch the clock module's wall-clock source with a manually advanced one."""
    fake = FakeWallClock()
    with patch("scoreboard.logic.clock.time") as mock_time:
        mock_time.time_ns.side_effect = fake.time_ns
        yield fake


@pytest.fixture
def match() -> Match:
    return create_match()
