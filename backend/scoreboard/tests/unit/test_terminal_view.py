from scoreboard.logic.enums import CompetitorNumber
from scoreboard.views.terminal import render_lines


class TestRenderLines:
    def test_layout(self, match):
        match.add_points(2, CompetitorNumber.ONE)
        match.add_advantage(CompetitorNumber.TWO)
        match.add_penalty(CompetitorNumber.TWO)

        assert render_lines(match) == [
            "Shane Poppleton",
            "Points: 2    Advantages: 0    Penalties: 0",
            "",
            "Ronaldo Mendes Dos Santos",
            "Points: 0    Advantages: 1    Penalties: 1",
            "",
            "Time remaining: 0:05:00.000",
        ]

    def test_time_row_follows_clock(self, match, wall_clock):
        match.start_match()
        wall_clock.advance_ms(1_500)
        assert render_lines(match)[-1] == "Time remaining: 0:04:58.500"
