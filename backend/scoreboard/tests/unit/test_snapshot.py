from scoreboard.logic.enums import CompetitorNumber, MatchState
from scoreboard.logic.types import build_snapshot


class TestBuildSnapshot:
    def test_unstarted_match(self, match):
        snapshot = build_snapshot(match)
        assert snapshot.state is MatchState.NOT_STARTED
        assert snapshot.remaining_ms == 300_000
        assert snapshot.remaining == "0:05:00.000"
        assert snapshot.clock_running is False
        assert snapshot.competitor_one.first_name == "Shane"
        assert snapshot.competitor_two.team_name == "Caza BJJ"

    def test_reflects_scores(self, match):
        match.add_points(4, CompetitorNumber.TWO)
        match.add_advantage(CompetitorNumber.ONE)
        match.add_penalty(CompetitorNumber.ONE)
        snapshot = build_snapshot(match)
        assert snapshot.competitor_two.points == 4
        assert snapshot.competitor_one.advantages == 1
        assert snapshot.competitor_one.penalties == 1

    def test_running_match(self, match, wall_clock):
        match.start_match()
        wall_clock.advance_ms(65_250)
        snapshot = build_snapshot(match)
        assert snapshot.state is MatchState.IN_PROGRESS
        assert snapshot.clock_running is True
        assert snapshot.remaining_ms == 234_750
        assert snapshot.remaining == "0:03:54.750"

    def test_finished_match(self, match, wall_clock):
        match.start_match()
        wall_clock.advance_ms(300_000)
        snapshot = build_snapshot(match)
        assert snapshot.state is MatchState.FINISHED
        assert snapshot.remaining == "0:00:00.000"

    def test_json_dump_uses_enum_values(self, match):
        data = build_snapshot(match).model_dump(mode="json")
        assert data["state"] == "not_started"
        assert data["competitor_two"]["country"] == "brazil"
