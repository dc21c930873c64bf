import pytest

from scoreboard.logic.enums import Country, ScoreField
from scoreboard.logic.models import Competitor, MatchInformation, MatchScore, PlayerScore


class TestPlayerScoreSubtract:
    @pytest.mark.parametrize("score_field", list(ScoreField))
    def test_subtract_on_zero_is_noop(self, score_field):
        score = PlayerScore()
        score.subtract(score_field)
        assert score == PlayerScore()

    def test_subtract_only_touches_named_field(self):
        score = PlayerScore(points=4, advantages=2, penalties=1)
        score.subtract(ScoreField.ADVANTAGES)
        assert score == PlayerScore(points=4, advantages=1, penalties=1)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError, match="Unknown score field"):
            PlayerScore(points=1).subtract("time")  # type: ignore[arg-type]


class TestDefaults:
    def test_competitor_defaults(self):
        competitor = Competitor()
        assert competitor.full_name == "Competitor Name"
        assert competitor.team_name == "BJJ Team"
        assert competitor.country is Country.AUSTRALIA

    def test_match_information_defaults(self):
        info = MatchInformation()
        assert info.competitor_one.last_name == "One"
        assert info.competitor_two.last_name == "Two"
        assert (info.match_time_minutes, info.mat_number, info.fight_number) == (5, 1, 1)

    def test_scores_are_independent_instances(self):
        score = MatchScore()
        score.competitor_one_score.points = 3
        assert score.competitor_two_score.points == 0
        assert MatchScore().competitor_one_score.points == 0
