"""Tests for StatLine, GameMetrics and ScoringRules."""

from decimal import Decimal

import pytest

from gridstats_lister.config.settings import ScoringConfig
from gridstats_lister.domain.models.game_metrics import GameMetrics, StatLine
from gridstats_lister.domain.models.scoring_rules import ScoringRules


class TestStatLine:
    def test_addition_sums_every_category(self):
        a = StatLine(tdp=2, ydp=250, fg=1)
        b = StatLine(tdp=1, ydp=90, tdr=1, ydr=12, pat=2)

        total = a + b

        assert total == StatLine(tdp=3, ydp=340, tdr=1, ydr=12, fg=1, pat=2)

    def test_zero(self):
        assert StatLine.zero().is_empty
        assert not StatLine(ydc=5).is_empty

    def test_negative_yardage_allowed(self):
        assert StatLine(ydr=-4).ydr == -4


class TestGameMetrics:
    def test_actual_stats_require_played_game(self):
        unplayed = GameMetrics(
            player_code="P1",
            season=2023,
            week=3,
            played=False,
            actual=StatLine(tdr=2),
        )
        played = unplayed.model_copy(update={"played": True})

        assert unplayed.actual_stats() is None
        assert played.actual_stats() == StatLine(tdr=2)

    def test_played_without_actual_line_is_empty(self):
        metrics = GameMetrics(player_code="P1", season=2023, week=3, played=True)

        assert metrics.actual_stats() == StatLine()

    def test_stored_projection_used_as_is(self):
        metrics = GameMetrics(
            player_code="P1",
            season=2023,
            week=3,
            projected=StatLine(tdp=3),
            projected_points=Decimal("7.5"),
        )

        assert metrics.projected_fantasy_points(ScoringRules()) == Decimal("7.5")

    def test_projection_scored_when_not_stored(self):
        metrics = GameMetrics(
            player_code="P1", season=2023, week=3, projected=StatLine(tdr=1, ydr=60)
        )

        assert metrics.projected_fantasy_points(ScoringRules()) == Decimal("12")


class TestScoringRules:
    @pytest.mark.parametrize(
        "line,expected",
        [
            (StatLine(), Decimal("0")),
            (StatLine(tdp=2, ydp=250), Decimal("18")),
            (StatLine(ydp=274), Decimal("10")),
            (StatLine(tdr=1, ydr=95), Decimal("15")),
            (StatLine(tdc=2, ydc=101), Decimal("22")),
            (StatLine(fg=2, pat=3), Decimal("9")),
            (StatLine(ydr=-7), Decimal("0")),
        ],
    )
    def test_default_scoring(self, line, expected):
        assert ScoringRules().score(line) == expected

    def test_from_config(self):
        rules = ScoringRules.from_config(ScoringConfig(passing_td_points=Decimal("6")))

        assert rules.score(StatLine(tdp=1)) == Decimal("6")

    def test_points_are_decimal(self):
        assert isinstance(ScoringRules().score(StatLine(fg=1)), Decimal)
