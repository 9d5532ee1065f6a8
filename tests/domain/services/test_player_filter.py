"""Tests for PlayerFilter selection and team coverage tracking."""

import pytest

from gridstats_lister.domain.models.player import Player, PlayerRole, Position
from gridstats_lister.domain.services.player_filter import (
    FilterCriteria,
    PlayerFilter,
    TeamCoverageTracker,
)

TEAMS = ["AA", "BB", "CC", "DD"]


def make_player(code, position=Position.RB, team="AA", **kwargs) -> Player:
    return Player(
        player_code=code,
        name=f"Player {code}",
        position=position,
        team_code=team,
        **kwargs,
    )


@pytest.fixture
def pool():
    return [
        make_player(
            "P1", Position.QB, "AA", role=PlayerRole.STARTER, depth_rank=1, owner="12"
        ),
        make_player("P2", Position.RB, "BB", role=PlayerRole.BACKUP, depth_rank=2),
        make_player("P3", Position.TE, "CC", role=PlayerRole.STARTER, depth_rank=1),
        make_player("P4", Position.FB, "DD", role=PlayerRole.STARTER, depth_rank=1),
        make_player("P5", Position.WR, "AA", role=PlayerRole.INJURED, depth_rank=1),
        make_player(
            "P6", Position.K, "BB", role=PlayerRole.STARTER, playoff_bound=True
        ),
        make_player("P7", Position.RB, "CC", role=PlayerRole.RESERVE, depth_rank=3),
    ]


def codes(players):
    return [p.player_code for p in players]


class TestFilterCriteria:
    def test_defaults_are_all_off(self):
        assert FilterCriteria().enabled() == []

    def test_from_config_defaults(self):
        criteria = FilterCriteria.from_config()

        assert criteria.active_only is True
        assert criteria.primaries_only is True
        assert criteria.starters_only is False

    def test_from_config_overrides(self):
        criteria = FilterCriteria.from_config(starters_only=True, primaries_only=False)

        assert criteria.enabled() == ["active_only", "starters_only"]


class TestPlayerFilterSelect:
    def test_no_criteria_returns_pool_unchanged(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(pool, FilterCriteria())

        assert selected == pool
        assert all(a is b for a, b in zip(selected, pool))

    def test_none_criteria_returns_pool_unchanged(self, pool):
        assert PlayerFilter(team_codes=TEAMS).select(pool) == pool

    def test_active_only(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(
            pool, FilterCriteria(active_only=True)
        )

        assert "P5" not in codes(selected)
        assert len(selected) == 6

    def test_starters_only(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(
            pool, FilterCriteria(starters_only=True)
        )

        assert codes(selected) == ["P1", "P3", "P4", "P6"]

    def test_free_agents_only(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(
            pool, FilterCriteria(free_agents_only=True)
        )

        assert "P1" not in codes(selected)

    def test_playoff_bound_only(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(
            pool, FilterCriteria(playoff_bound_only=True)
        )

        assert codes(selected) == ["P6"]

    def test_primaries_only_skips_fb_te_punters(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(
            pool, FilterCriteria(primaries_only=True)
        )

        assert codes(selected) == ["P1", "P2", "P5", "P6", "P7"]

    def test_ones_and_twos_only(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(
            pool, FilterCriteria(ones_and_twos_only=True)
        )

        # P6 has no depth rank, P7 is third on the chart
        assert codes(selected) == ["P1", "P2", "P3", "P4", "P5"]

    def test_fantasy_offence_only(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(
            pool, FilterCriteria(fantasy_offence_only=True)
        )

        assert "P4" not in codes(selected)

    def test_criteria_are_anded(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(
            pool,
            FilterCriteria(active_only=True, starters_only=True, primaries_only=True),
        )

        assert codes(selected) == ["P1", "P6"]

    def test_position_restriction(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(pool, position="RB")

        assert codes(selected) == ["P2", "P7"]

    def test_no_match_is_empty_not_error(self, pool):
        selected = PlayerFilter(team_codes=TEAMS).select(
            pool, FilterCriteria(starters_only=True), position="P"
        )

        assert selected == []

    def test_empty_pool(self):
        player_filter = PlayerFilter(team_codes=TEAMS)

        assert player_filter.select([], FilterCriteria.from_config()) == []


class TestTeamCoverage:
    def test_teams_missing_a_kicker(self):
        pool = []
        starter = PlayerRole.STARTER
        for team in TEAMS:
            pool.append(make_player(f"{team}QB", Position.QB, team, role=starter))
            pool.append(make_player(f"{team}RB", Position.RB, team, role=starter))
        for team in ["AA", "CC"]:
            pool.append(make_player(f"{team}K", Position.K, team, role=starter))

        player_filter = PlayerFilter(team_codes=TEAMS)
        selected = player_filter.select(pool, FilterCriteria(starters_only=True))

        assert len(selected) == len(pool)
        assert player_filter.coverage.teams_missing("K") == ["BB", "DD"]
        assert player_filter.coverage.teams_missing("QB") == []
        assert player_filter.coverage.teams_missing(Position.RB) == []

    def test_one_receiver_does_not_cover_team(self):
        pool = [
            make_player("W1", Position.WR, "AA", role=PlayerRole.STARTER),
            make_player("W2", Position.WR, "BB", role=PlayerRole.STARTER),
            make_player("W3", Position.WR, "BB", role=PlayerRole.STARTER),
        ]

        player_filter = PlayerFilter(
            team_codes=["AA", "BB"], starters_required={"WR": 2}
        )
        player_filter.select(pool, FilterCriteria(starters_only=True), position="WR")

        assert player_filter.coverage.is_covered("AA", "WR") is False
        assert player_filter.coverage.is_covered("BB", "WR") is True
        assert player_filter.coverage.teams_missing("WR") == ["AA"]

    def test_coverage_only_tracked_for_starters_only(self, pool):
        player_filter = PlayerFilter(team_codes=TEAMS)
        player_filter.select(pool, FilterCriteria())

        assert player_filter.coverage.starters_found("AA", "QB") == 0

    def test_coverage_reset_between_selections(self, pool):
        player_filter = PlayerFilter(team_codes=TEAMS)
        player_filter.select(pool, FilterCriteria(starters_only=True))
        assert player_filter.coverage.is_covered("AA", "QB")

        player_filter.select([], FilterCriteria(starters_only=True))

        assert not player_filter.coverage.is_covered("AA", "QB")

    def test_coverage_accumulates_without_reset(self, pool):
        player_filter = PlayerFilter(team_codes=TEAMS)
        criteria = FilterCriteria(starters_only=True)
        player_filter.select(pool, criteria, position="QB")
        player_filter.select(pool, criteria, position="K", reset_coverage=False)

        assert player_filter.coverage.is_covered("AA", "QB")
        assert player_filter.coverage.is_covered("BB", "K")

    def test_coverage_does_not_block_selection(self):
        pool = [
            make_player("Q1", Position.QB, "AA", role=PlayerRole.STARTER),
            make_player("Q2", Position.QB, "AA", role=PlayerRole.STARTER),
        ]

        selected = PlayerFilter(team_codes=["AA"]).select(
            pool, FilterCriteria(starters_only=True)
        )

        assert codes(selected) == ["Q1", "Q2"]


class TestTeamCoverageTracker:
    def test_tracker_basics(self):
        tracker = TeamCoverageTracker(["aa", "bb"], {"WR": 2})

        tracker.tick_off("aa", Position.WR)
        tracker.tick_off("AA", "WR")
        tracker.tick_off("bb", "TE")

        assert tracker.required("WR") == 2
        assert tracker.required("TE") == 1
        assert tracker.starters_found("AA", "WR") == 2
        assert tracker.teams_missing("WR") == ["BB"]
        assert tracker.teams_missing("TE") == ["AA"]

    def test_default_team_codes_from_config(self):
        player_filter = PlayerFilter()

        assert len(player_filter.team_codes) == 32
