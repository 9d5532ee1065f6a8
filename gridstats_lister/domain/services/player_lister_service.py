"""Player lister: builds a working list and runs the aggregation reports."""

from typing import List, Optional

import pandas as pd
from loguru import logger

from ..models.aggregation import AggregationResult, results_to_dataframe, sort_results
from ..models.player import Player
from ..models.week import Week
from ..repositories.metrics_repository import GameMetricsRepository
from ..repositories.player_repository import PlayerRepository
from .player_filter import FilterCriteria, PlayerFilter
from .projection_aggregator import HealthRating, ProjectionAggregator
from .rolling_aggregator import RollingAggregator
from .scoring_strategy import ActualScoringStrategy, ScoringStrategy
from .week_master import SeasonClock


class PlayerListerService:
    """
    Collects players position by position, then ranks them.

    The working list accumulates across ``collect`` calls until ``clear``.
    Report methods return results sorted by points, highest first.
    """

    def __init__(
        self,
        player_repo: PlayerRepository,
        metrics_repo: GameMetricsRepository,
        criteria: Optional[FilterCriteria] = None,
        clock: Optional[SeasonClock] = None,
        player_filter: Optional[PlayerFilter] = None,
    ):
        """
        Initialize service with repositories.

        Args:
            player_repo: Source of candidate players
            metrics_repo: Source of per-game metrics
            criteria: Selection criteria; defaults to the configured criteria
            clock: Resolves the default season and reference week
            player_filter: Filter instance (carries the coverage tracker)
        """
        from gridstats_lister.config import config

        self.player_repo = player_repo
        self.metrics_repo = metrics_repo
        self.criteria = criteria or FilterCriteria.from_config()
        self.clock = clock or SeasonClock()
        self.player_filter = player_filter or PlayerFilter()
        self.sort_key = config.aggregation.sort_key
        self.players: List[Player] = []

    @property
    def coverage(self):
        return self.player_filter.coverage

    def collect(
        self,
        position: Optional[str] = None,
        category: Optional[str] = None,
        criteria: Optional[FilterCriteria] = None,
    ) -> List[Player]:
        """
        Add the players at ``position`` that pass the criteria to the list.

        Args:
            position: Position code to collect; None collects every position
            category: Player category code passed to the repository
            criteria: Criteria for this call only; defaults to ``self.criteria``

        Returns:
            The players added by this call

        Raises:
            RuntimeError: If the player repository fails
        """
        result = self.player_repo.get_players(category=category, position=position)
        if result.is_failure:
            raise RuntimeError(f"Failed to load players: {result.error.message}")

        added = self.player_filter.select(
            result.value,
            criteria or self.criteria,
            position=position,
            reset_coverage=False,
        )
        self.players.extend(added)
        logger.info(f"Collected {len(added)} {position or 'players'}")
        return added

    def clear(self) -> None:
        """Empty the working list and start a fresh coverage tracker."""
        self.players = []
        self.player_filter.reset_coverage()

    def _sorted(self, results: List[AggregationResult]) -> List[AggregationResult]:
        return sort_results(results, key=self.sort_key)

    def rolling_report(
        self,
        strategy: ScoringStrategy,
        reference_week: Optional[Week] = None,
        weeks_to_go_back: Optional[int] = None,
        suppress_zeros: Optional[bool] = None,
    ) -> List[AggregationResult]:
        """Rank the working list by points over recent weeks."""
        from gridstats_lister.config import config

        if weeks_to_go_back is None:
            weeks_to_go_back = config.aggregation.weeks_to_go_back
        week = reference_week or self.clock.reference_week()
        aggregator = RollingAggregator(
            weeks_in_season=self.clock.week_master.weeks_in_season
        )
        results = aggregator.aggregate(
            self.players,
            week,
            window_size=weeks_to_go_back,
            strategy=strategy,
            suppress_zeros=suppress_zeros,
        )
        return self._sorted(results)

    def projection_report(
        self,
        season: Optional[int] = None,
        strategy: Optional[ScoringStrategy] = None,
        health_rating: Optional[HealthRating] = None,
        suppress_zeros: Optional[bool] = None,
    ) -> List[AggregationResult]:
        """Rank the working list by projected season points."""
        aggregator = ProjectionAggregator(self.metrics_repo)
        results = aggregator.aggregate_projection(
            self.players,
            season if season is not None else self.clock.current_season(),
            strategy=strategy,
            health_rating=health_rating,
            suppress_zeros=suppress_zeros,
        )
        return self._sorted(results)

    def starters_report(self, do_projections: bool = False) -> pd.DataFrame:
        """
        Starters table for every configured starter slot.

        Collects starters for each slot (QB, RB, WR, TE, K by default), then
        totals actual points season to date, or projected season points when
        ``do_projections`` is set. The working list is cleared afterwards.
        """
        from gridstats_lister.config import config

        self.clear()
        criteria = self.criteria.model_copy(
            update={
                "active_only": True,
                "starters_only": True,
                "primaries_only": False,
                "fantasy_offence_only": True,
            }
        )
        for slot in config.report.starter_slots:
            self.collect(
                position=slot.position, category=slot.category, criteria=criteria
            )

        positions = {slot.position for slot in config.report.starter_slots}
        for position in sorted(positions):
            missing = self.coverage.teams_missing(position)
            if missing:
                logger.info(f"Teams missing a {position} starter: {missing}")

        if do_projections:
            results = self.projection_report()
        else:
            week = self.clock.reference_week()
            results = self.rolling_report(
                ActualScoringStrategy(self.metrics_repo), reference_week=week
            )

        frame = results_to_dataframe(results, long_stats=config.report.long_stats)
        self.clear()
        return frame
