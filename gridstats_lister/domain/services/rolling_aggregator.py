"""Rolling-window point aggregation over recent weeks."""

from decimal import Decimal
from typing import List, Optional, Sequence

from loguru import logger

from ..models.aggregation import AggregationResult
from ..models.game_metrics import StatLine
from ..models.player import Player
from ..models.week import Week
from .scoring_strategy import ScoringStrategy


class RollingAggregator:
    """
    Totals each player's points over a window of weeks ending at a
    reference week.

    The walk goes backward one week at a time and stops after
    ``window_size`` weeks or at week 1 of the season, whichever comes first.
    """

    def __init__(
        self,
        weeks_in_season: Optional[int] = None,
        suppress_zeros: Optional[bool] = None,
    ):
        from gridstats_lister.config import config

        self.weeks_in_season = (
            weeks_in_season
            if weeks_in_season is not None
            else config.season.weeks_in_season
        )
        self.suppress_zeros = (
            suppress_zeros
            if suppress_zeros is not None
            else config.aggregation.suppress_zeros
        )

    def resolve_window(self, window_size: Optional[int]) -> int:
        """None or 0 means the whole season (season to date)."""
        if window_size is None or window_size == 0:
            return self.weeks_in_season
        if window_size < 0:
            raise ValueError(f"window_size must be positive, got {window_size}")
        return window_size

    def aggregate_player(
        self,
        player: Player,
        reference_week: Week,
        window_size: int,
        strategy: ScoringStrategy,
    ) -> AggregationResult:
        """Walk back from ``reference_week`` and total one player's ratings."""
        total = Decimal(0)
        stats = StatLine()
        weeks_counted = 0

        week = reference_week
        remaining = window_size
        while remaining > 0:
            rating = strategy.rating(player, week)
            total += rating.points
            stats = stats + rating.stats
            weeks_counted += 1
            remaining -= 1
            if remaining == 0 or not week.has_previous:
                break
            week = week.previous()

        player.points = total
        player.tot_stats = stats
        return AggregationResult(
            player=player,
            points=total,
            stat_totals=stats,
            weeks_counted=weeks_counted,
        )

    def aggregate(
        self,
        players: Sequence[Player],
        reference_week: Week,
        window_size: Optional[int] = None,
        strategy: Optional[ScoringStrategy] = None,
        suppress_zeros: Optional[bool] = None,
    ) -> List[AggregationResult]:
        """
        Aggregate rolling-window points for each player.

        Args:
            players: Players to aggregate, output keeps this order
            reference_week: Last (most recent) week of the window
            window_size: Number of weeks to total; None or 0 for full season
            strategy: Scoring strategy used to rate each week (required)
            suppress_zeros: Drop rows whose total is zero or negative;
                None uses the configured default

        Returns:
            One AggregationResult per kept player

        Raises:
            ValueError: if no strategy is given or window_size is negative
        """
        if strategy is None:
            raise ValueError("RollingAggregator requires a scoring strategy")
        window = self.resolve_window(window_size)
        suppress = self.suppress_zeros if suppress_zeros is None else suppress_zeros

        results = []
        for player in players:
            result = self.aggregate_player(player, reference_week, window, strategy)
            if suppress and result.points <= 0:
                continue
            results.append(result)

        logger.info(
            f"Rolling {window} weeks to {reference_week} ({strategy.name}): "
            f"{len(results)} of {len(players)} players kept"
        )
        return results
