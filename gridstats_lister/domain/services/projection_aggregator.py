"""Full-season projection totals with health adjustment."""

from decimal import Decimal
from typing import Callable, List, Optional, Sequence

from loguru import logger

from ..models.aggregation import AggregationResult
from ..models.game_metrics import StatLine
from ..models.player import Player
from ..models.scoring_rules import ScoringRules
from ..models.week import Week
from ..repositories.metrics_repository import GameMetricsRepository
from .scoring_strategy import ScoringStrategy

HealthRating = Callable[[Player], float]


class ProjectionAggregator:
    """
    Sums every projected game in a player's season.

    With a strategy, each game week is rated through it. Without one the
    stored projection on each metrics record is used as-is.
    """

    def __init__(
        self,
        metrics_repo: GameMetricsRepository,
        rules: Optional[ScoringRules] = None,
        suppress_zeros: Optional[bool] = None,
    ):
        from gridstats_lister.config import config

        self.metrics_repo = metrics_repo
        self.rules = rules or ScoringRules.from_config()
        self.suppress_zeros = (
            suppress_zeros
            if suppress_zeros is not None
            else config.aggregation.suppress_zeros
        )

    @staticmethod
    def _health(player: Player, health_rating: Optional[HealthRating]) -> float:
        value = health_rating(player) if health_rating else player.health_rating
        if not 0.0 <= value <= 1.0:
            raise ValueError(
                f"Health rating for {player.name} must be in [0, 1], got {value}"
            )
        return value

    def aggregate_player(
        self,
        player: Player,
        season: int,
        strategy: Optional[ScoringStrategy] = None,
        health_rating: Optional[HealthRating] = None,
    ) -> AggregationResult:
        total = Decimal(0)
        stats = StatLine()
        games = self.metrics_repo.for_player_season(player.player_code, season)

        for metrics in games:
            if strategy is None:
                total += metrics.projected_fantasy_points(self.rules)
            else:
                # Postseason records past weeks_in_season are rated too.
                week = Week(season=season, ordinal=metrics.week)
                total += strategy.rate(player, week)
            stats = stats + metrics.projected

        health = self._health(player, health_rating)
        player.points = total
        player.tot_stats = stats
        return AggregationResult(
            player=player,
            points=total,
            stat_totals=stats,
            weeks_counted=len(games),
            health_rating=health,
            health_adjusted_points=Decimal(str(health)) * total,
        )

    def aggregate_projection(
        self,
        players: Sequence[Player],
        season: int,
        strategy: Optional[ScoringStrategy] = None,
        health_rating: Optional[HealthRating] = None,
        suppress_zeros: Optional[bool] = None,
    ) -> List[AggregationResult]:
        """
        Aggregate season projections for each player.

        Args:
            players: Players to aggregate, output keeps this order
            season: Season whose metrics are summed
            strategy: Optional scoring strategy; None trusts stored projections
            health_rating: Optional callable giving a [0, 1] availability
                factor per player; defaults to ``Player.health_rating``
            suppress_zeros: Drop rows whose total is zero or negative;
                None uses the configured default

        Returns:
            One AggregationResult per kept player
        """
        suppress = self.suppress_zeros if suppress_zeros is None else suppress_zeros

        results = []
        for player in players:
            result = self.aggregate_player(player, season, strategy, health_rating)
            if suppress and result.points <= 0:
                continue
            results.append(result)

        source = strategy.name if strategy else "stored projections"
        logger.info(
            f"Season {season} projections ({source}): "
            f"{len(results)} of {len(players)} players kept"
        )
        return results
