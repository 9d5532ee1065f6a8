"""Pluggable scoring strategies that rate a player for a given week."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, Optional, Tuple

from loguru import logger

from ..models.aggregation import PlayerRating
from ..models.game_metrics import GameMetrics, StatLine
from ..models.player import Player
from ..models.scoring_rules import ScoringRules
from ..models.week import Week
from ..repositories.metrics_repository import GameMetricsRepository


class ScoringStrategy(ABC):
    """
    Converts a (player, week) pair into fantasy points.

    Each instance keeps its own cache of ratings keyed by player code and
    week, so a report that asks for the same rating twice (once to rank, once
    to display) gets the identical value without recomputing. The cache is
    only safe for single-threaded use; use one strategy per report run.

    Strategies never modify the player. Aggregators decide what to record on
    the player's scratch fields.

    ``rating`` is the single entry point: ``rate`` and the rolling walk both
    go through it. Subclasses implement ``compute_rating``; wrappers that
    adjust every rating override ``rating``.
    """

    name = "base"

    def __init__(self):
        self._cache: Dict[Tuple[str, Week], PlayerRating] = {}

    def rate(self, player: Player, week: Week, use_cache: bool = True) -> Decimal:
        """
        Rate a player for a week.

        Args:
            player: Player to rate
            week: Week to rate
            use_cache: Reuse an earlier rating for the same player and week.
                False forces a fresh rating and refreshes the cache entry.

        Returns:
            Fantasy points as a Decimal
        """
        return self.rating(player, week, use_cache=use_cache).points

    def rating(
        self, player: Player, week: Week, use_cache: bool = True
    ) -> PlayerRating:
        """Same as ``rate`` but returns the stat line alongside the points."""
        key = (player.player_code, week)
        if use_cache and key in self._cache:
            return self._cache[key]
        rating = self.compute_rating(player, week)
        self._cache[key] = rating
        return rating

    @abstractmethod
    def compute_rating(self, player: Player, week: Week) -> PlayerRating:
        """Compute a rating from scratch, bypassing the cache."""
        pass

    def clear_cache(self) -> None:
        self._cache.clear()

    @property
    def cache_size(self) -> int:
        return len(self._cache)


class MetricsScoringStrategy(ScoringStrategy):
    """Scores one stat line from the player's GameMetrics for the week."""

    def __init__(
        self,
        metrics_repo: GameMetricsRepository,
        rules: Optional[ScoringRules] = None,
    ):
        super().__init__()
        self.metrics_repo = metrics_repo
        self.rules = rules or ScoringRules.from_config()

    @abstractmethod
    def select_stats(self, metrics: GameMetrics) -> Optional[StatLine]:
        """Pick the stat line this strategy scores, or None for no contribution."""
        pass

    def compute_rating(self, player: Player, week: Week) -> PlayerRating:
        metrics = self.metrics_repo.for_player_week(player.player_code, week)
        if metrics is None:
            return PlayerRating.zero()

        stats = self.select_stats(metrics)
        if stats is None:
            return PlayerRating.zero()

        points = self.rules.score(stats)
        logger.debug(f"{self.name} {player.name} {week}: {points} pts")
        return PlayerRating(points=points, stats=stats)


class ActualScoringStrategy(MetricsScoringStrategy):
    """Scores realized stats; unplayed games contribute nothing."""

    name = "actual"

    def select_stats(self, metrics: GameMetrics) -> Optional[StatLine]:
        return metrics.actual_stats()


class ProjectedScoringStrategy(MetricsScoringStrategy):
    """Scores the forward projection for the game."""

    name = "projected"

    def select_stats(self, metrics: GameMetrics) -> Optional[StatLine]:
        return metrics.projected


STRATEGIES = {
    ActualScoringStrategy.name: ActualScoringStrategy,
    ProjectedScoringStrategy.name: ProjectedScoringStrategy,
}


def create_strategy(
    name: str,
    metrics_repo: GameMetricsRepository,
    rules: Optional[ScoringRules] = None,
) -> MetricsScoringStrategy:
    """
    Build a strategy by name ("actual" or "projected").

    Raises:
        ValueError: for an unknown strategy name
    """
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown scoring strategy '{name}'. Choose from: {sorted(STRATEGIES)}"
        ) from None
    return strategy_cls(metrics_repo, rules)
