"""Repository interface for per-game metrics."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.game_metrics import GameMetrics
from ..models.week import Week


class GameMetricsRepository(ABC):
    """
    Abstract repository for player game metrics.

    Metrics are materialized in memory before aggregation starts, so lookups
    return plain values. A missing record is an expected outcome (bye week,
    game not yet scheduled), never an error.
    """

    @abstractmethod
    def for_player_week(self, player_code: str, week: Week) -> Optional[GameMetrics]:
        """Get the metrics record for one player and week, or None."""
        pass

    @abstractmethod
    def for_player_season(self, player_code: str, season: int) -> List[GameMetrics]:
        """Get every metrics record for a player's season, ordered by week."""
        pass
