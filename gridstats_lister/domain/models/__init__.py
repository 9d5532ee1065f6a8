"""Domain models with typed fields for players, weeks and game metrics."""

from .aggregation import (
    AggregationResult,
    PlayerRating,
    results_to_dataframe,
    sort_results,
)
from .game_metrics import GameMetrics, StatLine
from .player import FREE_AGENT_OWNER, Player, PlayerRole, Position
from .scoring_rules import ScoringRules
from .week import BoundaryError, Week

__all__ = [
    "AggregationResult",
    "PlayerRating",
    "results_to_dataframe",
    "sort_results",
    "GameMetrics",
    "StatLine",
    "FREE_AGENT_OWNER",
    "Player",
    "PlayerRole",
    "Position",
    "ScoringRules",
    "BoundaryError",
    "Week",
]
