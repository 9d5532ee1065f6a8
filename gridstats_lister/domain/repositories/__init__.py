"""Repository interfaces for data access abstraction."""

from .metrics_repository import GameMetricsRepository
from .player_repository import PlayerRepository

__all__ = [
    "PlayerRepository",
    "GameMetricsRepository",
]
