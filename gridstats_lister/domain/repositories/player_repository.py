"""Repository interface for player data access."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..common.result import Result
from ..models.player import Player


class PlayerRepository(ABC):
    """
    Abstract repository for player data access.

    Provides a consistent interface for accessing the candidate player pool
    regardless of the underlying data source.
    """

    @abstractmethod
    def get_players(
        self, category: Optional[str] = None, position: Optional[str] = None
    ) -> Result[List[Player]]:
        """
        Get candidate players, optionally narrowed by category and position.

        Args:
            category: Player category code (e.g. "1" quarterbacks, "3" receivers)
            position: Position code (QB, RB, WR, TE, K, ...)

        Returns:
            Result containing list of players in source order or error information
        """
        pass

    @abstractmethod
    def get_player(self, player_code: str) -> Result[Optional[Player]]:
        """
        Get a specific player by code.

        Returns:
            Result containing the player or None if not found
        """
        pass
