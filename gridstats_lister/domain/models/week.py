"""Week value object anchoring rolling windows."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class BoundaryError(ValueError):
    """Raised when stepping past the first or last week of a season."""


class Week(BaseModel):
    """
    A (season, ordinal) pair, 1-indexed within the season.

    Weeks are immutable values: two instances with the same season and
    ordinal are equal, hash the same and sort the same.
    """

    model_config = ConfigDict(frozen=True)

    season: int = Field(..., ge=1920, description="Season year")
    ordinal: int = Field(..., ge=1, le=22, description="Week number within season")

    @property
    def key(self) -> Tuple[int, int]:
        return (self.season, self.ordinal)

    @property
    def has_previous(self) -> bool:
        """False at the season opener, where the rolling walk must stop."""
        return self.ordinal > 1

    def previous(self) -> "Week":
        """
        Get the week before this one in the same season.

        Raises:
            BoundaryError: at week 1, the start of the season
        """
        if not self.has_previous:
            raise BoundaryError(f"No week before {self} (season start)")
        return Week(season=self.season, ordinal=self.ordinal - 1)

    def next(self, weeks_in_season: Optional[int] = None) -> "Week":
        """
        Get the week after this one in the same season.

        Raises:
            BoundaryError: past the final week of the season
        """
        if weeks_in_season is None:
            from gridstats_lister.config import config

            weeks_in_season = config.season.weeks_in_season
        if self.ordinal >= weeks_in_season:
            raise BoundaryError(f"No week after {self} (season end)")
        return Week(season=self.season, ordinal=self.ordinal + 1)

    def __lt__(self, other: "Week") -> bool:
        if not isinstance(other, Week):
            return NotImplemented
        return self.key < other.key

    def __le__(self, other: "Week") -> bool:
        if not isinstance(other, Week):
            return NotImplemented
        return self.key <= other.key

    def __gt__(self, other: "Week") -> bool:
        if not isinstance(other, Week):
            return NotImplemented
        return self.key > other.key

    def __ge__(self, other: "Week") -> bool:
        if not isinstance(other, Week):
            return NotImplemented
        return self.key >= other.key

    def __str__(self) -> str:
        return f"{self.season}:{self.ordinal:02d}"
