"""Fantasy scoring rules applied to stat lines."""

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

from .game_metrics import StatLine

if TYPE_CHECKING:
    from gridstats_lister.config.settings import ScoringConfig


class ScoringRules(BaseModel):
    """
    Points awarded per stat category.

    Yardage is scored in whole increments (e.g. one point per full 25
    passing yards); partial increments truncate toward zero.
    """

    model_config = ConfigDict(frozen=True)

    passing_yards_per_point: int = Field(default=25, ge=1)
    passing_td_points: Decimal = Field(default=Decimal("4"))
    rushing_yards_per_point: int = Field(default=10, ge=1)
    rushing_td_points: Decimal = Field(default=Decimal("6"))
    receiving_yards_per_point: int = Field(default=10, ge=1)
    receiving_td_points: Decimal = Field(default=Decimal("6"))
    field_goal_points: Decimal = Field(default=Decimal("3"))
    pat_points: Decimal = Field(default=Decimal("1"))

    @classmethod
    def from_config(
        cls, scoring_config: Optional["ScoringConfig"] = None
    ) -> "ScoringRules":
        """Build rules from the scoring section of the global config."""
        if scoring_config is None:
            from gridstats_lister.config import config

            scoring_config = config.scoring
        return cls(**scoring_config.model_dump())

    @staticmethod
    def _yardage_points(yards: int, per_point: int) -> Decimal:
        return Decimal(int(yards / per_point))

    def score(self, line: StatLine) -> Decimal:
        points = Decimal(0)
        points += self._yardage_points(line.ydp, self.passing_yards_per_point)
        points += self.passing_td_points * line.tdp
        points += self._yardage_points(line.ydr, self.rushing_yards_per_point)
        points += self.rushing_td_points * line.tdr
        points += self._yardage_points(line.ydc, self.receiving_yards_per_point)
        points += self.receiving_td_points * line.tdc
        points += self.field_goal_points * line.fg
        points += self.pat_points * line.pat
        return points
