"""Per-game statistical lines and the metrics records that carry them."""

from decimal import Decimal
from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .scoring_rules import ScoringRules


class StatLine(BaseModel):
    """Integer counts for the fantasy stat categories of one game (or a sum)."""

    model_config = ConfigDict(frozen=True)

    tdp: int = Field(default=0, ge=0, description="Passing touchdowns")
    ydp: int = Field(default=0, description="Passing yards")
    tdr: int = Field(default=0, ge=0, description="Rushing touchdowns")
    ydr: int = Field(default=0, description="Rushing yards")
    tdc: int = Field(default=0, ge=0, description="Receiving touchdowns")
    ydc: int = Field(default=0, description="Receiving yards")
    fg: int = Field(default=0, ge=0, description="Field goals made")
    pat: int = Field(default=0, ge=0, description="Extra points made")

    @classmethod
    def zero(cls) -> "StatLine":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self == StatLine()

    def __add__(self, other: "StatLine") -> "StatLine":
        if not isinstance(other, StatLine):
            return NotImplemented
        return StatLine(
            **{
                name: getattr(self, name) + getattr(other, name)
                for name in StatLine.model_fields
            }
        )


class GameMetrics(BaseModel):
    """
    Actual and projected stat lines for one player in one game.

    The actual line is only meaningful once the game has been played;
    use ``actual_stats()`` rather than reading ``actual`` directly.
    """

    model_config = ConfigDict(frozen=True)

    player_code: str = Field(..., min_length=1)
    season: int = Field(..., ge=1920)
    week: int = Field(..., ge=1, le=22)
    game_code: Optional[str] = Field(None, description="Scheduled game identifier")
    played: bool = Field(default=False, description="Game has been played")
    actual: Optional[StatLine] = Field(None, description="Realized stats")
    projected: StatLine = Field(default_factory=StatLine, description="Projected stats")
    projected_points: Optional[Decimal] = Field(
        None, description="Stored fantasy point projection"
    )

    def actual_stats(self) -> Optional[StatLine]:
        """Actual stats when the game is marked played, else None."""
        if not self.played:
            return None
        return self.actual or StatLine()

    def projected_fantasy_points(self, rules: "ScoringRules") -> Decimal:
        """Stored projection as-is, or the projected line scored with rules."""
        if self.projected_points is not None:
            return self.projected_points
        return rules.score(self.projected)
