"""Player domain model: fixed identity plus per-run scoring scratch fields."""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .game_metrics import StatLine

FREE_AGENT_OWNER = "**"


class Position(str, Enum):
    """Depth chart positions."""

    QB = "QB"
    RB = "RB"
    FB = "FB"
    WR = "WR"
    TE = "TE"
    K = "K"
    P = "P"
    KR = "KR"


FANTASY_OFFENCE_POSITIONS = frozenset(
    {Position.QB, Position.RB, Position.WR, Position.TE, Position.K}
)
SECONDARY_POSITIONS = frozenset({Position.FB, Position.TE, Position.P})


class PlayerRole(str, Enum):
    """Player role on the team's depth chart."""

    STARTER = "S"
    BACKUP = "B"
    RESERVE = "R"
    INJURED = "I"
    SUSPENDED = "X"
    HOLDOUT = "H"
    RETIRED = "Z"


INACTIVE_ROLES = frozenset(
    {PlayerRole.INJURED, PlayerRole.SUSPENDED, PlayerRole.HOLDOUT, PlayerRole.RETIRED}
)


class Player(BaseModel):
    """
    NFL player in a report run.

    Identity fields are frozen. ``points`` and ``tot_stats`` are scratch
    state: each aggregation pass overwrites them with its own totals, so a
    player object must not be shared between concurrent report runs.
    """

    player_code: str = Field(..., min_length=1, frozen=True)
    name: str = Field(..., min_length=1, max_length=60, frozen=True)
    position: Position = Field(..., frozen=True)
    team_code: str = Field(..., min_length=2, max_length=3, frozen=True)
    role: PlayerRole = Field(default=PlayerRole.BACKUP, frozen=True)
    depth_rank: Optional[int] = Field(
        None, ge=1, frozen=True, description="1 = first on the depth chart"
    )
    rookie_year: Optional[int] = Field(None, ge=1920, frozen=True)
    drafted: Optional[str] = Field(None, frozen=True, description="Draft round/pick")
    age: Optional[int] = Field(None, ge=18, le=60, frozen=True)
    injuries: int = Field(default=0, ge=0, frozen=True)
    owner: str = Field(
        default=FREE_AGENT_OWNER, frozen=True, description="Fantasy owner tag"
    )
    playoff_bound: bool = Field(default=False, frozen=True)
    health_rating: float = Field(default=1.0, ge=0.0, le=1.0, frozen=True)
    rating: Optional[Decimal] = Field(
        None, frozen=True, description="Pre-season fantasy points"
    )
    adp: Optional[int] = Field(
        None, ge=1, frozen=True, description="Average draft position"
    )

    points: Decimal = Field(default=Decimal(0), description="Last computed points")
    tot_stats: StatLine = Field(
        default_factory=StatLine, description="Last computed stat totals"
    )

    @field_validator("name", "owner", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("team_code", mode="before")
    @classmethod
    def upper_team_code(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @property
    def is_active(self) -> bool:
        return self.role not in INACTIVE_ROLES

    @property
    def is_starter(self) -> bool:
        return self.role == PlayerRole.STARTER

    @property
    def is_free_agent(self) -> bool:
        return self.owner == FREE_AGENT_OWNER

    @property
    def is_playoff_bound(self) -> bool:
        return self.playoff_bound

    @property
    def is_secondary(self) -> bool:
        """FB, TE and punters: shown in italics, skipped by primaries-only lists."""
        return self.position in SECONDARY_POSITIONS

    @property
    def is_one_or_two(self) -> bool:
        return self.depth_rank is not None and self.depth_rank <= 2

    @property
    def is_fantasy_offence(self) -> bool:
        return self.position in FANTASY_OFFENCE_POSITIONS

    def reset_scratch(self) -> None:
        """Clear the per-run scoring fields."""
        self.points = Decimal(0)
        self.tot_stats = StatLine()
