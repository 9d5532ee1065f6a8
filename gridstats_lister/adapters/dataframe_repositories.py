"""pandas DataFrame backed repository implementations."""

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple, Union

import numpy as np
import pandas as pd
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from gridstats_lister.domain.common.result import DomainError, Result
from gridstats_lister.domain.models.game_metrics import GameMetrics, StatLine
from gridstats_lister.domain.models.player import Player, Position
from gridstats_lister.domain.models.week import Week
from gridstats_lister.domain.repositories.metrics_repository import (
    GameMetricsRepository,
)
from gridstats_lister.domain.repositories.player_repository import PlayerRepository

STAT_COLUMNS = list(StatLine.model_fields)
POSITION_CODES = {position.value for position in Position}
PROJECTED_PREFIX = "proj_"

_TRUE_VALUES = {"y", "yes", "true", "t", "1"}


def _clean_row(row: pd.Series) -> Dict:
    """Row as a dict of plain Python values, with NaN/NaT replaced by None."""
    cleaned = {}
    for key, value in row.items():
        if pd.isna(value):
            value = None
        elif isinstance(value, np.generic):
            value = value.item()
        cleaned[key] = value
    return cleaned


def _to_bool(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


class RawPlayerRow(BaseModel):
    """Pydantic model for validating one raw player row."""

    player_code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    team_code: str = Field(..., min_length=2)
    category: Optional[str] = Field(None, description="Player category code")
    role: Optional[str] = Field(None, description="Depth chart role code")
    depth_rank: Optional[int] = Field(None, ge=1)
    rookie_year: Optional[int] = Field(None)
    drafted: Optional[str] = Field(None)
    age: Optional[int] = Field(None)
    injuries: Optional[int] = Field(None, ge=0)
    owner: Optional[str] = Field(None)
    playoff_bound: Optional[Union[bool, str, int]] = Field(None)
    health_rating: Optional[float] = Field(None, ge=0.0, le=1.0)
    rating: Optional[float] = Field(None)
    adp: Optional[int] = Field(None, ge=1)

    class Config:
        """Allow extra columns for forward compatibility."""

        extra = "allow"

    @field_validator("player_code", "category", "drafted", mode="before")
    @classmethod
    def coerce_code(cls, v):
        if v is None:
            return None
        if isinstance(v, float) and v.is_integer():
            v = int(v)
        return str(v).strip()

    @field_validator("position", "role", mode="before")
    @classmethod
    def upper_code(cls, v):
        if v is None:
            return None
        return str(v).strip().upper()

    def to_domain(self) -> Player:
        values = {
            "player_code": self.player_code,
            "name": self.name,
            "position": Position(self.position),
            "team_code": self.team_code,
            "depth_rank": self.depth_rank,
            "rookie_year": self.rookie_year,
            "drafted": self.drafted,
            "age": self.age,
            "playoff_bound": _to_bool(self.playoff_bound),
            "rating": Decimal(str(self.rating)) if self.rating is not None else None,
            "adp": self.adp,
        }
        optional = {
            "role": self.role,
            "injuries": self.injuries,
            "owner": self.owner,
            "health_rating": self.health_rating,
        }
        values.update({k: v for k, v in optional.items() if v is not None})
        return Player(**values)


class RawGameMetricsRow(BaseModel):
    """Pydantic model for validating one raw game metrics row."""

    player_code: str = Field(..., min_length=1)
    season: int = Field(..., ge=1920)
    week: int = Field(..., ge=1, le=22)
    game_code: Optional[str] = Field(None)
    played: Optional[Union[bool, str, int]] = Field(None)
    projected_points: Optional[float] = Field(None)

    class Config:
        """Stat columns arrive as extra fields."""

        extra = "allow"

    @field_validator("player_code", "game_code", mode="before")
    @classmethod
    def coerce_code(cls, v):
        if v is None:
            return None
        if isinstance(v, float) and v.is_integer():
            v = int(v)
        return str(v).strip()

    def _stat_line(self, prefix: str) -> Optional[StatLine]:
        extras = self.model_extra or {}
        values = {
            name: int(extras[prefix + name])
            for name in STAT_COLUMNS
            if extras.get(prefix + name) is not None
        }
        if not values:
            return None
        return StatLine(**values)

    def to_domain(self) -> GameMetrics:
        return GameMetrics(
            player_code=self.player_code,
            season=self.season,
            week=self.week,
            game_code=self.game_code,
            played=_to_bool(self.played),
            actual=self._stat_line(""),
            projected=self._stat_line(PROJECTED_PREFIX) or StatLine(),
            projected_points=(
                Decimal(str(self.projected_points))
                if self.projected_points is not None
                else None
            ),
        )


class DataFramePlayerRepository(PlayerRepository):
    """Player repository over an already-loaded DataFrame of player rows."""

    def __init__(self, frame: pd.DataFrame):
        self.frame = frame
        self._players: Optional[List[Tuple[Optional[str], Player]]] = None

    def _load(self) -> Result[List[Tuple[Optional[str], Player]]]:
        if self._players is not None:
            return Result.success(self._players)

        missing = {"player_code", "name", "position", "team_code"} - set(
            self.frame.columns
        )
        if missing:
            return Result.failure(
                DomainError.validation_error(
                    f"Player data missing columns: {sorted(missing)}",
                    details={"columns": list(self.frame.columns)},
                )
            )

        players = []
        for index, row in self.frame.iterrows():
            try:
                raw = RawPlayerRow(**_clean_row(row))
                players.append((raw.category, raw.to_domain()))
            except (ValidationError, ValueError) as e:
                logger.warning(f"Skipping player row {index}: {e}")

        self._players = players
        logger.debug(f"Loaded {len(players)} of {len(self.frame)} player rows")
        return Result.success(players)

    def get_players(
        self, category: Optional[str] = None, position: Optional[str] = None
    ) -> Result[List[Player]]:
        if position is not None and position not in POSITION_CODES:
            return Result.failure(
                DomainError.validation_error(
                    f"Invalid position: {position}",
                    field_errors={"position": "Unknown position code"},
                )
            )
        return self._load().map(
            lambda rows: [
                player
                for row_category, player in rows
                if (category is None or row_category == category)
                and (position is None or player.position.value == position)
            ]
        )

    def get_player(self, player_code: str) -> Result[Optional[Player]]:
        return self._load().map(
            lambda rows: next(
                (p for _, p in rows if p.player_code == player_code), None
            )
        )


class InMemoryGameMetricsRepository(GameMetricsRepository):
    """Game metrics indexed by player and week, held in memory."""

    def __init__(self, records: Iterable[GameMetrics] = ()):
        self._by_week: Dict[Tuple[str, int, int], GameMetrics] = {}
        self._by_season: Dict[Tuple[str, int], List[GameMetrics]] = defaultdict(list)
        for record in records:
            self.add(record)

    def add(self, record: GameMetrics) -> None:
        """Add or replace the record for its player and week."""
        key = (record.player_code, record.season, record.week)
        season_rows = self._by_season[(record.player_code, record.season)]
        if key in self._by_week:
            season_rows.remove(self._by_week[key])
        self._by_week[key] = record
        season_rows.append(record)
        season_rows.sort(key=lambda m: m.week)

    def for_player_week(self, player_code: str, week: Week) -> Optional[GameMetrics]:
        return self._by_week.get((player_code, week.season, week.ordinal))

    def for_player_season(self, player_code: str, season: int) -> List[GameMetrics]:
        return list(self._by_season.get((player_code, season), []))

    def __len__(self) -> int:
        return len(self._by_week)


class DataFrameGameMetricsRepository(InMemoryGameMetricsRepository):
    """
    Game metrics built eagerly from a DataFrame of per-game rows.

    Actual stat columns use the bare category names (tdp, ydp, ...);
    projected columns carry a ``proj_`` prefix. Invalid rows are skipped
    with a warning.
    """

    def __init__(self, frame: pd.DataFrame):
        super().__init__()
        skipped = 0
        for index, row in frame.iterrows():
            try:
                self.add(RawGameMetricsRow(**_clean_row(row)).to_domain())
            except (ValidationError, ValueError) as e:
                skipped += 1
                logger.warning(f"Skipping metrics row {index}: {e}")
        logger.debug(f"Loaded {len(self)} metrics rows ({skipped} skipped)")
