"""Rating and aggregation result models handed to the rendering layer."""

from decimal import Decimal
from typing import Iterable, List, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from .game_metrics import StatLine
from .player import Player


class PlayerRating(BaseModel):
    """Points and stat line for one player in one week."""

    model_config = ConfigDict(frozen=True)

    points: Decimal = Field(default=Decimal(0))
    stats: StatLine = Field(default_factory=StatLine)

    @classmethod
    def zero(cls) -> "PlayerRating":
        return cls()


class AggregationResult(BaseModel):
    """
    One output row of an aggregation run.

    ``player`` is the same object that was passed in, not a copy.
    """

    player: Player
    points: Decimal = Field(default=Decimal(0), description="Total points")
    stat_totals: StatLine = Field(default_factory=StatLine)
    weeks_counted: int = Field(default=0, ge=0, description="Terms aggregated")
    health_rating: Optional[float] = Field(None, ge=0.0, le=1.0)
    health_adjusted_points: Optional[Decimal] = Field(
        None, description="health_rating * points (projections only)"
    )

    @property
    def sort_key(self) -> Decimal:
        return self.points


def sort_results(
    results: Iterable[AggregationResult], key: str = "points"
) -> List[AggregationResult]:
    """
    Rank results descending by ``key``.

    ``key`` is an AggregationResult attribute (points, health_adjusted_points,
    weeks_counted) or a stat category of ``stat_totals`` (e.g. ``ydp``).
    Missing values sort last. Ties keep their input order.
    """

    def value(result: AggregationResult):
        if key in StatLine.model_fields:
            return getattr(result.stat_totals, key)
        if key in AggregationResult.model_fields:
            return getattr(result, key)
        raise ValueError(f"Unknown sort key: {key}")

    results = list(results)
    present = [r for r in results if value(r) is not None]
    missing = [r for r in results if value(r) is None]
    return sorted(present, key=value, reverse=True) + missing


def results_to_dataframe(
    results: Iterable[AggregationResult], long_stats: bool = True
) -> pd.DataFrame:
    """Flatten result rows into the tabular layout the renderer consumes."""
    rows = []
    for result in results:
        p = result.player
        row = {
            "Name": p.name,
            "Pos": p.position.value,
            "Role": p.role.value,
            "RookieYr": f"{p.rookie_year or ''}-{p.drafted or ''}",
            "Team": p.team_code,
            "Age": p.age,
            "FT": p.owner,
        }
        if long_stats:
            totals = result.stat_totals
            row.update(
                {
                    "Inj": p.injuries,
                    "Tdp": totals.tdp,
                    "YDp": totals.ydp,
                    "Tdr": totals.tdr,
                    "YDr": totals.ydr,
                    "TDc": totals.tdc,
                    "YDc": totals.ydc,
                    "Fg": totals.fg,
                    "Health": result.health_rating,
                    "AdjProj": result.health_adjusted_points,
                }
            )
        row.update({"Points": result.points, "PFP": p.rating, "ADP": p.adp})
        rows.append(row)

    columns = ["Name", "Pos", "Role", "RookieYr", "Team", "Age", "FT"]
    if long_stats:
        columns += ["Inj", "Tdp", "YDp", "Tdr", "YDr", "TDc", "YDc", "Fg"]
        columns += ["Health", "AdjProj"]
    columns += ["Points", "PFP", "ADP"]
    return pd.DataFrame(rows, columns=columns)
