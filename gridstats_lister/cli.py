"""
Gridstats Lister CLI.

Usage:
    # Season-to-date actual points for starting running backs
    gridstats-lister rolling players.csv metrics.csv --position RB --starters-only

    # Last three weeks of projected points up to week 10
    gridstats-lister rolling players.csv metrics.csv --week 10 --weeks-back 3 \\
        --strategy projected

    # Season projection totals from the stored projections
    gridstats-lister projection players.csv metrics.csv --season 2023
"""

from pathlib import Path
from typing import Optional

import pandas as pd
import typer
from loguru import logger

from gridstats_lister.adapters import (
    DataFrameGameMetricsRepository,
    DataFramePlayerRepository,
)
from gridstats_lister.domain.models import results_to_dataframe
from gridstats_lister.domain.services import (
    FilterCriteria,
    PlayerListerService,
    SeasonClock,
    create_strategy,
)

app = typer.Typer(
    help="Fantasy scoring tables for NFL players",
    add_completion=False,
)


def _build_service(
    players_csv: Path,
    metrics_csv: Path,
    season: Optional[int],
    week: Optional[int],
    criteria: FilterCriteria,
) -> PlayerListerService:
    player_repo = DataFramePlayerRepository(pd.read_csv(players_csv))
    metrics_repo = DataFrameGameMetricsRepository(pd.read_csv(metrics_csv))
    clock = SeasonClock(current_season=season, current_week=week)
    return PlayerListerService(
        player_repo, metrics_repo, criteria=criteria, clock=clock
    )


def _criteria(
    position: Optional[str],
    starters_only: bool,
    free_agents_only: bool,
    playoffs_only: bool,
    ones_and_twos_only: bool,
) -> FilterCriteria:
    # An explicit position (e.g. TE) overrides the primaries-only default.
    return FilterCriteria.from_config(
        primaries_only=position is None,
        starters_only=starters_only,
        free_agents_only=free_agents_only,
        playoff_bound_only=playoffs_only,
        ones_and_twos_only=ones_and_twos_only,
    )


def _echo_table(frame: pd.DataFrame, top: Optional[int]) -> None:
    if top is not None:
        frame = frame.head(top)
    if frame.empty:
        typer.echo("No players matched.")
        return
    frame.index = range(1, len(frame) + 1)
    typer.echo(frame.to_string())


@app.command("rolling")
def rolling(
    players_csv: Path = typer.Argument(..., exists=True, help="Player rows CSV"),
    metrics_csv: Path = typer.Argument(..., exists=True, help="Game metrics CSV"),
    position: Optional[str] = typer.Option(None, help="Position code to list"),
    season: Optional[int] = typer.Option(None, help="Season (default: current)"),
    week: Optional[int] = typer.Option(None, help="Reference week (default: current)"),
    weeks_back: Optional[int] = typer.Option(
        None, help="Weeks to total (default: whole season)"
    ),
    strategy: str = typer.Option(
        "actual", help="Scoring strategy: actual or projected"
    ),
    starters_only: bool = typer.Option(False, help="Starters only"),
    free_agents_only: bool = typer.Option(False, help="Unowned players only"),
    playoffs_only: bool = typer.Option(False, help="Playoff-bound teams only"),
    ones_and_twos_only: bool = typer.Option(False, help="Top two on depth chart"),
    suppress_zeros: bool = typer.Option(False, help="Hide players with no points"),
    top: Optional[int] = typer.Option(None, help="Show only the first N rows"),
):
    """Rank players by points over a rolling window of weeks."""
    criteria = _criteria(
        position, starters_only, free_agents_only, playoffs_only, ones_and_twos_only
    )
    service = _build_service(players_csv, metrics_csv, season, week, criteria)
    try:
        scorer = create_strategy(strategy, service.metrics_repo)
        service.collect(position=position)
        results = service.rolling_report(
            scorer, weeks_to_go_back=weeks_back, suppress_zeros=suppress_zeros
        )
    except (ValueError, RuntimeError) as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    _echo_table(results_to_dataframe(results), top)


@app.command("projection")
def projection(
    players_csv: Path = typer.Argument(..., exists=True, help="Player rows CSV"),
    metrics_csv: Path = typer.Argument(..., exists=True, help="Game metrics CSV"),
    position: Optional[str] = typer.Option(None, help="Position code to list"),
    season: Optional[int] = typer.Option(None, help="Season (default: current)"),
    strategy: Optional[str] = typer.Option(
        None, help="Rate each game with a strategy instead of stored projections"
    ),
    starters_only: bool = typer.Option(False, help="Starters only"),
    free_agents_only: bool = typer.Option(False, help="Unowned players only"),
    playoffs_only: bool = typer.Option(False, help="Playoff-bound teams only"),
    ones_and_twos_only: bool = typer.Option(False, help="Top two on depth chart"),
    suppress_zeros: bool = typer.Option(False, help="Hide players with no points"),
    top: Optional[int] = typer.Option(None, help="Show only the first N rows"),
):
    """Rank players by projected season points."""
    criteria = _criteria(
        position, starters_only, free_agents_only, playoffs_only, ones_and_twos_only
    )
    service = _build_service(players_csv, metrics_csv, season, None, criteria)
    try:
        scorer = create_strategy(strategy, service.metrics_repo) if strategy else None
        service.collect(position=position)
        results = service.projection_report(
            season=season, strategy=scorer, suppress_zeros=suppress_zeros
        )
    except (ValueError, RuntimeError) as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    _echo_table(results_to_dataframe(results), top)


def main():
    app()


if __name__ == "__main__":
    main()
