"""Domain services for selection, scoring and aggregation."""

from .player_filter import FilterCriteria, PlayerFilter, TeamCoverageTracker
from .player_lister_service import PlayerListerService
from .projection_aggregator import ProjectionAggregator
from .rolling_aggregator import RollingAggregator
from .scoring_strategy import (
    ActualScoringStrategy,
    MetricsScoringStrategy,
    ProjectedScoringStrategy,
    ScoringStrategy,
    create_strategy,
)
from .week_master import SeasonClock, WeekMaster

__all__ = [
    "FilterCriteria",
    "PlayerFilter",
    "TeamCoverageTracker",
    "PlayerListerService",
    "ProjectionAggregator",
    "RollingAggregator",
    "ActualScoringStrategy",
    "MetricsScoringStrategy",
    "ProjectedScoringStrategy",
    "ScoringStrategy",
    "create_strategy",
    "SeasonClock",
    "WeekMaster",
]
