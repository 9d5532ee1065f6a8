"""
Gridstats Lister Configuration Module

Provides centralized configuration management for the entire application.
Import the global config instance to access all configuration values.

Usage:
    from gridstats_lister.config import config

    # Access season configuration
    weeks = config.season.weeks_in_season

    # Access default filter criteria
    actives = config.player_filter.active_only
"""

from .settings import (
    GridstatsConfig,
    SeasonConfig,
    ScoringConfig,
    PlayerFilterConfig,
    AggregationConfig,
    ReportConfig,
    StarterSlot,
    config,
    load_config,
)

__all__ = [
    "GridstatsConfig",
    "SeasonConfig",
    "ScoringConfig",
    "PlayerFilterConfig",
    "AggregationConfig",
    "ReportConfig",
    "StarterSlot",
    "config",
    "load_config",
]
