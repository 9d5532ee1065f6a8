"""
Global Configuration System for Gridstats Lister

Centralized configuration management for season, scoring, filtering and
aggregation defaults. Provides type-safe configuration with validation and
environment variable support.
"""

import json
import os
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger
from pydantic import BaseModel, Field, field_validator, model_validator

NFL_TEAM_CODES = [
    "AC", "AF", "BB", "BR", "CH", "CI", "CL", "CP",
    "DB", "DD", "DL", "GB", "HT", "IC", "JJ", "KC",
    "LC", "LR", "MD", "MV", "NE", "NG", "NJ", "NO",
    "OR", "PE", "PS", "SF", "SL", "SS", "TB", "TT",
]


class SeasonConfig(BaseModel):
    """Season calendar configuration"""

    current_season: int = Field(
        default=2023, description="Season used when none is given", ge=1920
    )
    current_week: int = Field(
        default=0,
        description="Current week (0 = preseason, resolves to week 1)",
        ge=0,
        le=22,
    )
    weeks_in_season: int = Field(
        default=18, description="Regular season length in weeks", ge=1, le=22
    )
    team_codes: List[str] = Field(
        default_factory=lambda: list(NFL_TEAM_CODES),
        description="Team codes tracked for starter coverage",
    )

    @model_validator(mode="after")
    def validate_current_week(self):
        if self.current_week > self.weeks_in_season:
            raise ValueError("current_week cannot be past weeks_in_season")
        return self


class ScoringConfig(BaseModel):
    """Fantasy scoring rules (Yahoo style defaults)"""

    passing_yards_per_point: int = Field(
        default=25, description="Passing yards per fantasy point", ge=1
    )
    passing_td_points: Decimal = Field(default=Decimal("4"))
    rushing_yards_per_point: int = Field(
        default=10, description="Rushing yards per fantasy point", ge=1
    )
    rushing_td_points: Decimal = Field(default=Decimal("6"))
    receiving_yards_per_point: int = Field(
        default=10, description="Receiving yards per fantasy point", ge=1
    )
    receiving_td_points: Decimal = Field(default=Decimal("6"))
    field_goal_points: Decimal = Field(default=Decimal("3"))
    pat_points: Decimal = Field(default=Decimal("1"))


class PlayerFilterConfig(BaseModel):
    """Default player selection criteria"""

    active_only: bool = Field(default=True, description="Skip injured/suspended")
    starters_only: bool = Field(default=False)
    free_agents_only: bool = Field(default=False)
    playoff_bound_only: bool = Field(default=False)
    primaries_only: bool = Field(
        default=True, description="Skip FB, TE and punters"
    )
    ones_and_twos_only: bool = Field(default=False)
    fantasy_offence_only: bool = Field(default=False)

    starters_per_position: Dict[str, int] = Field(
        default_factory=lambda: {"WR": 2},
        description="Starters a team needs at a position to count as covered",
    )

    @field_validator("starters_per_position")
    @classmethod
    def validate_starters(cls, v: Dict[str, int]) -> Dict[str, int]:
        for position, count in v.items():
            if count < 1:
                raise ValueError(f"{position} needs at least one starter")
        return v


class AggregationConfig(BaseModel):
    """Aggregation and ranking defaults"""

    suppress_zeros: bool = Field(
        default=False, description="Drop rows with total points <= 0"
    )
    weeks_to_go_back: Optional[int] = Field(
        default=None,
        description="Rolling window size (None = full season)",
        ge=0,
    )
    sort_key: str = Field(
        default="points", description="Result attribute to rank by (descending)"
    )


class StarterSlot(BaseModel):
    """One position collected for the starters report"""

    category: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)


class ReportConfig(BaseModel):
    """Starters report configuration"""

    starter_slots: List[StarterSlot] = Field(
        default_factory=lambda: [
            StarterSlot(category="1", position="QB"),
            StarterSlot(category="2", position="RB"),
            StarterSlot(category="3", position="WR"),
            StarterSlot(category="3", position="TE"),
            StarterSlot(category="4", position="K"),
        ]
    )
    long_stats: bool = Field(default=True, description="Include stat columns")


class GridstatsConfig(BaseModel):
    """Master Gridstats Configuration Container"""

    season: SeasonConfig = Field(
        default_factory=SeasonConfig, description="Season Calendar Configuration"
    )
    scoring: ScoringConfig = Field(
        default_factory=ScoringConfig, description="Scoring Rules Configuration"
    )
    player_filter: PlayerFilterConfig = Field(
        default_factory=PlayerFilterConfig,
        description="Player Filter Configuration",
    )
    aggregation: AggregationConfig = Field(
        default_factory=AggregationConfig, description="Aggregation Configuration"
    )
    report: ReportConfig = Field(
        default_factory=ReportConfig, description="Report Configuration"
    )

    @model_validator(mode="after")
    def validate_config_consistency(self):
        """Validate cross-field consistency"""
        window = self.aggregation.weeks_to_go_back
        if window is not None and window > self.season.weeks_in_season:
            raise ValueError(
                "aggregation.weeks_to_go_back cannot exceed season.weeks_in_season"
            )
        return self


def _coerce_env_value(value: str):
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
        return int(value)
    try:
        if "." in value:
            return float(value)
    except ValueError:
        pass
    return value


def _env_overrides(prefix: str = "GRIDSTATS_") -> Dict[str, Dict]:
    # Section names can contain underscores, so match the longest known one.
    sections = sorted(GridstatsConfig.model_fields, key=len, reverse=True)
    overrides: Dict[str, Dict] = {}
    for env_var, value in os.environ.items():
        if not env_var.startswith(prefix):
            continue
        remainder = env_var[len(prefix):].lower()
        for section in sections:
            if remainder.startswith(section + "_"):
                field = remainder[len(section) + 1:]
                overrides.setdefault(section, {})[field] = _coerce_env_value(value)
                break
    return overrides


def load_config(
    config_path: Optional[Path] = None, config_data: Optional[Dict] = None
) -> GridstatsConfig:
    """
    Load configuration with environment variable overrides and optional config file

    Args:
        config_path: Optional path to JSON configuration file
        config_data: Optional dictionary of configuration data

    Environment variables can override any config value using the pattern:
    GRIDSTATS_{SECTION}_{FIELD} = value

    Example: GRIDSTATS_SEASON_CURRENT_WEEK=7
    """
    config_dict: Dict = {}

    if config_path and config_path.exists():
        try:
            with open(config_path, "r") as f:
                if config_path.suffix.lower() == ".json":
                    config_dict = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config file {config_path}: {e}")

    if config_data:
        config_dict.update(config_data)

    for section, fields in _env_overrides().items():
        config_dict.setdefault(section, {})
        config_dict[section].update(fields)

    try:
        return GridstatsConfig(**config_dict)
    except ValueError as e:
        logger.warning(f"Configuration validation failed: {e}")
        logger.warning("Using default configuration...")
        return GridstatsConfig()


# Global configuration instance
config = load_config()
