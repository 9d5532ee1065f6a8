"""Adapters that build domain repositories from loaded tabular data."""

from .dataframe_repositories import (
    DataFrameGameMetricsRepository,
    DataFramePlayerRepository,
    InMemoryGameMetricsRepository,
)

__all__ = [
    "DataFrameGameMetricsRepository",
    "DataFramePlayerRepository",
    "InMemoryGameMetricsRepository",
]
