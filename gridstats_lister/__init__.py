"""
Gridstats Lister Package

Fantasy scoring tables for NFL players. Selects players from a candidate
pool, rates them week by week with a pluggable scoring strategy, and
aggregates rolling-window or full-season projected totals for ranking.
"""

__version__ = "0.3.0"
