"""Week navigation and current-week resolution."""

from typing import Dict, Optional, Tuple

from loguru import logger

from ..models.week import Week


class WeekMaster:
    """Hands out Week instances for a season and walks between them."""

    def __init__(self, weeks_in_season: Optional[int] = None):
        if weeks_in_season is None:
            from gridstats_lister.config import config

            weeks_in_season = config.season.weeks_in_season
        self.weeks_in_season = weeks_in_season
        self._weeks: Dict[Tuple[int, int], Week] = {}

    def get_week(self, season: int, ordinal: int) -> Week:
        """
        Get the Week for a season and week number.

        Raises:
            ValueError: if ordinal is outside 1..weeks_in_season
        """
        if not 1 <= ordinal <= self.weeks_in_season:
            raise ValueError(
                f"Week {ordinal} outside 1-{self.weeks_in_season} for season {season}"
            )
        key = (season, ordinal)
        if key not in self._weeks:
            self._weeks[key] = Week(season=season, ordinal=ordinal)
        return self._weeks[key]

    def previous_week(self, week: Week) -> Week:
        """Week before ``week``; raises BoundaryError at the season opener."""
        previous = week.previous()
        return self.get_week(previous.season, previous.ordinal)

    def next_week(self, week: Week) -> Week:
        following = week.next(self.weeks_in_season)
        return self.get_week(following.season, following.ordinal)


class SeasonClock:
    """
    Resolves the current season and week used for default reference weeks.

    Values come from the season section of the configuration; explicit
    arguments take precedence.
    """

    def __init__(
        self,
        current_season: Optional[int] = None,
        current_week: Optional[int] = None,
        week_master: Optional[WeekMaster] = None,
    ):
        from gridstats_lister.config import config

        self._season = (
            current_season
            if current_season is not None
            else config.season.current_season
        )
        self._week = (
            current_week if current_week is not None else config.season.current_week
        )
        self.week_master = week_master or WeekMaster()

    def current_season(self) -> int:
        return self._season

    def current_week(self) -> int:
        # Week 0 means preseason; reports run against the opener.
        if self._week == 0:
            return 1
        return self._week

    def reference_week(self) -> Week:
        week = self.week_master.get_week(self.current_season(), self.current_week())
        logger.debug(f"Reference week resolved to {week}")
        return week
