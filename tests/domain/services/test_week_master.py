"""Tests for WeekMaster and SeasonClock."""

import pytest

from gridstats_lister.domain.models.week import BoundaryError, Week
from gridstats_lister.domain.services.week_master import SeasonClock, WeekMaster


class TestWeekMaster:
    def test_get_week_returns_same_instance(self):
        master = WeekMaster(weeks_in_season=18)

        first = master.get_week(2023, 5)

        assert first == Week(season=2023, ordinal=5)
        assert master.get_week(2023, 5) is first

    @pytest.mark.parametrize("ordinal", [0, 19])
    def test_get_week_out_of_range(self, ordinal):
        with pytest.raises(ValueError, match="outside 1-18"):
            WeekMaster(weeks_in_season=18).get_week(2023, ordinal)

    def test_previous_and_next(self):
        master = WeekMaster(weeks_in_season=18)
        week = master.get_week(2023, 5)

        assert master.previous_week(week).ordinal == 4
        assert master.next_week(week).ordinal == 6

    def test_previous_at_season_start(self):
        master = WeekMaster(weeks_in_season=18)

        with pytest.raises(BoundaryError):
            master.previous_week(master.get_week(2023, 1))

    def test_next_at_season_end(self):
        master = WeekMaster(weeks_in_season=17)

        with pytest.raises(BoundaryError):
            master.next_week(master.get_week(2023, 17))

    def test_default_season_length(self):
        assert WeekMaster().weeks_in_season == 18


class TestSeasonClock:
    def test_explicit_values(self):
        clock = SeasonClock(current_season=2022, current_week=9)

        assert clock.current_season() == 2022
        assert clock.current_week() == 9
        assert clock.reference_week() == Week(season=2022, ordinal=9)

    def test_preseason_resolves_to_opener(self):
        clock = SeasonClock(current_season=2023, current_week=0)

        assert clock.current_week() == 1
        assert clock.reference_week() == Week(season=2023, ordinal=1)

    def test_reference_week_out_of_range(self):
        clock = SeasonClock(
            current_season=2023,
            current_week=20,
            week_master=WeekMaster(weeks_in_season=18),
        )

        with pytest.raises(ValueError):
            clock.reference_week()
