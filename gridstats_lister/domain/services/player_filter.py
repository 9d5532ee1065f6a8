"""Multi-criteria player selection with starter coverage tracking."""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from loguru import logger
from pydantic import BaseModel, Field

from ..models.player import Player, Position


class FilterCriteria(BaseModel):
    """Independent selection toggles; every enabled one must pass."""

    active_only: bool = Field(default=False, description="Skip injured/suspended")
    starters_only: bool = Field(default=False)
    free_agents_only: bool = Field(default=False)
    playoff_bound_only: bool = Field(default=False)
    primaries_only: bool = Field(default=False, description="Skip FB, TE, punters")
    ones_and_twos_only: bool = Field(
        default=False, description="Top two on the depth chart only"
    )
    fantasy_offence_only: bool = Field(
        default=False, description="QB, RB, WR, TE and K only"
    )

    @classmethod
    def from_config(cls, **overrides) -> "FilterCriteria":
        """Criteria from the player_filter config section, with overrides."""
        from gridstats_lister.config import config

        values = {
            name: getattr(config.player_filter, name) for name in cls.model_fields
        }
        values.update(overrides)
        return cls(**values)

    def enabled(self) -> List[str]:
        return [name for name in type(self).model_fields if getattr(self, name)]


class TeamCoverageTracker:
    """
    Records, per team and position, how many starters a selection found.

    A team counts as covered at a position once it has the required number
    of starters there (two for WR by default, otherwise one).
    """

    def __init__(
        self,
        team_codes: Iterable[str],
        starters_required: Optional[Dict[str, int]] = None,
    ):
        self.team_codes = [code.upper() for code in team_codes]
        self.starters_required = dict(starters_required or {})
        self._found: Dict[Tuple[str, str], int] = {}

    @staticmethod
    def _position_key(position) -> str:
        return position.value if isinstance(position, Position) else str(position)

    def required(self, position) -> int:
        return self.starters_required.get(self._position_key(position), 1)

    def tick_off(self, team_code: str, position) -> None:
        key = (team_code.upper(), self._position_key(position))
        self._found[key] = self._found.get(key, 0) + 1

    def starters_found(self, team_code: str, position) -> int:
        return self._found.get((team_code.upper(), self._position_key(position)), 0)

    def is_covered(self, team_code: str, position) -> bool:
        return self.starters_found(team_code, position) >= self.required(position)

    def teams_missing(self, position) -> List[str]:
        """Teams that still lack a full set of starters at ``position``, sorted."""
        return sorted(
            code for code in self.team_codes if not self.is_covered(code, position)
        )


class PlayerFilter:
    """
    Selects the working player list for an aggregation run.

    Selection keeps the order of the candidate pool. When ``starters_only``
    is on, each selected starter is ticked off in ``coverage`` so gaps in a
    team's starting lineup can be reported; coverage never blocks selection.
    """

    def __init__(
        self,
        team_codes: Optional[Iterable[str]] = None,
        starters_required: Optional[Dict[str, int]] = None,
    ):
        from gridstats_lister.config import config

        self.team_codes = list(
            team_codes if team_codes is not None else config.season.team_codes
        )
        self.starters_required = (
            starters_required
            if starters_required is not None
            else config.player_filter.starters_per_position
        )
        self.coverage = TeamCoverageTracker(self.team_codes, self.starters_required)

    def reset_coverage(self) -> None:
        self.coverage = TeamCoverageTracker(self.team_codes, self.starters_required)

    @staticmethod
    def matches(player: Player, criteria: FilterCriteria) -> bool:
        """True if the player passes every enabled criterion."""
        if criteria.active_only and not player.is_active:
            return False
        if criteria.starters_only and not player.is_starter:
            return False
        if criteria.free_agents_only and not player.is_free_agent:
            return False
        if criteria.playoff_bound_only and not player.is_playoff_bound:
            return False
        if criteria.primaries_only and player.is_secondary:
            return False
        if criteria.ones_and_twos_only and not player.is_one_or_two:
            return False
        if criteria.fantasy_offence_only and not player.is_fantasy_offence:
            return False
        return True

    def select(
        self,
        pool: Sequence[Player],
        criteria: Optional[FilterCriteria] = None,
        position: Optional[str] = None,
        reset_coverage: bool = True,
    ) -> List[Player]:
        """
        Select the players in ``pool`` that satisfy ``criteria``.

        Args:
            pool: Candidate players, in source order
            criteria: Toggles to apply; None applies none of them
            position: Optional position code every selected player must have
            reset_coverage: Start a fresh coverage tracker. False keeps
                counting on top of earlier selections (one call per position).

        Returns:
            Matching players in pool order (possibly empty)
        """
        criteria = criteria or FilterCriteria()
        if reset_coverage:
            self.reset_coverage()
        logger.debug(f"PlayerFilter criteria on: {criteria.enabled() or 'none'}")

        selected = []
        for player in pool:
            if position is not None and player.position.value != position:
                continue
            if not self.matches(player, criteria):
                continue
            logger.debug(
                f"Adding {player.name:<15} {player.team_code}-{player.role.value}"
                f" to {position or 'all'} list"
            )
            selected.append(player)
            if criteria.starters_only:
                self.coverage.tick_off(player.team_code, player.position)

        logger.debug(f"{len(selected)} {position or ''} players selected")
        if criteria.starters_only and position is not None:
            logger.debug(
                f"Teams missing {position} are {self.coverage.teams_missing(position)}"
            )
        return selected
