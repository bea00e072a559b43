"""Records kept on a cricket scoresheet."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

TEAM_SIZE = 11
BOWLER_SLOTS = 8
BALLS_PER_OVER = 6


@dataclass
class BattingRecord:
    """One batsman's line on the batting card."""

    name: str = ""
    total_runs: int = 0
    balls_faced: int = 0
    fours: int = 0
    sixes: int = 0
    how_out: str = ""
    fielder: str = ""
    bowler: str = ""


@dataclass
class BowlingRecord:
    """One bowler's line on the bowling card."""

    name: str = ""
    overs: int = 0
    balls_in_current_over: int = 0
    maidens: int = 0
    runs: int = 0
    wickets: int = 0
    no_balls: int = 0
    wides: int = 0
    average: float = 0.0

    @property
    def overs_bowled(self) -> float:
        """Completed overs plus the fraction of the current over."""
        return self.overs + self.balls_in_current_over / BALLS_PER_OVER

    def update_average(self) -> float:
        """Recompute runs conceded per over and return it."""
        overs = self.overs_bowled
        if overs:
            self.average = self.runs / overs
        else:
            self.average = math.inf if self.runs else 0.0
        return self.average


@dataclass
class GameDetails:
    """Header of the scoresheet."""

    competition: str = ""
    venue: str = ""
    match_between: str = ""
    versus: str = ""
    toss_won_by: str = ""
    elected_to: str = ""
    innings_of: int = 0
    date: str = ""


@dataclass
class WicketRecord:
    """Fall of a wicket: the score and the over in which it fell."""

    at_runs: int = 0
    over_number: int = 0


@dataclass
class Scoresheet:
    """A full scoresheet for one batting innings."""

    details: GameDetails = field(default_factory=GameDetails)
    batsmen: list[BattingRecord] = field(
        default_factory=lambda: [BattingRecord() for _ in range(TEAM_SIZE)]
    )
    bowlers: list[BowlingRecord] = field(
        default_factory=lambda: [BowlingRecord() for _ in range(BOWLER_SLOTS)]
    )
    wickets: list[WicketRecord] = field(default_factory=list)