"""Ball-by-ball scoring of a batting innings."""

from __future__ import annotations

from enum import Enum

from .models import (
    BALLS_PER_OVER,
    BOWLER_SLOTS,
    TEAM_SIZE,
    BattingRecord,
    BowlingRecord,
    Scoresheet,
    WicketRecord,
)

RUN_CODES = frozenset("012346")
WIDE = "W"
NO_BALL = "N"
DELIVERY_CODES = RUN_CODES | {WIDE, NO_BALL}
EXTRA_RUNS = range(0, 7)


class ScoringError(ValueError):
    """Raised for input the scorer cannot accept."""


class Dismissal(Enum):
    """How a batsman was out; also accepts the one-letter keys W, C and F."""

    WICKET = "Wicket"
    CATCH_OUT = "Catchout"
    FIELDING = "Fielding"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return _DISMISSAL_KEYS.get(value.strip().upper())
        return None


_DISMISSAL_KEYS = {
    "W": Dismissal.WICKET,
    "C": Dismissal.CATCH_OUT,
    "F": Dismissal.FIELDING,
}


def parse_delivery(text: str) -> str:
    """Normalise a delivery code: a run count, W for wide or N for no ball."""
    code = text.strip().upper()
    if code not in DELIVERY_CODES:
        raise ScoringError(f"invalid delivery {text!r}: use 0/1/2/3/4/6/W/N")
    return code


class Innings:
    """Scores deliveries onto a scoresheet."""

    def __init__(self, sheet: Scoresheet):
        self.sheet = sheet
        self.striker_index = 0
        self.bowler_index = 0
        self.extras = 0
        self.over_runs: dict[int, int] = {}
        self._runs_at_last_over = 0

    @property
    def striker(self) -> BattingRecord:
        return self.sheet.batsmen[self.striker_index]

    @property
    def bowler(self) -> BowlingRecord:
        return self.sheet.bowlers[self.bowler_index]

    @property
    def total_runs(self) -> int:
        """Runs conceded by all bowlers so far."""
        return sum(b.runs for b in self.sheet.bowlers)

    @property
    def completed_overs(self) -> int:
        return sum(b.overs for b in self.sheet.bowlers)

    def record_ball(self, code, extra_runs: int | None = None) -> None:
        """Record one delivery.

        Wides and no balls cost one run and need the runs scored off them
        in ``extra_runs``; they do not count as a ball of the over.
        """
        code = parse_delivery(str(code))
        if code in (WIDE, NO_BALL):
            if extra_runs is None:
                raise ScoringError("runs made off a wide or no ball are required")
            if extra_runs not in EXTRA_RUNS:
                raise ScoringError(f"invalid runs {extra_runs!r}: use 0 to 6")
            bowler = self.bowler
            bowler.runs += 1
            if code == WIDE:
                bowler.wides += 1
            else:
                bowler.no_balls += 1
            self.striker.total_runs += 1
            self._score(extra_runs, legal=False)
        else:
            if extra_runs is not None:
                raise ScoringError("extra runs only follow a wide or no ball")
            self._score(int(code), legal=True)
        self.bowler.update_average()

    def _score(self, runs: int, *, legal: bool) -> None:
        bowler, striker = self.bowler, self.striker
        bowler.runs += runs
        striker.total_runs += runs
        if runs == 4:
            striker.fours += 1
        elif runs == 6:
            striker.sixes += 1
        if legal:
            striker.balls_faced += 1
            bowler.balls_in_current_over += 1
            if bowler.balls_in_current_over == BALLS_PER_OVER:
                bowler.overs += 1
                bowler.balls_in_current_over = 0
                self._close_over(bowler)
        else:
            self.extras += runs

    def _close_over(self, bowler: BowlingRecord) -> None:
        total = self.total_runs
        runs = total - self._runs_at_last_over
        self.over_runs[bowler.overs] = runs
        self._runs_at_last_over = total
        if runs == 0:
            bowler.maidens += 1

    def record_dismissal(self, how, fielder: str = "") -> WicketRecord:
        """Mark the striker out and record the fall of the wicket."""
        try:
            dismissal = Dismissal(how)
        except ValueError:
            raise ScoringError(f"invalid dismissal {how!r}: use W, C or F") from None
        if len(self.sheet.wickets) >= TEAM_SIZE - 1:
            raise ScoringError("all wickets have already fallen")
        striker = self.striker
        striker.how_out = dismissal.value
        striker.fielder = fielder
        striker.bowler = self.bowler.name
        if dismissal is Dismissal.FIELDING:
            self.bowler.update_average()
        record = WicketRecord(
            at_runs=self.total_runs, over_number=self.completed_overs + 1
        )
        self.sheet.wickets.append(record)
        return record

    def select_bowler(self, number: int) -> BowlingRecord:
        """Make bowler ``number`` (counted from 1) the current bowler."""
        if not 1 <= number <= BOWLER_SLOTS:
            raise ScoringError(f"bowler number must be 1 to {BOWLER_SLOTS}")
        self.bowler_index = number - 1
        return self.bowler

    def select_batsman(self, number: int) -> BattingRecord:
        """Make batsman ``number`` (counted from 1) the striker."""
        if not 1 <= number <= TEAM_SIZE:
            raise ScoringError(f"batsman number must be 1 to {TEAM_SIZE}")
        self.striker_index = number - 1
        return self.striker