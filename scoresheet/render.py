"""Text layout of a scoresheet as shown on the scoring screen."""

from __future__ import annotations

from datetime import datetime

from .models import Scoresheet

WIDTH = 79
VERTICAL = "\u2502"
DIVIDER = "\u2550"
SPLIT = "\u2562"
DATE_FORMAT = "%a %d %m %Y"


class _Canvas:
    """A grid of characters written at given column and row positions."""

    def __init__(self) -> None:
        self._rows: list[list[str]] = []

    def put(self, x: int, y: int, text: str) -> None:
        while len(self._rows) <= y:
            self._rows.append([])
        row = self._rows[y]
        end = x + len(text)
        if len(row) < end:
            row.extend(" " * (end - len(row)))
        row[x:end] = text

    def rule(self, y: int) -> None:
        self.put(0, y, DIVIDER * WIDTH)

    def render(self) -> str:
        return "\n".join("".join(row).rstrip() for row in self._rows)


def render_scoresheet(sheet: Scoresheet) -> str:
    """Lay out the header, batting card and bowling card as text."""
    canvas = _Canvas()
    d = sheet.details

    canvas.put(0, 0, f"{VERTICAL}competition:{d.competition}")
    canvas.put(35, 0, f"{VERTICAL}Venue:{d.venue}")
    canvas.rule(1)
    canvas.put(0, 2, f"{VERTICAL}Match Between:{d.match_between}")
    canvas.put(35, 2, f"{VERTICAL}Versus:{d.versus}")
    canvas.rule(3)
    canvas.put(0, 4, f"{VERTICAL}Toss won by:{d.toss_won_by}")
    canvas.put(35, 4, f"{VERTICAL}Elected To:{d.elected_to}")
    canvas.rule(5)
    for y in range(33):
        canvas.put(34, y, SPLIT)
    canvas.put(0, 6, f"{VERTICAL}Inning Of:{d.innings_of}")
    canvas.put(35, 6, f"{VERTICAL}Date:{d.date}")
    canvas.rule(7)
    canvas.rule(21)
    canvas.rule(9)

    canvas.put(5, 8, "Batsmanname")
    for number, batsman in enumerate(sheet.batsmen, start=1):
        canvas.put(0, 9 + number, f"{VERTICAL}Batsman {number}:{batsman.name}")
    canvas.put(36, 8, f"{VERTICAL}Total runs")
    for row, batsman in enumerate(sheet.batsmen, start=10):
        canvas.put(40, row, str(batsman.total_runs))

    canvas.put(5, 22, "Bowlers")
    canvas.rule(23)
    for number, bowler in enumerate(sheet.bowlers, start=1):
        canvas.put(0, 23 + number, f"{VERTICAL}Bowler {number}:{bowler.name}")

    for x, heading in (
        (35, "overs"),
        (42, "Maidens"),
        (50, "Economy"),
        (58, "No balls"),
        (68, "BTICO"),
        (75, "Runs"),
    ):
        canvas.put(x, 22, heading)
    canvas.put(62, 8, "_4s")
    canvas.put(72, 8, "_6s")
    canvas.rule(32)

    for row, batsman in enumerate(sheet.batsmen, start=10):
        canvas.put(61, row, VERTICAL)
        canvas.put(63, row, str(batsman.fours))
        canvas.put(73, row, str(batsman.sixes))
        canvas.put(71, row, VERTICAL)
        canvas.put(49, row, VERTICAL)

    for row, bowler in enumerate(sheet.bowlers, start=24):
        canvas.put(38, row, str(bowler.overs))
        canvas.put(47, row, str(bowler.maidens))
        canvas.put(55, row, f"{bowler.average:.2f}")
        canvas.put(62, row, str(bowler.no_balls))
        canvas.put(70, row, str(bowler.balls_in_current_over))
        canvas.put(78, row, str(bowler.runs))

    canvas.rule(40)
    return canvas.render()


def today_string(now: datetime | None = None) -> str:
    """Format a date the way the scoresheet stores it, today by default."""
    if now is None:
        now = datetime.now()
    return now.strftime(DATE_FORMAT)