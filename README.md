# scoresheet

A small terminal program for keeping a cricket scoresheet. It records one
batting innings ball by ball: runs off the bat, no balls and wides with the
runs taken off them, dismissals, and changes of bowler and batsman. Each sheet
is saved under a name so that you can view it again later.

## Installing

```
pip install .
```

## Using it

Start the program with:

```
scoresheet
```

Sheets are kept in the directory `Files` under the current directory. Use
`--directory` to keep them elsewhere:

```
scoresheet --directory my-sheets
```

A welcome banner comes first, then the menu:

1. **New scoresheet**: pick a name that no other sheet uses; you are asked
   again while the name is empty or already taken. Then enter the match
   details: competition, venue, the two teams, who won the toss and what they
   chose, which innings it is (a number, empty means 0), and the date (type
   `T` to use today's date). After that come the eleven batsmen and eight
   bowlers. Over-long entries are cut short (for example 15 characters for a
   player's name). Answer `c` to start scoring or `e` to enter the details
   again.
2. **View scoresheet**: give the name of a saved sheet and it is shown on
   screen. If there is no such sheet the program says so and exits with
   status 1.
3. **Exit**.

### Recording deliveries

The scoresheet is shown before every entry. Each delivery is typed as one
code:

| Code | Meaning |
|------|---------|
| `0`, `1`, `2`, `3`, `4`, `6` | runs off the bat |
| `N` | no ball: one run to the bowler, then you are asked for the runs taken off it (0 to 6) |
| `W` | wide: as for a no ball |

Runs go to the current batsman and the current bowler; fours and sixes are
counted for the batsman. Wides and no balls are not balls of the over. A
bowler's over is complete after six legal balls, and an over in which no runs
were scored counts as a maiden. The economy shown is the bowler's runs divided
by the overs bowled, including part of the current over.

Instead of a delivery you can type one of these words:

| Word | What it does |
|------|--------------|
| `out` | records a dismissal of the current batsman: `F` (fielding), `C` (catch out) or `W` (wicket), then the fielder's name, then the number of the new batsman |
| `bowler` | chooses the current bowler by number, 1 to 8 |
| `batsman` | chooses the current batsman by number, 1 to 11 |
| `end` | asks whether to end the innings; `y` ends it and saves the sheet |

Each dismissal also records the fall of the wicket: the runs at the time and
the over in which it fell. At most ten wickets can fall.

## What it does not do

A sheet holds one batting side and its bowling card. The batsman does not
change on his own: after odd runs or at the end of an over choose the new
batsman with `batsman`, and the bowler with `bowler`. There is no second
innings, no target or result, and no way to edit a saved sheet.

## Using it from Python

The parts of the program can also be used from code:

```python
from scoresheet.models import Scoresheet
from scoresheet.scoring import Innings
from scoresheet.render import render_scoresheet
from scoresheet.storage import ScoresheetStore

sheet = Scoresheet()
innings = Innings(sheet)
innings.record_ball("4", None)
innings.record_ball("W", 1)
innings.record_dismissal("C", "Smith")
innings.select_batsman(3)

store = ScoresheetStore("Files")
store.register("final")
store.save("final", sheet)
print(render_scoresheet(store.load("final")))
```

- `scoresheet.models` holds the records: `Scoresheet`, `GameDetails`,
  `BattingRecord`, `BowlingRecord` and `WicketRecord`.
- `scoresheet.scoring.Innings` scores deliveries onto a sheet with
  `record_ball`, `record_dismissal`, `select_bowler` and `select_batsman`.
  Bad input raises `ScoringError`.
- `scoresheet.render.render_scoresheet` lays a sheet out as text, and
  `today_string` formats a date the way the sheet stores it.
- `scoresheet.storage.ScoresheetStore` keeps sheets as JSON files named
  `<name>.txt` in its directory, with the names in use listed in
  `filelist.txt`. `register` raises `FileNameExists` when the name is already
  in use; `load` raises `FileNotFoundError` for an unknown name.
  `sheet_to_dict` and `sheet_from_dict` convert a sheet to and from plain data.

## Running the tests

```
pip install .[test]
pytest
```