"""Interactive scoring screens and the command that starts them."""

from __future__ import annotations

import argparse
from typing import Callable

from .models import BOWLER_SLOTS, TEAM_SIZE, Scoresheet
from .render import render_scoresheet, today_string
from .scoring import NO_BALL, WIDE, Dismissal, Innings, ScoringError, parse_delivery
from .storage import ScoresheetStore

Reader = Callable[[str], str]
Writer = Callable[[str], None]

HEART = "\u2665"
SMILE = "\u263b"
DEFAULT_DIRECTORY = "Files"

_HEADER_FIELDS = (
    ("competition", "competition:", 15),
    ("venue", "Venue:", 20),
    ("match_between", "Match Between:", 10),
    ("versus", "Versus:", 10),
    ("toss_won_by", "Toss won by:", 10),
    ("elected_to", "Elected To:", 7),
)
_INNINGS_LIMIT = 3
_DATE_LIMIT = 10
_NAME_LIMIT = 15
_FIELDER_LIMIT = 30

_DELIVERY_PROMPT = (
    "Enter runs made |0|1|2|3|4|6|W|N| "
    "(out = wicket, bowler = change bowler, batsman = change batsman, end = end innings): "
)


def welcome_banner() -> str:
    """The greeting shown before the menu."""
    hearts = HEART * 29
    lines = [
        " _ _ _ _ _ _ _ _ _ _  _ _ _ _ ",
        "*" * 29,
        hearts,
        f" {SMILE * 3}!!! YOU ARE WELCOME !!!{SMILE * 3}",
        "            TO",
        f" {HEART * 4} Cricket score sheet {HEART * 4}",
        hearts,
        "*" * 29,
        "_ _ _ _ _ _ _ _ _ _ _ _ _ _ _",
    ]
    return "\n".join(lines)


def menu_text() -> str:
    """The main menu."""
    return "\n".join(
        [
            "MENU:",
            "1.New scoresheet:",
            "2.View scoresheet:",
            "3.Exit:",
        ]
    )


def read_limited(text: str, limit: int) -> str:
    """Keep at most ``limit`` typed characters, applying backspaces.

    Input stops at the first line break.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    chars: list[str] = []
    for ch in text:
        if ch in "\r\n":
            break
        if ch == "\b":
            if chars:
                chars.pop()
            continue
        chars.append(ch)
    return "".join(chars[:limit])


def read_number(text: str, limit: int) -> int:
    """Read a whole number of at most ``limit`` digits; empty input is 0."""
    digits = read_limited(text, limit)
    if not digits:
        return 0
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError("Invalid input.")
    return int(digits)


def _ask(read: Reader, write: Writer, prompt: str, parse):
    """Prompt until ``parse`` accepts the answer, reporting each rejection."""
    while True:
        answer = read(prompt)
        try:
            return parse(answer)
        except ValueError as exc:
            write(str(exc))


def _enter_details(sheet: Scoresheet, read: Reader, write: Writer) -> None:
    details = sheet.details
    for attribute, label, limit in _HEADER_FIELDS:
        setattr(details, attribute, read_limited(read(label), limit))
    details.innings_of = _ask(
        read, write, "Inning Of:", lambda text: read_number(text, _INNINGS_LIMIT)
    )
    date = read_limited(read("Date (T to enter today's date):"), _DATE_LIMIT)
    details.date = today_string() if date[:1].upper() == "T" else date
    for number, batsman in enumerate(sheet.batsmen, start=1):
        batsman.name = read_limited(read(f"Batsman {number}:"), _NAME_LIMIT)
    for number, bowler in enumerate(sheet.bowlers, start=1):
        bowler.name = read_limited(read(f"Bowler {number}:"), _NAME_LIMIT)


def _confirm_details(read: Reader) -> bool:
    """True to continue to scoring, False to edit the details again."""
    while True:
        answer = read("Enter e to edit or c to continue").strip().upper()
        if answer == "E":
            return False
        if answer == "C":
            return True


def _parse_extra_runs(text: str) -> int:
    value = text.strip()
    if len(value) != 1 or value not in "0123456":
        raise ValueError("Invalid Input.Input:0/1/2/3/4/6")
    return int(value)


def _parse_dismissal(text: str) -> Dismissal:
    try:
        return Dismissal(text)
    except ValueError:
        raise ValueError("How out? Fielding='F' Catch-Out='C' Wicket='W'") from None


def _select(read: Reader, write: Writer, prompt: str, select, limit: int) -> None:
    def parse(text: str):
        try:
            number = read_number(text, 2)
            return select(number)
        except ScoringError as exc:
            raise ValueError(str(exc)) from None

    _ask(read, write, f"{prompt} (1-{limit}): ", parse)


def _score_innings(sheet: Scoresheet, read: Reader, write: Writer) -> None:
    innings = Innings(sheet)
    while True:
        write(render_scoresheet(sheet))
        entry = read(_DELIVERY_PROMPT).strip()
        command = entry.lower()
        if command == "end":
            answer = read("Do you want to end the inning? (y/n) ").strip().upper()
            if answer == "Y":
                return
        elif command == "out":
            how = _ask(
                read, write, "How out? Fielding='F' Catch-Out='C' Wicket='W': ",
                _parse_dismissal,
            )
            fielder = read_limited(read("Enter the fielder's name:"), _FIELDER_LIMIT)
            try:
                innings.record_dismissal(how, fielder)
            except ScoringError as exc:
                write(str(exc))
                continue
            _select(
                read, write, "Select the new batsman no.", innings.select_batsman,
                TEAM_SIZE,
            )
        elif command == "bowler":
            _select(
                read, write, "Select the bowler no.", innings.select_bowler,
                BOWLER_SLOTS,
            )
        elif command == "batsman":
            _select(
                read, write, "Select the new batsman no.", innings.select_batsman,
                TEAM_SIZE,
            )
        else:
            try:
                code = parse_delivery(entry)
            except ScoringError as exc:
                write(str(exc))
                continue
            extra = None
            if code in (WIDE, NO_BALL):
                extra = _ask(
                    read, write, "Enter the runs made:0/1/2/3/4/6:", _parse_extra_runs
                )
            innings.record_ball(code, extra)


def new_scoresheet(
    store: ScoresheetStore, name: str, read: Reader, write: Writer
) -> Scoresheet:
    """Register ``name``, take the match details, score the innings and save it."""
    store.register(name)
    write("File Created.")
    sheet = Scoresheet()
    while True:
        write(render_scoresheet(sheet))
        _enter_details(sheet, read, write)
        if _confirm_details(read):
            break
    _score_innings(sheet, read, write)
    store.save(name, sheet)
    write(f"Scoresheet {name!r} saved.")
    return sheet


def view_scoresheet(store: ScoresheetStore, name: str, write: Writer) -> Scoresheet:
    """Load the scoresheet saved under ``name`` and show it."""
    sheet = store.load(name)
    write(render_scoresheet(sheet))
    return sheet


def main(argv: list[str] | None = None) -> int:
    """Run the scoresheet menu on the terminal."""
    parser = argparse.ArgumentParser(description="Keep a cricket scoresheet.")
    parser.add_argument(
        "--directory",
        default=DEFAULT_DIRECTORY,
        help="directory holding the scoresheets (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    store = ScoresheetStore(args.directory)

    try:
        while True:
            print(welcome_banner())
            print(menu_text())
            choice = input("Choice: ").strip()
            if choice == "1":
                name = input("Please enter the new file name:").strip()
                while not name or name in store.names():
                    if name:
                        print("Filename already exists.", end="")
                    name = input("Please give new filename:").strip()
                new_scoresheet(store, name, input, print)
            elif choice == "2":
                name = input("Enter the name of the existing file to open").strip()
                try:
                    view_scoresheet(store, name, print)
                except FileNotFoundError:
                    print("Error...no such existing file")
                    return 1
                except ValueError as exc:
                    print(f"Error...{exc}")
                    return 1
            elif choice == "3":
                print("Thank you for using Cricket Scoresheet!")
                return 0
            else:
                print("Invalid choice. Please try again.")
    except (EOFError, KeyboardInterrupt):
        return 0


if __name__ == "__main__":
    raise SystemExit(main())