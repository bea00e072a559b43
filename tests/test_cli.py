import io

import pytest

from scoresheet.cli import (
    main,
    menu_text,
    new_scoresheet,
    read_limited,
    read_number,
    view_scoresheet,
    welcome_banner,
)
from scoresheet.render import render_scoresheet, today_string
from scoresheet.storage import FileNameExists, ScoresheetStore


def make_reader(answers):
    pending = iter(answers)

    def read(prompt):
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return read


def header(competition="Cup", date="01 02 2024"):
    return (
        [competition, "Oval", "Reds", "Blues", "Reds", "bat", "1", date]
        + [f"Bat{i}" for i in range(1, 12)]
        + [f"Bowl{i}" for i in range(1, 9)]
    )


@pytest.fixture
def store(tmp_path):
    return ScoresheetStore(tmp_path / "Files")


def test_menu_lists_options_in_order():
    text = menu_text()
    assert text.index("1.New scoresheet:") < text.index("2.View scoresheet:")
    assert text.index("2.View scoresheet:") < text.index("3.Exit:")


def test_welcome_banner_greets():
    banner = welcome_banner()
    assert "!!! YOU ARE WELCOME !!!" in banner
    assert "Cricket score sheet" in banner


def test_read_limited_truncates():
    assert read_limited("abcdefgh", 3) == "abc"


def test_read_limited_applies_backspace_and_stops_at_newline():
    assert read_limited("ab\bc\nzz", 10) == "ac"


def test_read_limited_rejects_nonpositive_limit():
    with pytest.raises(ValueError):
        read_limited("abc", 0)


@pytest.mark.parametrize(
    "text, limit, expected", [("123", 3, 123), ("12345", 3, 123), ("", 3, 0)]
)
def test_read_number(text, limit, expected):
    assert read_number(text, limit) == expected


def test_read_number_rejects_letters():
    with pytest.raises(ValueError):
        read_number("1a", 3)


def test_new_scoresheet_scores_and_saves(store):
    writes = []
    read = make_reader(header() + ["c", "1", "4", "6", "W", "2", "end", "y"])
    sheet = new_scoresheet(store, "final", read, writes.append)
    assert sheet.details.competition == "Cup"
    assert sheet.details.innings_of == 1
    assert sheet.batsmen[0].name == "Bat1"
    assert sheet.bowlers[7].name == "Bowl8"
    assert sheet.batsmen[0].total_runs == 1 + 4 + 6 + 1 + 2
    assert sheet.batsmen[0].fours == 1
    assert sheet.batsmen[0].sixes == 1
    assert sheet.bowlers[0].wides == 1
    assert sheet.bowlers[0].balls_in_current_over == 3
    assert store.load("final") == sheet
    assert store.names() == ["final"]
    assert "File Created." in writes


def test_new_scoresheet_rejects_existing_name(store):
    store.register("taken")
    with pytest.raises(FileNameExists):
        new_scoresheet(store, "taken", make_reader([]), lambda text: None)


def test_invalid_delivery_is_reported_and_skipped(store):
    writes = []
    read = make_reader(header() + ["c", "9", "2", "end", "y"])
    sheet = new_scoresheet(store, "s", read, writes.append)
    assert sheet.batsmen[0].total_runs == 2
    assert any("invalid delivery" in text for text in writes)


def test_dismissal_then_new_batsman(store):
    read = make_reader(
        header() + ["c", "out", "C", "Fielder", "2", "4", "end", "y"]
    )
    sheet = new_scoresheet(store, "s", read, lambda text: None)
    assert sheet.batsmen[0].how_out == "Catchout"
    assert sheet.batsmen[0].fielder == "Fielder"
    assert sheet.batsmen[0].bowler == "Bowl1"
    assert len(sheet.wickets) == 1
    assert sheet.batsmen[1].total_runs == 4


def test_change_bowler(store):
    read = make_reader(header() + ["c", "bowler", "3", "2", "end", "y"])
    sheet = new_scoresheet(store, "s", read, lambda text: None)
    assert sheet.bowlers[2].runs == 2
    assert sheet.bowlers[0].runs == 0


def test_edit_restarts_details(store):
    read = make_reader(
        header("First") + ["e"] + header("Second") + ["c", "end", "y"]
    )
    sheet = new_scoresheet(store, "s", read, lambda text: None)
    assert sheet.details.competition == "Second"


def test_date_shortcut_uses_today(store):
    read = make_reader(header(date="T") + ["c", "end", "y"])
    sheet = new_scoresheet(store, "s", read, lambda text: None)
    assert sheet.details.date == today_string()


def test_view_scoresheet_shows_saved_sheet(store):
    saved = new_scoresheet(
        store, "s", make_reader(header() + ["c", "3", "end", "y"]), lambda t: None
    )
    writes = []
    loaded = view_scoresheet(store, "s", writes.append)
    assert loaded == saved
    assert writes == [render_scoresheet(saved)]


def test_view_missing_scoresheet(store):
    with pytest.raises(FileNotFoundError):
        view_scoresheet(store, "missing", lambda text: None)


def test_main_exit(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    assert "3.Exit:" in capsys.readouterr().out


def test_main_view_missing_file(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nmissing\n"))
    assert main(["--directory", str(tmp_path)]) == 1
    assert "Error...no such existing file" in capsys.readouterr().out


def test_main_new_then_view(monkeypatch, capsys, tmp_path):
    lines = ["1", "game"] + header() + ["c", "4", "end", "y", "2", "game", "3"]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    loaded = ScoresheetStore(tmp_path).load("game")
    assert loaded.batsmen[0].total_runs == 4
    assert render_scoresheet(loaded) in capsys.readouterr().out