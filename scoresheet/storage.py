"""Saving and loading scoresheets in a directory of named files."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from .models import (
    BattingRecord,
    BowlingRecord,
    GameDetails,
    Scoresheet,
    WicketRecord,
)

FILE_LIST = "filelist.txt"
EXTENSION = ".txt"


class FileNameExists(ValueError):
    """Raised when a scoresheet name is already registered."""


def sheet_to_dict(sheet: Scoresheet) -> dict:
    """Convert a scoresheet into plain data."""
    return asdict(sheet)


def sheet_from_dict(data: dict) -> Scoresheet:
    """Build a scoresheet from the data produced by :func:`sheet_to_dict`."""
    try:
        return Scoresheet(
            details=GameDetails(**data["details"]),
            batsmen=[BattingRecord(**item) for item in data["batsmen"]],
            bowlers=[BowlingRecord(**item) for item in data["bowlers"]],
            wickets=[WicketRecord(**item) for item in data.get("wickets", [])],
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed scoresheet data: {exc}") from exc


class ScoresheetStore:
    """A directory of scoresheets with a list of the names in use."""

    def __init__(self, directory):
        self.directory = Path(directory)

    @property
    def _list_path(self) -> Path:
        return self.directory / FILE_LIST

    def _path(self, name: str) -> Path:
        return self.directory / f"{name}{EXTENSION}"

    def names(self) -> list[str]:
        """Names registered so far, in the order they were added."""
        try:
            text = self._list_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [line for line in text.splitlines() if line]

    def register(self, name: str) -> Path:
        """Add a new name to the list and return the path its sheet will use."""
        if name in self.names():
            raise FileNameExists(f"file name {name!r} already exists")
        self.directory.mkdir(parents=True, exist_ok=True)
        with self._list_path.open("a", encoding="utf-8") as listing:
            listing.write(f"{name}\n")
        return self._path(name)

    def save(self, name: str, sheet: Scoresheet) -> Path:
        """Write a scoresheet under ``name``."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(name)
        path.write_text(json.dumps(sheet_to_dict(sheet), indent=2), encoding="utf-8")
        return path

    def load(self, name: str) -> Scoresheet:
        """Read the scoresheet saved under ``name``."""
        path = self._path(name)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise FileNotFoundError(f"no such existing file: {name!r}") from None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"malformed scoresheet file {name!r}: {exc}") from exc
        return sheet_from_dict(data)