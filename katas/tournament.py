"""Tally football match results into a league table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO


@dataclass
class TeamStats:
    """Running results for one team."""

    name: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    points: int = 0

    def record_win(self) -> None:
        self.played += 1
        self.won += 1
        self.points += 3

    def record_loss(self) -> None:
        self.played += 1
        self.lost += 1

    def record_draw(self) -> None:
        self.played += 1
        self.drawn += 1
        self.points += 1


def _row(name: object, *columns: object) -> str:
    return f"{name!s:<31}|" + " |".join(f"{col!s:>3}" for col in columns) + "\n"


def _apply_match(line: str, teams: dict[str, TeamStats]) -> None:
    fields = line.split(";")
    if len(fields) != 3:
        raise ValueError(f"invalid match script: {line!r}")
    home_name, away_name, outcome = fields
    home = teams.setdefault(home_name, TeamStats(home_name))
    away = teams.setdefault(away_name, TeamStats(away_name))
    if outcome == "win":
        home.record_win()
        away.record_loss()
    elif outcome == "loss":
        home.record_loss()
        away.record_win()
    elif outcome == "draw":
        home.record_draw()
        away.record_draw()
    else:
        raise ValueError(f"invalid match condition: {outcome!r}")


def tally(reader: TextIO, writer: TextIO) -> None:
    """Read 'home;away;outcome' lines from ``reader`` and write the table.

    Blank lines and lines starting with '#' are skipped. Teams are ordered
    by points, highest first, then by name. Raises ValueError on a bad
    line, in which case nothing is written.
    """
    teams: dict[str, TeamStats] = {}
    for raw in reader:
        line = raw.rstrip("\n")
        if not line or line.startswith("#"):
            continue
        _apply_match(line, teams)

    ranking = sorted(teams.values(), key=lambda team: (-team.points, team.name))
    writer.write(_row("Team", "MP", "W", "D", "L", "P"))
    for team in ranking:
        writer.write(
            _row(team.name, team.played, team.won, team.drawn, team.lost, team.points)
        )