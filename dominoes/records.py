"""Running totals of the player's games, kept in a small text file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from dominoes.game import GameResult

RECORDS_FILE = "records.txt"

PathLike = Union[str, Path]


@dataclass
class Records:
    """Balance, wins, games played and the best single win."""

    balance: int = 0
    victories: int = 0
    games: int = 0
    record: int = 0

    def percent(self) -> int:
        """Share of games won, as a whole percentage."""
        if self.games == 0:
            return 0
        return int(self.victories / self.games * 100)

    def register(self, result: GameResult, points: int) -> None:
        """Count a finished game worth ``points``."""
        if result is GameResult.INTERMEDIATE:
            raise ValueError("only a finished game can be registered")
        self.games += 1
        if result is GameResult.WIN:
            self.victories += 1
            self.balance += points
            self.record = max(self.record, points)
        else:
            self.balance -= points

    @classmethod
    def load(cls, path: PathLike = RECORDS_FILE) -> Records:
        """Read records from ``path``; a missing file gives empty records."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls()
        fields = text.split()
        if len(fields) < 4:
            raise ValueError(f"{path}: expected four numbers")
        balance, victories, games, record = (int(value) for value in fields[:4])
        return cls(balance=balance, victories=victories, games=games, record=record)

    def save(self, path: PathLike = RECORDS_FILE) -> None:
        """Write the records to ``path``."""
        Path(path).write_text(
            f"{self.balance}\n{self.victories}\n{self.games}\n{self.record}",
            encoding="utf-8",
        )