"""A persistent table of the best scores."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from os import PathLike

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass
class HighScore:
    """One entry of the table: who, how much, and when (Unix seconds)."""

    name: str
    score: int
    timestamp: int


def _parse_int(text: str, bits: int) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid number in high score file: {text!r}")
    value = int(match.group(1))
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"number out of range in high score file: {text!r}")
    return value


def _parse_line(line: str) -> HighScore | None:
    first = line.find("|")
    second = line.find("|", first + 1)
    if first == -1 or second == -1:
        return None
    return HighScore(
        name=line[:first],
        score=_parse_int(line[first + 1 : second], 32),
        timestamp=_parse_int(line[second + 1 :], 64),
    )


class HighScoreManager:
    """Keeps scores sorted from best to worst, at most ``MAX_HIGH_SCORES`` when saved."""

    MAX_HIGH_SCORES = 10

    def __init__(self) -> None:
        self.high_scores: list[HighScore] = []

    def _sort(self) -> None:
        self.high_scores.sort(key=lambda entry: entry.score, reverse=True)

    def load(self, path: str | PathLike[str]) -> None:
        """Replace the table with the ``name|score|timestamp`` lines of a file.

        A file that cannot be opened leaves the table empty; lines without two
        separators are skipped.
        """
        self.high_scores = []
        try:
            handle = open(path, encoding="utf-8")
        except OSError:
            return
        with handle:
            for raw in handle:
                entry = _parse_line(raw.rstrip("\n"))
                if entry is not None:
                    self.high_scores.append(entry)
        self._sort()

    def save(self, path: str | PathLike[str]) -> None:
        """Write the best ``MAX_HIGH_SCORES`` entries, one per line."""
        with open(path, "w", encoding="utf-8") as handle:
            for entry in self.high_scores[: self.MAX_HIGH_SCORES]:
                handle.write(f"{entry.name}|{entry.score}|{entry.timestamp}\n")

    def add_score(self, name: str, score: int) -> None:
        """Record a score now, dropping the worst entry if the table overflows."""
        self.high_scores.append(HighScore(name, score, int(time.time())))
        self._sort()
        if len(self.high_scores) > self.MAX_HIGH_SCORES:
            self.high_scores.pop()