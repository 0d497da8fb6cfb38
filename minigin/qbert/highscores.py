"""High-score tables stored as ``name,score`` lines, one file per game mode."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional, Union

logger = logging.getLogger(__name__)

MAX_ENTRIES = 10

_FILENAMES = {
    "solo": "solo_highscores.txt",
    "coop": "coop_highscores.txt",
    "versus": "versus_highscores.txt",
}
_DEFAULT_FILENAME = "highscores.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

PathLike = Union[str, Path]


def highscore_filename(mode) -> str:
    """Return the file name for ``mode``, an enum member or a mode name."""
    name = getattr(mode, "name", mode)
    return _FILENAMES.get(str(name).lower(), _DEFAULT_FILENAME)


def _path(mode, directory: Optional[PathLike]) -> Path:
    base = Path(directory) if directory is not None else Path.cwd()
    return base / highscore_filename(mode)


def _parse_score(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid score: {text!r}")
    return int(match.group(1))


def read_high_scores(mode, directory: Optional[PathLike] = None) -> list[tuple[str, int]]:
    """Read the table for ``mode``; a missing file gives an empty table.

    Lines without a comma are skipped; a score that is not a number raises
    ValueError.
    """
    path = _path(mode, directory)
    try:
        with path.open(encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except FileNotFoundError:
        return []

    scores = []
    for line in lines:
        name, comma, rest = line.partition(",")
        if comma:
            scores.append((name, _parse_score(rest)))
    return scores


def save_high_scores(
    mode, scores: Iterable[tuple[str, int]], directory: Optional[PathLike] = None
) -> None:
    """Write ``scores`` as the whole table for ``mode``."""
    path = _path(mode, directory)
    try:
        with path.open("w", encoding="utf-8") as handle:
            for name, score in scores:
                handle.write(f"{name},{score}\n")
    except OSError:
        logger.warning("could not write high scores to %s", path)


def save_high_score(
    mode, name: str, score: int, directory: Optional[PathLike] = None
) -> None:
    """Add one entry, keep the best ``MAX_ENTRIES`` from high to low, and save."""
    scores = read_high_scores(mode, directory)
    scores.append((name, score))
    scores.sort(key=lambda entry: entry[1], reverse=True)
    save_high_scores(mode, scores[:MAX_ENTRIES], directory)