# leaderboard.py
# The game only needs the current top score and whether its own score was
# accepted. Remote failures never block local play.

from dataclasses import dataclass
from enum import Enum
import logging
import threading
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreEntry:
    name: str
    score: int


class SubmitResult(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class LeaderboardError(Exception):
    """Raised by leaderboard backends when the service cannot be reached or answers garbage."""


class LeaderboardService(Protocol):
    def fetch_top_score(self) -> Optional[ScoreEntry]:
        ...

    def submit_score(self, name: str, score: int) -> SubmitResult:
        ...


class InMemoryLeaderboard:
    """Keeps only the best entry. Submissions lower than the stored top are rejected."""

    def __init__(self, top: Optional[ScoreEntry] = None):
        self._top = top
        self._lock = threading.Lock()

    def fetch_top_score(self) -> Optional[ScoreEntry]:
        with self._lock:
            return self._top

    def submit_score(self, name: str, score: int) -> SubmitResult:
        if score < 0:
            raise ValueError("score must be non-negative")
        with self._lock:
            if self._top is not None and self._top.score > score:
                return SubmitResult.REJECTED
            self._top = ScoreEntry(name=name, score=score)
            return SubmitResult.ACCEPTED


def fetch_top_score_safely(service: Optional[LeaderboardService]) -> Optional[ScoreEntry]:
    """
    Fetch the top score, treating any backend failure as "no top score".

    Args:
        service: the leaderboard backend, or None when playing offline

    Returns:
        The top entry, or None if there is none or it could not be fetched
    """
    if service is None:
        return None
    try:
        return service.fetch_top_score()
    except (LeaderboardError, OSError) as exc:
        logger.warning("Could not fetch top score: %s", exc)
        return None


def submit_score_safely(service: Optional[LeaderboardService], name: str, score: int) -> SubmitResult:
    """Submit ``score``; a backend failure counts as a rejection."""
    if service is None:
        return SubmitResult.REJECTED
    try:
        result = service.submit_score(name, score)
    except (LeaderboardError, OSError) as exc:
        logger.warning("Could not submit score %d for %s: %s", score, name, exc)
        return SubmitResult.REJECTED
    logger.info("Score %d for %s %s", score, name, result.value)
    return result


def is_new_high_score(score: int, top: Optional[ScoreEntry]) -> bool:
    if score <= 0:
        return False
    return top is None or score > top.score
