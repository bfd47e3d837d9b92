"""Opponent-engine models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

CancelCheck = Callable[[], bool]


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single best-move request."""

    depth: int = 10

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Search depth must be positive, got {self.depth}")


class IEngine(Protocol):
    """Protocol for the external best-move searcher.

    ``best_move`` receives the position string and returns the raw answer:
    a move token such as ``e2e4``, a full ``bestmove ...`` line, or a
    "no move" sentinel such as ``(none)``.
    """

    def best_move(
        self,
        fen: str,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> str: ...
