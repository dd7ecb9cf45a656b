"""Shared engine models and protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from plychess.core.board import Board
    from plychess.core.enums import Color
    from plychess.core.move import Move


@dataclass(slots=True, frozen=True)
class ScoredMove:
    """One candidate move with its heuristic score."""

    move: Move
    score: int


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by an engine for a single move decision."""

    best_move: Move | None
    score: int | None
    candidates: tuple[Move, ...] = field(default=())
    nodes: int = 0


class IEngine(Protocol):
    """Protocol for move-choosing engines used by the game layer."""

    def search(self, board: Board, color: Color) -> SearchResult: ...
