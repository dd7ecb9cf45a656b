"""Abstract interfaces for the game layer.

Follows Dependency Inversion: GameController depends on these ABCs, not on
concrete Player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from plychess.core.enums import Color

if TYPE_CHECKING:
    from plychess.core.board import Board
    from plychess.core.enums import PieceType
    from plychess.core.types import Square
    from plychess.game.state import GameState


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # AI is computing
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def next_command(self, state: GameState) -> str:
        """Return the next line of input: a move such as ``"e2e4"`` or a command."""

    @abstractmethod
    def choose_promotion(self, board: Board, sq: Square) -> PieceType:
        """Pick the piece kind for the pawn that reached its last rank on *sq*."""
