"""Concrete player implementations."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from plychess.core.enums import Color, PieceType
from plychess.core.piece import piece_type_from_letter
from plychess.core.types import square_name
from plychess.game.interfaces import IPlayer

if TYPE_CHECKING:
    from plychess.core.board import Board
    from plychess.core.types import Square
    from plychess.engine.search import IEngine
    from plychess.game.state import GameState

PromptFn = Callable[[str], str]
AnnounceFn = Callable[[str], None]

_PROMOTION_LETTERS = "qrbn"


class HumanPlayer(IPlayer):
    """A human participant whose input lines come from a prompt callable.

    Args:
        color: Side the player controls.
        name: Display name.
        prompt: ``(text) -> line``; defaults to :func:`input`.
    """

    __slots__ = ("_color", "_name", "_prompt")

    def __init__(
        self,
        color: Color,
        name: str = "",
        prompt: PromptFn | None = None,
    ) -> None:
        self._color = color
        self._name = name or f"Player ({color})"
        self._prompt = prompt or input

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def next_command(self, state: GameState) -> str:
        return self._prompt(f"{state.turn}. {self._color.title}> ").strip().lower()

    def choose_promotion(self, board: Board, sq: Square) -> PieceType:
        question = f"Promote pawn on {square_name(sq)} to (q, r, b, n): "
        while True:
            answer = self._prompt(question).strip().lower()
            if len(answer) == 1 and answer in _PROMOTION_LETTERS:
                return piece_type_from_letter(answer)


class AIPlayer(IPlayer):
    """An AI participant that asks an engine for its move.

    Args:
        color: Side the AI plays.
        engine: Anything implementing :class:`IEngine`.
        name: Display name.
        announce: Optional ``(text) -> None`` told about each chosen move.
    """

    __slots__ = ("_color", "_name", "_engine", "_announce")

    def __init__(
        self,
        color: Color,
        engine: IEngine,
        name: str = "Computer",
        announce: AnnounceFn | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._engine = engine
        self._announce = announce

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def next_command(self, state: GameState) -> str:
        result = self._engine.search(state.board, self._color)
        if result.best_move is None:
            return "resign"
        text = str(result.best_move)
        if self._announce is not None:
            self._announce(f"{self._color.title}'s move: {text}")
        return text

    def choose_promotion(self, board: Board, sq: Square) -> PieceType:
        return PieceType.QUEEN
