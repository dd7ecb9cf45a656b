"""GameController — the central orchestrator of a chess game.

Coordinates: Players, GameState, Rules.
Emits events via simple callbacks so the console / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from plychess.core.board import Board
from plychess.core.enums import Color, GameEndReason, GameResult, MoveError
from plychess.core.move import Move, MoveOutcome, parse_move
from plychess.core.rules import Rules
from plychess.game.interfaces import GamePhase, IPlayer
from plychess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
CheckCallback = Callable[[Color], None]  # side in check
GameOverCallback = Callable[[GameResult, GameEndReason], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full chess game: validates moves, handles promotion,
    switches turns, detects the end of the game, notifies listeners.

    Single-threaded: every call runs to completion before the next input.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Start a game; a *board* whose waiting side is in check is a ValueError."""
        state = GameState()
        state.setup(board, side_to_move)
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = state
        _LOGGER.debug("New game: %s vs %s", white.name, black.name)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def load(self, state: GameState, white: IPlayer, black: IPlayer) -> None:
        """Resume a previously saved game."""
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = state
        self._state.phase = GamePhase.AWAITING_MOVE
        _LOGGER.info("Resumed game at turn %d, %s to move", state.turn, state.side_to_move)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def refresh_status(self) -> bool:
        """Evaluate the position for the side to move.

        Ends the game on checkmate, stalemate or insufficient material.
        Returns whether the side to move is in check.
        """
        state = self._state
        if state.is_game_over:
            return False

        color = state.side_to_move
        in_check = Rules.is_in_check(state.board, color)
        result, reason = Rules.game_result(state.board, color)
        if reason is not None:
            state.finish(result, reason)
            self._emit_game_over(result, reason)
        elif in_check:
            for cb in self.events.on_check:
                cb(color)
        return in_check

    def next_command(self) -> str:
        """Ask the current player for its next input line."""
        cp = self.current_player
        if cp is None:
            raise RuntimeError("No game in progress")
        if cp.is_human:
            return cp.next_command(self._state)

        self._set_phase(GamePhase.THINKING)
        try:
            return cp.next_command(self._state)
        finally:
            self._set_phase(GamePhase.AWAITING_MOVE)

    def submit_move(self, move: Move | str) -> MoveOutcome:
        """Play a move for the side to move; the turn only passes on success."""
        if isinstance(move, str):
            try:
                move = parse_move(move)
            except ValueError:
                return MoveOutcome.rejected(MoveError.MALFORMED_INPUT, "Invalid move.")

        state = self._state
        color = state.side_to_move
        outcome = state.apply_move(move)
        if not outcome:
            _LOGGER.debug("Rejected %s for %s: %s", move, color, outcome.reason.name)
            return outcome

        promo_sq = state.board.promotion_square(color)
        if promo_sq is not None:
            mover = self._players.get(color)
            if mover is None:
                raise RuntimeError(f"No {color} player to choose a promotion")
            state.promote(promo_sq, mover.choose_promotion(state.board, promo_sq))

        state.end_turn()
        record = state.move_history[-1]
        _LOGGER.debug("%s played %s", color, move)
        self._emit_move(record)

        self.refresh_status()
        return outcome

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        self._emit_game_over(self._state.result, GameEndReason.RESIGNATION)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_phase(self, phase: GamePhase) -> None:
        if self._state.is_game_over:
            return
        self._state.phase = phase
        self._emit_phase(phase)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult, reason: GameEndReason) -> None:
        _LOGGER.info("Game over: %s (%s)", result.name, reason.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result, reason)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
