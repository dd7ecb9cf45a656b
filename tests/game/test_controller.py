"""Tests for GameController."""

from __future__ import annotations

import random

import pytest

from plychess.core.board import Board
from plychess.core.enums import Color, GameEndReason, GameResult, MoveError, PieceType
from plychess.core.move import Move
from plychess.core.notation import board_from_fen
from plychess.core.types import A8, E2, E4, E5, E7, G5, G6
from plychess.engine.scorer import MoveScorer
from plychess.game.controller import GameController
from plychess.game.interfaces import GamePhase, IPlayer
from plychess.game.player import AIPlayer
from plychess.game.state import GameState, MoveRecord


class _ScriptedPlayer(IPlayer):
    """Human stand-in that replays moves and always picks one promotion."""

    def __init__(
        self,
        color: Color,
        lines: list[str] | None = None,
        promotion: PieceType = PieceType.QUEEN,
    ) -> None:
        self._color = color
        self._lines = list(lines or [])
        self._promotion = promotion
        self.promotions_asked = 0

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return f"Script ({self._color})"

    @property
    def is_human(self) -> bool:
        return True

    def next_command(self, state: GameState) -> str:
        return self._lines.pop(0)

    def choose_promotion(self, board: Board, sq: int) -> PieceType:
        self.promotions_asked += 1
        return self._promotion


def _controller(
    board: Board | None = None,
    side: Color = Color.WHITE,
    promotion: PieceType = PieceType.QUEEN,
) -> GameController:
    ctrl = GameController()
    ctrl.new_game(
        _ScriptedPlayer(Color.WHITE, promotion=promotion),
        _ScriptedPlayer(Color.BLACK, promotion=promotion),
        board,
        side,
    )
    return ctrl


class TestNewGame:
    def test_initial_state(self) -> None:
        ctrl = _controller()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
        assert ctrl.board == Board.initial()
        assert ctrl.current_player is ctrl.player(Color.WHITE)

    def test_phase_event(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game(_ScriptedPlayer(Color.WHITE), _ScriptedPlayer(Color.BLACK))
        assert phases == [GamePhase.AWAITING_MOVE]

    def test_custom_start(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/4P3/4K3")
        ctrl = _controller(board, Color.BLACK)
        assert ctrl.board is board
        assert ctrl.current_player is ctrl.player(Color.BLACK)

    def test_waiting_side_in_check_refused(self) -> None:
        ctrl = _controller()
        with pytest.raises(ValueError, match="Black is in check"):
            ctrl.new_game(
                _ScriptedPlayer(Color.WHITE),
                _ScriptedPlayer(Color.BLACK),
                board_from_fen("4k3/p7/8/8/8/8/8/K3R3"),
            )
        assert ctrl.board == Board.initial()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

    def test_no_game_has_no_player(self) -> None:
        ctrl = GameController()
        assert ctrl.current_player is None
        with pytest.raises(RuntimeError):
            ctrl.next_command()


class TestSubmitMove:
    def test_text_move(self) -> None:
        ctrl = _controller()
        outcome = ctrl.submit_move("e2e4")
        assert outcome
        assert ctrl.state.side_to_move == Color.BLACK
        assert ctrl.board[E4] is not None

    def test_move_object(self) -> None:
        ctrl = _controller()
        assert ctrl.submit_move(Move(E2, E4))

    def test_malformed_text(self) -> None:
        ctrl = _controller()
        outcome = ctrl.submit_move("e2e9")
        assert outcome.reason == MoveError.MALFORMED_INPUT
        assert outcome.message == "Invalid move."
        assert ctrl.state.side_to_move == Color.WHITE

    def test_rejection_keeps_turn(self) -> None:
        ctrl = _controller()
        outcome = ctrl.submit_move("e7e5")
        assert outcome.reason == MoveError.WRONG_OWNER
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.board == Board.initial()

    def test_move_event(self) -> None:
        ctrl = _controller()
        seen: list[MoveRecord] = []
        ctrl.events.on_move.append(lambda record, state: seen.append(record))
        ctrl.submit_move("e2e4")
        ctrl.submit_move("e2e4")  # now Black's turn, so rejected
        assert [r.move for r in seen] == [Move(E2, E4)]

    def test_turn_counter(self) -> None:
        ctrl = _controller()
        ctrl.submit_move("e2e4")
        ctrl.submit_move("e7e5")
        assert ctrl.state.turn == 2
        assert ctrl.board[E5] is not None
        assert ctrl.board[E7] is None


class TestGameEnd:
    def test_fools_mate(self) -> None:
        ctrl = _controller()
        results: list[tuple[GameResult, GameEndReason]] = []
        checks: list[Color] = []
        ctrl.events.on_game_over.append(lambda r, why: results.append((r, why)))
        ctrl.events.on_check.append(checks.append)
        for text in ("f2f3", "e7e5", "g2g4", "d8h4"):
            assert ctrl.submit_move(text)
        assert ctrl.state.is_game_over
        assert results == [(GameResult.BLACK_WINS, GameEndReason.CHECKMATE)]
        assert checks == []

    def test_moves_refused_after_mate(self) -> None:
        ctrl = _controller()
        for text in ("f2f3", "e7e5", "g2g4", "d8h4"):
            ctrl.submit_move(text)
        outcome = ctrl.submit_move("a2a3")
        assert outcome.reason == MoveError.GAME_OVER

    def test_check_event(self) -> None:
        ctrl = _controller(board_from_fen("4k3/8/8/8/8/8/8/R3K3"))
        checks: list[Color] = []
        ctrl.events.on_check.append(checks.append)
        ctrl.submit_move("a1a8")
        assert checks == [Color.BLACK]
        assert not ctrl.state.is_game_over

    def test_stalemate(self) -> None:
        ctrl = _controller(board_from_fen("7k/8/5K2/6Q1/8/8/8/8"))
        assert ctrl.submit_move(Move(G5, G6))
        assert ctrl.state.result == GameResult.DRAW
        assert ctrl.state.end_reason == GameEndReason.STALEMATE

    def test_bare_kings_draw(self) -> None:
        ctrl = _controller(board_from_fen("4k3/8/8/3p4/4K3/8/8/8"))
        assert ctrl.submit_move("e4d5")
        assert ctrl.state.end_reason == GameEndReason.INSUFFICIENT_MATERIAL

    def test_refresh_status_on_finished_position(self) -> None:
        fen = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"
        ctrl = _controller(board_from_fen(fen))
        assert ctrl.refresh_status() is True
        assert ctrl.state.result == GameResult.BLACK_WINS
        assert ctrl.refresh_status() is False

    def test_refresh_status_reports_check(self) -> None:
        ctrl = _controller(board_from_fen("4k3/8/8/8/8/8/8/4K2r"))
        checks: list[Color] = []
        ctrl.events.on_check.append(checks.append)
        assert ctrl.refresh_status()
        assert checks == [Color.WHITE]

    def test_resign(self) -> None:
        ctrl = _controller()
        results: list[tuple[GameResult, GameEndReason]] = []
        ctrl.events.on_game_over.append(lambda r, why: results.append((r, why)))
        ctrl.resign(Color.WHITE)
        ctrl.resign(Color.BLACK)
        assert results == [(GameResult.BLACK_WINS, GameEndReason.RESIGNATION)]
        assert ctrl.state.phase == GamePhase.GAME_OVER


class TestPromotion:
    def test_promote_to_queen_gives_check(self) -> None:
        ctrl = _controller(board_from_fen("4k3/P7/8/8/8/8/8/4K3"))
        checks: list[Color] = []
        ctrl.events.on_check.append(checks.append)
        ctrl.submit_move("a7a8")
        piece = ctrl.board[A8]
        assert piece is not None and piece.piece_type == PieceType.QUEEN
        assert checks == [Color.BLACK]
        assert ctrl.state.move_history[-1].promotion == PieceType.QUEEN

    def test_mover_chooses(self) -> None:
        ctrl = _controller(board_from_fen("4k3/P7/8/8/8/8/8/4K3"), promotion=PieceType.KNIGHT)
        ctrl.submit_move("a7a8")
        piece = ctrl.board[A8]
        assert piece is not None and piece.piece_type == PieceType.KNIGHT
        white = ctrl.player(Color.WHITE)
        assert isinstance(white, _ScriptedPlayer) and white.promotions_asked == 1
        black = ctrl.player(Color.BLACK)
        assert isinstance(black, _ScriptedPlayer) and black.promotions_asked == 0
        # King and knight cannot mate.
        assert ctrl.state.end_reason == GameEndReason.INSUFFICIENT_MATERIAL


class TestCommands:
    def test_human_command(self) -> None:
        ctrl = GameController()
        ctrl.new_game(_ScriptedPlayer(Color.WHITE, ["e2e4"]), _ScriptedPlayer(Color.BLACK))
        assert ctrl.next_command() == "e2e4"

    def test_ai_thinking_phase(self) -> None:
        ctrl = GameController()
        ctrl.new_game(
            AIPlayer(Color.WHITE, MoveScorer(rng=random.Random(3))),
            _ScriptedPlayer(Color.BLACK),
        )
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        command = ctrl.next_command()
        assert ctrl.submit_move(command)
        assert phases == [GamePhase.THINKING, GamePhase.AWAITING_MOVE]

    def test_load_replaces_state(self) -> None:
        ctrl = _controller()
        state = GameState.from_snapshot(_controller().state.to_snapshot())
        state.side_to_move = Color.BLACK
        white, black = _ScriptedPlayer(Color.WHITE), _ScriptedPlayer(Color.BLACK)
        ctrl.load(state, white, black)
        assert ctrl.state is state
        assert ctrl.current_player is black
