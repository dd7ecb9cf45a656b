"""Game state machine: board, turn bookkeeping, result and snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from plychess.core.board import Board
from plychess.core.enums import Color, GameEndReason, GameResult, MoveError, PieceType
from plychess.core.move import Move, MoveOutcome
from plychess.core.piece import Piece
from plychess.core.rules import Rules
from plychess.core.types import Square, parse_square, square_name
from plychess.game.interfaces import GamePhase

SNAPSHOT_VERSION = 1


class SnapshotError(ValueError):
    """A saved game snapshot cannot be turned back into a game."""


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    color: Color
    captured: PieceType | None = None
    promotion: PieceType | None = None


@dataclass
class GameState:
    """Manages game lifecycle: board, side to move, turn counter, result.

    Pure data and logic, no I/O.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    turn: int = 1
    phase: GamePhase = GamePhase.NOT_STARTED
    result: GameResult = GameResult.IN_PROGRESS
    end_reason: GameEndReason | None = None
    move_history: list[MoveRecord] = field(default_factory=list)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game.

        Raises:
            ValueError: If the side not to move is already in check.
        """
        if board is not None:
            _check_waiting_side(board, side_to_move)
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.turn = 1
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = None
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveOutcome:
        """Play *move* for the side to move.

        Besides the board's own checks, which only stop a king from stepping
        into check, a non-king move that would leave the mover's king in
        check is refused with ``EXPOSES_KING``. Does not switch sides; see
        :meth:`end_turn`.
        """
        if self.is_game_over:
            return MoveOutcome.rejected(MoveError.GAME_OVER, "The game is over.")

        board = self.board
        color = self.side_to_move
        piece = board[move.from_sq]
        if (
            piece is not None
            and piece.color == color
            and not piece.is_king
            and move.to_sq in piece.candidate_destinations(board)
            and Rules.is_in_check(Rules.simulate(board, piece, move.to_sq), color)
        ):
            return MoveOutcome.rejected(
                MoveError.EXPOSES_KING,
                f"Moving the {piece.name} at {square_name(move.from_sq)} "
                "would leave your King in check.",
            )

        victim = board[move.to_sq]
        outcome = board.execute_move(move.from_sq, move.to_sq, color)
        if outcome:
            self.move_history.append(
                MoveRecord(
                    move=move,
                    color=color,
                    captured=victim.piece_type if victim is not None else None,
                )
            )
        return outcome

    def promote(self, sq: Square, piece_type: PieceType) -> None:
        """Replace the pawn on *sq*; noted on the last history record."""
        self.board.promote(sq, piece_type)
        if self.move_history:
            self.move_history[-1].promotion = piece_type

    def end_turn(self) -> None:
        """Hand the move to the other side; a new turn starts after Black."""
        if self.side_to_move == Color.BLACK:
            self.turn += 1
        self.side_to_move = self.side_to_move.opposite

    # ── Result ───────────────────────────────────────────────────────────

    def finish(self, result: GameResult, reason: GameEndReason) -> None:
        self.result = result
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER

    def resign(self, color: Color) -> None:
        self.finish(GameResult.win_for(color.opposite), GameEndReason.RESIGNATION)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played since setup or load."""
        return len(self.move_history)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return Rules.legal_moves(self.board, self.side_to_move)

    # ── Snapshots ────────────────────────────────────────────────────────

    def to_snapshot(self) -> dict[str, Any]:
        """Plain-data copy of everything needed to resume the game."""
        board = self.board
        return {
            "version": SNAPSHOT_VERSION,
            "side_to_move": str(self.side_to_move),
            "turn": self.turn,
            "pieces": [_piece_entry(p) for p in board],
            "captured": {
                str(color): [_piece_entry(p) for p in board.captured(color)]
                for color in Color
            },
        }

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> GameState:
        """Rebuild a game from :meth:`to_snapshot` output.

        Raises:
            SnapshotError: If *data* is incomplete or describes an
                impossible board.
        """
        try:
            if data["version"] != SNAPSHOT_VERSION:
                raise SnapshotError(f"Unsupported snapshot version: {data['version']!r}")
            side = _parse_color(data["side_to_move"])
            turn = int(data["turn"])
            if turn < 1:
                raise SnapshotError(f"Invalid turn number: {turn}")

            board = Board()
            for entry in data["pieces"]:
                board.place(_piece_from_entry(entry))
            for color_name, entries in data["captured"].items():
                color = _parse_color(color_name)
                for entry in entries:
                    board.add_captured(color, _piece_from_entry(entry))
            for color in Color:
                board.king(color)
            _check_waiting_side(board, side)
        except SnapshotError:
            raise
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            # BoardIntegrityError is a ValueError and lands here too.
            raise SnapshotError(f"Malformed game snapshot: {exc}") from exc

        state = cls(board=board, side_to_move=side, turn=turn)
        state.phase = GamePhase.AWAITING_MOVE
        return state


def _check_waiting_side(board: Board, side_to_move: Color) -> None:
    """Refuse a position where the side that just moved left its king in check."""
    waiting = side_to_move.opposite
    if Rules.is_in_check(board, waiting):
        raise ValueError(f"{waiting.title} is in check with {side_to_move.title} to move")


def _piece_entry(piece: Piece) -> dict[str, Any]:
    return {"piece": str(piece), "square": square_name(piece.square), "moved": piece.moved}


def _piece_from_entry(entry: dict[str, Any]) -> Piece:
    piece = Piece.from_char(entry["piece"], parse_square(entry["square"]))
    piece.moved = bool(entry.get("moved", False))
    return piece


def _parse_color(name: str) -> Color:
    try:
        return Color[name.upper()]
    except KeyError:
        raise SnapshotError(f"Unknown side: {name!r}") from None

