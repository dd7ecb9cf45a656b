"""Tests for placement text parsing and move listing."""

import pytest

from plychess.core.board import Board
from plychess.core.enums import Color, PieceType
from plychess.core.move import Move
from plychess.core.notation import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    format_moves,
)
from plychess.core.types import A1, B7, D2, D4, E1, E2, E4, E8, G7


class TestBoardFromFen:
    def test_starting_placement_matches_initial(self) -> None:
        assert board_from_fen(STARTING_PLACEMENT) == Board.initial()

    def test_full_fen_record_is_accepted(self) -> None:
        board = board_from_fen(STARTING_PLACEMENT + " w KQkq - 0 1")
        assert board == Board.initial()

    def test_pieces_placed(self) -> None:
        board = board_from_fen("4k3/1p4p1/8/8/4P3/8/8/4K3")
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8
        pawn = board[E4]
        assert pawn is not None
        assert pawn.color == Color.WHITE
        assert pawn.piece_type == PieceType.PAWN
        assert board[B7] is not None and board[G7] is not None

    def test_pawn_moved_flags_follow_home_rank(self) -> None:
        board = board_from_fen("4k3/1p6/8/8/4P3/8/3P4/4K3")
        assert board[E4] is not None and board[E4].moved
        assert board[D2] is not None and not board[D2].moved
        assert board[B7] is not None and not board[B7].moved

    def test_other_pieces_unmoved(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/R3K3")
        assert board[A1] is not None and not board[A1].moved

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8",
            "4k3/8/8/8/8/8/8/4K4",
            "4k3/8/8/8/8/8/8/4K2",
            "4k3/8/8/8/8/8/8/4X3",
            "4k3/8/8/8/8/8/8/09",
        ],
    )
    def test_invalid_placement_raises(self, fen: str) -> None:
        with pytest.raises(ValueError):
            board_from_fen(fen)


class TestBoardToFen:
    def test_starting(self) -> None:
        assert board_to_fen(Board.initial()) == STARTING_PLACEMENT

    def test_after_move(self) -> None:
        board = Board.initial()
        board.execute_move(E2, E4, Color.WHITE)
        assert board_to_fen(board) == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"

    @pytest.mark.parametrize(
        "fen",
        [
            "4k3/8/8/8/8/8/8/4K3",
            "r3k2r/8/8/8/8/8/8/R3K2R",
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR",
        ],
    )
    def test_placement_survives_parsing(self, fen: str) -> None:
        assert board_to_fen(board_from_fen(fen)) == fen


class TestFormatMoves:
    def test_space_separated(self) -> None:
        assert format_moves([Move(E2, E4), Move(D2, D4)]) == "e2e4 d2d4"

    def test_empty(self) -> None:
        assert format_moves([]) == ""
