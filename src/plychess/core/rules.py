"""High-level chess rules: attacks, check, look-ahead, mate and draw detection.

Every question about a hypothetical move is answered on a board produced by
:meth:`Rules.simulate`; the live board is never touched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plychess.core.enums import Color, GameEndReason, GameResult, PieceType
from plychess.core.move import Move
from plychess.core.types import Square

if TYPE_CHECKING:
    from plychess.core.board import Board
    from plychess.core.piece import Piece

_MINOR_PIECES: tuple[list[PieceType], ...] = ([PieceType.KNIGHT], [PieceType.BISHOP])


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_attacked(board: Board, sq: Square, color: Color) -> bool:
        """Is *sq*, seen as belonging to *color*, attacked by the other side?"""
        opponent = color.opposite
        for piece in board:
            if piece.color == opponent and sq in piece.candidate_destinations(board):
                return True
        return False

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return Rules.is_attacked(board, board.king_square(color), color)

    @staticmethod
    def simulate(board: Board, piece: Piece, destination: Square) -> Board:
        """Independent copy of *board* with *piece* moved to *destination*.

        The king-into-check guard is skipped; callers read check status off
        the returned board themselves.
        """
        lookahead = board.copy()
        lookahead.execute_move(piece.square, destination, piece.color, simulation=True)
        return lookahead

    @staticmethod
    def is_mate(board: Board, color: Color) -> bool:
        """True when no move of *color* ends with its king out of check.

        Checkmate if *color* is in check right now, stalemate otherwise.
        """
        for piece in board.pieces(color):
            for destination in piece.candidate_destinations(board):
                if not Rules.is_in_check(Rules.simulate(board, piece, destination), color):
                    return False
        return True

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        return Rules.is_in_check(board, color) and Rules.is_mate(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        return not Rules.is_in_check(board, color) and Rules.is_mate(board, color)

    @staticmethod
    def legal_moves(board: Board, color: Color) -> list[Move]:
        """Moves of *color* that do not leave its own king in check."""
        legal: list[Move] = []
        for piece in board.pieces(color):
            for destination in sorted(piece.candidate_destinations(board)):
                if not Rules.is_in_check(Rules.simulate(board, piece, destination), color):
                    legal.append(Move(piece.square, destination))
        return legal

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K."""
        white = board.material(Color.WHITE)
        black = board.material(Color.BLACK)
        if not white:
            return not black or black in _MINOR_PIECES
        return not black and white in _MINOR_PIECES

    @staticmethod
    def game_result(
        board: Board, side_to_move: Color
    ) -> tuple[GameResult, GameEndReason | None]:
        """Determine the result with *side_to_move* about to play."""
        if Rules.is_mate(board, side_to_move):
            if Rules.is_in_check(board, side_to_move):
                return GameResult.win_for(side_to_move.opposite), GameEndReason.CHECKMATE
            return GameResult.DRAW, GameEndReason.STALEMATE

        if Rules.is_insufficient_material(board):
            return GameResult.DRAW, GameEndReason.INSUFFICIENT_MATERIAL

        return GameResult.IN_PROGRESS, None
