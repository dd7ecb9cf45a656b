"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from plychess.core import Board, Color, Rules

    board = Board.initial()
    for move in Rules.legal_moves(board, Color.WHITE):
        print(move)
"""

from plychess.core.board import Board, BoardIntegrityError
from plychess.core.enums import Color, GameEndReason, GameResult, MoveError, PieceType
from plychess.core.move import Move, MoveOutcome, is_move_text, parse_move
from plychess.core.move_generator import candidate_destinations
from plychess.core.notation import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    format_moves,
)
from plychess.core.piece import KING_VALUE, PIECE_VALUES, Piece, piece_type_from_letter
from plychess.core.rules import Rules
from plychess.core.types import (
    Square,
    file_of,
    make_square,
    offset_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameEndReason",
    "GameResult",
    "MoveError",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "offset_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "BoardIntegrityError",
    "KING_VALUE",
    "Move",
    "MoveOutcome",
    "PIECE_VALUES",
    "Piece",
    "Rules",
    "candidate_destinations",
    "is_move_text",
    "parse_move",
    "piece_type_from_letter",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "format_moves",
]
