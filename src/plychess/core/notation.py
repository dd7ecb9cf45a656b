"""Board placement text (the FEN piece-placement field) and move listing."""

from __future__ import annotations

from collections.abc import Iterable

from plychess.core.board import Board
from plychess.core.enums import Color, PieceType
from plychess.core.move import Move
from plychess.core.piece import Piece
from plychess.core.types import make_square, rank_of

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_PAWN_HOME_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


def board_from_fen(fen: str) -> Board:
    """Build a board from a FEN string or just its placement field.

    Only the placement is read. Pawns away from their home rank are marked as
    moved so they do not get a double step.
    """
    parts = fen.split()
    if not parts:
        raise ValueError("Empty FEN")
    placement = parts[0]

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Too many squares in FEN rank: {fen!r}")
                piece = Piece.from_char(ch, make_square(file, rank))
                if piece.piece_type == PieceType.PAWN:
                    piece.moved = rank_of(piece.square) != _PAWN_HOME_RANK[piece.color]
                board.place(piece)
                file += 1
        if file != 8:
            raise ValueError(f"FEN rank does not cover 8 squares: {fen!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Placement field for *board*, e.g. ``"4k3/8/8/8/8/8/8/4K3"``."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        run = 0
        row = ""
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                run += 1
                continue
            if run:
                row += str(run)
                run = 0
            row += str(piece)
        if run:
            row += str(run)
        rows.append(row)
    return "/".join(rows)


def format_moves(moves: Iterable[Move]) -> str:
    """Space separated long algebraic moves."""
    return " ".join(str(m) for m in moves)
