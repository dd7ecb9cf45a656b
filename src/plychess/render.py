"""Plain-text board drawing for the console."""

from __future__ import annotations

from plychess.core.board import Board
from plychess.core.enums import Color
from plychess.core.piece import Piece
from plychess.core.types import make_square

COLUMNS = "     a   b   c   d   e   f   g   h"
DIVIDER = "   +---+---+---+---+---+---+---+---+"


def _glyph(piece: Piece, unicode: bool) -> str:
    return piece.symbol if unicode else str(piece)


def render_board(board: Board, unicode: bool = False) -> str:
    """Board with White at the bottom, e.g. ``" 1 | R | N | ..."``."""
    lines = ["", COLUMNS, DIVIDER]
    for rank in range(7, -1, -1):
        cells = []
        for file in range(8):
            piece = board[make_square(file, rank)]
            cells.append(f" {_glyph(piece, unicode)} " if piece else "   ")
        lines.append(f" {rank + 1} |{'|'.join(cells)}| {rank + 1}")
        lines.append(DIVIDER)
    lines.append(COLUMNS)
    lines.append("")
    return "\n".join(lines)


def render_captured(board: Board, unicode: bool = False) -> str:
    """One line per side listing what it has captured; empty if nothing."""
    lines = []
    for color in Color:
        taken = board.captured(color)
        if taken:
            glyphs = " ".join(_glyph(p, unicode) for p in taken)
            lines.append(f"{color.title} has captured: {glyphs}")
    return "\n".join(lines)
