"""Piece entity: side, kind, square and moved flag."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from plychess.core.enums import Color, PieceType
from plychess.core.move_generator import candidate_destinations
from plychess.core.types import Square

if TYPE_CHECKING:
    from plychess.core.board import Board

# Used only to size scores; never summed into material.
KING_VALUE = 1000

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: KING_VALUE,
}

PIECE_NAMES: dict[PieceType, str] = {
    PieceType.PAWN: "Pawn",
    PieceType.KNIGHT: "Knight",
    PieceType.BISHOP: "Bishop",
    PieceType.ROOK: "Rook",
    PieceType.QUEEN: "Queen",
    PieceType.KING: "King",
}

# Letter ↔ PieceType (FEN style: uppercase = white, lowercase = black)
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_LETTER_TYPES: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


def piece_type_from_letter(letter: str) -> PieceType:
    """Case-insensitive letter → :class:`PieceType`, e.g. ``'Q'`` → QUEEN."""
    try:
        return _LETTER_TYPES[letter.lower()]
    except KeyError:
        raise ValueError(f"Invalid piece letter: {letter!r}") from None


@dataclass(slots=True)
class Piece:
    """A piece standing on one board cell.

    A piece is owned by exactly one board; :meth:`Board.copy` duplicates
    every piece rather than sharing it.
    """

    color: Color
    piece_type: PieceType
    square: Square
    moved: bool = False

    @property
    def value(self) -> int:
        return PIECE_VALUES[self.piece_type]

    @property
    def name(self) -> str:
        return PIECE_NAMES[self.piece_type]

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    def candidate_destinations(self, board: Board) -> set[Square]:
        """Squares this piece could reach, ignoring its own king's safety."""
        return candidate_destinations(self, board)

    def copy(self) -> Piece:
        return Piece(self.color, self.piece_type, self.square, self.moved)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str, square: Square) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        if len(char) != 1 or char.lower() not in _LETTER_TYPES:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, _LETTER_TYPES[char.lower()], square)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
