"""Board - piece placement, captures and move execution on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from plychess.core.enums import Color, MoveError, PieceType
from plychess.core.move import MoveOutcome
from plychess.core.move_generator import promotion_rank
from plychess.core.piece import Piece
from plychess.core.rules import Rules
from plychess.core.types import Square, is_valid_square, make_square, rank_of, square_name

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_PROMOTION_TYPES: frozenset[PieceType] = frozenset(
    (PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT)
)


class BoardIntegrityError(ValueError):
    """The board no longer has exactly one king per side."""


class Board:
    """Mutable 64-square board with captured lists and a king index.

    The king index is derived data: it is set when a king is placed and
    rebuilt from the grid on :meth:`copy`.
    """

    __slots__ = ("_squares", "_captured", "_kings")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> pieces captured *by* that color, in capture order.
        self._captured: tuple[list[Piece], list[Piece]] = ([], [])
        # [color] -> that color's king (None while setting up).
        self._kings: list[Piece | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __iter__(self) -> Iterator[Piece]:
        """Pieces in square order a1, b1, ..., h8."""
        return (p for p in self._squares if p is not None)

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def place(self, piece: Piece) -> None:
        """Put *piece* on its own square, which must be empty."""
        sq = piece.square
        if not is_valid_square(sq):
            raise ValueError(f"Square off the board: {sq}")
        if self._squares[sq] is not None:
            raise ValueError(f"Square {square_name(sq)} is already occupied")
        if piece.is_king:
            if self._kings[int(piece.color)] is not None:
                raise BoardIntegrityError(f"{piece.color.name} already has a king")
            self._kings[int(piece.color)] = piece
        self._squares[sq] = piece

    def add_captured(self, color: Color, piece: Piece) -> None:
        """Record *piece* as captured by *color* (used when restoring games)."""
        if piece.color == color:
            raise ValueError(f"{color.name} cannot capture its own {piece.name}")
        self._captured[int(color)].append(piece)

    def remove(self, sq: Square) -> Piece | None:
        """Take the piece off *sq*. Kings can never be removed."""
        piece = self._squares[sq]
        if piece is not None and piece.is_king:
            raise BoardIntegrityError("Kings cannot be removed from the board")
        self._squares[sq] = None
        return piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Piece]:
        """All of *color*'s pieces in square order."""
        return [p for p in self._squares if p is not None and p.color == color]

    def king(self, color: Color) -> Piece:
        king = self._kings[int(color)]
        if king is None:
            raise ValueError(f"No {color.name} king on board")
        return king

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        return self.king(color).square

    def captured(self, color: Color) -> list[Piece]:
        """Pieces captured by *color* (a copy)."""
        return list(self._captured[int(color)])

    def material(self, color: Color) -> list[PieceType]:
        """Kinds of *color*'s pieces other than the king, sorted."""
        return sorted(p.piece_type for p in self.pieces(color) if not p.is_king)

    # -- Move execution -----------------------------------------------------

    def execute_move(
        self,
        from_sq: Square,
        to_sq: Square,
        color: Color,
        *,
        simulation: bool = False,
    ) -> MoveOutcome:
        """Move the piece on *from_sq* to *to_sq* for *color* if legal.

        Checks run in order and the first failure is reported; a rejected
        move leaves the board untouched. Outside *simulation*, a king may not
        step into check. Other moves that expose the king are left to the
        caller (see :meth:`Rules.legal_moves`). A king is never captured,
        not even in *simulation*.
        """
        if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
            return MoveOutcome.rejected(MoveError.MALFORMED_INPUT, "Invalid move.")

        origin = square_name(from_sq)
        piece = self._squares[from_sq]
        if piece is None:
            return MoveOutcome.rejected(
                MoveError.NO_PIECE_AT_SOURCE, f"There is no piece at {origin}."
            )
        if piece.color != color:
            return MoveOutcome.rejected(
                MoveError.WRONG_OWNER, f"The {piece.name} at {origin} is not yours."
            )

        target = square_name(to_sq)
        if to_sq not in piece.candidate_destinations(self):
            return MoveOutcome.rejected(
                MoveError.ILLEGAL_DESTINATION,
                f"The {piece.name} at {origin} cannot legally move to {target}.",
            )

        victim = self._squares[to_sq]
        if victim is not None and victim.is_king:
            return MoveOutcome.rejected(
                MoveError.ILLEGAL_DESTINATION, f"The King at {target} cannot be captured."
            )

        if (
            piece.is_king
            and not simulation
            and Rules.is_in_check(Rules.simulate(self, piece, to_sq), color)
        ):
            return MoveOutcome.rejected(
                MoveError.SELF_CHECK, "You cannot move your King into check."
            )

        if victim is not None:
            self._captured[int(color)].append(victim)

        self._squares[from_sq] = None
        self._squares[to_sq] = piece
        piece.square = to_sq
        piece.moved = True
        return MoveOutcome.accepted()

    # -- Promotion ----------------------------------------------------------

    def promotion_square(self, color: Color) -> Square | None:
        """Square of a *color* pawn standing on its final rank, if any."""
        last_rank = promotion_rank(color)
        for piece in self.pieces(color):
            if piece.piece_type == PieceType.PAWN and rank_of(piece.square) == last_rank:
                return piece.square
        return None

    def promote(self, sq: Square, piece_type: PieceType) -> Piece:
        """Replace the pawn on *sq* with a new piece of *piece_type*."""
        if piece_type not in _PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {piece_type.name}")
        pawn = self._squares[sq]
        if pawn is None or pawn.piece_type != PieceType.PAWN:
            raise ValueError(f"No pawn to promote on {square_name(sq)}")
        new_piece = Piece(pawn.color, piece_type, sq, moved=True)
        self._squares[sq] = new_piece
        return new_piece

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Deep copy: every piece is duplicated and the king index rebuilt."""
        b = Board()
        b._squares = [p.copy() if p is not None else None for p in self._squares]
        b._captured = (
            [p.copy() for p in self._captured[0]],
            [p.copy() for p in self._captured[1]],
        )
        b._reindex_kings()
        return b

    def _reindex_kings(self) -> None:
        kings: list[Piece | None] = [None, None]
        for piece in self._squares:
            if piece is None or not piece.is_king:
                continue
            idx = int(piece.color)
            if kings[idx] is not None:
                raise BoardIntegrityError(f"{piece.color.name} has more than one king")
            kings[idx] = piece
        for color in Color:
            if kings[int(color)] is None:
                raise BoardIntegrityError(f"No {color.name} king on board")
        self._kings = kings

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b.place(Piece(Color.WHITE, PieceType.PAWN, make_square(f, 1)))
            b.place(Piece(Color.BLACK, PieceType.PAWN, make_square(f, 6)))
        for f, pt in enumerate(_BACK_RANK):
            b.place(Piece(Color.WHITE, pt, make_square(f, 0)))
            b.place(Piece(Color.BLACK, pt, make_square(f, 7)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares and self._captured == other._captured

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
