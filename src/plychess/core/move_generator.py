"""Per-piece candidate destinations.

A candidate destination is a square a piece could move to on the given
board, without regard to whether the move leaves its own king in check.
Legality against check is decided by :mod:`plychess.core.rules`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from plychess.core.enums import Color, PieceType
from plychess.core.types import Square, offset_square

if TYPE_CHECKING:
    from plychess.core.board import Board
    from plychess.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Rank step of a pawn advance, indexed by Color.
PAWN_DIRECTION: tuple[int, int] = (1, -1)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        moves = (offset_square(sq, df, dr) for df, dr in offsets)
        targets.append(tuple(to_sq for to_sq in moves if to_sq is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            to_sq = offset_square(sq, df, dr)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = offset_square(to_sq, df, dr)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Piece-specific generators ---------------------------------------------


def _pawn_destinations(piece: Piece, board: Board) -> set[Square]:
    color = piece.color
    sq = piece.square
    step = PAWN_DIRECTION[int(color)]
    dest: set[Square] = set()

    one_step = offset_square(sq, 0, step)
    if one_step is None:
        return dest

    if board.is_empty(one_step):
        dest.add(one_step)
        two_step = offset_square(one_step, 0, step)
        if not piece.moved and two_step is not None and board.is_empty(two_step):
            dest.add(two_step)

    # Diagonals are capture-only.
    for df in (-1, 1):
        cap_sq = offset_square(sq, df, step)
        if cap_sq is None:
            continue
        target = board[cap_sq]
        if target is not None and target.color != color:
            dest.add(cap_sq)
    return dest


def _stepping(
    targets: tuple[tuple[Square, ...], ...],
) -> Callable[[Piece, Board], set[Square]]:
    def generate(piece: Piece, board: Board) -> set[Square]:
        dest: set[Square] = set()
        for to_sq in targets[piece.square]:
            target = board[to_sq]
            if target is None or target.color != piece.color:
                dest.add(to_sq)
        return dest

    return generate


def _sliding(
    rays: tuple[tuple[tuple[Square, ...], ...], ...],
) -> Callable[[Piece, Board], set[Square]]:
    def generate(piece: Piece, board: Board) -> set[Square]:
        dest: set[Square] = set()
        for ray in rays[piece.square]:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    dest.add(to_sq)
                    continue
                if target.color != piece.color:
                    dest.add(to_sq)
                break
        return dest

    return generate


_GENERATORS: dict[PieceType, Callable[[Piece, Board], set[Square]]] = {
    PieceType.PAWN: _pawn_destinations,
    PieceType.KNIGHT: _stepping(_KNIGHT_TARGETS),
    PieceType.BISHOP: _sliding(_BISHOP_RAYS),
    PieceType.ROOK: _sliding(_ROOK_RAYS),
    PieceType.QUEEN: _sliding(_QUEEN_RAYS),
    PieceType.KING: _stepping(_KING_TARGETS),
}


def candidate_destinations(piece: Piece, board: Board) -> set[Square]:
    """All squares *piece* could move to on *board*."""
    return _GENERATORS[piece.piece_type](piece, board)


def promotion_rank(color: Color) -> int:
    """Rank index on which a pawn of *color* must promote."""
    return 7 if color == Color.WHITE else 0
