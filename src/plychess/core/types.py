"""Squares as plain ints and the helpers that convert them.

Squares count along ranks from White's side: a1 is 0, h1 is 7, a2 is 8 and
h8 is 63, so ``file = sq % 8`` and ``rank = sq // 8``.

Off-board coordinates never become a :data:`Square`; helpers that can step
off the board return ``None`` instead.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63

FILES = "abcdefgh"
RANKS = "12345678"


def file_of(sq: Square) -> int:
    """0 for the a-file up to 7 for the h-file."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """0 for the first rank up to 7 for the eighth."""
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    """Square at *file* and *rank*, both 0-based; raises off the board."""
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"Coordinates off the board: ({file}, {rank})")
    return rank * 8 + file


def offset_square(sq: Square, df: int, dr: int) -> Square | None:
    """Square reached by stepping *df* files and *dr* ranks, or ``None``."""
    af = file_of(sq) + df
    ar = rank_of(sq) + dr
    if 0 <= af < 8 and 0 <= ar < 8:
        return ar * 8 + af
    return None


def square_name(sq: Square) -> str:
    """Algebraic name such as ``"e4"``."""
    if not is_valid_square(sq):
        raise ValueError(f"Invalid square index: {sq}")
    return FILES[file_of(sq)] + RANKS[rank_of(sq)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28. Upper-case files are accepted."""
    if len(name) != 2 or name[0].lower() not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(FILES.index(name[0].lower()), RANKS.index(name[1]))


def is_valid_square(sq: int) -> bool:
    """True for 0..63."""
    return 0 <= sq < 64


# -- Square names ------------------------------------------------------------

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
