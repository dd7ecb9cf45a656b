"""Move value object and the typed result of executing a move."""

from __future__ import annotations

import re
from dataclasses import dataclass

from plychess.core.enums import MoveError
from plychess.core.types import Square, parse_square, square_name

_MOVE_TEXT = re.compile(r"[a-h][1-8][a-h][1-8]")


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move between two squares."""

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"


def is_move_text(text: str) -> bool:
    """Whether *text* has the shape of a move, e.g. ``"c2c4"``."""
    return _MOVE_TEXT.fullmatch(text.strip().lower()) is not None


def parse_move(text: str) -> Move:
    """Parse long algebraic move text.

    Raises:
        ValueError: If *text* is not two square names back to back.
    """
    cleaned = text.strip().lower()
    if not is_move_text(cleaned):
        raise ValueError(f"Invalid move text: {text!r}")
    return Move(parse_square(cleaned[0:2]), parse_square(cleaned[2:4]))


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Success flag plus the rejection reason and a user-facing message."""

    ok: bool
    reason: MoveError | None = None
    message: str = ""

    @classmethod
    def accepted(cls) -> MoveOutcome:
        return cls(True)

    @classmethod
    def rejected(cls, reason: MoveError, message: str) -> MoveOutcome:
        return cls(False, reason, message)

    def __bool__(self) -> bool:
        return self.ok
