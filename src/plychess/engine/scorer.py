"""One-ply heuristic move scorer.

Every candidate move of the side to play gets a score from a single look-ahead
board; the engine then picks uniformly among the moves sharing the best score.

Scoring, in order:

1. Start at 0. If the piece is attacked where it stands, add its value.
2. If the destination holds an opposing piece, add that piece's value.
3. On the look-ahead board:

   * own king in check: ``-KING_VALUE``;
   * opponent in check and mated: add ``KING_VALUE``;
   * opponent in check, moved piece attacked: ``capture - value``;
   * opponent in check otherwise: add ``KING_VALUE // 2``;
   * opponent stalemated: ``-KING_VALUE + 1``;
   * moved piece attacked: ``-value`` if it was attacked before the move,
     otherwise the running score minus its value.

4. A king move that still scores 0 scores -1.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from plychess.core.move import Move
from plychess.core.piece import KING_VALUE
from plychess.core.rules import Rules
from plychess.core.types import Square
from plychess.engine.search import IEngine, ScoredMove, SearchResult

if TYPE_CHECKING:
    from plychess.core.board import Board
    from plychess.core.enums import Color
    from plychess.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

SELF_CHECK_SCORE = -KING_VALUE
STALEMATE_SCORE = -KING_VALUE + 1
MATE_BONUS = KING_VALUE
CHECK_BONUS = KING_VALUE // 2
AIMLESS_KING_SCORE = -1


@dataclass(slots=True, frozen=True)
class ScorerConfig:
    """Scorer settings.

    Args:
        debug: Log every candidate score at DEBUG level.
    """

    debug: bool = False


class MoveScorer(IEngine):
    """Scores every candidate move one ply deep and picks among the best."""

    __slots__ = ("_config", "_rng")

    def __init__(
        self,
        config: ScorerConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or ScorerConfig()
        self._rng = rng or random.Random()

    @property
    def config(self) -> ScorerConfig:
        return self._config

    # -- Scoring ------------------------------------------------------------

    def score_move(self, board: Board, piece: Piece, destination: Square) -> int:
        """Heuristic score of moving *piece* to *destination* on *board*."""
        color = piece.color
        opponent = color.opposite
        score = 0

        attacked_before = Rules.is_attacked(board, piece.square, color)
        if attacked_before:
            score += piece.value

        capture_value = 0
        victim = board[destination]
        if victim is not None and victim.color == opponent:
            capture_value = victim.value
            score += capture_value

        lookahead = Rules.simulate(board, piece, destination)

        if Rules.is_in_check(lookahead, color):
            score = SELF_CHECK_SCORE
        elif Rules.is_in_check(lookahead, opponent):
            if Rules.is_mate(lookahead, opponent):
                score += MATE_BONUS
            elif Rules.is_attacked(lookahead, destination, color):
                score = capture_value - piece.value
            else:
                score += CHECK_BONUS
        elif Rules.is_mate(lookahead, opponent):
            score = STALEMATE_SCORE
        elif Rules.is_attacked(lookahead, destination, color):
            if attacked_before:
                score = -piece.value
            else:
                score -= piece.value

        if piece.is_king and score == 0:
            score = AIMLESS_KING_SCORE
        return score

    def score_moves(self, board: Board, color: Color) -> list[ScoredMove]:
        """Scores for every candidate move of *color*, in board order."""
        scored: list[ScoredMove] = []
        for piece in board.pieces(color):
            for destination in sorted(piece.candidate_destinations(board)):
                target = board[destination]
                if target is not None and target.is_king:
                    continue
                move = Move(piece.square, destination)
                score = self.score_move(board, piece, destination)
                if self._config.debug:
                    _LOGGER.debug("%s %s scores %d", piece, move, score)
                scored.append(ScoredMove(move, score))
        return scored

    def best_moves(self, board: Board, color: Color) -> tuple[int | None, list[Move]]:
        """Best score and every move that reaches it (``(None, [])`` if no moves)."""
        return self._select_best(self.score_moves(board, color))

    @staticmethod
    def _select_best(scored_moves: list[ScoredMove]) -> tuple[int | None, list[Move]]:
        best_score: int | None = None
        best: list[Move] = []
        for scored in scored_moves:
            if best_score is None or scored.score > best_score:
                best_score = scored.score
                best = [scored.move]
            elif scored.score == best_score:
                best.append(scored.move)
        return best_score, best

    # -- IEngine impl -------------------------------------------------------

    def search(self, board: Board, color: Color) -> SearchResult:
        scored = self.score_moves(board, color)
        best_score, best = self._select_best(scored)
        if not best:
            _LOGGER.debug("No candidate moves for %s", color)
            return SearchResult(None, None)

        choice = self._rng.choice(best)
        _LOGGER.debug(
            "%s picks %s (score %d, %d tied)", color, choice, best_score, len(best)
        )
        return SearchResult(choice, best_score, tuple(best), len(scored))
