"""Move-choosing engine: one-ply heuristic scorer and shared models."""

from plychess.engine.scorer import MoveScorer, ScorerConfig
from plychess.engine.search import IEngine, ScoredMove, SearchResult

DefaultEngine: type[IEngine] = MoveScorer

__all__ = [
    "DefaultEngine",
    "IEngine",
    "MoveScorer",
    "ScoredMove",
    "ScorerConfig",
    "SearchResult",
]
