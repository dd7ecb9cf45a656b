"""Game management layer — controller, players, state machine, save games.

Quick start::

    from plychess.core import Color
    from plychess.engine import MoveScorer
    from plychess.game import AIPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=AIPlayer(Color.BLACK, MoveScorer()),
    )
"""

from plychess.game.controller import GameController, GameEvents
from plychess.game.interfaces import GamePhase, IPlayer
from plychess.game.player import AIPlayer, HumanPlayer
from plychess.game.state import GameState, MoveRecord, SnapshotError
from plychess.game.storage import (
    CorruptSave,
    InvalidSaveName,
    SavedGame,
    SaveExists,
    SaveNotFound,
    SaveStore,
    StorageError,
)

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
    "SnapshotError",
    # Persistence
    "CorruptSave",
    "InvalidSaveName",
    "SaveExists",
    "SaveNotFound",
    "SaveStore",
    "SavedGame",
    "StorageError",
]
