"""Named save games kept as JSON files in one directory.

Each game lives in ``<directory>/.<name>.json``; names are limited to
letters, digits and underscores.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from plychess.game.state import GameState, SnapshotError

_LOGGER = logging.getLogger(__name__)

_NAME = re.compile(r"[A-Za-z0-9_]+")
_FILE_NAME = re.compile(r"\.([A-Za-z0-9_]+)\.json")

DEFAULT_SAVE_DIR = Path(".chess")


class StorageError(Exception):
    """Base class for save/load failures."""


class InvalidSaveName(StorageError):
    pass


class SaveExists(StorageError):
    pass


class SaveNotFound(StorageError):
    pass


class CorruptSave(StorageError):
    """The file exists but does not hold a loadable game."""


@dataclass
class SavedGame:
    """A game plus which sides are played by humans."""

    state: GameState
    white_human: bool = True
    black_human: bool = True


def is_valid_name(name: str) -> bool:
    return _NAME.fullmatch(name) is not None


class SaveStore:
    """Directory-backed store of :class:`SavedGame` entries."""

    __slots__ = ("_directory",)

    def __init__(self, directory: Path | str = DEFAULT_SAVE_DIR) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, name: str) -> Path:
        if not is_valid_name(name):
            raise InvalidSaveName(
                f"Invalid name {name!r}. Use only letters, numbers, and underscore."
            )
        return self._directory / f".{name}.json"

    def names(self) -> list[str]:
        """Sorted names of all saved games."""
        if not self._directory.is_dir():
            return []
        found: list[str] = []
        for entry in self._directory.iterdir():
            match = _FILE_NAME.fullmatch(entry.name)
            if match and entry.is_file():
                found.append(match.group(1))
        return sorted(found)

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def save(self, name: str, game: SavedGame, *, overwrite: bool = False) -> Path:
        path = self.path_for(name)
        if path.exists() and not overwrite:
            raise SaveExists(f"Saved game {name!r} already exists.")

        payload = {
            "game": game.state.to_snapshot(),
            "players": {"white_human": game.white_human, "black_human": game.black_human},
        }
        self._directory.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        _LOGGER.info("Saved game %s to %s", name, path)
        return path

    def load(self, name: str) -> SavedGame:
        path = self.path_for(name)
        if not path.is_file():
            raise SaveNotFound(f"Game {name} not found.")

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
            state = GameState.from_snapshot(payload["game"])
            players = payload.get("players", {})
            if not isinstance(players, dict):
                raise TypeError(f"players entry is {type(players).__name__}, not an object")
            white_human = bool(players.get("white_human", True))
            black_human = bool(players.get("black_human", True))
        except (
            OSError,
            UnicodeDecodeError,
            json.JSONDecodeError,
            KeyError,
            TypeError,
            AttributeError,
            SnapshotError,
        ) as exc:
            _LOGGER.warning("Cannot load %s: %s", path, exc)
            raise CorruptSave(f"Saved game {name!r} is damaged: {exc}") from exc

        _LOGGER.info("Loaded game %s from %s", name, path)
        return SavedGame(state=state, white_human=white_human, black_human=black_human)
