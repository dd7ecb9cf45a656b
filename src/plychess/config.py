"""User-configurable settings and command-line parsing."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from plychess.game.storage import DEFAULT_SAVE_DIR

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Storage
    save_dir: Path = DEFAULT_SAVE_DIR

    # Engine
    seed: int | None = None  # fixed seed makes AI tie-breaks repeatable
    ai_debug: bool = False

    # Display
    unicode: bool = False

    # Logging
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> AppSettings:
        args = build_parser().parse_args(argv)
        return cls(
            save_dir=Path(args.save_dir),
            seed=args.seed,
            ai_debug=args.ai_debug,
            unicode=args.unicode,
            log_level=args.log_level,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plychess",
        description="Play chess in the terminal against a friend or the computer.",
    )
    parser.add_argument(
        "--save-dir",
        default=str(DEFAULT_SAVE_DIR),
        help="directory holding saved games (default: %(default)s)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the computer's tie-breaks"
    )
    parser.add_argument(
        "--ai-debug",
        action="store_true",
        help="log the score of every move the computer considers",
    )
    parser.add_argument(
        "--unicode", action="store_true", help="draw pieces with chess symbols"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=_LOG_LEVELS,
        help="logging verbosity (default: %(default)s)",
    )
    return parser
