"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable

import pytest

from plychess.engine.scorer import MoveScorer


class ScriptedInput:
    """Stand-in for :func:`input` that replays canned lines.

    Raises ``EOFError`` once the script runs out, like a closed stdin.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._lines)


@pytest.fixture
def seeded_scorer() -> MoveScorer:
    return MoveScorer(rng=random.Random(1234))


@pytest.fixture
def scripted() -> Callable[[Iterable[str]], ScriptedInput]:
    return ScriptedInput
