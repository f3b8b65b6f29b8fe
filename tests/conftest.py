"""Shared fixtures: a scripted random source for deterministic phase draws."""

from __future__ import annotations

from collections.abc import Iterable
from random import Random

import pytest


class ScriptedRandom(Random):
    """Random stand-in that replays fixed draws, then falls back to constants.

    ``random()`` serves movement draws and ``randrange()`` serves infection
    thresholds. The defaults never trigger movement and only a very dense
    neighborhood reaches the default threshold.
    """

    def __init__(
        self,
        uniforms: Iterable[float] = (),
        thresholds: Iterable[int] = (),
        uniform_default: float = 0.99,
        threshold_default: int = 24,
    ) -> None:
        super().__init__(0)
        self._uniforms = list(uniforms)
        self._thresholds = list(thresholds)
        self.uniform_default = uniform_default
        self.threshold_default = threshold_default
        self.uniform_calls = 0
        self.threshold_calls = 0

    def random(self) -> float:
        self.uniform_calls += 1
        if self._uniforms:
            return self._uniforms.pop(0)
        return self.uniform_default

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        self.threshold_calls += 1
        if self._thresholds:
            return self._thresholds.pop(0)
        return self.threshold_default


@pytest.fixture
def scripted_rng() -> type[ScriptedRandom]:
    """Return the :class:`ScriptedRandom` class for per-test construction."""
    return ScriptedRandom
