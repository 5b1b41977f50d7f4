from __future__ import annotations

import random

import pytest

from sky_flyer import FlyerConfig


class ScriptedRandom(random.Random):
    """random() returns scripted values in order, then ``fallback``."""

    def __init__(self, values: list[float], fallback: float = 0.5) -> None:
        super().__init__(0)
        self._values = list(values)
        self._fallback = fallback

    def random(self) -> float:
        if self._values:
            return self._values.pop(0)
        return self._fallback


@pytest.fixture
def config() -> FlyerConfig:
    return FlyerConfig()


@pytest.fixture
def scripted():
    return ScriptedRandom
