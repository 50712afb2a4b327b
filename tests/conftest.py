from collections import deque
from typing import Callable, Iterable, List, Tuple

import pytest

from tarot.cards import Extra, MajorArcana
from tarot.rng import seeded_random

SEED = 0x0102030405060708


class ScriptedRandom:
    """RandomSource helper which returns predetermined draws and records each request."""

    def __init__(self, draws: Iterable[int] = ()):
        self._queue = deque(draws)
        self.calls: List[Tuple[int, int]] = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        if not self._queue:
            raise RuntimeError("No more scripted draws available")
        return self._queue.popleft()


@pytest.fixture
def make_rng() -> Callable[[], object]:
    """Factory for freshly seeded generators that all start in the same state."""

    def _factory(seed=SEED):
        return seeded_random(seed)

    return _factory


@pytest.fixture
def scripted_random() -> Callable[..., ScriptedRandom]:
    def _factory(*draws: int) -> ScriptedRandom:
        return ScriptedRandom(draws)

    return _factory


@pytest.fixture
def four_majors():
    return [MajorArcana.FOOL, MajorArcana.MAGICIAN, MajorArcana.HIGH_PRIESTESS, MajorArcana.EMPRESS]


@pytest.fixture
def black_white():
    return [Extra.BLACK, Extra.WHITE]
