"""Deterministic RNG utilities for reproducible pile shuffling."""

import hashlib
import logging
import random
from typing import Protocol, Union

from .settings import get_settings


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from [start, stop).

    random.Random satisfies this.
    """

    def randrange(self, start: int, stop: int) -> int:
        ...


def seeded_random(seed: Union[int, str], salt: str = "") -> random.Random:
    """Build a reproducible generator.

    A bare integer seed goes straight to random.Random. Anything else, or any
    seed with a salt, is hashed with SHA-256 and folded down to 31 bits so
    string seeds such as reading names map to a stable integer.
    """
    if isinstance(seed, int) and not salt:
        return random.Random(seed)

    digest = hashlib.sha256(f"{seed}{salt}".encode("utf-8")).digest()
    return random.Random(int.from_bytes(digest, "big") & 0x7FFFFFFF)


def default_random() -> random.Random:
    """Generator seeded from TAROT_SEED if configured, otherwise from the OS."""
    seed = get_settings()['seed']
    if seed is None:
        return random.Random()
    logging.debug(f"default_random: using configured seed {seed!r}")
    try:
        seed = int(seed)
    except ValueError:
        pass
    return seeded_random(seed)
