"""
Tarot pile library.

Builds standard and Silicon Dawn tarot piles and shuffles them with a
seeded, riffle-style shuffle.
"""

from .cards import TAROT, Card, CardSource, Extra, MajorArcana, MinorArcana, OrientedCard, Rank, Suit
from .pile import Pile, ShuffleInvariantError, build_pile, extended_build, orient, shuffle, standard_build
from .rng import RandomSource, default_random, seeded_random
from .version import VERSION

__all__ = [
    'TAROT', 'Card', 'CardSource', 'Extra', 'MajorArcana', 'MinorArcana', 'OrientedCard', 'Rank', 'Suit',
    'Pile', 'ShuffleInvariantError', 'build_pile', 'extended_build', 'orient', 'shuffle', 'standard_build',
    'RandomSource', 'default_random', 'seeded_random',
    'VERSION',
]
