"""
Card taxonomy for the tarot pile library.

Cards are plain immutable values: a MinorArcana (rank, suit) pair, a
MajorArcana trump, or one of the two Extra cards. The pile code never looks
inside them; it only needs the enumerations bundled in a CardSource.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union


class Suit(Enum):
    WANDS = 'Wands'
    CUPS = 'Cups'
    SWORDS = 'Swords'
    PENTACLES = 'Pentacles'
    VOID = '(VOID)'

    @classmethod
    def standard(cls) -> Tuple[Suit, ...]:
        return (cls.WANDS, cls.CUPS, cls.SWORDS, cls.PENTACLES)

    @property
    def label(self) -> str:
        return self.value


class Rank(Enum):
    """Minor arcana ranks. Values are (pip number or None, name)."""
    ACE = (None, 'Ace')
    TWO = (2, 'Two')
    THREE = (3, 'Three')
    FOUR = (4, 'Four')
    FIVE = (5, 'Five')
    SIX = (6, 'Six')
    SEVEN = (7, 'Seven')
    EIGHT = (8, 'Eight')
    NINE = (9, 'Nine')
    TEN = (10, 'Ten')
    PAGE = (None, 'Page')
    KNIGHT = (None, 'Knight')
    QUEEN = (None, 'Queen')
    KING = (None, 'King')
    # Variant-only ranks
    ZERO = (0, 'Zero')
    PROGENY = (None, 'Progeny')
    CAVALIER = (None, 'Cavalier')
    NINETY_NINE = (99, 'Ninety-Nine')

    def __init__(self, number: Optional[int], title: str):
        self.number = number
        self.title = title

    @classmethod
    def standard(cls) -> Tuple[Rank, ...]:
        return (
            cls.ACE, cls.TWO, cls.THREE, cls.FOUR, cls.FIVE, cls.SIX, cls.SEVEN,
            cls.EIGHT, cls.NINE, cls.TEN, cls.PAGE, cls.KNIGHT, cls.QUEEN, cls.KING,
        )


class MajorArcana(Enum):
    """Trumps. Values are (trump number or None, name, takes 'the')."""
    FOOL = (0, 'Fool', True)
    MAGICIAN = (1, 'Magician', True)
    HIGH_PRIESTESS = (2, 'High Priestess', True)
    EMPRESS = (3, 'Empress', True)
    EMPEROR = (4, 'Emperor', True)
    HIEROPHANT = (5, 'Hierophant', True)
    LOVERS = (6, 'Lovers', True)
    CHARIOT = (7, 'Chariot', True)
    STRENGTH = (8, 'Strength', False)
    HERMIT = (9, 'Hermit', True)
    WHEEL_OF_FORTUNE = (10, 'Wheel of Fortune', True)
    JUSTICE = (11, 'Justice', False)
    HANGED_MAN = (12, 'Hanged Man', True)
    DEATH = (13, 'Death', False)
    TEMPERANCE = (14, 'Temperance', False)
    DEVIL = (15, 'Devil', True)
    TOWER = (16, 'Tower', True)
    STAR = (17, 'Star', True)
    MOON = (18, 'Moon', True)
    SUN = (19, 'Sun', True)
    JUDGEMENT = (20, 'Judgement', False)
    WORLD = (21, 'World', True)
    # Silicon Dawn additions, unnumbered
    VULTURE_MOTHER = (None, 'Vulture Mother', True)
    MAYA = (None, 'Maya', False)
    AEON = (None, 'Aeon', True)
    CHAOS = (None, 'Chaos', False)
    ARTIST = (None, 'Artist', True)

    def __init__(self, number: Optional[int], title: str, article: bool):
        self.number = number
        self.title = title
        self.article = article

    @classmethod
    def standard(cls) -> Tuple[MajorArcana, ...]:
        return tuple(arc for arc in cls if arc.number is not None)

    @classmethod
    def variant(cls) -> Tuple[MajorArcana, ...]:
        return tuple(arc for arc in cls if arc.number is None)

    @property
    def label(self) -> str:
        return f"the {self.title}" if self.article else self.title


class Extra(Enum):
    WHITE = 'White'
    BLACK = 'Black'

    @property
    def label(self) -> str:
        return f"the {self.value} card"


@dataclass(frozen=True)
class MinorArcana:
    rank: Rank
    suit: Suit

    def __repr__(self) -> str:
        return f"MinorArcana({self.rank.name}, {self.suit.name})"


Card = Union[MinorArcana, MajorArcana, Extra]


@dataclass(frozen=True)
class CardSource:
    """The enumerations a pile builder draws from.

    Builders take one of these instead of reaching for module globals, so
    tests and callers can swap in a custom composition.
    """
    ranks: Tuple[Rank, ...]
    suits: Tuple[Suit, ...]
    major: Tuple[MajorArcana, ...]
    variant_major: Tuple[MajorArcana, ...]
    void_suit: Suit
    ninety_nine: Rank
    void_ranks: Tuple[Rank, ...]
    extras: Tuple[Extra, ...]
    minor: Callable[[Rank, Suit], Card] = MinorArcana


TAROT = CardSource(
    ranks=Rank.standard(),
    suits=Suit.standard(),
    major=MajorArcana.standard(),
    variant_major=MajorArcana.variant(),
    void_suit=Suit.VOID,
    ninety_nine=Rank.NINETY_NINE,
    void_ranks=(Rank.ZERO, Rank.PROGENY, Rank.CAVALIER, Rank.QUEEN, Rank.KING),
    extras=(Extra.WHITE, Extra.BLACK),
)


@dataclass(frozen=True)
class OrientedCard:
    """A card as it lies in the pile, upright or upside down."""
    card: Card
    reversed: bool = False

    def turned_over(self) -> OrientedCard:
        if not is_oriented(self.card):
            return self
        return OrientedCard(self.card, not self.reversed)


def is_oriented(card: Card) -> bool:
    """Whether a card can be drawn reversed. Void cards and extras cannot."""
    if isinstance(card, OrientedCard):
        card = card.card
    if isinstance(card, Extra):
        return False
    if isinstance(card, MinorArcana):
        return card.suit is not Suit.VOID
    return True
