"""
Card naming and rendering utilities for the tarot library.
Turns card values into readable names and coloured terminal text.
"""

from enum import Enum
from typing import Iterable, Optional

from ..cards import Card, Extra, MajorArcana, MinorArcana, OrientedCard, Suit, is_oriented
from .colors import Colors


class NumberFormat(Enum):
    NUMERALS = 'numerals'
    ROMAN = 'roman'


# Card suit colors
SUIT_COLORS = {
    Suit.WANDS: Colors.RED,
    Suit.CUPS: Colors.BLUE,
    Suit.SWORDS: Colors.YELLOW,
    Suit.PENTACLES: Colors.GREEN,
    Suit.VOID: Colors.GREY,
}

_ROMAN_NUMERALS = [
    (1000, 'M'), (900, 'CM'), (500, 'D'), (400, 'CD'),
    (100, 'C'), (90, 'XC'), (50, 'L'), (40, 'XL'),
    (10, 'X'), (9, 'IX'), (5, 'V'), (4, 'IV'), (1, 'I'),
]


def to_roman(number: int) -> str:
    """Roman numerals for a non-negative integer. Zero has no numeral, so it stays 0."""
    if number < 0:
        raise ValueError(f"No Roman numeral for {number}")
    if number == 0:
        return '0'
    out = []
    for value, numeral in _ROMAN_NUMERALS:
        count, number = divmod(number, value)
        out.append(numeral * count)
    return ''.join(out)


class CardFormatter:
    """Formats cards as English names, e.g. 'the 5 of Swords' or '0, the Fool'."""

    def __init__(self, roman_numeral_major_arcana: bool = False,
                 minor_rank_format: NumberFormat = NumberFormat.NUMERALS):
        self.roman_numeral_major_arcana = roman_numeral_major_arcana
        self.minor_rank_format = minor_rank_format

    def format(self, card: Card, reversed: bool = False) -> str:
        if isinstance(card, OrientedCard):
            card, reversed = card.card, card.reversed or reversed
        if isinstance(card, MinorArcana):
            text = f"the {self._rank(card)} of {card.suit.label}"
        elif isinstance(card, MajorArcana):
            text = card.label
            if self.roman_numeral_major_arcana and card.number is not None:
                text = f"{to_roman(card.number)}, {text}"
        elif isinstance(card, Extra):
            text = card.label
        else:
            raise TypeError(f"Not a card: {card!r}")

        if reversed and is_oriented(card):
            text += ", reversed"
        return text

    def _rank(self, card: MinorArcana) -> str:
        number = card.rank.number
        if number is None:
            return card.rank.title
        if self.minor_rank_format is NumberFormat.ROMAN:
            return to_roman(number)
        return str(number)


def _color(card: Card) -> str:
    if isinstance(card, OrientedCard):
        card = card.card
    if isinstance(card, MinorArcana):
        return SUIT_COLORS.get(card.suit, Colors.WHITE)
    if isinstance(card, MajorArcana):
        return Colors.MAGENTA
    return Colors.WHITE if card is Extra.WHITE else Colors.DIM


def card_str(card: Card, reversed: bool = False, formatter: Optional[CardFormatter] = None) -> str:
    """Format a single card as coloured terminal text."""
    formatter = formatter or CardFormatter()
    return f"{Colors.BOLD}{_color(card)}{formatter.format(card, reversed)}{Colors.RESET}"


def cards_listing(cards: Iterable[Card], formatter: Optional[CardFormatter] = None) -> str:
    """Render cards as a numbered list, top of the pile first."""
    lines = [f"{i:>2}. {card_str(card, formatter=formatter)}" for i, card in enumerate(cards, 1)]
    return "\n".join(lines)
