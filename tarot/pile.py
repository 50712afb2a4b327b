"""
Piles of cards for the tarot library.

A pile is just an ordered list of cards with some dressing. It is distinct
from a deck, which would carry an owner and a name.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Iterable, Iterator, List, Sequence, Tuple

from .cards import TAROT, Card, CardSource, OrientedCard
from .rng import RandomSource

# Chunk sizes are drawn from [CHUNK_MIN, CHUNK_MAX)
CHUNK_MIN = 2
CHUNK_MAX = 4

_EXHAUSTED = object()


class ShuffleInvariantError(RuntimeError):
    """A cut left one half of the pile empty. Signals a generator or arithmetic bug."""


class Pile:
    """An ordered, exclusively owned sequence of cards."""

    def __init__(self, cards: Iterable[Any] = ()):
        self._cards: List[Any] = list(cards)

    @property
    def cards(self) -> Tuple[Any, ...]:
        """Current order, top of the pile first."""
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._cards))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pile):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"Pile({self._cards!r})"

    def copy(self) -> Pile:
        return Pile(self._cards)

    def shuffle(self, rng: RandomSource, reverse: bool = False) -> None:
        """Shuffle in place, more or less the way a person would riffle the pile.

        Exactly two draws are taken from `rng` (cut point, then chunk size), or
        none at all for piles with fewer than two cards. With `reverse` the
        right half is turned over before it falls, so those cards come out
        reversed; the draws are the same either way.
        """
        n = len(self._cards)
        if n < 2:
            logging.debug(f"shuffle: nothing to do for a pile of {n}")
            return

        low, high = cut_bounds(n)
        cut_point = rng.randrange(low, high)
        # How many cards fall at a time. A real riffle varies this per fall.
        chunk_size = rng.randrange(CHUNK_MIN, CHUNK_MAX)
        logging.debug(f"shuffle: n={n}, cut_point={cut_point}, chunk_size={chunk_size}, reverse={reverse}")

        self._cards = riffle(self._cards, cut_point, chunk_size, reverse_right=reverse)


# --- Builders ---

def minor_arcana(source: CardSource = TAROT) -> List[Card]:
    """Every rank of every suit."""
    return [source.minor(rank, suit) for rank, suit in itertools.product(source.ranks, source.suits)]


def ninety_nines(source: CardSource = TAROT) -> List[Card]:
    return [source.minor(source.ninety_nine, suit) for suit in source.suits]


def voids(source: CardSource = TAROT) -> List[Card]:
    return [source.minor(rank, source.void_suit) for rank in source.void_ranks]


def major_arcana(source: CardSource = TAROT, variant: bool = False) -> List[Card]:
    if variant:
        return list(itertools.chain(source.major, source.variant_major))
    return list(source.major)


def extras(source: CardSource = TAROT) -> List[Card]:
    return list(source.extras)


def build_pile(*parts: Iterable[Any]) -> Pile:
    """Build a pile from the concatenation of any number of card runs."""
    return Pile(itertools.chain.from_iterable(parts))


def standard_build(source: CardSource = TAROT) -> Pile:
    """The standard 56 minor and 22 major arcana. Order is fixed but not meaningful."""
    return build_pile(minor_arcana(source), major_arcana(source))


def extended_build(source: CardSource = TAROT) -> Pile:
    """The Silicon Dawn variant pile.

    Standard minor arcana, a ninety-nine for each suit, the void cards, the
    standard and variant major arcana, then the white and black cards.
    """
    return build_pile(
        minor_arcana(source),
        ninety_nines(source),
        voids(source),
        major_arcana(source, variant=True),
        extras(source),
    )


# --- Shuffling ---

def cut_bounds(n: int) -> Tuple[int, int]:
    """Half-open range the cut point is drawn from for a pile of n cards.

    Centred on the middle, within a sixth of the pile either way, and clamped
    so both halves keep at least one card when n >= 2.
    """
    return max(n // 2 - n // 6, 1), min(n // 2 + n // 6 + 1, n)


def chunked(cards: Sequence[Any], size: int) -> List[Sequence[Any]]:
    """Split into consecutive runs of `size`; the last run may be shorter."""
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [cards[i:i + size] for i in range(0, len(cards), size)]


def interleave(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Alternate items from first and second, then drain whichever is left."""
    for pair in itertools.zip_longest(first, second, fillvalue=_EXHAUSTED):
        for item in pair:
            if item is not _EXHAUSTED:
                yield item


def riffle(cards: Sequence[Any], cut_point: int, chunk_size: int,
           reverse_right: bool = False) -> List[Any]:
    """Riffle two halves of `cards` together.

    The left half is cards[:cut_point], the right half the rest. Each half is
    split into chunks of `chunk_size` and the chunks fall right, left, right,
    left, ... until one half runs out. With `reverse_right` the right half is
    turned over first, the way one hand's cards land upside down.
    """
    left = list(cards[:cut_point])
    right = list(cards[cut_point:])
    if not left or not right or cut_point < 0:
        logging.error(f"riffle: cut point {cut_point} leaves an empty half of {len(cards)} cards")
        raise ShuffleInvariantError(
            f"Cut point {cut_point} leaves an empty half in a pile of {len(cards)} cards"
        )
    if reverse_right:
        right = [turn_over(card) for card in right]
    falls = interleave(chunked(right, chunk_size), chunked(left, chunk_size))
    return list(itertools.chain.from_iterable(falls))


def turn_over(card: Any) -> OrientedCard:
    """Flip a card upside down. Plain cards are taken to be lying upright."""
    if not isinstance(card, OrientedCard):
        card = OrientedCard(card)
    return card.turned_over()


def orient(cards: Iterable[Any]) -> List[OrientedCard]:
    """Lay every card upright so reversals can be tracked."""
    return [card if isinstance(card, OrientedCard) else OrientedCard(card) for card in cards]


def shuffle(pile: Pile, rng: RandomSource, reverse: bool = False) -> None:
    pile.shuffle(rng, reverse=reverse)
