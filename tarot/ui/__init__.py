"""
UI module for the tarot library.
Provides card naming and terminal rendering for consistent presentation.
"""

from .colors import Colors
from .cards import CardFormatter, NumberFormat, card_str, cards_listing, to_roman, SUIT_COLORS

__all__ = ['Colors', 'CardFormatter', 'NumberFormat', 'card_str', 'cards_listing', 'to_roman', 'SUIT_COLORS']
