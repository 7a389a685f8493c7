"""Core Pok Deng engine - 100% transport-agnostic."""

from core.cards import Card, Rank, Suit, FULL_DECK, remaining_deck
from core.hand import Hand, SpecialHand, hand_value, is_natural
from core.validation import InvalidBatchError, validate_batch

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "FULL_DECK",
    "remaining_deck",
    "Hand",
    "SpecialHand",
    "hand_value",
    "is_natural",
    "InvalidBatchError",
    "validate_batch",
]
