"""Card and deck representations - immutable value types."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Suit(Enum):
    """Card suits, valued by their wire names."""

    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @classmethod
    def parse(cls, name: str) -> "Suit":
        """Look up a suit by wire name, ignoring case and whitespace."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid suit: {name}") from None


class Rank(Enum):
    """Card ranks numbered 1-13 (Ace low)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 1 < self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def points(self) -> int:
        """Return the Pok Deng point value (tens and face cards = 0)."""
        if self.value >= 10:
            return 0
        return self.value

    @property
    def is_face(self) -> bool:
        """Check if this rank is a Jack, Queen or King."""
        return self in FACE_RANKS


FACE_RANKS = frozenset({Rank.JACK, Rank.QUEEN, Rank.KING})


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def points(self) -> int:
        """Return the Pok Deng point value."""
        return self.rank.points

    @property
    def is_face(self) -> bool:
        """Check if this card is a face card."""
        return self.rank.is_face

    @classmethod
    def of(cls, number: int, suit: str) -> "Card":
        """Create a card from its wire form, e.g. ``Card.of(12, "hearts")``."""
        try:
            rank = Rank(number)
        except ValueError:
            raise ValueError(f"Invalid rank: {number}") from None
        return cls(rank, Suit.parse(suit))

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {
            "A": Rank.ACE,
            "1": Rank.ACE,
            "2": Rank.TWO,
            "3": Rank.THREE,
            "4": Rank.FOUR,
            "5": Rank.FIVE,
            "6": Rank.SIX,
            "7": Rank.SEVEN,
            "8": Rank.EIGHT,
            "9": Rank.NINE,
            "10": Rank.TEN,
            "T": Rank.TEN,
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
        }

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


# The 52-card universe, built once per process.
FULL_DECK: tuple[Card, ...] = tuple(Card(rank, suit) for suit in Suit for rank in Rank)
_FULL_DECK_SET = frozenset(FULL_DECK)


def remaining_deck(seen: Iterable[Card]) -> frozenset[Card]:
    """
    Return the cards of a full deck that have not been seen.

    Args:
        seen: Cards already exposed on the table, in any order

    Returns:
        The unseen cards as an immutable set
    """
    return _FULL_DECK_SET.difference(seen)
