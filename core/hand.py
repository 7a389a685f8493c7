"""Hand evaluation for Pok Deng."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from core.cards import Card, Rank

HAND_SIZE = 2
NATURAL_VALUES = frozenset({8, 9})


class SpecialHand(Enum):
    """Three-card combinations a two-card hand can draw toward."""

    TONG = "tong"  # three of a kind
    SAM_LUEANG = "sam_lueang"  # three face cards
    FLUSH = "flush"
    STRAIGHT = "straight"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


def hand_value(cards: Iterable[Card]) -> int:
    """
    Calculate the Pok Deng value of a set of cards.

    Only the last digit of the point total counts; tens and face cards are
    worth nothing.
    """
    return sum(card.points for card in cards) % 10


def is_natural(value: int) -> bool:
    """Check if a two-card value is a natural (Pok 8 or Pok 9)."""
    return value in NATURAL_VALUES


@dataclass(frozen=True, slots=True)
class Hand:
    """A two-card Pok Deng hand at decision time."""

    cards: tuple[Card, ...]

    def __post_init__(self) -> None:
        """Validate the hand size."""
        if len(self.cards) != HAND_SIZE:
            raise ValueError(
                f"A hand must have exactly {HAND_SIZE} cards, got {len(self.cards)}"
            )

    @classmethod
    def of(cls, *cards: Card) -> "Hand":
        """Create a hand from individual cards."""
        return cls(tuple(cards))

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Create a hand from a string like 'QS KH'."""
        return cls(tuple(Card.from_string(part) for part in s.split()))

    @property
    def value(self) -> int:
        """Return the hand value (0-9)."""
        return hand_value(self.cards)

    @property
    def is_pok(self) -> bool:
        """Check if the hand is a natural 8 or 9."""
        return is_natural(self.value)

    @property
    def ranks(self) -> tuple[int, int]:
        """Return the two rank numbers in ascending order."""
        low, high = sorted(card.rank.value for card in self.cards)
        return low, high

    @property
    def can_form_tong(self) -> bool:
        """Check if a third card could make three of a kind."""
        first = self.cards[0].rank
        return all(card.rank == first for card in self.cards)

    @property
    def can_form_sam_lueang(self) -> bool:
        """Check if a third card could make three face cards."""
        return all(card.is_face for card in self.cards)

    @property
    def can_form_flush(self) -> bool:
        """Check if a third card could make a three-card flush."""
        first = self.cards[0].suit
        return all(card.suit == first for card in self.cards)

    @property
    def can_form_straight(self) -> bool:
        """
        Check if a third card could make a straight.

        Ace only plays low, so A-2 draws to A-2-3 while A-K draws to nothing.
        """
        low, high = self.ranks
        if (low, high) == (1, 2):
            return True
        return high - low == 1 and low != 1

    @property
    def straight_completion_rank(self) -> Rank | None:
        """
        Return the rank that completes the straight draw, if there is one.

        A-2 needs a 3. Any other connected pair x, x+1 needs the card below
        it (x-1), or x+2 when there is no card below.
        """
        if not self.can_form_straight:
            return None
        low, _ = self.ranks
        if low == 1:
            return Rank.THREE
        needed = low - 1 if low > 1 else low + 2
        if 1 <= needed <= 13:
            return Rank(needed)
        return None

    @property
    def special_draws(self) -> list[SpecialHand]:
        """Return the special hands this hand draws toward, in priority order."""
        checks = (
            (SpecialHand.TONG, self.can_form_tong),
            (SpecialHand.SAM_LUEANG, self.can_form_sam_lueang),
            (SpecialHand.FLUSH, self.can_form_flush),
            (SpecialHand.STRAIGHT, self.can_form_straight),
        )
        return [special for special, holds in checks if holds]

    @property
    def has_special_draw(self) -> bool:
        """Check if any special hand is still possible."""
        return (
            self.can_form_tong
            or self.can_form_sam_lueang
            or self.can_form_flush
            or self.can_form_straight
        )

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_pok:
            value_str = f"(pok {self.value})"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({list(self.cards)!r}, value={self.value})"
