"""Hit/stand decisions for Pok Deng hands."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from core.cards import Card, FACE_RANKS, remaining_deck
from core.hand import Hand, SpecialHand
from core.strategy.rules import StrategyMode

# Two-card totals at or above this stand when nothing better is on offer.
STAND_THRESHOLD = 6


class Decision(Enum):
    """Recommendation for a two-card hand."""

    HIT = "hit"
    STAND = "stand"

    def __str__(self) -> str:
        return self.value


class DecisionReason(Enum):
    """Why a decision was made."""

    POK = auto()  # natural 8 or 9
    SPECIAL_DRAW = auto()  # chasing a special three-card hand
    AGGRESSIVE = auto()  # aggressive mode hits everything short of pok
    HIGH_VALUE = auto()  # value at or above the stand threshold
    LOW_VALUE = auto()  # value below the stand threshold

    def __str__(self) -> str:
        return self.name.replace("_", " ").lower()


@dataclass(frozen=True)
class HandEvaluation:
    """A decision together with the facts it was based on."""

    hand: Hand
    decision: Decision
    reason: DecisionReason
    special_draws: tuple[SpecialHand, ...] = ()
    chased: SpecialHand | None = None

    @property
    def value(self) -> int:
        """Return the evaluated hand value."""
        return self.hand.value

    @property
    def is_pok(self) -> bool:
        """Check if the evaluated hand was a natural."""
        return self.hand.is_pok


def _completes(special: SpecialHand, hand: Hand, card: Card) -> bool:
    """Check if ``card`` would turn ``hand`` into ``special``."""
    if special == SpecialHand.TONG:
        return card.rank == hand.cards[0].rank
    if special == SpecialHand.SAM_LUEANG:
        return card.rank in FACE_RANKS
    if special == SpecialHand.FLUSH:
        return card.suit == hand.cards[0].suit
    return card.rank == hand.straight_completion_rank


class PokDengStrategy:
    """
    Decide hit or stand for every hand in a batch.

    All modes stand on pok. BASIC hits any hand that draws toward a special
    hand. DECK_AWARE only chases a special hand when a card completing it is
    still in the deck, treating every card in the batch as seen. AGGRESSIVE
    hits everything else. Hands that chase nothing stand on 6 or more.
    """

    def __init__(self, mode: StrategyMode = StrategyMode.BASIC) -> None:
        """
        Initialize the strategy.

        Args:
            mode: Which decision rules to apply
        """
        self.mode = mode

    def decide(self, hands: Sequence[Hand]) -> list[Decision]:
        """Return one decision per hand, in input order."""
        return [evaluation.decision for evaluation in self.evaluate(hands)]

    def evaluate(self, hands: Sequence[Hand]) -> list[HandEvaluation]:
        """Return one evaluation per hand, in input order."""
        deck: frozenset[Card] | None = None
        if self.mode.uses_deck:
            deck = remaining_deck(card for hand in hands for card in hand)
        return [self._evaluate_hand(hand, deck) for hand in hands]

    def _evaluate_hand(self, hand: Hand, deck: frozenset[Card] | None) -> HandEvaluation:
        """Evaluate a single hand against an optional remaining deck."""
        if hand.is_pok:
            return HandEvaluation(hand, Decision.STAND, DecisionReason.POK)

        draws = tuple(hand.special_draws)

        if self.mode == StrategyMode.AGGRESSIVE:
            return HandEvaluation(hand, Decision.HIT, DecisionReason.AGGRESSIVE, draws)

        chased = self._find_reachable(hand, draws, deck)
        if chased is not None:
            return HandEvaluation(
                hand, Decision.HIT, DecisionReason.SPECIAL_DRAW, draws, chased
            )

        if hand.value >= STAND_THRESHOLD:
            return HandEvaluation(hand, Decision.STAND, DecisionReason.HIGH_VALUE, draws)
        return HandEvaluation(hand, Decision.HIT, DecisionReason.LOW_VALUE, draws)

    def _find_reachable(
        self,
        hand: Hand,
        draws: tuple[SpecialHand, ...],
        deck: frozenset[Card] | None,
    ) -> SpecialHand | None:
        """Return the first special hand still worth chasing, if any."""
        if not draws:
            return None
        if deck is None:
            return draws[0]
        for special in draws:
            if any(_completes(special, hand, card) for card in deck):
                return special
        return None


def pokdeng_decision(
    hands: Sequence[Hand],
    mode: StrategyMode = StrategyMode.BASIC,
) -> list[Decision]:
    """Decide hit or stand for a batch of hands."""
    return PokDengStrategy(mode).decide(hands)
