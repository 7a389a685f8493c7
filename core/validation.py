"""Batch validation before evaluation."""

from collections import Counter
from collections.abc import Sequence

from core.cards import Card
from core.hand import Hand


class InvalidBatchError(ValueError):
    """Raised when a batch of hands cannot come from a single deck."""

    def __init__(self, message: str, duplicates: Sequence[Card] = ()) -> None:
        super().__init__(message)
        self.duplicates = tuple(duplicates)


def validate_batch(hands: Sequence[Hand], max_hands: int | None = None) -> None:
    """
    Check that a batch of hands is playable from one 52-card deck.

    Args:
        hands: Hands to check
        max_hands: Largest batch accepted, or None for no limit

    Raises:
        InvalidBatchError: If the batch is empty, too large, or repeats a card
    """
    if not hands:
        raise InvalidBatchError("At least one hand is required")
    if max_hands is not None and len(hands) > max_hands:
        raise InvalidBatchError(f"At most {max_hands} hands are allowed, got {len(hands)}")

    counts = Counter(card for hand in hands for card in hand)
    duplicates = [card for card, count in counts.items() if count > 1]
    if duplicates:
        listed = ", ".join(str(card) for card in duplicates)
        raise InvalidBatchError(f"Cards appear more than once: {listed}", duplicates)
