"""Pydantic schemas for API requests and responses."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Literal

from core.cards import Card
from core.hand import Hand

SuitName = Literal["hearts", "diamonds", "clubs", "spades"]


class CardModel(BaseModel):
    """Card as sent on the wire: ``{"number": 12, "suite": "hearts"}``."""

    model_config = ConfigDict(populate_by_name=True)

    number: int = Field(
        ...,
        ge=1,
        le=13,
        validation_alias=AliasChoices("number", "rank"),
        description="1 = Ace, 2-10, 11 = Jack, 12 = Queen, 13 = King",
    )
    suite: SuitName = Field(
        ...,
        validation_alias=AliasChoices("suite", "suit"),
        description="Card suit",
    )

    @field_validator("suite", mode="before")
    @classmethod
    def _normalize_suite(cls, value: object) -> object:
        """Accept suit names in any case."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def to_card(self) -> Card:
        """Convert to a core card."""
        return Card.of(self.number, self.suite)

    @classmethod
    def from_card(cls, card: Card) -> "CardModel":
        """Build the wire form of a core card."""
        return cls(number=card.rank.value, suite=card.suit.value)


class PokDengRequest(BaseModel):
    """Batch of two-card hands to decide."""

    model_config = ConfigDict(populate_by_name=True)

    play_hands: list[list[CardModel]] = Field(
        ...,
        min_length=1,
        alias="playHands",
        description="Two-card hands, one decision is returned per hand",
    )
    game_type: Literal[1, 2] = Field(
        ...,
        alias="gameType",
        description="1 = basic strategy, 2 = deck-aware strategy",
    )

    @field_validator("play_hands")
    @classmethod
    def _two_cards_per_hand(cls, hands: list[list[CardModel]]) -> list[list[CardModel]]:
        """Reject hands that do not hold exactly two cards."""
        for index, hand in enumerate(hands):
            if len(hand) != 2:
                raise ValueError(f"hand {index} must have exactly 2 cards, got {len(hand)}")
        return hands

    def to_hands(self) -> list[Hand]:
        """Convert to core hands, preserving order."""
        return [Hand(tuple(card.to_card() for card in hand)) for hand in self.play_hands]


class PokDengResponse(BaseModel):
    """One decision per requested hand."""

    decisions: list[Literal["hit", "stand"]]


class HandEvaluationResponse(BaseModel):
    """Decision for one hand with the facts behind it."""

    cards: list[CardModel]
    value: int
    is_pok: bool
    special_draws: list[str]
    decision: Literal["hit", "stand"]
    reason: str
    chased: str | None = None


class PokDengExplainResponse(BaseModel):
    """Explained decisions for a batch."""

    model_config = ConfigDict(populate_by_name=True)

    game_type: int = Field(..., alias="gameType")
    strategy: str
    hands: list[HandEvaluationResponse]
