"""Pytest fixtures for Pok Deng tests."""

import os

# Tests hammer the API far faster than any real client.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from hypothesis import strategies as st

from core.cards import Card, Rank, Suit
from core.hand import Hand
from core.strategy import PokDengStrategy, StrategyMode


@pytest.fixture
def pok_nine_hand():
    """A natural nine (4-5)."""
    return Hand.of(Card(Rank.FOUR, Suit.HEARTS), Card(Rank.FIVE, Suit.DIAMONDS))


@pytest.fixture
def pok_eight_hand():
    """A natural eight (K-8)."""
    return Hand.of(Card(Rank.KING, Suit.CLUBS), Card(Rank.EIGHT, Suit.SPADES))


@pytest.fixture
def suited_connector_hand():
    """2-3 of hearts, drawing to both a flush and a straight."""
    return Hand.of(Card(Rank.TWO, Suit.HEARTS), Card(Rank.THREE, Suit.HEARTS))


@pytest.fixture
def face_pair_hand():
    """Q-K offsuit, drawing to Sam Lueang and a straight."""
    return Hand.of(Card(Rank.QUEEN, Suit.CLUBS), Card(Rank.KING, Suit.SPADES))


@pytest.fixture
def dead_seven_hand():
    """A 7 with nothing to draw to (10-7 offsuit)."""
    return Hand.of(Card(Rank.TEN, Suit.SPADES), Card(Rank.SEVEN, Suit.HEARTS))


@pytest.fixture
def dead_four_hand():
    """A 4 with nothing to draw to (J-4 offsuit)."""
    return Hand.of(Card(Rank.JACK, Suit.DIAMONDS), Card(Rank.FOUR, Suit.CLUBS))


@pytest.fixture
def basic_strategy():
    """Basic strategy."""
    return PokDengStrategy(StrategyMode.BASIC)


@pytest.fixture
def deck_aware_strategy():
    """Deck-aware strategy."""
    return PokDengStrategy(StrategyMode.DECK_AWARE)


@pytest.fixture
def aggressive_strategy():
    """Aggressive strategy."""
    return PokDengStrategy(StrategyMode.AGGRESSIVE)


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw):
    """Generate a random two-card hand with distinct cards."""
    cards = draw(st.lists(card_strategy(), min_size=2, max_size=2, unique=True))
    return Hand(tuple(cards))


@st.composite
def batch_strategy(draw, min_hands=1, max_hands=8):
    """Generate a batch of hands dealt from one deck."""
    num_hands = draw(st.integers(min_value=min_hands, max_value=max_hands))
    cards = draw(
        st.lists(
            card_strategy(),
            min_size=num_hands * 2,
            max_size=num_hands * 2,
            unique=True,
        )
    )
    return [Hand((cards[i], cards[i + 1])) for i in range(0, len(cards), 2)]
