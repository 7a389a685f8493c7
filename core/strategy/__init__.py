"""Hit/stand strategies."""

from core.strategy.rules import StrategyMode
from core.strategy.decision import (
    Decision,
    DecisionReason,
    HandEvaluation,
    PokDengStrategy,
    pokdeng_decision,
)

__all__ = [
    "StrategyMode",
    "Decision",
    "DecisionReason",
    "HandEvaluation",
    "PokDengStrategy",
    "pokdeng_decision",
]
