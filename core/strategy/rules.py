"""Pok Deng strategy modes."""

from enum import Enum


class StrategyMode(Enum):
    """
    Decision strategies selectable per request.

    BASIC and DECK_AWARE are the two game types offered over the wire.
    AGGRESSIVE is the stripped-down basic variant that hits every hand short
    of a natural; it replaces BASIC only when configured to.
    """

    BASIC = "basic"
    DECK_AWARE = "deck_aware"
    AGGRESSIVE = "aggressive"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def uses_deck(self) -> bool:
        """Check if this mode needs the remaining deck."""
        return self == StrategyMode.DECK_AWARE

    @classmethod
    def from_game_type(cls, game_type: int, aggressive_basic: bool = False) -> "StrategyMode":
        """
        Map a wire game type to a strategy mode.

        Args:
            game_type: 1 for the basic game, 2 for the deck-aware game
            aggressive_basic: Use the aggressive variant for game type 1

        Returns:
            The strategy mode to evaluate with
        """
        if game_type == 1:
            return cls.AGGRESSIVE if aggressive_basic else cls.BASIC
        if game_type == 2:
            return cls.DECK_AWARE
        raise ValueError(f"Unknown game type: {game_type}")
