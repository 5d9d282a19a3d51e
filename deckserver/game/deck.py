"""Deck entity."""
from dataclasses import dataclass, field, replace
from typing import Optional

from deckserver.game.cards import Card


@dataclass
class Deck:
    """A deck of cards; the front of ``cards`` is the top of the deck.

    ``cards`` left as ``None`` means the deck still has to be filled with
    the full canonical set. ``card_codes`` is a creation-time selection
    that the deck service consumes and clears.
    """
    deck_id: str = ""
    shuffled: bool = False
    remaining: int = 0
    cards: Optional[list[Card]] = None
    opened: bool = False
    card_codes: str = field(default="", repr=False)

    def copy(self) -> "Deck":
        """Independent copy; cards are immutable so a new list is enough."""
        return replace(
            self,
            cards=list(self.cards) if self.cards is not None else None,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "deck_id": self.deck_id,
            "shuffled": self.shuffled,
            "remaining": self.remaining,
            "cards": [card.to_dict() for card in self.cards or []],
        }
