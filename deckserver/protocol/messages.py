"""Pydantic schemas for the deck HTTP API."""
from pydantic import BaseModel, ConfigDict

from deckserver.game.cards import Card
from deckserver.game.deck import Deck


# ============= Requests =============

class CreateDeckRequest(BaseModel):
    """Body of POST /deck."""
    model_config = ConfigDict(strict=True)

    shuffled: bool = False


class DrawRequest(BaseModel):
    """Body of POST /deck/{deck_id}/draw."""
    model_config = ConfigDict(strict=True)

    count: int = 0


# ============= Responses =============

class CardResponse(BaseModel):
    """A single card."""
    value: str
    suit: str
    code: str

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(**card.to_dict())


class CreateDeckResponse(BaseModel):
    """Summary returned after creating a deck."""
    DeckID: str
    Shuffled: bool
    Remaining: int

    @classmethod
    def from_deck(cls, deck: Deck) -> "CreateDeckResponse":
        return cls(DeckID=deck.deck_id, Shuffled=deck.shuffled, Remaining=deck.remaining)


class DeckResponse(BaseModel):
    """Full deck view returned when a deck is opened."""
    deck_id: str
    shuffled: bool
    remaining: int
    cards: list[CardResponse]

    @classmethod
    def from_deck(cls, deck: Deck) -> "DeckResponse":
        return cls(**deck.to_dict())
