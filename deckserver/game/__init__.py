"""Card and deck domain module."""
from .cards import Card, Suit, Value, make_card, all_cards
from .card_service import CardService, CardValidator, StaticCardStorage
from .deck import Deck
from .deck_service import DeckService, DeckValidator, create_deck_service

__all__ = [
    "Card",
    "Suit",
    "Value",
    "make_card",
    "all_cards",
    "CardService",
    "CardValidator",
    "StaticCardStorage",
    "Deck",
    "DeckService",
    "DeckValidator",
    "create_deck_service",
]
