"""Domain errors raised by the card and deck services."""
from typing import Optional


class DeckError(Exception):
    """Base class for card and deck domain errors."""

    message = "deck error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class InvalidCardCode(DeckError):
    """A card code could not be resolved."""


class InvalidRankCode(InvalidCardCode):
    message = "card code value is invalid"


class InvalidSuitCode(InvalidCardCode):
    message = "card code suit is invalid"


class InsufficientCards(DeckError):
    message = "there is not enough cards in the deck for the operation"


class DeckAlreadyOpened(DeckError):
    message = "not permitted on opened deck"


class InvalidDrawCount(DeckError):
    message = "draw count must not be negative"


class NotFound(DeckError):
    message = "resource not found"


class UUIDRequired(DeckError):
    message = "uuid is required"


class InvalidUUID(DeckError):
    message = "uuid is not valid"
