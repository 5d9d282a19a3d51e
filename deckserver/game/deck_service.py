"""Deck lifecycle: creation, lookup, opening and drawing."""
import asyncio
import random
import re
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Optional

from deckserver.game.card_service import CardService
from deckserver.game.cards import Card
from deckserver.game.deck import Deck
from deckserver.game.errors import (
    DeckAlreadyOpened,
    InsufficientCards,
    InvalidDrawCount,
    InvalidUUID,
    UUIDRequired,
)
from deckserver.state.deck_store import DeckStore
from deckserver.utils.logger import get_logger

logger = get_logger(__name__)

DeckStep = Callable[[Deck], None]

_HYPHENATED_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
# Hyphenated, urn:uuid: prefixed, braced, or 32 bare hex digits
UUID_FORMS = re.compile(
    rf"(?:urn:uuid:)?{_HYPHENATED_UUID}|\{{{_HYPHENATED_UUID}\}}|[0-9a-f]{{32}}",
    re.IGNORECASE,
)


def run_steps(deck: Deck, *steps: DeckStep) -> None:
    """Apply steps in order; the first one to raise stops the chain."""
    for step in steps:
        step(deck)


class DeckValidator:
    """Fills in and checks decks before they reach the store."""

    def __init__(
        self,
        store: DeckStore,
        card_service: CardService,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.card_service = card_service
        self.rng = rng or random.Random()

    # Steps

    def set_id_if_unset(self, deck: Deck) -> None:
        if not deck.deck_id:
            deck.deck_id = str(uuid.uuid4())

    def require_id(self, deck: Deck) -> None:
        if not deck.deck_id:
            raise UUIDRequired()

    def check_id(self, deck: Deck) -> None:
        if not UUID_FORMS.fullmatch(deck.deck_id):
            raise InvalidUUID()

    def set_cards_by_codes(self, deck: Deck) -> None:
        if deck.card_codes:
            cards = self.card_service.by_codes_text(deck.card_codes)
            deck.card_codes = ""
            deck.cards = cards

    def set_cards_if_unset(self, deck: Deck) -> None:
        if deck.cards is None:
            deck.cards = self.card_service.all()

    def set_remaining(self, deck: Deck) -> None:
        deck.remaining = len(deck.cards or [])

    def shuffle(self, deck: Deck) -> None:
        if deck.shuffled:
            cards = list(deck.cards)
            self.rng.shuffle(cards)
            deck.cards = cards

    # Operations

    def create(self, deck: Deck) -> None:
        """Create a deck, filling in id, cards and remaining count.

        Raises:
            InvalidUUID: If a caller supplied id is malformed.
            InvalidCardCode: If ``card_codes`` holds an unknown code.
        """
        run_steps(
            deck,
            self.set_id_if_unset,
            self.check_id,
            self.set_cards_by_codes,
            self.set_cards_if_unset,
            self.set_remaining,
            self.shuffle,
        )
        self.store.store(deck)

    def update(self, deck: Deck) -> None:
        """Save a deck after recounting its cards.

        Raises:
            UUIDRequired: If the deck has no id.
        """
        run_steps(deck, self.require_id, self.set_remaining)
        self.store.update(deck)

    def by_id(self, deck_id: str) -> Deck:
        """Get a deck by id.

        Raises:
            UUIDRequired: If the id is empty.
            InvalidUUID: If the id is not a UUID.
            NotFound: If no deck has that id.
        """
        run_steps(Deck(deck_id=deck_id), self.require_id, self.check_id)
        return self.store.fetch_by_id(deck_id)


class DeckService:
    """Deck operations exposed to the HTTP layer."""

    def __init__(self, validator: DeckValidator):
        self.validator = validator
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}

    @asynccontextmanager
    async def lock(self, deck_id: str) -> AsyncIterator[None]:
        """Serialize read-modify-write sequences on one deck.

        A lock lives only while someone holds or waits on it.
        """
        lock = self._locks.setdefault(deck_id, asyncio.Lock())
        self._lock_users[deck_id] = self._lock_users.get(deck_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[deck_id] -= 1
            if not self._lock_users[deck_id]:
                del self._lock_users[deck_id]
                del self._locks[deck_id]

    def create(self, deck: Deck) -> None:
        self.validator.create(deck)
        logger.info(
            f"Created deck {deck.deck_id} "
            f"(shuffled={deck.shuffled}, remaining={deck.remaining})"
        )

    def update(self, deck: Deck) -> None:
        self.validator.update(deck)

    def by_id(self, deck_id: str) -> Deck:
        return self.validator.by_id(deck_id)

    def open(self, deck: Deck) -> None:
        """Mark the deck opened and save it. There is no way back."""
        deck.opened = True
        self.validator.update(deck)
        logger.info(f"Opened deck {deck.deck_id}")

    def draw(self, deck: Deck, count: int) -> list[Card]:
        """Take ``count`` cards off the top of the deck.

        Args:
            deck: Deck to draw from; mutated and saved on success.
            count: Number of cards to draw.

        Returns:
            The drawn cards, top card first.

        Raises:
            DeckAlreadyOpened: If the deck was opened before.
            InvalidDrawCount: If count is negative.
            InsufficientCards: If the deck holds fewer than count cards.
        """
        if deck.opened:
            raise DeckAlreadyOpened()
        if count < 0:
            raise InvalidDrawCount()
        if count > deck.remaining:
            raise InsufficientCards()

        drawn = deck.cards[:count]
        deck.cards = deck.cards[count:]
        self.validator.update(deck)
        logger.info(f"Drew {count} cards from deck {deck.deck_id} ({deck.remaining} left)")
        return drawn


def create_deck_service(
    store: Optional[DeckStore] = None,
    rng: Optional[random.Random] = None,
) -> DeckService:
    """Wire the default card and deck services around a store."""
    validator = DeckValidator(store or DeckStore(), CardService(), rng)
    return DeckService(validator)
